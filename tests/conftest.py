"""Shared pytest fixtures and graph builders for graphwalk tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Mapping, Sequence

import pytest

from graphwalk.domain.vertex import Vertex
from graphwalk.services.telemetry import _current_span, disable_telemetry


def build_graph(
    values: Mapping[str, int],
    edges: Mapping[str, Sequence[str]],
) -> dict[str, Vertex[int]]:
    """Create one vertex per name in *values*, then wire *edges* by name."""
    graph = {name: Vertex(value) for name, value in values.items()}
    for source, targets in edges.items():
        graph[source].neighbors.extend(graph[t] for t in targets)
    return graph


@pytest.fixture
def graph_builder() -> Callable[..., dict[str, Vertex[int]]]:
    return build_graph


@pytest.fixture
def diamond() -> dict[str, Vertex[int]]:
    """A=1 -> B=5, A -> C=2, B -> D=10, C -> D=10."""
    return build_graph(
        {"A": 1, "B": 5, "C": 2, "D": 10},
        {"A": ["B", "C"], "B": ["D"], "C": ["D"]},
    )


@pytest.fixture
def chain_up() -> dict[str, Vertex[int]]:
    """1 -> 2 -> 3 -> 4."""
    return build_graph(
        {"v1": 1, "v2": 2, "v3": 3, "v4": 4},
        {"v1": ["v2"], "v2": ["v3"], "v3": ["v4"]},
    )


@pytest.fixture
def cycle() -> dict[str, Vertex[int]]:
    """Three-vertex cycle with a tail: a -> b -> c -> a, c -> d."""
    return build_graph(
        {"a": 3, "b": 7, "c": 5, "d": 9},
        {"a": ["b"], "b": ["c"], "c": ["a", "d"]},
    )


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and ``graphwalk`` logger state after a test reconfigures them."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    gw = logging.getLogger("graphwalk")
    gw_handlers = gw.handlers[:]
    gw_level = gw.level
    gw_propagate = gw.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    gw.handlers = gw_handlers
    gw.setLevel(gw_level)
    gw.propagate = gw_propagate
