"""Vertex — a labeled graph node with an outgoing neighbor list.

Vertices are identified by reference, never by value: two vertices holding
equal values are distinct nodes. The traversal services only read ``value``
and ``neighbors``; wiring the graph is the caller's job.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class VertexLike(Protocol):
    """Structural contract every traversal operation accepts.

    The walk itself tracks vertices by ``id()``. Operations that return a
    ``set`` of vertices (``enumerate_reachable``, ``collect_leaves``) also
    need the type to hash by identity, as ``object`` and :class:`Vertex` do;
    a type that compares by value would merge distinct vertices there.
    """

    @property
    def value(self) -> Any: ...

    @property
    def neighbors(self) -> Collection[Any]: ...


@dataclass(eq=False)
class Vertex[T]:
    """Graph node carrying one value and its outgoing edges.

    ``eq=False`` keeps the default identity-based ``__eq__``/``__hash__``,
    so vertices can sit in sets even when their values collide.

    Attributes:
        value: Payload of the node.
        neighbors: Targets of the outgoing edges. Duplicates, self-loops
            and cycles are allowed.
    """

    value: T
    neighbors: list[Vertex[T]] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Vertex({self.value!r}, neighbors={len(self.neighbors)})"
