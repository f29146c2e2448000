"""graphwalk — depth-first traversal utilities over labeled directed graphs."""

from __future__ import annotations

from graphwalk.domain.vertex import Vertex, VertexLike
from graphwalk.services.errors import GraphwalkError, InvalidArgumentError
from graphwalk.services.traversal import (
    INT_MIN,
    GraphTraversal,
    all_odd,
    all_reachable_satisfy,
    collect_leaves,
    enumerate_reachable,
    has_strictly_increasing_path,
    is_odd,
    iter_reachable,
    max_reachable_value,
    visit_and_emit,
)

__all__ = [
    "INT_MIN",
    "GraphTraversal",
    "GraphwalkError",
    "InvalidArgumentError",
    "Vertex",
    "VertexLike",
    "all_odd",
    "all_reachable_satisfy",
    "collect_leaves",
    "enumerate_reachable",
    "has_strictly_increasing_path",
    "is_odd",
    "iter_reachable",
    "max_reachable_value",
    "visit_and_emit",
]
