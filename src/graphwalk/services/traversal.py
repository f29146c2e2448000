"""GraphTraversal — depth-first algorithms over possibly-cyclic vertex graphs.

Every operation is the same DFS skeleton with a different fold:

- a visited set, fresh per call, keyed by ``id(vertex)`` so the walk never
  depends on how a vertex type defines equality;
- an explicit LIFO work stack instead of recursion, so deep chains cannot
  exhaust the interpreter stack;
- neighbors pushed in reverse, giving the same pre-order as a recursive
  walk over the neighbor list.

``None`` entries in a neighbor list are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from graphwalk.domain.vertex import VertexLike
from graphwalk.services.errors import InvalidArgumentError
from graphwalk.services.telemetry import get_current_span, traced

logger = logging.getLogger(__name__)

# Sentinel returned by max_reachable_value() for an absent start vertex:
# negative infinity of the 32-bit integer domain.
INT_MIN = -(2**31)

type EdgeFilter = Callable[[VertexLike, VertexLike], bool]


def is_odd(value: int) -> bool:
    return value % 2 != 0


def _strictly_increasing(current: VertexLike, neighbor: VertexLike) -> bool:
    return neighbor.value > current.value


def _annotate(**fields: Any) -> None:
    span = get_current_span()
    if span is not None:
        for key, value in fields.items():
            span.annotate(key, value)


class GraphTraversal:
    """Stateless DFS operations. Safe to share; no state survives a call."""

    # ------------------------------------------------------------------
    # Primitive
    # ------------------------------------------------------------------

    @staticmethod
    def iter_reachable(
        start: VertexLike | None,
        follow: EdgeFilter | None = None,
    ) -> Iterator[VertexLike]:
        """Yield every vertex reachable from *start* once, in DFS pre-order.

        A vertex is marked visited when it is yielded, before any of its
        neighbors are descended into. Not traced: a lazy generator has no
        meaningful duration, so spans belong to the operations built on it.

        Args:
            start: Root of the walk; ``None`` yields nothing.
            follow: Optional edge filter called as ``follow(current, neighbor)``.
                Edges for which it returns False are pruned.
        """
        if start is None:
            return

        visited: dict[int, VertexLike] = {}
        stack: list[VertexLike] = [start]
        while stack:
            vertex = stack.pop()
            if id(vertex) in visited:
                continue
            visited[id(vertex)] = vertex
            yield vertex

            successors = [
                neighbor
                for neighbor in vertex.neighbors
                if neighbor is not None
                and id(neighbor) not in visited
                and (follow is None or follow(vertex, neighbor))
            ]
            stack.extend(reversed(successors))

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    @traced
    def enumerate_reachable(self, start: VertexLike | None) -> set[VertexLike]:
        """Return all vertices reachable from *start*, *start* included.

        An absent start gives the empty set. Vertices must hash by identity
        (see :class:`~graphwalk.domain.vertex.VertexLike`).
        """
        walked = list(self.iter_reachable(start))
        _annotate(visited=len(walked))
        return set(walked)

    @traced
    def collect_leaves(self, start: VertexLike | None) -> set[VertexLike]:
        """Return the reachable vertices that have no outgoing neighbors.

        Vertices must hash by identity; equal-valued leaves are all returned.
        """
        leaves: set[VertexLike] = set()
        visited = 0
        for vertex in self.iter_reachable(start):
            visited += 1
            if not vertex.neighbors:
                leaves.add(vertex)
        _annotate(visited=visited, leaves=len(leaves))
        return leaves

    @traced
    def visit_and_emit(
        self,
        start: VertexLike | None,
        emit: Callable[[Any], object] = print,
    ) -> None:
        """Pass each reachable vertex's value to *emit* exactly once.

        Values arrive in DFS visitation order. The default prints one value
        per line.
        """
        visited = 0
        for vertex in self.iter_reachable(start):
            visited += 1
            emit(vertex.value)
        _annotate(visited=visited)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    @traced
    def max_reachable_value(self, start: VertexLike | None) -> int:
        """Return the largest value among vertices reachable from *start*.

        Each vertex's value is folded in once, at its first visit. Reaching
        an already-visited vertex again leaves the running maximum untouched,
        so graphs holding only negative values report their true maximum.

        Returns:
            The maximum value, or :data:`INT_MIN` when *start* is None.
        """
        if start is None:
            return INT_MIN

        best = start.value
        visited = 0
        for vertex in self.iter_reachable(start):
            visited += 1
            if vertex.value > best:
                best = vertex.value
        _annotate(visited=visited)
        return best

    @traced
    def all_reachable_satisfy(
        self,
        start: VertexLike | None,
        predicate: Callable[[Any], bool] = is_odd,
    ) -> bool:
        """Return whether every reachable value satisfies *predicate*.

        Stops at the first violation. Vacuously True for an absent start.
        """
        visited = 0
        for vertex in self.iter_reachable(start):
            visited += 1
            if not predicate(vertex.value):
                _annotate(visited=visited, violation=vertex.value)
                return False
        _annotate(visited=visited)
        return True

    def all_odd(self, start: VertexLike | None) -> bool:
        """Return whether every reachable vertex holds an odd value."""
        return self.all_reachable_satisfy(start, is_odd)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @traced
    def has_strictly_increasing_path(
        self,
        start: VertexLike | None,
        end: VertexLike | None,
    ) -> bool:
        """Return whether a path from *start* to *end* strictly increases.

        Each step must land on a vertex whose value is greater than the
        previous one. Only such edges are followed; ``start is end`` is a
        zero-length path and succeeds.

        Raises:
            InvalidArgumentError: If *start* or *end* is None.
        """
        for name, endpoint in (("start", start), ("end", end)):
            if endpoint is None:
                logger.debug("increasing_path.rejected: argument=%s", name)
                raise InvalidArgumentError(name, f"Path endpoint '{name}' must not be None")

        visited = 0
        for vertex in self.iter_reachable(start, follow=_strictly_increasing):
            visited += 1
            if vertex is end:
                _annotate(visited=visited, found=True)
                return True
        _annotate(visited=visited, found=False)
        return False


_default = GraphTraversal()

iter_reachable = GraphTraversal.iter_reachable
enumerate_reachable = _default.enumerate_reachable
collect_leaves = _default.collect_leaves
visit_and_emit = _default.visit_and_emit
max_reachable_value = _default.max_reachable_value
all_reachable_satisfy = _default.all_reachable_satisfy
all_odd = _default.all_odd
has_strictly_increasing_path = _default.has_strictly_increasing_path
