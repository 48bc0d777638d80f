"""
Reachability and path search.

All searches run on explicit stacks or queues with a visited set, so their
memory use is bounded by the graph size rather than the interpreter's
recursion limit.
"""

import heapq
import logging
import math
from collections import deque
from itertools import count
from numbers import Real
from typing import Dict, List, Optional, Set, Tuple

from ..exceptions import WeightMismatchError
from ..models import Vertex
from ..numeric import IntegerNumber, accumulator_for
from .models import PathResult
from .utils import TraversalGuard

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def reachable_closure(start: Vertex, guard: TraversalGuard) -> List[Vertex]:
    """
    Collect every vertex reachable from ``start`` by outgoing edges.

    Args:
        start: First vertex of the closure
        guard: Traversal limits

    Returns:
        List[Vertex]: ``start`` followed by the reachable vertices in
            depth-first discovery order, each recorded once
    """
    guard.start()
    selected: List[Vertex] = []
    seen: Set[Vertex] = set()
    stack = [start]
    while stack:
        guard.tick()
        vertex = stack.pop()
        if vertex in seen:
            continue
        seen.add(vertex)
        selected.append(vertex)
        # Reversed so the first adjacent is expanded first
        stack.extend(reversed(vertex.adjacents()))
    return selected


def exist_path(tail: Vertex, head: Vertex, guard: TraversalGuard) -> bool:
    """Check whether ``head`` is reachable from ``tail`` in one or more hops."""
    if tail == head:
        return False

    guard.start()
    visited = {tail}
    stack = [tail]
    while stack:
        guard.tick()
        current = stack.pop()
        for neighbor in current.adjacents():
            if neighbor == head:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return False


def exist_path_with_length(tail: Vertex, head: Vertex, length: int, guard: TraversalGuard) -> bool:
    """
    Check for a walk of exactly ``length`` hops from ``tail`` to ``head``.

    Walks may revisit vertices. The search advances one frontier set per hop,
    which answers the same question as trying every walk but stays polynomial.

    Args:
        tail: Start vertex
        head: End vertex
        length: Exact number of hops
        guard: Traversal limits

    Returns:
        bool: True if such a walk exists; False for ``length < 1``
    """
    if length < 1 or tail == head:
        return False

    guard.start()
    frontier: Set[Vertex] = {tail}
    for _ in range(length - 1):
        reached: Set[Vertex] = set()
        for vertex in frontier:
            guard.tick()
            reached.update(vertex.adjacents())
        if not reached:
            return False
        frontier = reached
    return any(vertex.is_adjacent(head) for vertex in frontier)


def find_path(tail: Vertex, head: Vertex, guard: TraversalGuard) -> PathResult:
    """
    Depth-first backtracking search for a path from ``tail`` to ``head``.

    Neighbours are tried in adjacency order; a neighbour that leads nowhere is
    retracted from the path but stays visited. The first path found is
    returned together with its hop count, which is not necessarily the
    minimum. Use ``shortest_path`` for a guaranteed minimum.

    Args:
        tail: Start vertex
        head: End vertex
        guard: Traversal limits

    Returns:
        PathResult: distance 0 when tail == head, 1 when they are adjacent,
            the hop count of the found path otherwise, or -1 with an empty path
    """
    if tail == head:
        return PathResult([tail.info], IntegerNumber(0))
    if tail.is_adjacent(head):
        return PathResult([tail.info, head.info], IntegerNumber(1))

    guard.start()
    path = [tail.info]
    jumps = IntegerNumber(0)
    visited = {tail}
    stack = [iter(tail.adjacents())]
    while stack:
        guard.tick()
        neighbor = next(stack[-1], _EXHAUSTED)
        if neighbor is _EXHAUSTED:
            stack.pop()
            if len(path) > 1:
                path.pop()
                jumps.decrement()
            continue
        if neighbor in visited:
            continue

        visited.add(neighbor)
        path.append(neighbor.info)
        jumps.increment()
        if neighbor.is_adjacent(head):
            path.append(head.info)
            jumps.increment()
            return PathResult(path, jumps)
        stack.append(iter(neighbor.adjacents()))

    return PathResult.not_found()


def shortest_path(
    tail: Vertex, head: Vertex, guard: TraversalGuard, weighted: bool = False
) -> PathResult:
    """
    Find a minimum path from ``tail`` to ``head``.

    Args:
        tail: Start vertex
        head: End vertex
        guard: Traversal limits
        weighted: Minimise summed edge weights (Dijkstra) instead of hops (BFS)

    Returns:
        PathResult: The minimum path, or distance -1 with an empty path

    Raises:
        WeightMismatchError: If ``weighted`` and an edge weight is not a
            non-negative number
    """
    if tail == head:
        return PathResult([tail.info], accumulator_for(0))
    if weighted:
        return _dijkstra(tail, head, guard)
    return _breadth_first(tail, head, guard)


def _breadth_first(tail: Vertex, head: Vertex, guard: TraversalGuard) -> PathResult:
    guard.start()
    parents: Dict[Vertex, Optional[Vertex]] = {tail: None}
    queue = deque([tail])
    while queue:
        guard.tick()
        current = queue.popleft()
        for neighbor in current.adjacents():
            if neighbor in parents:
                continue
            parents[neighbor] = current
            if neighbor == head:
                path = _unwind(parents, head)
                return PathResult(path, IntegerNumber(len(path) - 1))
            queue.append(neighbor)
    return PathResult.not_found()


def _dijkstra(tail: Vertex, head: Vertex, guard: TraversalGuard) -> PathResult:
    logger.debug(f"Starting Dijkstra's algorithm from {tail.info!r} to {head.info!r}")
    guard.start()
    tie_breaker = count()
    distances: Dict[Vertex, Real] = {tail: 0}
    parents: Dict[Vertex, Optional[Vertex]] = {tail: None}
    settled: Set[Vertex] = set()
    queue: List[Tuple[Real, int, Vertex]] = [(0, next(tie_breaker), tail)]

    while queue:
        current_dist, _, current = heapq.heappop(queue)
        if current in settled:
            continue
        guard.tick()
        settled.add(current)
        if current == head:
            return PathResult(_unwind(parents, head), accumulator_for(current_dist))

        for edge in current.iter_edges():
            neighbor = edge.opposite(current)
            if neighbor in settled:
                continue
            new_dist = current_dist + _edge_cost(edge.weight)
            if math.isinf(new_dist):
                raise WeightMismatchError("path cost overflow")
            if neighbor not in distances or new_dist < distances[neighbor]:
                distances[neighbor] = new_dist
                parents[neighbor] = current
                heapq.heappush(queue, (new_dist, next(tie_breaker), neighbor))

    return PathResult.not_found()


def _edge_cost(weight) -> Real:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise WeightMismatchError(f"edge weight {weight!r} is not numeric")
    if math.isnan(weight) or math.isinf(weight):
        raise WeightMismatchError(f"edge weight {weight!r} must be finite")
    if weight < 0:
        raise WeightMismatchError(f"negative edge weight {weight!r} found")
    return weight


def _unwind(parents: Dict[Vertex, Optional[Vertex]], head: Vertex) -> list:
    path = []
    current: Optional[Vertex] = head
    while current is not None:
        path.append(current.info)
        current = parents[current]
    path.reverse()
    return path
