"""
Euler trail analysis.

``is_euler_feasible`` and ``parity_witness`` implement the degree-parity
check: no disconnected vertices and every degree even. ``euler_trail``
constructs an actual trail with Hierholzer's algorithm and is independent of
that check.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Set

from ..models import Edge, Vertex
from .utils import TraversalGuard

if TYPE_CHECKING:
    from ..policies import DirectionPolicy

logger = logging.getLogger(__name__)


def degree_map(vertices: Sequence[Vertex], direction: "DirectionPolicy") -> Dict[Vertex, int]:
    return {vertex: direction.degree(vertices, vertex) for vertex in vertices}


def is_euler_feasible(vertices: Sequence[Vertex], direction: "DirectionPolicy") -> bool:
    """True iff no vertex is disconnected and every degree is even."""
    return all(degree > 0 and degree % 2 == 0 for degree in degree_map(vertices, direction).values())


def parity_witness(vertices: Sequence[Vertex], direction: "DirectionPolicy") -> List:
    """
    Return the even-degree vertex values when the parity check holds.

    The list is a witness of the degree condition in vertex order, not a
    trail. It is empty when the check fails.
    """
    if not is_euler_feasible(vertices, direction):
        return []
    return [vertex.info for vertex in vertices]


def euler_trail(
    vertices: Sequence[Vertex], direction: "DirectionPolicy", guard: TraversalGuard
) -> List:
    """
    Build a trail that uses every edge exactly once.

    Args:
        vertices: Every vertex of the graph
        direction: Direction policy of the graph
        guard: Traversal limits

    Returns:
        List: Vertex values along the trail, or an empty list when the graph
            has no edges or no Euler trail exists
    """
    all_edges: Set[Edge] = {edge for vertex in vertices for edge in vertex.iter_edges()}
    if not all_edges:
        return []

    start = _trail_start(vertices, direction)
    if start is None:
        logger.debug("Degree conditions rule out an Euler trail")
        return []

    guard.start()
    edge_lists = {vertex: vertex.edges for vertex in vertices}
    used: Set[Edge] = set()
    cursor: Dict[Vertex, int] = {}
    stack = [start]
    trail: List = []
    while stack:
        guard.tick()
        current = stack[-1]
        edges = edge_lists[current]
        position = cursor.get(current, 0)
        while position < len(edges) and edges[position] in used:
            position += 1
        cursor[current] = position
        if position < len(edges):
            edge = edges[position]
            used.add(edge)
            stack.append(edge.opposite(current))
        else:
            trail.append(stack.pop().info)

    if len(used) != len(all_edges):
        # Edges live in more than one connected part
        return []
    trail.reverse()
    return trail


def _trail_start(vertices: Sequence[Vertex], direction: "DirectionPolicy") -> Optional[Vertex]:
    with_edges = [vertex for vertex in vertices if vertex.edge_count() > 0]
    if direction.directed:
        starts, ends = [], []
        for vertex in vertices:
            balance = direction.out_degree(vertex) - direction.in_degree(vertices, vertex)
            if balance == 1:
                starts.append(vertex)
            elif balance == -1:
                ends.append(vertex)
            elif balance != 0:
                return None
        if len(starts) != len(ends) or len(starts) > 1:
            return None
        return starts[0] if starts else with_edges[0]

    odd = [vertex for vertex in vertices if _loop_aware_degree(vertex) % 2 == 1]
    if len(odd) not in (0, 2):
        return None
    return odd[0] if odd else with_edges[0]


def _loop_aware_degree(vertex: Vertex) -> int:
    # A self-loop touches its vertex twice
    return sum(2 if edge.is_loop else 1 for edge in vertex.iter_edges())
