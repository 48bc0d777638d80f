"""Cycle detection for directed and undirected graphs."""

from typing import Iterable, List, Optional, Set, Tuple

from ..models import Vertex
from .utils import TraversalGuard


def has_cycle_directed(vertices: Iterable[Vertex], guard: TraversalGuard) -> bool:
    """
    Detect a directed cycle.

    Each vertex in turn is used as a start, and its adjacency closure is
    searched for a walk back to that start. A self-loop counts as a cycle.

    Args:
        vertices: Every vertex of the graph
        guard: Traversal limits

    Returns:
        bool: True as soon as one start vertex can reach itself
    """
    guard.start()
    for start in vertices:
        visited: Set[Vertex] = set()
        stack = start.adjacents()
        while stack:
            guard.tick()
            current = stack.pop()
            if current == start:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(current.adjacents())
    return False


def has_cycle_undirected(vertices: Iterable[Vertex], guard: TraversalGuard) -> bool:
    """
    Detect an undirected cycle.

    Depth-first search that remembers the parent each vertex was reached
    from. Stepping straight back to the parent is not a cycle; reaching any
    other visited vertex is.

    Args:
        vertices: Every vertex of the graph
        guard: Traversal limits

    Returns:
        bool: True if any connected part of the graph contains a cycle
    """
    guard.start()
    visited: Set[Vertex] = set()
    for root in vertices:
        if root in visited:
            continue
        stack: List[Tuple[Vertex, Optional[Vertex]]] = [(root, None)]
        while stack:
            guard.tick()
            current, parent = stack.pop()
            if current in visited:
                # Discovered twice through different tree edges
                return True
            visited.add(current)
            for neighbor in current.adjacents():
                if neighbor == parent:
                    continue
                if neighbor in visited:
                    return True
                stack.append((neighbor, current))
    return False
