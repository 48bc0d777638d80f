"""
Core graph data structure.

This module provides the ``Graph`` engine. A graph owns its vertices, links
them with edge records, and answers structural queries by vertex *value*.
Every algorithm is written once against the vertex/edge model; the two
behaviours that vary are supplied by composition:

- a ``DirectionPolicy`` (``DIRECTED`` or ``UNDIRECTED``) for the degree
  formula, adjacency symmetry, edge linking and cycle search;
- a ``Weighting`` (``UNWEIGHTED``, ``VERTEX``, ``EDGE`` or ``BOTH``) for the
  insertion contract and weight lookup.

Absent vertices and edges are reported with sentinel values (``-1``,
``None``, ``False`` or an empty collection); exceptions are reserved for
programming errors.
"""

import logging
from typing import (
    Any,
    Collection,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TypeVar,
)

from .config import GraphConfig
from .exceptions import WeightMismatchError
from .graph_operations import euler, matrices, paths
from .graph_operations.models import PathResult
from .graph_operations.utils import TraversalGuard
from .models import Vertex, validate_vertex_value
from .policies import DIRECTED, UNDIRECTED, DirectionPolicy, Weighting

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

NOT_FOUND = -1


class Graph(Generic[T]):
    """
    In-memory graph of uniquely valued vertices.

    The graph is not synchronised; wrap it in ``SynchronizedGraph`` to share
    it between threads.

    Attributes:
        guard (TraversalGuard): Limits applied to every traversal
    """

    def __init__(
        self,
        direction: DirectionPolicy = UNDIRECTED,
        weighting: Weighting = Weighting.UNWEIGHTED,
        guard: Optional[TraversalGuard] = None,
    ):
        """
        Initialize an empty graph.

        Args:
            direction (DirectionPolicy): Direction behaviour, fixed for life
            weighting (Weighting): Which records carry weights, fixed for life
            guard (Optional[TraversalGuard]): Traversal limits (default: none)
        """
        self._direction = direction
        self._weighting = weighting
        self._vertices: Dict[T, Vertex[T]] = {}
        self.guard = guard or TraversalGuard()

    @classmethod
    def directed_graph(
        cls, weighted_vertices: bool = False, weighted_edges: bool = False
    ) -> "Graph[T]":
        """Create an empty directed graph."""
        return cls(DIRECTED, Weighting(vertices=weighted_vertices, edges=weighted_edges))

    @classmethod
    def undirected_graph(
        cls, weighted_vertices: bool = False, weighted_edges: bool = False
    ) -> "Graph[T]":
        """Create an empty undirected graph."""
        return cls(UNDIRECTED, Weighting(vertices=weighted_vertices, edges=weighted_edges))

    @classmethod
    def from_config(cls, config: GraphConfig) -> "Graph[T]":
        """Create an empty graph described by a configuration."""
        config.apply_logging()
        return cls(config.direction, config.weighting, config.make_guard())

    @property
    def directed(self) -> bool:
        return self._direction.directed

    @property
    def weighted_vertex(self) -> bool:
        return self._weighting.vertices

    @property
    def weighted_edge(self) -> bool:
        return self._weighting.edges

    @property
    def direction(self) -> DirectionPolicy:
        return self._direction

    @property
    def weighting(self) -> Weighting:
        return self._weighting

    def _get_vertex(self, value: T) -> Optional[Vertex[T]]:
        validate_vertex_value(value)
        return self._vertices.get(value)

    def _vertex_list(self) -> List[Vertex[T]]:
        return list(self._vertices.values())

    def _remove(self, vertex: Vertex[T]) -> T:
        del self._vertices[vertex.info]
        for other in self._vertices.values():
            other.remove_edge(vertex)
        vertex.disconnect()
        logger.debug(f"Removed vertex {vertex.info!r}")
        return vertex.info

    def insert_vertex(self, value: T, weight: Optional[Any] = None) -> bool:
        """
        Add a vertex.

        Args:
            value: Identity value of the vertex
            weight: Vertex weight, required exactly when the graph is
                vertex-weighted

        Returns:
            bool: False if a vertex with this value already exists

        Raises:
            InvalidVertexError: If the value is None or unhashable
            WeightMismatchError: If the weight disagrees with the weighting
        """
        validate_vertex_value(value)
        self._weighting.check_vertex_weight(weight)
        if value in self._vertices:
            return False
        self._vertices[value] = Vertex(value, weight)
        logger.debug(f"Inserted vertex {value!r}")
        return True

    def insert_edge(self, tail: T, head: T, weight: Optional[Any] = None) -> bool:
        """
        Connect two existing vertices.

        Args:
            tail: Value of the vertex the edge leaves from
            head: Value of the vertex the edge arrives at
            weight: Edge weight, required exactly when the graph is
                edge-weighted

        Returns:
            bool: False if either vertex is missing or the edge already exists

        Raises:
            InvalidVertexError: If either value is None or unhashable
            WeightMismatchError: If the weight disagrees with the weighting
        """
        self._weighting.check_edge_weight(weight)
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            logger.warning(f"Cannot insert edge {tail!r} -> {head!r}: endpoint not in graph")
            return False
        inserted = self._direction.link(tail_vertex, head_vertex, weight)
        if inserted:
            logger.debug(f"Inserted edge {tail!r} -> {head!r}")
        return inserted

    def get_vertex_weight(self, value: T) -> Optional[Any]:
        """
        Get the weight of a vertex.

        Returns:
            The weight, or None if the vertex does not exist

        Raises:
            WeightMismatchError: If the graph is not vertex-weighted
        """
        if not self._weighting.vertices:
            raise WeightMismatchError("graph does not carry vertex weights")
        vertex = self._get_vertex(value)
        return vertex.weight if vertex is not None else None

    def get_edge_weight(self, tail: T, head: T) -> Optional[Any]:
        """
        Get the weight of the edge tail -> head.

        Returns:
            The weight, or None if the edge does not exist

        Raises:
            WeightMismatchError: If the graph is not edge-weighted
        """
        if not self._weighting.edges:
            raise WeightMismatchError("graph does not carry edge weights")
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return None
        edge = tail_vertex.get_edge(head_vertex)
        return edge.weight if edge is not None else None

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self, value: T) -> int:
        """Number of edges owned by a vertex, or -1 if it does not exist."""
        vertex = self._get_vertex(value)
        return vertex.edge_count() if vertex is not None else NOT_FOUND

    def total_edge_count(self) -> int:
        """Sum of owned edges over all vertices."""
        return sum(vertex.edge_count() for vertex in self._vertices.values())

    def get_vertices(self) -> List[T]:
        return list(self._vertices)

    def exist_vertex(self, value: T) -> bool:
        return self._get_vertex(value) is not None

    def exist_edge(self, tail: T, head: T) -> bool:
        return self.are_adjacent(tail, head)

    def degree(self, value: T) -> int:
        """
        Get the degree of a vertex.

        Directed graphs count incoming plus outgoing edges; undirected graphs
        count the vertex's own edges.

        Returns:
            int: The degree, or -1 if the vertex does not exist
        """
        vertex = self._get_vertex(value)
        if vertex is None:
            return NOT_FOUND
        return self._direction.degree(self._vertices.values(), vertex)

    def in_degree(self, value: T) -> int:
        vertex = self._get_vertex(value)
        if vertex is None:
            return NOT_FOUND
        return self._direction.in_degree(self._vertices.values(), vertex)

    def out_degree(self, value: T) -> int:
        vertex = self._get_vertex(value)
        if vertex is None:
            return NOT_FOUND
        return self._direction.out_degree(vertex)

    def are_adjacent(self, tail: T, head: T) -> bool:
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return False
        return self._direction.are_adjacent(tail_vertex, head_vertex)

    def get_adjacents(self, value: T) -> List[T]:
        """Values adjacent to a vertex, empty if the vertex does not exist."""
        vertex = self._get_vertex(value)
        if vertex is None:
            return []
        return [adjacent.info for adjacent in vertex.adjacents()]

    def vertex_with_most_adjacents(self) -> Optional[T]:
        """Value of the first vertex owning the most edges, None if empty."""
        best: Optional[Vertex[T]] = None
        for vertex in self._vertices.values():
            if best is None or vertex.edge_count() > best.edge_count():
                best = vertex
        return best.info if best is not None else None

    def remove_vertex(self, value: T) -> Optional[T]:
        """
        Remove a vertex and every edge that references it.

        Returns:
            The removed value, or None if the vertex does not exist
        """
        vertex = self._get_vertex(value)
        if vertex is None:
            return None
        return self._remove(vertex)

    def remove_edge(self, tail: T, head: T) -> bool:
        """Remove the edge tail -> head; False if it does not exist."""
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return False
        removed = self._direction.unlink(tail_vertex, head_vertex)
        if removed:
            logger.debug(f"Removed edge {tail!r} -> {head!r}")
        return removed

    def remove_vertex_cascade(self, value: T) -> Set[T]:
        """
        Remove a vertex together with everything reachable from it.

        The closure over outgoing edges is computed first, then every vertex
        in it is removed.

        Returns:
            Set[T]: The removed values, empty if the vertex does not exist
        """
        vertex = self._get_vertex(value)
        if vertex is None:
            return set()
        closure = paths.reachable_closure(vertex, self.guard)
        logger.debug(f"Cascade from {value!r} removes {len(closure)} vertices")
        return {self._remove(selected) for selected in closure}

    def exist_vertices_disconnected(self) -> bool:
        return any(self.degree(value) == 0 for value in self._vertices)

    def get_disconnected_vertices(self) -> List[T]:
        """Values of the vertices with degree 0, in vertex order."""
        return [value for value in self._vertices if self.degree(value) == 0]

    def remove_disconnected_vertices(self) -> List[T]:
        """Remove every vertex with degree 0 and return their values."""
        disconnected = self.get_disconnected_vertices()
        for value in disconnected:
            self._remove(self._vertices[value])
        return disconnected

    def clean_graph(self) -> None:
        """Remove every vertex and, with them, every edge."""
        for vertex in self._vertices.values():
            vertex.disconnect()
        self._vertices.clear()
        logger.debug("Graph cleaned")

    def exist_path(self, tail: T, head: T) -> bool:
        """
        Check whether head is reachable from tail in at least one hop.

        Returns False when either vertex is missing or tail equals head.
        """
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return False
        return paths.exist_path(tail_vertex, head_vertex, self.guard)

    def exist_path_with_length(self, tail: T, head: T, length: int) -> bool:
        """
        Check for a walk of exactly ``length`` hops from tail to head.

        Vertices may repeat along the walk. Returns False when either vertex
        is missing, tail equals head, or ``length`` is below 1.
        """
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return False
        return paths.exist_path_with_length(tail_vertex, head_vertex, length, self.guard)

    def find_path(self, tail: T, head: T) -> PathResult[T]:
        """
        Find a path by depth-first backtracking.

        The hop count and path of the first path found are returned; it is
        not guaranteed to be the shortest one.

        Returns:
            PathResult: distance -1 and an empty path when none exists
        """
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return PathResult.not_found()
        return paths.find_path(tail_vertex, head_vertex, self.guard)

    def shortest_path(self, tail: T, head: T) -> PathResult[T]:
        """
        Find a minimum path.

        Edge-weighted graphs minimise the summed edge weight (Dijkstra);
        other graphs minimise the hop count (breadth-first search).

        Returns:
            PathResult: distance -1 and an empty path when none exists

        Raises:
            WeightMismatchError: If an edge weight is negative or not numeric
        """
        tail_vertex = self._get_vertex(tail)
        head_vertex = self._get_vertex(head)
        if tail_vertex is None or head_vertex is None:
            return PathResult.not_found()
        return paths.shortest_path(
            tail_vertex, head_vertex, self.guard, weighted=self._weighting.edges
        )

    def is_cyclic(self) -> bool:
        return self._direction.is_cyclic(self._vertex_list(), self.guard)

    def is_euler_path(self) -> bool:
        """True iff no vertex is disconnected and every degree is even."""
        return euler.is_euler_feasible(self._vertex_list(), self._direction)

    def euler_path(self) -> List[T]:
        """
        Return the degree-parity witness of the Euler check.

        This is the ordered list of (even-degree) vertices when
        ``is_euler_path`` holds and an empty list otherwise. It is not a
        trail; see ``euler_trail``.
        """
        return euler.parity_witness(self._vertex_list(), self._direction)

    def euler_trail(self) -> List[T]:
        """Vertex values along a trail using every edge once, or [] if none exists."""
        return euler.euler_trail(self._vertex_list(), self._direction, self.guard)

    def adjacency_matrix(self) -> List[List[int]]:
        return matrices.adjacency_matrix(self._vertex_list(), self._direction)

    def incidence_matrix(self) -> List[List[int]]:
        return matrices.incidence_matrix(self._vertex_list())

    def remove(self, value: T) -> bool:
        return self.remove_vertex(value) is not None

    def remove_all(self, values: Iterable[T]) -> bool:
        """Remove the given values; True iff every one of them was removed."""
        wanted = list(values)
        removed = sum(1 for value in wanted if self.remove(value))
        return removed == len(wanted)

    def retain_all(self, values: Collection[T]) -> bool:
        """Keep only the given values; True iff exactly those remain."""
        keep = set(values)
        for value in [value for value in self._vertices if value not in keep]:
            self._remove(self._vertices[value])
        return self.vertex_count() == len(keep)

    def clear(self) -> None:
        self.clean_graph()

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, value: object) -> bool:
        if isinstance(value, Vertex):
            value = value.info
        return self.exist_vertex(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_vertices())

    def _signature(self) -> Dict[T, Any]:
        return {
            value: (
                vertex.weight,
                {edge.opposite(vertex).info: edge.weight for edge in vertex.iter_edges()},
            )
            for value, vertex in self._vertices.items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.directed == other.directed
            and self._weighting == other.weighting
            and self._signature() == other._signature()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(direction={self._direction!r}, weighting={self._weighting!r}, "
            f"vertices={self.vertex_count()}, edges={self.total_edge_count()})"
        )

    def __str__(self) -> str:
        summary = (
            f"{self._direction.name} {self._weighting.name} graph with "
            f"{self.vertex_count()} vertices and {self.total_edge_count()} edges"
        )
        busiest = self.vertex_with_most_adjacents()
        if busiest is None:
            return summary
        return f"{summary}; vertex with most adjacents: {busiest!r} ({self.edge_count(busiest)} edges)"
