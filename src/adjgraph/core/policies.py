"""
Direction and weighting policies.

A graph is composed from one ``DirectionPolicy`` and one ``Weighting``
instead of being specialised by subclassing. The direction policy owns every
behaviour that differs between directed and undirected graphs (degree
formula, adjacency symmetry, edge linking and cycle search); the weighting
only governs which weights the insertion contract accepts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Optional

from .exceptions import WeightMismatchError
from .graph_operations.cycles import has_cycle_directed, has_cycle_undirected
from .graph_operations.utils import TraversalGuard
from .models import Edge, Vertex


class DirectionPolicy(ABC):
    """
    Behaviour that depends on edge direction.

    ``directed`` is fixed by the concrete policy; subclasses of a concrete
    policy may not redefine it.
    """

    directed: ClassVar[bool]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if "directed" in vars(base) and "directed" in vars(cls):
                raise TypeError(f"{cls.__name__} cannot override 'directed'")

    @property
    def name(self) -> str:
        return "Directed" if self.directed else "Undirected"

    def out_degree(self, vertex: Vertex) -> int:
        return vertex.edge_count()

    @abstractmethod
    def in_degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        """Number of edges arriving at ``vertex``."""

    @abstractmethod
    def degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        """Structural degree of ``vertex`` among ``vertices``."""

    @abstractmethod
    def are_adjacent(self, tail: Vertex, head: Vertex) -> bool:
        """Whether ``head`` is adjacent to ``tail``."""

    @abstractmethod
    def link(self, tail: Vertex, head: Vertex, weight: Optional[Any]) -> bool:
        """Create the edge record(s) for tail -> head; False on duplicates."""

    @abstractmethod
    def unlink(self, tail: Vertex, head: Vertex) -> bool:
        """Remove the edge record(s) for tail -> head; False if absent."""

    @abstractmethod
    def is_cyclic(self, vertices: Iterable[Vertex], guard: TraversalGuard) -> bool:
        """Whether the vertices contain at least one cycle."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Directed(DirectionPolicy):
    """Edges are one-way and stored only under their tail."""

    directed = True

    def in_degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        return sum(1 for other in vertices if other.is_adjacent(vertex))

    def degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        return self.in_degree(vertices, vertex) + self.out_degree(vertex)

    def are_adjacent(self, tail: Vertex, head: Vertex) -> bool:
        return tail.is_adjacent(head)

    def link(self, tail: Vertex, head: Vertex, weight: Optional[Any]) -> bool:
        return tail.insert_edge(Edge(tail, head, weight))

    def unlink(self, tail: Vertex, head: Vertex) -> bool:
        return tail.remove_edge(head)

    def is_cyclic(self, vertices: Iterable[Vertex], guard: TraversalGuard) -> bool:
        return has_cycle_directed(vertices, guard)


class Undirected(DirectionPolicy):
    """
    Edges are two-way.

    One shared edge record is held by both endpoints, so presence and weight
    are always identical from either side.
    """

    directed = False

    def in_degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        return self.out_degree(vertex)

    def degree(self, vertices: Iterable[Vertex], vertex: Vertex) -> int:
        # The shared record already encodes both directions
        return self.out_degree(vertex)

    def are_adjacent(self, tail: Vertex, head: Vertex) -> bool:
        return tail.is_adjacent(head) and head.is_adjacent(tail)

    def link(self, tail: Vertex, head: Vertex, weight: Optional[Any]) -> bool:
        if tail.is_adjacent(head) or head.is_adjacent(tail):
            return False
        edge = Edge(tail, head, weight)
        tail.insert_edge(edge)
        if head != tail:
            head.insert_edge(edge)
        return True

    def unlink(self, tail: Vertex, head: Vertex) -> bool:
        if not self.are_adjacent(tail, head):
            return False
        tail.remove_edge(head)
        if head != tail:
            head.remove_edge(tail)
        return True

    def is_cyclic(self, vertices: Iterable[Vertex], guard: TraversalGuard) -> bool:
        return has_cycle_undirected(vertices, guard)


DIRECTED = Directed()
UNDIRECTED = Undirected()


def direction_for(directed: bool) -> DirectionPolicy:
    return DIRECTED if directed else UNDIRECTED


@dataclass(frozen=True)
class Weighting:
    """
    Which records of a graph carry a weight.

    Attributes:
        vertices (bool): Every vertex carries a weight
        edges (bool): Every edge carries a weight
    """

    vertices: bool = False
    edges: bool = False

    UNWEIGHTED: ClassVar["Weighting"]
    VERTEX: ClassVar["Weighting"]
    EDGE: ClassVar["Weighting"]
    BOTH: ClassVar["Weighting"]

    @property
    def name(self) -> str:
        if self.vertices and self.edges:
            return "vertex and edge weighted"
        if self.vertices:
            return "vertex weighted"
        if self.edges:
            return "edge weighted"
        return "unweighted"

    def check_vertex_weight(self, weight: Optional[Any]) -> None:
        """
        Validate a vertex weight against this weighting.

        Raises:
            WeightMismatchError: If the weight is missing on a vertex-weighted
                graph or supplied to a graph without vertex weights
        """
        if self.vertices and weight is None:
            raise WeightMismatchError("vertex-weighted graph requires a vertex weight")
        if not self.vertices and weight is not None:
            raise WeightMismatchError("graph does not carry vertex weights")

    def check_edge_weight(self, weight: Optional[Any]) -> None:
        """
        Validate an edge weight against this weighting.

        Raises:
            WeightMismatchError: If the weight is missing on an edge-weighted
                graph or supplied to a graph without edge weights
        """
        if self.edges and weight is None:
            raise WeightMismatchError("edge-weighted graph requires an edge weight")
        if not self.edges and weight is not None:
            raise WeightMismatchError("graph does not carry edge weights")


Weighting.UNWEIGHTED = Weighting()
Weighting.VERTEX = Weighting(vertices=True)
Weighting.EDGE = Weighting(edges=True)
Weighting.BOTH = Weighting(vertices=True, edges=True)
