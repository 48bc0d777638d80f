"""
Edge model.

An edge connects a tail vertex to a head vertex and may carry a weight. In a
directed graph the edge is held only by its tail. In an undirected graph the
same record is held by both endpoints, and each endpoint reaches the other
through ``opposite``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Optional, Tuple, TypeVar

if TYPE_CHECKING:
    from .vertex import Vertex

T = TypeVar("T")


@dataclass(eq=False)
class Edge(Generic[T]):
    """
    Connection record between two vertices.

    Edges reference their endpoints, they never own them. Two edges are equal
    when they join the same (tail, head) pair.

    Attributes:
        tail (Vertex): Vertex the edge leaves from
        head (Vertex): Vertex the edge arrives at
        weight (Optional[Any]): Edge weight, set only on edge-weighted graphs
    """

    tail: "Vertex[T]"
    head: "Vertex[T]"
    weight: Optional[Any] = None

    @property
    def endpoints(self) -> Tuple[T, T]:
        """The (tail, head) values of this edge."""
        return self.tail.info, self.head.info

    @property
    def is_weighted(self) -> bool:
        return self.weight is not None

    @property
    def is_loop(self) -> bool:
        return self.tail == self.head

    def connects(self, vertex: "Vertex[T]") -> bool:
        """Check whether the vertex is one of the endpoints."""
        return self.tail == vertex or self.head == vertex

    def opposite(self, vertex: "Vertex[T]") -> "Vertex[T]":
        """
        Return the endpoint seen from ``vertex``.

        Raises:
            ValueError: If the vertex is not an endpoint of this edge
        """
        if self.tail == vertex:
            return self.head
        if self.head == vertex:
            return self.tail
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Edge):
            return self.tail == other.tail and self.head == other.head
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.tail, self.head))

    def __repr__(self) -> str:
        tail, head = self.endpoints
        if self.weight is None:
            return f"Edge({tail!r} -> {head!r})"
        return f"Edge({tail!r} -> {head!r}, weight={self.weight!r})"
