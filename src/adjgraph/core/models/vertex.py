"""
Vertex model.

A vertex is identified by its ``info`` value and owns an insertion-ordered
list of edge records. Adjacency is read from that list: every owned edge
leads to exactly one adjacent vertex, its ``opposite`` endpoint.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, Optional, TypeVar

from .base import validate_vertex_value
from .edge import Edge

T = TypeVar("T")


@dataclass(eq=False)
class Vertex(Generic[T]):
    """
    Identity-bearing graph node.

    Two vertices are equal iff their ``info`` values are equal, and a vertex
    hashes like its value.

    Attributes:
        info (T): Identity key supplied by the caller
        weight (Optional[Any]): Vertex weight, set only on vertex-weighted graphs
    """

    info: T
    weight: Optional[Any] = None
    _edges: List[Edge[T]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        """Validate the identity value."""
        validate_vertex_value(self.info)

    @property
    def is_weighted(self) -> bool:
        return self.weight is not None

    @property
    def edges(self) -> List[Edge[T]]:
        """Snapshot of the owned edge records."""
        return list(self._edges)

    def iter_edges(self) -> Iterator[Edge[T]]:
        return iter(self._edges)

    def adjacents(self) -> List["Vertex[T]"]:
        """Vertices reachable by a single owned edge, in edge order."""
        return [edge.opposite(self) for edge in self._edges]

    def adjacent_count(self) -> int:
        return len(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def is_adjacent(self, head: "Vertex[T]") -> bool:
        return any(edge.opposite(self) == head for edge in self._edges)

    def get_edge(self, head: "Vertex[T]") -> Optional[Edge[T]]:
        """Return the owned edge leading to ``head``, if any."""
        for edge in self._edges:
            if edge.opposite(self) == head:
                return edge
        return None

    def insert_edge(self, edge: Edge[T]) -> bool:
        """
        Attach an edge record to this vertex.

        Args:
            edge: Edge with this vertex as one of its endpoints

        Returns:
            bool: False if an owned edge already leads to the same vertex

        Raises:
            ValueError: If this vertex is not an endpoint of the edge
        """
        if not edge.connects(self):
            raise ValueError(f"{edge!r} does not touch vertex {self.info!r}")
        if self.is_adjacent(edge.opposite(self)):
            return False
        self._edges.append(edge)
        return True

    def remove_edge(self, head: "Vertex[T]") -> bool:
        """Remove every owned edge leading to ``head``; report whether any was removed."""
        kept = [edge for edge in self._edges if edge.opposite(self) != head]
        removed = len(kept) != len(self._edges)
        self._edges[:] = kept
        return removed

    def disconnect(self) -> None:
        """Drop all owned edge records."""
        self._edges.clear()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vertex):
            return self.info == other.info
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.info)

    def __str__(self) -> str:
        return f"Vertex: {self.info}"
