"""
Data models for path queries.

Example:
    >>> result = graph.find_path("A", "C")
    >>> result.found, result.distance, result.path
    (True, IntegerNumber(2), ['A', 'B', 'C'])
"""

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, TypeVar

from ..numeric import ArithmeticNumber, IntegerNumber

T = TypeVar("T")

NOT_FOUND_DISTANCE = -1


@dataclass
class PathResult(Generic[T]):
    """
    Container for path query results.

    Attributes:
        path: Vertex values from tail to head, empty when no path exists
        distance: Hop count or summed edge weight; ``-1`` when no path exists
    """

    path: List[T] = field(default_factory=list)
    distance: ArithmeticNumber = field(default_factory=lambda: IntegerNumber(NOT_FOUND_DISTANCE))

    @classmethod
    def not_found(cls) -> "PathResult[T]":
        return cls()

    @property
    def found(self) -> bool:
        return not self.distance.is_negative()

    @property
    def hops(self) -> int:
        """Number of edges along the path."""
        return max(len(self.path) - 1, 0) if self.found else NOT_FOUND_DISTANCE

    def __iter__(self) -> Iterator[T]:
        return iter(self.path)

    def __bool__(self) -> bool:
        return self.found
