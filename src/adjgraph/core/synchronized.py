"""
Thread-safe graph wrapper.

``synchronized`` turns a method into a critical section guarded by the
instance's ``_mutex``. ``SynchronizedGraph`` applies it to every public
operation of a wrapped ``Graph`` so that concurrent callers observe each
operation atomically. The mutex is reentrant, so composite operations may
call other synchronised operations of the same wrapper.
"""

import functools
import threading
from typing import Any, Callable, Collection, Generic, Hashable, Iterable, Iterator, List, Optional, Set, TypeVar

from .graph import Graph
from .graph_operations.models import PathResult
from .policies import DirectionPolicy, Weighting

T = TypeVar("T", bound=Hashable)
F = TypeVar("F", bound=Callable[..., Any])


def synchronized(method: F) -> F:
    """Run ``method`` while holding ``self._mutex``."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._mutex:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class SynchronizedGraph(Generic[T]):
    """
    A ``Graph`` whose operations are mutually exclusive.

    Args:
        graph: The graph to protect; it should not be used directly afterwards
        mutex: Lock to guard it with (default: a new ``threading.RLock``)
    """

    def __init__(self, graph: Graph[T], mutex: Optional[Any] = None):
        self._graph = graph
        self._mutex = mutex if mutex is not None else threading.RLock()

    @property
    def graph(self) -> Graph[T]:
        return self._graph

    @property
    def directed(self) -> bool:
        return self._graph.directed

    @property
    def direction(self) -> DirectionPolicy:
        return self._graph.direction

    @property
    def weighting(self) -> Weighting:
        return self._graph.weighting

    @property
    def weighted_vertex(self) -> bool:
        return self._graph.weighted_vertex

    @property
    def weighted_edge(self) -> bool:
        return self._graph.weighted_edge

    @synchronized
    def insert_vertex(self, value: T, weight: Optional[Any] = None) -> bool:
        return self._graph.insert_vertex(value, weight)

    @synchronized
    def insert_edge(self, tail: T, head: T, weight: Optional[Any] = None) -> bool:
        return self._graph.insert_edge(tail, head, weight)

    @synchronized
    def get_vertex_weight(self, value: T) -> Optional[Any]:
        return self._graph.get_vertex_weight(value)

    @synchronized
    def get_edge_weight(self, tail: T, head: T) -> Optional[Any]:
        return self._graph.get_edge_weight(tail, head)

    @synchronized
    def vertex_count(self) -> int:
        return self._graph.vertex_count()

    @synchronized
    def edge_count(self, value: T) -> int:
        return self._graph.edge_count(value)

    @synchronized
    def total_edge_count(self) -> int:
        return self._graph.total_edge_count()

    @synchronized
    def get_vertices(self) -> List[T]:
        return self._graph.get_vertices()

    @synchronized
    def exist_vertex(self, value: T) -> bool:
        return self._graph.exist_vertex(value)

    @synchronized
    def exist_edge(self, tail: T, head: T) -> bool:
        return self._graph.exist_edge(tail, head)

    @synchronized
    def degree(self, value: T) -> int:
        return self._graph.degree(value)

    @synchronized
    def in_degree(self, value: T) -> int:
        return self._graph.in_degree(value)

    @synchronized
    def out_degree(self, value: T) -> int:
        return self._graph.out_degree(value)

    @synchronized
    def are_adjacent(self, tail: T, head: T) -> bool:
        return self._graph.are_adjacent(tail, head)

    @synchronized
    def get_adjacents(self, value: T) -> List[T]:
        return self._graph.get_adjacents(value)

    @synchronized
    def vertex_with_most_adjacents(self) -> Optional[T]:
        return self._graph.vertex_with_most_adjacents()

    @synchronized
    def remove_vertex(self, value: T) -> Optional[T]:
        return self._graph.remove_vertex(value)

    @synchronized
    def remove_edge(self, tail: T, head: T) -> bool:
        return self._graph.remove_edge(tail, head)

    @synchronized
    def remove_vertex_cascade(self, value: T) -> Set[T]:
        return self._graph.remove_vertex_cascade(value)

    @synchronized
    def exist_vertices_disconnected(self) -> bool:
        return self._graph.exist_vertices_disconnected()

    @synchronized
    def get_disconnected_vertices(self) -> List[T]:
        return self._graph.get_disconnected_vertices()

    @synchronized
    def remove_disconnected_vertices(self) -> List[T]:
        return self._graph.remove_disconnected_vertices()

    @synchronized
    def clean_graph(self) -> None:
        self._graph.clean_graph()

    @synchronized
    def exist_path(self, tail: T, head: T) -> bool:
        return self._graph.exist_path(tail, head)

    @synchronized
    def exist_path_with_length(self, tail: T, head: T, length: int) -> bool:
        return self._graph.exist_path_with_length(tail, head, length)

    @synchronized
    def find_path(self, tail: T, head: T) -> PathResult[T]:
        return self._graph.find_path(tail, head)

    @synchronized
    def shortest_path(self, tail: T, head: T) -> PathResult[T]:
        return self._graph.shortest_path(tail, head)

    @synchronized
    def is_cyclic(self) -> bool:
        return self._graph.is_cyclic()

    @synchronized
    def is_euler_path(self) -> bool:
        return self._graph.is_euler_path()

    @synchronized
    def euler_path(self) -> List[T]:
        return self._graph.euler_path()

    @synchronized
    def euler_trail(self) -> List[T]:
        return self._graph.euler_trail()

    @synchronized
    def adjacency_matrix(self) -> List[List[int]]:
        return self._graph.adjacency_matrix()

    @synchronized
    def incidence_matrix(self) -> List[List[int]]:
        return self._graph.incidence_matrix()

    @synchronized
    def remove(self, value: T) -> bool:
        return self._graph.remove(value)

    @synchronized
    def remove_all(self, values: Iterable[T]) -> bool:
        return self._graph.remove_all(values)

    @synchronized
    def retain_all(self, values: Collection[T]) -> bool:
        return self._graph.retain_all(values)

    @synchronized
    def clear(self) -> None:
        self._graph.clear()

    @synchronized
    def __len__(self) -> int:
        return len(self._graph)

    @synchronized
    def __contains__(self, value: object) -> bool:
        return value in self._graph

    @synchronized
    def __iter__(self) -> Iterator[T]:
        # Snapshot taken under the lock
        return iter(self._graph.get_vertices())

    @synchronized
    def __eq__(self, other: object) -> bool:
        # Only this wrapper's mutex is held; the other side is read unguarded
        if isinstance(other, SynchronizedGraph):
            other = other.graph
        if not isinstance(other, Graph):
            return NotImplemented
        return self._graph == other

    __hash__ = None  # type: ignore[assignment]

    @synchronized
    def __repr__(self) -> str:
        return f"SynchronizedGraph({self._graph!r})"

    @synchronized
    def __str__(self) -> str:
        return str(self._graph)
