"""
Matrix export.

Rows (and adjacency columns) follow the order of the ``vertices`` sequence
passed in, which the graph takes from its vertex collection once per call.
"""

from typing import TYPE_CHECKING, List, Sequence

from ..models import Vertex

if TYPE_CHECKING:
    from ..policies import DirectionPolicy

Matrix = List[List[int]]


def adjacency_matrix(vertices: Sequence[Vertex], direction: "DirectionPolicy") -> Matrix:
    """
    Build the V x V adjacency matrix.

    Entry ``[i][j]`` is 1 iff vertex ``j`` is adjacent to vertex ``i`` under
    the graph's direction policy, so the matrix is symmetric for undirected
    graphs.
    """
    return [
        [1 if direction.are_adjacent(tail, head) else 0 for head in vertices]
        for tail in vertices
    ]


def incidence_matrix(vertices: Sequence[Vertex]) -> Matrix:
    """
    Build the V x E incidence matrix.

    Columns enumerate each vertex's owned edge entries, vertex by vertex in
    edge-list order, so E equals the graph's total edge count and an
    undirected connection occupies two columns. Entry ``[i][j]`` is 1 where
    vertex ``i`` is the owner (tail side) of column ``j``.
    """
    total_edges = sum(vertex.edge_count() for vertex in vertices)
    matrix = [[0] * total_edges for _ in vertices]
    column = 0
    for row, vertex in enumerate(vertices):
        for _ in vertex.iter_edges():
            matrix[row][column] = 1
            column += 1
    return matrix
