"""
Tests for the vertex and edge models.
"""

import pytest

from adjgraph.core.models import Edge, Vertex


@pytest.fixture
def vertices():
    """Fixture providing three unconnected vertices."""
    return Vertex("A"), Vertex("B"), Vertex("C")


def test_vertex_identity():
    """Test that vertices compare and hash by value."""
    assert Vertex("A") == Vertex("A", weight=5)
    assert hash(Vertex("A")) == hash("A")
    assert Vertex("A") != Vertex("B")
    assert len({Vertex("A"), Vertex("A")}) == 1
    assert str(Vertex("A")) == "Vertex: A"


def test_vertex_weight():
    """Test the weighted flag."""
    assert Vertex("A", weight=0).is_weighted
    assert not Vertex("A").is_weighted


def test_edge_equality(vertices):
    """Test that edges compare by their endpoints, not their weight."""
    a, b, _ = vertices
    assert Edge(a, b, 1) == Edge(a, b, 2)
    assert Edge(a, b) != Edge(b, a)
    assert Edge(a, b).endpoints == ("A", "B")


def test_edge_opposite(vertices):
    """Test walking an edge from either endpoint."""
    a, b, c = vertices
    edge = Edge(a, b)
    assert edge.opposite(a) is b
    assert edge.opposite(b) is a
    with pytest.raises(ValueError, match="not an endpoint"):
        edge.opposite(c)


def test_edge_loop_and_repr(vertices):
    """Test self-loop detection and representation."""
    a, b, _ = vertices
    assert Edge(a, a).is_loop
    assert not Edge(a, b).is_loop
    assert repr(Edge(a, b)) == "Edge('A' -> 'B')"
    assert repr(Edge(a, b, 2.5)) == "Edge('A' -> 'B', weight=2.5)"


def test_vertex_insert_edge(vertices):
    """Test owned edge insertion and duplicate rejection."""
    a, b, c = vertices
    assert a.insert_edge(Edge(a, b))
    assert not a.insert_edge(Edge(a, b, 3))
    assert a.is_adjacent(b)
    assert not a.is_adjacent(c)
    assert a.adjacents() == [b]
    assert a.edge_count() == 1


def test_vertex_insert_foreign_edge(vertices):
    """Test that a vertex refuses edges it is not part of."""
    a, b, c = vertices
    with pytest.raises(ValueError):
        c.insert_edge(Edge(a, b))


def test_shared_edge(vertices):
    """Test that one record can be held by both endpoints."""
    a, b, _ = vertices
    edge = Edge(a, b, 4)
    a.insert_edge(edge)
    b.insert_edge(edge)
    assert b.adjacents() == [a]
    assert a.get_edge(b) is b.get_edge(a)


def test_vertex_remove_edge(vertices):
    """Test edge removal by head vertex."""
    a, b, c = vertices
    a.insert_edge(Edge(a, b))
    a.insert_edge(Edge(a, c))
    assert a.remove_edge(b)
    assert not a.remove_edge(b)
    assert a.adjacents() == [c]
    a.disconnect()
    assert a.edge_count() == 0


def test_edges_snapshot(vertices):
    """Test that the edges property cannot mutate the vertex."""
    a, b, _ = vertices
    a.insert_edge(Edge(a, b))
    a.edges.clear()
    assert a.edge_count() == 1
