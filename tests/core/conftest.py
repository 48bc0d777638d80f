"""Shared test fixtures."""

import pytest

from adjgraph.core.graph import Graph


@pytest.fixture
def path_graph() -> Graph:
    """Fixture providing the undirected path A - B - C."""
    graph = Graph.undirected_graph()
    for value in "ABC":
        graph.insert_vertex(value)
    graph.insert_edge("A", "B")
    graph.insert_edge("B", "C")
    return graph


@pytest.fixture
def directed_triangle() -> Graph:
    """Fixture providing the directed cycle A -> B -> C -> A."""
    graph = Graph.directed_graph()
    for value in "ABC":
        graph.insert_vertex(value)
    graph.insert_edge("A", "B")
    graph.insert_edge("B", "C")
    graph.insert_edge("C", "A")
    return graph


@pytest.fixture
def directed_dag() -> Graph:
    """
    Fixture providing a directed acyclic graph with two routes to E.

    A -> B -> C -> E and A -> D -> E, plus an isolated vertex F.
    """
    graph = Graph.directed_graph()
    for value in "ABCDEF":
        graph.insert_vertex(value)
    graph.insert_edge("A", "B")
    graph.insert_edge("B", "C")
    graph.insert_edge("C", "E")
    graph.insert_edge("A", "D")
    graph.insert_edge("D", "E")
    return graph


@pytest.fixture
def weighted_graph() -> Graph:
    """
    Fixture providing an undirected edge-weighted graph.

    The direct edge A - C is heavier than the detour A - B - C.
    """
    graph = Graph.undirected_graph(weighted_edges=True)
    for value in "ABCD":
        graph.insert_vertex(value)
    graph.insert_edge("A", "C", 10)
    graph.insert_edge("A", "B", 2)
    graph.insert_edge("B", "C", 3)
    graph.insert_edge("C", "D", 1.5)
    return graph
