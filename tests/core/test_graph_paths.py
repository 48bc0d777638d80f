"""
Tests for reachability and path search.
"""

import pytest

from adjgraph.core.exceptions import TraversalAbortedError, WeightMismatchError
from adjgraph.core.graph import Graph
from adjgraph.core.graph_operations import NOT_FOUND_DISTANCE, PathResult, TraversalGuard
from adjgraph.core.numeric import IntegerNumber, RealNumber


def _chain(length: int, guard: TraversalGuard = None) -> Graph:
    graph = Graph.directed_graph()
    if guard is not None:
        graph.guard = guard
    for value in range(length):
        graph.insert_vertex(value)
    for value in range(length - 1):
        graph.insert_edge(value, value + 1)
    return graph


class TestExistPath:
    """Tests for plain reachability."""

    def test_reachable(self, directed_dag):
        """Test reachability along directed edges."""
        assert directed_dag.exist_path("A", "E")
        assert directed_dag.exist_path("B", "E")
        assert not directed_dag.exist_path("E", "A")
        assert not directed_dag.exist_path("A", "F")

    def test_same_vertex(self, directed_triangle):
        """Test that tail == head is never a path, even on a cycle."""
        assert not directed_triangle.exist_path("A", "A")

    def test_missing_vertex(self, path_graph):
        """Test that absent vertices have no paths."""
        assert not path_graph.exist_path("A", "Z")

    def test_long_chain(self):
        """Test that deep chains do not exhaust the call stack."""
        graph = _chain(5000)
        assert graph.exist_path(0, 4999)


class TestExistPathWithLength:
    """Tests for exact-length walks."""

    def test_direct_adjacency(self, directed_triangle):
        """Test that length 1 means adjacency."""
        assert directed_triangle.exist_path_with_length("A", "B", 1)
        assert not directed_triangle.exist_path_with_length("A", "C", 1)

    def test_walks_may_revisit(self, directed_triangle):
        """Test walks that go around the cycle."""
        assert directed_triangle.exist_path_with_length("A", "C", 2)
        assert directed_triangle.exist_path_with_length("A", "B", 4)
        assert not directed_triangle.exist_path_with_length("A", "B", 2)

    def test_undirected_back_and_forth(self, path_graph):
        """Test that undirected walks may step back."""
        assert path_graph.exist_path_with_length("A", "B", 3)
        assert not path_graph.exist_path_with_length("A", "B", 2)

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length(self, path_graph, length):
        """Test that lengths below 1 are rejected."""
        assert not path_graph.exist_path_with_length("A", "B", length)

    def test_dead_end(self, directed_dag):
        """Test that walks stop at vertices without edges."""
        assert not directed_dag.exist_path_with_length("A", "E", 5)


class TestFindPath:
    """Tests for the depth-first path search."""

    def test_same_vertex(self, path_graph):
        """Test distance 0 when tail equals head."""
        result = path_graph.find_path("A", "A")
        assert result.distance == 0
        assert result.path == ["A"]

    def test_adjacent(self, path_graph):
        """Test distance 1 for adjacent vertices."""
        result = path_graph.find_path("B", "C")
        assert result.distance == 1
        assert result.path == ["B", "C"]

    def test_first_path_found(self, directed_dag):
        """Test that the depth-first search returns the first route it finds."""
        result = directed_dag.find_path("A", "E")
        assert result.found
        assert result.path == ["A", "B", "C", "E"]
        assert result.distance == 3
        assert isinstance(result.distance, IntegerNumber)

    def test_backtracking(self):
        """Test that dead ends are retracted from the path."""
        graph = Graph.directed_graph()
        for value in "ABCDE":
            graph.insert_vertex(value)
        graph.insert_edge("A", "B")
        graph.insert_edge("B", "C")
        graph.insert_edge("A", "D")
        graph.insert_edge("D", "E")
        graph.insert_edge("E", "C")
        result = graph.find_path("A", "C")
        assert result.path == ["A", "B", "C"]

        graph.remove_edge("B", "C")
        result = graph.find_path("A", "C")
        assert result.path == ["A", "D", "E", "C"]
        assert result.distance == 3

    def test_not_found(self, directed_dag):
        """Test the not-found sentinel."""
        result = directed_dag.find_path("E", "A")
        assert not result.found
        assert result.distance == NOT_FOUND_DISTANCE
        assert result.path == []
        assert not result

    def test_missing_vertex(self, directed_dag):
        """Test that absent vertices yield the not-found sentinel."""
        assert directed_dag.find_path("A", "Z").distance == -1


class TestShortestPath:
    """Tests for the minimum path search."""

    def test_minimum_hops(self, directed_dag):
        """Test that breadth-first search finds the fewest hops."""
        result = directed_dag.shortest_path("A", "E")
        assert result.path == ["A", "D", "E"]
        assert result.distance == 2
        assert result.hops == 2

    def test_minimum_weight(self, weighted_graph):
        """Test that edge weights are minimised on weighted graphs."""
        result = weighted_graph.shortest_path("A", "C")
        assert result.path == ["A", "B", "C"]
        assert result.distance == 5
        assert isinstance(result.distance, IntegerNumber)

    def test_real_weights(self, weighted_graph):
        """Test accumulation of real-valued weights."""
        result = weighted_graph.shortest_path("A", "D")
        assert result.path == ["A", "B", "C", "D"]
        assert float(result.distance) == pytest.approx(6.5)
        assert isinstance(result.distance, RealNumber)

    def test_unreachable(self, directed_dag):
        """Test the not-found sentinel."""
        assert not directed_dag.shortest_path("A", "F").found

    def test_negative_weight(self):
        """Test that negative weights are rejected."""
        graph = Graph.directed_graph(weighted_edges=True)
        for value in "AB":
            graph.insert_vertex(value)
        graph.insert_edge("A", "B", -1)
        with pytest.raises(WeightMismatchError, match="negative edge weight"):
            graph.shortest_path("A", "B")

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight(self, weight):
        """Test that NaN and infinite weights are rejected."""
        graph = Graph.directed_graph(weighted_edges=True)
        for value in "ABC":
            graph.insert_vertex(value)
        graph.insert_edge("A", "B", weight)
        graph.insert_edge("B", "C", 1)
        with pytest.raises(WeightMismatchError, match="must be finite"):
            graph.shortest_path("A", "C")

    def test_path_cost_overflow(self):
        """Test that finite weights summing past float range are rejected."""
        graph = Graph.directed_graph(weighted_edges=True)
        for value in "ABC":
            graph.insert_vertex(value)
        graph.insert_edge("A", "B", 1e308)
        graph.insert_edge("B", "C", 1e308)
        with pytest.raises(WeightMismatchError, match="overflow"):
            graph.shortest_path("A", "C")

    def test_non_numeric_weight(self):
        """Test that non-numeric weights are rejected."""
        graph = Graph.undirected_graph(weighted_edges=True)
        for value in "AB":
            graph.insert_vertex(value)
        graph.insert_edge("A", "B", "heavy")
        with pytest.raises(WeightMismatchError, match="not numeric"):
            graph.shortest_path("A", "B")


class TestPathResult:
    """Tests for the path result container."""

    def test_defaults(self):
        """Test the not-found defaults."""
        result = PathResult.not_found()
        assert result.distance == -1
        assert result.hops == -1
        assert list(result) == []

    def test_found(self):
        """Test a found result."""
        result = PathResult(["A", "B"], IntegerNumber(1))
        assert result.found
        assert result.hops == 1
        assert list(result) == ["A", "B"]


class TestTraversalGuard:
    """Tests for traversal limits."""

    def test_step_budget(self, caplog):
        """Test that a traversal over budget is aborted and logged."""
        graph = _chain(20, TraversalGuard(max_steps=5))
        with pytest.raises(TraversalAbortedError, match="exceeded 5 steps"):
            graph.exist_path(0, 19)
        assert "step budget" in caplog.text

    def test_budget_is_per_traversal(self):
        """Test that the step counter resets between calls."""
        graph = _chain(4, TraversalGuard(max_steps=5))
        assert graph.exist_path(0, 3)
        assert graph.exist_path(0, 3)

    def test_cancellation(self):
        """Test that a set cancel event aborts traversals."""
        guard = TraversalGuard()
        graph = _chain(3, guard)
        guard.cancel()
        with pytest.raises(TraversalAbortedError, match="cancelled"):
            graph.find_path(0, 2)
        guard.reset_cancel()
        assert graph.find_path(0, 2).found

    def test_cascade_abort_leaves_graph_unchanged(self):
        """Test that an aborted cascade removes nothing."""
        graph = _chain(10, TraversalGuard(max_steps=3))
        with pytest.raises(TraversalAbortedError):
            graph.remove_vertex_cascade(0)
        assert graph.vertex_count() == 10
        assert graph.total_edge_count() == 9

    def test_memory_ceiling(self, monkeypatch):
        """Test that memory growth above the ceiling aborts the traversal."""
        from adjgraph.core.graph_operations import utils

        readings = iter([0, 0])
        monkeypatch.setattr(utils, "get_memory_usage", lambda: next(readings, 10 * 1024**3))
        monkeypatch.setattr(utils, "MEMORY_CHECK_INTERVAL", 0)
        graph = _chain(5, utils.TraversalGuard(max_memory_mb=1))
        with pytest.raises(TraversalAbortedError, match="memory"):
            graph.exist_path(0, 4)
