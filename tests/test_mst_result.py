"""
Unit tests for MST results and comparisons.
"""

import json

import pytest

from kruskal_algorithm import KruskalAlgorithm
from mst_errors import InvalidGraphError
from mst_graph import Graph
from mst_result import (
    AlgorithmParameters,
    MSTResult,
    PerformanceMetrics,
    create_comparison_report,
    faster_result,
    tree_diameter,
)
from prim_algorithm import PrimAlgorithm


def make_result(name, graph, edges, time_ms=0.0, operations=0):
    metrics = PerformanceMetrics(execution_time_ms=time_ms, operations_count=operations)
    return MSTResult(name, graph, edges, performance_metrics=metrics)


class TestConstruction:
    """Arguments checked on creation."""

    def test_empty_name_rejected(self, triangle):
        with pytest.raises(ValueError):
            MSTResult("  ", triangle, [])

    def test_missing_graph_rejected(self):
        with pytest.raises(InvalidGraphError):
            MSTResult("Prim", None, [])

    def test_missing_edges_rejected(self, triangle):
        with pytest.raises(ValueError):
            MSTResult("Prim", triangle, None)

    def test_cost_defaults_to_edge_sum(self, triangle):
        result = MSTResult("Prim", triangle, triangle.edges[:2])
        assert result.total_cost == 3.0

    def test_edges_are_a_copy(self, triangle):
        result = MSTResult("Prim", triangle, triangle.edges[:2])
        result.mst_edges.clear()
        assert len(result.mst_edges) == 2

    def test_result_id(self, star):
        result = PrimAlgorithm().compute_mst(star)
        assert result.result_id.startswith("Prim-5v-5e-")

    def test_parameters_are_read_only(self):
        params = AlgorithmParameters(settings={"a": 1})
        with pytest.raises(TypeError):
            params.settings["a"] = 2


class TestValidity:
    """is_valid_mst checks count, cost and coverage."""

    def test_valid_tree(self, triangle):
        assert MSTResult("Prim", triangle, triangle.edges[:2]).is_valid_mst()

    def test_wrong_edge_count(self, triangle):
        assert not MSTResult("Prim", triangle, triangle.edges[:1]).is_valid_mst()

    def test_inconsistent_cost(self, triangle):
        assert not MSTResult("Prim", triangle, triangle.edges[:2], total_cost=4.0).is_valid_mst()

    def test_cycle_that_misses_a_vertex(self):
        """Right number of edges, but one vertex is left out."""
        graph = Graph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 1), ("C", "D", 1)])
        cycle = [graph.get_edge("A", "B"), graph.get_edge("B", "C"), graph.get_edge("A", "C")]
        assert not MSTResult("Prim", graph, cycle).is_valid_mst()


class TestProperties:
    """Structural summary of the tree."""

    def test_star_properties(self, star):
        props = PrimAlgorithm().compute_mst(star).properties
        assert props.vertex_count == 5
        assert props.edge_count == 4
        assert props.average_degree == pytest.approx(1.6)
        assert props.diameter == 2
        assert props.max_edge_weight == 3.0
        assert props.min_edge_weight == 1.0
        assert {e.id for e in props.critical_edges} == {"C-L1", "C-L4"}

    def test_tree_diameter(self):
        chain = Graph.from_edges([(str(i), str(i + 1), 1) for i in range(5)])
        assert tree_diameter(list(chain.edges)) == 5
        assert tree_diameter([]) == 0

    def test_edges_sorted_and_critical_path(self, star):
        result = KruskalAlgorithm().compute_mst(star)
        assert [e.weight for e in result.edges_sorted_by_weight()] == [1.0, 1.0, 2.0, 3.0]
        assert len(result.critical_path_edges()) == 3

    def test_detailed_analysis_is_read_only(self, triangle):
        analysis = PrimAlgorithm().compute_mst(triangle).detailed_analysis()
        assert analysis["totalCost"] == 3.0
        assert analysis["validMST"] is True
        assert analysis["costPerEdge"] == 1.5
        with pytest.raises(TypeError):
            analysis["totalCost"] = 0

    def test_to_json(self, triangle):
        data = json.loads(PrimAlgorithm().compute_mst(triangle).to_json())
        assert data["algorithmName"] == "Prim"
        assert data["totalCost"] == 3.0
        assert data["isValid"] is True
        assert {(e["from"], e["to"]) for e in data["edges"]} == {("A", "B"), ("B", "C")}
        assert all(e["inMST"] for e in data["edges"])


class TestComparison:
    """Comparing two results."""

    def test_equivalence_and_difference(self, triangle):
        first = MSTResult("Prim", triangle, triangle.edges[:2])
        second = MSTResult("Kruskal", triangle, [triangle.edges[0], triangle.edges[2]])
        assert not first.is_equivalent_to(second)
        assert first.cost_difference(second) == 1.0
        assert first.is_equivalent_to(MSTResult("Kruskal", triangle, triangle.edges[:2]))
        assert not first.is_equivalent_to(None)

    def test_performance_improvement(self, triangle):
        fast = make_result("Prim", triangle, triangle.edges[:2], time_ms=5.0)
        slow = make_result("Kruskal", triangle, triangle.edges[:2], time_ms=10.0)
        instant = make_result("Kruskal", triangle, triangle.edges[:2], time_ms=0.0)
        assert fast.performance_improvement(slow) == pytest.approx(50.0)
        assert slow.performance_improvement(fast) == pytest.approx(-100.0)
        assert fast.performance_improvement(instant) == 0.0

    def test_faster_result(self, triangle):
        fast = make_result("Prim", triangle, triangle.edges[:2], time_ms=1.0)
        slow = make_result("Kruskal", triangle, triangle.edges[:2], time_ms=2.0)
        assert faster_result(fast, slow) is fast
        assert faster_result(slow, fast) is fast
        with pytest.raises(ValueError):
            faster_result(fast, None)

    def test_comparison_report(self, triangle):
        first = make_result("Prim", triangle, triangle.edges[:2], time_ms=1.0, operations=10)
        second = make_result("Kruskal", triangle, triangle.edges[:2], time_ms=4.0, operations=20)
        report = create_comparison_report(first, second)
        assert report["costEquivalent"] is True
        assert report["fasterAlgorithm"] == "Prim"
        assert report["moreEfficientAlgorithm"] == "Prim"
        assert report["fewerOperations"] == "Prim"
