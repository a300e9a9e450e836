"""
Outcome of one MST computation: selected edges, cost, metrics and validity
"""

import json
import math
import time
from collections import defaultdict, deque
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

import mst_config
from mst_errors import InvalidGraphError


@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Instrumentation recorded for a single run.

    Timings are wall clock and environment dependent; the counters are
    deterministic for a given graph and configuration.
    """

    execution_time_ms: float = 0.0
    operations_count: int = 0
    comparisons_count: int = 0
    union_operations: int = 0
    find_operations: int = 0
    priority_queue_operations: int = 0
    decrease_key_operations: int = 0
    allocations: int = 0

    @property
    def operations_per_ms(self):
        if self.execution_time_ms <= 0:
            return 0.0
        return self.operations_count / self.execution_time_ms

    def to_dict(self):
        data = asdict(self)
        data["operations_per_ms"] = self.operations_per_ms
        return data


@dataclass(frozen=True)
class AlgorithmParameters:
    """Configuration the result was produced with"""

    variant: str = "standard"
    uses_union_find: bool = False
    uses_priority_queue: bool = False
    early_termination: bool = True
    settings: Mapping = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "settings", MappingProxyType(dict(self.settings)))

    def to_dict(self):
        return {
            "variant": self.variant,
            "uses_union_find": self.uses_union_find,
            "uses_priority_queue": self.uses_priority_queue,
            "early_termination": self.early_termination,
            "settings": dict(self.settings),
        }


@dataclass(frozen=True)
class MSTProperties:
    """Structural summary of the selected tree"""

    vertex_count: int
    edge_count: int
    density: float
    average_degree: float
    diameter: int
    average_edge_weight: float
    max_edge_weight: float
    min_edge_weight: float
    critical_edges: Tuple = ()

    @classmethod
    def from_edges(cls, graph, mst_edges):
        weights = [edge.weight for edge in mst_edges]
        vertex_count = graph.vertex_count
        min_weight = min(weights, default=0.0)
        return cls(
            vertex_count=vertex_count,
            edge_count=len(mst_edges),
            density=graph.density,
            average_degree=(2.0 * len(mst_edges) / vertex_count) if vertex_count else 0.0,
            diameter=tree_diameter(mst_edges),
            average_edge_weight=(sum(weights) / len(weights)) if weights else 0.0,
            max_edge_weight=max(weights, default=0.0),
            min_edge_weight=min_weight,
            critical_edges=tuple(e for e in mst_edges if e.weight == min_weight),
        )

    def to_dict(self):
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "density": self.density,
            "average_degree": self.average_degree,
            "diameter": self.diameter,
            "average_edge_weight": self.average_edge_weight,
            "max_edge_weight": self.max_edge_weight,
            "min_edge_weight": self.min_edge_weight,
            "critical_edges": [edge.id for edge in self.critical_edges],
        }


def tree_diameter(edges):
    """Longest path, in hops, of the tree containing the first edge"""
    if not edges:
        return 0

    adjacency = defaultdict(list)
    for edge in edges:
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)

    def farthest(start):
        distances = {start: 0}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)
        node = max(distances, key=distances.get)
        return node, distances[node]

    far_end, _ = farthest(edges[0].source)
    _, diameter = farthest(far_end)
    return diameter


class MSTResult:
    """Immutable snapshot of one compute_mst call"""

    def __init__(
        self,
        algorithm_name,
        graph,
        mst_edges,
        total_cost=None,
        performance_metrics=None,
        parameters=None,
    ):
        if not algorithm_name or not algorithm_name.strip():
            raise ValueError("Algorithm name cannot be empty")
        if graph is None:
            raise InvalidGraphError("Graph cannot be None")
        if mst_edges is None:
            raise ValueError("MST edges cannot be None")

        self._algorithm_name = algorithm_name
        self._graph = graph
        self._edges = tuple(mst_edges)
        self._total_cost = (
            float(sum(edge.weight for edge in self._edges))
            if total_cost is None
            else float(total_cost)
        )
        self._metrics = performance_metrics or PerformanceMetrics()
        self._parameters = parameters or AlgorithmParameters()
        self._properties = MSTProperties.from_edges(graph, self._edges)
        self._timestamp = time.time()
        self._result_id = (
            f"{algorithm_name}-{graph.vertex_count}v-{graph.edge_count}e-"
            f"{int(self._timestamp * 1000)}"
        )

    @property
    def algorithm_name(self):
        return self._algorithm_name

    @property
    def graph(self):
        return self._graph

    @property
    def mst_edges(self):
        return list(self._edges)

    @property
    def total_cost(self):
        return self._total_cost

    @property
    def performance_metrics(self):
        return self._metrics

    @property
    def parameters(self):
        return self._parameters

    @property
    def properties(self):
        return self._properties

    @property
    def result_id(self):
        return self._result_id

    @property
    def timestamp(self):
        return self._timestamp

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def is_valid_mst(self):
        """V-1 edges, consistent cost, and the edges alone span every vertex"""
        if len(self._edges) != self._graph.vertex_count - 1:
            return False
        recomputed = sum(edge.weight for edge in self._edges)
        if not math.isclose(
            self._total_cost, recomputed, rel_tol=0.0, abs_tol=mst_config.COST_TOLERANCE
        ):
            return False
        return self._is_spanning_tree()

    def _is_spanning_tree(self):
        vertices = set(self._graph.vertex_ids)
        if not self._edges:
            return len(vertices) <= 1

        adjacency = defaultdict(list)
        for edge in self._edges:
            adjacency[edge.source].append(edge.target)
            adjacency[edge.target].append(edge.source)

        start = self._edges[0].source
        visited = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return visited == vertices

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_equivalent_to(self, other):
        if other is None:
            return False
        return self.cost_difference(other) < mst_config.COST_TOLERANCE

    def cost_difference(self, other):
        return abs(self._total_cost - other.total_cost)

    def performance_improvement(self, other):
        """Percent less wall time than other (negative when slower)"""
        other_time = other.performance_metrics.execution_time_ms
        if other_time == 0:
            return 0.0
        return (1 - self._metrics.execution_time_ms / other_time) * 100

    # ------------------------------------------------------------------
    # Analysis and export
    # ------------------------------------------------------------------

    def edges_sorted_by_weight(self):
        return sorted(self._edges, key=lambda edge: edge.weight)

    def critical_path_edges(self):
        """The three lightest selected edges"""
        return self.edges_sorted_by_weight()[:3]

    def detailed_analysis(self):
        vertex_count = self._graph.vertex_count
        edge_count = len(self._edges)
        metrics = self._metrics
        analysis = {
            "algorithm": self._algorithm_name,
            "resultId": self._result_id,
            "timestamp": self._timestamp,
            "validMST": self.is_valid_mst(),
            "totalCost": self._total_cost,
            "costPerVertex": self._total_cost / vertex_count if vertex_count else 0.0,
            "costPerEdge": self._total_cost / edge_count if edge_count else 0.0,
            "executionTimeMs": metrics.execution_time_ms,
            "operationsCount": metrics.operations_count,
            "efficiency": metrics.operations_per_ms,
            "allocations": metrics.allocations,
            "verticesInMST": self._properties.vertex_count,
            "edgesInMST": self._properties.edge_count,
            "mstDensity": self._properties.density,
            "averageDegree": self._properties.average_degree,
            "diameter": self._properties.diameter,
        }
        return MappingProxyType(analysis)

    def to_dict(self):
        return {
            "algorithmName": self._algorithm_name,
            "resultId": self._result_id,
            "timestamp": self._timestamp,
            "totalCost": self._total_cost,
            "edgesCount": len(self._edges),
            "performance": self._metrics.to_dict(),
            "parameters": self._parameters.to_dict(),
            "properties": self._properties.to_dict(),
            "isValid": self.is_valid_mst(),
            "edges": [edge.to_dict() for edge in self._edges],
        }

    def to_json(self, indent=2):
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self):
        return (
            f"MSTResult(algorithm={self._algorithm_name}, cost={self._total_cost:.2f}, "
            f"edges={len(self._edges)}, time={self._metrics.execution_time_ms:.3f}ms, "
            f"operations={self._metrics.operations_count}, valid={self.is_valid_mst()})"
        )


def faster_result(first, second):
    """Return whichever result ran in less wall time"""
    if first is None or second is None:
        raise ValueError("Both results must be provided")
    if first.performance_metrics.execution_time_ms < second.performance_metrics.execution_time_ms:
        return first
    return second


def create_comparison_report(first, second):
    first_metrics = first.performance_metrics
    second_metrics = second.performance_metrics
    report = {
        "costEquivalent": first.is_equivalent_to(second),
        "costDifference": first.cost_difference(second),
        "performanceImprovement": first.performance_improvement(second),
        "fasterAlgorithm": faster_result(first, second).algorithm_name,
        "moreEfficientAlgorithm": (
            first.algorithm_name
            if first_metrics.operations_per_ms > second_metrics.operations_per_ms
            else second.algorithm_name
        ),
        "fewerOperations": (
            first.algorithm_name
            if first_metrics.operations_count <= second_metrics.operations_count
            else second.algorithm_name
        ),
    }
    return MappingProxyType(report)
