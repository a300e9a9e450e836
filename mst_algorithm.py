"""
Shared capability implemented by the MST algorithms

compute_mst() validates the input, runs the algorithm with a fresh
per-call counter context, checks that a full spanning tree came out and
packs everything into an MSTResult
"""

import abc
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, fields

from mst_errors import InvalidGraphError, MSTComputationError
from mst_result import MSTResult, PerformanceMetrics

logger = logging.getLogger(__name__)


@dataclass
class OperationCounters:
    """Instrumentation owned by a single compute_mst call"""

    operations: int = 0
    comparisons: int = 0
    queue_operations: int = 0
    decrease_key_operations: int = 0
    union_operations: int = 0
    find_operations: int = 0
    allocations: int = 0

    def reset(self):
        for counter in fields(self):
            setattr(self, counter.name, 0)

    def as_dict(self):
        return asdict(self)

    def to_metrics(self, execution_time_ms):
        return PerformanceMetrics(
            execution_time_ms=execution_time_ms,
            operations_count=self.operations,
            comparisons_count=self.comparisons,
            union_operations=self.union_operations,
            find_operations=self.find_operations,
            priority_queue_operations=self.queue_operations + self.decrease_key_operations,
            decrease_key_operations=self.decrease_key_operations,
            allocations=self.allocations,
        )


def validate_graph(graph):
    """Reject inputs no MST algorithm can work on"""
    if graph is None:
        raise InvalidGraphError("Graph cannot be None")
    if graph.vertex_count == 0:
        raise InvalidGraphError("Graph must contain at least one vertex")


class MSTAlgorithm(abc.ABC):
    name = "MST"
    description = "Minimum Spanning Tree Algorithm"
    optimized_for = "GENERAL"

    def __init__(self):
        # Counters of the most recent call; every call gets a new object
        self._counters = OperationCounters()

    @property
    def algorithm_name(self):
        return self.name

    def compute_mst(self, graph):
        """Compute a minimum spanning tree of graph"""
        validate_graph(graph)

        counters = OperationCounters()
        self._counters = counters
        graph.reset_mst()

        logger.debug(f"{self.name}: starting on {graph!r}")
        start = time.perf_counter()
        mst_edges = self._execute(graph, counters)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        expected = graph.vertex_count - 1
        if len(mst_edges) != expected:
            logger.warning(
                f"{self.name}: collected {len(mst_edges)} of {expected} edges, "
                f"graph is disconnected"
            )
            graph.reset_mst()
            raise MSTComputationError(self.name, expected, len(mst_edges))

        total_cost = sum(edge.weight for edge in mst_edges)
        result = MSTResult(
            self.name,
            graph,
            mst_edges,
            total_cost=total_cost,
            performance_metrics=counters.to_metrics(elapsed_ms),
            parameters=self._result_parameters(),
        )
        logger.info(
            f"{self.name}: {len(mst_edges)} edges, cost {total_cost:.2f}, "
            f"{counters.operations} operations in {elapsed_ms:.3f} ms"
        )
        return result

    def compute_mst_batch(self, graphs, max_workers=None):
        """
        One result per graph, in input order

        Every graph is handled by a clone of this instance so each call
        owns its counters. With max_workers > 1 the graphs run on a
        thread pool; a graph object listed twice is then processed
        sequentially, since runs rewrite the graph's in-MST annotation.
        """
        graphs = list(graphs)
        parallel = max_workers is not None and max_workers > 1
        if parallel and len({id(g) for g in graphs}) != len(graphs):
            logger.warning(f"{self.name}: repeated graph in batch, running sequentially")
            parallel = False

        if not parallel:
            return [self.clone().compute_mst(graph) for graph in graphs]

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda graph: self.clone().compute_mst(graph), graphs))

    def supports_graph(self, graph):
        if graph is None:
            return False
        return graph.vertex_count > 0 and graph.is_connected()

    def is_valid_mst(self, graph, result):
        if graph is None or result is None:
            return False
        expected = graph.vertex_count - 1
        return len(result.mst_edges) == expected and result.is_valid_mst()

    def performance_metrics(self):
        """Counters of the most recent compute_mst call"""
        return self._counters.as_dict()

    def reset(self):
        self._counters.reset()

    @abc.abstractmethod
    def _execute(self, graph, counters):
        """Run the algorithm, returning the selected edges"""

    @abc.abstractmethod
    def _result_parameters(self):
        """AlgorithmParameters recorded on every result"""

    @abc.abstractmethod
    def time_complexity(self):
        pass

    @abc.abstractmethod
    def space_complexity(self):
        pass

    @abc.abstractmethod
    def analyze_suitability(self, graph):
        pass

    @abc.abstractmethod
    def algorithm_parameters(self):
        pass

    @abc.abstractmethod
    def clone(self):
        """Same configuration, fresh counters"""


def compute_mst_batch(algorithm, graphs, max_workers=None):
    return algorithm.compute_mst_batch(graphs, max_workers=max_workers)
