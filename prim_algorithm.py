"""
Prim's algorithm for minimum spanning trees
Grows a single tree from an arbitrary start vertex, always attaching the
cheapest vertex still outside the tree
"""

import logging
import math

import mst_config
from mst_algorithm import MSTAlgorithm
from mst_result import AlgorithmParameters
from priority_queues import QueueStrategy, create_queue

logger = logging.getLogger(__name__)


class PrimAlgorithm(MSTAlgorithm):
    name = "Prim"
    description = "Prim's algorithm with a pluggable decrease-key priority queue"
    optimized_for = "DENSE"

    def __init__(
        self,
        queue_strategy=QueueStrategy.BINARY_HEAP,
        heap_arity=mst_config.DEFAULT_HEAP_ARITY,
    ):
        super().__init__()
        self.queue_strategy = QueueStrategy(queue_strategy)
        self.heap_arity = heap_arity

    @classmethod
    def create_default(cls):
        return cls()

    @classmethod
    def create_optimized_for_sparse_graphs(cls):
        return cls(QueueStrategy.BINARY_HEAP)

    @classmethod
    def create_optimized_for_dense_graphs(cls):
        return cls(QueueStrategy.ARRAY_BASED)

    @classmethod
    def create_optimized_for_large_graphs(cls):
        return cls(QueueStrategy.D_ARY_HEAP)

    def clone(self):
        return PrimAlgorithm(self.queue_strategy, self.heap_arity)

    def _execute(self, graph, counters):
        vertex_ids = graph.vertex_ids

        # Per-vertex state: best connecting weight and the edge achieving it
        key = {}
        min_edge = {}
        for vertex in vertex_ids:
            key[vertex] = math.inf
            min_edge[vertex] = None
            counters.allocations += 1
            counters.operations += 1

        start = vertex_ids[0]
        key[start] = 0.0

        queue = create_queue(self.queue_strategy, self.heap_arity)
        for vertex in vertex_ids:
            queue.insert(vertex, key[vertex])

        target = len(vertex_ids) - 1
        mst_edges = []
        while not queue.is_empty() and len(mst_edges) < target:
            current = queue.extract_min()
            counters.queue_operations += 1
            counters.operations += 1

            edge = min_edge[current]
            if edge is not None:
                edge.in_mst = True
                mst_edges.append(edge)
                counters.operations += 1
                logger.debug(f"Prim: added {edge.id} ({edge.weight:.2f})")
            elif current != start:
                # Nothing left in the queue is reachable from the tree
                break

            for edge in graph.adjacent_edges(current):
                counters.operations += 1
                counters.comparisons += 1
                neighbor = edge.other_vertex(current)
                if neighbor in queue and edge.weight < key[neighbor]:
                    key[neighbor] = edge.weight
                    min_edge[neighbor] = edge
                    queue.decrease_key(neighbor, edge.weight)
                    counters.decrease_key_operations += 1
                    counters.operations += 2

        counters.operations += queue.operations
        counters.comparisons += queue.comparisons
        counters.allocations += queue.allocations
        return mst_edges

    def _result_parameters(self):
        return AlgorithmParameters(
            variant=self.queue_strategy.value,
            uses_union_find=False,
            uses_priority_queue=True,
            early_termination=True,
            settings=self.algorithm_parameters(),
        )

    def time_complexity(self):
        if self.queue_strategy == QueueStrategy.ARRAY_BASED:
            return "O(V^2)"
        return "O(E log V)"

    def space_complexity(self):
        return "O(V + E)"

    def algorithm_parameters(self):
        params = {"queueStrategy": self.queue_strategy.value}
        if self.queue_strategy == QueueStrategy.D_ARY_HEAP:
            params["heapArity"] = self.heap_arity
        return params

    def analyze_suitability(self, graph):
        vertex_count = graph.vertex_count
        edge_count = graph.edge_count
        density = graph.density
        return {
            "vertexCount": vertex_count,
            "edgeCount": edge_count,
            "density": density,
            "suitableForPrim": (
                density > mst_config.SPARSE_DENSITY_THRESHOLD
                or vertex_count < mst_config.PRIM_SMALL_GRAPH_VERTICES
            ),
            "expectedOperations": self._estimate_operations(vertex_count, edge_count),
            "recommendedQueueStrategy": recommend_queue_strategy(vertex_count, density).value,
            "recommendedOptimization": recommend_optimization(vertex_count, edge_count),
        }

    def _estimate_operations(self, vertex_count, edge_count):
        if self.queue_strategy == QueueStrategy.ARRAY_BASED:
            return vertex_count * vertex_count
        return int(edge_count * math.log(vertex_count + 1))

    def __repr__(self):
        return f"PrimAlgorithm(queue_strategy={self.queue_strategy.value}, heap_arity={self.heap_arity})"


def recommend_queue_strategy(vertex_count, density):
    if (
        vertex_count < mst_config.PRIM_ARRAY_QUEUE_VERTICES
        or density > mst_config.DENSE_DENSITY_THRESHOLD
    ):
        return QueueStrategy.ARRAY_BASED
    if vertex_count < mst_config.PRIM_BINARY_HEAP_VERTICES:
        return QueueStrategy.BINARY_HEAP
    return QueueStrategy.D_ARY_HEAP


def recommend_optimization(vertex_count, edge_count):
    if edge_count > vertex_count * vertex_count / 4:
        return "Use the array-based queue for this dense graph"
    if vertex_count > 10000:
        return "Use a d-ary heap for this large sparse graph"
    return "Binary heap is a good fit for this graph"
