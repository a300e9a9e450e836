"""
Kruskal's algorithm for minimum spanning trees
Scans edges in ascending weight order and keeps every edge that joins two
different components of a union-find forest
"""

import heapq
import logging
import math
from enum import Enum

import mst_config
from mst_algorithm import MSTAlgorithm
from mst_result import AlgorithmParameters
from union_find import UnionFindStrategy, create_union_find

logger = logging.getLogger(__name__)


class SortingStrategy(Enum):
    BUILTIN = "BUILTIN"
    QUICKSORT = "QUICKSORT"
    MERGESORT = "MERGESORT"
    HEAP = "HEAP"
    BUCKET_SORT = "BUCKET_SORT"


def _weight(edge):
    return edge.weight


def builtin_sort(edges, counters):
    """Python's stable sort on weight"""
    n = len(edges)
    counters.comparisons += int(n * math.log2(n + 1))
    return sorted(edges, key=_weight)


def quick_sort(edges, counters):
    """Iterative three-way quicksort; not stable"""
    items = list(edges)
    stack = [(0, len(items) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pivot = items[(low + high) // 2].weight
        lt, i, gt = low, low, high
        while i <= gt:
            counters.comparisons += 1
            weight = items[i].weight
            if weight < pivot:
                items[lt], items[i] = items[i], items[lt]
                lt += 1
                i += 1
                counters.operations += 1
            elif weight > pivot:
                items[i], items[gt] = items[gt], items[i]
                gt -= 1
                counters.operations += 1
            else:
                i += 1
        stack.append((low, lt - 1))
        stack.append((gt + 1, high))
    return items


def merge_sort(edges, counters):
    """Bottom-up stable merge sort"""
    items = list(edges)
    width = 1
    n = len(items)
    while width < n:
        merged = []
        for left in range(0, n, 2 * width):
            mid = min(left + width, n)
            right = min(left + 2 * width, n)
            i, j = left, mid
            while i < mid and j < right:
                counters.comparisons += 1
                if items[i].weight <= items[j].weight:
                    merged.append(items[i])
                    i += 1
                else:
                    merged.append(items[j])
                    j += 1
            merged.extend(items[i:mid])
            merged.extend(items[j:right])
        counters.operations += n
        items = merged
        width *= 2
    return items


def heap_sort(edges, counters):
    """Sort through a binary heap; the position tiebreak keeps it stable"""
    heap = [(edge.weight, position, edge) for position, edge in enumerate(edges)]
    heapq.heapify(heap)
    counters.operations += len(heap)
    result = []
    while heap:
        result.append(heapq.heappop(heap)[2])
        counters.operations += int(math.log2(len(heap) + 1)) + 1
    return result


def bucket_sort(edges, counters):
    """Distribute by weight / max weight into buckets, sort each, concatenate"""
    if not edges:
        return []
    max_weight = max(edge.weight for edge in edges)
    bucket_count = min(len(edges), mst_config.MAX_SORT_BUCKETS)
    buckets = [[] for _ in range(bucket_count)]

    for edge in edges:
        if max_weight > 0:
            index = int(edge.weight / max_weight * (bucket_count - 1))
        else:
            index = 0
        buckets[index].append(edge)
        counters.operations += 1

    result = []
    for bucket in buckets:
        counters.comparisons += int(len(bucket) * math.log2(len(bucket) + 1))
        result.extend(sorted(bucket, key=_weight))
    counters.operations += len(result)
    return result


_SORTERS = {
    SortingStrategy.BUILTIN: builtin_sort,
    SortingStrategy.QUICKSORT: quick_sort,
    SortingStrategy.MERGESORT: merge_sort,
    SortingStrategy.HEAP: heap_sort,
    SortingStrategy.BUCKET_SORT: bucket_sort,
}


def sort_edges(edges, strategy, counters):
    """Return a new list of edges in ascending weight order"""
    counters.operations += len(edges)
    return _SORTERS[SortingStrategy(strategy)](edges, counters)


class KruskalAlgorithm(MSTAlgorithm):
    name = "Kruskal"
    description = "Kruskal's algorithm over sorted edges with a union-find forest"
    optimized_for = "SPARSE"

    def __init__(
        self,
        sorting_strategy=SortingStrategy.BUILTIN,
        union_find_strategy=UnionFindStrategy.MAP_BASED,
        path_compression=True,
        union_by_rank=True,
        early_termination=True,
    ):
        super().__init__()
        self.sorting_strategy = SortingStrategy(sorting_strategy)
        self.union_find_strategy = UnionFindStrategy(union_find_strategy)
        self.path_compression = path_compression
        self.union_by_rank = union_by_rank
        self.early_termination = early_termination

    @classmethod
    def create_default(cls):
        return cls()

    @classmethod
    def create_optimized_for_sparse_graphs(cls):
        return cls(
            sorting_strategy=SortingStrategy.QUICKSORT,
            union_find_strategy=UnionFindStrategy.MAP_BASED,
        )

    @classmethod
    def create_optimized_for_dense_graphs(cls):
        return cls(
            sorting_strategy=SortingStrategy.BUCKET_SORT,
            union_find_strategy=UnionFindStrategy.ARRAY_BASED,
            union_by_rank=False,
        )

    def clone(self):
        return KruskalAlgorithm(
            self.sorting_strategy,
            self.union_find_strategy,
            self.path_compression,
            self.union_by_rank,
            self.early_termination,
        )

    def _execute(self, graph, counters):
        sorted_edges = sort_edges(list(graph.edges), self.sorting_strategy, counters)
        forest = create_union_find(
            self.union_find_strategy,
            graph.vertex_ids,
            path_compression=self.path_compression,
            union_by_rank=self.union_by_rank,
        )

        target = graph.vertex_count - 1
        mst_edges = []
        for edge in sorted_edges:
            if self.early_termination and len(mst_edges) >= target:
                break
            counters.comparisons += 1
            counters.operations += 1
            counters.find_operations += 2

            # union() is False when both endpoints already share a component
            if forest.union(edge.source, edge.target):
                edge.in_mst = True
                mst_edges.append(edge)
                counters.union_operations += 1
                counters.operations += 2
                logger.debug(f"Kruskal: added {edge.id} ({edge.weight:.2f})")

        counters.operations += forest.operations
        counters.allocations += forest.allocations + len(sorted_edges)
        return mst_edges

    def _result_parameters(self):
        return AlgorithmParameters(
            variant=f"{self.union_find_strategy.value}_{self.sorting_strategy.value}",
            uses_union_find=True,
            uses_priority_queue=self.sorting_strategy == SortingStrategy.HEAP,
            early_termination=self.early_termination,
            settings=self.algorithm_parameters(),
        )

    def time_complexity(self):
        return "O(E log E)"

    def space_complexity(self):
        return "O(V + E)"

    def algorithm_parameters(self):
        return {
            "sortingStrategy": self.sorting_strategy.value,
            "unionFindStrategy": self.union_find_strategy.value,
            "pathCompression": self.path_compression,
            "unionByRank": self.union_by_rank,
            "earlyTermination": self.early_termination,
        }

    def analyze_suitability(self, graph):
        vertex_count = graph.vertex_count
        edge_count = graph.edge_count
        density = graph.density
        return {
            "vertexCount": vertex_count,
            "edgeCount": edge_count,
            "density": density,
            "suitableForKruskal": density < mst_config.KRUSKAL_MAX_DENSITY,
            "expectedOperations": estimate_operations(vertex_count, edge_count),
            "recommendedSortingStrategy": recommend_sorting_strategy(edge_count).value,
            "recommendedUnionFindStrategy": recommend_union_find_strategy(vertex_count).value,
        }

    def __repr__(self):
        return (
            f"KruskalAlgorithm(sorting={self.sorting_strategy.value}, "
            f"union_find={self.union_find_strategy.value}, "
            f"path_compression={self.path_compression}, union_by_rank={self.union_by_rank}, "
            f"early_termination={self.early_termination})"
        )


def estimate_operations(vertex_count, edge_count):
    """Sorting O(E log E) plus union-find work"""
    sorting = int(edge_count * math.log(edge_count + 1))
    union_find = int(edge_count * math.log(vertex_count + 1))
    return sorting + union_find


def recommend_sorting_strategy(edge_count):
    if edge_count < mst_config.KRUSKAL_QUICKSORT_EDGES:
        return SortingStrategy.QUICKSORT
    if edge_count < mst_config.KRUSKAL_MERGESORT_EDGES:
        return SortingStrategy.MERGESORT
    return SortingStrategy.BUCKET_SORT


def recommend_union_find_strategy(vertex_count):
    if vertex_count < mst_config.KRUSKAL_ARRAY_UNION_FIND_VERTICES:
        return UnionFindStrategy.ARRAY_BASED
    return UnionFindStrategy.MAP_BASED
