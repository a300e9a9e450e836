"""
Vertex priority queues with decrease-key, used by Prim's algorithm

All strategies share the same small surface:
insert(vertex, key), extract_min(), decrease_key(vertex, key), is_empty()
"""

import abc
from enum import Enum

import mst_config


class QueueStrategy(Enum):
    BINARY_HEAP = "BINARY_HEAP"
    ARRAY_BASED = "ARRAY_BASED"
    D_ARY_HEAP = "D_ARY_HEAP"


class VertexQueue(abc.ABC):
    """Common bookkeeping for the queue strategies"""

    def __init__(self):
        self._keys = {}
        # Instrumentation, read by the algorithm after a run
        self.operations = 0
        self.comparisons = 0
        self.allocations = 0

    def key_of(self, vertex):
        return self._keys[vertex]

    def is_empty(self):
        return not self._keys

    def __len__(self):
        return len(self._keys)

    def __contains__(self, vertex):
        return vertex in self._keys

    def _check_insert(self, vertex):
        if vertex in self._keys:
            raise ValueError(f"Vertex {vertex} is already queued")

    def _check_queued(self, vertex):
        if vertex not in self._keys:
            raise KeyError(f"Vertex {vertex} is not in the queue")

    @abc.abstractmethod
    def insert(self, vertex, key):
        pass

    @abc.abstractmethod
    def extract_min(self):
        """Remove and return the vertex with the smallest key"""

    @abc.abstractmethod
    def decrease_key(self, vertex, new_key):
        pass


class DaryHeapQueue(VertexQueue):
    """
    Array-backed d-ary min-heap with a vertex -> position index

    The index lets decrease_key sift a vertex up in O(log_d n) without
    searching for it. Swaps update heap and index together.
    """

    def __init__(self, arity=mst_config.DEFAULT_HEAP_ARITY):
        super().__init__()
        if arity < 2:
            raise ValueError(f"Heap arity must be at least 2, got {arity}")
        self.arity = arity
        self._heap = []
        self._position = {}

    def insert(self, vertex, key):
        self._check_insert(vertex)
        self._keys[vertex] = key
        self._heap.append(vertex)
        self._position[vertex] = len(self._heap) - 1
        self.allocations += 1
        self.operations += 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self):
        if not self._heap:
            raise IndexError("extract_min from an empty queue")

        minimum = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._position[last] = 0
            self._sift_down(0)

        del self._position[minimum]
        del self._keys[minimum]
        self.operations += 1
        return minimum

    def decrease_key(self, vertex, new_key):
        """Lower the key of a queued vertex; returns False when new_key is not smaller"""
        self._check_queued(vertex)
        self.comparisons += 1
        if new_key >= self._keys[vertex]:
            return False
        self._keys[vertex] = new_key
        self._sift_up(self._position[vertex])
        self.operations += 1
        return True

    def _less(self, i, j):
        self.comparisons += 1
        return self._keys[self._heap[i]] < self._keys[self._heap[j]]

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i
        self._position[heap[j]] = j
        self.operations += 1

    def _sift_up(self, index):
        while index > 0:
            parent = (index - 1) // self.arity
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index):
        size = len(self._heap)
        while True:
            first_child = self.arity * index + 1
            if first_child >= size:
                break
            smallest = index
            for child in range(first_child, min(first_child + self.arity, size)):
                if self._less(child, smallest):
                    smallest = child
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest


class BinaryHeapQueue(DaryHeapQueue):
    """Binary min-heap with position index"""

    def __init__(self):
        super().__init__(arity=2)


class ArrayQueue(VertexQueue):
    """
    Unsorted array; extract_min scans in O(n), decrease_key is O(1)

    Worth it for small or dense graphs where heap upkeep is not amortized
    """

    def __init__(self):
        super().__init__()
        self._items = []

    def insert(self, vertex, key):
        self._check_insert(vertex)
        self._keys[vertex] = key
        self._items.append(vertex)
        self.allocations += 1
        self.operations += 1

    def extract_min(self):
        if not self._items:
            raise IndexError("extract_min from an empty queue")

        min_index = 0
        min_key = self._keys[self._items[0]]
        for i in range(1, len(self._items)):
            self.comparisons += 1
            key = self._keys[self._items[i]]
            # strict comparison: the first minimum in queue order wins
            if key < min_key:
                min_key = key
                min_index = i

        minimum = self._items.pop(min_index)
        del self._keys[minimum]
        self.operations += 1
        return minimum

    def decrease_key(self, vertex, new_key):
        self._check_queued(vertex)
        self.comparisons += 1
        if new_key >= self._keys[vertex]:
            return False
        self._keys[vertex] = new_key
        self.operations += 1
        return True


def create_queue(strategy, arity=mst_config.DEFAULT_HEAP_ARITY):
    """Instantiate the queue implementation for a QueueStrategy"""
    if strategy == QueueStrategy.BINARY_HEAP:
        return BinaryHeapQueue()
    if strategy == QueueStrategy.ARRAY_BASED:
        return ArrayQueue()
    if strategy == QueueStrategy.D_ARY_HEAP:
        return DaryHeapQueue(arity)
    raise ValueError(f"Unknown queue strategy: {strategy}")
