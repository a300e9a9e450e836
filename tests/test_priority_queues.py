"""
Unit tests for the vertex priority queues.
"""

import random

import pytest

from priority_queues import (
    ArrayQueue,
    BinaryHeapQueue,
    DaryHeapQueue,
    QueueStrategy,
    VertexQueue,
    create_queue,
)

QUEUE_FACTORIES = [BinaryHeapQueue, ArrayQueue, lambda: DaryHeapQueue(3), lambda: DaryHeapQueue(4)]


@pytest.fixture(params=QUEUE_FACTORIES, ids=["binary", "array", "3-ary", "4-ary"])
def queue(request):
    return request.param()


class TestQueueContract:
    """Behavior shared by every queue strategy."""

    def test_extracts_in_key_order(self, queue):
        """Random keys come out sorted."""
        rng = random.Random(5)
        keys = {f"v{i}": rng.randint(0, 50) for i in range(40)}
        for vertex, key in keys.items():
            queue.insert(vertex, key)
        extracted = [keys[queue.extract_min()] for _ in range(len(keys))]
        assert extracted == sorted(extracted)
        assert queue.is_empty()

    def test_decrease_key_reorders(self, queue):
        for vertex, key in [("A", 5), ("B", 3), ("C", 8)]:
            queue.insert(vertex, key)
        assert queue.decrease_key("C", 1)
        assert queue.extract_min() == "C"
        assert queue.extract_min() == "B"

    def test_decrease_key_ignores_larger_keys(self, queue):
        """A key that is not smaller is a no-op."""
        queue.insert("A", 2)
        assert not queue.decrease_key("A", 2)
        assert not queue.decrease_key("A", 9)
        assert queue.key_of("A") == 2

    def test_membership_and_length(self, queue):
        queue.insert("A", 1)
        queue.insert("B", 2)
        assert "A" in queue and len(queue) == 2
        queue.extract_min()
        assert "A" not in queue

    def test_duplicate_insert_rejected(self, queue):
        queue.insert("A", 1)
        with pytest.raises(ValueError):
            queue.insert("A", 0)

    def test_extract_from_empty_raises(self, queue):
        with pytest.raises(IndexError):
            queue.extract_min()

    def test_decrease_key_unknown_vertex_raises(self, queue):
        with pytest.raises(KeyError):
            queue.decrease_key("missing", 0)

    def test_counters_advance(self, queue):
        queue.insert("A", 1)
        queue.insert("B", 0)
        queue.extract_min()
        assert queue.operations > 0
        assert queue.allocations == 2


class TestStrategies:
    """Strategy specific details."""

    def test_array_queue_prefers_first_minimum(self):
        """Equal keys leave in insertion order."""
        queue = ArrayQueue()
        for vertex in "XYZ":
            queue.insert(vertex, 1)
        assert [queue.extract_min() for _ in range(3)] == ["X", "Y", "Z"]

    def test_base_queue_is_abstract(self):
        with pytest.raises(TypeError):
            VertexQueue()

    def test_heap_arity_validated(self):
        with pytest.raises(ValueError):
            DaryHeapQueue(1)

    @pytest.mark.parametrize(
        "strategy,expected",
        [
            (QueueStrategy.BINARY_HEAP, BinaryHeapQueue),
            (QueueStrategy.ARRAY_BASED, ArrayQueue),
            (QueueStrategy.D_ARY_HEAP, DaryHeapQueue),
        ],
    )
    def test_create_queue(self, strategy, expected):
        assert isinstance(create_queue(strategy), expected)

    def test_create_queue_uses_arity(self):
        assert create_queue(QueueStrategy.D_ARY_HEAP, arity=6).arity == 6
