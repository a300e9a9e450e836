"""
Unit tests for the union-find structures.
"""

import itertools

import pytest

from union_find import DisjointSet, IndexedDisjointSet, UnionFindStrategy, create_union_find

VERTICES = ["A", "B", "C", "D", "E", "F"]

CONFIGS = list(
    itertools.product(
        [UnionFindStrategy.MAP_BASED, UnionFindStrategy.ARRAY_BASED], [True, False], [True, False]
    )
)


@pytest.fixture(params=CONFIGS, ids=lambda c: f"{c[0].value}-pc{c[1]}-rank{c[2]}")
def forest(request):
    strategy, compression, by_rank = request.param
    return create_union_find(strategy, VERTICES, compression, by_rank)


class TestUnionFind:
    """Every configuration gives the same answers."""

    def test_starts_as_singletons(self, forest):
        assert forest.set_count() == len(VERTICES)
        for vertex in VERTICES:
            assert forest.find(vertex) == vertex

    def test_union_merges_once(self, forest):
        """A second union of the same pair reports no merge."""
        assert forest.union("A", "B")
        assert not forest.union("B", "A")
        assert forest.connected("A", "B")
        assert forest.set_count() == len(VERTICES) - 1

    def test_transitive_connectivity(self, forest):
        forest.union("A", "B")
        forest.union("C", "D")
        assert not forest.connected("A", "D")
        forest.union("B", "C")
        assert forest.connected("A", "D")
        assert forest.find("A") == forest.find("D")
        assert forest.set_count() == 3

    def test_long_chain(self, forest):
        """Chaining every vertex leaves a single set."""
        for first, second in zip(VERTICES, VERTICES[1:]):
            assert forest.union(first, second)
        assert forest.set_count() == 1
        assert forest.operations > 0

    def test_unknown_vertex_raises(self, forest):
        with pytest.raises(KeyError):
            forest.find("Z")


class TestOptimizations:
    """Path compression and rank details."""

    def test_path_compression_flattens(self):
        forest = DisjointSet(VERTICES, path_compression=True, union_by_rank=False)
        for first, second in zip(VERTICES, VERTICES[1:]):
            forest.union(first, second)
        root = forest.find("A")
        assert all(forest.parent[v] == root for v in VERTICES)

    def test_without_compression_chain_remains(self):
        forest = DisjointSet(["A", "B", "C"], path_compression=False, union_by_rank=False)
        forest.union("A", "B")
        forest.union("B", "C")
        forest.find("A")
        assert forest.parent["A"] == "B"

    def test_union_by_rank_attaches_smaller_tree(self):
        forest = DisjointSet(["A", "B", "C"])
        forest.union("A", "B")
        forest.union("C", "A")
        assert forest.find("C") == forest.find("A") == "A"
        assert forest.rank["A"] == 1

    @pytest.mark.parametrize("cls", [DisjointSet, IndexedDisjointSet])
    def test_shared_setup(self, cls):
        """Flags and counters are set the same way by both layouts."""
        forest = cls(VERTICES, path_compression=False, union_by_rank=False)
        assert not forest.path_compression
        assert not forest.union_by_rank
        assert forest.operations == 0
        assert forest.allocations == len(VERTICES)
        assert forest.members() == VERTICES

    def test_accepts_any_iterable(self):
        forest = IndexedDisjointSet(iter(VERTICES))
        assert forest.set_count() == len(VERTICES)

    def test_create_union_find_types(self):
        assert isinstance(create_union_find(UnionFindStrategy.MAP_BASED, VERTICES), DisjointSet)
        assert isinstance(
            create_union_find(UnionFindStrategy.ARRAY_BASED, VERTICES), IndexedDisjointSet
        )
