"""
Disjoint-set (union-find) structures used by Kruskal's algorithm

Path compression and union by rank can be switched off independently;
that only changes the amortized cost, never the answers
"""

from enum import Enum


class UnionFindStrategy(Enum):
    MAP_BASED = "MAP_BASED"
    ARRAY_BASED = "ARRAY_BASED"


class DisjointSet:
    """Union-find keyed directly by vertex id"""

    def __init__(self, vertices, path_compression=True, union_by_rank=True):
        self.path_compression = path_compression
        self.union_by_rank = union_by_rank
        self.operations = 0
        self.allocations = 0
        self._build(list(vertices))

    def _build(self, vertices):
        """Create one singleton set per vertex"""
        self.parent = {}
        self.rank = {}
        for vertex in vertices:
            self.parent[vertex] = vertex
            self.rank[vertex] = 0
            self.allocations += 1

    def _parent(self, node):
        return self.parent[node]

    def _set_parent(self, node, root):
        self.parent[node] = root

    def _rank(self, node):
        return self.rank[node]

    def _set_rank(self, node, value):
        self.rank[node] = value

    def _node(self, vertex):
        if vertex not in self.parent:
            raise KeyError(f"Unknown vertex {vertex}")
        return vertex

    def _label(self, node):
        return node

    def _find_node(self, node):
        self.operations += 1
        root = node
        while self._parent(root) != root:
            root = self._parent(root)
            self.operations += 1

        if self.path_compression:
            # second pass: point every node on the path straight at the root
            while node != root:
                following = self._parent(node)
                self._set_parent(node, root)
                node = following
        return root

    def find(self, vertex):
        """Return the representative of the set containing vertex"""
        return self._label(self._find_node(self._node(vertex)))

    def union(self, a, b):
        """Merge the sets of a and b; False when they already share a set"""
        root_a = self._find_node(self._node(a))
        root_b = self._find_node(self._node(b))
        self.operations += 1
        if root_a == root_b:
            return False

        if self.union_by_rank:
            rank_a = self._rank(root_a)
            rank_b = self._rank(root_b)
            if rank_a < rank_b:
                self._set_parent(root_a, root_b)
            elif rank_a > rank_b:
                self._set_parent(root_b, root_a)
            else:
                self._set_parent(root_b, root_a)
                self._set_rank(root_a, rank_a + 1)
        else:
            self._set_parent(root_a, root_b)
        return True

    def connected(self, a, b):
        return self._find_node(self._node(a)) == self._find_node(self._node(b))

    def set_count(self):
        return len({self._find_node(self._node(v)) for v in self.members()})

    def members(self):
        return list(self.parent)


class IndexedDisjointSet(DisjointSet):
    """Union-find over list positions, with a vertex -> position map"""

    def _build(self, vertices):
        self._vertices = vertices
        self._index = {vertex: i for i, vertex in enumerate(vertices)}
        self.parent = list(range(len(vertices)))
        self.rank = [0] * len(vertices)
        self.allocations += len(vertices)

    def _node(self, vertex):
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(f"Unknown vertex {vertex}") from None

    def _label(self, node):
        return self._vertices[node]

    def members(self):
        return list(self._vertices)


def create_union_find(strategy, vertices, path_compression=True, union_by_rank=True):
    """Instantiate the union-find implementation for a UnionFindStrategy"""
    if strategy == UnionFindStrategy.MAP_BASED:
        return DisjointSet(vertices, path_compression, union_by_rank)
    if strategy == UnionFindStrategy.ARRAY_BASED:
        return IndexedDisjointSet(vertices, path_compression, union_by_rank)
    raise ValueError(f"Unknown union-find strategy: {strategy}")
