"""
Weighted undirected graph model used by the MST algorithms
Edges are validated when they are declared; a graph never changes after
it is built except for the in-MST annotation on its edges
"""

import logging
import math
from collections import namedtuple
from enum import Enum

import networkx as nx

import mst_config
from mst_errors import InvalidGraphError

logger = logging.getLogger(__name__)


class EdgeType(Enum):
    STANDARD = "STANDARD"
    BRIDGE = "BRIDGE"
    CRITICAL = "CRITICAL"
    HIGHWAY = "HIGHWAY"
    LOCAL = "LOCAL"


class EdgeStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    BLOCKED = "BLOCKED"


class GraphType(Enum):
    SPARSE = "SPARSE"
    DENSE = "DENSE"
    UNKNOWN = "UNKNOWN"


Vertex = namedtuple("Vertex", ["id", "degree"])


def vertex_key(vertex):
    """Normalize a vertex identifier to its string key"""
    if vertex is None:
        raise InvalidGraphError("Vertex identifier cannot be None")
    return vertex if isinstance(vertex, str) else str(vertex)


def canonical_edge_id(u, v):
    """Order-independent display identifier of the edge u-v"""
    return f"{u}-{v}" if u < v else f"{v}-{u}"


def edge_key(u, v):
    """Order-independent endpoint pair; unambiguous even when ids contain '-'"""
    return (u, v) if u < v else (v, u)


def _lookup_key(vertex):
    return None if vertex is None else vertex_key(vertex)


def validate_edge(source, target, weight):
    """Check endpoints and weight of an edge, returning normalized values"""
    if source is None or target is None:
        raise InvalidGraphError("From and To vertices cannot be None")
    source = vertex_key(source)
    target = vertex_key(target)
    if source == target:
        raise InvalidGraphError(f"Self-loops are not allowed (vertex {source})")

    try:
        weight = float(weight)
    except (TypeError, ValueError):
        raise InvalidGraphError(f"Edge weight must be a number, got {weight!r}") from None
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidGraphError(f"Edge weight must be finite, got {weight}")
    if weight < 0:
        raise InvalidGraphError(f"Edge weight cannot be negative ({source}-{target}: {weight})")
    return source, target, weight


class Edge:
    """Undirected weighted edge between two distinct vertices"""

    def __init__(self, source, target, weight=1.0, edge_type=EdgeType.STANDARD, label=""):
        source, target, weight = validate_edge(source, target, weight)
        self._source = source
        self._target = target
        self._weight = weight
        self._id = canonical_edge_id(source, target)
        self._key = edge_key(source, target)
        self._edge_type = edge_type
        self.label = label

        # Annotations written by algorithm runs
        self.in_mst = False
        self.visited = False
        self.traversal_count = 0
        self.status = EdgeStatus.ACTIVE

    @property
    def source(self):
        return self._source

    @property
    def target(self):
        return self._target

    @property
    def weight(self):
        return self._weight

    @property
    def id(self):
        return self._id

    @property
    def key(self):
        return self._key

    @property
    def edge_type(self):
        return self._edge_type

    @property
    def endpoints(self):
        return self._source, self._target

    def other_vertex(self, vertex):
        """Return the endpoint opposite to vertex"""
        if vertex == self._source:
            return self._target
        if vertex == self._target:
            return self._source
        raise InvalidGraphError(f"Vertex {vertex} is not part of edge {self._id}")

    def contains_vertex(self, vertex):
        return vertex == self._source or vertex == self._target

    def connects(self, u, v):
        return (self._source == u and self._target == v) or (
            self._source == v and self._target == u
        )

    def mark_traversed(self):
        self.traversal_count += 1
        self.visited = True

    def reset_traversal(self):
        self.visited = False
        self.traversal_count = 0

    def reversed(self):
        """New edge with swapped endpoints; the canonical id is unchanged"""
        return Edge(
            self._target,
            self._source,
            self._weight,
            edge_type=self._edge_type,
            label=f"{self.label} (reversed)",
        )

    def is_valid(self):
        return (
            self._source != self._target
            and self._weight >= 0
            and bool(self._id)
        )

    def is_self_loop(self):
        return self._source == self._target

    def is_available(self):
        return self.status == EdgeStatus.ACTIVE and not self.is_self_loop()

    def is_critical(self):
        return self._edge_type in (EdgeType.BRIDGE, EdgeType.CRITICAL)

    def normalized_weight(self, max_weight):
        """Weight scaled into [0, 1] by max_weight"""
        if max_weight <= 0:
            return 0.0
        return min(self._weight / max_weight, 1.0)

    def to_dict(self):
        return {
            "from": self._source,
            "to": self._target,
            "weight": self._weight,
            "type": self._edge_type.value,
            "inMST": self.in_mst,
        }

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._weight, self._source, self._target) < (
            other._weight,
            other._source,
            other._target,
        )

    def __repr__(self):
        return (
            f"Edge(from={self._source!r}, to={self._target!r}, weight={self._weight:.2f}, "
            f"type={self._edge_type.value}, in_mst={self.in_mst}, status={self.status.value})"
        )


class Graph:
    """
    Immutable weighted undirected graph

    vertices: iterable of vertex ids declared up front (may be isolated)
    edges: iterable of Edge objects; missing endpoints are added as vertices
    """

    def __init__(self, edges=(), vertices=()):
        # vertex id -> incident edges, in declaration order
        self._adjacency = {}
        self._edges = []
        # endpoint pair -> first edge declared between them
        self._edge_index = {}

        for vertex in vertices:
            self._adjacency.setdefault(vertex_key(vertex), [])

        for edge in edges:
            if not isinstance(edge, Edge):
                raise InvalidGraphError(f"Expected an Edge, got {edge!r}")
            self._edges.append(edge)
            self._edge_index.setdefault(edge.key, edge)
            self._adjacency.setdefault(edge.source, []).append(edge)
            self._adjacency.setdefault(edge.target, []).append(edge)

        self._edges = tuple(self._edges)
        for vertex, incident in self._adjacency.items():
            self._adjacency[vertex] = tuple(incident)

        logger.debug(
            f"Built graph with {self.vertex_count} vertices and {self.edge_count} edges"
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def builder(cls):
        return GraphBuilder()

    @classmethod
    def from_edges(cls, edges):
        """Build from Edge objects or (u, v) / (u, v, weight) tuples"""
        builder = GraphBuilder()
        for item in edges:
            if isinstance(item, Edge):
                builder.add_existing_edge(item)
            else:
                builder.add_edge(*item)
        return builder.build()

    @classmethod
    def from_dict(cls, data):
        """
        Build from JSON-like data:
        {"nodes": ["A", {"id": "B"}], "edges": [{"from": "A", "to": "B", "weight": 1.5}]}
        """
        builder = GraphBuilder()
        for node in data.get("nodes", []):
            builder.add_vertex(node["id"] if isinstance(node, dict) else node)

        for edge_data in data.get("edges", []):
            if isinstance(edge_data, dict):
                source = edge_data.get("from", edge_data.get("source"))
                target = edge_data.get("to", edge_data.get("target"))
                weight = edge_data.get("weight", 1.0)
            else:
                source, target, weight = edge_data
            builder.add_edge(source, target, weight)
        return builder.build()

    @classmethod
    def from_networkx(cls, nx_graph, weight="weight"):
        """Build from a networkx graph, reading edge weights from the given attribute"""
        if nx_graph.is_directed() or nx_graph.is_multigraph():
            raise InvalidGraphError("Only simple undirected networkx graphs are supported")
        builder = GraphBuilder()
        for node in nx_graph.nodes():
            builder.add_vertex(node)
        for u, v, data in nx_graph.edges(data=True):
            builder.add_edge(u, v, data.get(weight, 1.0))
        return builder.build()

    @classmethod
    def create_empty(cls):
        return cls()

    # ------------------------------------------------------------------
    # Vertex queries
    # ------------------------------------------------------------------

    @property
    def vertex_ids(self):
        return list(self._adjacency)

    @property
    def vertex_count(self):
        return len(self._adjacency)

    def vertices(self):
        return [Vertex(v, len(incident)) for v, incident in self._adjacency.items()]

    def get_vertex(self, vertex):
        vertex = _lookup_key(vertex)
        incident = self._adjacency.get(vertex)
        if incident is None:
            return None
        return Vertex(vertex, len(incident))

    def contains_vertex(self, vertex):
        return _lookup_key(vertex) in self._adjacency

    def degree(self, vertex):
        return len(self._adjacency.get(_lookup_key(vertex), ()))

    def vertex_index(self):
        """Stable vertex id -> position mapping"""
        return {vertex: index for index, vertex in enumerate(self._adjacency)}

    # ------------------------------------------------------------------
    # Edge queries
    # ------------------------------------------------------------------

    @property
    def edges(self):
        return self._edges

    @property
    def edge_count(self):
        return len(self._edges)

    def get_edge(self, u, v):
        if u is None or v is None or u == v:
            return None
        return self._edge_index.get(edge_key(vertex_key(u), vertex_key(v)))

    def contains_edge(self, u, v):
        return self.get_edge(u, v) is not None

    def adjacent_edges(self, vertex):
        return self._adjacency.get(_lookup_key(vertex), ())

    def adjacent_vertices(self, vertex):
        vertex = _lookup_key(vertex)
        return [edge.other_vertex(vertex) for edge in self._adjacency.get(vertex, ())]

    def weight_matrix(self):
        """Dense weight matrix in vertex_index order; inf where no edge"""
        index = self.vertex_index()
        size = len(index)
        matrix = [[math.inf] * size for _ in range(size)]
        for i in range(size):
            matrix[i][i] = 0.0
        for edge in self._edges:
            i, j = index[edge.source], index[edge.target]
            weight = min(matrix[i][j], edge.weight)
            matrix[i][j] = weight
            matrix[j][i] = weight
        return matrix

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def density(self):
        v = self.vertex_count
        if v <= 1:
            return 0.0
        return self.edge_count / (v * (v - 1) / 2)

    @property
    def graph_type(self):
        density = self.density
        if density < mst_config.SPARSE_DENSITY_THRESHOLD:
            return GraphType.SPARSE
        if density > mst_config.DENSE_DENSITY_THRESHOLD:
            return GraphType.DENSE
        return GraphType.UNKNOWN

    def _reachable(self, start):
        """Depth-first traversal, returning the set of vertices reachable from start"""
        visited = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for edge in self._adjacency[current]:
                neighbor = edge.other_vertex(current)
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return visited

    def is_connected(self):
        if not self._adjacency:
            return True
        start = next(iter(self._adjacency))
        return len(self._reachable(start)) == self.vertex_count

    def connected_components(self):
        """Split into one subgraph per connected component"""
        components = []
        seen = set()
        for vertex in self._adjacency:
            if vertex in seen:
                continue
            component = self._reachable(vertex)
            seen |= component
            components.append(self.subgraph(component))
        return components

    def subgraph(self, vertex_subset):
        """Graph induced by vertex_subset; edges are copied, vertices keep graph order"""
        keep = {vertex_key(v) for v in vertex_subset}
        vertices = [v for v in self._adjacency if v in keep]
        edges = [
            Edge(edge.source, edge.target, edge.weight, edge.edge_type, edge.label)
            for edge in self._edges
            if edge.source in keep and edge.target in keep
        ]
        return Graph(edges, vertices)

    def is_valid(self):
        """No duplicate endpoint pairs and every endpoint is a known vertex"""
        seen = set()
        for edge in self._edges:
            if edge.key in seen:
                return False
            seen.add(edge.key)
            if edge.source not in self._adjacency or edge.target not in self._adjacency:
                return False
        return True

    def statistics(self):
        degrees = [len(incident) for incident in self._adjacency.values()]
        return {
            "vertices": self.vertex_count,
            "edges": self.edge_count,
            "density": self.density,
            "graphType": self.graph_type.value,
            "connected": self.is_connected(),
            "averageDegree": sum(degrees) / len(degrees) if degrees else 0.0,
            "minDegree": min(degrees, default=0),
            "maxDegree": max(degrees, default=0),
        }

    # ------------------------------------------------------------------
    # In-MST annotation
    # ------------------------------------------------------------------

    def mst_edges(self):
        return [edge for edge in self._edges if edge.in_mst]

    def mst_total_cost(self):
        return sum(edge.weight for edge in self._edges if edge.in_mst)

    def reset_mst(self):
        for edge in self._edges:
            edge.in_mst = False

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self):
        return {
            "nodes": self.vertex_ids,
            "edges": [
                {"from": e.source, "to": e.target, "weight": e.weight} for e in self._edges
            ],
        }

    def to_networkx(self):
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(self._adjacency)
        for edge in self._edges:
            nx_graph.add_edge(edge.source, edge.target, weight=edge.weight, in_mst=edge.in_mst)
        return nx_graph

    def __repr__(self):
        return (
            f"Graph(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"type={self.graph_type.value}, density={self.density:.3f}, "
            f"connected={self.is_connected()})"
        )


class GraphBuilder:
    """Collects vertices and validated edges, then builds a Graph"""

    def __init__(self):
        self._vertices = []
        self._known = set()
        self._edges = []

    def add_vertex(self, vertex):
        key = vertex_key(vertex)
        if key not in self._known:
            self._known.add(key)
            self._vertices.append(key)
        return self

    def add_edge(self, source, target, weight=1.0, edge_type=EdgeType.STANDARD, label=""):
        # Edge() validates before anything is registered
        edge = Edge(source, target, weight, edge_type=edge_type, label=label)
        return self.add_existing_edge(edge)

    def add_existing_edge(self, edge):
        self.add_vertex(edge.source)
        self.add_vertex(edge.target)
        self._edges.append(edge)
        return self

    def build(self):
        return Graph(self._edges, self._vertices)
