"""
Pytest configuration and shared graph fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from create_graph_files import create_random_graph
from mst_graph import Graph


@pytest.fixture
def triangle():
    """A-B(1), B-C(2), A-C(3); MST cost 3."""
    return Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])


@pytest.fixture
def star():
    """Center with four leaves plus one leaf-leaf edge; MST cost 7."""
    return Graph.from_edges(
        [
            ("C", "L1", 1),
            ("C", "L2", 2),
            ("C", "L3", 3),
            ("C", "L4", 1),
            ("L1", "L2", 5),
        ]
    )


@pytest.fixture
def disconnected():
    """Two disjoint 2-vertex components."""
    return Graph.from_edges([("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def single_vertex():
    """One vertex, no edges."""
    return Graph.builder().add_vertex("A").build()


@pytest.fixture
def equal_weights():
    """Complete graph on four vertices with every weight equal."""
    return Graph.from_edges(
        [(u, v, 1) for u, v in [("A", "B"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "D"), ("C", "D")]]
    )


@pytest.fixture(params=[(8, 0.4, 1), (15, 0.3, 7), (25, 0.6, 13), (40, 0.15, 99)])
def random_graph(request):
    """Connected random graphs of varying size and density."""
    num_nodes, edge_probability, seed = request.param
    return create_random_graph(num_nodes, edge_probability, seed)
