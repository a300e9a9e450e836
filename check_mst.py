"""
Check Prim and Kruskal on a saved graph file against networkx
"""

import argparse
import logging
import math

import networkx as nx

import mst_config
from create_graph_files import load_graph
from kruskal_algorithm import KruskalAlgorithm
from mst_errors import MSTError
from prim_algorithm import PrimAlgorithm

logger = logging.getLogger(__name__)


def reference_mst(graph):
    """networkx MST of graph as (edges, total weight)"""
    G = graph.to_networkx()
    mst = nx.minimum_spanning_tree(G, weight="weight")
    total = sum(d["weight"] for _, _, d in mst.edges(data=True))
    return mst, total


def check_graph(graph, algorithms=None):
    """Run each algorithm on graph and compare its cost with networkx"""
    if algorithms is None:
        algorithms = [PrimAlgorithm.create_default(), KruskalAlgorithm.create_default()]

    mst, expected = reference_mst(graph)
    report = {
        "vertices": graph.vertex_count,
        "edges": graph.edge_count,
        "connected": graph.is_connected(),
        "expectedCost": expected,
        "expectedEdges": mst.number_of_edges(),
        "algorithms": {},
    }

    for algorithm in algorithms:
        result = algorithm.compute_mst(graph)
        matches = math.isclose(
            result.total_cost, expected, rel_tol=0.0, abs_tol=mst_config.COST_TOLERANCE
        )
        if not matches:
            logger.warning(
                f"{algorithm.name}: cost {result.total_cost} differs from networkx {expected}"
            )
        report["algorithms"][algorithm.name] = {
            "totalCost": result.total_cost,
            "edges": sorted(edge.id for edge in result.mst_edges),
            "valid": result.is_valid_mst(),
            "matchesReference": matches,
            "executionTimeMs": result.performance_metrics.execution_time_ms,
            "operations": result.performance_metrics.operations_count,
        }

    report["allMatch"] = all(
        entry["matchesReference"] and entry["valid"] for entry in report["algorithms"].values()
    )
    return report


def check_graph_file(path):
    return check_graph(load_graph(path))


def print_report(report):
    print(f"Expected MST weight (NetworkX): {report['expectedCost']:g}")
    print(f"Number of edges: {report['expectedEdges']}")
    print(f"Input graph connected: {report['connected']}")

    for name, entry in report["algorithms"].items():
        status = "OK" if entry["matchesReference"] and entry["valid"] else "MISMATCH"
        print(f"\n{name}: {status}")
        print(f"  Total weight: {entry['totalCost']:g}")
        print(f"  Valid spanning tree: {entry['valid']}")
        print(f"  Time: {entry['executionTimeMs']:.3f} ms, operations: {entry['operations']}")
        print(f"  Edges: {', '.join(entry['edges'])}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare Prim and Kruskal against networkx")
    parser.add_argument(
        "path",
        nargs="?",
        default=f"{mst_config.GRAPH_DATA_DIR}/{mst_config.GRAPH_METADATA_FILE}",
        help="Graph metadata file",
    )
    args = parser.parse_args(argv)
    mst_config.configure_logging()

    try:
        report = check_graph_file(args.path)
    except MSTError as e:
        print(f"Error: {e}")
        return 2

    print_report(report)
    return 0 if report["allMatch"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
