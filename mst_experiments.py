"""
Run Prim and Kruskal over a series of random graphs
Each experiment is cross-checked against networkx and plotted side by side
"""

import argparse
import json
import logging
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

import mst_config
from create_graph_files import create_random_graph
from kruskal_algorithm import KruskalAlgorithm
from mst_result import create_comparison_report
from prim_algorithm import PrimAlgorithm

logger = logging.getLogger(__name__)

GRAPH_CONFIGS = [
    {"num_nodes": 5, "edge_probability": 0.5, "seed": 42},
    {"num_nodes": 6, "edge_probability": 0.4, "seed": 100},
    {"num_nodes": 7, "edge_probability": 0.6, "seed": 200},
    {"num_nodes": 6, "edge_probability": 0.7, "seed": 300},
    {"num_nodes": 10, "edge_probability": 0.8, "seed": 400},
    {"num_nodes": 20, "edge_probability": 0.3, "seed": 500},
]


def visualize(result, save_path="mst.png"):
    """Draw the input graph next to the selected tree"""
    G = result.graph.to_networkx()
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    # Layout
    pos = nx.spring_layout(G, seed=42)

    # Original graph
    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        G,
        pos,
        ax=ax1,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
    )
    edge_labels = nx.get_edge_attributes(G, "weight")
    nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1)

    # MST
    ax2.set_title(f"MST ({result.algorithm_name})", fontsize=14, fontweight="bold")
    mst_graph = nx.Graph()
    mst_graph.add_nodes_from(G.nodes())
    for edge in result.mst_edges:
        mst_graph.add_edge(edge.source, edge.target, weight=edge.weight)

    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        with_labels=True,
        node_color="lightgreen",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="red",
        width=3,
    )

    if result.mst_edges:
        edge_labels = nx.get_edge_attributes(mst_graph, "weight")
        nx.draw_networkx_edge_labels(mst_graph, pos, edge_labels, ax=ax2)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info(f"Visualization saved to {save_path}")

    return mst_graph


def run_experiment(graph, experiment_num, output_dir=mst_config.VISUALIZATION_DIR, plot=True):
    """Run both algorithms on one graph and compare them with networkx"""
    print(f"\n{'=' * 70}")
    print(f"Experiment {experiment_num}: {graph.vertex_count} nodes, {graph.edge_count} edges")
    print("=" * 70)

    prim_result = PrimAlgorithm.create_default().compute_mst(graph)
    kruskal_result = KruskalAlgorithm.create_default().compute_mst(graph)

    # Verify with NetworkX
    nx_mst = nx.minimum_spanning_tree(graph.to_networkx(), weight="weight")
    nx_weight = sum(d["weight"] for _, _, d in nx_mst.edges(data=True))

    is_correct = all(
        abs(result.total_cost - nx_weight) < mst_config.COST_TOLERANCE and result.is_valid_mst()
        for result in (prim_result, kruskal_result)
    )
    comparison = create_comparison_report(prim_result, kruskal_result)

    print(f"\nPrim MST Weight: {prim_result.total_cost:g}")
    print(f"Kruskal MST Weight: {kruskal_result.total_cost:g}")
    print(f"NetworkX MST Weight: {nx_weight:g}")
    print(
        f"Time (ms): Prim {prim_result.performance_metrics.execution_time_ms:.3f}, "
        f"Kruskal {kruskal_result.performance_metrics.execution_time_ms:.3f}"
    )
    print(f"Fewer operations: {comparison['fewerOperations']}")
    print(f"Status: {'CORRECT' if is_correct else 'INCORRECT'}")

    if plot:
        os.makedirs(output_dir, exist_ok=True)
        visualize(prim_result, os.path.join(output_dir, f"mst_exp{experiment_num}.png"))

    return {
        "experiment": experiment_num,
        "num_nodes": graph.vertex_count,
        "num_edges": graph.edge_count,
        "mst_edges": [
            [edge.source, edge.target, edge.weight] for edge in prim_result.edges_sorted_by_weight()
        ],
        "prim_weight": prim_result.total_cost,
        "kruskal_weight": kruskal_result.total_cost,
        "networkx_weight": nx_weight,
        "prim_time_ms": prim_result.performance_metrics.execution_time_ms,
        "kruskal_time_ms": kruskal_result.performance_metrics.execution_time_ms,
        "prim_operations": prim_result.performance_metrics.operations_count,
        "kruskal_operations": kruskal_result.performance_metrics.operations_count,
        "is_correct": is_correct,
        "edges_found": len(prim_result.mst_edges),
        "edges_expected": graph.vertex_count - 1,
    }


def print_summary(all_results):
    print("\n" + "=" * 70)
    print(" " * 25 + "SUMMARY")
    print("=" * 70)
    print(f"{'Exp':<5} {'Nodes':<7} {'Edges':<7} {'MST Wt':<9} {'Found':<10} {'Status':<10}")
    print("-" * 70)

    for result in all_results:
        status = "PASS" if result["is_correct"] else "FAIL"
        found_str = f"{result['edges_found']}/{result['edges_expected']}"
        print(
            f"{result['experiment']:<5} {result['num_nodes']:<7} {result['num_edges']:<7} "
            f"{result['prim_weight']:<9g} {found_str:<10} {status:<10}"
        )


def main(argv=None):
    """Loop through the graph configurations"""
    parser = argparse.ArgumentParser(description="Compare Prim and Kruskal on random graphs")
    parser.add_argument(
        "--output", type=str, default=mst_config.EXPERIMENTS_FILE, help="Results JSON file"
    )
    parser.add_argument(
        "--plot-dir", type=str, default=mst_config.VISUALIZATION_DIR, help="Figure directory"
    )
    parser.add_argument("--no-plot", action="store_true", help="Skip the figures")
    args = parser.parse_args(argv)
    mst_config.configure_logging()

    print("=" * 70)
    print(" " * 15 + "Prim vs Kruskal - Multiple Experiments")
    print("=" * 70)

    all_results = []
    for i, config in enumerate(GRAPH_CONFIGS, 1):
        graph = create_random_graph(**config)
        all_results.append(run_experiment(graph, i, args.plot_dir, plot=not args.no_plot))

    print_summary(all_results)

    with open(args.output, "w") as f:
        json.dump(all_results, f, indent=2)

    print("\n" + "=" * 70)
    print(f"All results saved to: {args.output}")
    if not args.no_plot:
        print(f"Visualizations saved in: {args.plot_dir}")
    print("=" * 70)
    return all_results


if __name__ == "__main__":
    main()
