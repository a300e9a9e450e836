"""
Create and load graph files for the MST algorithms
Random connected graphs come from networkx; files use the
graph_metadata.json layout (nodes plus [u, v, weight] edge triples)
"""

import argparse
import json
import logging
import os
import random

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

import mst_config
from mst_errors import InvalidGraphError
from mst_graph import Graph, GraphBuilder

logger = logging.getLogger(__name__)


def create_random_nx_graph(
    num_nodes=mst_config.DEFAULT_NUM_NODES,
    edge_probability=mst_config.DEFAULT_EDGE_PROBABILITY,
    seed=mst_config.DEFAULT_SEED,
):
    """Random connected networkx graph with integer weights"""
    rng = random.Random(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Retry with fresh seeds until connected
    attempts = 0
    while not nx.is_connected(G) and attempts < mst_config.MAX_CONNECT_ATTEMPTS:
        G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=rng.randint(0, 10000))
        attempts += 1

    if not nx.is_connected(G):
        # Force connectivity by chaining the components
        components = [sorted(c) for c in nx.connected_components(G)]
        for first, second in zip(components, components[1:]):
            G.add_edge(first[0], second[0])
        logger.debug(f"Linked {len(components)} components after {attempts} attempts")

    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(mst_config.MIN_EDGE_WEIGHT, mst_config.MAX_EDGE_WEIGHT)

    return G


def create_random_graph(
    num_nodes=mst_config.DEFAULT_NUM_NODES,
    edge_probability=mst_config.DEFAULT_EDGE_PROBABILITY,
    seed=mst_config.DEFAULT_SEED,
):
    """Random connected Graph with integer weights"""
    if num_nodes < 1:
        raise InvalidGraphError(f"Number of nodes must be positive, got {num_nodes}")
    return Graph.from_networkx(create_random_nx_graph(num_nodes, edge_probability, seed))


def graph_metadata(graph):
    return {
        "num_nodes": graph.vertex_count,
        "num_edges": graph.edge_count,
        "nodes": graph.vertex_ids,
        "edges": [[e.source, e.target, e.weight] for e in graph.edges],
    }


def save_graph(graph, output_dir=mst_config.GRAPH_DATA_DIR, filename=mst_config.GRAPH_METADATA_FILE):
    """Write graph metadata to output_dir/filename and return the path"""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    with open(path, "w") as f:
        json.dump(graph_metadata(graph), f, indent=2)
    logger.info(f"Saved graph with {graph.vertex_count} nodes to {path}")
    return path


def load_graph(path):
    """
    Read a graph file

    Accepts the metadata layout written by save_graph as well as
    {"nodes": [...], "edges": [{"from": ..., "to": ..., "weight": ...}]}
    """
    with open(path, "r") as f:
        data = json.load(f)

    if data.get("edges") and isinstance(data["edges"][0], (list, tuple)):
        builder = GraphBuilder()
        for node in data.get("nodes", range(data.get("num_nodes", 0))):
            builder.add_vertex(node)
        for u, v, w in data["edges"]:
            builder.add_edge(u, v, w)
        graph = builder.build()
    else:
        graph = Graph.from_dict(data)

    logger.debug(f"Loaded {graph!r} from {path}")
    return graph


def visualize_graph(graph, output_dir, filename="input_graph.png"):
    """Visualize the graph and save to file"""
    os.makedirs(output_dir, exist_ok=True)
    G = graph.to_networkx()

    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(G, seed=42)

    nx.draw(
        G,
        pos,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )

    edge_labels = nx.get_edge_attributes(G, "weight")
    nx.draw_networkx_edge_labels(G, pos, edge_labels, font_size=10)

    plt.title("Input Graph for MST Algorithms", fontsize=14, fontweight="bold")

    output_file = os.path.join(output_dir, filename)
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    plt.close()
    logger.info(f"Visualization saved to {output_file}")
    return output_file


def print_graph_summary(graph):
    """Print summary of the graph"""
    stats = graph.statistics()
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {stats['vertices']}")
    print(f"Number of edges: {stats['edges']}")
    print(f"Density: {stats['density']:.3f} ({stats['graphType']})")
    print(f"Is connected: {stats['connected']}")
    print(
        f"Degree min/avg/max: {stats['minDegree']}/"
        f"{stats['averageDegree']:.2f}/{stats['maxDegree']}"
    )

    print("\nEdge list (with weights):")
    for edge in sorted(graph.edges, key=lambda e: (e.source, e.target)):
        print(f"  ({edge.source}, {edge.target}): weight = {edge.weight:g}")

    # Reference MST weight using NetworkX
    mst = nx.minimum_spanning_tree(graph.to_networkx(), weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))
    print(f"\nExpected MST weight (NetworkX): {mst_weight:g}")
    print("=" * 70)


def main(argv=None):
    """Main function to create graph files"""
    parser = argparse.ArgumentParser(description="Generate a random graph file for the MST algorithms")
    parser.add_argument(
        "--nodes", type=int, default=mst_config.DEFAULT_NUM_NODES, help="Number of nodes (default: 6)"
    )
    parser.add_argument(
        "--edge-prob",
        type=float,
        default=mst_config.DEFAULT_EDGE_PROBABILITY,
        help="Edge probability (default: 0.5)",
    )
    parser.add_argument("--seed", type=int, default=mst_config.DEFAULT_SEED, help="Random seed (default: 42)")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=mst_config.GRAPH_DATA_DIR,
        help="Output directory (default: graph_data)",
    )
    parser.add_argument("--no-plot", action="store_true", help="Skip the input graph figure")

    args = parser.parse_args(argv)
    mst_config.configure_logging()

    print("=" * 70)
    print("Graph File Generator for MST Algorithms")
    print("=" * 70)

    print("\nGenerating random graph...")
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(args.nodes, args.edge_prob, args.seed)
    print_graph_summary(graph)

    path = save_graph(graph, args.output_dir)
    if not args.no_plot:
        visualize_graph(graph, args.output_dir)

    print("\n" + "=" * 70)
    print(f"Graph file created: {path}")
    print(f"To check both algorithms:\n  python check_mst.py {path}")
    print("=" * 70)
    return path


if __name__ == "__main__":
    main()
