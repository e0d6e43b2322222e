"""
Create JSON dataset files of random weighted graphs for the MST comparison
"""

import argparse
import json
import os
import random

import matplotlib.pyplot as plt
import networkx as nx


def vertex_label(index):
    """0 -> A, 25 -> Z, 26 -> AA, ..."""
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def create_random_graph(
    num_nodes=6, edge_probability=0.5, seed=42, connected=True, real_weights=False
):
    """Create a random graph with random weights"""
    rng = random.Random(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    if connected and num_nodes > 1:
        attempts = 0
        while not nx.is_connected(G) and attempts < 100:
            G = nx.erdos_renyi_graph(
                num_nodes, edge_probability, seed=rng.randint(0, 10000)
            )
            attempts += 1

        if not nx.is_connected(G):
            # Force connectivity by adding edges
            components = list(nx.connected_components(G))
            for i in range(len(components) - 1):
                node1 = min(components[i])
                node2 = min(components[i + 1])
                G.add_edge(node1, node2)

    # Assign random weights to edges
    for u, v in G.edges():
        if real_weights:
            G[u][v]["weight"] = round(rng.uniform(1.0, 100.0), 2)
        else:
            G[u][v]["weight"] = rng.randint(1, 10)

    return G


def graph_to_json(graph, graph_id):
    """Dataset entry for one graph: labelled nodes and from/to/weight edges"""
    labels = {node: vertex_label(i) for i, node in enumerate(sorted(graph.nodes()))}
    return {
        "id": graph_id,
        "nodes": [labels[node] for node in sorted(graph.nodes())],
        "edges": [
            {"from": labels[u], "to": labels[v], "weight": data["weight"]}
            for u, v, data in graph.edges(data=True)
        ],
    }


def create_dataset_file(graphs, output_file):
    """Write a list of networkx graphs as one dataset file"""
    directory = os.path.dirname(output_file)
    if directory:
        os.makedirs(directory, exist_ok=True)

    document = {"graphs": [graph_to_json(g, i) for i, g in enumerate(graphs, 1)]}
    with open(output_file, "w") as f:
        json.dump(document, f, indent=2)

    print(f"  Created {output_file}: {len(graphs)} graphs")
    return output_file


def visualize_graph(graph, output_file):
    """Draw a generated graph with its dataset labels, one colour per component"""
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(graph, seed=42)
    labels = {node: vertex_label(i) for i, node in enumerate(sorted(graph.nodes()))}

    colours = {}
    for i, component in enumerate(nx.connected_components(graph)):
        for node in component:
            colours[node] = i

    nx.draw(
        graph,
        pos,
        labels=labels,
        node_color=[colours[node] for node in graph.nodes()],
        cmap=plt.cm.Pastel1,
        node_size=700,
        font_weight="bold",
        edge_color="gray",
    )
    nx.draw_networkx_edge_labels(
        graph, pos, nx.get_edge_attributes(graph, "weight"), font_size=9
    )

    plt.title(
        f"Generated graph: {graph.number_of_nodes()} nodes, "
        f"{graph.number_of_edges()} edges",
        fontweight="bold",
    )
    plt.savefig(output_file, dpi=200, bbox_inches="tight")
    plt.close()
    print(f"\n  Picture saved to {output_file}")


def print_graph_summary(graph):
    """Print summary of the graph"""
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {graph.number_of_nodes()}")
    print(f"Number of edges: {graph.number_of_edges()}")
    if graph.number_of_nodes():
        print(f"Connected components: {nx.number_connected_components(graph)}")

    # Calculate expected MST weight using NetworkX
    mst = nx.minimum_spanning_tree(graph, weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))
    print(f"Expected MST weight (NetworkX): {mst_weight}")
    print("=" * 70)


def main(argv=None):
    """Main function to create a dataset file"""
    parser = argparse.ArgumentParser(
        description="Generate a JSON dataset of random weighted graphs"
    )
    parser.add_argument(
        "--graphs", type=int, default=5, help="Number of graphs (default: 5)"
    )
    parser.add_argument(
        "--nodes", type=int, default=6, help="Number of nodes per graph (default: 6)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--disconnected",
        action="store_true",
        help="Keep disconnected graphs instead of forcing connectivity",
    )
    parser.add_argument(
        "--real-weights",
        action="store_true",
        help="Use real weights in [1, 100] instead of integers in [1, 10]",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/small.json",
        help="Output file (default: data/small.json)",
    )
    parser.add_argument(
        "--plot", action="store_true", help="Save a picture of the first graph"
    )

    args = parser.parse_args(argv)

    print("=" * 70)
    print("Graph Dataset Generator for MST Comparison")
    print("=" * 70)
    print(f"\nGenerating {args.graphs} random graphs...")
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graphs = []
    for i in range(args.graphs):
        graphs.append(
            create_random_graph(
                args.nodes,
                args.edge_prob,
                seed=args.seed + i,
                connected=not args.disconnected,
                real_weights=args.real_weights,
            )
        )

    if graphs:
        print_graph_summary(graphs[0])
    create_dataset_file(graphs, args.output)

    if args.plot and graphs:
        visualize_graph(graphs[0], os.path.splitext(args.output)[0] + "_graph1.png")

    print("\n" + "=" * 70)
    print("Dataset created successfully!")
    print("\nTo run the comparison:\n  python mst_experiments.py")
    print("=" * 70)


if __name__ == "__main__":
    main()
