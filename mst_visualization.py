"""
Figures for the MST comparison: forests drawn over their source graph and
operation counts per algorithm
"""

import matplotlib.pyplot as plt
import networkx as nx

from mst_check import to_networkx


def visualize_forests(graph, results, labels=None, save_path="mst.png"):
    """Draw the source graph next to the forest found by each result"""
    G = to_networkx(graph)
    simple = nx.Graph(G)
    pos = nx.spring_layout(simple, seed=42)
    if labels is None:
        labels = {v: v for v in simple.nodes()}

    fig, axes = plt.subplots(1, len(results) + 1, figsize=(7 * (len(results) + 1), 6))

    # Original graph
    ax = axes[0]
    ax.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        simple,
        pos,
        ax=ax,
        labels=labels,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
    )
    edge_labels = {
        (u, v): f"{min(d['weight'] for d in G.get_edge_data(u, v).values()):g}"
        for u, v in simple.edges()
    }
    nx.draw_networkx_edge_labels(simple, pos, edge_labels, ax=ax)

    for ax, result in zip(axes[1:], results):
        ax.set_title(
            f"MST ({result.algorithm}), weight {result.weight:g}",
            fontsize=14,
            fontweight="bold",
        )
        forest = nx.Graph()
        forest.add_nodes_from(simple.nodes())
        for e in result.edges:
            v = e.either()
            forest.add_edge(v, e.other(v), weight=e.weight)

        nx.draw(
            forest,
            pos,
            ax=ax,
            labels=labels,
            node_color="lightgreen",
            node_size=700,
            font_size=12,
            font_weight="bold",
            edge_color="red",
            width=3,
        )
        if result.edges:
            forest_labels = {
                (u, v): f"{d['weight']:g}" for u, v, d in forest.edges(data=True)
            }
            nx.draw_networkx_edge_labels(forest, pos, forest_labels, ax=ax)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path


def plot_operation_counts(records, save_path="operations.png"):
    """Scatter operation count against edge count, one series per algorithm"""
    fig, ax = plt.subplots(figsize=(8, 6))
    for algo, marker in (("prim", "o"), ("kruskal", "s")):
        points = sorted(
            (r["input_stats"]["edges"], r[algo]["operations_count"])
            for r in records
            if algo in r
        )
        if not points:
            continue
        xs, ys = zip(*points)
        ax.plot(xs, ys, marker=marker, linestyle="-", label=algo.capitalize())

    ax.set_xlabel("Edges")
    ax.set_ylabel("Operations")
    ax.set_title("Operation count by algorithm", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path
