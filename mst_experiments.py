"""
Prim vs. Kruskal comparison over JSON graph datasets

For every graph in every dataset both algorithms are run, timed and checked
(optimality conditions plus a NetworkX cross-check). Results are written per
dataset to results/<dataset>_output.json and across all datasets to
results/summary_all.csv.
"""

import argparse
import math
import os
import sys

from input_loader import load_graphs
from kruskal_mst import kruskal_mst
from mst_check import check_mst, networkx_mst_weight
from mst_visualization import plot_operation_counts, visualize_forests
from output_writer import graph_record, timed_run, write_dataset_json, write_summary_csv
from prim_mst import prim_mst

DATASETS = ["small", "medium", "large", "extralarge"]
SOLVERS = [("prim", prim_mst), ("kruskal", kruskal_mst)]
CROSS_CHECK_TOLERANCE = 1e-9


def run_graph(graph_data, check=True):
    """
    Run every solver on one graph
    Returns (results by algorithm name, list of failure messages)
    """
    graph = graph_data.graph
    results = {}
    failures = []

    for name, solver in SOLVERS:
        results[name] = timed_run(solver, graph)

    if check:
        for name, result in results.items():
            verdict = check_mst(graph, result.edges, result.weight)
            if not verdict:
                failures.append(f"{name}: {verdict.describe()}")

        nx_weight = networkx_mst_weight(graph)
        for name, result in results.items():
            if not math.isclose(
                result.weight, nx_weight, rel_tol=0.0, abs_tol=CROSS_CHECK_TOLERANCE
            ):
                failures.append(
                    f"{name}: weight {result.weight} differs from NetworkX {nx_weight}"
                )

    return results, failures


def run_dataset(dataset, file_path, check=True, plot_dir=None, max_plot_vertices=30):
    """Run the comparison on every graph of one dataset file"""
    print(f"\n{'=' * 70}")
    print(f"Dataset: {dataset} ({file_path})")
    print("=" * 70)

    records = []
    failures = []
    for graph_data in load_graphs(file_path):
        graph = graph_data.graph
        results, graph_failures = run_graph(graph_data, check=check)
        records.append(graph_record(dataset, graph_data, results))

        prim, kruskal = results["prim"], results["kruskal"]
        status = "✗ FAIL" if graph_failures else ("✓ OK" if check else "-")
        print(
            f"Graph {graph_data.id:<4} V={graph.vertex_count():<6} E={graph.edge_count():<7} "
            f"cost={prim.weight:<12.4f} prim_ops={prim.operation_count:<9} "
            f"kruskal_ops={kruskal.operation_count:<9} {status}"
        )
        for message in graph_failures:
            print(f"  ⚠ {message}")
            failures.append(f"{dataset}/{graph_data.id} {message}")

        if plot_dir and graph.vertex_count() <= max_plot_vertices:
            os.makedirs(plot_dir, exist_ok=True)
            visualize_forests(
                graph,
                [prim, kruskal],
                labels=graph_data.index_to_label(),
                save_path=os.path.join(plot_dir, f"{dataset}_graph{graph_data.id}.png"),
            )

    return records, failures


def print_summary(records):
    print("\n" + "=" * 70)
    print(" " * 30 + "SUMMARY")
    print("=" * 70)
    print(
        f"{'Dataset':<12} {'ID':<5} {'V':<7} {'E':<8} {'Algorithm':<9} "
        f"{'Cost':<14} {'Ops':<10} {'Time ms':<9}"
    )
    print("-" * 70)
    for record in records:
        stats = record["input_stats"]
        for algo, _ in SOLVERS:
            res = record[algo]
            print(
                f"{record['dataset']:<12} {record['graph_id']:<5} {stats['vertices']:<7} "
                f"{stats['edges']:<8} {algo:<9} {res['total_cost']:<14.4f} "
                f"{res['operations_count']:<10} {res['execution_time_ms']:<9.3f}"
            )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare Prim's and Kruskal's MST algorithms on JSON datasets"
    )
    parser.add_argument(
        "--data-dir", default="data", help="Directory with <dataset>.json files"
    )
    parser.add_argument(
        "--results-dir", default="results", help="Directory for output files"
    )
    parser.add_argument(
        "--datasets",
        nargs="+",
        default=DATASETS,
        help=f"Dataset names to run (default: {' '.join(DATASETS)})",
    )
    parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip optimality checks and the NetworkX cross-check",
    )
    parser.add_argument(
        "--plot", action="store_true", help="Save forest pictures and an operations chart"
    )
    parser.add_argument(
        "--max-plot-vertices",
        type=int,
        default=30,
        help="Largest graph to draw with --plot (default: 30)",
    )
    args = parser.parse_args(argv)

    print("=" * 70)
    print(" " * 15 + "MST Algorithms - Prim vs. Kruskal")
    print("=" * 70)

    all_records = []
    all_failures = []
    plot_dir = os.path.join(args.results_dir, "plots") if args.plot else None

    for dataset in args.datasets:
        input_file = os.path.join(args.data_dir, f"{dataset}.json")
        try:
            records, failures = run_dataset(
                dataset,
                input_file,
                check=not args.no_check,
                plot_dir=plot_dir,
                max_plot_vertices=args.max_plot_vertices,
            )
        except FileNotFoundError:
            print(f"\nDataset {dataset}: file {input_file} not found, skipping")
            continue

        output_file = os.path.join(args.results_dir, f"{dataset}_output.json")
        write_dataset_json(records, output_file)
        print(f"JSON saved for dataset: {dataset} -> {output_file}")
        all_records.extend(records)
        all_failures.extend(failures)

    if not all_records:
        print("\nNo graphs were processed.")
        return 1

    print_summary(all_records)

    summary_file = write_summary_csv(
        all_records, os.path.join(args.results_dir, "summary_all.csv")
    )
    print("\n" + "=" * 70)
    print(f"Global summary saved to: {summary_file}")
    if plot_dir:
        chart = plot_operation_counts(
            all_records, os.path.join(args.results_dir, "operations.png")
        )
        print(f"Operations chart saved to: {chart}")

    if all_failures:
        print(f"✗ {len(all_failures)} verification failure(s)")
        for message in all_failures:
            print(f"  {message}")
        print("=" * 70)
        return 1

    if not args.no_check:
        print("✓ All results verified")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
