"""
Timing of solver runs and writing of results to JSON and CSV
"""

import csv
import json
import os
import time

SUMMARY_HEADER = [
    "Dataset",
    "Graph_ID",
    "Vertices",
    "Edges",
    "Algorithm",
    "Total_Cost",
    "Operations_Count",
    "Execution_Time_ms",
]


def timed_run(solver, graph, **kwargs):
    """Run `solver(graph)` and attach the elapsed wall-clock time in ms"""
    start = time.perf_counter()
    result = solver(graph, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result.with_elapsed(elapsed_ms)


def mst_edges_to_json(edges, index_to_label):
    """Forest edges with endpoints mapped back to node labels"""
    out = []
    for e in edges:
        v = e.either()
        w = e.other(v)
        out.append(
            {"from": index_to_label[v], "to": index_to_label[w], "weight": e.weight}
        )
    return out


def result_to_json(result, index_to_label):
    return {
        "mst_edges": mst_edges_to_json(result.edges, index_to_label),
        "total_cost": result.weight,
        "operations_count": result.operation_count,
        "execution_time_ms": result.elapsed_ms,
    }


def graph_record(dataset, graph_data, results):
    """Per-graph output record; `results` maps algorithm name -> MSTResult"""
    graph = graph_data.graph
    index_to_label = graph_data.index_to_label()
    record = {
        "dataset": dataset,
        "graph_id": graph_data.id,
        "input_stats": {
            "vertices": graph.vertex_count(),
            "edges": graph.edge_count(),
        },
    }
    for name, result in results.items():
        record[name] = result_to_json(result, index_to_label)
    return record


def write_dataset_json(records, file_path):
    """Write the records of one dataset as {"results": [...]}"""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, "w") as f:
        json.dump({"results": records}, f, indent=2)
    return file_path


def write_summary_csv(records, file_path, algorithms=("prim", "kruskal")):
    """One CSV row per (graph, algorithm) across every dataset"""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, "w", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(SUMMARY_HEADER)
        for record in records:
            stats = record["input_stats"]
            for algo in algorithms:
                if algo not in record:
                    continue
                res = record[algo]
                elapsed = res["execution_time_ms"]
                writer.writerow(
                    [
                        record["dataset"],
                        record["graph_id"],
                        stats["vertices"],
                        stats["edges"],
                        algo,
                        f"{res['total_cost']:.6f}",
                        res["operations_count"],
                        f"{elapsed:.3f}" if elapsed is not None else "",
                    ]
                )
    return file_path
