import csv
import json
import os
import shutil

import matplotlib

matplotlib.use("Agg")

import create_graph_files
import mst_experiments
from input_loader import load_graphs
from mst_visualization import plot_operation_counts, visualize_forests
from output_writer import graph_record

DATA_DIR = os.path.join(os.path.dirname(__file__), os.pardir, "data")


def test_run_graph_verifies_both_algorithms():
    gd = load_graphs(os.path.join(DATA_DIR, "small.json"))[0]
    results, failures = mst_experiments.run_graph(gd)
    assert failures == []
    assert set(results) == {"prim", "kruskal"}
    assert results["prim"].weight == results["kruskal"].weight == 6.0


def test_main_writes_results(tmp_path, capsys):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    shutil.copy(os.path.join(DATA_DIR, "small.json"), data_dir / "small.json")
    results_dir = tmp_path / "results"

    status = mst_experiments.main(
        [
            "--data-dir",
            str(data_dir),
            "--results-dir",
            str(results_dir),
            "--datasets",
            "small",
            "medium",
        ]
    )
    assert status == 0

    out = capsys.readouterr().out
    assert "not found, skipping" in out
    assert "All results verified" in out

    with open(results_dir / "small_output.json") as f:
        document = json.load(f)
    assert len(document["results"]) == 4
    with open(results_dir / "summary_all.csv", newline="") as f:
        rows = list(csv.reader(f))
    assert len(rows) == 1 + 2 * 4


def test_main_without_datasets(tmp_path):
    status = mst_experiments.main(
        ["--data-dir", str(tmp_path), "--results-dir", str(tmp_path / "r")]
    )
    assert status == 1


def test_vertex_labels():
    assert create_graph_files.vertex_label(0) == "A"
    assert create_graph_files.vertex_label(25) == "Z"
    assert create_graph_files.vertex_label(26) == "AA"
    assert create_graph_files.vertex_label(27) == "AB"


def test_generated_dataset_runs(tmp_path):
    graphs = [
        create_graph_files.create_random_graph(12, 0.3, seed=1),
        create_graph_files.create_random_graph(12, 0.1, seed=2, connected=False),
        create_graph_files.create_random_graph(9, 0.5, seed=3, real_weights=True),
    ]
    path = create_graph_files.create_dataset_file(graphs, str(tmp_path / "gen.json"))

    loaded = load_graphs(path)
    assert [gd.graph.vertex_count() for gd in loaded] == [12, 12, 9]
    assert [gd.graph.edge_count() for gd in loaded] == [
        g.number_of_edges() for g in graphs
    ]
    for gd in loaded:
        results, failures = mst_experiments.run_graph(gd)
        assert failures == []


def test_main_plot_writes_figures(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    shutil.copy(os.path.join(DATA_DIR, "small.json"), data_dir / "small.json")
    results_dir = tmp_path / "results"

    status = mst_experiments.main(
        [
            "--data-dir",
            str(data_dir),
            "--results-dir",
            str(results_dir),
            "--datasets",
            "small",
            "--plot",
        ]
    )
    assert status == 0
    for graph_id in (1, 2, 3, 4):
        assert (results_dir / "plots" / f"small_graph{graph_id}.png").is_file()
    assert (results_dir / "operations.png").is_file()


def test_main_plot_skips_large_graphs(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    shutil.copy(os.path.join(DATA_DIR, "small.json"), data_dir / "small.json")
    results_dir = tmp_path / "results"

    status = mst_experiments.main(
        [
            "--data-dir",
            str(data_dir),
            "--results-dir",
            str(results_dir),
            "--datasets",
            "small",
            "--plot",
            "--max-plot-vertices",
            "4",
        ]
    )
    assert status == 0
    assert (results_dir / "plots" / "small_graph1.png").is_file()
    # graph 3 has 6 vertices
    assert not (results_dir / "plots" / "small_graph3.png").exists()


def test_plot_operation_counts(tmp_path):
    gd = load_graphs(os.path.join(DATA_DIR, "small.json"))[0]
    results, _ = mst_experiments.run_graph(gd, check=False)
    record = graph_record("small", gd, results)
    path = plot_operation_counts([record], str(tmp_path / "ops.png"))
    assert os.path.isfile(path)

    picture = visualize_forests(
        gd.graph,
        [results["prim"], results["kruskal"]],
        labels=gd.index_to_label(),
        save_path=str(tmp_path / "forests.png"),
    )
    assert os.path.isfile(picture)


def test_create_graph_files_plot(tmp_path, capsys):
    output = tmp_path / "gen" / "tiny.json"
    create_graph_files.main(
        ["--graphs", "2", "--nodes", "6", "--seed", "5", "--output", str(output), "--plot"]
    )
    assert output.is_file()
    assert (tmp_path / "gen" / "tiny_graph1.png").is_file()
    assert len(load_graphs(str(output))) == 2
    assert "Dataset created successfully!" in capsys.readouterr().out
