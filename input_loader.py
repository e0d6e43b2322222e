"""
Read weighted graphs from JSON dataset files

File layout:
{
  "graphs": [
    {"id": 1, "nodes": ["A", "B", "C"],
     "edges": [{"from": "A", "to": "B", "weight": 3.5}, ...]},
    ...
  ]
}
Node labels are mapped to dense vertex ids in listing order.
"""

import json

from edge_weighted_graph import Edge, WeightedGraph
from mst_errors import UnknownVertexError


class GraphData:
    """A loaded graph with its id and label -> vertex id table"""

    def __init__(self, graph_id, graph, label_to_index):
        self.id = graph_id
        self.graph = graph
        self.label_to_index = label_to_index

    def index_to_label(self):
        return {index: label for label, index in self.label_to_index.items()}

    def __repr__(self):
        return f"GraphData(id={self.id}, {self.graph!r})"


def build_graph(graph_id, nodes, edges):
    """Build a frozen GraphData from a node label list and edge dicts"""
    label_to_index = {}
    for i, label in enumerate(nodes):
        label = str(label)
        if label in label_to_index:
            raise ValueError(f"Graph {graph_id}: duplicate node label {label!r}")
        label_to_index[label] = i

    graph = WeightedGraph(len(label_to_index))
    for edge in edges:
        endpoints = []
        for key in ("from", "to"):
            label = str(edge[key])
            if label not in label_to_index:
                raise UnknownVertexError(
                    f"Graph {graph_id}: edge endpoint {label!r} is not a known node"
                )
            endpoints.append(label_to_index[label])
        graph.add_edge(Edge(endpoints[0], endpoints[1], float(edge["weight"])))

    return GraphData(graph_id, graph.freeze(), label_to_index)


def parse_graphs(document):
    """Build every graph described by a decoded dataset document"""
    return [
        build_graph(g["id"], g["nodes"], g.get("edges", []))
        for g in document["graphs"]
    ]


def load_graphs(file_path):
    """Load all graphs from the dataset file at `file_path`"""
    with open(file_path, "r") as f:
        document = json.load(f)
    return parse_graphs(document)
