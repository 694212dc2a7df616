import json

import pytest

from mst_compare.graph import Edge
from mst_compare.serialization import parse_graphs, read_graphs


def test_parse_accepts_both_edge_forms():
    document = {
        "graphs": [
            {
                "id": 7,
                "nodes": ["A", {"id": "B"}, "C"],
                "edges": [
                    {"from": "A", "to": "B", "weight": 3},
                    {"u": "B", "v": "C", "w": "4"},
                ],
            }
        ]
    }
    [graph_input] = parse_graphs(document)
    assert graph_input.id == "7"
    assert graph_input.graph.nodes == ("A", "B", "C")
    assert graph_input.graph.edges == (Edge("A", "B", 3), Edge("B", "C", 4))


def test_parse_rejects_missing_graphs_array():
    with pytest.raises(ValueError):
        parse_graphs({"results": []})


def test_parse_names_the_malformed_graph():
    document = {"graphs": [{"id": "broken", "nodes": ["A"], "edges": [{"from": "A"}]}]}
    with pytest.raises(ValueError, match="broken"):
        parse_graphs(document)


def test_read_graphs_from_file(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"graphs": [{"id": "g", "nodes": [], "edges": []}]}))
    [graph_input] = read_graphs(path)
    assert graph_input.graph.node_count == 0


def test_read_graphs_invalid_json(tmp_path):
    path = tmp_path / "input.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        read_graphs(path)


@pytest.mark.parametrize("node", [None, True, ["A"]])
def test_parse_rejects_non_label_nodes(node):
    document = {"graphs": [{"id": "odd", "nodes": ["A", node], "edges": []}]}
    with pytest.raises(ValueError, match="odd"):
        parse_graphs(document)
