"""JSON input and output for graph batches."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

from .graph import Edge, Graph

if TYPE_CHECKING:
    from .pipeline import GraphRecord


@dataclass(frozen=True)
class GraphInput:
    """A graph together with the identifier it was declared under."""

    id: str
    graph: Graph


def read_graphs(path: str | Path) -> List[GraphInput]:
    """Load every graph declared in the `graphs` array of the JSON file at `path`."""

    with open(path, "r", encoding="utf-8") as handle:
        document = json.load(handle)
    return parse_graphs(document)


def parse_graphs(document: Any) -> List[GraphInput]:
    if not isinstance(document, dict) or not isinstance(document.get("graphs"), list):
        raise ValueError("expected a JSON object with a 'graphs' array")

    inputs: List[GraphInput] = []
    for position, raw in enumerate(document["graphs"]):
        graph_id = raw.get("id", position) if isinstance(raw, dict) else position
        try:
            inputs.append(_parse_graph(raw))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"graph '{graph_id}' is malformed: {exc!r}") from exc
    return inputs


def _parse_graph(raw: Dict[str, Any]) -> GraphInput:
    nodes = [_parse_node(node) for node in raw["nodes"]]
    edges = [_parse_edge(edge) for edge in raw["edges"]]
    return GraphInput(id=str(raw["id"]), graph=Graph(nodes, edges))


def _parse_node(raw: Any) -> str:
    # Accept ["A", "B"] as well as [{"id": "A"}, ...].
    if isinstance(raw, dict):
        return str(raw["id"])
    if raw is None or isinstance(raw, (bool, list, tuple)):
        raise TypeError(f"unsupported node entry {raw!r}")
    return str(raw)


def _parse_edge(raw: Dict[str, Any]) -> Edge:
    if "u" in raw:
        return Edge(str(raw["u"]), str(raw["v"]), int(raw["w"]))
    return Edge(str(raw["from"]), str(raw["to"]), int(raw["weight"]))


def results_to_dict(records: Sequence["GraphRecord"]) -> Dict[str, Any]:
    """Return the output document for `records`."""

    results = []
    for record in records:
        results.append(
            {
                "graph_id": record.graph_id,
                "input_stats": {"vertices": record.vertices, "edges": record.edges},
                "prim": _algorithm_entry(record.prim),
                "kruskal": _algorithm_entry(record.kruskal),
            }
        )
    return {"results": results}


def _algorithm_entry(run: Any) -> Dict[str, Any]:
    return {
        "mst_edges": [{"from": edge.u, "to": edge.v, "weight": edge.w} for edge in run.result.edges],
        "total_cost": run.result.total_cost,
        "operations_count": run.operations_count,
        "execution_time_ms": run.execution_time_ms,
    }


def write_results(path: str | Path, records: Sequence["GraphRecord"]) -> None:
    """Write `records` to `path` as pretty-printed JSON."""

    with open(path, "w", encoding="utf-8") as handle:
        json.dump(results_to_dict(records), handle, indent=2)
        handle.write("\n")


__all__ = ["GraphInput", "read_graphs", "parse_graphs", "results_to_dict", "write_results"]
