import json

import pandas as pd
import pytest

from mst_compare import pipeline
from mst_compare.graph import Edge, Graph
from mst_compare.pipeline import (
    AlgorithmMismatchError,
    ComparisonConfig,
    MSTComparison,
    save_summary,
)
from mst_compare.result import MSTResult
from mst_compare.serialization import GraphInput


def _inputs():
    return [
        GraphInput("tri", Graph(["A", "B", "C"], [Edge("A", "B", 1), Edge("B", "C", 2), Edge("A", "C", 3)])),
        GraphInput("forest", Graph(["A", "B", "C", "D"], [Edge("A", "B", 1), Edge("C", "D", 2)])),
    ]


def _quiet(**overrides):
    return ComparisonConfig(runs=1, verbose=False, use_tqdm=False, **overrides)


def test_config_requires_a_run():
    with pytest.raises(ValueError):
        ComparisonConfig(runs=0)


def test_compare_collects_records_and_summary():
    result = MSTComparison(_quiet()).compare(_inputs())
    assert [record.graph_id for record in result.records] == ["tri", "forest"]
    first = result.records[0]
    assert first.vertices == 3
    assert first.edges == 3
    assert first.components == 1
    assert result.records[1].components == 2
    assert result.records[1].forests_agree
    assert first.prim.result.total_cost == first.kruskal.result.total_cost == 3
    assert first.prim.operations_count == 6
    assert result.stats.graphs_processed == 2
    assert result.stats.agreements == 2
    assert result.stats.disagreements == 0
    assert result.dataframe.shape == (4, len(pipeline.SUMMARY_COLUMNS))
    assert list(result.dataframe["algorithm"]) == ["prim", "kruskal", "prim", "kruskal"]


def test_compare_writes_json_report(tmp_path):
    output = tmp_path / "output.json"
    MSTComparison(_quiet()).compare(_inputs(), output)
    document = json.loads(output.read_text())
    first = document["results"][0]
    assert first["graph_id"] == "tri"
    assert first["input_stats"] == {"vertices": 3, "edges": 3}
    assert first["prim"]["mst_edges"] == [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
    ]
    assert first["kruskal"]["total_cost"] == 3
    assert set(first["kruskal"]) == {"mst_edges", "total_cost", "operations_count", "execution_time_ms"}


def _broken_kruskal(graph, counter):
    return MSTResult([], 999)


def test_cost_mismatch_is_fatal_when_strict(monkeypatch):
    monkeypatch.setitem(pipeline.ALGORITHMS, "kruskal", _broken_kruskal)
    with pytest.raises(AlgorithmMismatchError):
        MSTComparison(_quiet()).compare(_inputs())


def test_cost_mismatch_is_counted_when_lenient(monkeypatch):
    monkeypatch.setitem(pipeline.ALGORITHMS, "kruskal", _broken_kruskal)
    result = MSTComparison(_quiet(strict=False)).compare(_inputs())
    assert result.stats.disagreements == 2
    assert not result.records[0].costs_agree


def _short_kruskal(graph, counter):
    return MSTResult([Edge("A", "C", 3)], 3)


def test_short_forest_is_fatal_when_strict(monkeypatch):
    monkeypatch.setitem(pipeline.ALGORITHMS, "kruskal", _short_kruskal)
    with pytest.raises(AlgorithmMismatchError, match="expected 2 edges"):
        MSTComparison(_quiet()).compare(_inputs()[:1])


def test_short_forest_is_reported_on_stderr_when_lenient(monkeypatch, capsys):
    monkeypatch.setitem(pipeline.ALGORITHMS, "kruskal", _short_kruskal)
    result = MSTComparison(_quiet(strict=False)).compare(_inputs()[:1])
    record = result.records[0]
    assert record.costs_agree
    assert not record.forests_agree
    assert result.stats.agreements == 0
    assert result.stats.disagreements == 1
    captured = capsys.readouterr()
    assert "ERROR: Graph 'tri'" in captured.err
    assert captured.out == ""


def test_verbose_output_reports_agreement(capsys):
    MSTComparison(ComparisonConfig(runs=1, use_tqdm=False)).compare(_inputs()[:1])
    captured = capsys.readouterr().out
    assert "Gtri" in captured
    assert "Both algorithms agree on MST cost: 3" in captured
    assert "1. Running Prim and Kruskal on 1 graph(s)" in captured
    assert "Done in" in captured


def test_save_summary_csv(tmp_path):
    result = MSTComparison(_quiet()).compare(_inputs())
    path = tmp_path / "summary.csv"
    save_summary(result.dataframe, path)
    loaded = pd.read_csv(path)
    assert list(loaded.columns) == pipeline.SUMMARY_COLUMNS
    assert loaded["total_cost"].tolist() == [3, 3, 3, 3]


def test_save_summary_rejects_unknown_suffix(tmp_path):
    with pytest.raises(ValueError):
        save_summary(pd.DataFrame(), tmp_path / "summary.txt")
