"""Side-by-side comparison of Prim and Kruskal over a batch of graphs."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .graph import Graph, count_components
from .kruskal import compute_mst_kruskal
from .prim import compute_mst_prim
from .result import MSTResult
from .serialization import GraphInput, write_results
from .structures import OperationCounter
from .timing import measure_median

Algorithm = Callable[[Graph, OperationCounter], MSTResult]

ALGORITHMS: Dict[str, Algorithm] = {
    "prim": compute_mst_prim,
    "kruskal": compute_mst_kruskal,
}

SUMMARY_COLUMNS = [
    "graph_id",
    "algorithm",
    "vertices",
    "edges",
    "mst_edges",
    "total_cost",
    "operations_count",
    "execution_time_ms",
]


class AlgorithmMismatchError(AssertionError):
    """Raised when the two algorithms disagree on the cost or size of a spanning forest."""


@dataclass
class AlgorithmRun:
    """One algorithm's outcome on one graph."""

    result: MSTResult
    operations_count: int
    execution_time_ms: float


@dataclass
class GraphRecord:
    """Everything reported for a single input graph."""

    graph_id: str
    vertices: int
    edges: int
    components: int
    prim: AlgorithmRun
    kruskal: AlgorithmRun

    @property
    def costs_agree(self) -> bool:
        return self.prim.result.total_cost == self.kruskal.result.total_cost

    @property
    def forests_agree(self) -> bool:
        """Both results span every component: `vertices - components` edges each."""

        expected = self.vertices - self.components
        return self.prim.result.edge_count == expected and self.kruskal.result.edge_count == expected

    @property
    def agrees(self) -> bool:
        return self.costs_agree and self.forests_agree

    def mismatch_message(self) -> str:
        problems = []
        if not self.costs_agree:
            problems.append(
                f"prim cost {self.prim.result.total_cost} != kruskal cost {self.kruskal.result.total_cost}"
            )
        if not self.forests_agree:
            problems.append(
                f"expected {self.vertices - self.components} edges, prim has "
                f"{self.prim.result.edge_count} and kruskal has {self.kruskal.result.edge_count}"
            )
        return f"Graph '{self.graph_id}': " + "; ".join(problems)


@dataclass
class ComparisonStats:
    """Summary metrics for a comparison run."""

    graphs_processed: int
    agreements: int
    disagreements: int
    prim_operations: int
    kruskal_operations: int
    runtime_seconds: float


@dataclass
class ComparisonResult:
    """Result bundle returned by :class:MSTComparison."""

    records: List[GraphRecord]
    dataframe: pd.DataFrame
    stats: ComparisonStats


@dataclass
class ComparisonConfig:
    """Configuration parameters for :class:MSTComparison."""

    runs: int = 5
    use_tqdm: bool | None = None
    verbose: bool = True
    strict: bool = True
    time_precision: int = 2

    def __post_init__(self) -> None:
        if self.runs < 1:
            raise ValueError("runs must be at least 1")


class MSTComparison:
    """Run both spanning tree algorithms on each graph and collect their metrics."""

    def __init__(self, config: ComparisonConfig | None = None) -> None:
        self.config = config or ComparisonConfig()

    def compare(
        self,
        inputs: Sequence[GraphInput],
        output_path: str | Path | None = None,
    ) -> ComparisonResult:
        """Compare both algorithms on `inputs`, optionally save the JSON report, and return it."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- MST Comparison Started ---")
            print(f"\n1. Running Prim and Kruskal on {len(inputs)} graph(s), {self.config.runs} timed run(s) each...\n")
            print(f"{'Graph':<10} {'Algorithm':<10} | {'Operations':<12} | {'Time(ms)':<10} | {'Total Cost':<10}")
            print("-" * 70)

        t0 = time.time()
        iterator: Iterable[GraphInput] = inputs
        if inputs and self._use_tqdm:
            iterator = tqdm(inputs, desc="   Comparing", unit="graph")

        records: List[GraphRecord] = []
        disagreements = 0
        for graph_input in iterator:
            record = self.compare_graph(graph_input)
            if verbose:
                self._print_record(record)
            if not record.agrees:
                disagreements += 1
                message = record.mismatch_message()
                if self.config.strict:
                    raise AlgorithmMismatchError(message)
                print(f"  ERROR: {message}", file=sys.stderr)
            records.append(record)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            t0 = time.time()
            if verbose:
                print("2. Writing results...")
            write_results(output_path, records)
            if verbose:
                print(f"   Results written to: {output_path}")
                print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = ComparisonStats(
            graphs_processed=len(records),
            agreements=len(records) - disagreements,
            disagreements=disagreements,
            prim_operations=sum(record.prim.operations_count for record in records),
            kruskal_operations=sum(record.kruskal.operations_count for record in records),
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- MST Comparison Finished in {elapsed:.2f} seconds ---")

        return ComparisonResult(records=records, dataframe=build_summary(records), stats=stats)

    def compare_graph(self, graph_input: GraphInput) -> GraphRecord:
        graph = graph_input.graph
        return GraphRecord(
            graph_id=graph_input.id,
            vertices=graph.node_count,
            edges=graph.edge_count,
            components=count_components(graph),
            prim=self._run(ALGORITHMS["prim"], graph),
            kruskal=self._run(ALGORITHMS["kruskal"], graph),
        )

    def _run(self, algorithm: Algorithm, graph: Graph) -> AlgorithmRun:
        elapsed_ms = measure_median(lambda: algorithm(graph, OperationCounter()), self.config.runs)
        counter = OperationCounter()
        result = algorithm(graph, counter)
        return AlgorithmRun(
            result=result,
            operations_count=counter.count,
            execution_time_ms=round(elapsed_ms, self.config.time_precision),
        )

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    @staticmethod
    def _print_record(record: GraphRecord) -> None:
        for label, name, run in (
            (f"G{record.graph_id}", "prim", record.prim),
            ("", "kruskal", record.kruskal),
        ):
            print(
                f"{label:<10} {name:<10} | {run.operations_count:<12d} | "
                f"{run.execution_time_ms:<10.2f} | {run.result.total_cost:<10d}"
            )
        if record.agrees:
            print(f"  Both algorithms agree on MST cost: {record.prim.result.total_cost}")
        print()


def build_summary(records: Sequence[GraphRecord]) -> pd.DataFrame:
    """Return one row per graph and algorithm."""

    rows = []
    for record in records:
        for name, run in (("prim", record.prim), ("kruskal", record.kruskal)):
            rows.append(
                {
                    "graph_id": record.graph_id,
                    "algorithm": name,
                    "vertices": record.vertices,
                    "edges": record.edges,
                    "mst_edges": run.result.edge_count,
                    "total_cost": run.result.total_cost,
                    "operations_count": run.operations_count,
                    "execution_time_ms": run.execution_time_ms,
                }
            )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def save_summary(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported summary file format: '{suffix}'")


__all__ = [
    "AlgorithmMismatchError",
    "AlgorithmRun",
    "ComparisonConfig",
    "ComparisonResult",
    "ComparisonStats",
    "GraphRecord",
    "MSTComparison",
    "build_summary",
    "save_summary",
]
