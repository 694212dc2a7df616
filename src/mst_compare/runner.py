"""Convenience helpers for running the MST comparison end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .pipeline import ComparisonConfig, ComparisonResult, MSTComparison, save_summary
from .serialization import read_graphs


def compare_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ComparisonConfig] = None,
    summary_path: str | Path | None = None,
) -> ComparisonResult | None:
    """Run the full workflow on `input_path` and write the JSON report to `output_path`."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        inputs = read_graphs(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'. Please check the --in path.")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not read graphs from '{input_path}': {exc}")
        return None

    comparison = MSTComparison(config or ComparisonConfig())
    try:
        result = comparison.compare(inputs, output_path)
    except KeyError as exc:
        print(f"ERROR: Edge endpoint {exc} is not declared in the graph's nodes.")
        return None

    if summary_path is not None:
        try:
            save_summary(result.dataframe, summary_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
    return result
