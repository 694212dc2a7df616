"""Command line entry point for the MST comparison."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import ComparisonConfig
from .runner import compare_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare Prim and Kruskal minimum spanning trees on a batch of graphs.")
    parser.add_argument(
        "--in",
        dest="input",
        type=Path,
        default=Path("input_example.json"),
        help="Path to the input JSON file (default: input_example.json)",
    )
    parser.add_argument(
        "--out",
        dest="output",
        type=Path,
        default=Path("output.json"),
        help="Path where the JSON report will be written (default: output.json)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=int(os.getenv("MST_RUNS", "5")),
        help="Timed repetitions per algorithm; the median is reported",
    )
    parser.add_argument("--summary", type=Path, default=None, help="Optional CSV or Excel summary table")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Report cost disagreements instead of aborting on the first one",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = ComparisonConfig(
            runs=args.runs,
            use_tqdm=not args.disable_tqdm,
            verbose=not args.quiet,
            strict=not args.lenient,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    result = compare_file(args.input, args.output, config, summary_path=args.summary)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
