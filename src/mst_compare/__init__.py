"""MST comparison library initialization."""

from .graph import Edge, Graph, count_components
from .kruskal import compute_mst_kruskal
from .pipeline import (
    AlgorithmMismatchError,
    ComparisonConfig,
    ComparisonResult,
    ComparisonStats,
    GraphRecord,
    MSTComparison,
)
from .prim import compute_mst_prim
from .result import MSTResult
from .runner import compare_file
from .serialization import GraphInput, read_graphs, write_results
from .structures import DisjointSet, OperationCounter

__all__ = [
    "Edge",
    "Graph",
    "count_components",
    "MSTResult",
    "OperationCounter",
    "DisjointSet",
    "compute_mst_prim",
    "compute_mst_kruskal",
    "MSTComparison",
    "ComparisonConfig",
    "ComparisonResult",
    "ComparisonStats",
    "GraphRecord",
    "AlgorithmMismatchError",
    "GraphInput",
    "read_graphs",
    "write_results",
    "compare_file",
]
