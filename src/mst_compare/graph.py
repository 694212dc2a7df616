"""Undirected weighted graph model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .structures import DisjointSet


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge between two vertex labels."""

    u: str
    v: str
    w: int

    def __str__(self) -> str:
        return f"({self.u}-{self.v}:{self.w})"


@dataclass(frozen=True)
class Graph:
    """Read-only container of vertex labels and weighted edges.

    Vertex order drives the component order of Prim's scan and edge order
    is the tie-break order for both algorithms. Labels are not deduplicated
    and edge endpoints are not validated against `nodes`.
    """

    nodes: Tuple[str, ...]
    edges: Tuple[Edge, ...]

    def __init__(self, nodes: Iterable[str], edges: Iterable[Edge]) -> None:
        object.__setattr__(self, "nodes", tuple(nodes))
        object.__setattr__(self, "edges", tuple(edges))

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node_index(self) -> Dict[str, int]:
        """Return a mapping from vertex label to its position in `nodes`."""

        return {node: index for index, node in enumerate(self.nodes)}

    def __str__(self) -> str:
        return f"Graph{{nodes={self.node_count}, edges={self.edge_count}}}"


def count_components(graph: Graph) -> int:
    """Return the number of connected components of `graph`."""

    index = graph.node_index()
    clusters = DisjointSet(graph.node_count)
    for edge in graph.edges:
        clusters.union(index[edge.u], index[edge.v])
    return clusters.components
