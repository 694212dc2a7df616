"""Output shared by the spanning tree algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .graph import Edge


@dataclass(frozen=True)
class MSTResult:
    """Accepted edges, in acceptance order, and their total weight."""

    edges: Tuple[Edge, ...]
    total_cost: int

    def __init__(self, edges: Iterable[Edge], total_cost: int) -> None:
        object.__setattr__(self, "edges", tuple(edges))
        object.__setattr__(self, "total_cost", total_cost)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        return f"Result{{edges={self.edge_count}, cost={self.total_cost}}}"
