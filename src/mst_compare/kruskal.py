"""Kruskal's algorithm over a weight-sorted edge list and a disjoint set."""

from __future__ import annotations

import functools
from typing import List, Sequence

from .graph import Edge, Graph
from .result import MSTResult
from .structures import DisjointSet, OperationCounter


def compute_mst_kruskal(graph: Graph, counter: OperationCounter) -> MSTResult:
    """Return the minimum spanning forest of `graph`, lightest edges first.

    The counter receives one operation per weight comparison made while
    sorting, one per `find` and one per `union`. The sort is stable, so
    equal weights keep their declared order.
    """

    if not graph.nodes:
        return MSTResult([], 0)

    index = graph.node_index()
    sorted_edges = sort_edges_by_weight(graph.edges, counter)
    clusters = DisjointSet(graph.node_count)
    mst_edges: List[Edge] = []
    total_cost = 0

    for edge in sorted_edges:
        root_left = clusters.find(index[edge.u], counter)
        root_right = clusters.find(index[edge.v], counter)
        if root_left == root_right:
            continue
        clusters.union(root_left, root_right, counter)
        mst_edges.append(edge)
        total_cost += edge.w

    return MSTResult(mst_edges, total_cost)


def sort_edges_by_weight(edges: Sequence[Edge], counter: OperationCounter) -> List[Edge]:
    """Return `edges` in ascending weight order, counting each comparison."""

    def compare(first: Edge, second: Edge) -> int:
        counter.increment()
        return (first.w > second.w) - (first.w < second.w)

    return sorted(edges, key=functools.cmp_to_key(compare))


__all__ = ["compute_mst_kruskal", "sort_edges_by_weight"]
