"""Prim's algorithm driven by a full scan of the visited/unvisited cut."""

from __future__ import annotations

from typing import List

from .graph import Edge, Graph
from .result import MSTResult
from .structures import OperationCounter


def compute_mst_prim(graph: Graph, counter: OperationCounter) -> MSTResult:
    """Return the minimum spanning forest of `graph` grown one cut at a time.

    Every pass over the edge list counts one operation per edge crossing the
    cut and one more for the edge it accepts. Among equally light crossing
    edges the first one in edge order wins. Vertices are visited component by
    component in declared order, so a disconnected graph yields a forest.
    """

    if not graph.nodes:
        return MSTResult([], 0)

    index = graph.node_index()
    visited = [False] * graph.node_count
    mst_edges: List[Edge] = []
    total_cost = 0

    for start in range(graph.node_count):
        if visited[start]:
            continue
        visited[start] = True

        while True:
            best_edge = _lightest_crossing_edge(graph, index, visited, counter)
            if best_edge is None:
                break

            mst_edges.append(best_edge)
            total_cost += best_edge.w
            counter.increment()

            left = index[best_edge.u]
            if visited[left]:
                visited[index[best_edge.v]] = True
            else:
                visited[left] = True

    return MSTResult(mst_edges, total_cost)


def _lightest_crossing_edge(
    graph: Graph,
    index: dict[str, int],
    visited: List[bool],
    counter: OperationCounter,
) -> Edge | None:
    best_edge: Edge | None = None
    for edge in graph.edges:
        left_visited = visited[index[edge.u]]
        right_visited = visited[index[edge.v]]
        if left_visited == right_visited:
            continue
        counter.increment()
        if best_edge is None or edge.w < best_edge.w:
            best_edge = edge
    return best_edge


__all__ = ["compute_mst_prim"]
