"""Undirected graph with single-threaded Bellman-Ford shortest paths."""

from __future__ import annotations

import logging
import math
import os

from .edgelist import Edge, read_edges
from .mapping import NodeMapper

log = logging.getLogger(__name__)

INFINITY = math.inf


class SourceNotFoundError(LookupError):
    """Raised when the requested source node is not part of the graph."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"source node {node_id} not found in the graph")
        self.node_id = node_id


class NegativeCycleError(ValueError):
    """Raised when the graph contains a negative weight cycle."""


class Graph:
    """Undirected graph stored as a list of directed edges between dense indices."""

    def __init__(self) -> None:
        self._nodes = NodeMapper()
        self._edges: list[Edge] = []

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge, stored as two directed edges."""
        s = self._nodes.index(src)
        d = self._nodes.index(dest)
        self._edges.append(Edge(s, d, weight))
        self._edges.append(Edge(d, s, weight))

    def node_id(self, index: int) -> int:
        """Return the original node identifier for an internal index."""
        return self._nodes.node_id(index)

    def vertex_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        """Number of directed edges (twice the number of undirected ones)."""
        return len(self._edges)

    def _relax(self, dist: list[float]) -> bool:
        changed = False
        for edge in self._edges:
            du = dist[edge.src]
            if du != INFINITY and du + edge.weight < dist[edge.dest]:
                dist[edge.dest] = du + edge.weight
                changed = True
        return changed

    def _improvable(self, dist: list[float]) -> bool:
        return any(
            dist[e.src] != INFINITY and dist[e.src] + e.weight < dist[e.dest]
            for e in self._edges
        )

    def bellman_ford(self, source_node_id: int) -> list[float]:
        """Shortest distances from the source, indexed like the graph's nodes.

        Unreachable nodes have distance ``math.inf``.
        """
        if source_node_id not in self._nodes:
            raise SourceNotFoundError(source_node_id)
        n = self.vertex_count()
        dist: list[float] = [INFINITY] * n
        dist[self._nodes.index(source_node_id)] = 0

        rounds = n - 1
        step = max(1, rounds // 10)
        for iteration in range(1, n):
            if not self._relax(dist):
                log.info("Early convergence at iteration %d of %d", iteration, rounds)
                break
            if iteration % step == 0:
                log.info(
                    "Completed %d of %d iterations (%g%%)",
                    iteration,
                    rounds,
                    100.0 * iteration / rounds,
                )

        if self._improvable(dist):
            raise NegativeCycleError("graph contains a negative weight cycle")
        return dist


def load_graph(path: str | os.PathLike[str]) -> Graph:
    """Build an unweighted undirected graph from an edge-list file."""
    graph = Graph()
    for count, edge in enumerate(read_edges(path), start=1):
        graph.add_edge(edge.src, edge.dest)
        if count % 1_000_000 == 0:
            log.info("Processed %d edges...", count)
    log.info(
        "Graph loaded: %d vertices, %d undirected edges",
        graph.vertex_count(),
        graph.edge_count() // 2,
    )
    return graph