"""Bellman-Ford over an edge list dealt out round-robin to several ranks.

Edge ``k`` of the input goes to rank ``k % num_procs``; each rank numbers
its own nodes. Every round, each rank relaxes the outgoing edges of its own
contiguous block of vertex indices, starting from the shared distance array,
and the element-wise minimum of the results becomes the new shared array.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .edgelist import iter_edges
from .mapping import NodeMapper
from .serial import SourceNotFoundError

log = logging.getLogger(__name__)

INFINITY = math.inf


@dataclass
class _Rank:
    nodes: NodeMapper = field(default_factory=NodeMapper)
    adjacency: list[list[tuple[int, int]]] = field(default_factory=list)


class StripedGraph:
    """Undirected graph whose edges are spread round-robin over ranks."""

    def __init__(self, num_procs: int = 1) -> None:
        if num_procs < 1:
            raise ValueError("number of processes must be at least 1")
        self.num_procs = num_procs
        self._ranks = [_Rank() for _ in range(num_procs)]

    def add_edge(self, rank: int, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge to the share held by ``rank``."""
        if not 0 <= rank < self.num_procs:
            raise ValueError(f"rank {rank} outside 0..{self.num_procs - 1}")
        share = self._ranks[rank]
        s = share.nodes.index(src)
        d = share.nodes.index(dest)
        share.adjacency.extend([] for _ in range(len(share.nodes) - len(share.adjacency)))
        share.adjacency[s].append((d, weight))
        share.adjacency[d].append((s, weight))

    def load_lines(self, lines: Iterable[str]) -> int:
        """Deal the edges in ``lines`` out to the ranks; return how many were read."""
        count = 0
        for edge in iter_edges(lines, weighted=True):
            self.add_edge(count % self.num_procs, edge.src, edge.dest, edge.weight)
            count += 1
            if count % 1_000_000 == 0:
                log.info("Processed %d edges...", count)
        log.info(
            "Graph loaded: %d vertices, %d directed edges",
            self.vertex_count(),
            self.edge_count(),
        )
        return count

    def load_file(self, path: str | os.PathLike[str]) -> int:
        """Load an edge-list file; return the number of edges read."""
        with open(path, encoding="utf-8") as handle:
            return self.load_lines(handle)

    def vertex_count(self) -> int:
        """Largest vertex count over the ranks."""
        return max(len(share.nodes) for share in self._ranks)

    def edge_count(self) -> int:
        """Directed edges held by all ranks together."""
        return sum(
            len(neighbors) for share in self._ranks for neighbors in share.adjacency
        )

    def node_id(self, index: int) -> int:
        """Node identifier of ``index`` in rank 0's numbering."""
        return self._ranks[0].nodes.node_id(index)

    @staticmethod
    def _relax_block(
        adjacency: list[list[tuple[int, int]]], start: int, stop: int, dist: list[float]
    ) -> bool:
        changed = False
        for u, neighbors in enumerate(adjacency[start:stop], start=start):
            if dist[u] == INFINITY:
                continue
            for v, weight in neighbors:
                if dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    changed = True
        return changed

    def bellman_ford(self, source_node_id: int, max_iterations: int = 100) -> list[float]:
        """Shortest distances from the source, at most ``max_iterations`` rounds.

        The number of rounds is also capped by the vertex count. Unreachable
        vertices have distance ``math.inf``.
        """
        candidates = [
            share.nodes.index(source_node_id)
            for share in self._ranks
            if source_node_id in share.nodes
        ]
        if not candidates:
            raise SourceNotFoundError(source_node_id)
        source_index = max(candidates)

        n = self.vertex_count()
        dist: list[float] = [INFINITY] * n
        dist[source_index] = 0

        chunk = -(-n // self.num_procs)
        limit = min(n, max_iterations)
        changed = True
        iterations = 0
        while changed and iterations < limit:
            iterations += 1
            changed = False
            results = []
            for rank, share in enumerate(self._ranks):
                local = list(dist)
                start = rank * chunk
                if self._relax_block(share.adjacency, start, min(start + chunk, n), local):
                    changed = True
                results.append(local)
            dist = [min(column) for column in zip(*results)]
            if iterations % 10 == 0:
                log.info("Completed %d iterations", iterations)

        if changed:
            log.info("Reached maximum iterations: %d", iterations)
        else:
            log.info("Early convergence at iteration %d", iterations)
        return dist