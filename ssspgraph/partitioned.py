"""Bellman-Ford over a METIS-partitioned graph, one partition per process rank.

Every partition keeps the edges whose endpoints it owns plus the ghost edges
that cross into or out of it. The partitions advance in lockstep: each round
starts by taking the element-wise minimum of all distance arrays, then every
partition relaxes its own edges.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .edgelist import Edge
from .mapping import NodeMapper
from .metis import MetisGraph, PartitionError
from .serial import SourceNotFoundError

log = logging.getLogger(__name__)

INFINITY = math.inf
UNASSIGNED = -1


class GraphPartition:
    """The share of a partitioned graph held by one process rank."""

    def __init__(self, rank: int, size: int) -> None:
        if size < 1:
            raise ValueError("number of partitions must be at least 1")
        if not 0 <= rank < size:
            raise ValueError(f"rank {rank} outside 0..{size - 1}")
        self.rank = rank
        self.size = size
        self.nodes = NodeMapper()
        self.partition_of: dict[int, int] = {}
        self.local_vertices: list[int] = []
        self.ghost_vertices: list[int] = []
        self._ghost_set: set[int] = set()
        self.edges: list[Edge] = []
        self.ghost_edges: list[Edge] = []
        self._total_vertices = 0

    def _part(self, index: int) -> int:
        return self.partition_of.get(index, UNASSIGNED)

    def load_partition_info(self, assignments: Iterable[int]) -> int:
        """Record the partition of node ``i`` as the ``i``-th assignment.

        Returns the number of nodes that belong to this partition.
        """
        in_this_partition = 0
        for node_id, part_id in enumerate(assignments):
            if part_id >= self.size:
                raise PartitionError(part_id, self.size)
            index = self.nodes.index(node_id)
            self.partition_of[index] = part_id
            if part_id == self.rank:
                self.local_vertices.append(index)
                in_this_partition += 1
        log.info(
            "Partition %d loaded: %d nodes in this partition",
            self.rank,
            in_this_partition,
        )
        return in_this_partition

    def _add_ghost_vertex(self, index: int) -> None:
        if index not in self._ghost_set:
            self._ghost_set.add(index)
            self.ghost_vertices.append(index)

    def load_metis_graph(self, graph: MetisGraph) -> None:
        """Keep the edges of ``graph`` that touch this partition."""
        for vertex, row in enumerate(graph.adjacency):
            node_index = self.nodes.index(vertex)
            is_local = self._part(node_index) == self.rank
            for neighbor, weight in row:
                neighbor_index = self.nodes.index(neighbor)
                neighbor_part = self._part(neighbor_index)
                edge = Edge(node_index, neighbor_index, weight)
                if is_local and neighbor_part == self.rank:
                    self.edges.append(edge)
                elif is_local or neighbor_part == self.rank:
                    self.ghost_edges.append(edge)
                    if is_local:
                        self._add_ghost_vertex(neighbor_index)
        self._total_vertices = len(self.nodes)
        log.info(
            "Partition %d: %d local edges, %d ghost edges, %d ghost vertices",
            self.rank,
            len(self.edges),
            len(self.ghost_edges),
            len(self.ghost_vertices),
        )

    def process_edge(self, src_id: int, dest_id: int) -> None:
        """Add an undirected unit-weight edge if it touches this partition.

        Nodes without a recorded partition count as belonging to this one.
        """
        src = self.nodes.index(src_id)
        dest = self.nodes.index(dest_id)
        src_part = self.partition_of.get(src, self.rank)
        dest_part = self.partition_of.get(dest, self.rank)
        pair = [Edge(src, dest, 1), Edge(dest, src, 1)]
        if src_part == self.rank and dest_part == self.rank:
            self.edges.extend(pair)
        elif src_part == self.rank or dest_part == self.rank:
            self.ghost_edges.extend(pair)
        self._total_vertices = len(self.nodes)

    def vertex_count(self) -> int:
        return self._total_vertices

    def _source_index(self, source_node_id: int) -> int | None:
        if source_node_id not in self.nodes:
            return None
        index = self.nodes.index(source_node_id)
        return index if index < self._total_vertices else None


@dataclass(frozen=True)
class PartitionedRun:
    """Outcome of a partitioned Bellman-Ford run, as seen by rank 0."""

    distances: list[float]
    iterations: int
    max_iterations: int
    converged: bool
    source_index: int
    source_owner: int


def build_partitions(
    assignments: Sequence[int], graph: MetisGraph, size: int
) -> list[GraphPartition]:
    """Create one loaded partition for every rank in ``range(size)``."""
    partitions = []
    for rank in range(size):
        partition = GraphPartition(rank, size)
        partition.load_partition_info(assignments)
        partition.load_metis_graph(graph)
        partitions.append(partition)
    return partitions


def _relax(edges: Iterable[Edge], dist: list[float]) -> bool:
    changed = False
    for edge in edges:
        du = dist[edge.src]
        if du != INFINITY and du + edge.weight < dist[edge.dest]:
            dist[edge.dest] = du + edge.weight
            changed = True
    return changed


def _absorb(dist: list[float], synced: Sequence[float]) -> bool:
    changed = False
    for i, (mine, best) in enumerate(zip(dist, synced)):
        if best < mine:
            dist[i] = best
            changed = True
    return changed


def partitioned_bellman_ford(
    partitions: Sequence[GraphPartition], source_node_id: int
) -> PartitionedRun:
    """Run Bellman-Ford across all partitions in lockstep rounds."""
    if not partitions:
        raise ValueError("at least one partition is required")
    found = [p._source_index(source_node_id) for p in partitions]
    source_index = found[0]
    if source_index is None:
        raise SourceNotFoundError(source_node_id)

    n = partitions[0].vertex_count()
    if any(p.vertex_count() != n for p in partitions):
        raise ValueError("partitions disagree on the number of vertices")

    owner = partitions[0]._part(source_index)
    dists: list[list[float]] = []
    for partition in partitions:
        dist = [INFINITY] * n
        if partition._part(source_index) == partition.rank:
            dist[source_index] = 0
        dists.append(dist)

    max_iterations = n - 1
    any_update = True
    iteration = 0
    while any_update and iteration < max_iterations:
        iteration += 1
        synced = [min(column) for column in zip(*dists)]
        updates = []
        for partition, dist in zip(partitions, dists):
            from_sync = _absorb(dist, synced)
            from_local = _relax(partition.edges, dist)
            from_ghost = _relax(partition.ghost_edges, dist)
            updates.append(from_sync or from_local or from_ghost)
        any_update = any(updates)
        if iteration % 10 == 0:
            log.info("Completed iteration %d of max %d", iteration, max_iterations)

    if not any_update:
        log.info("Converged after %d iterations", iteration)
    return PartitionedRun(
        distances=dists[0],
        iterations=iteration,
        max_iterations=max_iterations,
        converged=not any_update,
        source_index=source_index,
        source_owner=owner,
    )