"""Summaries of shortest-path distance arrays."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class DistanceStats:
    """Maximum, count and sum of the finite distances."""

    max_distance: float
    reachable: int
    total_distance: float

    @property
    def average(self) -> float | None:
        return self.total_distance / self.reachable if self.reachable else None


def distance_stats(distances: Sequence[float]) -> DistanceStats:
    """Collect statistics over the reachable (finite) distances."""
    finite = [d for d in distances if not math.isinf(d)]
    return DistanceStats(
        max_distance=max([0, *finite]),
        reachable=len(finite),
        total_distance=sum(finite),
    )


def _format_distance(value: float) -> str:
    if math.isinf(value):
        return "INFINITY"
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_sample(
    distances: Sequence[float], node_id: Callable[[int], int], limit: int = 20
) -> list[str]:
    """Lines 'Node <id>: <distance>' for the first ``limit`` indices."""
    return [
        f"Node {node_id(i)}: {_format_distance(d)}"
        for i, d in enumerate(distances[:limit])
    ]


def format_stats(stats: DistanceStats, vertex_count: int) -> str:
    """Multi-line distance statistics block."""
    lines = [
        "Distance Statistics:",
        "-------------------",
        f"Maximum distance: {_format_distance(stats.max_distance)}",
        f"Reachable nodes: {stats.reachable} out of {vertex_count}",
    ]
    if stats.average is not None:
        lines.append(f"Average distance to reachable nodes: {stats.average:g}")
    return "\n".join(lines)