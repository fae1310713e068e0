"""Reading METIS graph files and METIS partition files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

_LEADING_INT = re.compile(r"[+-]?\d+")


class MetisFormatError(ValueError):
    """Raised when a METIS graph file is malformed."""


class PartitionError(ValueError):
    """Raised when a partition file names a partition that does not exist."""

    def __init__(self, part_id: int, num_parts: int) -> None:
        super().__init__(
            f"partition ID {part_id} exceeds number of processes {num_parts}"
        )
        self.part_id = part_id
        self.num_parts = num_parts


@dataclass(frozen=True)
class MetisGraph:
    """A METIS graph: header counts and one adjacency row per vertex.

    Each row holds ``(neighbor, weight)`` pairs with 0-based neighbor ids.
    """

    num_vertices: int
    num_edges: int
    adjacency: tuple[tuple[tuple[int, int], ...], ...]


def _scan_ints(text: str) -> tuple[list[int], bool]:
    """Read integers from ``text`` the way a formatted stream would.

    Returns the integers read and whether reading stopped on a token that
    is not an integer.
    """
    values: list[int] = []
    for token in text.split():
        match = _LEADING_INT.match(token)
        if match is None:
            return values, True
        values.append(int(match.group()))
        if match.end() != len(token):
            return values, True
    return values, False


def parse_partition(lines: Iterable[str], num_parts: int) -> list[int]:
    """Return the partition of each node, node ``i`` being the ``i``-th integer.

    Reading stops at the first token that is not an integer.
    """
    assignments: list[int] = []
    for line in lines:
        values, stopped = _scan_ints(line)
        for part_id in values:
            if part_id >= num_parts:
                raise PartitionError(part_id, num_parts)
            assignments.append(part_id)
        if stopped:
            break
    return assignments


def read_partition_file(path: str | os.PathLike[str], num_parts: int) -> list[int]:
    """Read a METIS partition file with one partition id per node."""
    with open(path, encoding="utf-8") as handle:
        return parse_partition(handle, num_parts)


def _parse_row(line: str) -> tuple[tuple[int, int], ...]:
    values, _ = _scan_ints(line)
    row: list[tuple[int, int]] = []
    for pos in range(0, len(values), 2):
        neighbor = values[pos] - 1
        weight = values[pos + 1] if pos + 1 < len(values) else 1
        row.append((neighbor, weight))
    return tuple(row)


def parse_metis_graph(lines: Iterable[str]) -> MetisGraph:
    """Parse a METIS graph: a header ``nvtxs nedges`` then one line per vertex.

    Integers on a vertex line are taken as ``neighbor weight`` pairs; a
    trailing neighbor without a weight gets weight 1. Neighbors are 1-based
    in the file and 0-based in the result.
    """
    it = iter(lines)
    header = next(it, "")
    counts, _ = _scan_ints(header)
    if len(counts) < 2:
        raise MetisFormatError("invalid graph header format")
    num_vertices, num_edges = counts[0], counts[1]

    rows: list[tuple[tuple[int, int], ...]] = []
    for vertex in range(num_vertices):
        line = next(it, None)
        if line is None:
            raise MetisFormatError(f"unexpected end of file at vertex {vertex}")
        rows.append(_parse_row(line))
    return MetisGraph(num_vertices, num_edges, tuple(rows))


def read_metis_graph(path: str | os.PathLike[str]) -> MetisGraph:
    """Read a METIS graph file."""
    with open(path, encoding="utf-8") as handle:
        return parse_metis_graph(handle)