"""Reading whitespace separated edge lists with '#' comment lines."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_INT = re.compile(r"[+-]?\d+\Z")


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two nodes."""

    src: int
    dest: int
    weight: int = 1


def _to_int(token: str) -> int | None:
    return int(token) if _INT.match(token) else None


def parse_edge_line(line: str, weighted: bool = False) -> Edge | None:
    """Parse one line into an edge; blank, comment and malformed lines give None.

    With ``weighted`` an optional third column is taken as the weight,
    otherwise every edge has weight 1.
    """
    line = line.rstrip("\r\n")
    if not line or line.startswith("#"):
        return None
    tokens = line.split()
    if len(tokens) < 2:
        return None
    src, dest = _to_int(tokens[0]), _to_int(tokens[1])
    if src is None or dest is None:
        return None
    weight = 1
    if weighted and len(tokens) > 2:
        parsed = _to_int(tokens[2])
        if parsed is not None:
            weight = parsed
    return Edge(src, dest, weight)


def iter_edges(lines: Iterable[str], weighted: bool = False) -> Iterator[Edge]:
    """Yield the edges found in ``lines``, skipping everything else."""
    for line in lines:
        edge = parse_edge_line(line, weighted)
        if edge is not None:
            yield edge


def read_edges(path: str | os.PathLike[str], weighted: bool = False) -> list[Edge]:
    """Read all edges from the edge-list file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return list(iter_edges(handle, weighted))