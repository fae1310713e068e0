"""Dense indexing of arbitrary integer node identifiers."""

from __future__ import annotations

from collections.abc import Iterator


class NodeMapper:
    """Assigns consecutive indices to node identifiers in order of first appearance."""

    def __init__(self) -> None:
        self._index_of: dict[int, int] = {}
        self._ids: list[int] = []

    def index(self, node_id: int) -> int:
        """Return the index of ``node_id``, assigning the next free one if it is new."""
        idx = self._index_of.get(node_id)
        if idx is None:
            idx = len(self._ids)
            self._index_of[node_id] = idx
            self._ids.append(node_id)
        return idx

    def node_id(self, index: int) -> int:
        """Return the node identifier stored at ``index``."""
        if not 0 <= index < len(self._ids):
            raise IndexError(f"no node at index {index}")
        return self._ids[index]

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index_of

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)