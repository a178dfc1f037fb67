"""Minimal prefix-tree node shared by beam hypotheses.

Each node stores one symbol and a link to its parent, so a hypothesis is read
backwards from its last node to the root.
"""
from __future__ import annotations

from typing import Callable

ROOT_ID = -1

StopFn = Callable[["PathTrie", list[int]], bool]


class PathTrie:
    __slots__ = ("character", "parent", "children")

    def __init__(self, character: int = ROOT_ID, parent: PathTrie | None = None):
        self.character = character
        self.parent = parent
        self.children: dict[int, PathTrie] = {}

    @property
    def is_root(self) -> bool:
        return self.character == ROOT_ID

    def child(self, symbol: int) -> PathTrie:
        node = self.children.get(symbol)
        if node is None:
            node = PathTrie(symbol, parent=self)
            self.children[symbol] = node
        return node

    def extend(self, symbols: list[int]) -> PathTrie:
        node = self
        for s in symbols:
            node = node.child(s)
        return node

    def get_path_vec(self, stop: StopFn) -> tuple[list[int], PathTrie]:
        return collect_backward(self, stop)

    def __repr__(self) -> str:
        return f"PathTrie(character={self.character})"


def collect_backward(node: PathTrie, stop: StopFn) -> tuple[list[int], PathTrie]:
    """Walk towards the root collecting symbols until ``stop`` fires or the root is hit.

    Returns the collected ids (nearest first) and the node where the walk halted;
    that node's own symbol is not collected.
    """
    ids: list[int] = []
    while not node.is_root and not stop(node, ids):
        ids.append(node.character)
        node = node.parent
    return ids, node


def stop_at_boundary(space_id: int | None) -> StopFn:
    def _stop(node: PathTrie, collected: list[int]) -> bool:
        return space_id is not None and node.character == space_id

    return _stop


def stop_after(n: int) -> StopFn:
    def _stop(node: PathTrie, collected: list[int]) -> bool:
        return len(collected) >= n

    return _stop
