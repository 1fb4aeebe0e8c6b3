"""Frontier of discovered, not yet expanded search nodes."""

from __future__ import annotations

from dataclasses import dataclass
import heapq


@dataclass(frozen=True)
class Node:
    x: int
    y: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def coord(self) -> tuple[int, int]:
        return (self.x, self.y)


class OpenSet:
    """Binary heap ordered by (f, h, insertion order).

    Among equal-f nodes the one closer to the goal wins, then the one inserted
    first. On an obstacle-free grid this keeps the extracted cells on a single
    shortest route.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, Node]] = []
        self._seq = 0

    def insert(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.f, node.h, self._seq, node))
        self._seq += 1

    def extract_best(self) -> Node:
        if not self._heap:
            raise IndexError("extract_best from an empty open set")
        return heapq.heappop(self._heap)[-1]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
