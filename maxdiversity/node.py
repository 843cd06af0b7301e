"""Search tree nodes for the branch and bound algorithm."""

from __future__ import annotations

from dataclasses import dataclass

from maxdiversity.instance import Point


@dataclass(frozen=True)
class Node:
    """A partial solution, the candidates still open to it, and its upper bound."""

    partial: tuple[Point, ...]
    remaining: tuple[Point, ...]
    upper_bound: float

    def __lt__(self, other: Node) -> bool:
        """Nodes are ordered by their upper bound."""
        if not isinstance(other, Node):
            return NotImplemented
        return self.upper_bound < other.upper_bound