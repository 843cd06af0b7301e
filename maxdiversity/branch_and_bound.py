"""Exact branch and bound search for the maximum diversity problem."""

from __future__ import annotations

import heapq
from itertools import combinations, count
from typing import Sequence

from maxdiversity.instance import MDPInstance, Point
from maxdiversity.node import Node


class BranchAndBound:
    """Explores subsets of size ``instance.m`` pruning by an upper bound."""

    def __init__(self, instance: MDPInstance) -> None:
        self.instance = instance
        self.m = instance.m
        self.nodes_generated = 0

    def _indices(self, points: Sequence[Sequence[float]]) -> list[int]:
        """Indices in the instance of the given points; unknown points are skipped."""
        found = []
        for point in points:
            try:
                found.append(self.instance.points.index(tuple(point)))
            except ValueError:
                continue
        return found

    def upper_bound(
        self, partial: Sequence[Sequence[float]], remaining: Sequence[Sequence[float]]
    ) -> float:
        """Optimistic value of any completion of ``partial`` from ``remaining``."""
        chosen = self._indices(partial)
        rest = self._indices(remaining)
        d = self.instance.distances

        current = sum(d[i][j] for i, j in combinations(chosen, 2))
        if len(chosen) == self.m:
            return current

        missing = self.m - len(chosen)
        to_partial = sorted((sum(d[p][c] for p in chosen) for c in rest), reverse=True)
        among_rest = sorted((d[i][j] for i, j in combinations(rest, 2)), reverse=True)
        pairs_needed = missing * (missing - 1) // 2

        return (
            current
            + sum(to_partial[: max(missing, 0)])
            + sum(among_rest[:pairs_needed])
        )

    def expand(self, node: Node) -> list[Node]:
        """Children of ``node``: one per remaining candidate added to the partial set."""
        children = []
        for i, candidate in enumerate(node.remaining):
            partial = node.partial + (candidate,)
            remaining = node.remaining[:i] + node.remaining[i + 1 :]
            children.append(Node(partial, remaining, self.upper_bound(partial, remaining)))
        return children

    def run(self, lower_bound: float) -> list[Point]:
        """Best solution strictly better than ``lower_bound``, or an empty list."""
        points = list(self.instance.points)
        best: list[Point] = []
        bound = lower_bound
        heap: list[tuple[float, int, Node]] = []
        tie = count()

        def push(node: Node) -> None:
            heapq.heappush(heap, (-node.upper_bound, next(tie), node))

        for point in points:
            partial = (point,)
            remaining = tuple(e for e in points if e != point)
            push(Node(partial, remaining, self.upper_bound(partial, remaining)))
            self.nodes_generated += 1

        while heap:
            entry = heapq.heappop(heap)
            if heap:
                # The second most promising node is examined; the first goes back.
                top, entry = entry, heapq.heappop(heap)
                heapq.heappush(heap, top)
            node = entry[2]

            if node.upper_bound <= bound:
                continue

            if len(node.partial) == self.m:
                value = self.instance.dispersion(node.partial)
                if value > bound:
                    bound = value
                    best = list(node.partial)
                continue

            for child in self.expand(node):
                if child.upper_bound > bound:
                    push(child)
                    self.nodes_generated += 1

        return best