"""GRASP: randomised greedy construction followed by local search."""

from __future__ import annotations

import random
from typing import Sequence

from maxdiversity.greedy import GreedySolver
from maxdiversity.instance import MDPInstance, Point
from maxdiversity.local_search import LocalSearch


class GraspSolver(GreedySolver):
    """Chooses each point at random among the ``lrc`` farthest candidates."""

    def __init__(self, instance: MDPInstance, rng: random.Random | None = None) -> None:
        super().__init__(instance)
        self.rng = rng if rng is not None else random.Random()

    def farthest_indices(
        self, points: Sequence[Sequence[float]], center: Sequence[float], lrc: int
    ) -> list[int]:
        """Indices of the ``lrc`` points farthest from ``center``, farthest first.

        Ties are broken in favour of the higher index.
        """
        if not points:
            raise ValueError("cannot choose from an empty set")
        if lrc > len(points):
            raise ValueError("the candidate list cannot be larger than the set")
        ranked = sorted(
            ((self.distance(p, center), i) for i, p in enumerate(points)), reverse=True
        )
        return [i for _, i in ranked[: max(lrc, 0)]]

    def randomized_greedy(self, lrc: int) -> list[Point]:
        """Build a solution of ``instance.m`` points with random choices."""
        remaining = list(self.instance.points)
        selected: list[Point] = []
        center = self.centroid(remaining)
        while len(selected) < self.instance.m:
            candidates = self.farthest_indices(remaining, center, lrc)
            selected.append(remaining.pop(self.rng.choice(candidates)))
            center = self.centroid(selected)
        return selected

    def run_grasp(self, lrc: int, iterations: int = 10) -> list[Point]:
        """Best solution over ``iterations`` constructions improved by local search."""
        best = self.randomized_greedy(lrc)
        best_z = self.objective(best)
        search = LocalSearch(self.instance)
        for _ in range(iterations):
            candidate = search.swap_best_improvement(self.randomized_greedy(lrc))
            z = self.objective(candidate)
            if z > best_z:
                best, best_z = candidate, z
        return best