"""Constructive greedy heuristic based on the centre of gravity."""

from __future__ import annotations

from typing import Sequence

from maxdiversity.instance import MDPInstance, Point, dispersion, euclidean_distance


class GreedySolver:
    """Repeatedly adds the point farthest from the centroid of the chosen set."""

    def __init__(self, instance: MDPInstance) -> None:
        self.instance = instance

    def centroid(self, points: Sequence[Sequence[float]]) -> Point:
        """Centre of gravity of a non-empty set of points."""
        if not points:
            raise ValueError("cannot take the centroid of an empty set")
        return tuple(sum(column) / len(points) for column in zip(*points))

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Euclidean distance between two vectors."""
        return euclidean_distance(a, b)

    def farthest_index(self, points: Sequence[Sequence[float]], center: Sequence[float]) -> int:
        """Index of the first point at maximum distance from ``center``."""
        if not points:
            raise ValueError("cannot choose from an empty set")
        return max(range(len(points)), key=lambda i: self.distance(points[i], center))

    def run(self) -> list[Point]:
        """Build a solution of ``instance.m`` points."""
        remaining = list(self.instance.points)
        selected: list[Point] = []
        center = self.centroid(remaining)
        while len(selected) < self.instance.m:
            selected.append(remaining.pop(self.farthest_index(remaining, center)))
            center = self.centroid(selected)
        return selected

    def objective(self, solution: Sequence[Sequence[float]]) -> float:
        """Sum of pairwise distances of ``solution``."""
        return dispersion(solution)