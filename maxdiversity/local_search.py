"""Swap-based local search for improving a solution."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from maxdiversity.greedy import GreedySolver
from maxdiversity.instance import Point

_log = logging.getLogger(__name__)


def _as_points(solution: Sequence[Sequence[float]]) -> list[Point]:
    return [tuple(p) for p in solution]


class LocalSearch(GreedySolver):
    """Improves solutions by exchanging a chosen point for an unchosen one."""

    def outside_elements(self, solution: Sequence[Sequence[float]]) -> list[Point]:
        """Points of the instance that are not in ``solution``, in order."""
        chosen = _as_points(solution)
        return [p for p in self.instance.points if p not in chosen]

    @staticmethod
    def _neighbours(
        anchors: list[Point], current: list[Point], outside: list[Point]
    ) -> Iterator[list[Point]]:
        for i, anchor in enumerate(anchors):
            for candidate in outside:
                if anchor == candidate:
                    continue
                trial = list(current)
                trial[i] = candidate
                yield trial

    def swap(self, solution: Sequence[Sequence[float]]) -> list[Point]:
        """The best solution reachable with a single exchange."""
        start = _as_points(solution)
        outside = self.outside_elements(start)
        best, best_z = start, self.objective(start)
        for trial in self._neighbours(start, start, outside):
            z = self.objective(trial)
            if z > best_z:
                best, best_z = trial, z
                _log.debug("improved solution: %s", best_z)
        return best

    def swap_first_improvement(self, solution: Sequence[Sequence[float]]) -> list[Point]:
        """Apply the first improving exchange repeatedly until none is left."""
        start = _as_points(solution)
        outside = self.outside_elements(start)
        current, current_z = start, self.objective(start)
        while True:
            better = next(
                (
                    trial
                    for trial in self._neighbours(start, current, outside)
                    if self.objective(trial) > current_z
                ),
                None,
            )
            if better is None:
                return current
            current, current_z = better, self.objective(better)
            _log.debug("improved solution: %s", current_z)

    def swap_best_improvement(self, solution: Sequence[Sequence[float]]) -> list[Point]:
        """Apply the best improving exchange of each pass until none is left."""
        start = _as_points(solution)
        outside = self.outside_elements(start)
        current = start
        best, best_z = current, self.objective(current)
        improved = True
        while improved:
            improved = False
            for trial in self._neighbours(start, current, outside):
                z = self.objective(trial)
                if z > best_z:
                    best, best_z, improved = trial, z, True
                    _log.debug("improved solution: %s", best_z)
            current = best
        return current