"""Results produced by the solving algorithms."""

from __future__ import annotations

from dataclasses import dataclass

from maxdiversity.instance import MDPInstance, Point


@dataclass(frozen=True)
class Solution:
    """A chosen set of points with its objective value and CPU time."""

    points: tuple[Point, ...]
    z: float
    cpu: float
    instance: MDPInstance

    @property
    def path(self) -> str:
        return self.instance.path

    @property
    def n(self) -> int:
        return self.instance.n

    @property
    def k(self) -> int:
        return self.instance.k

    @property
    def m(self) -> int:
        return self.instance.m

    def selected_indices(self) -> list[int]:
        """Positions in the instance of the chosen points; unknown points are left out."""
        indices = []
        for point in self.points:
            try:
                indices.append(self.instance.points.index(tuple(point)))
            except ValueError:
                continue
        return indices

    def problem_name(self) -> str:
        """The instance file name without its directory."""
        return self.path.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class GreedySolution(Solution):
    """Result of the greedy algorithm, with or without local search."""


@dataclass(frozen=True)
class GraspSolution(Solution):
    """Result of GRASP along with its parameters."""

    iterations: int
    lrc: int


@dataclass(frozen=True)
class BranchAndBoundSolution(Solution):
    """Result of branch and bound along with the number of nodes generated."""

    nodes_generated: int