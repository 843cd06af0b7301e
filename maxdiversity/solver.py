"""Runs the solving algorithms on an instance and records their results."""

from __future__ import annotations

import logging
import random
import time

from maxdiversity.greedy import GreedySolver
from maxdiversity.grasp import GraspSolver
from maxdiversity.instance import MDPInstance
from maxdiversity.local_search import LocalSearch
from maxdiversity.solution import GraspSolution, GreedySolution

_log = logging.getLogger(__name__)


class MDPSolver:
    """Solves one instance with the greedy, greedy plus local search or GRASP methods."""

    def __init__(self, instance: MDPInstance, rng: random.Random | None = None) -> None:
        self.instance = instance
        self.rng = rng if rng is not None else random.Random()
        self.greedy_solution: GreedySolution | None = None
        self.grasp_solution: GraspSolution | None = None

    def solve_greedy(self) -> GreedySolution:
        """Solve with the greedy construction."""
        _log.info("solving with greedy")
        greedy = GreedySolver(self.instance)
        start = time.process_time()
        points = greedy.run()
        cpu = time.process_time() - start
        self.greedy_solution = GreedySolution(
            points=tuple(points),
            z=greedy.objective(points),
            cpu=cpu,
            instance=self.instance,
        )
        return self.greedy_solution

    def solve_greedy_local_search(self) -> GreedySolution:
        """Solve with the greedy construction improved by best-improvement swaps."""
        _log.info("solving with greedy and local search")
        greedy = GreedySolver(self.instance)
        start = time.process_time()
        points = greedy.run()
        points = LocalSearch(self.instance).swap_best_improvement(points)
        cpu = time.process_time() - start
        self.greedy_solution = GreedySolution(
            points=tuple(points),
            z=greedy.objective(points),
            cpu=cpu,
            instance=self.instance,
        )
        return self.greedy_solution

    def solve_grasp(self, lrc: int, iterations: int = 10) -> GraspSolution:
        """Solve with GRASP using a candidate list of size ``lrc``."""
        _log.info("solving with GRASP")
        grasp = GraspSolver(self.instance, self.rng)
        start = time.process_time()
        points = grasp.run_grasp(lrc, iterations)
        cpu = time.process_time() - start
        self.grasp_solution = GraspSolution(
            points=tuple(points),
            z=grasp.objective(points),
            cpu=cpu,
            instance=self.instance,
            iterations=iterations,
            lrc=lrc,
        )
        return self.grasp_solution