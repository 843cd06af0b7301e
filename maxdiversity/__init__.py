"""Greedy, local search, GRASP and branch and bound solvers for the maximum diversity problem."""

__version__ = "0.1.0"