"""Fixed-width result tables written to a text file."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from maxdiversity.solution import BranchAndBoundSolution, GraspSolution, Solution

SEPARATOR = "_" * 140


def _indices_text(solution: Solution) -> str:
    return "".join(f"{index} " for index in solution.selected_indices())


class ResultTable(ABC):
    """A results file holding a header and one row per solution."""

    def __init__(self, path: str | Path, first_time: bool = True) -> None:
        self._file: TextIO = open(path, "w" if first_time else "a", encoding="utf-8")

    def _write_line(self, text: str) -> None:
        self._file.write(text + "\n")

    @abstractmethod
    def _title(self) -> str:
        """Title line of the table."""

    @abstractmethod
    def _columns(self) -> str:
        """Column headings line."""

    @abstractmethod
    def _row(self, solution: Solution) -> str:
        """One formatted row for ``solution``."""

    def write_header(self) -> None:
        """Write the title and the column headings."""
        self._write_line(self._title())
        self._write_line(SEPARATOR)
        self._write_line(self._columns())
        self._write_line(SEPARATOR)

    def write_result(self, solution: Solution) -> None:
        """Write one row describing ``solution``."""
        self._write_line(self._row(solution))

    def write_separator(self) -> None:
        """Write a separator line."""
        self._write_line(SEPARATOR)

    def close(self) -> None:
        """Flush and close the file."""
        self._file.close()

    def __enter__(self) -> ResultTable:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @staticmethod
    def _common(solution: Solution) -> str:
        return (
            f"{solution.problem_name():<25}"
            f"{solution.n:<10}{solution.k:<10}{solution.m:<10}"
        )


class GreedyTable(ResultTable):
    """Results of the greedy algorithm."""

    def _title(self) -> str:
        return "TABLA DE RESULTADOS DEL ALGORITMO VORAZ"

    def _columns(self) -> str:
        return f"{'Problema':<25}{'n':<10}{'K':<10}{'m':<10}{'z':<15}{'S':<25}{'CPU':<25}"

    def _row(self, solution: Solution) -> str:
        return (
            self._common(solution)
            + f"{solution.z:<15.2f}{_indices_text(solution):<25}{solution.cpu:<25.2e}"
        )


class GraspTable(ResultTable):
    """Results of GRASP with its iteration count and candidate list size."""

    def _title(self) -> str:
        return "TABLA DE RESULTADOS DEL ALGORITMO GRASP"

    def _columns(self) -> str:
        return (
            f"{'Problema':<25}{'n':<10}{'K':<10}{'m':<10}{'Iter':<15}{'|LRC|':<10}"
            f"{'z':<15}{'S':<25}{'CPU':<25}"
        )

    def _row(self, solution: Solution) -> str:
        if not isinstance(solution, GraspSolution):
            raise TypeError("a GRASP table needs a GRASP solution")
        return (
            self._common(solution)
            + f"{solution.iterations:<15}{solution.lrc:<10}"
            + f"{solution.z:<15.2f}{_indices_text(solution):<25}{solution.cpu:<25.2e}"
        )


class BranchAndBoundTable(ResultTable):
    """Results of branch and bound with the number of nodes generated."""

    def _title(self) -> str:
        return "TABLA DE RESULTADOS DEL ALGORITMO RAMIFICACION Y PODA"

    def _columns(self) -> str:
        return (
            f"{'Problema':<25}{'n':<10}{'K':<10}{'m':<10}{'z':<15}{'S':<25}"
            f"{'CPU':<25}{'Nodos_generados':<10}"
        )

    def _row(self, solution: Solution) -> str:
        if not isinstance(solution, BranchAndBoundSolution):
            raise TypeError("a branch and bound table needs a branch and bound solution")
        return (
            self._common(solution)
            + f"{solution.z:<15.2f}{_indices_text(solution):<25}{solution.cpu:<25.2e}"
            + f"{solution.nodes_generated:<10}"
        )