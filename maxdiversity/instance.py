"""Instances of the maximum diversity problem and their distance data."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence

Point = tuple[float, ...]

_INTEGER = re.compile(r"[+-]?\d+")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE = re.compile(r"\s*")


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two vectors."""
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def dispersion(points: Iterable[Sequence[float]]) -> float:
    """Sum of the distances between every pair of points."""
    return sum(euclidean_distance(p, q) for p, q in combinations(list(points), 2))


class _Scanner:
    """Reads whitespace separated values the way a formatted stream does."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def _token(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip_space()
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {what} at offset {self._pos}")
        self._pos = match.end()
        return match.group()

    def integer(self) -> int:
        return int(self._token(_INTEGER, "an integer"))

    def number(self) -> float:
        return float(self._token(_NUMBER, "a number"))

    def char(self) -> str:
        self._skip_space()
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def decimal(self) -> float:
        """A value written as whole part, separator and hundredths."""
        whole = self.number()
        self.char()
        hundredths = self.number()
        return whole + 0.01 * hundredths


@dataclass(frozen=True)
class MDPInstance:
    """A set of ``n`` points of dimension ``k`` from which ``m`` are chosen."""

    path: str
    n: int
    k: int
    points: tuple[Point, ...]
    distances: tuple[tuple[float, ...], ...]
    max_distance: float
    m: int = 0

    @classmethod
    def from_file(cls, path: str | Path) -> MDPInstance:
        """Load an instance from a file."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_text(text, str(path))

    @classmethod
    def from_text(cls, text: str, path: str = "") -> MDPInstance:
        """Parse an instance: ``n``, ``k`` and then ``n * k`` comma values."""
        scanner = _Scanner(text)
        n = scanner.integer()
        k = scanner.integer()
        if n < 0 or k < 0:
            raise ValueError("the number of elements and the dimension must not be negative")
        points = tuple(tuple(scanner.decimal() for _ in range(k)) for _ in range(n))

        matrix = [[0.0] * n for _ in range(n)]
        max_distance = 0.0
        for (i, p), (j, q) in combinations(enumerate(points), 2):
            d = euclidean_distance(p, q)
            matrix[i][j] = matrix[j][i] = d
            max_distance = max(max_distance, d)

        return cls(
            path=path,
            n=n,
            k=k,
            points=points,
            distances=tuple(tuple(row) for row in matrix),
            max_distance=max_distance,
        )

    def distance(self, i: int, j: int) -> float:
        """Distance between the points at indices ``i`` and ``j``."""
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"index ({i}, {j}) out of range for {self.n} elements")
        return self.distances[i][j]

    def dispersion(self, solution: Iterable[Sequence[float]]) -> float:
        """Objective value of a solution: the sum of its pairwise distances."""
        return dispersion(solution)

    def with_m(self, m: int) -> MDPInstance:
        """A copy of this instance with the solution size set to ``m``."""
        return replace(self, m=m)