"""Discovery and ordering of instance files in a directory."""

from __future__ import annotations

import os
import re
from pathlib import Path

_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MARKER = "max_div_"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return int(match.group(1))


def instance_sort_key(name: str) -> tuple[int, int]:
    """Sort key ``(k, n)`` taken from a name like ``max_div_<n>_<k>.txt``.

    Names without that pattern sort last.
    """
    last = (_INT_MAX, _INT_MAX)
    pos = name.find(_MARKER)
    if pos < 0:
        return last
    pos += len(_MARKER)
    underscore = name.find("_", pos)
    if underscore < 0:
        return last
    n = _leading_int(name[pos:underscore])
    start = underscore + 1
    dot = name.find(".", start)
    if dot < 0:
        dot = len(name)
    k = _leading_int(name[start:dot])
    return (k, n)


def list_instance_files(directory: str | Path) -> list[str]:
    """Paths of the entries of ``directory`` ordered by :func:`instance_sort_key`.

    A directory that cannot be read yields no files.
    """
    base = str(directory)
    try:
        names = os.listdir(base)
    except OSError:
        return []
    return sorted((f"{base}/{name}" for name in names), key=instance_sort_key)