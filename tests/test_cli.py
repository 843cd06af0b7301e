import io
import random
from itertools import combinations
from pathlib import Path

import pytest

from maxdiversity.cli import (
    main,
    run_branch_and_bound_grasp,
    run_branch_and_bound_greedy,
    run_grasp,
    run_greedy,
)
from maxdiversity.instance import MDPInstance, dispersion
from maxdiversity.solution import (
    BranchAndBoundSolution,
    GraspSolution,
    GreedySolution,
)

POINTS_2D = [(0, 0), (5, 1), (2, 7), (9, 3), (4, 9), (8, 8), (1, 4), (7, 6)]
POINTS_3D = [(x, y, (x + 2 * y) % 5) for x, y in POINTS_2D]


def _write_instance(path: Path, points) -> str:
    lines = [str(len(points)), str(len(points[0]))]
    lines += [" ".join(f"{c},00" for c in p) for p in points]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


class Recorder:
    def __init__(self):
        self.results = []
        self.separators = 0

    def write_result(self, solution):
        self.results.append(solution)

    def write_separator(self):
        self.separators += 1


def _optimum(path, m):
    inst = MDPInstance.from_file(path)
    return max(dispersion(c) for c in combinations(inst.points, m))


@pytest.fixture
def instance_dir(tmp_path):
    directory = tmp_path / "inst"
    directory.mkdir()
    _write_instance(directory / "max_div_8_3.txt", POINTS_3D)
    _write_instance(directory / "max_div_8_2.txt", POINTS_2D)
    return directory


def _run(monkeypatch, args, option):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{option}\n"))
    return main(args)


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "Uso:" in capsys.readouterr().out


def test_unknown_parameter(capsys):
    assert main(["--bogus"]) == 0
    assert "Parámetro '--bogus' no reconocido." in capsys.readouterr().out


def test_wrong_argument_count(capsys):
    assert main([]) == 0
    assert "Numero de parámetros incorrectos." in capsys.readouterr().out


def test_exit_option_writes_nothing(monkeypatch, capsys, instance_dir, tmp_path):
    out = tmp_path / "out.txt"
    assert _run(monkeypatch, [str(instance_dir), str(out)], 0) == 0
    text = capsys.readouterr().out
    assert "Saliendo del programa...." in text
    assert "FIN DEL PROGRAMA" in text
    assert not out.exists()


def test_invalid_option(monkeypatch, capsys, instance_dir, tmp_path):
    out = tmp_path / "out.txt"
    _run(monkeypatch, [str(instance_dir), str(out)], 9)
    assert "Opción '9' no reconocida." in capsys.readouterr().out
    assert not out.exists()


def test_greedy_option_writes_rows_in_order(monkeypatch, capsys, instance_dir, tmp_path):
    out = tmp_path / "out.txt"
    _run(monkeypatch, [str(instance_dir), str(out)], 1)
    text = out.read_text(encoding="utf-8")
    lines = text.splitlines()
    assert lines[0] == "TABLA DE RESULTADOS DEL ALGORITMO VORAZ"
    rows = [line for line in lines if line.startswith("max_div_")]
    assert len(rows) == 8
    assert all(r.startswith("max_div_8_2.txt") for r in rows[:4])
    assert all(r.startswith("max_div_8_3.txt") for r in rows[4:])
    assert "Numero de ficheros definidos: 2" in capsys.readouterr().out


def test_grasp_option_writes_all_settings(monkeypatch, instance_dir, tmp_path):
    out = tmp_path / "out.txt"
    _run(monkeypatch, [str(instance_dir), str(out)], 3)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "TABLA DE RESULTADOS DEL ALGORITMO GRASP"
    assert len([line for line in lines if line.startswith("max_div_")]) == 32


def test_branch_and_bound_option_title(monkeypatch, capsys, instance_dir, tmp_path):
    out = tmp_path / "out.txt"
    _run(monkeypatch, [str(instance_dir), str(out)], 4)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "TABLA DE RESULTADOS DEL ALGORITMO RAMIFICACION Y PODA"
    assert len([line for line in lines if line.startswith("max_div_")]) == 8
    assert "Ejecutando Ramificacion y Poda Voraz..." in capsys.readouterr().out


def test_run_greedy_records_each_m(tmp_path):
    path = _write_instance(tmp_path / "max_div_8_2.txt", POINTS_2D)
    table = Recorder()
    run_greedy(path, table)
    assert [s.m for s in table.results] == [2, 3, 4, 5]
    assert all(isinstance(s, GreedySolution) for s in table.results)
    assert all(len(s.points) == s.m for s in table.results)
    assert table.separators == 1


def test_local_search_never_worse_than_greedy(tmp_path):
    path = _write_instance(tmp_path / "max_div_8_2.txt", POINTS_2D)
    plain, improved = Recorder(), Recorder()
    run_greedy(path, plain)
    run_greedy(path, improved, local_search=True)
    for a, b in zip(plain.results, improved.results):
        assert b.z >= a.z - 1e-9


def test_run_grasp_settings(tmp_path):
    path = _write_instance(tmp_path / "max_div_8_2.txt", POINTS_2D)
    table = Recorder()
    run_grasp(path, table, random.Random(3))
    settings = [(s.m, s.iterations, s.lrc) for s in table.results]
    assert len(settings) == 16
    assert settings[:4] == [(2, 10, 2), (2, 10, 3), (2, 20, 2), (2, 20, 3)]
    assert all(isinstance(s, GraspSolution) for s in table.results)
    assert table.separators == 1


def test_branch_and_bound_greedy_is_optimal(tmp_path):
    path = _write_instance(tmp_path / "max_div_8_2.txt", POINTS_2D)
    table = Recorder()
    run_branch_and_bound_greedy(path, table)
    assert len(table.results) == 4
    for s in table.results:
        assert isinstance(s, BranchAndBoundSolution)
        assert len(s.points) == s.m
        assert s.z == pytest.approx(_optimum(path, s.m))
        assert s.nodes_generated >= 8