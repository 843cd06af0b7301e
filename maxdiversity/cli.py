"""Command line program that solves every instance in a directory."""

from __future__ import annotations

import random
import re
import sys
import time
from pathlib import Path
from typing import Protocol, Sequence

from maxdiversity.branch_and_bound import BranchAndBound
from maxdiversity.instance import MDPInstance
from maxdiversity.reader import list_instance_files
from maxdiversity.solution import BranchAndBoundSolution, Solution
from maxdiversity.solver import MDPSolver
from maxdiversity.table import (
    BranchAndBoundTable,
    GraspTable,
    GreedyTable,
    ResultTable,
)

PROG = "maxdiversity"

HELP_TEXT = (
    f"Uso: {PROG} <ruta_directorio> <fichero_salida.txt>\n\n"
    "Encuentra la máxima diversidad entre vectores de varias formas diferentes: "
    "utilizando voraz, GRASP y ramificación y poda.\n"
    "Obtiene los vectores de los ficheros de entrada que están en la ruta del "
    "directorio.\n"
    "Además, imprime los resultados en un fichero de salida.\n"
    "Opciones: \n"
    "  --help \t\t Muestra la ayuda. \n"
    "  <ruta_directorio> <fichero_salida.txt>\t "
)

MENU = (
    "Seleccione una opción: ",
    "1. Resolver mediante VORAZ",
    "2. Resolver mediante VORAZ y Busqueda Local",
    "3. Resolver mediante GRASP",
    "4. Resolver mediante Ramificacion y Poda con la cota inferior del Voraz",
    "5. Resolver mediante Ramificacion y Poda con la cota inferior del GRASP",
    "0. Salir",
)

M_VALUES = range(2, 6)
ITERATION_STEPS = range(1, 3)
LRC_VALUES = range(2, 4)
BASE_ITERATIONS = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _Table(Protocol):
    def write_result(self, solution: Solution) -> None: ...

    def write_separator(self) -> None: ...


def _load(path: str, m: int) -> MDPInstance:
    return MDPInstance.from_file(path).with_m(m)


def run_greedy(path: str, table: _Table, local_search: bool = False) -> None:
    """Solve ``path`` greedily for every ``m`` and write the rows to ``table``."""
    for m in M_VALUES:
        solver = MDPSolver(_load(path, m))
        if local_search:
            solution = solver.solve_greedy_local_search()
        else:
            solution = solver.solve_greedy()
        table.write_result(solution)
    table.write_separator()


def _grasp_settings():
    for m in M_VALUES:
        for step in ITERATION_STEPS:
            for lrc in LRC_VALUES:
                yield m, BASE_ITERATIONS * step, lrc


def run_grasp(path: str, table: _Table, rng: random.Random | None = None) -> None:
    """Solve ``path`` with GRASP for every setting and write the rows to ``table``."""
    for m, iterations, lrc in _grasp_settings():
        solver = MDPSolver(_load(path, m), rng)
        table.write_result(solver.solve_grasp(lrc, iterations))
    table.write_separator()


def _branch_and_bound(instance: MDPInstance, start: Solution) -> BranchAndBoundSolution:
    search = BranchAndBound(instance)
    began = time.process_time()
    points = search.run(start.z)
    cpu = time.process_time() - began
    if not points:
        points = list(start.points)
    return BranchAndBoundSolution(
        points=tuple(points),
        z=instance.dispersion(points),
        cpu=cpu,
        instance=instance,
        nodes_generated=search.nodes_generated,
    )


def run_branch_and_bound_greedy(path: str, table: _Table) -> None:
    """Branch and bound bounded below by the greedy result, for every ``m``."""
    print("Ejecutando Ramificacion y Poda Voraz...")
    for m in M_VALUES:
        instance = _load(path, m)
        start = MDPSolver(instance).solve_greedy()
        table.write_result(_branch_and_bound(instance, start))
    table.write_separator()


def run_branch_and_bound_grasp(
    path: str, table: _Table, rng: random.Random | None = None
) -> None:
    """Branch and bound bounded below by GRASP, for every GRASP setting."""
    print("Ejecutando Ramificacion y Poda GRASP...")
    for m, iterations, lrc in _grasp_settings():
        instance = _load(path, m)
        start = MDPSolver(instance, rng).solve_grasp(lrc, iterations)
        table.write_result(_branch_and_bound(instance, start))
    table.write_separator()


def _read_option() -> int:
    for line in MENU:
        print(line)
    line = sys.stdin.readline()
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else 0


def _make_table(option: int, output: str) -> ResultTable:
    if option in (1, 2):
        return GreedyTable(output)
    if option == 3:
        return GraspTable(output)
    return BranchAndBoundTable(output)


def _solve_directory(directory: str, output: str, option: int, rng: random.Random) -> None:
    files = list_instance_files(directory)
    with _make_table(option, output) as table:
        table.write_header()
        for path in files:
            print(f"\033[1;33mEjecutando el fichero: {path}\033[0m")
            if option in (1, 2):
                run_greedy(path, table, local_search=option == 2)
            elif option == 3:
                run_grasp(path, table, rng)
            elif option == 4:
                run_branch_and_bound_greedy(path, table)
            else:
                run_branch_and_bound_grasp(path, table, rng)
    print(f"Numero de ficheros definidos: {len(files)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments, ask for an algorithm and solve every instance."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        if args[0] == "--help":
            print(HELP_TEXT)
        else:
            print(f"{PROG}: Error: Parámetro '{args[0]}' no reconocido.")
            print(f"Pruebe '{PROG} --help' para más información.")
        return 0
    if len(args) != 2:
        print(f"{PROG}: Error: Numero de parámetros incorrectos.")
        print(f"Pruebe '{PROG} --help' para más información.")
        return 0

    directory, output = args
    rng = random.Random()
    option = _read_option()
    if option == 0:
        print("Saliendo del programa....")
    elif 1 <= option <= 5:
        _solve_directory(directory, output, option, rng)
    else:
        print(f"{PROG}: Error: Opción '{option}' no reconocida.")
        print(f"Pruebe '{PROG} --help' para más información.")
    print(
        "\033[1;32m-----------------------------FIN DEL PROGRAMA"
        "-----------------------------\033[0m"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())