# maxdiversity

Solvers for the maximum diversity problem. Given `n` points in `K`
dimensions, choose `m` of them so that the sum of the pairwise Euclidean
distances between the chosen points is as large as possible.

The package provides:

- `GreedySolver` (`maxdiversity.greedy`): repeatedly adds the point
  farthest from the centroid of the points chosen so far.
- `LocalSearch` (`maxdiversity.local_search`): swap-based improvement of a
  solution, with `swap`, `swap_first_improvement` and
  `swap_best_improvement`.
- `GraspSolver` (`maxdiversity.grasp`): a randomized greedy construction
  that picks among the `lrc` farthest candidates, followed by
  best-improvement local search, repeated for a number of iterations.
- `BranchAndBound` (`maxdiversity.branch_and_bound`): an exact search that
  starts from a given lower bound and returns a solution strictly better
  than it, or an empty list if it finds none.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Instance files

An instance file starts with the number of points `n` and the dimension
`K`, followed by `n * K` coordinates. Each coordinate is written as a whole
part, a one-character separator (a comma in practice) and a hundredths
part; its value is `whole + 0.01 * hundredths`, so `2,50` is `2.5` and
`4,10` is `4.1`.

```
4
2
1,00 2,50
3,25 0,00
0,75 4,10
2,00 2,00
```

`MDPInstance.from_file` and `MDPInstance.from_text` read this format and
raise `ValueError` on malformed input. The instance keeps the points, the
full distance matrix and the largest pairwise distance; `with_m` returns a
copy with the solution size set.

In a directory, entries named `max_div_<n>_<K>.txt` are ordered by `K`
first and then `n`; other entries come after them
(`maxdiversity.reader.list_instance_files`).

## Command line

```
maxdiversity <instance_directory> <output_file.txt>
```

The program then prints a menu (in Spanish) and reads one option from
standard input:

| Option | Algorithm |
| ------ | --------- |
| 1 | greedy |
| 2 | greedy followed by best-improvement local search |
| 3 | GRASP |
| 4 | branch and bound, lower bound from the greedy result |
| 5 | branch and bound, lower bound from the GRASP result |
| 0 | exit |

Every file in the directory is solved for `m` from 2 to 5. GRASP runs (and
branch and bound bounded by GRASP) are also repeated for candidate list
sizes 2 and 3 and for 10 and 20 iterations. When branch and bound finds
nothing better than its starting bound, the starting solution is reported.

The results are written to the output file as a fixed-width table with the
problem name, `n`, `K`, `m`, the objective value `z`, the indices of the
chosen points and the CPU time; the GRASP table adds the iteration count
and candidate list size, and the branch and bound table the number of
generated nodes. The output file is overwritten.

Run `maxdiversity --help` for a short description.

## Library use

```python
import random

from maxdiversity.branch_and_bound import BranchAndBound
from maxdiversity.grasp import GraspSolver
from maxdiversity.greedy import GreedySolver
from maxdiversity.instance import MDPInstance

instance = MDPInstance.from_file("instances/max_div_15_2.txt").with_m(3)

greedy = GreedySolver(instance).run()
print(instance.dispersion(greedy))

grasp = GraspSolver(instance, random.Random(1)).run_grasp(2, 10)
print(instance.dispersion(grasp))

best = BranchAndBound(instance).run(instance.dispersion(greedy))
print(instance.dispersion(best or greedy))
```

`MDPSolver` in `maxdiversity.solver` runs the greedy, greedy with local
search and GRASP methods and returns `GreedySolution` or `GraspSolution`
records with their CPU time. The tables in `maxdiversity.table`
(`GreedyTable`, `GraspTable`, `BranchAndBoundTable`) write such records to
a text file and can be used as context managers.

## Limitations

The command is interactive only: the algorithm is always chosen from the
menu on standard input, and there is no option to pick it on the command
line. Progress from the local search is reported through the `logging`
module at debug level, not printed.