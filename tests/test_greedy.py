import pytest

from maxdiversity.greedy import GreedySolver
from maxdiversity.instance import MDPInstance

SAMPLE = "5 2\n0,00 0,00\n1,00 0,00\n0,00 1,00\n9,00 9,00\n5,00 0,00\n"


@pytest.fixture
def instance():
    return MDPInstance.from_text(SAMPLE)


def test_centroid_of_single_point(instance):
    solver = GreedySolver(instance)
    p = instance.points[3]
    assert solver.centroid([p]) == pytest.approx(p)


def test_centroid_is_equidistant_from_two_points(instance):
    solver = GreedySolver(instance)
    p, q = instance.points[0], instance.points[3]
    c = solver.centroid([p, q])
    assert solver.distance(c, p) == pytest.approx(solver.distance(c, q))
    assert solver.distance(p, q) == pytest.approx(2 * solver.distance(c, p))


def test_centroid_of_empty_set(instance):
    with pytest.raises(ValueError):
        GreedySolver(instance).centroid([])


def test_farthest_index_is_maximal(instance):
    solver = GreedySolver(instance)
    points = list(instance.points)
    center = solver.centroid(points)
    idx = solver.farthest_index(points, center)
    best = solver.distance(points[idx], center)
    assert all(best >= solver.distance(p, center) for p in points)


def test_farthest_index_prefers_first_on_ties(instance):
    solver = GreedySolver(instance)
    points = [instance.points[1], instance.points[2]]
    assert solver.farthest_index(points, instance.points[0]) == 0


def test_farthest_index_empty(instance):
    with pytest.raises(ValueError):
        GreedySolver(instance).farthest_index([], (0.0, 0.0))


def test_run_selects_distinct_points(instance):
    solution = GreedySolver(instance.with_m(3)).run()
    assert len(solution) == 3
    assert len(set(solution)) == 3
    assert set(solution) <= set(instance.points)


def test_run_starts_with_farthest_from_centroid(instance):
    solver = GreedySolver(instance.with_m(2))
    points = list(instance.points)
    first = points[solver.farthest_index(points, solver.centroid(points))]
    assert solver.run()[0] == first


def test_run_with_all_points(instance):
    solution = GreedySolver(instance.with_m(5)).run()
    assert sorted(solution) == sorted(instance.points)


def test_run_with_zero_size(instance):
    assert GreedySolver(instance).run() == []


def test_run_with_too_many(instance):
    with pytest.raises(ValueError):
        GreedySolver(instance.with_m(6)).run()


def test_objective_matches_instance(instance):
    solver = GreedySolver(instance.with_m(4))
    solution = solver.run()
    assert solver.objective(solution) == pytest.approx(instance.dispersion(solution))