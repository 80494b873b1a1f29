import sys

import numpy as np

sys.path.insert(0, "../")
from pareto_efficiency import ParetoHelper, comparator_from_objectives
from pareto_efficiency.utils.multi_objective import axis_comparator, non_dominated_set_2d

np.random.seed(42)
helper = ParetoHelper()


def test_axis_comparator():
    f = axis_comparator(1)
    assert f((0, 3), (9, 1)) == 1
    assert f((0, 1), (9, 3)) == -1
    assert f((0, 1), (9, 1)) == 0
    f = axis_comparator(1, maximize=False)
    assert f((0, 3), (9, 1)) == -1


def test_comparator_from_objectives():
    comparator = comparator_from_objectives(2, maximize=[True, False])
    assert comparator.dimensions == (0, 1)
    assert comparator.compare((3, 1), (2, 2)) == 1
    assert comparator.compare((3, 3), (2, 2)) == 0

    population = [(1, 1), (2, 2), (3, 3), (3, 4)]
    assert helper.get_maximal_frontier_of(population, comparator) == {(1, 1), (2, 2), (3, 3)}


def test_non_dominated_set_2d():
    Y = np.random.rand(40, 2)
    population = [tuple(y) for y in Y.tolist()]

    idx = non_dominated_set_2d(Y, minimize=True)
    frontier = helper.get_minimal_frontier_of(population, comparator_from_objectives(2))
    assert {population[i] for i in idx} == frontier

    idx = non_dominated_set_2d(Y, minimize=[False, True])
    frontier = helper.get_maximal_frontier_of(
        population, comparator_from_objectives(2, maximize=[True, False])
    )
    assert {population[i] for i in idx} == frontier
    # the input is left untouched
    assert np.all(Y == np.asarray(population))


def test_no_tensor_library_required():
    import pareto_efficiency  # noqa: F401

    assert "torch" not in sys.modules
