from __future__ import annotations

from typing import Callable, List, Sequence, Union

import numpy as np

from ...comparator import ParetoComparator


def axis_comparator(index: int, maximize: bool = True) -> Callable:
    """comparison function on the `index`-th coordinate of sequence-like individuals

    Parameters
    ----------
    index : int
        the coordinate to compare
    maximize : bool, optional
        whether a larger coordinate is better, by default True
    """
    direction = 1 if maximize else -1

    def compare(a: Sequence, b: Sequence) -> int:
        x, y = a[index], b[index]
        return direction * ((x > y) - (x < y))

    return compare


def comparator_from_objectives(
    n_obj: int, maximize: Union[bool, List[bool]] = True
) -> ParetoComparator:
    """Build a `ParetoComparator` whose dimension `i` compares the `i`-th coordinate

    The comparator follows the "positive means better" convention, so the maximal
    frontier is the one to extract whatever the per-objective direction is.

    Parameters
    ----------
    n_obj : int
        the number of objectives
    maximize : Union[bool, List[bool]], optional
        the direction of all the objectives, or one per objective, by default True
    """
    if isinstance(maximize, bool):
        maximize = [maximize] * n_obj
    assert len(maximize) == n_obj

    comparator = ParetoComparator()
    for i, m in enumerate(maximize):
        comparator.set_dimension_comparator(i, axis_comparator(i, bool(m)))
    return comparator


def non_dominated_set_2d(y, minimize=True):
    """
    Argument
    --------
    y : numpy 2d array,
        where the each solution occupies a row
    minimize : bool or a pair of bool
        the direction of both objectives, or one per objective

    Returns
    -------
    the indices of the non-dominated rows, by decreasing first objective
    """
    y = np.array(y, dtype=float)
    N, n_obj = y.shape
    assert n_obj == 2

    if isinstance(minimize, bool):
        minimize = [minimize] * n_obj
    minimize = np.asarray(minimize).ravel()
    assert minimize.shape == (n_obj,)
    # turn every objective into a maximization
    y *= np.where(minimize, -1, 1)

    idx = np.lexsort((y[:, 1], y[:, 0]))[::-1]
    ND = []
    best = -np.inf
    for i in idx:
        if y[i, 1] > best:
            ND.append(i)
            best = y[i, 1]
    return np.asarray(ND, dtype=int)
