from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

import dill

from .utils import sign

DimensionComparator = Callable[[Any, Any], float]


class ParetoComparator:
    """Compare multidimensional individuals in a Pareto way:

    * if A is better than B on all the dimensions (some can be equivalent),
      A is considered as the best one;
    * if A is equivalent to B on all the dimensions, A and B are equivalent;
    * if A is better than B on at least one dimension and worse on at least
      another one, A and B are also considered as equivalent, as we cannot
      decide which one is better.

    One comparison function is registered per dimension. A dimension can be any
    hashable key: an integer index, a string or an `Enum` member. Which sign means
    "better" is up to the caller, but **all the registered functions have to
    follow the same convention**: if one of them returns a positive value to say
    A is better than B, the others must do the same. This precondition is not
    checked; breaking it yields meaningless verdicts, not an error.

    The verdict does not depend on the iteration order of the registry: the
    result is either the common sign of all the non-zero per-dimension signs, or
    0 as soon as two of them disagree, and neither depends on which non-zero sign
    is met first.

    Be careful: two individuals said equivalent by this comparator (verdict 0)
    can be different, either tied on every dimension or incomparable. The two
    cases cannot be told apart from the returned value.
    """

    def __init__(self):
        self._comparators: Dict[Hashable, DimensionComparator] = {}

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def __len__(self) -> int:
        return len(self._comparators)

    def __contains__(self, dimension: Hashable) -> bool:
        return dimension in self._comparators

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimensions={list(self._comparators)})"

    @property
    def dimensions(self) -> Tuple[Hashable, ...]:
        return tuple(self._comparators.keys())

    def set_dimension_comparator(self, dimension: Hashable, comparator: DimensionComparator):
        """Set the comparison function of a given dimension. There can be only one
        function per dimension: a second registration replaces the first one.

        Parameters
        ----------
        dimension : Hashable
            the dimension to consider
        comparator : Callable[[Any, Any], float]
            the comparison function to use for the given dimension, returning a
            negative value, zero or a positive value
        """
        if not callable(comparator):
            raise TypeError(f"the comparator of dimension {dimension!r} is not callable")
        self._comparators[dimension] = comparator

    def get_dimension_comparator(self, dimension: Hashable) -> Optional[DimensionComparator]:
        """the comparison function set for `dimension`, None if there is none"""
        return self._comparators.get(dimension)

    def compare(self, a: Any, b: Any) -> int:
        """Pareto verdict of `a` against `b`

        Returns
        -------
        int
            the sign shared by every non-tied dimension, i.e., -1 if `a` is worse
            than `b`, 1 if it is better; 0 if all the dimensions tie, if two
            dimensions disagree, or if no dimension is registered
        """
        reference = 0
        for comparator in self._comparators.values():
            comparison = sign(comparator(a, b))
            if reference == 0:
                reference = comparison
            elif comparison * reference < 0:
                # one better, another worse: cannot decide
                return 0
        return reference

    def key(self) -> Callable:
        """wrap `compare` for `sorted` and friends"""
        return functools.cmp_to_key(self.compare)

    def negated(self) -> ParetoComparator:
        """a new comparator with the sign of every dimension flipped"""
        other = type(self)()
        for dimension, comparator in self._comparators.items():
            other.set_dimension_comparator(dimension, _negate(comparator))
        return other

    def dumps(self) -> bytes:
        # registered functions are mostly lambdas, out of reach of `pickle`
        return dill.dumps(self._comparators)

    @classmethod
    def loads(cls, data: bytes) -> ParetoComparator:
        comparator = cls()
        for dimension, func in dill.loads(data).items():
            comparator.set_dimension_comparator(dimension, func)
        return comparator


def _negate(comparator: DimensionComparator) -> DimensionComparator:
    @functools.wraps(comparator)
    def wrapper(a, b):
        return -comparator(a, b)

    return wrapper
