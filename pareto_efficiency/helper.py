import logging
from typing import Any, Callable, Iterable, Optional, Set

from .comparator import ParetoComparator
from .utils import dump_logger, get_logger, load_logger, timeit

OrderChecker = Callable[[Any, Any], bool]


class ParetoHelper:
    """Extract the Pareto frontier of a population

    The population is seeded into a `set`, hence individuals have to be hashable and
    equal individuals (e.g., two distinct objects at the same coordinates) collapse
    into a single member of the frontier.
    """

    def __init__(
        self,
        verbose: bool = False,
        log_file: Optional[str] = None,
        instance_id: Optional[str] = None,
    ):
        """
        Parameters
        ----------
        verbose : bool, optional
            print the frontier statistics to stdout, by default False
        log_file : str, optional
            the file to log into, by default None, which turns off file logging
        instance_id : str, optional
            the name of this instance in the log records, by default None, which logs
            under the class name shared by all the unnamed instances
        """
        self.verbose: bool = verbose
        self.instance_id: Optional[str] = instance_id
        logger_id = self.__class__.__name__
        if instance_id:
            logger_id += f" ({instance_id})"
        self.logger: logging.Logger = get_logger(
            logger_id=logger_id,
            file=log_file,
            console=verbose,
        )

    def __getstate__(self):
        state = self.__dict__.copy()
        state["logger"] = dump_logger(self.logger)
        return state

    def __setstate__(self, state):
        state["logger"] = load_logger(state["logger"])
        self.__dict__.update(state)

    def get_maximal_frontier_of(
        self, population: Iterable, comparator: ParetoComparator
    ) -> Set:
        """Look for the individuals of the Pareto frontier, considering we are looking
        for maximal individuals: `i1` is dropped when `comparator.compare(i1, i2) < 0`
        for some `i2`.

        Parameters
        ----------
        population : Iterable
            the individuals to check
        comparator : ParetoComparator
            the Pareto comparator to use

        Returns
        -------
        Set
            the individuals at the Pareto frontier
        """
        return self._get_frontier_of(population, lambda i1, i2: comparator.compare(i1, i2) < 0)

    def get_minimal_frontier_of(
        self, population: Iterable, comparator: ParetoComparator
    ) -> Set:
        """Look for the individuals of the Pareto frontier, considering we are looking
        for minimal individuals: `i1` is dropped when `comparator.compare(i1, i2) > 0`
        for some `i2`.

        Parameters
        ----------
        population : Iterable
            the individuals to check
        comparator : ParetoComparator
            the Pareto comparator to use

        Returns
        -------
        Set
            the individuals at the Pareto frontier
        """
        return self._get_frontier_of(population, lambda i1, i2: comparator.compare(i1, i2) > 0)

    @timeit
    def _get_frontier_of(self, population: Iterable, can_order_as: OrderChecker) -> Set:
        """Common part of the maximal and minimal extractions

        A single pass over the population: each individual is checked against the
        current state of the frontier, which shrinks along the pass. An individual
        removed earlier is thus not used to eliminate later ones. This is sound as
        long as the dominance is transitive, which holds when the dimension
        comparators share the same sign convention; otherwise the result can depend
        on the iteration order.

        Parameters
        ----------
        population : Iterable
            the population to check
        can_order_as : Callable[[Any, Any], bool]
            tells if `i1` is worse than `i2`
        """
        population = list(population)
        frontier = set(population)
        self.logger.debug(
            f"extracting the frontier of {len(population)} individuals "
            f"({len(frontier)} distinct)"
        )
        for i1 in population:
            if any(can_order_as(i1, i2) for i2 in frontier):
                frontier.discard(i1)
                self.logger.debug(f"{i1} is dominated")

        self.logger.info(f"frontier: {len(frontier)} out of {len(population)} individuals")
        return frontier


_default_helper = ParetoHelper(instance_id="default")


def get_maximal_frontier_of(population: Iterable, comparator: ParetoComparator) -> Set:
    """shortcut to `ParetoHelper.get_maximal_frontier_of` on a shared helper"""
    return _default_helper.get_maximal_frontier_of(population, comparator)


def get_minimal_frontier_of(population: Iterable, comparator: ParetoComparator) -> Set:
    """shortcut to `ParetoHelper.get_minimal_frontier_of` on a shared helper"""
    return _default_helper.get_minimal_frontier_of(population, comparator)
