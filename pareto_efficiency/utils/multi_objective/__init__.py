from .pareto import axis_comparator, comparator_from_objectives, non_dominated_set_2d

__all__ = ["axis_comparator", "comparator_from_objectives", "non_dominated_set_2d"]
