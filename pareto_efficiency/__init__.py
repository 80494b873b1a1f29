from typing import List

from ._exception import (
    CanvasConfigurationError,
    NoPointsError,
    SVGFormatError,
    UnknownFrontierPointsError,
)
from .comparator import ParetoComparator
from .helper import ParetoHelper, get_maximal_frontier_of, get_minimal_frontier_of
from .utils.multi_objective import comparator_from_objectives

__all__: List[str] = [
    "ParetoComparator",
    "ParetoHelper",
    "get_maximal_frontier_of",
    "get_minimal_frontier_of",
    "comparator_from_objectives",
    "CanvasConfigurationError",
    "NoPointsError",
    "UnknownFrontierPointsError",
    "SVGFormatError",
]
