import logging
from typing import Iterable, Optional, Set

import matplotlib.pyplot as plt
from tabulate import tabulate

from .._exception import NoPointsError, UnknownFrontierPointsError
from ..utils import get_logger


class FrontierCanvas:
    """Draw a population of 2D points, the frontier members highlighted

    Points are drawn in SVG coordinates, i.e., the y axis grows downwards.
    """

    POINT_COLOR = "blue"
    FRONTIER_COLOR = "red"

    def __init__(self, marker_size: float = 10, verbose: bool = False, log_file: str = None):
        self.marker_size: float = marker_size
        self._points: Optional[Set] = None
        self._frontier: Optional[Set] = None
        self.logger: logging.Logger = get_logger(
            logger_id=self.__class__.__name__, file=log_file, console=verbose
        )

    @property
    def points(self) -> Optional[Set]:
        return self._points

    @points.setter
    def points(self, points: Iterable):
        self._points = None if points is None else set(points)

    @property
    def frontier(self) -> Optional[Set]:
        return self._frontier

    @frontier.setter
    def frontier(self, frontier: Iterable):
        self._frontier = None if frontier is None else set(frontier)

    def check(self):
        """raise if the canvas cannot be painted"""
        if self._points is None:
            raise NoPointsError()
        if self._frontier is not None and not self._frontier <= self._points:
            raise UnknownFrontierPointsError(self._frontier - self._points)

    def paint(self, ax: Optional[plt.Axes] = None) -> plt.Axes:
        """Paint the points on `ax`, a new figure being created when it is None

        Raises
        ------
        NoPointsError
            when no point has been given
        UnknownFrontierPointsError
            when the frontier contains points which are not part of the population
        """
        self.check()
        if ax is None:
            _, ax = plt.subplots(figsize=(5, 5))

        frontier = self._frontier or set()
        if self._points:
            xs = [p[0] for p in self._points]
            ys = [p[1] for p in self._points]
            self.logger.debug(f"Draw in [{min(xs)},{min(ys)}]->[{max(xs)},{max(ys)}]")

        others = [p for p in self._points if p not in frontier]
        members = [p for p in self._points if p in frontier]
        for i, p in enumerate(others + members):
            self.logger.debug(f"draw {i + 1} : {p}")

        if others:
            ax.scatter(
                [p[0] for p in others],
                [p[1] for p in others],
                s=self.marker_size ** 2,
                marker="s",
                c=self.POINT_COLOR,
                label="population",
            )
        if members:
            ax.scatter(
                [p[0] for p in members],
                [p[1] for p in members],
                s=self.marker_size ** 2,
                marker="s",
                c=self.FRONTIER_COLOR,
                label="frontier",
            )
        if not ax.yaxis_inverted():
            ax.invert_yaxis()
        ax.set_aspect("equal", adjustable="datalim")
        if self._points:
            ax.legend(loc="best")
        return ax

    def summary(self) -> str:
        """a table of the points, frontier members flagged"""
        self.check()
        frontier = self._frontier or set()
        rows = [[p[0], p[1], p in frontier] for p in sorted(self._points)]
        return tabulate(rows, headers=["x", "y", "frontier"])
