"""Sample taking the example of the Pareto frontier described on Wikipedia:

    http://en.wikipedia.org/wiki/Pareto_efficiency#Pareto_frontier

The points are parsed from the SVG of the article, the minimal frontier is extracted
and painted in red.
"""
import argparse
from typing import List, Optional

import matplotlib
import matplotlib.pyplot as plt

from .. import ParetoComparator, ParetoHelper
from .canvas import FrontierCanvas
from .svg import get_points_from


def wikipedia_comparator() -> ParetoComparator:
    comparator = ParetoComparator()
    comparator.set_dimension_comparator(0, lambda p1, p2: (p1.x > p2.x) - (p1.x < p2.x))
    # reversed since the graphical Y is in the opposite sense of the mathematical Y
    comparator.set_dimension_comparator(1, lambda p1, p2: -((p1.y > p2.y) - (p1.y < p2.y)))
    return comparator


def build_canvas(svg: str, verbose: bool = False) -> FrontierCanvas:
    """read the points of `svg` and set them on a canvas with their minimal frontier"""
    points = get_points_from(svg)
    helper = ParetoHelper(verbose=verbose, instance_id="wikipedia")
    frontier = helper.get_minimal_frontier_of(points, wikipedia_comparator())

    canvas = FrontierCanvas(verbose=verbose)
    canvas.points = points
    canvas.frontier = frontier
    return canvas


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pareto-wikipedia", description="Wikipedia Pareto frontier sample"
    )
    parser.add_argument("svg", help="the SVG file to read the points from")
    parser.add_argument("-o", "--output", default=None, help="save the figure to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log the frontier extraction")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    if args.output is not None:
        matplotlib.use("Agg")

    canvas = build_canvas(args.svg, verbose=args.verbose)
    ax = canvas.paint()
    ax.set_title("Wikipedia Sample")
    if args.verbose:
        print(canvas.summary())

    if args.output is not None:
        ax.figure.savefig(args.output)
    else:
        plt.show()


if __name__ == "__main__":
    main()
