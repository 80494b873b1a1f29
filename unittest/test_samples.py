import os
import sys

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

sys.path.insert(0, "../")
from pareto_efficiency import (
    CanvasConfigurationError,
    NoPointsError,
    SVGFormatError,
    UnknownFrontierPointsError,
)
from pareto_efficiency.samples import FrontierCanvas, Point, get_points_from
from pareto_efficiency.samples.wikipedia import (
    build_canvas,
    build_parser,
    main,
    wikipedia_comparator,
)

DATA = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "..",
    "pareto_efficiency",
    "samples",
    "data",
    "front_pareto.svg",
)
FRONTIER = {Point(50, 300), Point(100, 380), Point(200, 430), Point(350, 460)}
DOMINATED = {Point(150, 250), Point(250, 300), Point(300, 200), Point(400, 350), Point(450, 150)}


def write(tmp_path, content, name="points.svg"):
    path = tmp_path / name
    path.write_text(content)
    return str(path)


def test_points_from_svg():
    assert get_points_from(DATA) == FRONTIER | DOMINATED


def test_svg_shapes(tmp_path):
    file = write(
        tmp_path,
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<circle cx="10.4" cy="20.6px" r="2"/>'
        '<rect x="0" y="0" width="10" height="4"/>'
        '<g transform="translate(100, 50)"><g transform="translate(1)">'
        '<ellipse cx="1" cy="2" rx="1" ry="1"/></g></g>'
        '<circle cx="10" cy="21" r="5"/>'
        "</svg>",
    )
    assert get_points_from(file) == {Point(10, 21), Point(5, 2), Point(102, 52)}


def test_svg_errors(tmp_path):
    with pytest.raises(SVGFormatError):
        get_points_from(write(tmp_path, "<html><body/></html>"))
    with pytest.raises(SVGFormatError):
        get_points_from(write(tmp_path, "<svg><circle></svg>"))


def test_canvas_without_points():
    canvas = FrontierCanvas()
    with pytest.raises(NoPointsError):
        canvas.paint()
    with pytest.raises(CanvasConfigurationError):
        canvas.summary()


def test_canvas_unknown_frontier():
    canvas = FrontierCanvas()
    canvas.points = [Point(1, 1), Point(2, 2)]
    canvas.frontier = [Point(2, 2), Point(3, 3)]
    with pytest.raises(UnknownFrontierPointsError) as e:
        canvas.paint()
    assert e.value.unknown == {Point(3, 3)}
    assert "Point(x=3, y=3)" in e.value.message


def test_canvas_paint():
    canvas = FrontierCanvas()
    canvas.points = FRONTIER | DOMINATED
    canvas.frontier = FRONTIER

    fig, ax = plt.subplots()
    assert canvas.paint(ax) is ax
    assert ax.yaxis_inverted()
    assert len(ax.collections) == 2
    plt.close(fig)

    # no frontier at all
    canvas.frontier = None
    ax = canvas.paint()
    assert len(ax.collections) == 1
    plt.close(ax.figure)


def test_canvas_summary():
    canvas = FrontierCanvas()
    canvas.points = [Point(1, 4), Point(2, 2)]
    canvas.frontier = [Point(1, 4)]
    lines = canvas.summary().splitlines()
    assert lines[0].split() == ["x", "y", "frontier"]
    assert lines[2].split() == ["1", "4", "True"]
    assert lines[3].split() == ["2", "2", "False"]


def test_wikipedia_comparator():
    comparator = wikipedia_comparator()
    # smaller x and lower on the screen (larger SVG y) is smaller
    assert comparator.compare(Point(1, 10), Point(2, 5)) == -1
    assert comparator.compare(Point(1, 10), Point(2, 20)) == 0
    assert comparator.compare(Point(2, 5), Point(1, 10)) == 1


def test_build_canvas():
    canvas = build_canvas(DATA)
    assert canvas.points == FRONTIER | DOMINATED
    assert canvas.frontier == FRONTIER


def test_main(tmp_path):
    output = str(tmp_path / "frontier.png")
    main([DATA, "--output", output])
    assert os.path.getsize(output) > 0
    plt.close("all")


def test_parser():
    parser = build_parser()
    assert parser.prog == "pareto-wikipedia"
    assert parser.description == "Wikipedia Pareto frontier sample"
    assert parser.format_usage().startswith("usage: pareto-wikipedia ")

    args = parser.parse_args([DATA, "-v"])
    assert args.svg == DATA and args.verbose and args.output is None
