import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import NamedTuple, Set, Tuple, Union

from .._exception import SVGFormatError

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_TRANSLATE = re.compile(r"translate\(\s*([^,\s)]+)(?:[\s,]+([^,\s)]+))?\s*\)")


class Point(NamedTuple):
    x: int
    y: int


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _number(value: str) -> float:
    """parse an SVG length such as `12.5` or `12.5px`"""
    m = _NUMBER.match(value.strip()) if value else None
    return float(m.group()) if m else 0.0


def _translation(element: ET.Element) -> Tuple[float, float]:
    dx, dy = 0.0, 0.0
    for m in _TRANSLATE.finditer(element.get("transform", "")):
        dx += _number(m.group(1))
        dy += _number(m.group(2)) if m.group(2) else 0.0
    return dx, dy


def _centre(element: ET.Element):
    name = _local_name(element.tag)
    if name in ("circle", "ellipse"):
        return _number(element.get("cx", "0")), _number(element.get("cy", "0"))
    if name == "rect":
        x, y = _number(element.get("x", "0")), _number(element.get("y", "0"))
        width, height = _number(element.get("width", "0")), _number(element.get("height", "0"))
        return x + width / 2, y + height / 2
    return None


def get_points_from(file: Union[str, Path]) -> Set[Point]:
    """Read the points drawn in an SVG document

    Every `circle`, `ellipse` and `rect` gives one point located at its centre,
    shifted by the `translate(...)` transforms of the element and its ancestors.
    Coordinates are rounded to integers, so shapes drawn at the same place make a
    single point.

    Parameters
    ----------
    file : Union[str, Path]
        path of the SVG file

    Returns
    -------
    Set[Point]
        the points of the document, in SVG coordinates (y growing downwards)
    """
    try:
        root = ET.parse(str(file)).getroot()
    except ET.ParseError as e:
        raise SVGFormatError(str(file), str(e)) from e
    if _local_name(root.tag) != "svg":
        raise SVGFormatError(str(file), f"the root element is <{_local_name(root.tag)}>")

    points = set()

    def visit(element: ET.Element, offset: Tuple[float, float]):
        dx, dy = _translation(element)
        offset = (offset[0] + dx, offset[1] + dy)
        centre = _centre(element)
        if centre is not None:
            points.add(Point(int(round(centre[0] + offset[0])), int(round(centre[1] + offset[1]))))
        for child in element:
            visit(child, offset)

    visit(root, (0.0, 0.0))
    return points
