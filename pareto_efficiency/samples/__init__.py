"""Point source and display collaborators of the frontier extraction, used by the samples"""
from .canvas import FrontierCanvas
from .svg import Point, get_points_from

__all__ = ["FrontierCanvas", "Point", "get_points_from"]
