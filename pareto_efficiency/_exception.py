from typing import Iterable


class CanvasConfigurationError(Exception):
    """Exception raised if a canvas is asked to paint with an unusable configuration

    Attributes:
        message -- explanation of the error
    """

    def __init__(self, message: str = "The canvas is not configured properly."):
        self.message = message
        super().__init__(self.message)


class NoPointsError(CanvasConfigurationError):
    """Exception raised if a canvas is painted before any point is given"""

    def __init__(self, message: str = "No points given."):
        super().__init__(message)


class UnknownFrontierPointsError(CanvasConfigurationError):
    """Exception raised if the frontier contains members absent from the population

    Attributes:
        unknown -- the frontier members which are not part of the points
        message -- explanation of the error
    """

    def __init__(self, unknown: Iterable):
        self.unknown = set(unknown)
        super().__init__(f"Some frontier points are unknown : {sorted(self.unknown, key=repr)}")


class SVGFormatError(Exception):
    """Exception raised if a file cannot be read as an SVG document

    Attributes:
        message -- explanation of the error
    """

    def __init__(self, file: str, details: str = ""):
        self.message = f"{file} is not a valid SVG document: {details}"
        super().__init__(self.message)
