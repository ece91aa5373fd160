"""
Error taxonomy for polygon point input
"""


class PolygonInputError(ValueError):
    """Base class for every error caused by user-supplied point data"""


class ParseError(PolygonInputError):
    """Raw text could not be interpreted as a point sequence"""


class ShapeError(PolygonInputError):
    """Parsed value is not a sequence, or has too few points"""


class PointFormatError(PolygonInputError):
    """A specific element lacks numeric x/y coordinates"""

    def __init__(self, index: int, message: str = None):
        self.index = index
        if message is None:
            message = f"Point {index} is invalid. Each point must have numeric x and y values"
        super().__init__(message)
