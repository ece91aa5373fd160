"""
Point Validation - Check parsed input before edge derivation
"""

import math
from collections.abc import Mapping
from typing import Any, List

from .debug_logger import debug_logger
from .geometry import MIN_POLYGON_POINTS, Point
from .polygon_errors import PointFormatError, ShapeError


def is_numeric(value: Any) -> bool:
    """True for int/float values; bool is rejected even though it subclasses int"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_point(item: Any, index: int) -> Point:
    """
    Convert one parsed element into a Point

    Args:
        item: Parsed element, expected to be an object with x and y
        index: 1-based position used in the error message
    """
    if not isinstance(item, Mapping):
        raise PointFormatError(index)

    x = item.get('x')
    y = item.get('y')
    if not is_numeric(x) or not is_numeric(y):
        raise PointFormatError(index)

    # Large ints from JSON must still be usable as floats
    try:
        return Point(float(x), float(y))
    except OverflowError as exc:
        raise PointFormatError(index) from exc


def validate_points(raw: Any) -> List[Point]:
    """
    Validate parsed input and return the point sequence

    Raises:
        ShapeError: Value is not a list or holds fewer than two elements
        PointFormatError: An element lacks numeric x/y (names the element)
    """
    if not isinstance(raw, list):
        debug_logger.log_point_check('PointValidation', None, "not a list")
        raise ShapeError("Data must be an array")

    if len(raw) < MIN_POLYGON_POINTS:
        debug_logger.log_point_check('PointValidation', len(raw), "too few points")
        raise ShapeError(f"At least {MIN_POLYGON_POINTS} points are needed to form a polygon")

    points = [validate_point(item, i + 1) for i, item in enumerate(raw)]

    problem = None
    if any(not math.isfinite(p.x) or not math.isfinite(p.y) for p in points):
        # Allowed through; lengths will be nan/inf
        problem = "non-finite coordinate"
    debug_logger.log_point_check('PointValidation', len(points), problem)
    return points
