"""
Text formatting for edge calculation results
"""

import math

from .geometry import Edge, Point
from .result_types import EdgeCalculationResult


def format_coordinate(value: float) -> str:
    """Integral values without a decimal point, others in shortest form"""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_point(point: Point) -> str:
    return f"({format_coordinate(point.x)}, {format_coordinate(point.y)})"


def format_length(value: float) -> str:
    return f"{value:.2f}"


def format_edge_line(edge: Edge) -> str:
    """e.g. 'Edge 1: 3.00 (from (0, 0) to (3, 0))'"""
    return (f"Edge {edge.index}: {format_length(edge.length)} "
            f"(from {format_point(edge.start)} to {format_point(edge.end)})")


def format_perimeter(value: float) -> str:
    return f"Total perimeter: {format_length(value)}"


def format_report(result: EdgeCalculationResult) -> str:
    """Multi-line text report of a compute pass"""
    if result.is_error:
        return result.error_message or ""

    lines = ["Results:"]
    lines.extend(format_edge_line(edge) for edge in result.edges)
    lines.append(format_perimeter(result.perimeter))
    return "\n".join(lines)
