"""
Calculation engines for polygon edge lengths and perimeter
"""

from .polygon_errors import PolygonInputError, ParseError, ShapeError, PointFormatError
from .geometry import (
    Point, Edge, SAMPLE_POINTS, EDGE_LENGTH_DECIMALS,
    calculate_distance, round_length, compute_polygon_edges, calculate_perimeter
)
from .point_parser import LenientLiteralParser, parse_points_text
from .point_validation import validate_points
from .result_types import EdgeCalculationResult, ResultStatus, ERROR_LABEL
from .polygon_calculator import PolygonEdgeCalculator, calculate_polygon_edges, sample_input_text
from .edge_report import format_edge_line, format_perimeter, format_report
from .debug_logger import debug_logger

__all__ = [
    # Errors
    'PolygonInputError',
    'ParseError',
    'ShapeError',
    'PointFormatError',
    # Geometry
    'Point',
    'Edge',
    'SAMPLE_POINTS',
    'EDGE_LENGTH_DECIMALS',
    'calculate_distance',
    'round_length',
    'compute_polygon_edges',
    'calculate_perimeter',
    # Input handling
    'LenientLiteralParser',
    'parse_points_text',
    'validate_points',
    # Compute action
    'EdgeCalculationResult',
    'ResultStatus',
    'ERROR_LABEL',
    'PolygonEdgeCalculator',
    'calculate_polygon_edges',
    'sample_input_text',
    # Reporting
    'format_edge_line',
    'format_perimeter',
    'format_report',
    'debug_logger',
]
