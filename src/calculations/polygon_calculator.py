"""
Polygon Edge Calculator - Compute action tying parsing, validation and
edge derivation together
"""

import json
from typing import Optional, Sequence

from .debug_logger import debug_logger
from .geometry import SAMPLE_POINTS, Point, compute_polygon_edges
from .point_parser import parse_points_text
from .point_validation import validate_points
from .polygon_errors import ParseError, PolygonInputError
from .result_types import EdgeCalculationResult, ResultStatus


def sample_input_text(points: Sequence[Point] = SAMPLE_POINTS) -> str:
    """Render points as the indented JSON placed in the input box"""
    data = [{'x': p.x, 'y': p.y} for p in points]
    return json.dumps(data, indent=2)


class PolygonEdgeCalculator:
    """Runs one full compute pass over user-entered text"""

    def __init__(self, allow_lenient: bool = True):
        """
        Args:
            allow_lenient: Accept unquoted keys when strict JSON fails
        """
        self.allow_lenient = allow_lenient

    def calculate(self, text: Optional[str]) -> EdgeCalculationResult:
        """
        Parse, validate and derive edges from raw text

        Never raises for bad input; the failure is returned as a result with
        a labelled message and no edges.
        """
        text = text or ""
        debug_logger.log_compute_start('PolygonEdgeCalculator', len(text), self.allow_lenient)

        try:
            raw = parse_points_text(text, allow_lenient=self.allow_lenient)
            points = validate_points(raw)
            edges = compute_polygon_edges(points)
        except PolygonInputError as e:
            status = ResultStatus.ERROR if isinstance(e, ParseError) else ResultStatus.VALIDATION_FAILED
            debug_logger.log_compute_end('PolygonEdgeCalculator', error_type=type(e).__name__)
            return EdgeCalculationResult.failure(
                str(e), status=status, metadata={'error_type': type(e).__name__}
            )

        result = EdgeCalculationResult.success(edges, metadata={'point_count': len(points)})
        debug_logger.log_compute_end('PolygonEdgeCalculator', result.edge_count, result.perimeter)
        return result


def calculate_polygon_edges(text: str, allow_lenient: bool = True) -> EdgeCalculationResult:
    """Convenience wrapper around PolygonEdgeCalculator.calculate"""
    return PolygonEdgeCalculator(allow_lenient=allow_lenient).calculate(text)
