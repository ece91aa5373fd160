"""
Geometry utilities for the polygon edge calculator

Provides the point/edge value types, Euclidean distance, and derivation of
the closed-loop edge list and perimeter of a polygon.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Sequence, Tuple

from .polygon_errors import ShapeError

EDGE_LENGTH_DECIMALS = 2
MIN_POLYGON_POINTS = 2

_LENGTH_QUANTUM = Decimal(1).scaleb(-EDGE_LENGTH_DECIMALS)
# Enough digits for the integer part of any finite float plus the decimals
_ROUNDING_PRECISION = 400


@dataclass(frozen=True)
class Point:
	"""A 2-D coordinate pair"""
	x: float
	y: float

	def as_tuple(self) -> Tuple[float, float]:
		return (self.x, self.y)


@dataclass(frozen=True)
class Edge:
	"""Segment between two consecutive polygon vertices"""
	index: int
	start: Point
	end: Point
	length: float


# Right triangle with legs 3 and 4, used by the "load sample data" action
SAMPLE_POINTS: Tuple[Point, ...] = (
	Point(0, 0),
	Point(3, 0),
	Point(3, 4),
)


def calculate_distance(a: Point, b: Point) -> float:
	"""Euclidean distance between two points. NaN/inf propagate unchanged."""
	dx = b.x - a.x
	dy = b.y - a.y
	return math.sqrt(dx * dx + dy * dy)


def round_length(value: float) -> float:
	"""Round a length to two decimals, half away from zero.

	Rounding works on the shortest decimal repr of the float, so 0.125 -> 0.13
	and 1.005 -> 1.01 as a user reading the number would expect.
	"""
	if not math.isfinite(value):
		return value
	with localcontext() as ctx:
		ctx.prec = _ROUNDING_PRECISION
		rounded = Decimal(repr(value)).quantize(_LENGTH_QUANTUM, rounding=ROUND_HALF_UP)
	return float(rounded)


def compute_polygon_edges(points: Sequence[Point]) -> List[Edge]:
	"""Derive the edges of a closed polygon.

	- points: ordered vertices, at least two
	- the last point connects back to the first

	Returns one Edge per point, in input order.
	"""
	n = len(points)
	if n < MIN_POLYGON_POINTS:
		raise ShapeError(f"At least {MIN_POLYGON_POINTS} points are needed to form a polygon")

	edges = []
	for i in range(n):
		start = points[i]
		end = points[(i + 1) % n]
		edges.append(Edge(
			index=i + 1,
			start=Point(start.x, start.y),
			end=Point(end.x, end.y),
			length=round_length(calculate_distance(start, end)),
		))
	return edges


def calculate_perimeter(edges: Sequence[Edge]) -> float:
	"""Sum of the (already rounded) edge lengths."""
	return sum((edge.length for edge in edges), 0.0)
