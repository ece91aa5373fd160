"""
User interface components for the Polygon Edge Calculator
"""

from .polygon_calculator_window import PolygonCalculatorWindow

__all__ = ['PolygonCalculatorWindow']
