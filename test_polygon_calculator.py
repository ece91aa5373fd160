#!/usr/bin/env python3
"""
End-to-end tests for the compute action: text in, immutable result out
"""

import dataclasses
import json
import logging
import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from calculations import (PolygonEdgeCalculator, EdgeCalculationResult, ResultStatus,
                          calculate_polygon_edges, sample_input_text,
                          format_edge_line, format_perimeter, format_report)
from calculations.debug_logger import PolygonDebugLogger, debug_logger
from calculations.edge_report import format_coordinate


TRIANGLE_TEXT = '[{x:0,y:0},{x:3,y:0},{x:3,y:4}]'


def test_triangle_scenario():
    result = calculate_polygon_edges(TRIANGLE_TEXT)

    assert result.is_success
    assert result.error_message is None
    assert [edge.length for edge in result.edges] == [3.0, 4.0, 5.0]
    assert [format_edge_line(edge) for edge in result.edges] == [
        "Edge 1: 3.00 (from (0, 0) to (3, 0))",
        "Edge 2: 4.00 (from (3, 0) to (3, 4))",
        "Edge 3: 5.00 (from (3, 4) to (0, 0))",
    ]
    assert result.perimeter == 12.0
    assert format_perimeter(result.perimeter) == "Total perimeter: 12.00"
    assert result.metadata['point_count'] == 3


def test_single_point_scenario():
    result = calculate_polygon_edges('[{"x": 0, "y": 0}]')

    assert result.is_error
    assert result.status == ResultStatus.VALIDATION_FAILED
    assert result.edges == ()
    assert result.error_message == "Error: At least 2 points are needed to form a polygon"
    assert result.metadata['error_type'] == 'ShapeError'


def test_unparseable_text_scenario():
    result = calculate_polygon_edges('not json')

    assert result.status == ResultStatus.ERROR
    assert result.edges == ()
    assert result.error_message == "Error: Could not parse the data. Please check the JSON format"
    assert result.metadata['error_type'] == 'ParseError'


def test_bad_point_scenario():
    result = calculate_polygon_edges('[{x:"a",y:0},{x:1,y:1}]')

    assert result.status == ResultStatus.VALIDATION_FAILED
    assert result.edges == ()
    assert result.error_message.startswith("Error: Point 1 ")
    assert result.metadata['error_type'] == 'PointFormatError'


def test_not_an_array():
    result = calculate_polygon_edges('{"x": 1, "y": 2}')
    assert result.error_message == "Error: Data must be an array"


def test_huge_coordinates_still_give_a_result():
    result = calculate_polygon_edges('[{"x": 0, "y": 0}, {"x": 1e30, "y": 0}]')
    assert result.is_success
    assert [edge.length for edge in result.edges] == pytest.approx([1e30, 1e30])


@pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"),
                    reason="no int string conversion limit")
def test_overlong_integer_literal_is_a_parse_error():
    text = '[{x: ' + '1' * 5000 + ', y: 0}, {x: 1, y: 1}]'
    result = calculate_polygon_edges(text)
    assert result.status == ResultStatus.ERROR
    assert result.metadata['error_type'] == 'ParseError'


def test_missing_text_is_a_parse_error():
    result = PolygonEdgeCalculator().calculate(None)
    assert result.status == ResultStatus.ERROR


def test_strict_mode_rejects_unquoted_keys():
    result = PolygonEdgeCalculator(allow_lenient=False).calculate(TRIANGLE_TEXT)
    assert result.status == ResultStatus.ERROR


def test_calculation_is_idempotent():
    calculator = PolygonEdgeCalculator()
    assert calculator.calculate(TRIANGLE_TEXT) == calculator.calculate(TRIANGLE_TEXT)


def test_result_is_immutable():
    result = calculate_polygon_edges(TRIANGLE_TEXT)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.edges = ()


def test_empty_result_has_nothing_to_show():
    result = EdgeCalculationResult.empty()
    assert result.is_success
    assert result.edge_count == 0
    assert result.perimeter == 0.0


def test_sample_input_text_is_indented_json_triangle():
    text = sample_input_text()

    assert text.startswith('[\n  {\n    "x": 0,')
    assert json.loads(text) == [{'x': 0, 'y': 0}, {'x': 3, 'y': 0}, {'x': 3, 'y': 4}]
    assert calculate_polygon_edges(text).perimeter == 12.0


def test_format_report():
    report = format_report(calculate_polygon_edges(TRIANGLE_TEXT))
    assert report.splitlines() == [
        "Results:",
        "Edge 1: 3.00 (from (0, 0) to (3, 0))",
        "Edge 2: 4.00 (from (3, 0) to (3, 4))",
        "Edge 3: 5.00 (from (3, 4) to (0, 0))",
        "Total perimeter: 12.00",
    ]
    assert format_report(calculate_polygon_edges('not json')).startswith("Error: ")


def test_format_coordinate():
    assert format_coordinate(3.0) == "3"
    assert format_coordinate(-0.25) == "-0.25"
    assert format_coordinate(3.5) == "3.5"
    assert format_coordinate(7) == "7"


def test_debug_logger_is_singleton_and_formats_data():
    assert PolygonDebugLogger() is debug_logger
    formatted = debug_logger._format_debug_data({'perimeter': 12, 'edge_count': 3.0})
    assert json.loads(formatted) == {'perimeter': '12.00', 'edge_count': 3}


def test_debug_logger_reports_compute_outcome(caplog):
    caplog.set_level(logging.DEBUG, logger="polygon_debug")
    debug_logger.configure(enabled=True, level="DEBUG")
    try:
        calculate_polygon_edges(TRIANGLE_TEXT)
        calculate_polygon_edges('not json')
    finally:
        debug_logger.configure(enabled=False)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Edges computed") and '"edge_count":3' in m for m in messages)
    assert any(m.startswith("Input rejected") and "ParseError" in m for m in messages)
    assert {record.component for record in caplog.records if record.name == "polygon_debug"} >= {"PolygonEdgeCalculator", "PointValidation"}


def test_debug_logger_disabled_emits_nothing(caplog):
    caplog.set_level(logging.DEBUG, logger="polygon_debug")
    debug_logger.configure(enabled=False)
    calculate_polygon_edges(TRIANGLE_TEXT)
    assert not [r for r in caplog.records if r.name == "polygon_debug"]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
