#!/usr/bin/env python3
"""
Tests for the application entry point in headless mode
"""

import os
import sys

import pytest

# Use offscreen platform for headless test environments
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

import main


def test_sample_report(capsys):
    assert main.main(["--sample"]) == 0
    out = capsys.readouterr().out
    assert "Edge 3: 5.00 (from (3, 4) to (0, 0))" in out
    assert "Total perimeter: 12.00" in out


def test_points_argument(capsys):
    assert main.main(["--points", "[{x: 0, y: 0}, {x: 6, y: 8}]"]) == 0
    out = capsys.readouterr().out
    assert "Edge 1: 10.00 (from (0, 0) to (6, 8))" in out
    assert "Total perimeter: 20.00" in out


def test_invalid_points_print_error(capsys):
    assert main.main(["--points", "not json"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_strict_flag_rejects_relaxed_syntax(capsys):
    assert main.main(["--points", "[{x: 0, y: 0}, {x: 6, y: 8}]", "--strict"]) == 1


def test_about(capsys):
    assert main.main(["--about"]) == 0
    assert "Polygon Edge Calculator" in capsys.readouterr().out


def test_points_and_sample_are_exclusive():
    with pytest.raises(SystemExit):
        main.main(["--sample", "--points", "[]"])


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
