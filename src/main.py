#!/usr/bin/env python3
"""
Polygon Edge Calculator - Main Application Entry Point
Desktop application computing polygon edge lengths and perimeter
"""

import argparse
import sys
import os
from typing import Optional, Sequence
from PySide6.QtWidgets import QApplication, QStyleFactory

# Add src directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from calculations import PolygonEdgeCalculator, format_report, sample_input_text
from ui import PolygonCalculatorWindow
from utils import (APPLICATION_NAME, APPLICATION_VERSION, ORGANIZATION_NAME,
                   get_about_text)


class PolygonCalculatorApp(QApplication):
    """Main application class"""

    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName(APPLICATION_NAME)
        self.setApplicationVersion(APPLICATION_VERSION)
        self.setOrganizationName(ORGANIZATION_NAME)

        # Set application style
        self.setStyle(QStyleFactory.create('Fusion'))

        self.main_window = None

    def start(self):
        """Start the application"""
        self.main_window = PolygonCalculatorWindow()
        self.main_window.show()
        return self.exec()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the edge lengths and perimeter of a closed polygon.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--points",
        type=str,
        help='Point list, e.g. \'[{"x": 0, "y": 0}, {"x": 3, "y": 0}]\'; prints the report without opening the window',
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Print the report for the built-in right-triangle sample",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only accept strict JSON (no unquoted keys)",
    )
    parser.add_argument(
        "--about",
        action="store_true",
        help="Print application information and exit",
    )
    return parser


def run_headless(text: str, strict: bool = False) -> int:
    """Calculate once and print the text report"""
    result = PolygonEdgeCalculator(allow_lenient=not strict).calculate(text)
    if result.is_error:
        print(format_report(result), file=sys.stderr)
        return 1
    print(format_report(result))
    return 0


def run_gui() -> int:
    app = PolygonCalculatorApp(sys.argv[:1])
    return app.start()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Application entry point"""
    args = build_arg_parser().parse_args(argv)

    if args.about:
        print(get_about_text())
        return 0
    if args.sample:
        return run_headless(sample_input_text(), strict=args.strict)
    if args.points is not None:
        return run_headless(args.points, strict=args.strict)
    return run_gui()


if __name__ == '__main__':
    sys.exit(main())
