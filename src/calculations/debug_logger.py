"""
Debug logging framework for polygon calculations
Centralizes and standardizes debug output across the calculation system
"""

import os
import logging
from typing import Any, Dict, Optional
import json

ENV_DEBUG_EXPORT = "POLYGON_DEBUG_EXPORT"
ENV_DEBUG_LEVEL = "POLYGON_DEBUG_LEVEL"
ENV_DEBUG_FILE = "POLYGON_DEBUG_FILE"
DEBUG_LOG_FILENAME = "polygon_debug.log"


def _env_flag(name: str) -> bool:
    return str(os.environ.get(name, "")).strip().lower() in {"1", "true", "yes", "on"}


class PolygonDebugLogger:
    """Centralized debug logger for the polygon calculation system"""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.logger = logging.getLogger('polygon_debug')
            self.configure(
                enabled=_env_flag(ENV_DEBUG_EXPORT),
                level=os.environ.get(ENV_DEBUG_LEVEL, "INFO"),
                log_file=DEBUG_LOG_FILENAME if os.environ.get(ENV_DEBUG_FILE) else None,
            )
            PolygonDebugLogger._initialized = True

    def configure(self, enabled: bool, level: str = "INFO", log_file: Optional[str] = None):
        """(Re)build handlers; nothing is emitted while disabled"""
        self.debug_enabled = enabled
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if not enabled:
            return

        formatter = logging.Formatter(
            '%(asctime)s [POLYGON-%(levelname)s] %(component)s: %(message)s',
            datefmt='%H:%M:%S'
        )
        handlers = [logging.StreamHandler()]
        if log_file:
            handlers.append(logging.FileHandler(log_file))
        for handler in handlers:
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _log(self, level: int, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        if not self.debug_enabled:
            return
        if data:
            message = f"{message} {self._format_debug_data(data)}"
        self.logger.log(level, message, extra={'component': component})

    def debug(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        self._log(logging.DEBUG, component, message, data)

    def info(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        self._log(logging.INFO, component, message, data)

    def warning(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        self._log(logging.WARNING, component, message, data)

    def _format_debug_data(self, data: Dict[str, Any]) -> str:
        """Format debug data for logging"""
        try:
            formatted = {}
            for key, value in data.items():
                if key == 'perimeter' or key.endswith('_length'):
                    if isinstance(value, (int, float)):
                        formatted[key] = f"{float(value):.2f}"
                    else:
                        formatted[key] = value
                elif key in ['point_count', 'edge_count', 'index']:
                    formatted[key] = int(value) if value is not None else None
                else:
                    formatted[key] = value

            return json.dumps(formatted, separators=(',', ':'))
        except (TypeError, ValueError):
            # Fallback to string representation
            return str(data)

    def log_compute_start(self, component: str, text_length: int, allow_lenient: bool):
        """Log the raw input size before parsing"""
        self.info(component, "Computing polygon edges", {
            'text_chars': text_length,
            'allow_lenient': allow_lenient,
        })

    def log_compute_end(self, component: str, edge_count: int = 0, perimeter: float = None,
                        error_type: str = None):
        """Log the outcome of a compute pass; failures go out as warnings"""
        if error_type:
            self.warning(component, "Input rejected", {'error_type': error_type})
            return
        self.info(component, "Edges computed", {'edge_count': edge_count, 'perimeter': perimeter})

    def log_point_check(self, component: str, point_count: Optional[int], problem: str = None):
        """Log the result of checking a parsed point list"""
        data = {'point_count': point_count}
        if problem:
            data['problem'] = problem
            self.warning(component, "Point check reported a problem", data)
        else:
            self.debug(component, "Point check passed", data)


# Global logger instance
debug_logger = PolygonDebugLogger()
