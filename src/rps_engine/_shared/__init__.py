# Area: Shared
"""
Shared utilities.

This package contains:
- Logging configuration
- Logging formatters
"""

from .logging_config import setup_logging, log_engine_error
from .logging_formatters import TerminalFormatter, JSONFormatter

__all__ = [
    "setup_logging",
    "log_engine_error",
    "TerminalFormatter",
    "JSONFormatter",
]
