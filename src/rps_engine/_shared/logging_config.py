# Area: Shared
"""
rps_engine._shared.logging_config — Structured logging setup
============================================================

Configures dual logging: terminal (colored) + optional file (JSON).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .logging_formatters import JSONFormatter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import RPSEngineError

# Package logger
logger = logging.getLogger("rps_engine")


def setup_logging(
    log_file_path: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON-lines log file. No file handler when omitted.
    level : int or str
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("rps_engine")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_engine_error(error: "RPSEngineError", level: int = logging.WARNING) -> None:
    """
    Log an engine error with its structured context.

    Parameters
    ----------
    error : RPSEngineError
        The error to log (InvalidMoveError or SessionBusyError).
    level : int
        Logging level. Defaults to WARNING.
    """
    logger.log(level, str(error), extra=error.to_log_fields())
