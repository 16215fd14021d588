"""
Logging configuration for planner runs
"""

import logging
import sys
from typing import Optional


def trace_level_to_log_level(trace_level: int) -> int:
    """
    Map a planner trace level to a logging level.

    Level 0 (or below) keeps only warnings, 1 reports progress, 2 and
    above enables debug output.
    """
    if trace_level <= 0:
        return logging.WARNING
    if trace_level == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    level: Optional[str] = None,
    verbose: bool = False,
    format_string: Optional[str] = None,
    trace_level: Optional[int] = None,
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        verbose: If True, enable DEBUG level logging
        format_string: Custom format string for log messages
        trace_level: Planner trace level, used when neither level nor verbose is given
    """
    if verbose:
        numeric_level = logging.DEBUG
    elif level is not None:
        numeric_level = getattr(logging, level.upper())
    elif trace_level is not None:
        numeric_level = trace_level_to_log_level(trace_level)
    else:
        numeric_level = logging.INFO

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stderr)  # Log to stderr to avoid mixing with output
        ],
        force=True,
    )
