"""
Logging configuration for the jwt-parser CLI.

Provides a console handler (WARNING by default, DEBUG when verbose) and
an optional file handler that always logs at DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

from .config import PROJECT_ROOT

# Log directory — always in logs/
LOG_DIR = os.path.join(PROJECT_ROOT, "logs")


def setup_logging(
    verbose: bool = False,
    log_to_file: bool = False,
    log_prefix: str = "jwt_parser",
) -> str | None:
    """Configure the root logger.

    - Console handler: WARNING+ by default.  When *verbose* is True the
      level drops to DEBUG so parser detail is printed as well.
    - File handler (only when *log_to_file*): always DEBUG, writes to
      logs/<prefix>_<timestamp>.log

    Returns the path to the log file, or ``None`` when not logging to file.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers (e.g. from basicConfig)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_fmt = logging.Formatter(
        "%(levelname)-8s  %(message)s" if not verbose
        else "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_fmt)
    root_logger.addHandler(console_handler)

    if not log_to_file:
        return None

    os.makedirs(LOG_DIR, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
    log_path = os.path.join(LOG_DIR, f"{log_prefix}_{timestamp}.log")

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    return log_path
