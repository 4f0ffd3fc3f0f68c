#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Logging Configuration
Sets up the package logger for the renderer and the demo driver.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configures the logger for the 'ascii_wireframe' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to write logs to instead of stderr. Use it
            with the curses display, which owns the terminal.
        console: When False and no log_file is given, records are discarded
            (NullHandler) instead of going to stderr.
    """
    logger = logging.getLogger("ascii_wireframe")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    elif console:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.NullHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Logging initialized.")
    return logger
