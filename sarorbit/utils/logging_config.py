# -*- coding: utf-8 -*-
"""
Logging Configuration - Console/file logging setup for command-line use.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
command-line entry point calls :func:`configure_logging` once. Console
output goes to stderr because stdout may carry binary records.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the whole application.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.DEBUG, logging.INFO).
    log_file : str, optional
        Path to log file. If None, logs only to stderr.
    """
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Parameters
    ----------
    name : str
        Name of the logger (typically __name__).

    Returns
    -------
    logging.Logger
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "LOG_FORMAT", "DATE_FORMAT"]
