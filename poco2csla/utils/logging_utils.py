"""Logging utilities for poco2csla."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from poco2csla.config.models import LoggingConfig

ROOT_LOGGER = "poco2csla"


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str = "INFO",
    log_file: str | None = None,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Set up a logger with a console handler and an optional file handler.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        name: Logger name; module loggers below it inherit the handlers
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, created with its directory
        format_string: Optional custom format string
        stream: Console stream; stderr keeps stdout free for generated output

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    formatter = logging.Formatter(format_string or LoggingConfig().format)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def setup_from_config(config: LoggingConfig, verbose: bool = False) -> logging.Logger:
    """Configure the package logger from the ``logging`` config section; ``verbose`` forces DEBUG."""
    return setup_logger(
        ROOT_LOGGER,
        level="DEBUG" if verbose else config.level,
        log_file=config.file,
        format_string=config.format,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
