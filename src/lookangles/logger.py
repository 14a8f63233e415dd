"""Logging setup for the app and script entry points."""

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "lookangles",
    level: str = "INFO",
    log_file: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the package logger. Calling again replaces earlier handlers.

    Args:
        name: Logger name; module loggers (``lookangles.*``) inherit from it.
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        log_file: Optional file path for a plain-text copy of the log.
        console: Also log to stdout.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers = []

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger
