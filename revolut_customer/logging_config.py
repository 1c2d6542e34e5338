"""Logging initialisation for scripts using the client."""

import logging
import sys

PACKAGE_LOGGER = "revolut_customer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def init_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Args:
        level: Log level name (case-insensitive)

    Returns:
        The configured package logger

    Raises:
        ValueError: If level is not a known log level name
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level!r}. Allowed values: {', '.join(sorted(VALID_LOG_LEVELS))}."
        )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level_name)

    # Replace our own handler on repeated calls, leave pytest's capture alone
    for handler in logger.handlers[:]:
        if getattr(handler, "_revolut_customer", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._revolut_customer = True
    logger.addHandler(handler)

    return logger
