"""
Logging setup shared by the generator modules and the CLI.
"""

import logging
import sys

LOGGER_NAME = "json_schema_to_rust"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace our handler so it writes to the current sys.stderr
    for handler in [h for h in logger.handlers if getattr(h, "_json_schema_to_rust", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._json_schema_to_rust = True
    logger.addHandler(handler)
