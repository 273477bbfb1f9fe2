"""Root logger configuration for command line runs."""

from __future__ import annotations

import logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at the desired level.

    A handler is only installed when the root logger has none, so an embedding
    application (or the test runner) keeps its own handlers.
    """
    resolved_level = level.upper()
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger().setLevel(resolved_level)
    logging.getLogger(__name__).debug("Logging configured: level=%s", resolved_level)
