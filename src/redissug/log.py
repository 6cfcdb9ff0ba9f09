"""
Logging Setup

structlog configuration shared by the CLI and embedding applications.
"""

import logging

import structlog


def configure_logging(level: str | int = "INFO") -> None:
    """Route stdlib logging and structlog through the given level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
