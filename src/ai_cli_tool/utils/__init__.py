"""
Utilities package for AI CLI Tool.

This package contains shared helpers used by the command-line interface.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = ["configure_logging", "LOG_FORMAT"]


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at or above ``level`` to stderr.

    Handlers installed by a previous call are replaced.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING)
