"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
import sys

from carbon2html.config import CARBON2HTML_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stderr handler to the root logger.

    Calling it again only updates the level.
    """
    resolved = level if level is not None else CARBON2HTML_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()

    root = logging.getLogger()
    if not any(getattr(handler, "_carbon2html", False) for handler in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._carbon2html = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
