"""Local configuration for carbon2html."""

from __future__ import annotations

import os


DEFAULT_INSERT_MIN_CHARS = 120
DEFAULT_LAYOUT_CLASS = "layout-single-column"
DEFAULT_LOG_LEVEL = "WARNING"

# Paragraphs longer than this (in code points) may receive a custom insert.
CARBON2HTML_INSERT_MIN_CHARS = int(os.getenv("CARBON2HTML_INSERT_MIN_CHARS", str(DEFAULT_INSERT_MIN_CHARS)))
CARBON2HTML_LAYOUT_CLASS = os.getenv("CARBON2HTML_LAYOUT_CLASS", DEFAULT_LAYOUT_CLASS)
CARBON2HTML_LOG_LEVEL = os.getenv("CARBON2HTML_LOG_LEVEL", DEFAULT_LOG_LEVEL)
