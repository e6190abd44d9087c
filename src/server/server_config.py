"""Configuration for the HTTP service."""

from __future__ import annotations

import os

DEFAULT_MAX_DOCUMENT_KB = 2048

MAX_DOCUMENT_KB = int(os.getenv("CARBON2HTML_MAX_DOCUMENT_KB", str(DEFAULT_MAX_DOCUMENT_KB)))
MAX_DOCUMENT_CHARS = MAX_DOCUMENT_KB * 1024
