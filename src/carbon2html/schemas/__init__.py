"""Shared schemas for carbon2html."""

from carbon2html.schemas.document import CarbonDocument, FormatRange, Node

__all__ = ["CarbonDocument", "FormatRange", "Node"]
