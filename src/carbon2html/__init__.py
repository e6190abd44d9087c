"""carbon2html: render Carbon editor JSON documents as HTML."""

from carbon2html.components import Component
from carbon2html.converter import Converter, convert, load_document
from carbon2html.exceptions import (
    Carbon2htmlError,
    MissingSectionsError,
    ParseError,
    SanitizationError,
    StructureError,
    UnknownComponentError,
)
from carbon2html.registry import ComponentRegistry
from carbon2html.schemas import CarbonDocument, FormatRange, Node

__version__ = "0.1.0"

__all__ = [
    "Carbon2htmlError",
    "CarbonDocument",
    "Component",
    "ComponentRegistry",
    "Converter",
    "FormatRange",
    "MissingSectionsError",
    "Node",
    "ParseError",
    "SanitizationError",
    "StructureError",
    "UnknownComponentError",
    "__version__",
    "convert",
    "load_document",
]
