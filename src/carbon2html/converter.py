"""Carbon JSON -> HTML conversion.

The walker visits the node tree in document order, hands each node to the
renderer registered for its component type and renders the node's children
inside the element that renderer returns. Between ``p`` paragraphs it may
hand control to caller-supplied "custom insert" callbacks that add content
(ads, newsletter boxes ...) and choose a new parent for the rest of the
current level.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Mapping, Optional, Sequence

from pydantic import ValidationError

from carbon2html.attributes import AttributeGenerator
from carbon2html.components import DEFAULT_COMPONENTS, Component, Paragraph
from carbon2html.config import CARBON2HTML_INSERT_MIN_CHARS
from carbon2html.exceptions import MissingSectionsError, ParseError, StructureError, UnknownComponentError
from carbon2html.html_utils import new_document, serialize_root
from carbon2html.registry import ComponentRegistry, normalize_component_name
from carbon2html.schemas import CarbonDocument, Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

InsertCallback = Callable[[BeautifulSoup, Optional[Tag]], Optional[Tag]]


def load_document(json_text: str | bytes) -> CarbonDocument:
    """Decode Carbon JSON into a :class:`CarbonDocument`.

    Raises:
        ParseError: If *json_text* is not valid JSON.
        MissingSectionsError: If there is no top-level ``sections`` list.
        StructureError: If a node does not match the Carbon node shape.
    """
    try:
        data = json.loads(json_text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"The JSON provided is not valid: {exc}") from exc

    # sections is always the first node
    if not isinstance(data, dict) or data.get("sections") is None:
        raise MissingSectionsError("The JSON provided is not in a Carbon Editor format.")

    try:
        return CarbonDocument.model_validate(data)
    except ValidationError as exc:
        raise StructureError(f"The JSON provided has an invalid structure: {exc}") from exc


class Converter:
    """Convert Carbon editor JSON to HTML.

    Usage::

        converter = Converter(custom_attrs={"a": lambda attrs, text: {"rel": "nofollow"}})
        html = converter.convert(json_text)

        # insert an ad before the third paragraph when it is long enough
        def add_ad(document, parent):
            ad = document.new_tag("aside", attrs={"class": "ad"})
            parent.append(ad)
            return parent

        html = converter.convert(json_text, {3: add_ad})

    A converter holds no per-document state and may be reused, including
    from several threads at once.
    """

    def __init__(
        self,
        *,
        custom_attrs: Mapping[str, AttributeGenerator] | None = None,
        insert_min_chars: int | None = None,
    ) -> None:
        self.registry = ComponentRegistry()
        self.insert_min_chars = CARBON2HTML_INSERT_MIN_CHARS if insert_min_chars is None else insert_min_chars

        for component_cls in DEFAULT_COMPONENTS:
            if component_cls is Paragraph:
                component = component_cls(custom_attrs=custom_attrs)
            else:
                component = component_cls()
            self.add_component(component.get_name(), component)

    def add_component(self, name: str, component: Component) -> "Converter":
        """Register (or replace) the renderer for component type *name*."""
        self.registry.register(name, component)
        return self

    def convert(self, json_text: str | bytes, custom_inserts: Mapping[int, InsertCallback] | None = None) -> str:
        """Convert Carbon JSON to an HTML string.

        Args:
            json_text: Carbon editor JSON with a top-level ``sections`` list.
            custom_inserts: Callbacks keyed by 1-based ``p`` paragraph index.
                Each is called as ``callback(document, parent)`` and returns
                the parent for the paragraph and its following siblings.

        Returns:
            The rendered root element as HTML, stripped of surrounding whitespace.

        Raises:
            ParseError: If the input is not valid JSON.
            StructureError: If the document shape is invalid or uses an
                unregistered component.
            SanitizationError: If formatted text cannot be turned into markup.
        """
        return self.convert_document(load_document(json_text), custom_inserts)

    def convert_document(
        self,
        document: CarbonDocument,
        custom_inserts: Mapping[int, InsertCallback] | None = None,
    ) -> str:
        """Convert an already decoded :class:`CarbonDocument`."""
        conversion = _Conversion(
            components=self.registry.snapshot(),
            custom_inserts=custom_inserts,
            insert_min_chars=self.insert_min_chars,
        )
        logger.debug("Converting Carbon document", extra={"sections": len(document.sections)})
        conversion.render(document.sections, None)
        return serialize_root(conversion.document)


class _Conversion:
    """Mutable state of a single conversion."""

    def __init__(
        self,
        *,
        components: Mapping[str, Component],
        custom_inserts: Mapping[int, InsertCallback] | None,
        insert_min_chars: int,
    ) -> None:
        self.document = new_document()
        self.components = components
        self.custom_inserts = dict(custom_inserts or {})
        self.first_insert_index = min(self.custom_inserts) if self.custom_inserts else None
        self.insert_min_chars = insert_min_chars
        self.paragraph_index = 1

    def render(self, nodes: Sequence[Node], parent: Tag | None) -> None:
        for position, node in enumerate(nodes):
            component = normalize_component_name(node.component_type)

            if component == "Paragraph" and node.paragraph_type == "p":
                parent = self._apply_custom_insert(nodes, position, parent)
                self.paragraph_index += 1

            renderer = self.components.get(component)
            if renderer is None:
                raise UnknownComponentError(component)

            element = renderer.parse(node, self.document, parent)

            if node.children is not None:
                self.render(node.children, element)

    def _apply_custom_insert(self, nodes: Sequence[Node], position: int, parent: Tag | None) -> Tag | None:
        """Run the insert registered for the current paragraph if it qualifies.

        A paragraph qualifies when its own text is longer than the threshold,
        or when it holds the first registered insert and the text of all
        siblings up to and including it is longer than the threshold.
        """
        callback = self.custom_inserts.get(self.paragraph_index)
        if callback is None:
            return parent

        node = nodes[position]
        total_prev_chars = sum(sibling.text_length for sibling in nodes[: position + 1])
        is_first_insert = self.paragraph_index == self.first_insert_index

        if node.text_length > self.insert_min_chars or (is_first_insert and total_prev_chars > self.insert_min_chars):
            logger.debug(
                "Applying custom insert",
                extra={"paragraph_index": self.paragraph_index, "total_prev_chars": total_prev_chars},
            )
            return callback(self.document, parent)
        return parent


def convert(
    json_text: str | bytes,
    custom_inserts: Mapping[int, InsertCallback] | None = None,
    **options: object,
) -> str:
    """Convert Carbon JSON with a fresh :class:`Converter` built from *options*."""
    return Converter(**options).convert(json_text, custom_inserts)  # type: ignore[arg-type]
