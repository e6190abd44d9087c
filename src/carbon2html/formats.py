"""Overlay Carbon format ranges onto paragraph text."""

from __future__ import annotations

import html
import logging
from typing import Mapping, Sequence

from carbon2html.attributes import AttributeGenerator, render_attributes, resolve_attributes
from carbon2html.exceptions import SanitizationError
from carbon2html.html_utils import attach, is_valid_tag_name, parse_fragment, sanitize_fragment
from carbon2html.schemas import FormatRange

try:
    from bs4 import BeautifulSoup, ParserRejectedMarkup
    from bs4.element import PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def build_fragment(
    text: str,
    formats: Sequence[FormatRange],
    custom_attrs: Mapping[str, AttributeGenerator] | None = None,
) -> str:
    """Insert opening/closing tags for each range into *text*.

    The text is held as a list of units: one escaped unit per code point and
    one unit per inserted tag. ``offset`` is the number of tag units inserted
    so far and is added to every ``start``/``end``, so ranges must be given
    in ascending, non-crossing order. Crossing ranges are not detected and
    come out mis-nested.
    """
    units = [html.escape(char, quote=False) for char in text]
    length = len(units)
    offset = 0

    for fmt in formats:
        if not is_valid_tag_name(fmt.type):
            raise SanitizationError(f"Invalid format type {fmt.type!r}")
        if fmt.start > fmt.end or fmt.end > length:
            raise SanitizationError(
                f"Format '{fmt.type}' range {fmt.start}-{fmt.end} is outside text of length {length}"
            )

        attrs = resolve_attributes(fmt.type, fmt.attrs, text, custom_attrs)
        opening = f"<{fmt.type}{render_attributes(attrs)}>"
        closing = f"</{fmt.type}>"

        units.insert(fmt.start + offset, opening)
        offset += 1
        units.insert(fmt.end + offset, closing)
        offset += 1

    return "".join(units)


def compose(
    text: str | None,
    formats: Sequence[FormatRange],
    *,
    document: BeautifulSoup,
    paragraph: Tag | None,
    custom_attrs: Mapping[str, AttributeGenerator] | None = None,
) -> list[PageElement]:
    """Render *text* with *formats* and append the result to *paragraph*.

    Returns the appended nodes.

    Raises:
        SanitizationError: If a range cannot be placed or the resulting
            fragment is rejected by the parser.
    """
    fragment = build_fragment(text or "", formats, custom_attrs)

    try:
        parsed = parse_fragment(fragment)
    except ParserRejectedMarkup as exc:
        raise SanitizationError(f"Could not parse formatted text: {exc}") from exc
    sanitize_fragment(parsed)

    nodes = list(parsed.contents)
    for node in nodes:
        attach(document, paragraph, node)
    logger.debug("Composed %d format(s) into %d node(s)", len(formats), len(nodes))
    return nodes
