"""Shared HTML utilities for building and sanitizing the rendered tree."""

from __future__ import annotations

import logging
import re

try:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

# Elements never allowed inside inline text content.
UNSAFE_TAGS = ("script", "style", "noscript", "iframe", "object", "embed", "link", "meta", "base")
_URL_ATTRS = ("href", "src", "action", "formaction", "xlink:href")
_SCRIPT_URL_RE = re.compile(r"^\s*(javascript|vbscript|data)\s*:", re.IGNORECASE)
_TAG_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
_ATTR_NAME_RE = re.compile(r"^[A-Za-z_:][A-Za-z0-9_.:-]*$")


def new_document() -> BeautifulSoup:
    """Create an empty document to render into."""
    return BeautifulSoup("", "html.parser")


def is_valid_tag_name(name: str) -> bool:
    return bool(_TAG_NAME_RE.match(name))


def is_valid_attribute_name(name: str) -> bool:
    return bool(_ATTR_NAME_RE.match(name))


def attach(document: BeautifulSoup, parent: Tag | None, element: PageElement) -> PageElement:
    """Append *element* to *parent*, or to the document root when there is none."""
    if parent is None:
        document.append(element)
    else:
        parent.append(element)
    return element


def parse_fragment(markup: str) -> BeautifulSoup:
    """Parse an inline markup fragment without adding html/body wrappers."""
    return BeautifulSoup(markup, "html.parser")


def parse_raw_html(html: str) -> list[PageElement]:
    """Parse arbitrary (possibly broken) HTML and return its top-level nodes.

    lxml moves ``script``/``style``/``meta`` into ``<head>``; those nodes are
    returned ahead of the body content so nothing is dropped.
    """
    soup = BeautifulSoup(html, "lxml")
    nodes: list[PageElement] = []
    if soup.head is not None:
        nodes.extend(soup.head.contents)
    if soup.body is not None:
        nodes.extend(soup.body.contents)
    if soup.head is None and soup.body is None:
        nodes.extend(soup.contents)
    return list(nodes)


def sanitize_fragment(root: BeautifulSoup | Tag) -> int:
    """Strip executable content from *root* in place.

    Removes :data:`UNSAFE_TAGS`, ``on*`` event handler attributes and
    script-like URLs. Returns the number of removals.
    """
    removed = 0
    for tag in root.find_all(list(UNSAFE_TAGS)):
        # already destroyed along with an unsafe ancestor
        if tag.decomposed:
            continue
        tag.decompose()
        removed += 1
    for tag in root.find_all(True):
        for attr in list(tag.attrs):
            lowered = attr.lower()
            if lowered.startswith("on"):
                del tag.attrs[attr]
                removed += 1
            elif lowered in _URL_ATTRS and _SCRIPT_URL_RE.match(str(tag.attrs[attr])):
                del tag.attrs[attr]
                removed += 1
    if removed:
        logger.debug("Sanitizer removed %d unsafe item(s)", removed)
    return removed


def find_root_element(document: BeautifulSoup) -> Tag | None:
    """Return the first top-level element of *document*."""
    for child in document.contents:
        if isinstance(child, Tag):
            return child
    return None


def serialize_root(document: BeautifulSoup) -> str:
    """Serialize the document's root element, trimmed."""
    root = find_root_element(document)
    if root is None:
        return ""
    return str(root).strip()
