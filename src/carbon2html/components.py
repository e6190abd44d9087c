"""Built-in renderers for Carbon components.

Each renderer creates the element for one node, attaches it to the current
parent (or the document root) and returns it so the node's children can be
rendered inside it.
"""

from __future__ import annotations

from typing import Mapping

from carbon2html.attributes import AttributeGenerator
from carbon2html.config import CARBON2HTML_LAYOUT_CLASS
from carbon2html.exceptions import StructureError
from carbon2html.formats import compose
from carbon2html.html_utils import attach, is_valid_tag_name, parse_raw_html
from carbon2html.schemas import Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


PARAGRAPH_TAGS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre", "code", "li"})
LIST_TAGS = frozenset({"ul", "ol"})


class Component:
    """Base class for component renderers."""

    name: str = ""

    def __init__(self, **config: object) -> None:
        self.config = config

    def get_name(self) -> str:
        return self.name or type(self).__name__

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        raise NotImplementedError


class Section(Component):
    name = "Section"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        section = document.new_tag("section")
        attach(document, parent, section)
        return section


class Layout(Component):
    """``<div class="layout-...">`` container; ``tagName``/``type`` override."""

    name = "Layout"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        tag_name = node.get("tagName", "div")
        if not isinstance(tag_name, str) or not is_valid_tag_name(tag_name):
            raise StructureError(f"Unsupported layout tag '{tag_name}'")
        css_class = node.get("type") or self.config.get("default_class") or CARBON2HTML_LAYOUT_CLASS
        layout = document.new_tag(tag_name, attrs={"class": css_class})
        attach(document, parent, layout)
        return layout


class Paragraph(Component):
    """Text block rendered with its inline formats.

    ``custom_attrs`` maps a format type to a generator whose attributes are
    merged into every tag of that type.
    """

    name = "Paragraph"

    def __init__(self, custom_attrs: Mapping[str, AttributeGenerator] | None = None, **config: object) -> None:
        super().__init__(**config)
        self.custom_attrs = dict(custom_attrs or {})

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        tag_name = node.paragraph_type or "p"
        if tag_name not in PARAGRAPH_TAGS:
            raise StructureError(f"Unsupported paragraph type '{tag_name}'")

        paragraph = document.new_tag(tag_name)
        attach(document, parent, paragraph)
        compose(
            node.text,
            node.formats,
            document=document,
            paragraph=paragraph,
            custom_attrs=self.custom_attrs,
        )
        return paragraph


class Figure(Component):
    name = "Figure"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        figure = document.new_tag("figure")
        attach(document, parent, figure)

        caption = node.get("caption", "")
        img_attrs = {"src": str(node.get("src", "")), "alt": str(node.get("alt", caption))}
        for key in ("width", "height"):
            if node.get(key) is not None:
                img_attrs[key] = str(node.get(key))
        figure.append(document.new_tag("img", attrs=img_attrs))

        if caption:
            figcaption = document.new_tag("figcaption")
            figcaption.string = str(caption)
            figure.append(figcaption)
        return figure


class ListComponent(Component):
    """``<ul>``/``<ol>``; items are ``li`` paragraphs rendered as children."""

    name = "ListComponent"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        tag_name = node.get("tagName", "ul")
        if tag_name not in LIST_TAGS:
            raise StructureError(f"Unsupported list type '{tag_name}'")
        list_element = document.new_tag(tag_name)
        attach(document, parent, list_element)
        return list_element


class EmbeddedComponent(Component):
    """Embedded media (video, tweet, ...) rendered as an iframe in a figure."""

    name = "EmbeddedComponent"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        attrs = {"class": "embedded"}
        provider = node.get("provider") or node.get("serviceName")
        if provider:
            attrs["data-provider"] = str(provider)
        figure = document.new_tag("figure", attrs=attrs)
        attach(document, parent, figure)

        iframe_attrs = {"src": str(node.get("url", "")), "frameborder": "0", "allowfullscreen": ""}
        iframe_attrs.update({key: str(value) for key, value in self.config.get("iframe_attrs", {}).items()})
        figure.append(document.new_tag("iframe", attrs=iframe_attrs))

        caption = node.get("caption")
        if caption:
            figcaption = document.new_tag("figcaption")
            figcaption.string = str(caption)
            figure.append(figcaption)
        return figure


class HTMLComponent(Component):
    """Raw HTML passthrough wrapped in a ``div``."""

    name = "HTMLComponent"

    def parse(self, node: Node, document: BeautifulSoup, parent: Tag | None) -> Tag:
        wrapper = document.new_tag("div", attrs={"class": "html-component"})
        attach(document, parent, wrapper)
        html = node.get("html", "")
        if html:
            for element in parse_raw_html(str(html)):
                wrapper.append(element)
        return wrapper


DEFAULT_COMPONENTS: tuple[type[Component], ...] = (
    Section,
    Layout,
    Paragraph,
    Figure,
    ListComponent,
    EmbeddedComponent,
    HTMLComponent,
)
