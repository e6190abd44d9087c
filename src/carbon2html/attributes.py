"""Attribute resolution for inline formatting tags."""

from __future__ import annotations

import html
from typing import Callable, Mapping

from carbon2html.exceptions import SanitizationError
from carbon2html.html_utils import is_valid_attribute_name

AttributeGenerator = Callable[[dict[str, str], str], Mapping[str, str]]


def resolve_attributes(
    tag_type: str,
    attrs: Mapping[str, str] | None,
    current_text: str,
    custom_attrs: Mapping[str, AttributeGenerator] | None = None,
) -> dict[str, str]:
    """Merge declared attributes with the generator registered for *tag_type*.

    Generator values win on key collision. For example::

        custom_attrs = {"a": lambda attrs, text: {"rel": "nofollow"}}

    adds ``rel="nofollow"`` to every link.
    """
    resolved = dict(attrs or {})
    generator = (custom_attrs or {}).get(tag_type)
    if generator is not None:
        generated = generator(dict(resolved), current_text)
        resolved.update({str(key): str(value) for key, value in (generated or {}).items()})
    return resolved


def render_attributes(attrs: Mapping[str, str]) -> str:
    """Render ``attrs`` as a `` key="value"`` string with escaped values."""
    parts: list[str] = []
    for name, value in attrs.items():
        if not is_valid_attribute_name(name):
            raise SanitizationError(f"Invalid attribute name {name!r}")
        parts.append(f' {name}="{html.escape(value, quote=True)}"')
    return "".join(parts)
