"""Test setup for carbon2html."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def paragraph(text: str | None = None, *, paragraph_type: str = "p", **extra: Any) -> dict[str, Any]:
    """Build a Carbon paragraph node."""
    node: dict[str, Any] = {"component": "Paragraph", "paragraphType": paragraph_type}
    if text is not None:
        node["text"] = text
    node.update(extra)
    return node


def wrap(*nodes: dict[str, Any]) -> str:
    """Wrap nodes in a single section/layout and return the JSON text."""
    return json.dumps(
        {
            "sections": [
                {
                    "component": "Section",
                    "components": [{"component": "Layout", "components": list(nodes)}],
                }
            ]
        }
    )


@pytest.fixture
def sample_document() -> str:
    """A small document exercising every built-in component."""
    return json.dumps(
        {
            "sections": [
                {
                    "component": "Section",
                    "name": "intro",
                    "components": [
                        {
                            "component": "Layout",
                            "type": "layout-single-column",
                            "components": [
                                paragraph("Title", paragraph_type="h1"),
                                paragraph(
                                    "Hello bold world",
                                    formats=[{"type": "strong", "from": 6, "to": 10}],
                                ),
                                {
                                    "component": "Figure",
                                    "src": "https://example.com/cat.png",
                                    "caption": "A cat",
                                },
                                {
                                    "component": "ListComponent",
                                    "tagName": "ol",
                                    "components": [
                                        paragraph("one", paragraph_type="li"),
                                        paragraph("two", paragraph_type="li"),
                                    ],
                                },
                            ],
                        }
                    ],
                }
            ]
        }
    )
