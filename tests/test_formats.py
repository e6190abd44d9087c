"""Tests for the inline format compositor."""

from __future__ import annotations

import html

import pytest
from bs4 import ParserRejectedMarkup

from carbon2html.exceptions import SanitizationError
from carbon2html.formats import build_fragment, compose
from carbon2html.html_utils import new_document
from carbon2html.schemas import FormatRange


def _fmt(tag: str, start: int, end: int, **attrs: str) -> FormatRange:
    return FormatRange(type=tag, start=start, end=end, attrs=attrs or None)


def _render(text, formats, custom_attrs=None) -> str:
    document = new_document()
    paragraph = document.new_tag("p")
    document.append(paragraph)
    compose(text, formats, document=document, paragraph=paragraph, custom_attrs=custom_attrs)
    return str(paragraph)


class TestBuildFragment:
    """Tests for build_fragment tag insertion."""

    def test_no_formats_escapes_text(self) -> None:
        """Without formats the fragment is the escaped text."""
        assert build_fragment("a < b & c > d", []) == "a &lt; b &amp; c &gt; d"

    def test_tag_like_text_is_not_markup(self) -> None:
        """Text that looks like a tag stays text."""
        assert build_fragment("x<b>y", []) == "x&lt;b&gt;y"

    def test_full_span(self) -> None:
        """A range covering the whole text wraps it."""
        assert build_fragment("hello", [_fmt("b", 0, 5)]) == "<b>hello</b>"

    def test_empty_range(self) -> None:
        """A zero-width range inserts an empty element."""
        assert build_fragment("ab", [_fmt("em", 1, 1)]) == "a<em></em>b"

    def test_disjoint_ranges_keep_order(self) -> None:
        """Offsets drift by one unit per inserted tag."""
        fragment = build_fragment("one two three", [_fmt("b", 0, 3), _fmt("i", 4, 7), _fmt("u", 8, 13)])
        assert fragment == "<b>one</b> <i>two</i> <u>three</u>"

    def test_attributes_are_rendered(self) -> None:
        """Declared attributes are escaped into the opening tag."""
        fragment = build_fragment("go", [_fmt("a", 0, 2, href="/x?a=1&b=2")])
        assert fragment == '<a href="/x?a=1&amp;b=2">go</a>'

    def test_invalid_tag_name(self) -> None:
        """A format type that is not a tag name cannot be placed."""
        with pytest.raises(SanitizationError):
            build_fragment("text", [_fmt("b onclick", 0, 2)])

    def test_range_past_end_of_text(self) -> None:
        """A range ending after the text is rejected."""
        with pytest.raises(SanitizationError):
            build_fragment("abc", [_fmt("b", 0, 4)])

    def test_invalid_attribute_name(self) -> None:
        """Attribute names are validated before insertion."""
        with pytest.raises(SanitizationError):
            build_fragment("abc", [FormatRange(type="a", start=0, end=1, attrs={"bad name": "x"})])


class TestCompose:
    """Tests for compose producing markup nodes."""

    def test_plain_text_equals_sanitized_text(self) -> None:
        """No formats: the paragraph holds the sanitized text only."""
        text = 'Fish & "chips" <yum>'
        assert _render(text, []) == f"<p>{html.escape(text, quote=False)}</p>"

    def test_full_span_bold(self) -> None:
        """A single full-width range gives <b> + text + </b>."""
        text = "Tom & Jerry <3"
        assert _render(text, [_fmt("b", 0, len(text))]) == "<p><b>Tom &amp; Jerry &lt;3</b></p>"

    def test_multibyte_text_preserved(self) -> None:
        """Offsets are code points, so non-ASCII text is split correctly."""
        text = "héllo wörld 日本"
        result = _render(text, [_fmt("b", 0, 5), _fmt("i", 6, 11)])
        assert result == "<p><b>héllo</b> <i>wörld</i> 日本</p>"

    def test_emoji_offsets(self) -> None:
        """Characters outside the BMP count as one code point."""
        text = "🎉 party"
        assert _render(text, [_fmt("strong", 2, 7)]) == "<p>🎉 <strong>party</strong></p>"

    def test_none_text(self) -> None:
        """Missing text renders an empty paragraph."""
        assert _render(None, []) == "<p></p>"

    def test_returns_appended_nodes(self) -> None:
        """compose returns the nodes it attached to the paragraph."""
        document = new_document()
        paragraph = document.new_tag("p")
        nodes = compose("a b", [_fmt("b", 0, 1)], document=document, paragraph=paragraph)
        assert [str(node) for node in nodes] == ["<b>a</b>", " b"]
        assert all(node.parent is paragraph for node in nodes)

    def test_custom_attribute_generator(self) -> None:
        """Generator values are merged into the tag and win on collision."""
        custom_attrs = {"a": lambda attrs, text: {"rel": "nofollow"}}
        result = _render("link", [_fmt("a", 0, 4, href="/x", rel="me")], custom_attrs)
        assert result == '<p><a href="/x" rel="nofollow">link</a></p>'

    def test_generator_receives_plain_text(self) -> None:
        """Generators get the declared attributes and the node's text."""
        seen = []

        def generator(attrs, text):
            seen.append((attrs, text))
            return {}

        _render("a & b", [_fmt("a", 0, 1, href="/x")], {"a": generator})
        assert seen == [({"href": "/x"}, "a & b")]

    def test_script_formats_are_removed(self) -> None:
        """The sanitizing pass drops executable elements."""
        assert _render("alert(1)", [_fmt("script", 0, 8)]) == "<p></p>"

    def test_event_handlers_and_script_urls_are_removed(self) -> None:
        """Event handler attributes and javascript: links are stripped."""
        formats = [FormatRange(type="a", start=0, end=2, attrs={"href": "javascript:alert(1)", "onclick": "x()"})]
        assert _render("hi", formats) == "<p><a>hi</a></p>"

    def test_crossing_ranges_do_not_fail(self) -> None:
        """Ranges that are not disjoint and ascending come out mis-nested but still parse."""
        document = new_document()
        paragraph = document.new_tag("p")
        compose("abcd", [_fmt("b", 0, 4), _fmt("i", 0, 4)], document=document, paragraph=paragraph)
        assert paragraph.get_text() == "abcd"
        assert paragraph.find("b") is not None
        assert paragraph.find("i") is not None

    def test_nested_range_is_shifted_by_outer_closing_tag(self) -> None:
        """A range inside an earlier one is offset by the earlier closing tag too."""
        result = _render("abcdef", [_fmt("b", 0, 6), _fmt("i", 1, 3)])
        assert result == "<p><b>ab<i>cd</i>ef</b></p>"

    def test_parser_rejection_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A fragment the parser rejects is a sanitization failure."""

        def reject(markup: str):
            raise ParserRejectedMarkup("boom")

        monkeypatch.setattr("carbon2html.formats.parse_fragment", reject)
        with pytest.raises(SanitizationError):
            _render("text", [])
