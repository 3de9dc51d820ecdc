"""Tests for clipboard simplification in the blog editor."""

from __future__ import annotations

import pytest  # type: ignore

from blogflow.normalize.paste import clean_clipboard, simplify_pasted_html


def test_paragraphs_become_blank_lines() -> None:
    html = "<p>First <strong>bold</strong></p><p>Second <em>it</em></p>"
    assert simplify_pasted_html(html) == "First <b>bold</b>\n\nSecond <i>it</i>"


def test_body_headings_and_line_breaks() -> None:
    html = "<html><body><h2>Title</h2>Line one<br>Line two</body></html>"
    assert simplify_pasted_html(html) == "<h2>Title</h2>\n\nLine one\nLine two"


def test_unknown_tags_are_flattened() -> None:
    html = '<span style="color:red">plain</span> <a href="https://example.com">link</a>'
    assert simplify_pasted_html(html) == "plain link"


def test_lower_headings_are_flattened() -> None:
    assert simplify_pasted_html("<h4>Small</h4>") == "Small"


def test_fragment_comments_are_dropped() -> None:
    html = "<!--StartFragment--><b>x</b><!--EndFragment-->"
    assert simplify_pasted_html(html) == "<b>x</b>"


def test_style_bodies_are_dropped() -> None:
    assert simplify_pasted_html("<style>p { color: red; }</style><p>Hi</p>") == "Hi"


def test_consecutive_divs() -> None:
    assert simplify_pasted_html("<div>a</div><div>b</div><div>c</div>") == "a\n\nb\n\nc"


def test_extra_newlines_collapse() -> None:
    assert simplify_pasted_html("<p>a</p><br><br><p>b</p>") == "a\n\nb"


@pytest.mark.parametrize(
    "html_data, text_data, expected",
    [
        ("<b>x</b>", "x", "<b>x</b>"),
        (None, "plain\ntext", "plain\ntext"),
        ("", "fallback", "fallback"),
        (None, None, ""),
    ],
)
def test_clean_clipboard(html_data, text_data, expected) -> None:
    assert clean_clipboard(html_data, text_data) == expected
