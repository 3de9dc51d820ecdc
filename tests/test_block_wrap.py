"""Tests for the blog content normalizer.

These cover each step of the decision order: empty input, content that
already has block structure, plain text with paragraph breaks, and
inline markup that needs wrapping.  Exact recovery output for badly
malformed markup depends on the parser and is only checked loosely.
"""

from __future__ import annotations

import pytest  # type: ignore
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

import blogflow.normalize.block_wrap as block_wrap
from blogflow.normalize.block_wrap import normalize_content


@pytest.mark.parametrize("content", ["", "   ", "\n\n\t ", None])
def test_empty_content_returns_empty_string(content) -> None:
    assert normalize_content(content) == ""


def test_plain_text_single_paragraph() -> None:
    assert normalize_content("Hello world") == "<p>Hello world</p>"


def test_plain_text_is_trimmed() -> None:
    assert normalize_content("  padded  \n") == "<p>padded</p>"


def test_plain_text_paragraph_break() -> None:
    assert normalize_content("First para.\n\nSecond para.") == "<p>First para.</p><p>Second para.</p>"


def test_plain_text_many_newlines_count_as_one_break() -> None:
    assert normalize_content("A\n\n\nB") == "<p>A</p><p>B</p>"


def test_plain_text_single_newline_stays_in_paragraph() -> None:
    assert normalize_content("Line one\nLine two") == "<p>Line one\nLine two</p>"


def test_plain_text_blank_segments_are_dropped() -> None:
    assert normalize_content("\n\nOnly one\n\n   \n\n") == "<p>Only one</p>"


def test_inline_markup_wrapped_in_one_paragraph() -> None:
    assert normalize_content("Hello <strong>world</strong>") == "<p>Hello <strong>world</strong></p>"


def test_inline_link_keeps_attributes() -> None:
    html = 'See <a href="/shop">the shop</a> today.'
    assert normalize_content(html) == '<p>See <a href="/shop">the shop</a> today.</p>'


def test_entities_stay_escaped() -> None:
    html = "Fish &amp; chips <em>daily</em>"
    assert normalize_content(html) == "<p>Fish &amp; chips <em>daily</em></p>"


def test_leading_whitespace_stays_outside_paragraph() -> None:
    result = normalize_content("  <b>Bold</b> text")
    # The parser may collapse the leading whitespace; it must not move into the paragraph.
    assert result != result.lstrip()
    assert result.strip() == "<p><b>Bold</b> text</p>"


def test_comment_does_not_start_a_paragraph() -> None:
    assert normalize_content("<!-- note --><em>hi</em>") == "<!-- note --><p><em>hi</em></p>"


def test_markup_without_text_is_not_wrapped() -> None:
    result = normalize_content("<br><br>")
    assert "<p>" not in result
    assert result.count("<br/>") == 2


@pytest.mark.parametrize(
    "html",
    [
        "<h2>Title</h2>",
        "<p>Already fine</p>",
        "<div class='note'>Kept   exactly</div>",
        "Intro text <ul><li>one</li></ul>",
        "<blockquote>Quote</blockquote> trailing",
        "<h2>Intro</h2>Some loose text.<h2>Next</h2>More loose text.",
    ],
)
def test_block_content_returned_unchanged(html: str) -> None:
    assert normalize_content(html) == html


def test_rewrap_wraps_runs_between_headings() -> None:
    html = "<h2>Intro</h2>Some loose text.<h2>Next</h2>More loose text."
    result = normalize_content(html, preserve_blocks=False)
    assert result == "<h2>Intro</h2><p>Some loose text.</p><h2>Next</h2><p>More loose text.</p>"
    soup = BeautifulSoup(result, "html.parser")
    top = [node.name for node in soup.contents if isinstance(node, Tag)]
    assert top == ["h2", "p", "h2", "p"]


def test_rewrap_leaves_existing_paragraphs_alone() -> None:
    html = "<p>Kept</p>loose <i>bit</i>"
    assert normalize_content(html, preserve_blocks=False) == "<p>Kept</p><p>loose <i>bit</i></p>"


def test_rewrap_treats_inline_holding_block_as_boundary() -> None:
    html = "<span><p>x</p></span>y"
    assert normalize_content(html, preserve_blocks=False) == "<span><p>x</p></span><p>y</p>"


def test_list_item_ends_a_run() -> None:
    assert normalize_content("<li>one</li>tail") == "<li>one</li><p>tail</p>"


def test_malformed_markup_does_not_raise() -> None:
    result = normalize_content("<b>unclosed <i>tags")
    assert result.startswith("<p>")
    assert result.endswith("</p>")
    assert "unclosed" in result


def test_rejected_markup_falls_back_to_single_paragraph(monkeypatch: pytest.MonkeyPatch) -> None:
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("boom")

    monkeypatch.setattr(block_wrap, "BeautifulSoup", reject)
    assert normalize_content(" <x>text & more ") == "<p>&lt;x&gt;text &amp; more</p>"


@pytest.mark.parametrize(
    "html",
    [
        "Hello world",
        "First para.\n\nSecond para.",
        "Hello <strong>world</strong>",
        "<h2>Title</h2>",
        "  <b>Bold</b> text",
        "<br>",
        "Fish &amp; chips <em>daily</em>",
    ],
)
def test_normalize_is_idempotent(html: str) -> None:
    once = normalize_content(html)
    assert normalize_content(once) == once


@pytest.mark.parametrize("html", ["<![if x]>y", "p\n<![", "<![", "a < b", "Tom & Jerry"])
def test_markup_characters_keep_output_idempotent(html: str) -> None:
    once = normalize_content(html)
    assert normalize_content(once) == once


def test_rejected_markup_output_is_stable(monkeypatch: pytest.MonkeyPatch) -> None:
    real = block_wrap.BeautifulSoup
    calls = []

    def reject_first(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            raise ParserRejectedMarkup("boom")
        return real(*args, **kwargs)

    monkeypatch.setattr(block_wrap, "BeautifulSoup", reject_first)
    once = normalize_content("<![b['?>;[[")
    assert once == "<p>&lt;![b['?&gt;;[[</p>"
    assert normalize_content(once) == once
