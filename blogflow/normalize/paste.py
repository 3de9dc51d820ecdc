"""
Clipboard simplification for the blog editor.

When an author pastes rich text (from a word processor or another web
page) into the post body, only a handful of formatting survives:
paragraph breaks, line breaks, bold, italic and the top three heading
levels.  Everything else is flattened to its text.  The simplified
markup is what `normalize_content` later turns into display HTML.
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

_BOLD_TAGS = {"b", "strong"}
_ITALIC_TAGS = {"i", "em"}
_HEADING_TAGS = {"h1", "h2", "h3"}
_PARAGRAPH_TAGS = {"p", "div"}
_DROPPED_TAGS = {"script", "style", "head", "title"}

_EXTRA_NEWLINES = re.compile(r"\n{3,}")


class _Simplifier:
    def __init__(self) -> None:
        self.parts: List[str] = []

    def text(self) -> str:
        return "".join(self.parts)

    def visit(self, node: object) -> None:
        if isinstance(node, Tag):
            self._visit_tag(node)
        elif type(node) is NavigableString:
            self.parts.append(str(node))

    def _children(self, tag: Tag) -> None:
        for child in tag.children:
            self.visit(child)

    def _visit_tag(self, tag: Tag) -> None:
        name = tag.name.lower()
        if name in _DROPPED_TAGS:
            return
        if name in _PARAGRAPH_TAGS:
            current = self.text()
            if current and not current.endswith("\n\n"):
                self.parts.append("\n\n")
            self._children(tag)
            self.parts.append("\n\n")
        elif name == "br":
            self.parts.append("\n")
        elif name in _BOLD_TAGS:
            self.parts.append("<b>")
            self._children(tag)
            self.parts.append("</b>")
        elif name in _ITALIC_TAGS:
            self.parts.append("<i>")
            self._children(tag)
            self.parts.append("</i>")
        elif name in _HEADING_TAGS:
            self.parts.append(f"<{name}>")
            self._children(tag)
            self.parts.append(f"</{name}>\n\n")
        else:
            self._children(tag)


def simplify_pasted_html(html: str) -> str:
    """Reduce clipboard HTML to the editor's simplified markup.

    Args:
        html: The ``text/html`` clipboard payload.

    Returns:
        Text with paragraph breaks as blank lines and only ``<b>``,
        ``<i>`` and ``<h1>``-``<h3>`` tags kept.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    root = soup.body or soup
    simplifier = _Simplifier()
    for child in root.children:
        simplifier.visit(child)
    return _EXTRA_NEWLINES.sub("\n\n", simplifier.text()).strip()


def clean_clipboard(html_data: Optional[str], text_data: Optional[str]) -> str:
    """Return what should be inserted into the editor for a paste event."""
    if html_data:
        return simplify_pasted_html(html_data)
    return text_data or ""
