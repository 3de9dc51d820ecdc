"""
Blog content normalizer.

Blog posts are stored as loosely structured HTML: some were written in
the admin editor with proper paragraphs and headings, others were
pasted as plain text or as a run of inline markup.  The post template
styles block-level elements only, so before a post body is rendered
every piece of root-level content must sit inside a block element.

`normalize_content` guarantees that without touching content that is
already structured.  Parsing uses BeautifulSoup with the lenient
`html.parser` builder; each call builds and discards its own tree.
"""

from __future__ import annotations

import html
import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag

logger = logging.getLogger(__name__)

# Tags whose presence anywhere means the author already structured the post.
BLOCK_TAGS = ("p", "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "blockquote", "div")

# Tags that end a run of loose content.
BOUNDARY_TAGS = frozenset(BLOCK_TAGS) | {"li"}

_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def _is_boundary(node: object) -> bool:
    """Return True if a root-level node is, or contains, a block element."""
    if not isinstance(node, Tag):
        return False
    if node.name in BOUNDARY_TAGS:
        return True
    return node.find(list(BOUNDARY_TAGS)) is not None


def _has_text(node: object) -> bool:
    if isinstance(node, Tag):
        return bool(node.get_text().strip())
    # Comments, doctypes and other preformatted strings carry no content.
    return type(node) is NavigableString and bool(node.strip())


def _wrap_plain_text(content: str) -> str:
    paragraphs = [p for p in _PARAGRAPH_BREAK.split(content) if p.strip()]
    if len(paragraphs) > 1:
        return "".join(f"<p>{p.strip()}</p>" for p in paragraphs)
    return f"<p>{content.strip()}</p>"


def _wrap_loose_runs(soup: BeautifulSoup) -> str:
    """Wrap each run of loose root-level content in its own paragraph.

    The result is assembled in a fresh tree; block elements are moved
    across as they are and every run that carries text gets a `<p>`.
    """
    out = BeautifulSoup("", "html.parser")
    run: List[object] = []

    def flush() -> None:
        # Leading whitespace stays outside the paragraph.
        start = 0
        while start < len(run) and not _has_text(run[start]):
            start += 1
        for node in run[:start]:
            out.append(node)
        if start < len(run):
            paragraph = out.new_tag("p")
            for node in run[start:]:
                paragraph.append(node)
            out.append(paragraph)
        run.clear()

    for node in list(soup.contents):
        node.extract()
        if _is_boundary(node):
            flush()
            out.append(node)
        else:
            run.append(node)
    flush()
    return str(out)


def normalize_content(content: Optional[str], *, preserve_blocks: bool = True) -> str:
    """Make sure a post body's root-level content is block structured.

    Args:
        content: Stored post HTML.  May be empty, plain text, inline
            markup or already structured HTML.
        preserve_blocks: When True (the default) content that already
            contains a block element is returned unchanged.  When False
            loose runs between existing blocks are wrapped as well.

    Returns:
        HTML whose root-level children are block elements, or an empty
        string for empty input.  This function never raises; markup the
        parser rejects is escaped and wrapped whole in a single paragraph.
    """
    if not content or not content.strip():
        return ""
    try:
        soup = BeautifulSoup(content, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Parser rejected post content, wrapping it escaped: %s", exc)
        return f"<p>{html.escape(content.strip(), quote=False)}</p>"

    if preserve_blocks and soup.find(list(BLOCK_TAGS)) is not None:
        return content

    # Plain text only: no markup characters survive into the wrapper.
    if soup.get_text() == content and str(soup) == content:
        return _wrap_plain_text(content)

    normalized = _wrap_loose_runs(soup)
    logger.debug("Wrapped loose inline content (%d -> %d chars)", len(content), len(normalized))
    return normalized
