"""
Post preparation stage.

Takes posts as they were exported and produces the display-ready
version: the body goes through `normalize_content`, a missing slug is
generated from the title and the reading time is recomputed from the
stored body.  Input posts are never modified; new `BlogPost` objects
are returned.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

from ..normalize.block_wrap import normalize_content
from ..normalize.schema import BlogPost
from .slug import estimate_read_time, generate_slug

logger = logging.getLogger(__name__)


def prepare_post(post: BlogPost, *, words_per_minute: int = 200, preserve_blocks: bool = True) -> BlogPost:
    """Return a display-ready copy of a single post."""
    slug = post.slug or generate_slug(post.title)
    if not post.slug:
        logger.debug("Generated slug %r for %r", slug, post.title)
    return replace(
        post,
        slug=slug,
        content=normalize_content(post.content, preserve_blocks=preserve_blocks),
        read_time_minutes=estimate_read_time(post.content, words_per_minute),
    )


def prepare_posts(
    posts: Iterable[BlogPost],
    *,
    words_per_minute: int = 200,
    preserve_blocks: bool = True,
) -> List[BlogPost]:
    """Prepare every post in order.

    Args:
        posts: Posts as loaded from the export.
        words_per_minute: Reading speed used for the time estimate.
        preserve_blocks: Passed through to `normalize_content`.

    Returns:
        A list of prepared posts.
    """
    prepared: List[BlogPost] = []
    rewritten = 0
    for post in posts:
        ready = prepare_post(post, words_per_minute=words_per_minute, preserve_blocks=preserve_blocks)
        if ready.content != post.content:
            rewritten += 1
        prepared.append(ready)
    logger.info("Prepared %d posts (%d bodies rewritten)", len(prepared), rewritten)
    return prepared
