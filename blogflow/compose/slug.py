"""
Slug and reading-time helpers used when a post is saved.
"""

from __future__ import annotations

import math
import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def generate_slug(title: str) -> str:
    """Build a URL slug from a post title.

    Lowercases the title, drops anything that is not a letter, digit,
    whitespace or hyphen, turns whitespace runs into single hyphens and
    strips hyphens from both ends.
    """
    slug = _DISALLOWED.sub("", (title or "").lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def estimate_read_time(content: str, words_per_minute: int = 200) -> int:
    """Estimate the reading time of a post body in whole minutes.

    Words are counted by splitting the raw body on single spaces, so
    markup is counted along with the text.  The result is never below
    one minute.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    words = len((content or "").split(" "))
    return max(1, math.ceil(words / words_per_minute))
