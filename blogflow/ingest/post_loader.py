"""
Blog post export loader.

Posts live in the storefront's hosted database and are fetched through
its GraphQL API.  For offline processing the posts are exported to a
JSON file, either as a bare list of post objects or in the shape of
the API response (``{"blog_posts": [...]}``).  This module reads such
an export into `BlogPost` instances.

Records that cannot be used are logged and skipped rather than failing
the whole batch; only an export whose top-level shape is wrong raises.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Dict, List, Optional

from ..normalize.schema import BlogPost

logger = logging.getLogger(__name__)

_POST_FIELDS = {f.name for f in fields(BlogPost)}


def _as_tags(value: object) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if not isinstance(value, (list, tuple)):
        return [str(value)]
    return [str(tag).strip() for tag in value if str(tag).strip()]


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def _as_int(value: object, default: int) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def post_from_record(record: Dict[str, object]) -> Optional[BlogPost]:
    """Convert one exported record into a `BlogPost`.

    Args:
        record: A post object from the export.

    Returns:
        The post, or `None` if the record has no title.  Unknown keys
        are ignored and missing optional fields get their defaults.
    """
    title = str(record.get("title") or "").strip()
    if not title:
        return None
    values = {k: v for k, v in record.items() if k in _POST_FIELDS}
    values["title"] = title
    values["id"] = str(record["id"]) if record.get("id") is not None else None
    values["slug"] = str(record.get("slug") or "")
    values["content"] = str(record.get("content") or "")
    values["excerpt"] = str(record.get("excerpt") or "")
    values["author_name"] = str(record.get("author_name") or "")
    values["tags"] = _as_tags(record.get("tags"))
    values["published"] = _as_bool(record.get("published", False))
    values["views"] = _as_int(record.get("views"), 0)
    values["read_time_minutes"] = _as_int(record.get("read_time_minutes"), 1)
    return BlogPost(**values)


def load_posts(path: str) -> List[BlogPost]:
    """Load blog posts from a JSON export.

    Args:
        path: Path to the export file.

    Returns:
        A list of posts in export order.

    Raises:
        ValueError: If the export is neither a list of posts nor an
            object with a ``blog_posts`` list.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("blog_posts")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of posts or a 'blog_posts' list")
    posts: List[BlogPost] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            logger.warning("Skipping record %d in %s: not an object", index, path)
            continue
        post = post_from_record(record)
        if post is None:
            logger.warning("Skipping record %d in %s: missing title", index, path)
            continue
        posts.append(post)
    logger.info("Loaded %d posts from %s", len(posts), path)
    return posts
