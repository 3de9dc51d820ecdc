"""
Writers for prepared blog posts.

Provides helpers to write a list of `BlogPost` instances to a CSV file
using the column order defined by `POST_HEADERS`, or to a JSON file
as a list of objects.  Existing files are overwritten.  Unicode is
written in UTF‑8 encoding.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import asdict
from typing import Iterable

from .schema import POST_HEADERS, BlogPost

logger = logging.getLogger(__name__)


def write_posts_csv(posts: Iterable[BlogPost], path: str) -> int:
    """Write blog posts to a CSV file.

    Args:
        posts: Iterable of `BlogPost` objects.
        path: Destination path for the CSV.

    Returns:
        The number of rows written, excluding the header.
    """
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(POST_HEADERS)
        for post in posts:
            writer.writerow(post.to_csv_row())
            count += 1
    logger.debug("Wrote %d posts to %s", count, path)
    return count


def write_posts_json(posts: Iterable[BlogPost], path: str) -> int:
    """Write blog posts to a JSON file as a list of objects."""
    records = [asdict(post) for post in posts]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    logger.debug("Wrote %d posts to %s", len(records), path)
    return len(records)
