"""
Command line interface for blogflow.

This module exposes subcommands for the blog publishing helpers:
normalizing a post body for display, simplifying pasted clipboard
HTML, generating slugs, preparing a whole post export and printing the
JSON-LD structured data of a post.  The CLI is intentionally
lightweight and delegates the work to the `normalize`, `ingest` and
`compose` packages.

Settings such as the site URL and reading speed come from a YAML file
(`blogflow/config.yaml` by default) layered over built-in defaults.
"""

from __future__ import annotations

import argparse
import copy
import json
import logging
import os
import sys
from typing import Any, Dict, List

import yaml  # type: ignore

from .compose.prepare import prepare_posts
from .compose.slug import generate_slug
from .compose.structured_data import build_structured_data
from .ingest.post_loader import load_posts
from .normalize.block_wrap import normalize_content
from .normalize.paste import simplify_pasted_html
from .normalize.write_csv import write_posts_csv, write_posts_json

logger = logging.getLogger("blogflow.cli")

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")

DEFAULT_CONFIG: Dict[str, Any] = {
    "site": {
        "base_url": "https://stickershuttle.com",
        "publisher_name": "Sticker Shuttle",
        "logo_url": "",
    },
    "reading": {"words_per_minute": 200},
    "normalize": {"preserve_blocks": True},
}


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _merge_dict(base_value, value)
        else:
            merged[key] = value
    return merged


def _load_config(config_path: str) -> Dict[str, Any]:
    """Read a YAML config file and layer it over the defaults."""
    if not os.path.exists(config_path):
        logger.warning("Config file %s not found; using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(config_path, "r", encoding="utf-8") as f:
        user_config = yaml.safe_load(f)
    if user_config is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(user_config, dict):
        raise ValueError(f"{config_path}: top level must be a mapping")
    return _merge_dict(copy.deepcopy(DEFAULT_CONFIG), user_config)


def _read_input(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _preserve_blocks(args: argparse.Namespace, cfg: Dict[str, Any]) -> bool:
    if args.rewrap:
        return False
    return bool(cfg["normalize"].get("preserve_blocks", True))


def cmd_normalize(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    """Normalize a single post body and print it."""
    content = _read_input(args.file)
    print(normalize_content(content, preserve_blocks=_preserve_blocks(args, cfg)))
    return 0


def cmd_paste(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    """Print the simplified form of clipboard HTML."""
    print(simplify_pasted_html(_read_input(args.file)))
    return 0


def cmd_slug(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    print(generate_slug(args.title))
    return 0


def cmd_posts(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    """Prepare every post in an export and write CSV or JSON."""
    posts = load_posts(args.export)
    prepared = prepare_posts(
        posts,
        words_per_minute=int(cfg["reading"].get("words_per_minute", 200)),
        preserve_blocks=_preserve_blocks(args, cfg),
    )
    if args.format == "json":
        count = write_posts_json(prepared, args.out)
    else:
        count = write_posts_csv(prepared, args.out)
    logger.info("Wrote %d prepared posts to %s", count, args.out)
    return 0


def cmd_seo(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    """Print the JSON-LD structured data for one post."""
    posts = load_posts(args.export)
    post = next((p for p in posts if (p.slug or generate_slug(p.title)) == args.slug), None)
    if post is None:
        logger.error("No post with slug %s in %s", args.slug, args.export)
        return 1
    site = cfg["site"]
    data = build_structured_data(
        post,
        publisher_name=site.get("publisher_name", ""),
        logo_url=site.get("logo_url", ""),
    )
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogflow", description="Blog content tools")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Normalize
    norm_cmd = subparsers.add_parser("normalize", help="Normalize a post body for display")
    norm_cmd.add_argument("--file", help="Path to the post body (default: stdin)")
    norm_cmd.add_argument(
        "--rewrap",
        action="store_true",
        help="Also wrap loose text between existing block elements",
    )
    norm_cmd.set_defaults(func=cmd_normalize)

    # Paste
    paste_cmd = subparsers.add_parser("paste", help="Simplify clipboard HTML")
    paste_cmd.add_argument("--file", help="Path to the clipboard HTML (default: stdin)")
    paste_cmd.set_defaults(func=cmd_paste)

    # Slug
    slug_cmd = subparsers.add_parser("slug", help="Generate a URL slug from a title")
    slug_cmd.add_argument("title", help="Post title")
    slug_cmd.set_defaults(func=cmd_slug)

    # Posts
    posts_cmd = subparsers.add_parser("posts", help="Prepare an exported list of posts")
    posts_cmd.add_argument("--export", required=True, help="Path to the JSON post export")
    posts_cmd.add_argument("--out", default="posts.csv", help="Output path")
    posts_cmd.add_argument("--format", choices=["csv", "json"], default="csv", help="Output format")
    posts_cmd.add_argument(
        "--rewrap",
        action="store_true",
        help="Also wrap loose text between existing block elements",
    )
    posts_cmd.set_defaults(func=cmd_posts)

    # SEO
    seo_cmd = subparsers.add_parser("seo", help="Print JSON-LD structured data for a post")
    seo_cmd.add_argument("--export", required=True, help="Path to the JSON post export")
    seo_cmd.add_argument("--slug", required=True, help="Slug of the post")
    seo_cmd.set_defaults(func=cmd_seo)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    cfg = _load_config(args.config)
    return args.func(args, cfg)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
