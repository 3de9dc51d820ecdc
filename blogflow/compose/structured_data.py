"""
SEO structured data for blog posts.

Builds the schema.org ``BlogPosting`` object that the post page embeds
as JSON-LD, and the canonical post URL used for ``og:url``.
"""

from __future__ import annotations

from typing import Dict

from ..normalize.schema import BlogPost


def post_url(slug: str, base_url: str) -> str:
    """Return the public URL of a post."""
    return f"{base_url.rstrip('/')}/blog/{slug}"


def build_structured_data(post: BlogPost, *, publisher_name: str, logo_url: str) -> Dict[str, object]:
    """Build the JSON-LD ``BlogPosting`` mapping for a post.

    Args:
        post: The post to describe.
        publisher_name: Organization name shown as publisher.
        logo_url: URL of the publisher logo.

    Returns:
        A dict ready for `json.dumps`.  The description falls back from
        the excerpt to the meta description, and the image from the
        Open Graph image to the featured image.
    """
    return {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "headline": post.title,
        "description": post.excerpt or post.meta_description,
        "image": post.og_image or post.featured_image,
        "datePublished": post.published_at,
        "dateModified": post.updated_at,
        "author": {
            "@type": "Person",
            "name": post.author_name,
        },
        "publisher": {
            "@type": "Organization",
            "name": publisher_name,
            "logo": {
                "@type": "ImageObject",
                "url": logo_url,
            },
        },
    }
