"""
Ingestion subsystem for blogflow.

Reads exported blog posts (the JSON the storefront's GraphQL API
returns for ``blog_posts``) into `BlogPost` records for the rest of
the pipeline.
"""

from .post_loader import load_posts, post_from_record  # noqa: F401
