"""
blogflow package for the Sticker Shuttle blog.

This package contains submodules for loading exported blog posts,
normalizing their HTML bodies for display and producing the metadata
the post page needs.  Each submodule implements one step of the flow:

1. **ingest** – Read a JSON export of posts (the shape returned by the
   storefront's GraphQL API) into `BlogPost` records.
2. **normalize** – Guarantee that a post body's root-level content is
   made of block elements, wrapping loose text and inline markup in
   paragraphs.  Also simplifies rich clipboard HTML pasted into the
   editor.
3. **compose** – Generate slugs, estimate reading time, prepare posts
   for display and build schema.org structured data.
4. **cli** – Command line entry point wiring together the above
   components.
"""

from .normalize.block_wrap import normalize_content  # noqa: F401

__version__ = "0.1.0"
