"""
Composition helpers for blogflow.

Utilities the blog editor and post page rely on once a body has been
written:

* `slug` – URL slug generation and reading-time estimates.
* `prepare` – Produces display-ready posts (normalized body, slug,
  reading time).
* `structured_data` – schema.org ``BlogPosting`` JSON-LD and post URLs.
"""

from .slug import estimate_read_time, generate_slug  # noqa: F401
from .prepare import prepare_post, prepare_posts  # noqa: F401
from .structured_data import build_structured_data, post_url  # noqa: F401
