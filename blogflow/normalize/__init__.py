"""
Normalization subsystem for blogflow.

This package turns stored blog post bodies into display-ready HTML.
`normalize_content` wraps loose root-level text and inline markup in
paragraphs while leaving structured posts alone, and
`simplify_pasted_html` reduces rich clipboard content to the editor's
small tag set.  The `BlogPost` dataclass in `schema.py` defines the
post record and the CSV column order used by the writers.
"""

from .schema import BlogPost, POST_HEADERS  # noqa: F401
from .block_wrap import normalize_content  # noqa: F401
from .paste import clean_clipboard, simplify_pasted_html  # noqa: F401
from .write_csv import write_posts_csv, write_posts_json  # noqa: F401
