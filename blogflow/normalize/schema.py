# normalize/schema.py
from dataclasses import dataclass, asdict, field
from typing import List, Optional

POST_HEADERS = [
    "id", "title", "slug", "excerpt", "content", "featured_image",
    "author_name", "category", "tags", "meta_title", "meta_description",
    "og_image", "published", "published_at", "created_at", "updated_at",
    "views", "read_time_minutes",
]

@dataclass
class BlogPost:
    id: Optional[str]
    title: str
    slug: str
    content: str
    excerpt: str = ""
    featured_image: Optional[str] = None
    author_name: str = ""
    category: Optional[str] = None    # category slug
    tags: List[str] = field(default_factory=list)
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: Optional[str] = None
    published: bool = False
    published_at: Optional[str] = None  # ISO8601
    created_at: Optional[str] = None    # ISO8601
    updated_at: Optional[str] = None    # ISO8601
    views: int = 0
    read_time_minutes: int = 1

    def to_csv_row(self) -> list:
        d = asdict(self)
        d["tags"] = ";".join(self.tags) if self.tags else ""
        return [d[h] for h in POST_HEADERS]
