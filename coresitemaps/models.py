"""Core data models for Core Sitemaps."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class PostStatus(Enum):
    """Publication status of a post."""
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    FUTURE = "future"    # Scheduled for later
    TRASH = "trash"


@dataclass
class PostType:
    """A registered content type (post, page, product, ...)."""
    name: str
    label: str = ""
    public: bool = True
    hierarchical: bool = False

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.name.replace("_", " ").title()


@dataclass
class Post:
    """A content object stored by the host.

    IDs are assigned by the store and grow monotonically, so ordering
    by ID is insertion order.
    """
    id: int | None
    post_type: str
    slug: str
    title: str = ""
    status: PostStatus = PostStatus.PUBLISH
    published_at: datetime = field(default_factory=datetime.utcnow)
    modified_at: datetime = field(default_factory=datetime.utcnow)
    parent_id: int | None = None


# Built-in types every store starts with
DEFAULT_POST_TYPES = [
    PostType(name="post", label="Posts"),
    PostType(name="page", label="Pages", hierarchical=True),
    PostType(name="attachment", label="Media"),
    PostType(name="revision", label="Revisions", public=False),
    PostType(name="nav_menu_item", label="Navigation Menu Items", public=False),
]

DEFAULT_OPTIONS = {
    "blog_public": "1",
    "show_on_front": "posts",   # "posts" or "page"
    "home": "http://localhost",
    "permalink_structure": "",
}
