"""JSON file-based storage backend."""

import json
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any

from coresitemaps.models import DEFAULT_POST_TYPES, Post, PostStatus, PostType
from coresitemaps.store.base import ORDERBY_FIELDS, Store


def _datetime_to_str(dt: datetime) -> str:
    """Convert datetime to ISO format string."""
    return dt.isoformat()


def _str_to_datetime(s: str) -> datetime:
    """Parse ISO format string to datetime."""
    return datetime.fromisoformat(s)


def _post_type_to_dict(post_type: PostType) -> dict[str, Any]:
    """Serialize a PostType to a dictionary."""
    return {
        "name": post_type.name,
        "label": post_type.label,
        "public": post_type.public,
        "hierarchical": post_type.hierarchical,
    }


def _dict_to_post_type(d: dict[str, Any]) -> PostType:
    """Deserialize a dictionary to a PostType."""
    return PostType(
        name=d["name"],
        label=d.get("label", ""),
        public=d.get("public", True),
        hierarchical=d.get("hierarchical", False),
    )


def _post_to_dict(post: Post) -> dict[str, Any]:
    """Serialize a Post to a dictionary."""
    return {
        "id": post.id,
        "post_type": post.post_type,
        "slug": post.slug,
        "title": post.title,
        "status": post.status.value,
        "published_at": _datetime_to_str(post.published_at),
        "modified_at": _datetime_to_str(post.modified_at),
        "parent_id": post.parent_id,
    }


def _dict_to_post(d: dict[str, Any]) -> Post:
    """Deserialize a dictionary to a Post."""
    return Post(
        id=d["id"],
        post_type=d["post_type"],
        slug=d["slug"],
        title=d.get("title", ""),
        status=PostStatus(d.get("status", "publish")),
        published_at=_str_to_datetime(d["published_at"]),
        modified_at=_str_to_datetime(d["modified_at"]),
        parent_id=d.get("parent_id"),
    )


class FileStore(Store):
    """JSON file-backed store. Simple, inspectable, good for testing."""

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir).expanduser()
        self.post_types_file = self.data_dir / "post_types.json"
        self.posts_file = self.data_dir / "posts.json"
        self.options_file = self.data_dir / "options.json"

        self._post_types: dict[str, PostType] = {}
        self._posts: dict[int, Post] = {}
        self._options: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        """Load data from JSON files."""
        if self.post_types_file.exists():
            data = json.loads(self.post_types_file.read_text())
            self._post_types = {d["name"]: _dict_to_post_type(d) for d in data}
        else:
            self._post_types = {pt.name: replace(pt) for pt in DEFAULT_POST_TYPES}

        if self.posts_file.exists():
            data = json.loads(self.posts_file.read_text())
            self._posts = {d["id"]: _dict_to_post(d) for d in data}

        if self.options_file.exists():
            self._options = json.loads(self.options_file.read_text())

    def _save(self) -> None:
        """Persist data to JSON files."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

        post_types_data = [_post_type_to_dict(pt) for pt in self._post_types.values()]
        self.post_types_file.write_text(json.dumps(post_types_data, indent=2))

        posts_data = [_post_to_dict(p) for p in self._posts.values()]
        self.posts_file.write_text(json.dumps(posts_data, indent=2))

        self.options_file.write_text(json.dumps(self._options, indent=2))

    # Post types

    def add_post_type(self, post_type: PostType) -> PostType:
        """Register a post type, replacing any with the same name."""
        self._post_types[post_type.name] = replace(post_type)
        self._save()
        return post_type

    def get_post_type(self, name: str) -> PostType | None:
        """Get a post type by name."""
        post_type = self._post_types.get(name)
        return replace(post_type) if post_type else None

    def list_post_types(self, public: bool | None = None) -> dict[str, PostType]:
        """Post types keyed by name, in registration order."""
        return {
            name: replace(pt)
            for name, pt in self._post_types.items()
            if public is None or pt.public == public
        }

    # Posts

    def add_post(self, post: Post) -> Post:
        """Insert a post and return it with its assigned ID."""
        if post.post_type not in self._post_types:
            raise ValueError(f"Unknown post type: {post.post_type}")

        stored = replace(post, id=max(self._posts, default=0) + 1)
        self._posts[stored.id] = stored
        self._save()
        return replace(stored)

    def get_post(self, post_id: int) -> Post | None:
        """Get a post by ID."""
        post = self._posts.get(post_id)
        return replace(post) if post else None

    def _matching(self, post_types: list[str], statuses: list[PostStatus]) -> list[Post]:
        return [
            p for p in self._posts.values()
            if p.post_type in post_types and p.status in statuses
        ]

    def query_posts(
        self,
        post_types: list[str],
        statuses: list[PostStatus],
        orderby: str = "ID",
        order: str = "ASC",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Post]:
        """Get posts matching the filters, sorted and sliced."""
        attr = ORDERBY_FIELDS.get(orderby, "id")
        posts = sorted(
            self._matching(post_types, statuses),
            key=lambda p: (getattr(p, attr), p.id),
            reverse=order.upper() == "DESC",
        )

        end = None if limit is None else offset + limit
        return [replace(p) for p in posts[offset:end]]

    def count_posts(self, post_types: list[str], statuses: list[PostStatus]) -> int:
        """Count posts matching the filters."""
        return len(self._matching(post_types, statuses))

    # Options

    def get_option(self, key: str, default: str | None = None) -> str | None:
        """Get an option value."""
        return self._options.get(key, default)

    def set_option(self, key: str, value: str) -> None:
        """Set an option value."""
        self._options[key] = value
        self._save()

    # Lifecycle

    def close(self) -> None:
        """Save any pending changes."""
        self._save()
