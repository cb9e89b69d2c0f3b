"""SQLite storage backend."""

import sqlite3
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from coresitemaps.models import DEFAULT_POST_TYPES, Post, PostStatus, PostType
from coresitemaps.store.base import ORDERBY_FIELDS, Store


SCHEMA = """
CREATE TABLE IF NOT EXISTS post_types (
    name TEXT PRIMARY KEY,
    label TEXT NOT NULL,
    public INTEGER DEFAULT 1,
    hierarchical INTEGER DEFAULT 0,
    position INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    post_type TEXT NOT NULL REFERENCES post_types(name),
    slug TEXT NOT NULL,
    title TEXT NOT NULL DEFAULT '',
    status TEXT NOT NULL DEFAULT 'publish',
    published_at TEXT NOT NULL,
    modified_at TEXT NOT NULL,
    parent_id INTEGER
);

CREATE INDEX IF NOT EXISTS idx_posts_type_status ON posts(post_type, status);

CREATE TABLE IF NOT EXISTS options (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""


def _datetime_to_str(dt: datetime) -> str:
    """Convert datetime to ISO format string."""
    return dt.isoformat()


def _str_to_datetime(s: str) -> datetime:
    """Parse ISO format string to datetime."""
    return datetime.fromisoformat(s)


def _row_to_post_type(row: sqlite3.Row) -> PostType:
    """Convert a database row to a PostType."""
    return PostType(
        name=row["name"],
        label=row["label"],
        public=bool(row["public"]),
        hierarchical=bool(row["hierarchical"]),
    )


def _row_to_post(row: sqlite3.Row) -> Post:
    """Convert a database row to a Post."""
    return Post(
        id=row["id"],
        post_type=row["post_type"],
        slug=row["slug"],
        title=row["title"],
        status=PostStatus(row["status"]),
        published_at=_str_to_datetime(row["published_at"]),
        modified_at=_str_to_datetime(row["modified_at"]),
        parent_id=row["parent_id"],
    )


def _filter_clause(post_types: list[str], statuses: list[PostStatus]) -> tuple[str, list]:
    """Build the WHERE clause shared by query and count."""
    conditions = []
    params: list = []

    # An empty filter list matches nothing
    conditions.append(f"post_type IN ({', '.join('?' * len(post_types)) or 'NULL'})")
    params.extend(post_types)

    conditions.append(f"status IN ({', '.join('?' * len(statuses)) or 'NULL'})")
    params.extend(s.value for s in statuses)

    return "WHERE " + " AND ".join(conditions), params


class SQLiteStore(Store):
    """SQLite-backed store. Good for production single-site."""

    def __init__(self, db_path: str):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.db_path)
        self._conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if not exist and seed the built-in post types."""
        self._conn.executescript(SCHEMA)
        self._conn.commit()

        cursor = self._conn.execute("SELECT COUNT(*) FROM post_types")
        if cursor.fetchone()[0] == 0:
            for post_type in DEFAULT_POST_TYPES:
                self.add_post_type(post_type)

    # Post types

    def add_post_type(self, post_type: PostType) -> PostType:
        """Register a post type, replacing any with the same name."""
        existing = self._conn.execute(
            "SELECT position FROM post_types WHERE name = ?", (post_type.name,)
        ).fetchone()
        if existing:
            position = existing["position"]
        else:
            cursor = self._conn.execute("SELECT COALESCE(MAX(position), 0) + 1 FROM post_types")
            position = cursor.fetchone()[0]

        self._conn.execute(
            """
            INSERT INTO post_types (name, label, public, hierarchical, position)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(name) DO UPDATE SET
                label = excluded.label,
                public = excluded.public,
                hierarchical = excluded.hierarchical
            """,
            (
                post_type.name,
                post_type.label,
                int(post_type.public),
                int(post_type.hierarchical),
                position,
            ),
        )
        self._conn.commit()
        return post_type

    def get_post_type(self, name: str) -> PostType | None:
        """Get a post type by name."""
        cursor = self._conn.execute("SELECT * FROM post_types WHERE name = ?", (name,))
        row = cursor.fetchone()
        return _row_to_post_type(row) if row else None

    def list_post_types(self, public: bool | None = None) -> dict[str, PostType]:
        """Post types keyed by name, in registration order."""
        if public is None:
            cursor = self._conn.execute("SELECT * FROM post_types ORDER BY position")
        else:
            cursor = self._conn.execute(
                "SELECT * FROM post_types WHERE public = ? ORDER BY position",
                (int(public),),
            )
        return {row["name"]: _row_to_post_type(row) for row in cursor.fetchall()}

    # Posts

    def add_post(self, post: Post) -> Post:
        """Insert a post and return it with its assigned ID."""
        if self.get_post_type(post.post_type) is None:
            raise ValueError(f"Unknown post type: {post.post_type}")

        cursor = self._conn.execute(
            """
            INSERT INTO posts (post_type, slug, title, status, published_at, modified_at, parent_id)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                post.post_type,
                post.slug,
                post.title,
                post.status.value,
                _datetime_to_str(post.published_at),
                _datetime_to_str(post.modified_at),
                post.parent_id,
            ),
        )
        self._conn.commit()

        return replace(post, id=cursor.lastrowid)

    def get_post(self, post_id: int) -> Post | None:
        """Get a post by ID."""
        cursor = self._conn.execute("SELECT * FROM posts WHERE id = ?", (post_id,))
        row = cursor.fetchone()
        return _row_to_post(row) if row else None

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
        where, params = _filter_clause(post_types, statuses)
        column = ORDERBY_FIELDS.get(orderby, "id")
        direction = "DESC" if order.upper() == "DESC" else "ASC"

        query = f"""
            SELECT * FROM posts
            {where}
            ORDER BY {column} {direction}, id {direction}
            LIMIT ? OFFSET ?
        """
        params.extend([limit if limit is not None else -1, offset])

        cursor = self._conn.execute(query, params)
        return [_row_to_post(row) for row in cursor.fetchall()]

    def count_posts(self, post_types: list[str], statuses: list[PostStatus]) -> int:
        """Count posts matching the filters."""
        where, params = _filter_clause(post_types, statuses)
        cursor = self._conn.execute(f"SELECT COUNT(*) FROM posts {where}", params)
        return cursor.fetchone()[0]

    # Options

    def get_option(self, key: str, default: str | None = None) -> str | None:
        """Get an option value."""
        cursor = self._conn.execute("SELECT value FROM options WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row["value"] if row else default

    def set_option(self, key: str, value: str) -> None:
        """Set an option value."""
        self._conn.execute(
            """
            INSERT INTO options (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, value),
        )
        self._conn.commit()

    # Lifecycle

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
