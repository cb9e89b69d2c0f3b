"""Paginated post queries against a store.

A PostQuery takes a mapping of query arguments, so the arguments can be
assembled and filtered as plain data before the query runs.

Supported arguments:
    post_type      str or list of str
    post_status    list of status names (default ["publish"])
    orderby        "ID", "date", "modified" or "title" (default "date")
    order          "ASC" or "DESC" (default "DESC")
    posts_per_page int, -1 for no limit (default 10)
    paged          1-based page number (default 1)
    fields         "all" or "ids" (default "all")
    no_found_rows  skip counting the total matches (default False)

Unknown arguments are ignored.
"""

import logging
import math
from typing import Any

from coresitemaps.models import Post, PostStatus
from coresitemaps.store import Store

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


class PostQuery:
    """Runs a post query on construction and exposes its results."""

    def __init__(self, store: Store, args: dict[str, Any]):
        self.store = store
        self.args = dict(args)
        self.posts: list[Post] | list[int] = []
        self.found_posts: int | None = None
        self.max_num_pages: int | None = None
        self._execute()

    def _execute(self) -> None:
        post_types = [str(t) for t in _as_list(self.args.get("post_type"))]
        statuses = []
        for status in _as_list(self.args.get("post_status", ["publish"])):
            try:
                statuses.append(PostStatus(status))
            except ValueError:
                logger.debug(f"Ignoring unknown post status: {status}")

        per_page = int(self.args.get("posts_per_page", 10))
        page = max(int(self.args.get("paged", 1) or 1), 1)
        limit = per_page if per_page > 0 else None
        offset = (page - 1) * per_page if limit else 0

        posts = self.store.query_posts(
            post_types,
            statuses,
            orderby=self.args.get("orderby", "date"),
            order=self.args.get("order", "DESC"),
            limit=limit,
            offset=offset,
        )
        logger.debug(
            f"Query {post_types} page {page} ({per_page} per page) returned {len(posts)} posts"
        )

        if self.args.get("fields") == "ids":
            self.posts = [p.id for p in posts]
        else:
            self.posts = posts

        if not self.args.get("no_found_rows", False):
            self.found_posts = self.store.count_posts(post_types, statuses)
            if limit:
                self.max_num_pages = math.ceil(self.found_posts / limit)
            else:
                self.max_num_pages = 1 if self.found_posts else 0

    def get_posts(self) -> list[Post] | list[int]:
        """The posts (or IDs) on the requested page."""
        return self.posts
