"""Sitemap provider for posts, pages and custom post types."""

import logging
from typing import Any

from coresitemaps import hooks
from coresitemaps.models import PostType
from coresitemaps.providers.base import SitemapProvider
from coresitemaps.query import PostQuery

logger = logging.getLogger(__name__)


class PostsProvider(SitemapProvider):
    """Builds sitemaps for the "post" object type, one per public post type."""

    name = "posts"
    object_type = "post"

    def get_object_subtypes(self) -> dict[str, PostType]:
        """Public post types, minus attachments.

        Filtered through `sitemaps_post_types`.
        """
        post_types = self.context.store.list_post_types(public=True)
        post_types.pop("attachment", None)

        return self.context.hooks.apply_filters(hooks.POST_TYPES, post_types)

    def get_url_list(self, page_num: int, subtype: str = "") -> list[dict[str, Any]]:
        """Sitemap entries for one page of a post type."""
        if subtype not in self.get_object_subtypes():
            return []

        hook_registry = self.context.hooks

        url_list = hook_registry.first_result(hooks.POSTS_PRE_URL_LIST, subtype, page_num)
        if url_list is not None:
            logger.debug(f"URL list for {subtype} page {page_num} supplied by a filter")
            return url_list

        args = self.get_posts_query_args(subtype)
        args["paged"] = page_num

        query = PostQuery(self.context.store, args)

        url_list = []

        # The home page lists latest posts, so it has no page of its own
        if (
            subtype == "page"
            and page_num == 1
            and self.context.site.get_option("show_on_front") == "posts"
        ):
            url_list.append({"loc": self.context.site.home_url()})

        for post in query.get_posts():
            entry = {"loc": self.context.site.get_permalink(post)}
            entry = hook_registry.apply_filters(hooks.POSTS_ENTRY, entry, post, subtype)
            url_list.append(entry)

        return hook_registry.apply_filters(hooks.POSTS_URL_LIST, url_list, subtype, page_num)

    def get_max_num_pages(self, subtype: str = "") -> int:
        """Number of sitemap pages for a post type."""
        if not subtype:
            return 0

        if subtype not in self.get_object_subtypes():
            return 0

        max_num_pages = self.context.hooks.first_result(hooks.POSTS_PRE_MAX_NUM_PAGES, subtype)
        if max_num_pages is not None:
            return max_num_pages

        args = self.get_posts_query_args(subtype)
        args["paged"] = 1
        args["fields"] = "ids"
        args["no_found_rows"] = False

        query = PostQuery(self.context.store, args)

        return query.max_num_pages if query.max_num_pages is not None else 1

    def get_posts_query_args(self, subtype: str) -> dict[str, Any]:
        """Query arguments for a post type's sitemap.

        Filtered through `sitemaps_posts_query_args`.
        """
        args = {
            "orderby": "ID",
            "order": "ASC",
            "post_type": subtype,
            "posts_per_page": self.context.get_max_urls(self.object_type),
            "post_status": ["publish"],
            "no_found_rows": True,
            "update_post_term_cache": False,
            "update_post_meta_cache": False,
        }
        return self.context.hooks.apply_filters(hooks.POSTS_QUERY_ARGS, args, subtype)
