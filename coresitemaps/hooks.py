"""Named extension points (filters and actions).

Filters transform a value as it passes a seam; actions only observe.
Callbacks run in ascending priority, and in registration order within
the same priority.

Example:
    hooks = HookRegistry()
    hooks.add_filter("sitemaps_max_urls", lambda value, object_type: 500)
    hooks.apply_filters("sitemaps_max_urls", 2000, "post")  # -> 500
"""

import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

# Hook names used by the sitemap layer
IS_ENABLED = "sitemaps_is_enabled"
INIT = "sitemaps_init"
MAX_URLS = "sitemaps_max_urls"
ADD_PROVIDER = "sitemaps_add_provider"
POST_TYPES = "sitemaps_post_types"
POSTS_PRE_URL_LIST = "sitemaps_posts_pre_url_list"
POSTS_ENTRY = "sitemaps_posts_entry"
POSTS_URL_LIST = "sitemaps_posts_url_list"
POSTS_PRE_MAX_NUM_PAGES = "sitemaps_posts_pre_max_num_pages"
POSTS_QUERY_ARGS = "sitemaps_posts_query_args"


class HookRegistry:
    """Registry of callbacks keyed by hook name."""

    def __init__(self) -> None:
        self._callbacks: dict[str, dict[int, list[Callable[..., Any]]]] = defaultdict(dict)

    def add_filter(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register a callback on a hook."""
        self._callbacks[hook].setdefault(priority, []).append(callback)
        logger.debug(f"Added callback to {hook} at priority {priority}")

    # Actions share storage with filters; only the dispatch differs
    add_action = add_filter

    def remove_filter(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> bool:
        """Remove a callback. Returns True if it was registered."""
        callbacks = self._callbacks.get(hook, {}).get(priority)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            del self._callbacks[hook][priority]
        return True

    remove_action = remove_filter

    def has_filter(self, hook: str) -> bool:
        """Whether any callback is registered on the hook."""
        return any(self._callbacks.get(hook, {}).values())

    def _ordered(self, hook: str) -> list[Callable[..., Any]]:
        by_priority = self._callbacks.get(hook, {})
        return [cb for priority in sorted(by_priority) for cb in list(by_priority[priority])]

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Chain a value through every callback on the hook."""
        for callback in self._ordered(hook):
            value = callback(value, *args)
        return value

    def first_result(self, hook: str, *args: Any) -> Any:
        """Return the first non-None callback result, or None.

        Used for short-circuit seams: any callback returning a value
        replaces the computation that would otherwise run.
        """
        for callback in self._ordered(hook):
            result = callback(*args)
            if result is not None:
                return result
        return None

    def do_action(self, hook: str, *args: Any) -> None:
        """Invoke every callback on the hook, discarding results."""
        for callback in self._ordered(hook):
            callback(*args)
