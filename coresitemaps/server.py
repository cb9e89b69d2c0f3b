"""Sitemaps server and the context that owns it.

The context holds everything a sitemap request needs (store, hooks,
site) and builds the server lazily. There is no module-level instance:
callers construct a context and pass it around.

Example:
    with SitemapsContext(SQLiteStore("site.db")) as context:
        server = context.get_server()
        if server:
            for name, provider in server.registry.get_sitemaps().items():
                ...
"""

import logging

from coresitemaps import hooks
from coresitemaps.hooks import HookRegistry
from coresitemaps.providers import PostsProvider
from coresitemaps.registry import SitemapRegistry
from coresitemaps.site import Site
from coresitemaps.store import Store

logger = logging.getLogger(__name__)

# Maximum number of URLs on one sitemap page
MAX_URLS = 2000


def _option_enabled(value: str | None) -> bool:
    """Interpret a stored option as a flag ("0" and "" are off)."""
    return value not in (None, "", "0")


class SitemapsServer:
    """Holds the provider registry for one context."""

    def __init__(self, context: "SitemapsContext"):
        self.context = context
        self.registry = SitemapRegistry(context.hooks)

    def init(self) -> None:
        """Register the built-in providers."""
        self.registry.add_sitemap("posts", PostsProvider(self.context))


class SitemapsContext:
    """Explicit runtime for the sitemap layer."""

    def __init__(
        self,
        store: Store,
        hook_registry: HookRegistry | None = None,
        max_urls: int = MAX_URLS,
    ):
        self.store = store
        self.hooks = hook_registry or HookRegistry()
        self.site = Site(store)
        self.max_urls = max_urls
        self._server: SitemapsServer | None = None

    def is_enabled(self) -> bool:
        """Whether sitemaps are on. Public sites default to on.

        Filtered through `sitemaps_is_enabled`.
        """
        enabled = _option_enabled(self.site.get_option("blog_public"))
        return bool(self.hooks.apply_filters(hooks.IS_ENABLED, enabled))

    def get_server(self) -> SitemapsServer | None:
        """The server, bootstrapping it on first use.

        Returns None while sitemaps are disabled. The flag is checked on
        every call; disabling keeps the built server around, and enabling
        again returns it without re-running `sitemaps_init`.
        """
        if not self.is_enabled():
            return None

        if self._server is None:
            server = SitemapsServer(self)
            server.init()
            self._server = server
            logger.info("Sitemaps server initialized")

            # Additional providers register here
            self.hooks.do_action(hooks.INIT, server)

        return self._server

    def get_max_urls(self, object_type: str = "") -> int:
        """Maximum URLs per sitemap page for an object type.

        Filtered through `sitemaps_max_urls`.
        """
        return self.hooks.apply_filters(hooks.MAX_URLS, self.max_urls, object_type)

    def shutdown(self) -> None:
        """Drop the server. The next get_server() bootstraps a new one."""
        if self._server is not None:
            logger.info("Sitemaps server shut down")
        self._server = None

    def close(self) -> None:
        """Shut down and close the store."""
        self.shutdown()
        self.store.close()

    def __enter__(self) -> "SitemapsContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
