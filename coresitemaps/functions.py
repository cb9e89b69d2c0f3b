"""Public functions for working with sitemaps.

Each takes the SitemapsContext explicitly and degrades to an empty
result when sitemaps are disabled.
"""

from coresitemaps.providers.base import SitemapProvider
from coresitemaps.server import SitemapsContext, SitemapsServer


def get_server(context: SitemapsContext) -> SitemapsServer | None:
    """The sitemaps server, or None if sitemaps are disabled."""
    return context.get_server()


def get_sitemaps(context: SitemapsContext) -> dict[str, SitemapProvider]:
    """Registered sitemap providers keyed by name."""
    server = context.get_server()

    if not server:
        return {}

    return server.registry.get_sitemaps()


def register_sitemap(context: SitemapsContext, name: str, provider: SitemapProvider) -> bool:
    """Register a new sitemap provider.

    Returns:
        True if the provider was added. False if sitemaps are disabled,
        the name is taken, or the provider is invalid.
    """
    server = context.get_server()

    if not server:
        return False

    return server.registry.add_sitemap(name, provider)


def get_max_urls(context: SitemapsContext, object_type: str = "") -> int:
    """Maximum number of URLs on one sitemap page."""
    return context.get_max_urls(object_type)
