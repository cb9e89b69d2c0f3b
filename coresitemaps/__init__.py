"""Core Sitemaps - sitemap providers for site content."""

from coresitemaps.hooks import HookRegistry
from coresitemaps.models import Post, PostStatus, PostType
from coresitemaps.providers import PostsProvider, SitemapProvider
from coresitemaps.registry import SitemapRegistry
from coresitemaps.server import MAX_URLS, SitemapsContext, SitemapsServer
from coresitemaps.functions import get_max_urls, get_server, get_sitemaps, register_sitemap

__all__ = [
    "HookRegistry",
    "Post",
    "PostStatus",
    "PostType",
    "SitemapProvider",
    "PostsProvider",
    "SitemapRegistry",
    "MAX_URLS",
    "SitemapsContext",
    "SitemapsServer",
    "get_server",
    "get_sitemaps",
    "register_sitemap",
    "get_max_urls",
]
