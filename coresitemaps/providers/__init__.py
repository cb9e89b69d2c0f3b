"""Sitemap providers.

See coresitemaps/providers/base.py for the SitemapProvider interface.
"""

from coresitemaps.providers.base import SitemapProvider
from coresitemaps.providers.posts import PostsProvider

__all__ = ["SitemapProvider", "PostsProvider"]
