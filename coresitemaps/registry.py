"""Registry of sitemap providers."""

import logging

from coresitemaps import hooks
from coresitemaps.hooks import HookRegistry
from coresitemaps.providers.base import SitemapProvider

logger = logging.getLogger(__name__)


class SitemapRegistry:
    """Add-only mapping of provider name to provider.

    Registration never overwrites: a second provider under an existing
    name is rejected and the first one stays in place.
    """

    def __init__(self, hook_registry: HookRegistry | None = None) -> None:
        self._providers: dict[str, SitemapProvider] = {}
        self._hooks = hook_registry or HookRegistry()

    def add_sitemap(self, name: str, provider: SitemapProvider) -> bool:
        """Register a provider under a unique name.

        The provider passes through `sitemaps_add_provider` first; a filter
        returning anything other than a provider vetoes the registration.

        Returns:
            True if the provider was added, False otherwise.
        """
        if not isinstance(name, str) or not name:
            logger.warning(f"Rejected sitemap provider with invalid name: {name!r}")
            return False

        if name in self._providers:
            logger.warning(f"Sitemap provider already registered: {name}")
            return False

        provider = self._hooks.apply_filters(hooks.ADD_PROVIDER, provider, name)
        if not isinstance(provider, SitemapProvider):
            logger.warning(f"Rejected sitemap provider {name}: not a SitemapProvider")
            return False

        self._providers[name] = provider
        logger.info(f"Registered sitemap provider: {name}")
        return True

    def get_sitemaps(self) -> dict[str, SitemapProvider]:
        """All registered providers, in registration order."""
        return dict(self._providers)

    def get_provider(self, name: str) -> SitemapProvider | None:
        """Get a provider by name."""
        return self._providers.get(name)
