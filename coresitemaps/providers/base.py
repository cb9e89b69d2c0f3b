"""Base interface for sitemap providers.

A sitemap provider enumerates one object type (posts, users, terms, ...)
and hands out its URLs one page at a time. Providers may split their
object type into subtypes (e.g. post types); each subtype gets its own
series of sitemap pages.

To create a new provider:
1. Subclass SitemapProvider and set `name` and `object_type`
2. Implement get_url_list() and get_max_num_pages()
3. Override get_object_subtypes() if the object type has subtypes
4. Register it from a `sitemaps_init` action:

    def register(server):
        server.registry.add_sitemap("things", ThingsProvider(server.context))

    hooks.add_action("sitemaps_init", register)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from coresitemaps.server import SitemapsContext


class SitemapProvider(ABC):
    """Interface every sitemap data source implements."""

    # Unique provider name, used in sitemap URLs
    name: str = ""
    # Object type tag, used to look up the max URLs per page
    object_type: str = ""

    def __init__(self, context: "SitemapsContext"):
        self.context = context

    @abstractmethod
    def get_url_list(self, page_num: int, subtype: str = "") -> list[dict[str, Any]]:
        """Get the sitemap entries for one page.

        Args:
            page_num: 1-based page number.
            subtype: Object subtype name, if the provider has subtypes.

        Returns:
            Entries in sitemap order; each has at least a "loc" URL.
        """
        pass

    @abstractmethod
    def get_max_num_pages(self, subtype: str = "") -> int:
        """Number of sitemap pages for a subtype."""
        pass

    def get_object_subtypes(self) -> dict[str, Any]:
        """Subtypes keyed by name. Empty when the object type has none."""
        return {}

    def get_sitemap_type_data(self) -> list[dict[str, Any]]:
        """Page counts per subtype, as {"name": subtype, "pages": n} records."""
        subtypes = self.get_object_subtypes()

        if not subtypes:
            return [{"name": None, "pages": self.get_max_num_pages()}]

        return [
            {"name": subtype, "pages": self.get_max_num_pages(subtype)}
            for subtype in subtypes
        ]

    def get_sitemap_entries(self) -> list[dict[str, Any]]:
        """Index entries, one per sitemap page of every subtype."""
        entries = []
        for type_data in self.get_sitemap_type_data():
            for page in range(1, type_data["pages"] + 1):
                entries.append({"loc": self.get_sitemap_url(type_data["name"], page)})
        return entries

    def get_sitemap_url(self, subtype: str | None, page: int) -> str:
        """URL of one sitemap page."""
        parts = [self.name]
        if subtype:
            parts.append(subtype)
        parts.append(str(page))
        return self.context.site.home_url(f"sitemap-{'-'.join(parts)}.xml")
