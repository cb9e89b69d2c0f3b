"""Tests for the sitemap provider registry."""

from coresitemaps.hooks import ADD_PROVIDER, HookRegistry
from coresitemaps.providers import SitemapProvider
from coresitemaps.registry import SitemapRegistry


class StaticProvider(SitemapProvider):
    """Provider serving a fixed list of URLs on a single page."""

    name = "static"
    object_type = "static"

    def __init__(self, context, urls=None):
        super().__init__(context)
        self.urls = urls or []

    def get_url_list(self, page_num, subtype=""):
        return [{"loc": url} for url in self.urls] if page_num == 1 else []

    def get_max_num_pages(self, subtype=""):
        return 1


def test_add_and_get(context):
    registry = SitemapRegistry()
    provider = StaticProvider(context)

    assert registry.add_sitemap("static", provider)
    assert registry.get_sitemaps() == {"static": provider}
    assert registry.get_provider("static") is provider
    assert registry.get_provider("missing") is None


def test_duplicate_name_keeps_original(context):
    registry = SitemapRegistry()
    original = StaticProvider(context)
    replacement = StaticProvider(context)

    assert registry.add_sitemap("static", original)
    assert not registry.add_sitemap("static", replacement)
    assert registry.get_provider("static") is original


def test_invalid_arguments_rejected(context):
    registry = SitemapRegistry()

    assert not registry.add_sitemap("", StaticProvider(context))
    assert not registry.add_sitemap(None, StaticProvider(context))
    assert not registry.add_sitemap("thing", object())
    assert not registry.add_sitemap("thing", None)
    assert registry.get_sitemaps() == {}


def test_insertion_order(context):
    registry = SitemapRegistry()
    for name in ["zeta", "alpha", "mid"]:
        registry.add_sitemap(name, StaticProvider(context))

    assert list(registry.get_sitemaps()) == ["zeta", "alpha", "mid"]


def test_get_sitemaps_returns_copy(context):
    registry = SitemapRegistry()
    registry.add_sitemap("static", StaticProvider(context))

    registry.get_sitemaps().clear()
    assert "static" in registry.get_sitemaps()


def test_add_provider_filter_can_veto(context):
    hooks = HookRegistry()
    hooks.add_filter(ADD_PROVIDER, lambda provider, name: None if name == "blocked" else provider)
    registry = SitemapRegistry(hooks)

    assert not registry.add_sitemap("blocked", StaticProvider(context))
    assert registry.add_sitemap("allowed", StaticProvider(context))
    assert list(registry.get_sitemaps()) == ["allowed"]


def test_add_provider_filter_can_swap(context):
    swapped = StaticProvider(context, urls=["https://example.com/swapped"])
    hooks = HookRegistry()
    hooks.add_filter(ADD_PROVIDER, lambda provider, name: swapped)
    registry = SitemapRegistry(hooks)

    assert registry.add_sitemap("static", StaticProvider(context))
    assert registry.get_provider("static") is swapped
