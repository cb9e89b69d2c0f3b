"""Tests for the sitemaps context, server and public functions."""

import pytest

from coresitemaps import hooks
from coresitemaps.functions import get_max_urls, get_server, get_sitemaps, register_sitemap
from coresitemaps.providers import PostsProvider, SitemapProvider
from coresitemaps.server import MAX_URLS, SitemapsContext, SitemapsServer


class DummyProvider(SitemapProvider):
    name = "dummy"
    object_type = "dummy"

    def get_url_list(self, page_num, subtype=""):
        return []

    def get_max_num_pages(self, subtype=""):
        return 0


class TestGetServer:

    def test_enabled_by_default(self, context):
        server = context.get_server()
        assert isinstance(server, SitemapsServer)
        assert context.get_server() is server

    def test_registers_posts_provider(self, context):
        sitemaps = context.get_server().registry.get_sitemaps()
        assert list(sitemaps) == ["posts"]
        assert isinstance(sitemaps["posts"], PostsProvider)

    def test_disabled_for_private_site(self, context, store):
        store.set_option("blog_public", "0")
        assert context.get_server() is None

    def test_enabled_filter(self, context):
        context.hooks.add_filter(hooks.IS_ENABLED, lambda enabled: False)
        assert context.get_server() is None

    def test_enabled_filter_overrides_private_site(self, context, store):
        store.set_option("blog_public", "0")
        context.hooks.add_filter(hooks.IS_ENABLED, lambda enabled: True)
        assert context.get_server() is not None

    def test_init_fires_once(self, context):
        seen = []
        context.hooks.add_action(hooks.INIT, lambda server: seen.append(server))

        server = context.get_server()
        context.get_server()

        assert seen == [server]

    def test_init_can_register_providers(self, context):
        def register(server):
            server.registry.add_sitemap("dummy", DummyProvider(server.context))

        context.hooks.add_action(hooks.INIT, register)

        assert list(context.get_server().registry.get_sitemaps()) == ["posts", "dummy"]

    def test_init_cannot_replace_posts(self, context):
        context.hooks.add_action(
            hooks.INIT,
            lambda server: server.registry.add_sitemap("posts", DummyProvider(server.context)),
        )
        assert isinstance(context.get_server().registry.get_provider("posts"), PostsProvider)

    def test_flag_rechecked_per_call(self, context, store):
        server = context.get_server()
        assert server is not None

        store.set_option("blog_public", "0")
        assert context.get_server() is None

        store.set_option("blog_public", "1")
        assert context.get_server() is server

    def test_no_init_while_disabled(self, context, store):
        seen = []
        context.hooks.add_action(hooks.INIT, lambda server: seen.append(server))
        store.set_option("blog_public", "0")

        context.get_server()
        assert seen == []

    def test_shutdown_rebuilds(self, context):
        seen = []
        context.hooks.add_action(hooks.INIT, lambda server: seen.append(server))

        first = context.get_server()
        context.shutdown()
        second = context.get_server()

        assert first is not second
        assert seen == [first, second]


class TestMaxUrls:

    def test_default(self, context):
        assert context.get_max_urls() == MAX_URLS == 2000

    def test_context_setting(self, store):
        assert SitemapsContext(store, max_urls=100).get_max_urls("post") == 100

    def test_filter_keyed_by_type(self, context):
        context.hooks.add_filter(
            hooks.MAX_URLS,
            lambda value, object_type: 10 if object_type == "post" else value,
        )
        assert context.get_max_urls("post") == 10
        assert context.get_max_urls("user") == 2000
        assert get_max_urls(context, "post") == 10


class TestFunctions:

    def test_get_server(self, context):
        assert get_server(context) is context.get_server()

    def test_get_sitemaps(self, context):
        assert list(get_sitemaps(context)) == ["posts"]

    def test_register_sitemap(self, context):
        provider = DummyProvider(context)

        assert register_sitemap(context, "dummy", provider)
        assert get_sitemaps(context)["dummy"] is provider
        assert not register_sitemap(context, "dummy", DummyProvider(context))
        assert get_sitemaps(context)["dummy"] is provider

    def test_disabled(self, context, store):
        store.set_option("blog_public", "0")

        assert get_server(context) is None
        assert get_sitemaps(context) == {}
        assert not register_sitemap(context, "dummy", DummyProvider(context))


def test_context_manager_closes_store(store):
    closed = []
    original_close = store.close

    def close():
        closed.append(True)
        original_close()

    store.close = close

    with SitemapsContext(store) as context:
        assert context.get_server() is not None

    assert closed == [True]
    assert context._server is None


@pytest.mark.parametrize("value,expected", [("1", True), ("0", False), ("", False)])
def test_blog_public_values(context, store, value, expected):
    store.set_option("blog_public", value)
    assert context.is_enabled() is expected
