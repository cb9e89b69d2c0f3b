"""Shared fixtures for sitemap tests."""

import tempfile

import pytest

from coresitemaps.models import Post, PostStatus
from coresitemaps.server import SitemapsContext
from coresitemaps.store import FileStore, SQLiteStore


@pytest.fixture(params=["sqlite", "file"])
def store(request):
    """A fresh store of each backend type."""
    with tempfile.TemporaryDirectory() as tmpdir:
        if request.param == "sqlite":
            store = SQLiteStore(f"{tmpdir}/site.db")
        else:
            store = FileStore(tmpdir)
        store.set_option("home", "https://example.com")
        yield store
        store.close()


@pytest.fixture
def context(store):
    """A sitemaps context on the store."""
    return SitemapsContext(store)


@pytest.fixture
def add_post(store):
    """Add a post to the store and return it."""
    def _add(post_type="post", slug=None, status=PostStatus.PUBLISH, **kwargs):
        post = Post(
            id=None,
            post_type=post_type,
            slug=slug or f"{post_type}-item",
            status=status,
            **kwargs,
        )
        return store.add_post(post)
    return _add
