"""Site-level URL resolution: home URL and permalinks."""

from coresitemaps.models import DEFAULT_OPTIONS, Post
from coresitemaps.store import Store


class Site:
    """Read-side view of the site's options and URLs."""

    def __init__(self, store: Store):
        self.store = store

    def get_option(self, key: str) -> str | None:
        """Get an option, falling back to the built-in default."""
        return self.store.get_option(key, DEFAULT_OPTIONS.get(key))

    def home_url(self, path: str = "") -> str:
        """The site root URL, optionally with a path appended.

        The bare root has no trailing slash.
        """
        home = (self.get_option("home") or "").rstrip("/")
        if not path:
            return home
        return f"{home}/{path.lstrip('/')}"

    def get_permalink(self, post: Post) -> str:
        """Canonical URL of a post.

        Without a permalink structure, URLs are query-string based.
        """
        structure = self.get_option("permalink_structure") or ""

        if not structure:
            if post.post_type == "post":
                return self.home_url(f"?p={post.id}")
            if post.post_type == "page":
                return self.home_url(f"?page_id={post.id}")
            return self.home_url(f"?post_type={post.post_type}&p={post.id}")

        if post.post_type == "post":
            path = (
                structure
                .replace("%post_id%", str(post.id))
                .replace("%postname%", post.slug)
                .replace("%year%", f"{post.published_at.year:04d}")
                .replace("%monthnum%", f"{post.published_at.month:02d}")
                .replace("%day%", f"{post.published_at.day:02d}")
            )
            return self.home_url(path)

        if post.post_type == "page":
            return self.home_url("/".join(self._page_path(post)) + "/")

        return self.home_url(f"{post.post_type}/{post.slug}/")

    def _page_path(self, page: Post) -> list[str]:
        """Slugs from the top-level ancestor down to the page."""
        slugs = [page.slug]
        seen = {page.id}
        parent_id = page.parent_id
        while parent_id and parent_id not in seen:
            parent = self.store.get_post(parent_id)
            if parent is None:
                break
            slugs.append(parent.slug)
            seen.add(parent_id)
            parent_id = parent.parent_id
        return list(reversed(slugs))
