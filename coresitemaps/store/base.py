"""Abstract base class for storage backends."""

from abc import ABC, abstractmethod

from coresitemaps.models import Post, PostStatus, PostType


# Query "orderby" values mapped to Post attributes (and column names)
ORDERBY_FIELDS = {
    "ID": "id",
    "date": "published_at",
    "modified": "modified_at",
    "title": "title",
}


class Store(ABC):
    """Abstract persistence layer for post types, posts and options."""

    # Post types
    @abstractmethod
    def add_post_type(self, post_type: PostType) -> PostType:
        """Register a post type, replacing any with the same name."""
        pass

    @abstractmethod
    def get_post_type(self, name: str) -> PostType | None:
        """Get a post type by name."""
        pass

    @abstractmethod
    def list_post_types(self, public: bool | None = None) -> dict[str, PostType]:
        """Post types keyed by name, in registration order."""
        pass

    # Posts
    @abstractmethod
    def add_post(self, post: Post) -> Post:
        """Insert a post and return it with its assigned ID.

        Raises:
            ValueError: If the post type is not registered.
        """
        pass

    @abstractmethod
    def get_post(self, post_id: int) -> Post | None:
        """Get a post by ID."""
        pass

    @abstractmethod
    def query_posts(
        self,
        post_types: list[str],
        statuses: list[PostStatus],
        orderby: str = "ID",
        order: str = "ASC",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Post]:
        """Get posts matching the filters, sorted and sliced."""
        pass

    @abstractmethod
    def count_posts(self, post_types: list[str], statuses: list[PostStatus]) -> int:
        """Count posts matching the filters."""
        pass

    # Options
    @abstractmethod
    def get_option(self, key: str, default: str | None = None) -> str | None:
        """Get an option value."""
        pass

    @abstractmethod
    def set_option(self, key: str, value: str) -> None:
        """Set an option value."""
        pass

    # Lifecycle
    @abstractmethod
    def close(self) -> None:
        """Close the store and release resources."""
        pass

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
