"""Configuration management for Core Sitemaps."""

import json
from dataclasses import dataclass
from pathlib import Path

from coresitemaps.hooks import HookRegistry
from coresitemaps.server import MAX_URLS, SitemapsContext
from coresitemaps.store import Store, StoreType, create_store


DEFAULT_CONFIG_PATH = "~/.core-sitemaps/config.json"
DEFAULT_DATA_PATH = "~/.core-sitemaps/site.db"


@dataclass
class Config:
    """Application configuration."""

    store_type: StoreType = StoreType.SQLITE
    store_path: str = DEFAULT_DATA_PATH
    max_urls: int = MAX_URLS

    @classmethod
    def load(cls, path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load config from a JSON file, or return defaults if not found."""
        config_path = Path(path).expanduser()

        if not config_path.exists():
            return cls()

        try:
            data = json.loads(config_path.read_text())
            return cls(
                store_type=StoreType(data.get("store_type", "sqlite")),
                store_path=data.get("store_path", DEFAULT_DATA_PATH),
                max_urls=int(data.get("max_urls", MAX_URLS)),
            )
        except (json.JSONDecodeError, KeyError, ValueError, TypeError):
            return cls()

    def save(self, path: str = DEFAULT_CONFIG_PATH) -> None:
        """Save config to a JSON file."""
        config_path = Path(path).expanduser()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "store_type": self.store_type.value,
            "store_path": self.store_path,
            "max_urls": self.max_urls,
        }
        config_path.write_text(json.dumps(data, indent=2))

    def create_store(self) -> Store:
        """Create a store instance from this config."""
        return create_store(self.store_type, self.store_path)

    def create_context(self, hook_registry: HookRegistry | None = None) -> SitemapsContext:
        """Create a sitemaps context backed by the configured store."""
        return SitemapsContext(self.create_store(), hook_registry, max_urls=self.max_urls)
