"""Store module - persistence layer for Core Sitemaps."""

from coresitemaps.store.base import Store
from coresitemaps.store.sqlite import SQLiteStore
from coresitemaps.store.file import FileStore
from coresitemaps.store.factory import StoreType, create_store

__all__ = ["Store", "SQLiteStore", "FileStore", "StoreType", "create_store"]
