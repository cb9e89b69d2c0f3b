"""Backend selection for the site store."""

import logging
from enum import Enum

from coresitemaps.store.base import Store
from coresitemaps.store.file import FileStore
from coresitemaps.store.sqlite import SQLiteStore

logger = logging.getLogger(__name__)


class StoreType(Enum):
    """Backends a site can be stored in, by config name."""
    SQLITE = "sqlite"
    FILE = "file"


BACKENDS: dict[StoreType, type[Store]] = {
    StoreType.SQLITE: SQLiteStore,
    StoreType.FILE: FileStore,
}


def create_store(store_type: StoreType | str, path: str) -> Store:
    """Open the store backend named by `store_type` at `path`.

    `path` is the database file for SQLite and the data directory for the
    file backend. Plain config strings ("sqlite", "file") are accepted.

    Raises:
        ValueError: If `store_type` names no known backend.
    """
    try:
        store_type = StoreType(store_type)
    except ValueError:
        raise ValueError(f"Unknown store type: {store_type}") from None

    logger.debug(f"Opening {store_type.value} store at {path}")
    return BACKENDS[store_type](path)
