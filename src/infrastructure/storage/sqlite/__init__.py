"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
)
from src.infrastructure.storage.sqlite.inventory_store import (
    SQLiteClientStore,
    SQLiteLocationStore,
    SQLiteMovementStore,
    SQLiteProductStore,
)

# Singleton instances
_movement_store: SQLiteMovementStore | None = None
_product_store: SQLiteProductStore | None = None
_client_store: SQLiteClientStore | None = None
_location_store: SQLiteLocationStore | None = None


async def get_movement_store() -> SQLiteMovementStore:
    """Get singleton movement store instance."""
    global _movement_store
    if _movement_store is None:
        _movement_store = SQLiteMovementStore()
    return _movement_store


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_client_store() -> SQLiteClientStore:
    """Get singleton client store instance."""
    global _client_store
    if _client_store is None:
        _client_store = SQLiteClientStore()
    return _client_store


async def get_location_store() -> SQLiteLocationStore:
    """Get singleton location store instance."""
    global _location_store
    if _location_store is None:
        _location_store = SQLiteLocationStore()
    return _location_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    # Store classes
    "SQLiteMovementStore",
    "SQLiteProductStore",
    "SQLiteClientStore",
    "SQLiteLocationStore",
    # Factory functions
    "get_movement_store",
    "get_product_store",
    "get_client_store",
    "get_location_store",
]
