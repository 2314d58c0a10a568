"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteClientStore,
    SQLiteLocationStore,
    SQLiteMovementStore,
    SQLiteProductStore,
    close_pool,
    get_connection,
    get_pool,
)

__all__ = [
    # SQLite stores
    "SQLiteMovementStore",
    "SQLiteProductStore",
    "SQLiteClientStore",
    "SQLiteLocationStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
]
