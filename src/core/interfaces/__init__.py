"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.inventory_store import (
    IClientStore,
    ILocationStore,
    IMovementStore,
    IProductStore,
)

__all__ = [
    "IMovementStore",
    "IProductStore",
    "IClientStore",
    "ILocationStore",
]
