"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.core.services import InventoryLookupService

if TYPE_CHECKING:
    from src.core.interfaces import (
        IClientStore,
        ILocationStore,
        IMovementStore,
        IProductStore,
    )


# Singleton service instances
_inventory_lookup_service: InventoryLookupService | None = None


async def get_inventory_lookup_service(
    movement_store: "IMovementStore | None" = None,
    product_store: "IProductStore | None" = None,
    client_store: "IClientStore | None" = None,
    location_store: "ILocationStore | None" = None,
) -> InventoryLookupService:
    """
    Get or create InventoryLookupService instance.

    Creates the SQLite stores for any store not provided.
    Uses singleton pattern when no override is given.

    Args:
        movement_store: Optional movement store override
        product_store: Optional product store override
        client_store: Optional client store override
        location_store: Optional location store override

    Returns:
        Configured InventoryLookupService
    """
    global _inventory_lookup_service

    overrides = (movement_store, product_store, client_store, location_store)
    if _inventory_lookup_service is not None and not any(overrides):
        return _inventory_lookup_service

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage.sqlite import (
        get_client_store,
        get_location_store,
        get_movement_store,
        get_product_store,
    )

    service = InventoryLookupService(
        movement_store=movement_store or await get_movement_store(),
        product_store=product_store or await get_product_store(),
        client_store=client_store or await get_client_store(),
        location_store=location_store or await get_location_store(),
    )

    if not any(overrides):
        _inventory_lookup_service = service

    return service


def reset_services() -> None:
    """Reset all service singletons (for testing)."""
    global _inventory_lookup_service
    _inventory_lookup_service = None
