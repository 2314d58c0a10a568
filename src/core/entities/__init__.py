"""Core domain entities."""

from src.core.entities.inventory import (
    Client,
    ClientMap,
    Hospital,
    Location,
    LocationMap,
    MovementReason,
    MovementType,
    Product,
    ProductMap,
    StockMovement,
)
from src.core.entities.inventory_views import (
    AvailableStock,
    CFNInventoryItem,
    ExchangeInventoryItem,
    InventoryCalculationOptions,
    InventoryItem,
    InventorySummary,
    LotInfo,
    SortBy,
    UBDInventoryItem,
    UBDSummary,
)

__all__ = [
    # Ledger and reference entities
    "StockMovement",
    "MovementType",
    "MovementReason",
    "Product",
    "Client",
    "Location",
    "Hospital",
    "ProductMap",
    "ClientMap",
    "LocationMap",
    # Derived views
    "InventoryItem",
    "InventoryCalculationOptions",
    "SortBy",
    "CFNInventoryItem",
    "AvailableStock",
    "LotInfo",
    "UBDInventoryItem",
    "ExchangeInventoryItem",
    "InventorySummary",
    "UBDSummary",
]
