"""
Dependency injection container for FastAPI.

Provides service instances to route handlers. Tests swap these out with
`app.dependency_overrides`.
"""

from functools import lru_cache

from src.application.services import get_inventory_lookup_service
from src.application.use_cases import (
    GetAvailableLotsUseCase,
    GetExpiryReportUseCase,
    GetLocationInventoryUseCase,
    GetOrderInventoryUseCase,
)
from src.config import InventorySettings, Settings, get_settings
from src.core.services import InventoryLookupService


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_inventory_settings() -> InventorySettings:
    return get_settings().inventory


# Service dependencies
async def get_lookups() -> InventoryLookupService:
    """Get the inventory lookup service."""
    return await get_inventory_lookup_service()


# Use case dependencies
def get_location_inventory_use_case() -> GetLocationInventoryUseCase:
    """Get location inventory use case."""
    return GetLocationInventoryUseCase()


def get_available_lots_use_case() -> GetAvailableLotsUseCase:
    """Get available lots use case."""
    return GetAvailableLotsUseCase()


def get_expiry_report_use_case() -> GetExpiryReportUseCase:
    """Get expiry report use case."""
    return GetExpiryReportUseCase()


def get_order_inventory_use_case() -> GetOrderInventoryUseCase:
    """Get order inventory use case."""
    return GetOrderInventoryUseCase()
