"""Application use cases."""

from src.application.use_cases.available_lots import GetAvailableLotsUseCase
from src.application.use_cases.expiry_report import ExpiryReportResult, GetExpiryReportUseCase
from src.application.use_cases.location_inventory import (
    GetLocationInventoryUseCase,
    LocationInventoryResult,
)
from src.application.use_cases.order_inventory import (
    GetOrderInventoryUseCase,
    OrderInventoryResult,
)

__all__ = [
    "GetLocationInventoryUseCase",
    "LocationInventoryResult",
    "GetAvailableLotsUseCase",
    "GetExpiryReportUseCase",
    "ExpiryReportResult",
    "GetOrderInventoryUseCase",
    "OrderInventoryResult",
]
