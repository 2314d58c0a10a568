"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.dto.requests import ExpiryReportRequest, InventoryQueryRequest
from src.application.dto.responses import (
    AvailableLotsResponse,
    AvailableStockResponse,
    CFNInventoryResponse,
    ErrorResponse,
    ExchangeInventoryResponse,
    ExpiryReportResponse,
    HealthResponse,
    LocationInventoryResponse,
    OrderInventoryResponse,
    ProviderHealthResponse,
    UBDInventoryResponse,
)
from src.application.services import get_inventory_lookup_service, reset_services
from src.application.use_cases import (
    GetAvailableLotsUseCase,
    GetExpiryReportUseCase,
    GetLocationInventoryUseCase,
    GetOrderInventoryUseCase,
)
from src.application.view_models import InventoryViewModel

__all__ = [
    # Request DTOs
    "InventoryQueryRequest",
    "ExpiryReportRequest",
    # Response DTOs
    "LocationInventoryResponse",
    "CFNInventoryResponse",
    "AvailableStockResponse",
    "AvailableLotsResponse",
    "ExchangeInventoryResponse",
    "UBDInventoryResponse",
    "ExpiryReportResponse",
    "OrderInventoryResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
    # Use Cases
    "GetLocationInventoryUseCase",
    "GetAvailableLotsUseCase",
    "GetExpiryReportUseCase",
    "GetOrderInventoryUseCase",
    # View model
    "InventoryViewModel",
    # Service factories
    "get_inventory_lookup_service",
    "reset_services",
]
