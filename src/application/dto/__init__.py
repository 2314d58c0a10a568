"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
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

__all__ = [
    # Requests
    "InventoryQueryRequest",
    "ExpiryReportRequest",
    # Responses
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
]
