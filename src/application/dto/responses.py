"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.inventory_views import (
    AvailableStock,
    CFNInventoryItem,
    ExchangeInventoryItem,
    InventoryItem,
    InventorySummary,
    LotInfo,
    UBDInventoryItem,
    UBDSummary,
)


# --- Inventory ---


class LocationInventoryResponse(BaseModel):
    """Positional snapshot of one location."""

    location_id: str = Field(..., description="Location ID")
    items: list[InventoryItem] = Field(default_factory=list, description="Inventory rows")
    summary: InventorySummary = Field(default_factory=InventorySummary)
    numeric_sort: bool = Field(default=False, description="Rows in CFN family order")


class CFNInventoryResponse(BaseModel):
    """Per-CFN totals of one location."""

    location_id: str
    items: list[CFNInventoryItem] = Field(default_factory=list)


class AvailableStockResponse(BaseModel):
    """CFNs with stock available for outbound selection."""

    location_id: str
    items: list[AvailableStock] = Field(default_factory=list)


class AvailableLotsResponse(BaseModel):
    """Lots of one CFN still in stock."""

    location_id: str
    cfn: str
    lots: list[LotInfo] = Field(default_factory=list)


class ExchangeInventoryResponse(BaseModel):
    """Exchange rows of one location."""

    location_id: str
    items: list[ExchangeInventoryItem] = Field(default_factory=list)


class UBDInventoryResponse(BaseModel):
    """Expiry rows of one location."""

    location_id: str
    location_name: str
    items: list[UBDInventoryItem] = Field(default_factory=list)
    summary: UBDSummary = Field(default_factory=UBDSummary)


class ExpiryReportResponse(BaseModel):
    """Expiry rows across locations."""

    items: list[UBDInventoryItem] = Field(default_factory=list)
    summary: UBDSummary = Field(default_factory=UBDSummary)
    days_threshold: int = Field(..., description="Upper bound on days until expiry")


class OrderInventoryResponse(BaseModel):
    """Warehouse CFN totals with recent usage."""

    items: list[CFNInventoryItem] = Field(default_factory=list)
    ranking: dict[str, int] = Field(
        default_factory=dict, description="CFN to usage rank, most used first"
    )
    usage_since: datetime | None = Field(
        default=None, description="Start of the usage window"
    )


# --- Health / errors ---


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. LOCATION_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
