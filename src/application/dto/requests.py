"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import BaseModel, Field

from src.core.entities.inventory_views import InventoryCalculationOptions, SortBy


class InventoryQueryRequest(BaseModel):
    """Query parameters of the positional snapshot endpoints."""

    sort_by: SortBy = Field(default=SortBy.CFN, description="Row ordering")
    include_zero: bool = Field(
        default=False,
        description="Keep rows whose quantity nets to zero (ignored when positive_only)",
    )
    positive_only: bool = Field(default=True, description="Keep only rows with stock on hand")
    numeric_sort: bool = Field(
        default=False,
        description="Order by CFN family and size instead of plain text",
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive match on CFN, lot number or client",
        examples=["DHC", "LOT42"],
    )

    def to_options(self) -> InventoryCalculationOptions:
        return InventoryCalculationOptions(
            include_zero_quantity=self.include_zero,
            sort_by=self.sort_by,
            filter_positive_only=self.positive_only,
        )


class ExpiryReportRequest(BaseModel):
    """Query parameters of the expiry report."""

    days_threshold: int | None = Field(
        default=None,
        ge=0,
        description="Keep rows expiring within this many days (default from settings)",
    )
    limit: int = Field(default=0, ge=0, description="Maximum rows, 0 for no limit")
    include_all_locations: bool = Field(
        default=True, description="Include every hospital, not only the warehouse"
    )
    search: str | None = Field(
        default=None, description="Case-insensitive match on CFN, lot number or location"
    )
