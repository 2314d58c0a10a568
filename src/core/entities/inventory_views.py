"""Derived inventory view models produced by the calculator."""

from enum import Enum

from pydantic import BaseModel


class SortBy(str, Enum):
    """Sort orders supported by the positional snapshot."""

    CFN = "cfn"
    LOT = "lot"
    UBD = "ubd"
    QUANTITY = "quantity"


class InventoryCalculationOptions(BaseModel):
    """Filtering and ordering of the positional snapshot."""

    include_zero_quantity: bool = False
    sort_by: SortBy = SortBy.CFN
    filter_positive_only: bool = True


class InventoryItem(BaseModel):
    """Quantity on hand for one (cfn, lot_number, ubd_date) triple at a location."""

    cfn: str
    lot_number: str = ""
    ubd_date: str = ""
    quantity: int = 0
    client_name: str = ""
    product_id: str | None = None
    client_id: str | None = None
    description: str | None = None

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.cfn, self.lot_number, self.ubd_date)


class CFNInventoryItem(BaseModel):
    """Total quantity per CFN, lots and expiry dates collapsed."""

    cfn: str
    client_name: str
    total_quantity: int = 0
    product_id: str
    client_id: str | None = None
    six_months_usage: int = 0


class AvailableStock(BaseModel):
    """Positive CFN total available for outbound selection."""

    cfn: str
    total_quantity: int


class LotInfo(BaseModel):
    """Positive quantity of one lot of a CFN."""

    lot_number: str
    ubd_date: str
    available_quantity: int


class UBDInventoryItem(BaseModel):
    """Positional row annotated with its location and remaining shelf life."""

    cfn: str
    lot_number: str
    ubd_date: str
    quantity: int
    location_name: str
    days_until_expiry: int


class ExchangeInventoryItem(InventoryItem):
    """Positional row with a stable synthetic row id."""

    id: str
    product_id: str


class InventorySummary(BaseModel):
    """Headline figures for a positional snapshot."""

    total_items: int = 0
    total_quantity: int = 0
    unique_cfns: int = 0
    unique_clients: int = 0


class UBDSummary(BaseModel):
    """Headline figures for an expiry report, bucketed by urgency."""

    total_items: int = 0
    total_quantity: int = 0
    unique_locations: int = 0
    unique_cfns: int = 0
    critical: int = 0
    warning: int = 0
    normal: int = 0
