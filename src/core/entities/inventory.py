"""Inventory ledger and reference entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MovementType(str, Enum):
    """Direction of a stock movement as recorded by the ledger."""

    IN = "in"
    OUT = "out"


class MovementReason(str, Enum):
    """Business reason attached to a stock movement."""

    PURCHASE = "purchase"
    SALE = "sale"
    USED = "used"
    MANUAL_USED = "manual_used"
    USAGE = "usage"
    EXCHANGE = "exchange"
    MANUAL_OUTBOUND = "manual_outbound"


class StockMovement(BaseModel):
    """
    One directional transfer of units of a product between two locations.

    Either side may be absent when stock enters or leaves the system.
    Read-only to this service; created by the external ledger writer.
    """

    product_id: str
    lot_number: str | None = None
    ubd_date: str | None = None  # ISO date string
    quantity: int = Field(default=0, ge=0)
    movement_type: str = MovementType.IN.value
    movement_reason: str | None = None
    from_location_id: str | None = None
    to_location_id: str | None = None
    created_at: datetime | None = None
    inbound_date: str | None = None


class Product(BaseModel):
    """Catalog product (minimal projection used by the inventory views)."""

    id: str
    cfn: str | None = None  # catalog/form/number model code
    upn: str | None = None  # unique device identifier
    description: str | None = None
    client_id: str | None = None  # owning supplier


class Client(BaseModel):
    """Supplier / vendor owning products."""

    id: str
    company_name: str = ""


class Location(BaseModel):
    """Stock-holding site: warehouse, hospital or supplier."""

    id: str
    location_name: str | None = None
    location_type: str | None = None
    notes: str | None = None

    @property
    def display_name(self) -> str:
        return self.location_name or self.id


class Hospital(BaseModel):
    """Hospital customer; its id doubles as a location id."""

    id: str
    hospital_name: str


# Lookup tables keyed by id
ProductMap = dict[str, Product]
ClientMap = dict[str, Client]
LocationMap = dict[str, Location]
