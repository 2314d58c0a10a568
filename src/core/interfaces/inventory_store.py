"""Abstract interfaces for the tabular store backing the inventory views."""

from abc import ABC, abstractmethod
from datetime import datetime

from src.core.entities.inventory import (
    Client,
    Hospital,
    Location,
    Product,
    StockMovement,
)


class IMovementStore(ABC):
    """Read access to the append-only stock movement ledger."""

    @abstractmethod
    async def list_by_location(self, location_id: str) -> list[StockMovement]:
        """Movements with the location on either side, newest first."""
        pass

    @abstractmethod
    async def list_all(self) -> list[StockMovement]:
        """Every movement in the system, newest first."""
        pass

    @abstractmethod
    async def list_usage_since(self, since: datetime) -> list[StockMovement]:
        """Outbound usage movements created at or after `since`, newest first."""
        pass


class IProductStore(ABC):
    """Read access to the product catalog."""

    @abstractmethod
    async def list_products(
        self, product_ids: list[str] | None = None
    ) -> list[Product]:
        """Products with the given ids, or every product when ids is None."""
        pass


class IClientStore(ABC):
    """Read access to suppliers."""

    @abstractmethod
    async def list_clients(self, client_ids: list[str]) -> list[Client]:
        """Clients with the given ids."""
        pass


class ILocationStore(ABC):
    """Read access to locations and hospitals."""

    @abstractmethod
    async def list_locations(self, location_ids: list[str]) -> list[Location]:
        """Locations with the given ids."""
        pass

    @abstractmethod
    async def list_hospitals(self) -> list[Hospital]:
        """Every hospital, ordered by name."""
        pass
