"""
Inventory Lookup Service.

Builds the id-keyed lookup tables and fetches the movement ledger the
calculator folds. Store failures degrade to an empty result with a logged
warning so a single unreachable table never blanks a whole screen.
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterable
from datetime import datetime
from typing import TypeVar

from src.config import get_logger
from src.core.entities.inventory import (
    ClientMap,
    Hospital,
    LocationMap,
    ProductMap,
    StockMovement,
)
from src.core.interfaces.inventory_store import (
    IClientStore,
    ILocationStore,
    IMovementStore,
    IProductStore,
)

logger = get_logger(__name__)

T = TypeVar("T")


async def fetch_or_default(operation: str, coro: Awaitable[T], default: T) -> T:
    """
    Await a store call, returning `default` if it raises.

    The failure is logged as `<operation>_failed` with the traceback attached.
    """
    try:
        return await coro
    except Exception:
        logger.warning(f"{operation}_failed", exc_info=True)
        return default


def unique_ids(ids: Iterable[str | None]) -> list[str]:
    """Drop empty ids and duplicates, keeping first-seen order."""
    return list(dict.fromkeys(i for i in ids if i))


class InventoryLookupService:
    """
    Layer-pure access to the inventory tables.

    Every lookup is one batched store query. No caching across calls.
    """

    def __init__(
        self,
        movement_store: IMovementStore,
        product_store: IProductStore,
        client_store: IClientStore,
        location_store: ILocationStore,
    ) -> None:
        self._movement_store = movement_store
        self._product_store = product_store
        self._client_store = client_store
        self._location_store = location_store

    async def build_product_map(
        self, product_ids: Iterable[str | None] | None = None
    ) -> ProductMap:
        """
        Products keyed by id.

        Args:
            product_ids: Ids to load. None or empty loads the whole catalog.
        """
        ids = unique_ids(product_ids) if product_ids is not None else []
        products = await fetch_or_default(
            "product_map_fetch",
            self._product_store.list_products(ids or None),
            [],
        )
        return {product.id: product for product in products}

    async def build_client_map(self, client_ids: Iterable[str | None]) -> ClientMap:
        """Clients keyed by id; no query when there is nothing to look up."""
        ids = unique_ids(client_ids)
        if not ids:
            return {}
        clients = await fetch_or_default(
            "client_map_fetch",
            self._client_store.list_clients(ids),
            [],
        )
        return {client.id: client for client in clients}

    async def build_location_map(self, location_ids: Iterable[str | None]) -> LocationMap:
        """Locations keyed by id; no query when there is nothing to look up."""
        ids = unique_ids(location_ids)
        if not ids:
            return {}
        locations = await fetch_or_default(
            "location_map_fetch",
            self._location_store.list_locations(ids),
            [],
        )
        return {location.id: location for location in locations}

    async def resolve_location_name(self, location_id: str) -> str | None:
        """
        Display label for a location.

        Falls back to the hospital list, since a hospital id is also a
        location id. If either lookup fails the id itself is the label.
        Returns None only when both lookups succeed without a match.
        """
        locations = await fetch_or_default(
            "location_name_fetch",
            self._location_store.list_locations([location_id]),
            None,
        )
        if locations is None:
            return location_id
        for location in locations:
            if location.id == location_id:
                return location.display_name

        hospitals = await fetch_or_default(
            "hospitals_fetch",
            self._location_store.list_hospitals(),
            None,
        )
        if hospitals is None:
            return location_id
        for hospital in hospitals:
            if hospital.id == location_id:
                return hospital.hospital_name
        return None

    async def fetch_stock_movements(self, location_id: str) -> list[StockMovement]:
        """Movements into or out of a location, newest first."""
        return await fetch_or_default(
            "stock_movements_fetch",
            self._movement_store.list_by_location(location_id),
            [],
        )

    async def fetch_all_movements(self) -> list[StockMovement]:
        return await fetch_or_default(
            "all_movements_fetch",
            self._movement_store.list_all(),
            [],
        )

    async def fetch_usage_since(self, since: datetime) -> list[StockMovement]:
        """Outbound usage movements recorded at or after `since`."""
        return await fetch_or_default(
            "usage_movements_fetch",
            self._movement_store.list_usage_since(since),
            [],
        )

    async def list_hospitals(self) -> list[Hospital]:
        return await fetch_or_default(
            "hospitals_fetch",
            self._location_store.list_hospitals(),
            [],
        )
