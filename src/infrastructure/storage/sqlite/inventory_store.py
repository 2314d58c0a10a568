"""SQLite implementation of the inventory read stores."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import aiosqlite

from src.config import get_logger
from src.core.entities.inventory import (
    Client,
    Hospital,
    Location,
    MovementReason,
    MovementType,
    Product,
    StockMovement,
)
from src.core.exceptions import DatabaseError
from src.core.interfaces.inventory_store import (
    IClientStore,
    ILocationStore,
    IMovementStore,
    IProductStore,
)
from src.infrastructure.storage.sqlite.connection import get_connection

logger = get_logger(__name__)

_MOVEMENT_COLUMNS = """
    product_id, lot_number, ubd_date, quantity, movement_type,
    movement_reason, from_location_id, to_location_id, inbound_date, created_at
"""


def to_db_timestamp(value: datetime) -> str:
    """Format a datetime the way the ledger stores `created_at` (naive UTC)."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds")


def _placeholders(values: Sequence[Any]) -> str:
    return ", ".join("?" for _ in values)


async def _fetch_all(
    operation: str, sql: str, params: Sequence[Any] = ()
) -> list[aiosqlite.Row]:
    try:
        async with get_connection() as conn:
            cursor = await conn.execute(sql, tuple(params))
            return list(await cursor.fetchall())
    except aiosqlite.Error as e:
        logger.error("inventory_query_failed", operation=operation, error=str(e))
        raise DatabaseError(operation, str(e)) from e


class SQLiteMovementStore(IMovementStore):
    """Reads the stock_movements ledger."""

    async def list_by_location(self, location_id: str) -> list[StockMovement]:
        rows = await _fetch_all(
            "list_movements_by_location",
            f"""
            SELECT {_MOVEMENT_COLUMNS} FROM stock_movements
            WHERE from_location_id = ? OR to_location_id = ?
            ORDER BY created_at DESC, id DESC
            """,
            (location_id, location_id),
        )
        return [self._row_to_movement(row) for row in rows]

    async def list_all(self) -> list[StockMovement]:
        rows = await _fetch_all(
            "list_all_movements",
            f"SELECT {_MOVEMENT_COLUMNS} FROM stock_movements ORDER BY created_at DESC, id DESC",
        )
        return [self._row_to_movement(row) for row in rows]

    async def list_usage_since(self, since: datetime) -> list[StockMovement]:
        rows = await _fetch_all(
            "list_usage_movements",
            f"""
            SELECT {_MOVEMENT_COLUMNS} FROM stock_movements
            WHERE movement_type = ? AND movement_reason = ? AND created_at >= ?
            ORDER BY created_at DESC, id DESC
            """,
            (MovementType.OUT.value, MovementReason.USAGE.value, to_db_timestamp(since)),
        )
        return [self._row_to_movement(row) for row in rows]

    @staticmethod
    def _row_to_movement(row: aiosqlite.Row) -> StockMovement:
        """Convert a database row to a StockMovement entity."""
        created_at = None
        if row["created_at"]:
            try:
                created_at = datetime.fromisoformat(row["created_at"])
            except (ValueError, TypeError):
                pass
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)

        return StockMovement(
            product_id=row["product_id"],
            lot_number=row["lot_number"],
            ubd_date=row["ubd_date"],
            quantity=int(row["quantity"] or 0),
            movement_type=row["movement_type"],
            movement_reason=row["movement_reason"],
            from_location_id=row["from_location_id"],
            to_location_id=row["to_location_id"],
            inbound_date=row["inbound_date"],
            created_at=created_at,
        )


class SQLiteProductStore(IProductStore):
    """Reads the product catalog."""

    async def list_products(self, product_ids: list[str] | None = None) -> list[Product]:
        sql = "SELECT id, cfn, upn, description, client_id FROM products"
        params: list[str] = []
        if product_ids:
            sql += f" WHERE id IN ({_placeholders(product_ids)})"
            params = list(product_ids)
        sql += " ORDER BY cfn, id"

        rows = await _fetch_all("list_products", sql, params)
        return [
            Product(
                id=row["id"],
                cfn=row["cfn"],
                upn=row["upn"],
                description=row["description"],
                client_id=row["client_id"],
            )
            for row in rows
        ]


class SQLiteClientStore(IClientStore):
    """Reads suppliers."""

    async def list_clients(self, client_ids: list[str]) -> list[Client]:
        if not client_ids:
            return []
        rows = await _fetch_all(
            "list_clients",
            f"SELECT id, company_name FROM clients WHERE id IN ({_placeholders(client_ids)})",
            client_ids,
        )
        return [Client(id=row["id"], company_name=row["company_name"] or "") for row in rows]


class SQLiteLocationStore(ILocationStore):
    """Reads locations and hospitals."""

    async def list_locations(self, location_ids: list[str]) -> list[Location]:
        if not location_ids:
            return []
        rows = await _fetch_all(
            "list_locations",
            f"""
            SELECT id, location_name, location_type, notes FROM locations
            WHERE id IN ({_placeholders(location_ids)})
            """,
            location_ids,
        )
        return [
            Location(
                id=row["id"],
                location_name=row["location_name"],
                location_type=row["location_type"],
                notes=row["notes"],
            )
            for row in rows
        ]

    async def list_hospitals(self) -> list[Hospital]:
        rows = await _fetch_all(
            "list_hospitals",
            "SELECT id, hospital_name FROM hospitals ORDER BY hospital_name",
        )
        return [Hospital(id=row["id"], hospital_name=row["hospital_name"]) for row in rows]
