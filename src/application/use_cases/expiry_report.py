"""
Get Expiry Report Use Case.

Lists stock expiring within a threshold across the central warehouse and,
optionally, every hospital.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime

from src.config import get_logger, get_settings
from src.core.entities.inventory_views import UBDInventoryItem
from src.core.exceptions import ValidationError
from src.core.services import InventoryLookupService, calculate_ubd_inventory

logger = get_logger(__name__)


@dataclass
class ExpiryReportResult:
    """Expiry rows across locations, soonest first."""

    items: list[UBDInventoryItem] = field(default_factory=list)
    location_count: int = 0


class GetExpiryReportUseCase:
    """
    Build the system-wide expiry (UBD) report.

    The whole ledger is loaded once and folded per location. Rows expiring
    on the same day list hospitals ahead of the central warehouse.
    """

    def __init__(
        self,
        lookups: InventoryLookupService | None = None,
        warehouse_location_id: str | None = None,
        warehouse_location_name: str | None = None,
    ):
        self._lookups = lookups
        inventory_settings = get_settings().inventory
        self._warehouse_id = warehouse_location_id or inventory_settings.warehouse_location_id
        self._warehouse_name = (
            warehouse_location_name or inventory_settings.warehouse_location_name
        )

    async def _get_lookups(self) -> InventoryLookupService:
        if self._lookups is None:
            from src.application.services import get_inventory_lookup_service

            self._lookups = await get_inventory_lookup_service()
        return self._lookups

    def _sort_key(self, item: UBDInventoryItem) -> tuple[int, bool, str]:
        return (
            item.days_until_expiry,
            item.location_name == self._warehouse_name,
            item.location_name,
        )

    async def execute(
        self,
        days_threshold: int | None = None,
        limit: int = 0,
        include_all_locations: bool = True,
        now: datetime | None = None,
    ) -> ExpiryReportResult:
        """
        Execute the expiry report use case.

        Args:
            days_threshold: Keep rows with at most this many days left.
                Defaults to the configured threshold.
            limit: Truncate to this many rows when positive.
            include_all_locations: Include every hospital, not just the warehouse.
            now: Reference time; defaults to the current time.

        Returns:
            ExpiryReportResult with the matching rows.
        """
        if days_threshold is None:
            days_threshold = get_settings().inventory.expiry_days_threshold
        if days_threshold < 0:
            raise ValidationError("days_threshold", "Must not be negative", days_threshold)
        if limit < 0:
            raise ValidationError("limit", "Must not be negative", limit)

        lookups = await self._get_lookups()

        hospitals, movements = await asyncio.gather(
            lookups.list_hospitals(),
            lookups.fetch_all_movements(),
        )
        if not movements:
            return ExpiryReportResult()

        product_map = await lookups.build_product_map(m.product_id for m in movements)
        if not product_map:
            return ExpiryReportResult()

        locations = [(self._warehouse_id, self._warehouse_name)]
        if include_all_locations:
            locations.extend((h.id, h.hospital_name) for h in hospitals)

        rows: list[UBDInventoryItem] = []
        for location_id, location_name in locations:
            rows.extend(
                calculate_ubd_inventory(
                    movements, location_id, location_name, product_map, now=now
                )
            )

        rows = [row for row in rows if 0 < row.days_until_expiry <= days_threshold]
        rows.sort(key=self._sort_key)
        if limit > 0:
            rows = rows[:limit]

        logger.info(
            "expiry_report_built",
            locations=len(locations),
            rows=len(rows),
            days_threshold=days_threshold,
        )
        return ExpiryReportResult(items=rows, location_count=len(locations))
