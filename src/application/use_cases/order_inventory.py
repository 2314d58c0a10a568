"""
Get Order Inventory Use Case.

Per-CFN stock at the central warehouse next to recent consumption, used to
decide what to reorder. Every catalog CFN is listed, in stock or not.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from src.config import get_logger, get_settings
from src.core.entities.inventory_views import CFNInventoryItem
from src.core.services import (
    InventoryLookupService,
    calculate_cfn_inventory,
    calculate_usage_by_cfn,
    get_top_ranking,
)

logger = get_logger(__name__)


@dataclass
class OrderInventoryResult:
    """Warehouse CFN totals with usage and the most-used ranking."""

    items: list[CFNInventoryItem] = field(default_factory=list)
    ranking: dict[str, int] = field(default_factory=dict)
    usage_since: datetime | None = None


class GetOrderInventoryUseCase:
    """Compute reorder figures for the central warehouse."""

    def __init__(
        self,
        lookups: InventoryLookupService | None = None,
        warehouse_location_id: str | None = None,
    ):
        self._lookups = lookups
        self._settings = get_settings().inventory
        self._warehouse_id = warehouse_location_id or self._settings.warehouse_location_id

    async def _get_lookups(self) -> InventoryLookupService:
        if self._lookups is None:
            from src.application.services import get_inventory_lookup_service

            self._lookups = await get_inventory_lookup_service()
        return self._lookups

    async def execute(self, now: datetime | None = None) -> OrderInventoryResult:
        lookups = await self._get_lookups()
        now = now or datetime.now(UTC)
        since = now - timedelta(days=self._settings.usage_window_days)

        product_map = {
            product_id: product
            for product_id, product in (await lookups.build_product_map()).items()
            if product.cfn
        }
        if not product_map:
            logger.info("order_inventory_empty_catalog")
            return OrderInventoryResult(usage_since=since)

        client_map, movements, usage_movements = await asyncio.gather(
            lookups.build_client_map(p.client_id for p in product_map.values()),
            lookups.fetch_stock_movements(self._warehouse_id),
            lookups.fetch_usage_since(since),
        )
        items = calculate_cfn_inventory(
            movements,
            self._warehouse_id,
            product_map,
            client_map,
            first_product_wins=True,
        )

        usage = calculate_usage_by_cfn(usage_movements, product_map)
        for item in items:
            item.six_months_usage = usage.get(item.cfn, 0)

        ranking = get_top_ranking(items, size=self._settings.ranking_size)

        logger.info(
            "order_inventory_calculated",
            cfns=len(items),
            ranked=len(ranking),
        )
        return OrderInventoryResult(items=items, ranking=ranking, usage_since=since)
