"""
Get Location Inventory Use Case.

Loads the movement ledger for one location and folds it into the
positional snapshot plus any requested derived views.
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.config import get_logger
from src.core.entities.inventory_views import (
    AvailableStock,
    CFNInventoryItem,
    ExchangeInventoryItem,
    InventoryCalculationOptions,
    InventoryItem,
    UBDInventoryItem,
)
from src.core.exceptions import ValidationError
from src.core.services import (
    InventoryLookupService,
    calculate_available_stock,
    calculate_cfn_inventory,
    calculate_exchange_inventory,
    calculate_inventory,
    calculate_ubd_inventory,
)

logger = get_logger(__name__)


@dataclass
class LocationInventoryResult:
    """Snapshot and derived views for one location."""

    location_id: str
    inventory: list[InventoryItem] = field(default_factory=list)
    cfn_inventory: list[CFNInventoryItem] = field(default_factory=list)
    available_stock: list[AvailableStock] = field(default_factory=list)
    exchange_inventory: list[ExchangeInventoryItem] = field(default_factory=list)
    ubd_inventory: list[UBDInventoryItem] = field(default_factory=list)
    movement_count: int = 0


class GetLocationInventoryUseCase:
    """Compute the inventory views of a single location."""

    def __init__(self, lookups: InventoryLookupService | None = None):
        self._lookups = lookups

    async def _get_lookups(self) -> InventoryLookupService:
        if self._lookups is None:
            from src.application.services import get_inventory_lookup_service

            self._lookups = await get_inventory_lookup_service()
        return self._lookups

    async def execute(
        self,
        location_id: str,
        options: InventoryCalculationOptions | None = None,
        include_cfn: bool = False,
        include_available: bool = False,
        include_exchange: bool = False,
        include_ubd: bool = False,
        location_name: str = "",
        now: datetime | None = None,
    ) -> LocationInventoryResult:
        """
        Execute the location inventory use case.

        Args:
            location_id: Location whose stock is computed.
            options: Filtering and ordering of the positional snapshot.
            include_cfn: Also compute per-CFN totals.
            include_available: Also compute available stock per CFN.
            include_exchange: Also compute exchange rows.
            include_ubd: Also compute expiry rows, labelled with `location_name`.
            now: Reference time for expiry rows; defaults to the current time.

        Returns:
            LocationInventoryResult with the requested views filled in.

        Raises:
            ValidationError: If location_id is blank.
        """
        if not location_id or not location_id.strip():
            raise ValidationError("location_id", "Location id is required", location_id)

        lookups = await self._get_lookups()
        result = LocationInventoryResult(location_id=location_id)

        movements = await lookups.fetch_stock_movements(location_id)
        if not movements:
            logger.info("location_inventory_empty", location_id=location_id)
            return result

        product_map = await lookups.build_product_map(m.product_id for m in movements)
        client_map = await lookups.build_client_map(
            p.client_id for p in product_map.values()
        )

        result.movement_count = len(movements)
        result.inventory = calculate_inventory(
            movements, location_id, product_map, client_map, options
        )
        if include_cfn:
            result.cfn_inventory = calculate_cfn_inventory(
                movements, location_id, product_map, client_map
            )
        if include_available:
            result.available_stock = calculate_available_stock(
                movements, location_id, product_map
            )
        if include_exchange:
            result.exchange_inventory = calculate_exchange_inventory(
                movements, location_id, product_map, client_map
            )
        if include_ubd:
            result.ubd_inventory = calculate_ubd_inventory(
                movements, location_id, location_name, product_map, now=now
            )

        logger.info(
            "inventory_calculated",
            location_id=location_id,
            movements=len(movements),
            rows=len(result.inventory),
        )
        return result
