"""Get Available Lots Use Case - lots of one CFN still in stock at a location."""

from src.config import get_logger
from src.core.entities.inventory_views import LotInfo
from src.core.exceptions import ValidationError
from src.core.services import InventoryLookupService, calculate_available_lots

logger = get_logger(__name__)


class GetAvailableLotsUseCase:
    """List positive lots of a CFN at a location, soonest expiry first."""

    def __init__(self, lookups: InventoryLookupService | None = None):
        self._lookups = lookups

    async def _get_lookups(self) -> InventoryLookupService:
        if self._lookups is None:
            from src.application.services import get_inventory_lookup_service

            self._lookups = await get_inventory_lookup_service()
        return self._lookups

    async def execute(self, location_id: str, cfn: str) -> list[LotInfo]:
        if not location_id or not location_id.strip():
            raise ValidationError("location_id", "Location id is required", location_id)
        if not cfn or not cfn.strip():
            raise ValidationError("cfn", "CFN is required", cfn)

        lookups = await self._get_lookups()

        movements = await lookups.fetch_stock_movements(location_id)
        if not movements:
            return []

        # Whole catalog: the CFN is resolved against every product
        product_map = await lookups.build_product_map()
        lots = calculate_available_lots(movements, location_id, cfn, product_map)

        logger.info(
            "available_lots_calculated",
            location_id=location_id,
            cfn=cfn,
            lots=len(lots),
        )
        return lots
