"""
Inventory view model.

Holds the state behind an inventory screen: the loaded snapshot, the
currently displayed (sorted and searched) rows, and loading/error flags.
"""

from src.application.inventory_queries import filter_inventory, has_inventory
from src.application.inventory_queries import total_quantity_by_cfn as _total_by_cfn
from src.application.use_cases.location_inventory import GetLocationInventoryUseCase
from src.config import get_logger
from src.core.entities.inventory_views import InventoryCalculationOptions, InventoryItem
from src.core.services import sort_by_cfn_default, sort_by_cfn_numeric

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load inventory."


class InventoryViewModel:
    """
    Stateful wrapper around GetLocationInventoryUseCase for one location.

    Each refresh takes a generation number. A refresh that resolves after a
    newer one was started is discarded, so the state always reflects the
    latest request.
    """

    def __init__(
        self,
        location_id: str,
        use_case: GetLocationInventoryUseCase | None = None,
        options: InventoryCalculationOptions | None = None,
    ) -> None:
        self.location_id = location_id
        self.options = options
        self.inventory: list[InventoryItem] = []
        self.original_inventory: list[InventoryItem] = []
        self.loading = False
        self.error: str | None = None
        self.numeric_sort = False
        self.search_term = ""
        self._use_case = use_case or GetLocationInventoryUseCase()
        self._generation = 0
        # Rows in display order before the search term is applied
        self._ordered: list[InventoryItem] = []

    @property
    def generation(self) -> int:
        return self._generation

    def _apply_search(self) -> None:
        self.inventory = filter_inventory(self._ordered, self.search_term)

    async def refresh(self) -> None:
        """Reload the snapshot; stale results are dropped."""
        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        try:
            result = await self._use_case.execute(self.location_id, self.options)
        except Exception:
            if generation != self._generation:
                return
            logger.warning(
                "inventory_refresh_failed",
                location_id=self.location_id,
                exc_info=True,
            )
            self.error = LOAD_ERROR_MESSAGE
            self.original_inventory = []
            self._ordered = []
            self.inventory = []
            self.loading = False
            return

        if generation != self._generation:
            logger.debug(
                "inventory_refresh_stale",
                location_id=self.location_id,
                generation=generation,
                latest=self._generation,
            )
            return

        self.original_inventory = result.inventory
        if self.numeric_sort:
            self._ordered = sort_by_cfn_numeric(result.inventory)
        else:
            # Keep the order chosen by the calculation options
            self._ordered = list(result.inventory)
        self._apply_search()
        self.loading = False

    def filter(self, term: str) -> list[InventoryItem]:
        """Show only rows matching `term`; blank shows everything."""
        self.search_term = term
        self._apply_search()
        return self.inventory

    def toggle_cfn_sort(self) -> bool:
        """Switch between numeric and plain CFN order; returns the new mode."""
        self.numeric_sort = not self.numeric_sort
        if self.numeric_sort:
            self._ordered = sort_by_cfn_numeric(self.original_inventory)
        else:
            self._ordered = sort_by_cfn_default(self.original_inventory)
        self._apply_search()
        return self.numeric_sort

    def has_inventory(self) -> bool:
        """True when any displayed row has stock on hand."""
        return has_inventory(self.inventory)

    def total_quantity_by_cfn(self, cfn: str) -> int:
        return _total_by_cfn(self.original_inventory, cfn)
