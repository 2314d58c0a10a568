"""Consumption totals per CFN and the most-used ranking built on them."""

from collections.abc import Iterable

from src.core.entities.inventory import ProductMap, StockMovement
from src.core.entities.inventory_views import CFNInventoryItem


def calculate_usage_by_cfn(
    movements: Iterable[StockMovement], product_map: ProductMap
) -> dict[str, int]:
    """Sum movement quantities per CFN; movements without a known CFN are ignored."""
    usage: dict[str, int] = {}
    for movement in movements:
        product = product_map.get(movement.product_id)
        if product is None or not product.cfn:
            continue
        usage[product.cfn] = usage.get(product.cfn, 0) + movement.quantity
    return usage


def get_top_ranking(items: Iterable[CFNInventoryItem], size: int = 5) -> dict[str, int]:
    """
    Map the `size` most-used CFNs to their rank, starting at 1.

    Only items with usage above zero are ranked. Ties keep input order.
    """
    used = [item for item in items if item.six_months_usage > 0]
    used.sort(key=lambda item: item.six_months_usage, reverse=True)
    return {item.cfn: rank for rank, item in enumerate(used[:size], start=1)}
