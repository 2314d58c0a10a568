"""
Pure helpers over computed inventory rows.

Search, headline summaries and groupings used by the API and the view
model. None of these touch the store.
"""

from collections.abc import Iterable, Sequence

from src.core.entities.inventory_views import (
    InventoryItem,
    InventorySummary,
    UBDInventoryItem,
    UBDSummary,
)

DEFAULT_CRITICAL_DAYS = 7
DEFAULT_WARNING_DAYS = 30


def _matches(term: str, *fields: str | None) -> bool:
    return any(term in (value or "").lower() for value in fields)


def filter_inventory(items: Sequence[InventoryItem], term: str | None) -> list[InventoryItem]:
    """Case-insensitive match on CFN, lot number or client name. Blank term keeps all."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if _matches(needle, item.cfn, item.lot_number, item.client_name)
    ]


def filter_ubd_inventory(
    items: Sequence[UBDInventoryItem], term: str | None
) -> list[UBDInventoryItem]:
    """Case-insensitive match on CFN, lot number or location name."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if _matches(needle, item.cfn, item.lot_number, item.location_name)
    ]


def summarize_inventory(items: Sequence[InventoryItem]) -> InventorySummary:
    return InventorySummary(
        total_items=len(items),
        total_quantity=sum(item.quantity for item in items),
        unique_cfns=len({item.cfn for item in items}),
        unique_clients=len({item.client_name for item in items if item.client_name}),
    )


def summarize_ubd(
    items: Sequence[UBDInventoryItem],
    critical_days: int = DEFAULT_CRITICAL_DAYS,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> UBDSummary:
    """
    Headline figures for an expiry report.

    Rows expiring within `critical_days` are critical, up to `warning_days`
    are warnings, anything later is normal.
    """
    summary = UBDSummary(
        total_items=len(items),
        total_quantity=sum(item.quantity for item in items),
        unique_locations=len({item.location_name for item in items}),
        unique_cfns=len({item.cfn for item in items}),
    )
    for item in items:
        if item.days_until_expiry <= critical_days:
            summary.critical += 1
        elif item.days_until_expiry <= warning_days:
            summary.warning += 1
        else:
            summary.normal += 1
    return summary


def total_quantity_by_cfn(items: Iterable[InventoryItem], cfn: str) -> int:
    return sum(item.quantity for item in items if item.cfn == cfn)


def has_inventory(items: Iterable[InventoryItem]) -> bool:
    return any(item.quantity > 0 for item in items)


def inventory_by_client(items: Iterable[InventoryItem], client_name: str) -> list[InventoryItem]:
    return [item for item in items if item.client_name == client_name]


def expiring_within(items: Iterable[UBDInventoryItem], days: int) -> list[UBDInventoryItem]:
    """Unexpired rows with at most `days` of shelf life left."""
    return [item for item in items if 0 < item.days_until_expiry <= days]


def group_ubd_by_location(
    items: Iterable[UBDInventoryItem],
) -> dict[str, list[UBDInventoryItem]]:
    groups: dict[str, list[UBDInventoryItem]] = {}
    for item in items:
        groups.setdefault(item.location_name, []).append(item)
    return groups


def group_ubd_by_cfn(items: Iterable[UBDInventoryItem]) -> dict[str, list[UBDInventoryItem]]:
    groups: dict[str, list[UBDInventoryItem]] = {}
    for item in items:
        groups.setdefault(item.cfn, []).append(item)
    return groups
