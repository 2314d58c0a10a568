"""
Human-friendly ordering of CFN model codes.

Product families encode a two-digit sub-size in the last two digits of the
numeric body (DHC2508 = family DHC, size 25, sub-size 08). Rows are grouped
by letter prefix, then by sub-size, then by size.
"""

import re
from typing import NamedTuple, TypeVar

from src.core.entities.inventory_views import InventoryItem

_CFN_PATTERN = re.compile(r"^([A-Za-z]+)(\d+)$")

ItemT = TypeVar("ItemT", bound=InventoryItem)


class CfnParts(NamedTuple):
    """Letter prefix and the two numeric groups of a CFN."""

    prefix: str
    first: int
    second: int


def parse_cfn(cfn: str) -> CfnParts:
    """
    Split a CFN into prefix, main number and two-digit suffix.

    Codes that are not letters followed by digits keep the raw string as
    prefix with both numeric groups at zero.
    """
    match = _CFN_PATTERN.match(cfn)
    if not match:
        return CfnParts(prefix=cfn, first=0, second=0)

    prefix, digits = match.group(1), match.group(2)
    if len(digits) >= 4:
        return CfnParts(prefix=prefix, first=int(digits[:-2]), second=int(digits[-2:]))
    return CfnParts(prefix=prefix, first=int(digits), second=0)


def cfn_numeric_key(item: InventoryItem) -> tuple[str, int, int, str, str]:
    """Sort key: prefix, suffix, main number, lot, expiry."""
    parts = parse_cfn(item.cfn)
    return (parts.prefix, parts.second, parts.first, item.lot_number, item.ubd_date)


def sort_by_cfn_numeric(items: list[ItemT]) -> list[ItemT]:
    """Return a new list ordered by `cfn_numeric_key`; the input is untouched."""
    return sorted(items, key=cfn_numeric_key)


def sort_by_cfn_default(items: list[ItemT]) -> list[ItemT]:
    """Return a new list ordered by cfn, lot number and expiry as plain strings."""
    return sorted(items, key=lambda item: (item.cfn, item.lot_number, item.ubd_date))
