"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.cfn_sort import (
    cfn_numeric_key,
    parse_cfn,
    sort_by_cfn_default,
    sort_by_cfn_numeric,
)
from src.core.services.inventory_calculator import (
    calculate_available_lots,
    calculate_available_stock,
    calculate_cfn_inventory,
    calculate_exchange_inventory,
    calculate_inventory,
    calculate_ubd_inventory,
    days_until,
    parse_ubd_date,
    signed_quantity,
)
from src.core.services.inventory_lookups import (
    InventoryLookupService,
    fetch_or_default,
    unique_ids,
)
from src.core.services.usage_ranking import calculate_usage_by_cfn, get_top_ranking

__all__ = [
    # Calculator
    "calculate_inventory",
    "calculate_cfn_inventory",
    "calculate_available_stock",
    "calculate_available_lots",
    "calculate_ubd_inventory",
    "calculate_exchange_inventory",
    "signed_quantity",
    "parse_ubd_date",
    "days_until",
    # CFN ordering
    "sort_by_cfn_numeric",
    "sort_by_cfn_default",
    "cfn_numeric_key",
    "parse_cfn",
    # Lookups
    "InventoryLookupService",
    "fetch_or_default",
    "unique_ids",
    # Usage ranking
    "calculate_usage_by_cfn",
    "get_top_ranking",
]
