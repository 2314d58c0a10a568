"""
Inventory calculator.

Pure functions that fold a list of stock movements into the derived views
shown for a location. For a target location L a movement adds its quantity
when it goes to L and subtracts it when it leaves L. When both sides are L
the inbound side wins and the movement adds.

No I/O happens here; lookups are passed in as dictionaries keyed by id.
"""

import math
from collections.abc import Iterable
from datetime import UTC, date, datetime

from src.config import get_logger
from src.core.entities.inventory import ClientMap, Product, ProductMap, StockMovement
from src.core.entities.inventory_views import (
    AvailableStock,
    CFNInventoryItem,
    ExchangeInventoryItem,
    InventoryCalculationOptions,
    InventoryItem,
    LotInfo,
    SortBy,
    UBDInventoryItem,
)

logger = get_logger(__name__)

UNKNOWN_CLIENT_NAME = "Unknown"

_SECONDS_PER_DAY = 24 * 60 * 60


def signed_quantity(movement: StockMovement, location_id: str) -> int:
    """Quantity a movement contributes to the stock held at `location_id`."""
    if movement.to_location_id == location_id:
        return movement.quantity
    elif movement.from_location_id == location_id:
        return -movement.quantity
    return 0


def _resolve_product(movement: StockMovement, product_map: ProductMap) -> Product | None:
    product = product_map.get(movement.product_id)
    if product is None or not product.cfn:
        return None
    return product


def _sort_inventory(items: list[InventoryItem], sort_by: SortBy) -> list[InventoryItem]:
    if sort_by == SortBy.CFN:
        return sorted(items, key=lambda i: (i.cfn, i.lot_number, i.ubd_date))
    if sort_by == SortBy.LOT:
        return sorted(items, key=lambda i: (i.lot_number, i.cfn, i.ubd_date))
    if sort_by == SortBy.UBD:
        return sorted(items, key=lambda i: (i.ubd_date, i.cfn, i.lot_number))
    if sort_by == SortBy.QUANTITY:
        return sorted(items, key=lambda i: i.quantity, reverse=True)
    return items


def calculate_inventory(
    movements: Iterable[StockMovement],
    location_id: str,
    product_map: ProductMap,
    client_map: ClientMap,
    options: InventoryCalculationOptions | None = None,
) -> list[InventoryItem]:
    """
    Fold movements into one row per (cfn, lot_number, ubd_date) at a location.

    Movements whose product is unknown or has no CFN contribute nothing; they
    are counted and reported as a warning.

    Args:
        movements: Ledger entries touching the location.
        location_id: Location whose stock is computed.
        product_map: Products keyed by id.
        client_map: Clients keyed by id, used for the denormalized client name.
        options: Filtering and ordering; defaults keep positive rows sorted by CFN.

    Returns:
        Inventory rows after filtering and sorting.
    """
    options = options or InventoryCalculationOptions()

    rows: dict[tuple[str, str, str], InventoryItem] = {}
    skipped = 0

    for movement in movements:
        product = _resolve_product(movement, product_map)
        if product is None:
            skipped += 1
            continue

        lot_number = movement.lot_number or ""
        ubd_date = movement.ubd_date or ""
        key = (product.cfn, lot_number, ubd_date)

        item = rows.get(key)
        if item is None:
            client = client_map.get(product.client_id) if product.client_id else None
            item = InventoryItem(
                cfn=product.cfn,
                lot_number=lot_number,
                ubd_date=ubd_date,
                quantity=0,
                client_name=client.company_name if client else "",
                product_id=movement.product_id,
                client_id=product.client_id,
                description=product.description,
            )
            rows[key] = item

        item.quantity += signed_quantity(movement, location_id)

    if skipped:
        logger.warning(
            "inventory_movements_skipped",
            location_id=location_id,
            skipped=skipped,
            reason="unknown_product_or_missing_cfn",
        )

    result = list(rows.values())
    if options.filter_positive_only:
        result = [item for item in result if item.quantity > 0]
    elif not options.include_zero_quantity:
        # Negative rows stay visible: they flag an inconsistent ledger
        result = [item for item in result if item.quantity != 0]

    return _sort_inventory(result, options.sort_by)


def calculate_cfn_inventory(
    movements: Iterable[StockMovement],
    location_id: str,
    product_map: ProductMap,
    client_map: ClientMap,
    first_product_wins: bool = False,
) -> list[CFNInventoryItem]:
    """
    Total quantity per CFN, including CFNs with no movements at all.

    Every CFN in `product_map` gets a zero row first; movements only update
    existing rows. When products share a CFN the last one seen provides the
    product and client ids, or the first one with `first_product_wins`.
    Movements of every product sharing the CFN count toward its total.
    """
    rows: dict[str, CFNInventoryItem] = {}

    for product in product_map.values():
        if not product.cfn:
            continue
        if first_product_wins and product.cfn in rows:
            continue
        client = client_map.get(product.client_id) if product.client_id else None
        rows[product.cfn] = CFNInventoryItem(
            cfn=product.cfn,
            client_name=client.company_name if client else UNKNOWN_CLIENT_NAME,
            total_quantity=0,
            product_id=product.id,
            client_id=product.client_id,
        )

    for movement in movements:
        product = _resolve_product(movement, product_map)
        if product is None:
            continue
        item = rows.get(product.cfn)
        if item is None:
            continue
        item.total_quantity += signed_quantity(movement, location_id)

    return list(rows.values())


def calculate_available_stock(
    movements: Iterable[StockMovement],
    location_id: str,
    product_map: ProductMap,
) -> list[AvailableStock]:
    """Positive totals per CFN, sorted by CFN."""
    detailed = calculate_inventory(movements, location_id, product_map, {})

    totals: dict[str, int] = {}
    for item in detailed:
        totals[item.cfn] = totals.get(item.cfn, 0) + item.quantity

    return sorted(
        (
            AvailableStock(cfn=cfn, total_quantity=quantity)
            for cfn, quantity in totals.items()
            if quantity > 0
        ),
        key=lambda stock: stock.cfn,
    )


def calculate_available_lots(
    movements: Iterable[StockMovement],
    location_id: str,
    cfn: str,
    product_map: ProductMap,
) -> list[LotInfo]:
    """
    Positive quantity per lot for one CFN, soonest expiry first.

    The CFN resolves to the first matching product in `product_map`; other
    products sharing the code are ignored. Movements without a lot number
    are skipped, and a lot's expiry date comes from its first movement.
    """
    product = next((p for p in product_map.values() if p.cfn == cfn), None)
    if product is None:
        return []

    lots: dict[str, LotInfo] = {}
    for movement in movements:
        if movement.product_id != product.id or not movement.lot_number:
            continue

        lot = lots.get(movement.lot_number)
        if lot is None:
            lot = LotInfo(
                lot_number=movement.lot_number,
                ubd_date=movement.ubd_date or "",
                available_quantity=0,
            )
            lots[movement.lot_number] = lot

        lot.available_quantity += signed_quantity(movement, location_id)

    return sorted(
        (lot for lot in lots.values() if lot.available_quantity > 0),
        key=lambda lot: (lot.ubd_date, lot.lot_number),
    )


def parse_ubd_date(value: str) -> datetime | None:
    """
    Parse an expiry date into an aware datetime.

    Date-only values mean midnight UTC; naive timestamps are taken as UTC.
    Returns None for values that are not ISO dates.
    """
    try:
        day = date.fromisoformat(value)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=UTC)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def days_until(ubd_date: str, now: datetime) -> int | None:
    """Whole days from `now` to the expiry date, rounded up."""
    expiry = parse_ubd_date(ubd_date)
    if expiry is None:
        return None
    delta = (expiry - now).total_seconds()
    return math.ceil(delta / _SECONDS_PER_DAY)


def calculate_ubd_inventory(
    movements: Iterable[StockMovement],
    location_id: str,
    location_name: str,
    product_map: ProductMap,
    now: datetime | None = None,
) -> list[UBDInventoryItem]:
    """
    Unexpired positive rows at a location with their remaining shelf life.

    Rows without an expiry date, with an unreadable one, or with zero or
    fewer days left are dropped. Soonest expiry first.
    """
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    result: list[UBDInventoryItem] = []
    for item in calculate_inventory(movements, location_id, product_map, {}):
        if not item.ubd_date or item.quantity <= 0:
            continue

        days = days_until(item.ubd_date, now)
        if days is None:
            logger.debug("ubd_date_unparseable", cfn=item.cfn, ubd_date=item.ubd_date)
            continue
        if days <= 0:
            continue

        result.append(
            UBDInventoryItem(
                cfn=item.cfn,
                lot_number=item.lot_number,
                ubd_date=item.ubd_date,
                quantity=item.quantity,
                location_name=location_name,
                days_until_expiry=days,
            )
        )

    return sorted(result, key=lambda item: item.days_until_expiry)


def calculate_exchange_inventory(
    movements: Iterable[StockMovement],
    location_id: str,
    product_map: ProductMap,
    client_map: ClientMap,
) -> list[ExchangeInventoryItem]:
    """Positional rows with a `product_id-lot_number-ubd_date` row id."""
    inventory = calculate_inventory(movements, location_id, product_map, client_map)
    return [
        ExchangeInventoryItem(
            **item.model_dump(exclude={"product_id"}),
            id=f"{item.product_id}-{item.lot_number}-{item.ubd_date}",
            product_id=item.product_id or "",
        )
        for item in inventory
    ]
