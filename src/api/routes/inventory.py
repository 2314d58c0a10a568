"""Inventory projection endpoints."""

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import (
    get_available_lots_use_case,
    get_expiry_report_use_case,
    get_inventory_settings,
    get_location_inventory_use_case,
    get_lookups,
    get_order_inventory_use_case,
)
from src.application.dto.requests import ExpiryReportRequest, InventoryQueryRequest
from src.application.dto.responses import (
    AvailableLotsResponse,
    AvailableStockResponse,
    CFNInventoryResponse,
    ErrorResponse,
    ExchangeInventoryResponse,
    ExpiryReportResponse,
    LocationInventoryResponse,
    OrderInventoryResponse,
    UBDInventoryResponse,
)
from src.application.inventory_queries import (
    filter_inventory,
    filter_ubd_inventory,
    summarize_inventory,
    summarize_ubd,
)
from src.application.use_cases import (
    GetAvailableLotsUseCase,
    GetExpiryReportUseCase,
    GetLocationInventoryUseCase,
    GetOrderInventoryUseCase,
)
from src.config import InventorySettings
from src.core.entities import SortBy
from src.core.exceptions import LocationNotFoundError
from src.core.services import InventoryLookupService, sort_by_cfn_numeric

router = APIRouter(prefix="/api/inventory", tags=["inventory"])

_ERRORS = {
    400: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def inventory_query(
    sort_by: SortBy = Query(default=SortBy.CFN, description="Row ordering"),
    include_zero: bool = Query(
        default=False, description="Keep rows netting to zero (ignored when positive_only)"
    ),
    positive_only: bool = Query(default=True, description="Keep only rows with stock on hand"),
    numeric_sort: bool = Query(default=False, description="Order by CFN family and size"),
    search: str | None = Query(default=None, description="Match on CFN, lot or client"),
) -> InventoryQueryRequest:
    return InventoryQueryRequest(
        sort_by=sort_by,
        include_zero=include_zero,
        positive_only=positive_only,
        numeric_sort=numeric_sort,
        search=search,
    )


def expiry_query(
    days_threshold: int | None = Query(
        default=None, ge=0, description="Days until expiry (default from settings)"
    ),
    limit: int = Query(default=0, ge=0, description="Maximum rows, 0 for no limit"),
    include_all_locations: bool = Query(
        default=True, description="Include every hospital, not only the warehouse"
    ),
    search: str | None = Query(default=None, description="Match on CFN, lot or location"),
) -> ExpiryReportRequest:
    return ExpiryReportRequest(
        days_threshold=days_threshold,
        limit=limit,
        include_all_locations=include_all_locations,
        search=search,
    )


async def _snapshot(
    location_id: str,
    query: InventoryQueryRequest,
    use_case: GetLocationInventoryUseCase,
) -> LocationInventoryResponse:
    result = await use_case.execute(location_id, options=query.to_options())
    items = result.inventory
    if query.numeric_sort:
        items = sort_by_cfn_numeric(items)
    items = filter_inventory(items, query.search)
    return LocationInventoryResponse(
        location_id=location_id,
        items=items,
        summary=summarize_inventory(items),
        numeric_sort=query.numeric_sort,
    )


@router.get(
    "/locations/{location_id}",
    response_model=LocationInventoryResponse,
    responses=_ERRORS,
)
async def get_location_inventory(
    location_id: str,
    query: InventoryQueryRequest = Depends(inventory_query),
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
) -> LocationInventoryResponse:
    """Quantity per CFN, lot and expiry date at a location."""
    return await _snapshot(location_id, query, use_case)


@router.get(
    "/locations/{location_id}/cfn",
    response_model=CFNInventoryResponse,
    responses=_ERRORS,
)
async def get_cfn_inventory(
    location_id: str,
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
) -> CFNInventoryResponse:
    """Total quantity per CFN at a location."""
    result = await use_case.execute(location_id, include_cfn=True)
    return CFNInventoryResponse(location_id=location_id, items=result.cfn_inventory)


@router.get(
    "/locations/{location_id}/available",
    response_model=AvailableStockResponse,
    responses=_ERRORS,
)
async def get_available_stock(
    location_id: str,
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
) -> AvailableStockResponse:
    """CFNs with stock available for outbound selection."""
    result = await use_case.execute(location_id, include_available=True)
    return AvailableStockResponse(location_id=location_id, items=result.available_stock)


@router.get(
    "/locations/{location_id}/lots",
    response_model=AvailableLotsResponse,
    responses=_ERRORS,
)
async def get_available_lots(
    location_id: str,
    cfn: str = Query(..., min_length=1, description="CFN whose lots are listed"),
    use_case: GetAvailableLotsUseCase = Depends(get_available_lots_use_case),
) -> AvailableLotsResponse:
    """Lots of a CFN still in stock, soonest expiry first."""
    lots = await use_case.execute(location_id, cfn)
    return AvailableLotsResponse(location_id=location_id, cfn=cfn, lots=lots)


@router.get(
    "/locations/{location_id}/exchange",
    response_model=ExchangeInventoryResponse,
    responses=_ERRORS,
)
async def get_exchange_inventory(
    location_id: str,
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
) -> ExchangeInventoryResponse:
    """Positional rows with stable row ids for the exchange screen."""
    result = await use_case.execute(location_id, include_exchange=True)
    return ExchangeInventoryResponse(location_id=location_id, items=result.exchange_inventory)


@router.get(
    "/locations/{location_id}/ubd",
    response_model=UBDInventoryResponse,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
)
async def get_ubd_inventory(
    location_id: str,
    location_name: str | None = Query(
        default=None, description="Label for the rows; looked up when omitted"
    ),
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
    lookups: InventoryLookupService = Depends(get_lookups),
    settings: InventorySettings = Depends(get_inventory_settings),
) -> UBDInventoryResponse:
    """Unexpired stock at a location with days left until expiry."""
    if not location_name:
        if location_id == settings.warehouse_location_id:
            location_name = settings.warehouse_location_name
        else:
            location_name = await lookups.resolve_location_name(location_id)
            if location_name is None:
                raise LocationNotFoundError(location_id)

    result = await use_case.execute(
        location_id, include_ubd=True, location_name=location_name
    )
    return UBDInventoryResponse(
        location_id=location_id,
        location_name=location_name,
        items=result.ubd_inventory,
        summary=summarize_ubd(
            result.ubd_inventory,
            critical_days=settings.expiry_critical_days,
            warning_days=settings.expiry_warning_days,
        ),
    )


@router.get(
    "/warehouse",
    response_model=LocationInventoryResponse,
    responses=_ERRORS,
)
async def get_warehouse_inventory(
    query: InventoryQueryRequest = Depends(inventory_query),
    use_case: GetLocationInventoryUseCase = Depends(get_location_inventory_use_case),
    settings: InventorySettings = Depends(get_inventory_settings),
) -> LocationInventoryResponse:
    """Positional snapshot of the central warehouse."""
    return await _snapshot(settings.warehouse_location_id, query, use_case)


@router.get(
    "/orders",
    response_model=OrderInventoryResponse,
    responses=_ERRORS,
)
async def get_order_inventory(
    use_case: GetOrderInventoryUseCase = Depends(get_order_inventory_use_case),
) -> OrderInventoryResponse:
    """Warehouse stock per CFN with recent usage and the most-used ranking."""
    result = await use_case.execute()
    return OrderInventoryResponse(
        items=result.items,
        ranking=result.ranking,
        usage_since=result.usage_since,
    )


@router.get(
    "/expiry",
    response_model=ExpiryReportResponse,
    responses=_ERRORS,
)
async def get_expiry_report(
    query: ExpiryReportRequest = Depends(expiry_query),
    use_case: GetExpiryReportUseCase = Depends(get_expiry_report_use_case),
    settings: InventorySettings = Depends(get_inventory_settings),
) -> ExpiryReportResponse:
    """Stock expiring within a threshold across the warehouse and hospitals."""
    days_threshold = (
        query.days_threshold
        if query.days_threshold is not None
        else settings.expiry_days_threshold
    )
    result = await use_case.execute(
        days_threshold=days_threshold,
        limit=query.limit,
        include_all_locations=query.include_all_locations,
    )
    items = filter_ubd_inventory(result.items, query.search)
    return ExpiryReportResponse(
        items=items,
        summary=summarize_ubd(
            items,
            critical_days=settings.expiry_critical_days,
            warning_days=settings.expiry_warning_days,
        ),
        days_threshold=days_threshold,
    )
