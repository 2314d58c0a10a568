"""Fixtures for API tests: the app with its use cases swapped for mocks."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import (
    get_available_lots_use_case,
    get_expiry_report_use_case,
    get_inventory_settings,
    get_location_inventory_use_case,
    get_lookups,
    get_order_inventory_use_case,
)
from src.api.main import app
from src.application.use_cases import (
    GetAvailableLotsUseCase,
    GetExpiryReportUseCase,
    GetLocationInventoryUseCase,
    GetOrderInventoryUseCase,
)
from src.config import InventorySettings
from src.core.services import InventoryLookupService

WAREHOUSE_ID = "wh-central"
WAREHOUSE_NAME = "Central Warehouse"


@pytest.fixture
def inventory_settings() -> InventorySettings:
    return InventorySettings(
        warehouse_location_id=WAREHOUSE_ID,
        warehouse_location_name=WAREHOUSE_NAME,
        expiry_days_threshold=90,
    )


@pytest.fixture
def mock_location_use_case():
    return AsyncMock(spec=GetLocationInventoryUseCase)


@pytest.fixture
def mock_lots_use_case():
    return AsyncMock(spec=GetAvailableLotsUseCase)


@pytest.fixture
def mock_expiry_use_case():
    return AsyncMock(spec=GetExpiryReportUseCase)


@pytest.fixture
def mock_order_use_case():
    return AsyncMock(spec=GetOrderInventoryUseCase)


@pytest.fixture
def mock_lookups():
    return AsyncMock(spec=InventoryLookupService)


@pytest.fixture
async def client(
    inventory_settings,
    mock_location_use_case,
    mock_lots_use_case,
    mock_expiry_use_case,
    mock_order_use_case,
    mock_lookups,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_inventory_settings] = lambda: inventory_settings
    app.dependency_overrides[get_location_inventory_use_case] = lambda: mock_location_use_case
    app.dependency_overrides[get_available_lots_use_case] = lambda: mock_lots_use_case
    app.dependency_overrides[get_expiry_report_use_case] = lambda: mock_expiry_use_case
    app.dependency_overrides[get_order_inventory_use_case] = lambda: mock_order_use_case
    app.dependency_overrides[get_lookups] = lambda: mock_lookups

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
