"""Tests for GetLocationInventoryUseCase."""

from unittest.mock import AsyncMock, patch

import pytest

from src.application.use_cases.location_inventory import GetLocationInventoryUseCase
from src.core.entities import InventoryCalculationOptions, SortBy
from src.core.exceptions import ValidationError
from src.core.services import InventoryLookupService

LOCATION = "L1"


@pytest.fixture
def lookups(product_map, client_map):
    mock = AsyncMock(spec=InventoryLookupService)
    mock.build_product_map.return_value = product_map
    mock.build_client_map.return_value = client_map
    return mock


@pytest.fixture
def use_case(lookups):
    return GetLocationInventoryUseCase(lookups=lookups)


class TestGetLocationInventoryUseCase:
    async def test_blank_location_rejected(self, use_case, lookups):
        with pytest.raises(ValidationError):
            await use_case.execute("  ")
        lookups.fetch_stock_movements.assert_not_awaited()

    async def test_no_movements_skips_lookups(self, use_case, lookups):
        lookups.fetch_stock_movements.return_value = []

        result = await use_case.execute(LOCATION)

        assert result.inventory == []
        assert result.movement_count == 0
        lookups.build_product_map.assert_not_awaited()
        lookups.build_client_map.assert_not_awaited()

    async def test_snapshot_only_by_default(self, use_case, lookups, make_movement):
        lookups.fetch_stock_movements.return_value = [
            make_movement("P1", 5, to_location_id=LOCATION),
            make_movement("P1", 2, from_location_id=LOCATION),
            make_movement("P2", 3, lot_number="B", to_location_id=LOCATION),
        ]

        result = await use_case.execute(LOCATION)

        assert [(i.cfn, i.quantity) for i in result.inventory] == [("DHC2508", 3), ("X1", 3)]
        assert result.inventory[1].client_name == "Acme"
        assert result.movement_count == 3
        assert result.cfn_inventory == []
        assert result.available_stock == []
        assert result.exchange_inventory == []
        assert result.ubd_inventory == []

    async def test_product_map_built_from_movement_products(
        self, use_case, lookups, make_movement
    ):
        lookups.fetch_stock_movements.return_value = [
            make_movement("P1", 1, to_location_id=LOCATION),
            make_movement("P2", 1, to_location_id=LOCATION),
            make_movement("P1", 1, to_location_id=LOCATION),
        ]

        await use_case.execute(LOCATION)

        product_ids = list(lookups.build_product_map.await_args.args[0])
        assert product_ids == ["P1", "P2", "P1"]
        lookups.build_product_map.assert_awaited_once()

    async def test_options_are_forwarded(self, use_case, lookups, make_movement):
        lookups.fetch_stock_movements.return_value = [
            make_movement("P1", 5, to_location_id=LOCATION),
            make_movement("P2", 9, to_location_id=LOCATION),
        ]
        options = InventoryCalculationOptions(sort_by=SortBy.QUANTITY)

        result = await use_case.execute(LOCATION, options)

        assert [i.quantity for i in result.inventory] == [9, 5]

    async def test_all_derived_views(self, use_case, lookups, make_movement, fixed_now):
        lookups.fetch_stock_movements.return_value = [
            make_movement("P1", 4, ubd_date="2025-03-11", to_location_id=LOCATION),
            make_movement("P2", 2, ubd_date="2025-06-01", to_location_id=LOCATION),
        ]

        result = await use_case.execute(
            LOCATION,
            include_cfn=True,
            include_available=True,
            include_exchange=True,
            include_ubd=True,
            location_name="Ward 3",
            now=fixed_now,
        )

        assert {i.cfn: i.total_quantity for i in result.cfn_inventory} == {
            "X1": 4, "DHC2508": 2, "DHC2512": 0,
        }
        assert [(s.cfn, s.total_quantity) for s in result.available_stock] == [
            ("DHC2508", 2), ("X1", 4),
        ]
        assert {e.id for e in result.exchange_inventory} == {
            "P1-A-2025-03-11", "P2-A-2025-06-01",
        }
        assert [(u.cfn, u.days_until_expiry, u.location_name) for u in result.ubd_inventory] == [
            ("X1", 10, "Ward 3"), ("DHC2508", 92, "Ward 3"),
        ]

    async def test_logs_calculation(self, use_case, lookups, make_movement):
        lookups.fetch_stock_movements.return_value = [
            make_movement("P1", 1, to_location_id=LOCATION),
        ]

        with patch("src.application.use_cases.location_inventory.logger") as mock_logger:
            await use_case.execute(LOCATION)

        mock_logger.info.assert_called_once_with(
            "inventory_calculated", location_id=LOCATION, movements=1, rows=1,
        )

    async def test_lookups_resolved_lazily(self, lookups):
        use_case = GetLocationInventoryUseCase()
        lookups.fetch_stock_movements.return_value = []

        with patch(
            "src.application.services.get_inventory_lookup_service",
            AsyncMock(return_value=lookups),
        ):
            await use_case.execute(LOCATION)

        lookups.fetch_stock_movements.assert_awaited_once_with(LOCATION)
