"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime

import pytest

from src.application.services import reset_services
from src.config import reset_settings
from src.core.entities import Client, Hospital, Product, StockMovement

WAREHOUSE_ID = "wh-central"
HOSPITAL_ID = "hosp-seoul"


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Drop cached settings and services between tests."""
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_movement() -> Callable[..., StockMovement]:
    """Factory for ledger entries with sensible defaults."""

    def _make(
        product_id: str = "P1",
        quantity: int = 1,
        lot_number: str | None = "A",
        ubd_date: str | None = "2025-06-01",
        from_location_id: str | None = None,
        to_location_id: str | None = None,
        **kwargs,
    ) -> StockMovement:
        return StockMovement(
            product_id=product_id,
            quantity=quantity,
            lot_number=lot_number,
            ubd_date=ubd_date,
            from_location_id=from_location_id,
            to_location_id=to_location_id,
            **kwargs,
        )

    return _make


@pytest.fixture
def product_map() -> dict[str, Product]:
    return {
        "P1": Product(id="P1", cfn="X1", client_id="C1", description="Balloon catheter"),
        "P2": Product(id="P2", cfn="DHC2508", client_id="C2"),
        "P3": Product(id="P3", cfn="DHC2512", client_id="C2"),
        "P4": Product(id="P4", cfn=None, client_id="C1"),
    }


@pytest.fixture
def client_map() -> dict[str, Client]:
    return {
        "C1": Client(id="C1", company_name="Acme"),
        "C2": Client(id="C2", company_name="Medico"),
    }


@pytest.fixture
def hospitals() -> list[Hospital]:
    return [
        Hospital(id=HOSPITAL_ID, hospital_name="Seoul General"),
        Hospital(id="hosp-busan", hospital_name="Busan University"),
    ]
