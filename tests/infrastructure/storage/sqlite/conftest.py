"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import aiosqlite
import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database

WAREHOUSE_ID = "wh-central"
HOSPITAL_ID = "hosp-seoul"

CLIENTS = [
    ("C1", "Acme Medical"),
    ("C2", "Medico"),
]

LOCATIONS = [
    (WAREHOUSE_ID, "Central Warehouse", "warehouse", None),
    ("ward-3", None, "ward", "third floor"),
]

HOSPITALS = [
    (HOSPITAL_ID, "Seoul General"),
    ("hosp-busan", "Busan University"),
]

PRODUCTS = [
    ("P1", "X1", "UPN-1", "Balloon catheter", "C1"),
    ("P2", "DHC2508", None, None, "C2"),
    ("P3", "DHC2512", None, None, "C2"),
    ("P4", None, None, "Unlabelled", None),
]

# product, lot, ubd, qty, type, reason, from, to, created_at
MOVEMENTS = [
    ("P1", "A", "2025-06-01", 10, "in", "purchase", None, WAREHOUSE_ID, "2025-01-05T09:00:00.000"),
    ("P2", "B", "2025-03-11", 4, "in", "purchase", None, WAREHOUSE_ID, "2025-01-06T09:00:00.000"),
    ("P1", "A", "2025-06-01", 3, "out", "sale", WAREHOUSE_ID, HOSPITAL_ID, "2025-01-07T09:00:00.000"),
    ("P1", "A", "2025-06-01", 1, "out", "usage", HOSPITAL_ID, None, "2024-06-01T09:00:00.000"),
    ("P1", "A", "2025-06-01", 2, "out", "usage", HOSPITAL_ID, None, "2025-01-08T09:00:00.000"),
    ("P3", "C", "2026-01-01", 5, "in", "purchase", None, "ward-3", "2025-01-09T09:00:00.000"),
]


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> Path:
    """Temporary database with the full migrated schema and no rows."""
    await initialize_database(temp_db_path, create_backup_before=False)
    return temp_db_path


@pytest.fixture
async def seeded_db(initialized_db: Path) -> Path:
    """Migrated database holding a small catalog and ledger."""
    async with aiosqlite.connect(initialized_db) as conn:
        await conn.executemany("INSERT INTO clients (id, company_name) VALUES (?, ?)", CLIENTS)
        await conn.executemany(
            "INSERT INTO locations (id, location_name, location_type, notes) VALUES (?, ?, ?, ?)",
            LOCATIONS,
        )
        await conn.executemany("INSERT INTO hospitals (id, hospital_name) VALUES (?, ?)", HOSPITALS)
        await conn.executemany(
            "INSERT INTO products (id, cfn, upn, description, client_id) VALUES (?, ?, ?, ?, ?)",
            PRODUCTS,
        )
        await conn.executemany(
            """
            INSERT INTO stock_movements (
                product_id, lot_number, ubd_date, quantity, movement_type,
                movement_reason, from_location_id, to_location_id, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            MOVEMENTS,
        )
        await conn.commit()
    return initialized_db


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    mock.storage.read_only = False
    return mock


@pytest.fixture
async def db_pool(seeded_db: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Point the global connection pool at the seeded database."""
    import src.infrastructure.storage.sqlite.connection as conn_module

    conn_module._pool = None
    mock_settings.storage.db_path = seeded_db

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        yield seeded_db
        await conn_module.close_pool()
