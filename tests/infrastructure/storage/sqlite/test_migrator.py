"""Unit tests for database migrator."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import aiosqlite
import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    MigrationInfo,
    MigrationResult,
    create_backup,
    discover_migrations,
    get_applied_migrations,
    get_current_version,
    get_migration_status,
    initialize_database,
    restore_backup,
    verify_schema_integrity,
)

MIGRATOR = "src.infrastructure.storage.sqlite.migrations.migrator"

SCHEMA_MIGRATIONS_DDL = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    checksum TEXT NOT NULL,
    execution_time_ms INTEGER DEFAULT 0,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


class TestMigrationInfo:
    """Tests for MigrationInfo dataclass."""

    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("-- Test migration\nSELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert info.path == migration_file
        assert len(info.checksum) == 16  # First 16 chars of SHA-256

    def test_different_content_different_checksum(self, tmp_path: Path):
        file1 = tmp_path / "v001_test1.sql"
        file1.write_text("SELECT 1;")
        file2 = tmp_path / "v002_test2.sql"
        file2.write_text("SELECT 2;")

        assert MigrationInfo.from_file(file1).checksum != MigrationInfo.from_file(file2).checksum

    @pytest.mark.parametrize("filename", ["invalid_migration.sql", "v_no_number.sql"])
    def test_invalid_filename_raises(self, tmp_path: Path, filename: str):
        invalid_file = tmp_path / filename
        invalid_file.write_text("SELECT 1;")

        with pytest.raises(ValueError, match="Invalid migration filename"):
            MigrationInfo.from_file(invalid_file)


class TestMigrationResult:
    def test_failed_result(self):
        result = MigrationResult(
            version="001",
            name="test",
            success=False,
            execution_time_ms=50,
            error="SQL syntax error",
        )
        assert result.success is False
        assert result.error == "SQL syntax error"


class TestVersionQueries:
    """Tests for get_applied_migrations() and get_current_version()."""

    async def test_empty_database(self, tmp_path: Path):
        async with aiosqlite.connect(tmp_path / "test.db") as conn:
            assert await get_applied_migrations(conn) == {}
            assert await get_current_version(conn) is None

    async def test_applied_and_current(self, tmp_path: Path):
        async with aiosqlite.connect(tmp_path / "test.db") as conn:
            await conn.executescript(SCHEMA_MIGRATIONS_DDL)
            await conn.executemany(
                "INSERT INTO schema_migrations (version, name, checksum) VALUES (?, ?, ?)",
                [("001", "first", "abc123"), ("002", "second", "def456")],
            )
            await conn.commit()

            assert await get_applied_migrations(conn) == {"001": "abc123", "002": "def456"}
            assert await get_current_version(conn) == "002"


class TestDiscoverMigrations:
    """Tests for discover_migrations()."""

    def test_bundled_schema_is_found(self):
        versions = [m.version for m in discover_migrations()]
        assert versions[0] == "001"

    def test_returns_empty_when_no_migrations(self, tmp_path: Path):
        assert discover_migrations(tmp_path) == []

    def test_sorted_and_invalid_skipped(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 2;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "v_bad.sql").write_text("SELECT 3;")
        (tmp_path / "readme.txt").write_text("Not a migration")

        with patch(f"{MIGRATOR}.MIGRATIONS_DIR", tmp_path):
            result = discover_migrations()

        assert [m.name for m in result] == ["first", "second"]


class TestBackups:
    def test_creates_backup_file(self, tmp_path: Path):
        db_path = tmp_path / "test.db"
        db_path.write_text("database content")

        backup_path = create_backup(db_path)

        assert backup_path.exists()
        assert backup_path.read_text() == "database content"
        assert ".backup_" in backup_path.name

    def test_restores_from_backup(self, tmp_path: Path):
        db_path = tmp_path / "test.db"
        backup_path = tmp_path / "test.backup.db"
        db_path.write_text("corrupted")
        backup_path.write_text("original content")

        restore_backup(db_path, backup_path)

        assert db_path.read_text() == "original content"


class TestInitializeDatabase:
    """Tests for initialize_database()."""

    async def test_applies_bundled_schema(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path, create_backup_before=False)

        assert [r.success for r in results] == [True]
        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = {row[0] for row in await cursor.fetchall()}
        assert set(REQUIRED_TABLES) <= tables

    async def test_second_run_is_noop(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)
        assert await initialize_database(temp_db_path, create_backup_before=False) == []

    async def test_backup_removed_after_success(self, initialized_db: Path):
        await initialize_database(initialized_db, create_backup_before=True)

        assert list(initialized_db.parent.glob("*.backup_*")) == []

    async def test_changed_checksum_stops_run(self, initialized_db: Path, tmp_path: Path):
        migrations_dir = tmp_path / "migrations"
        migrations_dir.mkdir()
        (migrations_dir / "v001_inventory_schema.sql").write_text("-- edited\nSELECT 1;")
        (migrations_dir / "v002_next.sql").write_text("CREATE TABLE extra (id INTEGER);")

        with (
            patch(f"{MIGRATOR}.MIGRATIONS_DIR", migrations_dir),
            patch(f"{MIGRATOR}.logger") as mock_logger,
        ):
            results = await initialize_database(initialized_db, create_backup_before=False)

        assert results == []
        assert mock_logger.error.call_args.args[0] == "migration_checksum_changed"

    async def test_failed_migration_reported(self, temp_db_path: Path, tmp_path: Path):
        migrations_dir = tmp_path / "migrations"
        migrations_dir.mkdir()
        (migrations_dir / "v001_base.sql").write_text(SCHEMA_MIGRATIONS_DDL)
        (migrations_dir / "v002_broken.sql").write_text("THIS IS NOT SQL;")
        (migrations_dir / "v003_never.sql").write_text("SELECT 1;")

        with patch(f"{MIGRATOR}.MIGRATIONS_DIR", migrations_dir):
            results = await initialize_database(temp_db_path, create_backup_before=False)

        assert [(r.version, r.success) for r in results] == [("001", True), ("002", False)]
        assert results[1].error

    async def test_default_path_from_settings(self, tmp_path: Path):
        db_path = tmp_path / "nested" / "inventory.db"
        mock_settings = MagicMock()
        mock_settings.storage.db_path = db_path

        with patch(f"{MIGRATOR}.get_settings", return_value=mock_settings):
            await initialize_database(create_backup_before=False)

        assert db_path.exists()


class TestGetMigrationStatus:
    async def test_not_exists(self, tmp_path: Path):
        result = await get_migration_status(tmp_path / "nonexistent.db")

        assert result["exists"] is False
        assert result["current_version"] is None

    async def test_up_to_date(self, initialized_db: Path):
        result = await get_migration_status(initialized_db)

        assert result["exists"] is True
        assert result["current_version"] == "001"
        assert result["pending_migrations"] == []

    async def test_pending(self, initialized_db: Path, tmp_path: Path):
        migrations_dir = tmp_path / "migrations"
        migrations_dir.mkdir()
        (migrations_dir / "v001_inventory_schema.sql").write_text("SELECT 1;")
        (migrations_dir / "v002_pending.sql").write_text("SELECT 2;")

        with patch(f"{MIGRATOR}.MIGRATIONS_DIR", migrations_dir):
            result = await get_migration_status(initialized_db)

        assert result["applied_migrations"] == ["001"]
        assert result["pending_migrations"] == ["002"]


class TestVerifySchemaIntegrity:
    async def test_migrated_database_passes(self, initialized_db: Path):
        checks = await verify_schema_integrity(initialized_db)

        assert {c["check"]: c["status"] for c in checks} == {
            "foreign_keys": "PASS",
            "integrity": "PASS",
            "required_tables": "PASS",
        }

    async def test_missing_tables_reported(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("CREATE TABLE clients (id TEXT PRIMARY KEY)")
            await conn.commit()

        checks = await verify_schema_integrity(temp_db_path)

        tables_check = next(c for c in checks if c["check"] == "required_tables")
        assert tables_check["status"] == "FAIL"
        assert "stock_movements" in tables_check["missing"]
