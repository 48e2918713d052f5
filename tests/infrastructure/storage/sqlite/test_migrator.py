"""Tests for the schema migrator."""

from pathlib import Path

import aiosqlite

from src.infrastructure.storage.sqlite.migrations import (
    REQUIRED_TABLES,
    discover_migrations,
    get_migration_status,
    initialize_database,
    verify_schema_integrity,
)


class TestDiscoverMigrations:
    def test_finds_initial_schema(self):
        migrations = discover_migrations()
        assert migrations[0].version == "001"
        assert migrations[0].name == "initial_schema"
        assert len(migrations[0].checksum) == 16


class TestInitializeDatabase:
    async def test_creates_required_tables(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path, create_backup_before=False)
        assert results and all(r.success for r in results)

        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = {row[0] for row in await cursor.fetchall()}
        assert set(REQUIRED_TABLES) <= tables

    async def test_seeds_invoice_counter(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)

        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute(
                "SELECT value FROM invoice_counters WHERE name = 'invoice'"
            )
            assert (await cursor.fetchone())[0] == 0

    async def test_idempotent(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)
        second = await initialize_database(temp_db_path)

        assert second == []
        assert list(temp_db_path.parent.glob("*.backup_*")) == []

    async def test_status_and_integrity(self, temp_db_path: Path):
        status = await get_migration_status(temp_db_path)
        assert status["exists"] is False

        await initialize_database(temp_db_path, create_backup_before=False)
        status = await get_migration_status(temp_db_path)
        assert status["current_version"] == "001"
        assert status["pending_migrations"] == []

        checks = await verify_schema_integrity(temp_db_path)
        assert all(c["status"] == "PASS" for c in checks)
