# ============================================================================
# CATALOG REPOSITORY TESTS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Tests - information_schema introspection with a mocked pool
# PURPOSE: Verify query parameters, row mapping and error translation
# CREATED: 14 OCT 2026
# ============================================================================
"""
Catalog Repository Tests

Run with:
    pytest tests/test_catalog_repo.py -v
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import psycopg
import pytest

from core.errors import ExecutionError
from core.models.table import FieldType, UnknownType
from repositories.catalog_repo import (
    COLUMNS_SQL,
    LIST_TABLES_SQL,
    PRIMARY_KEY_SQL,
    TABLE_EXISTS_SQL,
    CatalogRepository,
)


# ============================================================================
# HELPERS
# ============================================================================

def _async_cm(value):
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=value)
    cm.__aexit__ = AsyncMock(return_value=False)
    return cm


def _make_pool(*results):
    """Pool whose cursor returns each result set in turn from fetchall()."""
    cur = MagicMock()
    cur.execute = AsyncMock()
    cur.fetchall = AsyncMock(side_effect=list(results))

    conn = MagicMock()
    conn.cursor = MagicMock(return_value=_async_cm(cur))

    pool = MagicMock()
    pool.connection = MagicMock(return_value=_async_cm(conn))
    return pool, conn, cur


def _column(name, data_type, is_nullable="YES", column_default=None):
    return {
        "column_name": name,
        "data_type": data_type,
        "is_nullable": is_nullable,
        "column_default": column_default,
    }


PEOPLE_COLUMNS = [
    _column("id", "integer", "NO"),
    _column("name", "text"),
    _column("created", "timestamp without time zone"),
]


# ============================================================================
# LIST
# ============================================================================

class TestListTables:
    def test_returns_names_in_order(self):
        pool, _, cur = _make_pool([{"table_name": "alpha"}, {"table_name": "beta"}])
        repo = CatalogRepository(pool, schema="public")

        tables = asyncio.run(repo.list_tables())

        assert tables == ["alpha", "beta"]
        cur.execute.assert_awaited_once_with(LIST_TABLES_SQL, ("public",))

    def test_empty_schema(self):
        pool, _, _ = _make_pool([])
        assert asyncio.run(CatalogRepository(pool).list_tables()) == []

    def test_query_restricts_to_base_tables(self):
        assert "'BASE TABLE'" in LIST_TABLES_SQL
        assert "ORDER BY table_name" in LIST_TABLES_SQL

    def test_driver_error_translated(self):
        pool, _, cur = _make_pool()
        cur.execute.side_effect = psycopg.OperationalError("connection refused")
        repo = CatalogRepository(pool)

        with pytest.raises(ExecutionError) as exc:
            asyncio.run(repo.list_tables())

        assert "connection refused" in exc.value.message
        assert exc.value.operation == "list_tables"
        assert isinstance(exc.value.__cause__, psycopg.OperationalError)


# ============================================================================
# DESCRIBE
# ============================================================================

class TestDescribeTable:
    def test_people(self):
        pool, _, cur = _make_pool(
            [{"present": 1}],
            PEOPLE_COLUMNS,
            [{"column_name": "id"}],
        )
        repo = CatalogRepository(pool, schema="public")

        desc = asyncio.run(repo.describe_table("people"))

        assert desc.name == "people"
        assert desc.primary_key_field == "id"
        assert desc.field_names == ["id", "name", "created"]
        assert [f.type for f in desc.fields] == [
            FieldType.INTEGER,
            FieldType.TEXT,
            FieldType.TIMESTAMP,
        ]
        assert desc.fields[0].nullable is False
        assert desc.fields[1].nullable is True
        assert desc.fields[2].native_type == "timestamp without time zone"

        calls = cur.execute.await_args_list
        assert calls[0].args == (TABLE_EXISTS_SQL, ("public", "people"))
        assert calls[1].args == (COLUMNS_SQL, ("public", "people"))
        assert calls[2].args == (PRIMARY_KEY_SQL, ("public", "people"))

    def test_queries_share_one_connection(self):
        pool, _, _ = _make_pool([{"present": 1}], PEOPLE_COLUMNS, [])
        asyncio.run(CatalogRepository(pool).describe_table("people"))
        assert pool.connection.call_count == 1

    def test_absent_returns_none(self):
        pool, _, cur = _make_pool([])
        desc = asyncio.run(CatalogRepository(pool).describe_table("ghost"))
        assert desc is None
        assert cur.execute.await_count == 1

    def test_zero_columns_is_not_absent(self):
        pool, _, _ = _make_pool([{"present": 1}], [], [])
        desc = asyncio.run(CatalogRepository(pool).describe_table("hollow"))
        assert desc is not None
        assert desc.fields == []
        assert desc.primary_key_field is None

    def test_unknown_native_type(self):
        pool, _, _ = _make_pool(
            [{"present": 1}],
            [_column("id", "integer", "NO"), _column("payload", "jsonb")],
            [],
        )
        desc = asyncio.run(CatalogRepository(pool).describe_table("events"))

        payload = desc.get_field("payload")
        assert payload.type is UnknownType.UNKNOWN
        assert payload.native_type == "jsonb"

    def test_composite_key_reports_first_column(self):
        pool, _, _ = _make_pool(
            [{"present": 1}],
            [_column("a", "integer", "NO"), _column("b", "integer", "NO")],
            [{"column_name": "a"}, {"column_name": "b"}],
        )
        desc = asyncio.run(CatalogRepository(pool).describe_table("pairs"))
        assert desc.primary_key_field == "a"

    def test_schema_is_bound_not_interpolated(self):
        pool, _, cur = _make_pool([])
        asyncio.run(CatalogRepository(pool, schema="app").describe_table("x"))
        query, params = cur.execute.await_args.args
        assert "app" not in query
        assert params == ("app", "x")

    def test_logs_as_repository_component(self):
        pool, _, _ = _make_pool()
        assert CatalogRepository(pool).logger.extra["component"] == "repository"

    def test_reuses_caller_connection(self):
        pool, conn, _ = _make_pool([{"present": 1}], PEOPLE_COLUMNS, [])
        repo = CatalogRepository(pool)

        asyncio.run(repo.describe_table("people", conn=conn))

        pool.connection.assert_not_called()

    def test_driver_error_carries_table_name(self):
        pool, _, cur = _make_pool()
        cur.execute.side_effect = psycopg.errors.InsufficientPrivilege("permission denied")

        with pytest.raises(ExecutionError) as exc:
            asyncio.run(CatalogRepository(pool).describe_table("secret"))

        assert exc.value.table_name == "secret"
        assert exc.value.sqlstate == "42501"
