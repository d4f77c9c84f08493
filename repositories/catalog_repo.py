# ============================================================================
# CATALOG REPOSITORY
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Repository - information_schema introspection
# PURPOSE: Reconstruct table descriptions from the live database catalog
# CREATED: 14 OCT 2026
# ============================================================================
"""
Catalog Repository

Reads the standard information_schema views (tables, columns,
table_constraints, key_column_usage) for one working schema. Read-only, but
every query still binds the table name as a parameter.

Nothing is cached: each call re-queries the catalog, because other agents
may issue DDL at any time.

Usage:
    catalog = CatalogRepository(pool, schema="public")
    names = await catalog.list_tables()
    desc = await catalog.describe_table("people")   # None if absent
"""

from typing import Any, Dict, List, Optional

from psycopg import AsyncConnection
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from core.models.table import FieldDescription, TableDescription
from core.schema.type_mapper import from_native_type
from .base import BaseRepository, driver_errors


# ============================================================================
# QUERIES
# ============================================================================

LIST_TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = %s AND table_type = 'BASE TABLE'
    ORDER BY table_name
"""

TABLE_EXISTS_SQL = """
    SELECT 1 AS present
    FROM information_schema.tables
    WHERE table_schema = %s AND table_name = %s AND table_type = 'BASE TABLE'
"""

COLUMNS_SQL = """
    SELECT column_name, data_type, is_nullable, column_default
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
    ORDER BY ordinal_position
"""

PRIMARY_KEY_SQL = """
    SELECT kcu.column_name
    FROM information_schema.table_constraints tc
    JOIN information_schema.key_column_usage kcu
      ON kcu.constraint_name = tc.constraint_name
     AND kcu.constraint_schema = tc.constraint_schema
     AND kcu.table_name = tc.table_name
    WHERE tc.constraint_type = 'PRIMARY KEY'
      AND tc.table_schema = %s
      AND tc.table_name = %s
    ORDER BY kcu.ordinal_position
"""


class CatalogRepository(BaseRepository):
    """Introspects base tables of one schema."""

    def __init__(self, pool: AsyncConnectionPool, schema: str = "public"):
        super().__init__(pool)
        self.schema = schema

    async def _fetch_all(
        self,
        query: str,
        params: tuple,
        conn: Optional[AsyncConnection] = None,
    ) -> List[Dict[str, Any]]:
        async with self._connection(conn) as c:
            async with c.cursor(row_factory=dict_row) as cur:
                await cur.execute(query, params)
                return await cur.fetchall()

    async def list_tables(self, conn: Optional[AsyncConnection] = None) -> List[str]:
        """
        List base tables in the working schema, alphabetically.

        Views, foreign tables and system catalogs are excluded.
        """
        with driver_errors("list_tables"):
            rows = await self._fetch_all(LIST_TABLES_SQL, (self.schema,), conn)
        return [row["table_name"] for row in rows]

    async def table_exists(self, name: str, conn: Optional[AsyncConnection] = None) -> bool:
        """Check whether a base table with this exact name exists."""
        with driver_errors("table_exists", name):
            rows = await self._fetch_all(TABLE_EXISTS_SQL, (self.schema, name), conn)
        return len(rows) > 0

    async def get_columns(
        self, name: str, conn: Optional[AsyncConnection] = None
    ) -> List[FieldDescription]:
        """
        Get columns in catalog (ordinal) order.

        Native types outside the supported set map to UnknownType.UNKNOWN.
        """
        with driver_errors("get_columns", name):
            rows = await self._fetch_all(COLUMNS_SQL, (self.schema, name), conn)

        return [self._row_to_field(row) for row in rows]

    async def get_primary_key(
        self, name: str, conn: Optional[AsyncConnection] = None
    ) -> Optional[str]:
        """
        Get the primary-key column name, if any.

        Only the first key column is reported; composite keys are not
        produced by this tool.
        """
        with driver_errors("get_primary_key", name):
            rows = await self._fetch_all(PRIMARY_KEY_SQL, (self.schema, name), conn)

        if len(rows) > 1:
            self.logger.warning(
                f"Table {name} has a composite primary key, reporting "
                f"'{rows[0]['column_name']}' only"
            )
        return rows[0]["column_name"] if rows else None

    async def describe_table(
        self, name: str, conn: Optional[AsyncConnection] = None
    ) -> Optional[TableDescription]:
        """
        Reconstruct a table description from the catalog.

        Returns:
            TableDescription, or None if no such base table exists. A table
            that exists with zero columns yields an empty field list.
        """
        # All three queries share one connection
        with driver_errors("describe_table", name):
            async with self._connection(conn) as c:
                if not await self.table_exists(name, c):
                    return None

                fields = await self.get_columns(name, c)
                primary_key = await self.get_primary_key(name, c)

        self.logger.debug(f"Described {self.schema}.{name}: {len(fields)} columns")
        return TableDescription(
            name=name,
            primary_key_field=primary_key,
            fields=fields,
        )

    @staticmethod
    def _row_to_field(row: Dict[str, Any]) -> FieldDescription:
        native_type = row["data_type"]
        return FieldDescription(
            name=row["column_name"],
            type=from_native_type(native_type),
            native_type=native_type,
            nullable=str(row.get("is_nullable", "YES")).upper() == "YES",
            default=row.get("column_default"),
        )


__all__ = ["CatalogRepository"]
