# ============================================================================
# SCHEMA MANAGER SERVICE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Service - Table definition lifecycle
# PURPOSE: Create, read, replace, delete and list tables in the working schema
# CREATED: 14 OCT 2026
# ============================================================================
"""
SchemaManager

Orchestration layer over the DDL builder and the catalog repository.

Rules:
- Validation runs before any connection is borrowed.
- Each operation borrows one pooled connection and returns it on every exit
  path (success, validation failure, execution failure).
- DDL runs inside a transaction. Replace is drop + create in ONE transaction:
  if the create fails the drop is rolled back and the old table survives.
  Data in the replaced table is always lost on success.
- Delete is DROP ... IF EXISTS ... CASCADE: idempotent, removes dependent
  views and foreign keys without confirmation.
- No metadata is cached between calls.

Pattern: Constructor injection of AsyncConnectionPool, repo instantiated in
__init__, async methods.
"""

from typing import List, Optional, Sequence

from psycopg import sql
from psycopg_pool import AsyncConnectionPool

from core.config import get_defaults
from core.errors import NotFoundError, ValidationError
from core.logging import ComponentType, get_logger, log_context
from core.models.table import TableDescription, validate_for_create
from core.schema.ddl_builder import build_create, build_drop, render
from repositories.base import driver_errors
from repositories.catalog_repo import CatalogRepository

logger = get_logger(__name__, ComponentType.SERVICE)


class SchemaManager:
    """Request-scoped operations over table definitions."""

    def __init__(self, pool: AsyncConnectionPool, schema: Optional[str] = None):
        self.pool = pool
        self.schema = schema or get_defaults().database.schema_name
        self.catalog = CatalogRepository(pool, self.schema)

    # ================================================================
    # READ
    # ================================================================

    async def list_tables(self) -> List[str]:
        """List base tables in the working schema, alphabetically."""
        with log_context(operation="list_tables"):
            tables = await self.catalog.list_tables()
            logger.debug(f"Found {len(tables)} tables in schema {self.schema}")
            return tables

    async def read(self, name: str) -> TableDescription:
        """
        Describe a table from the live catalog.

        Raises:
            ValidationError: Empty name
            NotFoundError: No base table with this name
            ExecutionError: Catalog query failed
        """
        with log_context(table_name=name, operation="read"):
            if not name:
                raise ValidationError("Table name must not be empty")

            desc = await self.catalog.describe_table(name)
            if desc is None:
                logger.info(f"Table {name} not found in schema {self.schema}")
                raise NotFoundError(name)
            return desc

    # Alias
    describe = read

    # ================================================================
    # WRITE
    # ================================================================

    async def create(self, desc: TableDescription) -> None:
        """
        Create a table.

        Raises:
            ValidationError: Description invalid; no connection borrowed
            ExecutionError: Database rejected the statement (e.g. duplicate)
        """
        with log_context(table_name=desc.name, operation="create"):
            validate_for_create(desc)
            stmt = build_create(desc, self.schema)

            await self._execute("create", desc.name, [stmt])
            logger.info(
                f"Created table {desc.name} with {len(desc.fields)} fields",
                extra={"primary_key": desc.primary_key_field},
            )

    async def replace(self, desc: TableDescription) -> None:
        """
        Replace a table definition by dropping and recreating it.

        Existing rows and columns are discarded. Both statements share one
        transaction, so a failed create leaves the original table in place.
        Replacing an absent table just creates it.

        Raises:
            ValidationError: Description invalid; nothing dropped
            ExecutionError: Database rejected drop or create (rolled back)
        """
        with log_context(table_name=desc.name, operation="replace"):
            validate_for_create(desc)
            drop_stmt = build_drop(desc.name, self.schema)
            create_stmt = build_create(desc, self.schema)

            logger.warning(f"Replacing table {desc.name}: existing data will be discarded")
            await self._execute("replace", desc.name, [drop_stmt, create_stmt])
            logger.info(f"Replaced table {desc.name} with {len(desc.fields)} fields")

    async def delete(self, name: str) -> None:
        """
        Drop a table and everything that depends on it.

        Idempotent: dropping an absent table succeeds.

        Raises:
            ValidationError: Empty name
            ExecutionError: Database rejected the drop
        """
        with log_context(table_name=name, operation="delete"):
            stmt = build_drop(name, self.schema)

            await self._execute("delete", name, [stmt])
            logger.info(f"Dropped table {name} (if it existed)")

    # ================================================================
    # EXECUTION
    # ================================================================

    async def _execute(
        self,
        operation: str,
        table_name: str,
        statements: Sequence[sql.Composable],
    ) -> None:
        """Run statements in one transaction on a borrowed connection."""
        with driver_errors(operation, table_name):
            async with self.pool.connection() as conn:
                async with conn.transaction():
                    for stmt in statements:
                        logger.debug(f"Executing: {render(stmt)}")
                        await conn.execute(stmt)


__all__ = ["SchemaManager"]
