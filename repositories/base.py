# ============================================================================
# BASE REPOSITORY - ERROR HANDLING AND CONNECTION PATTERNS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Repository - Base repository patterns
# PURPOSE: Driver-error translation and connection borrowing for repositories
# CREATED: 14 OCT 2026
# ============================================================================
"""
Base Repository Patterns

- driver_errors(): converts psycopg errors into ExecutionError so no raw
  driver error crosses the component boundary
- BaseRepository: pool holder that can reuse a caller's connection (to run
  inside the caller's transaction) or borrow its own
"""

from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Optional

import psycopg
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from core.errors import ExecutionError, SchemaError
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.REPOSITORY)


@contextmanager
def driver_errors(operation: str, table_name: Optional[str] = None):
    """
    Translate psycopg errors raised inside the block.

    SchemaError subclasses pass through untouched. The driver message is kept
    verbatim so the operator sees what PostgreSQL said.

    Example:
        with driver_errors("create", "people"):
            await conn.execute(stmt)
    """
    try:
        yield
    except SchemaError:
        raise
    except psycopg.Error as e:
        message = str(e).strip() or e.__class__.__name__
        sqlstate = getattr(e, "sqlstate", None)
        error_msg = f"{operation} failed"
        if table_name:
            error_msg += f" for {table_name}"
        logger.error(f"{error_msg}: {message} (sqlstate={sqlstate})")
        raise ExecutionError(
            message,
            operation=operation,
            table_name=table_name,
            sqlstate=sqlstate,
        ) from e


class BaseRepository:
    """
    Base for repositories backed by an AsyncConnectionPool.

    Subclasses implement the queries; this class owns connection borrowing.
    """

    def __init__(self, pool: AsyncConnectionPool):
        self.pool = pool
        self.logger = get_logger(self.__class__.__name__, ComponentType.REPOSITORY)

    @asynccontextmanager
    async def _connection(
        self, conn: Optional[AsyncConnection] = None
    ) -> AsyncIterator[AsyncConnection]:
        """
        Yield the caller's connection, or borrow one from the pool.

        A borrowed connection is returned to the pool on every exit path.
        """
        if conn is not None:
            yield conn
        else:
            async with self.pool.connection() as borrowed:
                yield borrowed


__all__ = [
    "BaseRepository",
    "driver_errors",
]
