# ============================================================================
# REPOSITORIES MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Database access layer
# PURPOSE: Connection pool and catalog introspection
# CREATED: 14 OCT 2026
# ============================================================================
"""
Repositories Module

Database access for the schema manager.
Uses psycopg3 async with connection pooling.

Usage:
    from repositories import CatalogRepository, DatabasePool

    async with DatabasePool() as pool:
        catalog = CatalogRepository(pool)
        tables = await catalog.list_tables()
"""

from .database import init_pool, close_pool, DatabasePool
from .base import BaseRepository, driver_errors
from .catalog_repo import CatalogRepository

__all__ = [
    "init_pool",
    "close_pool",
    "DatabasePool",
    "BaseRepository",
    "driver_errors",
    "CatalogRepository",
]
