# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Business logic layer
# PURPOSE: Table definition lifecycle
# CREATED: 14 OCT 2026
# ============================================================================
"""
Services Module

Business logic for the schema manager.
Services coordinate between the DDL builder and repositories.

Usage:
    from services import SchemaManager

    manager = SchemaManager(pool)
    await manager.create(desc)
"""

from .schema_manager import SchemaManager

__all__ = [
    "SchemaManager",
]
