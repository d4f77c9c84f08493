# ============================================================================
# SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - DDL generation and type mapping
# PURPOSE: Pure (no I/O) translation from table descriptions to PostgreSQL DDL
# CREATED: 14 OCT 2026
# ============================================================================

from core.schema.type_mapper import (
    TYPE_MAP,
    NATIVE_TYPE_MAP,
    to_native_type,
    from_native_type,
)
from core.schema.ddl_builder import build_create, build_drop, render

__all__ = [
    # Type mapping
    "TYPE_MAP",
    "NATIVE_TYPE_MAP",
    "to_native_type",
    "from_native_type",
    # DDL
    "build_create",
    "build_drop",
    "render",
]
