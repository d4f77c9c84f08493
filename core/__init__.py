# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core module initialization
# PURPOSE: Export table models, errors and DDL utilities
# CREATED: 14 OCT 2026
# ============================================================================

from core.errors import (
    SchemaError,
    ValidationError,
    UnsupportedTypeError,
    ExecutionError,
    NotFoundError,
)
from core.models import (
    FieldType,
    UnknownType,
    FieldDescription,
    TableDescription,
    validate_for_create,
)
from core.schema import build_create, build_drop, to_native_type, from_native_type

__all__ = [
    # Errors
    "SchemaError",
    "ValidationError",
    "UnsupportedTypeError",
    "ExecutionError",
    "NotFoundError",
    # Models
    "FieldType",
    "UnknownType",
    "FieldDescription",
    "TableDescription",
    "validate_for_create",
    # Schema
    "build_create",
    "build_drop",
    "to_native_type",
    "from_native_type",
]
