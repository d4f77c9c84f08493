# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Model exports
# PURPOSE: Central export point for table description models
# CREATED: 14 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models describing tables in a database-neutral way.
"""

from core.models.table import (
    FieldType,
    UnknownType,
    FieldDescription,
    TableDescription,
    MAX_IDENTIFIER_LENGTH,
    is_valid_identifier,
    validate_for_create,
)

__all__ = [
    "FieldType",
    "UnknownType",
    "FieldDescription",
    "TableDescription",
    "MAX_IDENTIFIER_LENGTH",
    "is_valid_identifier",
    "validate_for_create",
]
