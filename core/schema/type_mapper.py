# ============================================================================
# TYPE MAPPER
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Abstract <-> PostgreSQL type mapping
# PURPOSE: Bidirectional mapping between FieldType and native column types
# CREATED: 14 OCT 2026
# EXPORTS: TYPE_MAP, NATIVE_TYPE_MAP, to_native_type, from_native_type
# ============================================================================
"""
Type Mapper

Pure functions, no I/O.

Forward mapping (used when building CREATE TABLE) fails loudly on anything
outside FieldType. Inverse mapping (used when reading information_schema)
never fails: unrecognised native types come back as UnknownType.UNKNOWN so
tables created by other tools can still be described.

Usage:
    from core.schema.type_mapper import to_native_type, from_native_type

    to_native_type(FieldType.DOUBLE)        # "DOUBLE PRECISION"
    from_native_type("double precision")    # FieldType.DOUBLE
    from_native_type("jsonb")               # UnknownType.UNKNOWN
"""

from typing import Dict, Union

from core.errors import UnsupportedTypeError
from core.models.table import FieldType, UnknownType


# ============================================================================
# TYPE MAPPING
# ============================================================================

# FieldType -> DDL type name
TYPE_MAP: Dict[FieldType, str] = {
    FieldType.INTEGER: "INTEGER",
    FieldType.DOUBLE: "DOUBLE PRECISION",
    FieldType.TEXT: "TEXT",
    FieldType.TIMESTAMP: "TIMESTAMP",
}

# information_schema.columns.data_type (and the DDL spelling) -> FieldType
NATIVE_TYPE_MAP: Dict[str, FieldType] = {
    "integer": FieldType.INTEGER,
    "double precision": FieldType.DOUBLE,
    "text": FieldType.TEXT,
    "timestamp without time zone": FieldType.TIMESTAMP,
    "timestamp": FieldType.TIMESTAMP,
}


def to_native_type(field_type: FieldType) -> str:
    """
    Map an abstract field type to its PostgreSQL column type.

    Args:
        field_type: One of the four FieldType members

    Returns:
        PostgreSQL type name for CREATE TABLE

    Raises:
        UnsupportedTypeError: If field_type is not a FieldType member
    """
    if not isinstance(field_type, FieldType):
        raise UnsupportedTypeError(field_type)
    return TYPE_MAP[field_type]


def from_native_type(native_type: str) -> Union[FieldType, UnknownType]:
    """
    Map a catalog data_type string back to an abstract field type.

    Args:
        native_type: Value of information_schema.columns.data_type

    Returns:
        Matching FieldType, or UnknownType.UNKNOWN if there is none
    """
    if not isinstance(native_type, str):
        return UnknownType.UNKNOWN
    return NATIVE_TYPE_MAP.get(native_type.strip().lower(), UnknownType.UNKNOWN)


__all__ = [
    "TYPE_MAP",
    "NATIVE_TYPE_MAP",
    "to_native_type",
    "from_native_type",
]
