# ============================================================================
# SCHEMA ERRORS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Error taxonomy for schema operations
# PURPOSE: Typed failures that cross the repository/service boundary
# CREATED: 14 OCT 2026
# ============================================================================
"""
Schema Errors

Every database-facing operation catches driver errors at its boundary and
re-raises one of these. Raw psycopg errors never reach the caller.

Hierarchy:
    SchemaError
    ├── ValidationError       - malformed input, no database call made
    ├── UnsupportedTypeError  - type mapper given a value outside FieldType
    ├── ExecutionError        - database rejected a statement
    └── NotFoundError         - introspection found no such table
"""

from typing import Any, List, Optional


class SchemaError(Exception):
    """Base exception for schema manager operations."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table_name: Optional[str] = None,
    ):
        self.message = message
        self.operation = operation
        self.table_name = table_name
        super().__init__(message)


class ValidationError(SchemaError, ValueError):
    """
    Raised when a table description is rejected before any database call.

    Subclasses ValueError so pydantic validators can raise it directly.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        table_name: Optional[str] = None,
    ):
        self.errors = errors or [message]
        super().__init__(message, operation="validate", table_name=table_name)

    @classmethod
    def from_errors(cls, errors: List[str], table_name: Optional[str] = None) -> "ValidationError":
        """Build a single error that reports every problem at once."""
        return cls("; ".join(errors), errors=list(errors), table_name=table_name)


class UnsupportedTypeError(SchemaError, TypeError):
    """Raised when the type mapper receives a value outside FieldType."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unsupported field type: {value!r}", operation="map_type")


class ExecutionError(SchemaError):
    """Raised when the database rejects a statement. Never retried."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table_name: Optional[str] = None,
        sqlstate: Optional[str] = None,
    ):
        self.sqlstate = sqlstate
        super().__init__(message, operation=operation, table_name=table_name)


class NotFoundError(SchemaError, LookupError):
    """Raised when the catalog has no base table with the requested name."""

    def __init__(self, table_name: str, operation: Optional[str] = "read"):
        super().__init__(
            f"Table '{table_name}' not found",
            operation=operation,
            table_name=table_name,
        )


__all__ = [
    "SchemaError",
    "ValidationError",
    "UnsupportedTypeError",
    "ExecutionError",
    "NotFoundError",
]
