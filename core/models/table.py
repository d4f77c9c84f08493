# ============================================================================
# TABLE DESCRIPTION MODELS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Domain model - Abstract table definitions
# PURPOSE: Language-agnostic description of a table (name, typed fields, PK)
# CREATED: 14 OCT 2026
# ============================================================================
"""
Table Description Models

A TableDescription is built transiently per operation: from an operator's
form submission (create / replace) or from the live catalog (read). It is
never persisted in-process; the database catalog is the only source of truth.

Example:
    people = TableDescription(
        name="people",
        primary_key_field="id",
        fields=[
            FieldDescription(name="id", type=FieldType.INTEGER),
            FieldDescription(name="name", type=FieldType.TEXT),
            FieldDescription(name="created", type=FieldType.TIMESTAMP),
        ],
    )
    validate_for_create(people)
"""

import re
from enum import Enum
from typing import Any, List, Optional, Union

import pydantic
from pydantic import BaseModel, Field, field_validator, model_validator

from core.errors import ValidationError


# PostgreSQL truncates identifiers longer than NAMEDATALEN - 1 bytes
MAX_IDENTIFIER_LENGTH = 63

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ============================================================================
# FIELD TYPES
# ============================================================================

class FieldType(str, Enum):
    """
    Closed set of column types an operator can choose.

    Values are the wire tags used by the form and the JSON API.
    """
    INTEGER = "int"
    DOUBLE = "double"
    TEXT = "text"
    TIMESTAMP = "timestamp"


class UnknownType(str, Enum):
    """
    Sentinel for native column types outside FieldType.

    Returned by introspection for tables created by other tools (json,
    bigint, ...). Never accepted for CREATE.
    """
    UNKNOWN = "unknown"


def is_valid_identifier(name: Optional[str]) -> bool:
    """Check a table or column name against the restricted identifier grammar."""
    if not name or len(name) > MAX_IDENTIFIER_LENGTH:
        return False
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def _error_messages(exc: pydantic.ValidationError) -> List[str]:
    """Flatten a pydantic error into plain messages, unwrapping our own ValidationError."""
    messages: List[str] = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if isinstance(cause, ValidationError):
            messages.extend(cause.errors)
            continue
        loc = ".".join(str(p) for p in err["loc"])
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


# ============================================================================
# MODELS
# ============================================================================

class FieldDescription(BaseModel):
    """One column of a table, in creation order."""

    name: str = Field(..., description="Column name, unique within its table")
    type: Union[FieldType, UnknownType] = Field(..., description="Abstract column type")

    # Populated by introspection only; the DDL builder ignores these
    native_type: Optional[str] = Field(default=None, description="Catalog data_type")
    nullable: bool = Field(default=True)
    default: Optional[str] = Field(default=None, description="Catalog column_default")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except pydantic.ValidationError as e:
            raise ValidationError.from_errors(_error_messages(e)) from e

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValidationError("Field name must not be empty")
        return v

    @property
    def is_supported(self) -> bool:
        return isinstance(self.type, FieldType)


class TableDescription(BaseModel):
    """
    Abstract description of a table.

    Structural invariants are enforced at construction; identifier grammar
    and the non-empty field list are create-time rules (validate_for_create)
    so that tables created outside this tool can still be described.
    """

    name: str = Field(..., description="Unqualified table name")
    primary_key_field: Optional[str] = Field(
        default=None,
        description="Name of the primary-key column, if any",
    )
    fields: List[FieldDescription] = Field(default_factory=list)

    def __init__(self, **data: Any):
        # Construction failures surface as ValidationError, never pydantic's own
        try:
            super().__init__(**data)
        except pydantic.ValidationError as e:
            raise ValidationError.from_errors(
                _error_messages(e), table_name=data.get("name") or None
            ) from e

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValidationError("Table name must not be empty")
        return v

    @field_validator("primary_key_field", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v):
        # "" means no primary key
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _check_structure(self) -> "TableDescription":
        errors = _structural_errors(self)
        if errors:
            raise ValidationError.from_errors(errors, table_name=self.name)
        return self

    # ----------------------------------------------------------------
    # Convenience
    # ----------------------------------------------------------------

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldDescription]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


# ============================================================================
# VALIDATION
# ============================================================================

def _structural_errors(desc: TableDescription) -> List[str]:
    errors: List[str] = []

    seen = set()
    for f in desc.fields:
        if f.name in seen:
            errors.append(f"Duplicate field name '{f.name}'")
        seen.add(f.name)

    if desc.primary_key_field is not None and desc.primary_key_field not in seen:
        errors.append(
            f"Primary key '{desc.primary_key_field}' does not match any field"
        )

    return errors


def validate_for_create(desc: TableDescription) -> None:
    """
    Validate a description before it is turned into CREATE TABLE.

    Collects all problems and raises a single ValidationError listing them.
    Also re-checks structure, since model_construct() skips validators.

    Raises:
        ValidationError: If any rule is violated.
    """
    errors: List[str] = []

    if not is_valid_identifier(desc.name):
        errors.append(
            f"Invalid table name {desc.name!r}: use letters, digits and "
            f"underscores, not starting with a digit, at most "
            f"{MAX_IDENTIFIER_LENGTH} characters"
        )

    if not desc.fields:
        errors.append("A table needs at least one field")

    for f in desc.fields:
        if not is_valid_identifier(f.name):
            errors.append(f"Invalid field name {f.name!r}")
        if not isinstance(f.type, FieldType):
            type_tag = getattr(f.type, "value", f.type)
            errors.append(f"Field '{f.name}' has unsupported type '{type_tag}'")

    errors.extend(_structural_errors(desc))

    if errors:
        raise ValidationError.from_errors(errors, table_name=desc.name)


__all__ = [
    "FieldType",
    "UnknownType",
    "FieldDescription",
    "TableDescription",
    "MAX_IDENTIFIER_LENGTH",
    "is_valid_identifier",
    "validate_for_create",
]
