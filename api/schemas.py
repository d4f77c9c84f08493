# ============================================================================
# API SCHEMAS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Request/Response schemas
# PURPOSE: Pydantic models for API validation
# CREATED: 14 OCT 2026
# ============================================================================
"""
API Schemas

Request and response models for the table API. Request models enforce the
identifier grammar, so malformed names are rejected at the HTTP boundary
before a TableDescription is even built.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from core.models.table import (
    FieldDescription,
    FieldType,
    MAX_IDENTIFIER_LENGTH,
    TableDescription,
)

IDENTIFIER_REGEX = r"^[A-Za-z_][A-Za-z0-9_]*$"


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class FieldSpec(BaseModel):
    """One column in a create/replace request."""
    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_IDENTIFIER_LENGTH,
        pattern=IDENTIFIER_REGEX,
        description="Column name",
    )
    type: FieldType = Field(..., description="One of: int, double, text, timestamp")


class TableCreate(BaseModel):
    """Request to create or replace a table."""
    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_IDENTIFIER_LENGTH,
        pattern=IDENTIFIER_REGEX,
        description="Table name",
    )
    primary_key_field: Optional[str] = Field(
        None,
        max_length=MAX_IDENTIFIER_LENGTH,
        description="Name of the field to use as primary key",
    )
    fields: List[FieldSpec] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "people",
                    "primary_key_field": "id",
                    "fields": [
                        {"name": "id", "type": "int"},
                        {"name": "name", "type": "text"},
                        {"name": "created", "type": "timestamp"},
                    ],
                }
            ]
        }
    }

    def to_description(self) -> TableDescription:
        """
        Build the domain description.

        Raises:
            ValidationError: Duplicate fields or dangling primary key
        """
        return TableDescription(
            name=self.name,
            primary_key_field=self.primary_key_field,
            fields=[FieldDescription(name=f.name, type=f.type) for f in self.fields],
        )


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class TableResponse(BaseModel):
    """Table description response."""
    name: str
    primary_key_field: Optional[str] = None
    fields: List[FieldDescription]
    field_count: int
    has_unsupported_fields: bool = False

    @classmethod
    def from_description(cls, desc: TableDescription) -> "TableResponse":
        return cls(
            name=desc.name,
            primary_key_field=desc.primary_key_field,
            fields=desc.fields,
            field_count=len(desc.fields),
            has_unsupported_fields=any(not f.is_supported for f in desc.fields),
        )


class TableListResponse(BaseModel):
    """List of tables response."""
    schema_name: str
    tables: List[str]
    count: int


class TableDropResponse(BaseModel):
    """Drop acknowledgement. Dependent objects are dropped too."""
    table_name: str
    dropped: bool = True
    cascade: bool = True

