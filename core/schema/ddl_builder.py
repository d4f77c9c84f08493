# ============================================================================
# DDL BUILDER
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - CREATE/DROP TABLE generation
# PURPOSE: Turn a TableDescription into injection-safe DDL using psycopg.sql
# CREATED: 14 OCT 2026
# EXPORTS: build_create, build_drop, render
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Builder

All builders return psycopg.sql.Composed objects for safe execution.
No string concatenation: every identifier goes through sql.Identifier, and
names are checked against the identifier grammar before composition.

The builder never executes anything.

Usage:
    from core.schema.ddl_builder import build_create, build_drop, render

    stmt = build_create(desc)
    await conn.execute(stmt)

    render(build_drop("people"))
    # 'DROP TABLE IF EXISTS "people" CASCADE'
"""

from typing import Optional

from psycopg import sql

from core.errors import ValidationError
from core.models.table import TableDescription, validate_for_create
from core.schema.type_mapper import to_native_type


def _table_identifier(name: str, schema: Optional[str] = None) -> sql.Identifier:
    if schema:
        return sql.Identifier(schema, name)
    return sql.Identifier(name)


def build_create(desc: TableDescription, schema: Optional[str] = None) -> sql.Composed:
    """
    Build CREATE TABLE for a table description.

    Columns follow desc.fields order. The PRIMARY KEY clause is appended only
    when a key is set, so there is never a dangling separator.

    Args:
        desc: Table description (validated here)
        schema: Optional schema to qualify the table name with

    Returns:
        sql.Composed CREATE TABLE statement

    Raises:
        ValidationError: If the description is not valid for creation
    """
    validate_for_create(desc)

    clauses = [
        sql.SQL("{} {}").format(
            sql.Identifier(f.name),
            sql.SQL(to_native_type(f.type)),
        )
        for f in desc.fields
    ]

    if desc.primary_key_field:
        clauses.append(
            sql.SQL("PRIMARY KEY ({})").format(sql.Identifier(desc.primary_key_field))
        )

    return sql.SQL("CREATE TABLE {table} ({columns})").format(
        table=_table_identifier(desc.name, schema),
        columns=sql.SQL(", ").join(clauses),
    )


def build_drop(name: str, schema: Optional[str] = None) -> sql.Composed:
    """
    Build DROP TABLE IF EXISTS ... CASCADE.

    CASCADE removes dependent views and foreign keys without asking.
    The name is quoted rather than grammar-checked so tables created by
    other tools can still be dropped.

    Raises:
        ValidationError: If name is empty
    """
    if not name:
        raise ValidationError("Table name must not be empty")

    return sql.SQL("DROP TABLE IF EXISTS {} CASCADE").format(
        _table_identifier(name, schema)
    )


def render(stmt: sql.Composable, conn=None) -> str:
    """Render a composed statement to text (for logging and tests)."""
    return stmt.as_string(conn)


__all__ = [
    "build_create",
    "build_drop",
    "render",
]
