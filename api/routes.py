# ============================================================================
# API ROUTES
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - FastAPI route definitions
# PURPOSE: HTTP endpoints for table definition management
# CREATED: 14 OCT 2026
# ============================================================================
"""
API Routes

Thin HTTP surface over SchemaManager.

Endpoints:
- GET    /tables          - List base tables
- POST   /tables          - Create table
- GET    /tables/{name}   - Describe table
- PUT    /tables/{name}   - Replace table (drop + recreate, data is lost)
- DELETE /tables/{name}   - Drop table (CASCADE, idempotent)

Error mapping:
    ValidationError      -> 400
    NotFoundError        -> 404
    ExecutionError       -> 409
    UnsupportedTypeError -> 500
"""

from typing import NoReturn

from fastapi import APIRouter, HTTPException

from core.errors import (
    ExecutionError,
    NotFoundError,
    SchemaError,
    UnsupportedTypeError,
    ValidationError,
)
from core.logging import ComponentType, get_logger
from .schemas import (
    TableCreate,
    TableDropResponse,
    TableListResponse,
    TableResponse,
)

logger = get_logger(__name__, ComponentType.API)

router = APIRouter(prefix="/tables", tags=["tables"])


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup

_schema_manager = None


def set_services(schema_manager):
    """Called by main.py at startup to inject the schema manager."""
    global _schema_manager
    _schema_manager = schema_manager


def get_schema_manager():
    """Get the schema manager, raising 503 if not initialized."""
    if _schema_manager is None:
        raise HTTPException(503, "Schema manager not initialized")
    return _schema_manager


# ============================================================================
# HELPERS
# ============================================================================

def _raise_http(e: SchemaError) -> NoReturn:
    """Translate a schema error into an HTTPException."""
    if isinstance(e, ValidationError):
        raise HTTPException(400, e.message)
    if isinstance(e, NotFoundError):
        raise HTTPException(404, e.message)
    if isinstance(e, ExecutionError):
        raise HTTPException(409, e.message)
    if isinstance(e, UnsupportedTypeError):
        logger.error(f"Unsupported type reached the DDL builder: {e.value!r}")
        raise HTTPException(500, e.message)
    raise HTTPException(500, str(e))


# ============================================================================
# TABLES
# ============================================================================

@router.get("", response_model=TableListResponse)
async def list_tables():
    """List base tables in the working schema, alphabetically."""
    manager = get_schema_manager()
    try:
        tables = await manager.list_tables()
    except SchemaError as e:
        _raise_http(e)

    return TableListResponse(schema_name=manager.schema, tables=tables, count=len(tables))


@router.post("", response_model=TableResponse, status_code=201)
async def create_table(request: TableCreate):
    """Create a table from a name, ordered fields and optional primary key."""
    manager = get_schema_manager()
    try:
        desc = request.to_description()
        await manager.create(desc)
    except SchemaError as e:
        _raise_http(e)

    return TableResponse.from_description(desc)


@router.get("/{name}", response_model=TableResponse)
async def describe_table(name: str):
    """Describe a table from the live catalog."""
    manager = get_schema_manager()
    try:
        desc = await manager.read(name)
    except SchemaError as e:
        _raise_http(e)

    return TableResponse.from_description(desc)


@router.put("/{name}", response_model=TableResponse)
async def replace_table(name: str, request: TableCreate):
    """
    Replace a table definition.

    Drops and recreates the table in one transaction. All existing rows are
    discarded; if the new definition is rejected the old table is kept.
    """
    if request.name != name:
        raise HTTPException(
            400,
            f"Table name in body ('{request.name}') does not match path ('{name}')",
        )

    manager = get_schema_manager()
    try:
        desc = request.to_description()
        await manager.replace(desc)
    except SchemaError as e:
        _raise_http(e)

    return TableResponse.from_description(desc)


@router.delete("/{name}", response_model=TableDropResponse)
async def drop_table(name: str):
    """
    Drop a table with CASCADE.

    Dependent views and foreign keys are removed without confirmation.
    Dropping an absent table succeeds.
    """
    manager = get_schema_manager()
    try:
        await manager.delete(name)
    except SchemaError as e:
        _raise_http(e)

    return TableDropResponse(table_name=name)
