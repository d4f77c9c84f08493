# ============================================================================
# API MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP API for table definition management
# CREATED: 14 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes for the schema manager.
"""

from .routes import router, set_services
from .schemas import (
    FieldSpec,
    TableCreate,
    TableResponse,
    TableListResponse,
    TableDropResponse,
)

__all__ = [
    "router",
    "set_services",
    "FieldSpec",
    "TableCreate",
    "TableResponse",
    "TableListResponse",
    "TableDropResponse",
]
