# ============================================================================
# TABLEDESK - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - FastAPI application entry point
# PURPOSE: HTTP service for runtime table definition management
# CREATED: 14 OCT 2026
# ============================================================================
"""
Tabledesk Main Application

FastAPI application that:
1. Opens the PostgreSQL connection pool on startup
2. Exposes list / create / describe / replace / drop over /api/v1/tables
3. Closes the pool on shutdown

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, EPOCH
from api import router, set_services
from core.config import get_defaults
from core.logging import configure_logging, get_logger
from repositories.database import init_pool, close_pool
from services import SchemaManager

_log_defaults = get_defaults().logging
configure_logging(
    level=_log_defaults.level,
    json_output=_log_defaults.json_output,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Initializes services on startup, cleans up on shutdown.
    """
    logger.info(f"Starting Tabledesk v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")

    pool = await init_pool()
    logger.info("Database pool initialized")

    schema_manager = SchemaManager(pool, get_defaults().database.schema_name)
    set_services(schema_manager=schema_manager)
    logger.info(f"Schema manager ready (schema={schema_manager.schema})")

    yield

    logger.info("Shutting down Tabledesk...")
    set_services(schema_manager=None)
    await close_pool()
    logger.info("Tabledesk stopped")


app = FastAPI(
    title="Tabledesk",
    description="Define, inspect and remove PostgreSQL tables at runtime",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Tabledesk",
        "version": __version__,
        "epoch": EPOCH,
        "build_date": BUILD_DATE,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/livez")
async def livez():
    """Liveness probe. Does not touch the database."""
    return {"status": "ok"}


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
