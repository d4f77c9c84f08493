# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 14 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the schema manager.
"""

from core.config.defaults import (
    DatabaseDefaults,
    LoggingDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "DatabaseDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
