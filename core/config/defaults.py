# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for database access and logging
# CREATED: 14 OCT 2026
# ============================================================================
"""
Configuration Defaults

Sensible defaults for the schema manager. Each group can be overridden
via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DatabaseDefaults:
    """
    Defaults for database access.

    schema_name is the single working schema whose base tables are
    listed, described, created and dropped.
    """
    schema_name: str = "public"

    # Pool sizing (each request borrows one connection)
    pool_min_size: int = 1
    pool_max_size: int = 5

    # Seconds to wait for a pooled connection before failing
    connect_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "DatabaseDefaults":
        """Create from environment variables."""
        return cls(
            schema_name=os.getenv("SCHEMA_NAME", "public"),
            pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", 1)),
            pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", 5)),
            connect_timeout=float(os.getenv("DB_CONNECT_TIMEOUT", 10.0)),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json"
            or _env_bool("LOG_JSON"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    database: DatabaseDefaults = field(default_factory=DatabaseDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            database=DatabaseDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DatabaseDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
