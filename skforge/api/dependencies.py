# skforge/api/dependencies.py
"""FastAPI dependency injection."""

from functools import lru_cache
from typing import Annotated, Optional
import anyio

from fastapi import Depends

from ..config import Config, load_config
from ..blueprints.scanner import BlueprintScanner


# =============================================================================
# Configuration
# =============================================================================


@lru_cache()
def get_config_sync() -> Config:
    """Get configuration synchronously (cached).

    Note: uses async AnyIO filesystem operations under the hood.
    """
    return anyio.run(load_config)


_config: Optional[Config] = None
_config_lock: Optional[anyio.Lock] = None


def _get_config_lock() -> anyio.Lock:
    """Get or create the config lock (lazy initialization)."""
    global _config_lock
    if _config_lock is None:
        _config_lock = anyio.Lock()
    return _config_lock


async def get_config() -> Config:
    """Get configuration (async, cached)."""
    global _config

    if _config is None:
        async with _get_config_lock():
            if _config is None:
                _config = await load_config()

    return _config


ConfigDep = Annotated[Config, Depends(get_config)]


# =============================================================================
# Blueprint Scanner
# =============================================================================


async def get_blueprint_scanner(config: ConfigDep) -> BlueprintScanner:
    """Create a scanner for the configured blueprints root.

    The scanner holds no state beyond its paths, so a fresh one per request
    keeps every response derived from the current filesystem.
    """
    return BlueprintScanner(config.blueprints)


BlueprintScannerDep = Annotated[BlueprintScanner, Depends(get_blueprint_scanner)]


# =============================================================================
# Cleanup on shutdown
# =============================================================================


async def cleanup_dependencies():
    """Reset cached configuration on shutdown."""
    global _config, _config_lock

    _config = None
    _config_lock = None
