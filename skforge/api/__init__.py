# skforge/api/__init__.py
"""REST API for the SKForge blueprint catalog.

Endpoints:
- Blueprints (list summaries, category detail, parsed feature catalogs)
- Stacks (predefined category collections with readiness)
- Search (substring search over names, BLUEPRINT.md and features.yml)
- Driver generation (driver.md from a feature selection)

Every other path serves the single-page client.

Usage:
    from skforge.api import create_app

    app = create_app()
    # Run with: uvicorn skforge.api:app --reload
"""

from .main import create_app, app
from .dependencies import (
    get_config,
    get_config_sync,
    ConfigDep,
    get_blueprint_scanner,
    BlueprintScannerDep,
    cleanup_dependencies,
)
from .errors import APIError
from .schemas import ErrorResponse, DriverResponse, HealthResponse

__all__ = [
    "create_app",
    "app",
    # Dependencies
    "get_config",
    "get_config_sync",
    "ConfigDep",
    "get_blueprint_scanner",
    "BlueprintScannerDep",
    "cleanup_dependencies",
    # Errors
    "APIError",
    # Schemas
    "ErrorResponse",
    "DriverResponse",
    "HealthResponse",
]
