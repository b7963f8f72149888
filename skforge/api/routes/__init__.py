# skforge/api/routes/__init__.py
"""API route modules."""

from . import blueprints, stacks, search, driver, spa

__all__ = ["blueprints", "stacks", "search", "driver", "spa"]
