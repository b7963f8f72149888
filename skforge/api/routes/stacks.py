# skforge/api/routes/stacks.py
"""Predefined stack routes."""

from fastapi import APIRouter

from ..dependencies import BlueprintScannerDep, ConfigDep
from ...blueprints.stacks import resolve_stacks
from ...models.blueprint import Stack


router = APIRouter()


@router.get("", response_model=dict[str, Stack])
async def list_stacks(scanner: BlueprintScannerDep, config: ConfigDep):
    """Configured stacks with per-layer readiness."""
    return await resolve_stacks(scanner, config.stacks)
