# skforge/api/routes/search.py
"""Blueprint search routes."""

from fastapi import APIRouter

from ..dependencies import BlueprintScannerDep
from ...blueprints.search import search_blueprints
from ...models.blueprint import SearchResult


router = APIRouter()


@router.get("", response_model=list[SearchResult])
async def search(scanner: BlueprintScannerDep, q: str = ""):
    """Search category names, BLUEPRINT.md and features.yml by substring."""
    return await search_blueprints(scanner, q)
