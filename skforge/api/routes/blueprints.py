# skforge/api/routes/blueprints.py
"""Blueprint browsing routes."""

from fastapi import APIRouter

from ..dependencies import BlueprintScannerDep
from ..errors import APIError
from ..schemas import ErrorResponse
from ...models.blueprint import BlueprintDetail, BlueprintSummary, CatalogDocument


router = APIRouter()


@router.get("", response_model=list[BlueprintSummary])
async def list_blueprints(scanner: BlueprintScannerDep):
    """Summaries of every blueprint category."""
    return await scanner.list_summaries()


@router.get("/{category}", response_model=BlueprintDetail, responses={404: {"model": ErrorResponse}})
async def get_blueprint(category: str, scanner: BlueprintScannerDep):
    """Summary, parsed feature catalog and raw documents for one category."""
    detail = await scanner.get_detail(category)

    if not detail:
        raise APIError.not_found("Blueprint")

    return detail


@router.get(
    "/{category}/features",
    response_model=CatalogDocument,
    responses={404: {"model": ErrorResponse}},
)
async def get_blueprint_features(category: str, scanner: BlueprintScannerDep):
    """Parsed feature catalog; empty when the category has no features.yml."""
    catalog = await scanner.get_features(category)

    if catalog is None:
        raise APIError.not_found("Blueprint")

    return catalog
