# skforge/api/routes/driver.py
"""driver.md generation routes."""

import json
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from ..errors import APIError
from ..schemas import DriverResponse
from ...blueprints.driver import generate_driver
from ...models.driver import DriverSelection

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=DriverResponse)
async def generate_driver_document(request: Request):
    """Render driver.md from a feature selection.

    Undecodable JSON is a 400; an empty object yields the fallback document.
    """
    body = await request.body()

    try:
        payload = json.loads(body)
    except ValueError as e:
        raise APIError.bad_request(f"Invalid JSON body: {e}") from e

    if not isinstance(payload, dict):
        raise APIError.bad_request("Request body must be a JSON object")

    try:
        selection = DriverSelection.model_validate(payload)
    except ValidationError as e:
        raise APIError.bad_request(f"Invalid driver selection: {e.errors()[0]['msg']}") from e

    logger.debug(
        "Generating driver for %s (%d feature groups)",
        selection.category,
        len(selection.selected_features),
    )
    return DriverResponse(driver=generate_driver(selection))
