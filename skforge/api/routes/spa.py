# skforge/api/routes/spa.py
"""Single-page client and unknown /api paths."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
import anyio

from ..dependencies import ConfigDep
from ..errors import APIError
from ...blueprints.scanner import read_text_or_empty

PLACEHOLDER_HTML = "<h1>SKForge Web UI</h1><p>website/app.html not found</p>"

# Everything except OPTIONS, which the preflight middleware answers
CATCH_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


router = APIRouter()


@router.api_route("/{full_path:path}", methods=CATCH_ALL_METHODS, include_in_schema=False)
async def serve_spa(full_path: str, config: ConfigDep):
    """Serve the client application for every path no other route handles."""
    if full_path.startswith("api/"):
        raise APIError.unknown_endpoint()

    html = await read_text_or_empty(anyio.Path(config.spa.path))
    return HTMLResponse(content=html or PLACEHOLDER_HTML)
