# skforge/api/schemas.py
"""API request and response schemas.

Blueprint payloads are served straight from the models in
:mod:`skforge.models`; only envelopes specific to the HTTP surface live here.
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_id: Optional[str] = None


class DriverResponse(BaseModel):
    """Generated driver.md document."""
    driver: str


class HealthResponse(BaseModel):
    status: str
    version: str
