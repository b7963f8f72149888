# skforge/api/errors.py
"""Standardized API error responses."""

from fastapi import HTTPException, status


class APIError:
    """Helper class for standardized API error responses.

    Every error is rendered as ``{"error": detail}`` by the handlers
    registered in :func:`skforge.api.main.create_app`.
    """

    @staticmethod
    def not_found(resource: str) -> HTTPException:
        """Return a 404 Not Found error."""
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )

    @staticmethod
    def unknown_endpoint() -> HTTPException:
        """Return a 404 for paths under /api that no route serves."""
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unknown API endpoint",
        )

    @staticmethod
    def bad_request(message: str) -> HTTPException:
        """Return a 400 Bad Request error."""
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )
