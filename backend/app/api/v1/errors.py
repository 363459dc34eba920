from __future__ import annotations

from fastapi import HTTPException, status

from app.services.intime_api import IntimeApiError


def upstream_http_error(err: Exception, detail: str) -> HTTPException:
    """Map an upstream failure to the status returned to our caller."""
    if isinstance(err, RuntimeError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Intime API not configured",
        )
    if isinstance(err, IntimeApiError) and err.status == status.HTTP_404_NOT_FOUND:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
