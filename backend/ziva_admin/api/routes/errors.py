from fastapi import HTTPException, status

from ziva_admin.core.errors import AdminError, CategoryValidationError, StorefrontError


def to_http_exception(error: AdminError) -> HTTPException:
    """Map a domain failure onto the dashboard's JSON API."""
    if isinstance(error, CategoryValidationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=error.message,
        )

    if isinstance(error, StorefrontError) and error.status_code and 400 <= error.status_code < 500:
        return HTTPException(status_code=error.status_code, detail=error.message)

    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.message)
