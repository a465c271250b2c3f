"""Domain exceptions raised by the storefront client and the category services."""

import httpx


class AdminError(Exception):
    """Base class for failures surfaced to the admin as a notification."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CategoryValidationError(AdminError):
    """A draft failed client-side validation; no request was sent."""


class StorefrontError(AdminError):
    """The storefront API rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_response(cls, response: httpx.Response) -> "StorefrontError":
        """Build an error from a failed response, preferring the server's own message."""
        message = None
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            message = data.get("message") or data.get("error")

        if not message:
            message = f"Storefront returned HTTP {response.status_code}"

        return cls(str(message), status_code=response.status_code)
