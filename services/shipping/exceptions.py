"""Error taxonomy for the shipping service.

Every error carries the HTTP status and machine-readable code it is
reported with; handlers in ``app.py`` translate them into JSON responses.
"""

from __future__ import annotations

from typing import Any


class ShippingError(Exception):
    """Base class for errors surfaced to shipping service callers."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error_code, "detail": self.message}


class UpstreamUnavailable(ShippingError):
    """The pricing dependency could not be reached or answered with an error."""

    status_code = 503
    error_code = "upstream_unavailable"


class MalformedResponse(ShippingError):
    """The pricing dependency answered with a body that is not a price."""

    status_code = 502
    error_code = "malformed_response"


class InvalidOrderPayload(ShippingError):
    """The inbound request body does not have the expected shape."""

    status_code = 400
    error_code = "invalid_payload"

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message, errors=errors or [])
        self.errors = errors or []

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["errors"] = self.errors
        return payload


__all__ = [
    "ShippingError",
    "UpstreamUnavailable",
    "MalformedResponse",
    "InvalidOrderPayload",
]
