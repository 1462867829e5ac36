"""
Error types surfaced by every Mollie resource operation.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

__all__ = [
    "MollieApiError",
    "NetworkError",
    "RequestValidationError",
    "ResponseParseError",
]


class MollieApiError(Exception):
    """
    The single error type raised by resource operations.

    ``message`` is always human-readable English text. ``status_code`` is
    ``None`` when no response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        field: Optional[str] = None,
        title: Optional[str] = None,
        links: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.field = field
        self.title = title
        self.links: Dict[str, Any] = dict(links or {})

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, field={self.field!r})"
        )

    @property
    def documentation_url(self) -> Optional[str]:
        documentation = self.links.get("documentation")
        if isinstance(documentation, Mapping):
            return documentation.get("href")
        return None

    @classmethod
    def from_response(cls, response: requests.Response) -> "MollieApiError":
        """
        Build an error from a non-2xx response.

        The API's ``detail`` is preferred; anything else falls back to a
        generic description carrying the status code.
        """
        status = response.status_code
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, Mapping) and payload.get("detail"):
            return cls(
                str(payload["detail"]),
                status_code=status,
                field=payload.get("field"),
                title=payload.get("title"),
                links=payload.get("_links"),
            )
        return cls(
            f"Received an error response from the API (HTTP {status})",
            status_code=status,
        )


class RequestValidationError(MollieApiError):
    """Raised before any request is sent when the call itself is invalid."""


class NetworkError(MollieApiError):
    """Raised when the API could not be reached at all."""

    @classmethod
    def from_exception(cls, exc: requests.RequestException) -> "NetworkError":
        reason = str(exc) or type(exc).__name__
        return cls(f"Unable to reach the Mollie API: {reason}")


class ResponseParseError(MollieApiError):
    """Raised when a successful response does not carry a usable JSON body."""
