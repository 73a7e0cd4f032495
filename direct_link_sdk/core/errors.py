"""Error types raised by the Direct Link HTTP core and service client.

Purpose:
- Provide typed exceptions thrown by ``BaseService.send`` and, through it,
  every ``DirectLinkV1`` operation.
- Expose HTTP-oriented context (status code, error body, response headers)
  for diagnosis.

Usage:
- Catch ``DirectLinkError`` for any SDK failure.
- Catch ``DirectLinkApiError`` for non-2xx responses and inspect
  ``status_code`` or ``details``.
- Catch ``DirectLinkConnectionError`` for connect failures and timeouts.

Local argument validation (missing required arguments, bad service URL)
raises the builtin ``ValueError`` before any request is sent.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class DirectLinkError(Exception):
    """Base error for every failure raised by the SDK at request time."""

    @property
    def is_retryable(self) -> bool:
        return False


class DirectLinkApiError(DirectLinkError):
    """Non-2xx response returned by the Direct Link API.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code of the response.
        details: Parsed JSON body when available, otherwise the raw text.
        headers: Response headers (useful for ``X-Request-Id`` / ``X-Correlation-Id``).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.headers = httpx.Headers(headers or {})

    @property
    def is_retryable(self) -> bool:
        return self.status_code in RETRYABLE_STATUS_CODES

    @classmethod
    def from_response(cls, response: httpx.Response) -> "DirectLinkApiError":
        """Build an error from an HTTP response, extracting the IBM error message."""
        try:
            details: Any = response.json()
        except ValueError:
            details = response.text or None
        message = _extract_message(details) or f"Error: {response.reason_phrase or 'Unknown error'}"
        return cls(
            message,
            status_code=response.status_code,
            details=details,
            headers=response.headers,
        )

    def __str__(self) -> str:
        return f"Error: {self.message}, Status code: {self.status_code}"


class DirectLinkConnectionError(DirectLinkError):
    """Transport-level failure (DNS, connect, read timeout) before a response arrived."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.status_code: Optional[int] = None

    @property
    def is_retryable(self) -> bool:
        return True


def _extract_message(details: Any) -> Optional[str]:
    # IBM Cloud error bodies: {"errors": [{"code", "message", "more_info"}], "trace": ...}
    if isinstance(details, dict):
        errors = details.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            msg = errors[0].get("message")
            if msg:
                return str(msg)
        for key in ("message", "error", "errorMessage"):
            value = details.get(key)
            if isinstance(value, str) and value:
                return value
    return None
