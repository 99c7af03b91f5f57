"""Translate adapter errors into user-facing FetchError instances."""

from __future__ import annotations


from typing import Optional

from showcase.adapters.api_errors import (
    ApiError,
    ApiHttpError,
    ApiNetworkError,
    ApiNotFoundError,
    ApiParseError,
)
from showcase.domain.errors import FetchError

NETWORK_ERROR = "NETWORK_ERROR"
HTTP_ERROR = "HTTP_ERROR"
PARSE_ERROR = "PARSE_ERROR"
NOT_FOUND = "NOT_FOUND"


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
    not_found_message: str = "Not found.",
) -> FetchError:
    """Map adapter exceptions to stable FetchError codes.

    Args:
        exc: Exception raised by an adapter or a port implementation.
        default_code: Code used for exceptions outside the adapter taxonomy.
        default_message: Message used for such exceptions; falls back to
            ``str(exc)``.
        not_found_message: Message for missing entities.

    Returns:
        FetchError: Value stored in a failed fetch status.
    """
    if isinstance(exc, FetchError):
        return exc
    if isinstance(exc, ApiNetworkError):
        return FetchError(NETWORK_ERROR, "Request timed out or could not connect. Check connection.")
    if isinstance(exc, ApiNotFoundError):
        return FetchError(NOT_FOUND, not_found_message)
    if isinstance(exc, ApiHttpError):
        status = exc.status or 0
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        if status >= 500:
            label = f"Server error (HTTP {status}), try again"
        return FetchError(HTTP_ERROR, f"{label}.")
    if isinstance(exc, ApiParseError):
        return FetchError(PARSE_ERROR, "Received an unexpected response from the server.")
    if isinstance(exc, ApiError):
        return FetchError(HTTP_ERROR, str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return FetchError(default_code, message)


__all__ = ["HTTP_ERROR", "NETWORK_ERROR", "NOT_FOUND", "PARSE_ERROR", "map_api_error"]
