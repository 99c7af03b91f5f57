"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy, headers, status checking and JSON
decoding.

Dependencies:
    - ``requests`` for network I/O.
    - ``showcase.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``showcase/adapters/store_rest.py`` and
      ``showcase/adapters/feed_rest.py``.
    - Used only inside adapter layer methods; use cases interact through ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests
from requests import exceptions as req_exc

from showcase.adapters.api_errors import (
    ApiError,
    ApiHttpError,
    ApiNetworkError,
    ApiNotFoundError,
    ApiParseError,
    build_error_message,
    parse_error_payload,
)

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for JSON API calls.
    """
    request_timeout_s: float = 10


class JsonSession:
    """Shared requests wrapper issuing exactly one GET per call.

    Failed requests are never retried here; a retry is always an explicit
    user action handled by the view state.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create a session.

        Args:
            cfg: Shared timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        return {"Accept": accept}

    def get(
        self,
        url: str,
        *,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a single GET request.

        Args:
            url: Absolute endpoint URL.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` for any HTTP status.

        Raises:
            ApiNetworkError: On timeout, connection or other transport failure.
        """
        context = f"GET {url}"
        try:
            return self.session.get(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except req_exc.Timeout as exc:
            raise ApiNetworkError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiNetworkError(f"Could not reach {url}: {exc}", context=context) from exc

    def get_json(self, url: str, ctx: str) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            ApiNetworkError: Transport failure.
            ApiHttpError: Non-2xx status (``ApiNotFoundError`` for 404).
            ApiParseError: Body is not valid JSON.
        """
        LOGGER.debug("GET %s", url)
        resp = self.get(url)
        ensure_ok(resp, ctx)
        return decode_json(resp, ctx)


def ensure_ok(resp: requests.Response, ctx: str) -> None:
    """Raise typed adapter errors for non-2xx responses."""
    if 200 <= resp.status_code < 300:
        return
    status = resp.status_code
    payload = parse_error_payload(resp)
    message = build_error_message(ctx, status, payload)
    if status == 404:
        raise ApiNotFoundError(message, payload=payload, context=ctx)
    if 400 <= status < 600:
        raise ApiHttpError(message, status=status, payload=payload, context=ctx)
    raise ApiError(message, status=status, payload=payload, context=ctx)


def decode_json(resp: requests.Response, ctx: str) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        snippet = (getattr(resp, "text", "") or "")[:400]
        raise ApiParseError(
            f"{ctx}: invalid JSON response", payload=snippet, context=ctx
        ) from exc


def join_url(base: str, path: str) -> str:
    if base.endswith("/"):
        base = base[:-1]
    return f"{base}{path}"


def parse_item(data: Any, build: Callable[[Any], T], *, ctx: str) -> T:
    """Build one typed object, reporting shape problems as ``ApiParseError``."""
    try:
        return build(data)
    except ValueError as exc:
        raise ApiParseError(f"{ctx}: {exc}", payload=data, context=ctx) from exc


def parse_list(data: Any, build: Callable[[Any], T], *, ctx: str) -> List[T]:
    """Build typed items from a JSON array, rejecting any malformed entry."""
    if not isinstance(data, list):
        raise ApiParseError(f"{ctx}: expected list response", payload=data, context=ctx)
    return [parse_item(entry, build, ctx=ctx) for entry in data]


__all__ = [
    "HttpConfig",
    "JsonSession",
    "decode_json",
    "ensure_ok",
    "join_url",
    "parse_item",
    "parse_list",
]
