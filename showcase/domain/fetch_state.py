"""Typed lifecycle objects for one asynchronous data retrieval.

``FetchRequest`` names what to fetch, ``FetchResult`` carries what came back,
and ``FetchStatus`` is the per-collection lifecycle flag read by renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .errors import FetchError


class Endpoint(str, Enum):
    """Logical endpoints known to the REST adapters."""

    PRODUCTS = "products"
    PRODUCTS_BY_CATEGORY = "products_by_category"
    PRODUCT = "product"
    CATEGORIES = "categories"
    USERS = "users"
    POSTS = "posts"
    POST_COMMENTS = "post_comments"
    TODOS = "todos"


class FetchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchStatus:
    """Lifecycle flag of one collection; ``reason`` is set only when failed."""

    phase: FetchPhase = FetchPhase.IDLE
    reason: Optional[str] = None

    @classmethod
    def idle(cls) -> "FetchStatus":
        return cls(FetchPhase.IDLE)

    @classmethod
    def loading(cls) -> "FetchStatus":
        return cls(FetchPhase.LOADING)

    @classmethod
    def ready(cls) -> "FetchStatus":
        return cls(FetchPhase.READY)

    @classmethod
    def failed(cls, reason: str) -> "FetchStatus":
        return cls(FetchPhase.FAILED, reason or "Request failed.")

    @property
    def is_idle(self) -> bool:
        return self.phase is FetchPhase.IDLE

    @property
    def is_loading(self) -> bool:
        return self.phase is FetchPhase.LOADING

    @property
    def is_ready(self) -> bool:
        return self.phase is FetchPhase.READY

    @property
    def is_failed(self) -> bool:
        return self.phase is FetchPhase.FAILED


@dataclass(frozen=True)
class FetchRequest:
    """Identity of a remote collection: endpoint plus positional parameters."""

    endpoint: Endpoint
    params: Tuple[Any, ...] = ()

    def describe(self) -> str:
        if not self.params:
            return self.endpoint.value
        args = ", ".join(str(param) for param in self.params)
        return f"{self.endpoint.value}({args})"

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: either ``items`` or ``error`` is meaningful."""

    request: FetchRequest
    items: Tuple[Any, ...] = ()
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, request: FetchRequest, items: Tuple[Any, ...]) -> "FetchResult":
        return cls(request=request, items=tuple(items))

    @classmethod
    def failure(cls, request: FetchRequest, error: FetchError) -> "FetchResult":
        return cls(request=request, error=error)


__all__ = [
    "Endpoint",
    "FetchPhase",
    "FetchRequest",
    "FetchResult",
    "FetchStatus",
]
