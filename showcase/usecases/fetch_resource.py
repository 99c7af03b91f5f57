"""Use case resolving a ``FetchRequest`` against the catalog and feed ports.

Call context:
    ``RemoteSlot.load`` hands ``FetchResource.__call__`` to a dispatcher; the
    returned ``FetchResult`` is delivered back to the slot on the UI queue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple

from showcase.domain.errors import FetchError
from showcase.domain.fetch_state import Endpoint, FetchRequest, FetchResult
from showcase.domain.ports import CatalogPort, FeedPort
from showcase.usecases.error_mapping import NOT_FOUND, map_api_error

LOGGER = logging.getLogger(__name__)

DEFAULT_TODO_LIMIT = 20

_LABELS: Dict[Endpoint, str] = {
    Endpoint.PRODUCTS: "products",
    Endpoint.PRODUCTS_BY_CATEGORY: "products",
    Endpoint.PRODUCT: "product details",
    Endpoint.CATEGORIES: "categories",
    Endpoint.USERS: "users",
    Endpoint.POSTS: "posts",
    Endpoint.POST_COMMENTS: "comments",
    Endpoint.TODOS: "todos",
}

_NOT_FOUND_MESSAGES: Dict[Endpoint, str] = {
    Endpoint.PRODUCT: "Product not found.",
}


@dataclass
class FetchResource:
    """Fetch one remote collection and report the outcome as a value.

    Never raises for remote failures: network, HTTP, parse and not-found
    errors all come back as a failed ``FetchResult``.
    """

    catalog: CatalogPort
    feed: FeedPort
    todo_limit: int = DEFAULT_TODO_LIMIT

    def __call__(self, request: FetchRequest) -> FetchResult:
        LOGGER.debug("Fetching %s", request)
        try:
            items = self._load(request)
        except Exception as exc:
            error = self._to_fetch_error(request, exc)
            LOGGER.warning("Fetch %s failed: %s (%s)", request, error.message, error.code)
            return FetchResult.failure(request, error)
        LOGGER.debug("Fetched %s: %d item(s)", request, len(items))
        return FetchResult.success(request, items)

    # ------------------------------------------------------------------
    def _load(self, request: FetchRequest) -> Tuple[Any, ...]:
        route = self._routes().get(request.endpoint)
        if route is None:
            raise FetchError("UNKNOWN_ENDPOINT", f"No route for endpoint '{request.endpoint}'.")
        return tuple(route(request.params))

    def _routes(self) -> Dict[Endpoint, Callable[[Sequence[Any]], Sequence[Any]]]:
        return {
            Endpoint.PRODUCTS: lambda _: self.catalog.list_products(),
            Endpoint.PRODUCTS_BY_CATEGORY: lambda p: self.catalog.list_products_in_category(p[0]),
            Endpoint.PRODUCT: lambda p: [self.catalog.get_product(p[0])],
            Endpoint.CATEGORIES: lambda _: self.catalog.list_categories(),
            Endpoint.USERS: lambda _: self.feed.list_users(),
            Endpoint.POSTS: lambda _: self.feed.list_posts(),
            Endpoint.POST_COMMENTS: lambda p: self.feed.list_comments(p[0]),
            Endpoint.TODOS: lambda _: list(self.feed.list_todos())[: self.todo_limit],
        }

    @staticmethod
    def _to_fetch_error(request: FetchRequest, exc: Exception) -> FetchError:
        label = _LABELS.get(request.endpoint, "data")
        mapped = map_api_error(
            exc,
            default_code="FETCH_FAILED",
            default_message="Unexpected error.",
            not_found_message=_NOT_FOUND_MESSAGES.get(request.endpoint, f"No {label} found."),
        )
        if mapped.code == NOT_FOUND:
            return mapped
        return FetchError(mapped.code, f"Failed to fetch {label}. {mapped.message}")


__all__ = ["DEFAULT_TODO_LIMIT", "FetchResource"]
