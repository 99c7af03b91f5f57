"""Domain package exports for value objects, fetch lifecycle types and projections."""

from .entities import Address, Comment, Company, Post, Product, Rating, Todo, User
from .errors import FetchError
from .fetch_state import Endpoint, FetchPhase, FetchRequest, FetchResult, FetchStatus
from .projection import (
    ALL,
    COMPLETED,
    PENDING,
    Projection,
    filter_by_category,
    filter_by_completion,
    search_users,
)
from .quantity import MAX_QUANTITY, MIN_QUANTITY, clamp_quantity

__all__ = [
    "ALL",
    "Address",
    "COMPLETED",
    "Comment",
    "Company",
    "Endpoint",
    "FetchError",
    "FetchPhase",
    "FetchRequest",
    "FetchResult",
    "FetchStatus",
    "MAX_QUANTITY",
    "MIN_QUANTITY",
    "PENDING",
    "Post",
    "Product",
    "Projection",
    "Rating",
    "Todo",
    "User",
    "clamp_quantity",
    "filter_by_category",
    "filter_by_completion",
    "search_users",
]
