"""Pure projections from a held collection to the view a screen renders.

Every function walks its source once, keeps the original relative order and
returns a new tuple. ``Projection`` memoizes one of them against the identity
of the source tuple and the value of the criterion.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Iterable, Optional, Sequence, Tuple, TypeVar

from .entities import Product, Todo, User

T = TypeVar("T")

ALL = "all"
COMPLETED = "completed"
PENDING = "pending"
COMPLETION_FILTERS: Tuple[str, ...] = (ALL, COMPLETED, PENDING)


def filter_by_category(products: Iterable[Product], category: str) -> Tuple[Product, ...]:
    """Return products whose category equals ``category``; ``"all"`` keeps everything."""
    if category == ALL:
        return tuple(products)
    return tuple(product for product in products if product.category == category)


def filter_by_completion(todos: Iterable[Todo], state: str) -> Tuple[Todo, ...]:
    """Split todos on ``completed``.

    Raises:
        ValueError: If ``state`` is not one of ``all``, ``completed``, ``pending``.
    """
    if state == COMPLETED:
        return tuple(todo for todo in todos if todo.completed)
    if state == PENDING:
        return tuple(todo for todo in todos if not todo.completed)
    if state == ALL:
        return tuple(todos)
    raise ValueError(f"Unknown completion filter '{state}'.")


def search_users(users: Iterable[User], term: str) -> Tuple[User, ...]:
    """Case-insensitive substring match on name, email and company name."""
    needle = (term or "").lower()
    if not needle:
        return tuple(users)
    return tuple(
        user
        for user in users
        if needle in user.name.lower()
        or needle in user.email.lower()
        or needle in user.company.name.lower()
    )


class Projection(Generic[T]):
    """Cache one projection result until its inputs change.

    The source is compared by identity: view state replaces its tuple on
    every fetch or local edit, so a new tuple always means new data.
    """

    def __init__(self, fn: Callable[[Sequence[T], Any], Tuple[T, ...]]) -> None:
        self._fn = fn
        self._source: Optional[Sequence[T]] = None
        self._criterion: Hashable = None
        self._result: Tuple[T, ...] = ()
        self._primed = False
        self.recomputations = 0

    def __call__(self, source: Sequence[T], criterion: Hashable) -> Tuple[T, ...]:
        if self._primed and source is self._source and criterion == self._criterion:
            return self._result
        self._result = self._fn(source, criterion)
        self._source = source
        self._criterion = criterion
        self._primed = True
        self.recomputations += 1
        return self._result

    def invalidate(self) -> None:
        self._primed = False
        self._source = None


__all__ = [
    "ALL",
    "COMPLETED",
    "COMPLETION_FILTERS",
    "PENDING",
    "Projection",
    "filter_by_category",
    "filter_by_completion",
    "search_users",
]
