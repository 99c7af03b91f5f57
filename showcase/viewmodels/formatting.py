"""Display helpers shared by screen view models.

These return plain strings; renderers decide how to lay them out.
"""

from __future__ import annotations

import math

from ..domain.fetch_state import FetchPhase, FetchStatus

_PHASE_LABELS = {
    FetchPhase.IDLE: "",
    FetchPhase.LOADING: "Loading...",
    FetchPhase.READY: "",
    FetchPhase.FAILED: "Oops! Something went wrong",
}


def status_label(status: FetchStatus) -> str:
    """Map a fetch status to the headline shown above the content."""
    return _PHASE_LABELS.get(status.phase, "")


def category_label(category: str) -> str:
    """Capitalize the first character only (``men's clothing`` -> ``Men's clothing``)."""
    if category == "all":
        return "All Products"
    if not category:
        return ""
    return category[0].upper() + category[1:]


def format_price(amount: float) -> str:
    return f"${amount:.2f}"


def rating_stars(rate: float, *, scale: int = 5) -> str:
    """Filled stars for the rounded rating followed by empty ones up to ``scale``."""
    filled = max(0, min(scale, math.floor(rate + 0.5)))
    return "★" * filled + "☆" * (scale - filled)


def excerpt(text: str, limit: int = 100) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def initial(name: str) -> str:
    """Avatar letter for a comment author."""
    return name[:1]


__all__ = [
    "category_label",
    "excerpt",
    "format_price",
    "initial",
    "rating_stars",
    "status_label",
]
