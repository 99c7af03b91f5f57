"""Purchase quantity rules for the product detail screen."""

from __future__ import annotations

import math
from typing import Any

MIN_QUANTITY = 1
MAX_QUANTITY = 10


def _to_int(value: Any) -> int:
    """Coerce raw input to an integer; anything unusable becomes the minimum."""
    if value is None or isinstance(value, bool):
        return MIN_QUANTITY
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return MIN_QUANTITY
        return int(value)
    text = str(value).strip()
    if not text:
        return MIN_QUANTITY
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return MIN_QUANTITY
    if math.isnan(number) or math.isinf(number):
        return MIN_QUANTITY
    return int(number)


def clamp_quantity(value: Any) -> int:
    """Return ``value`` as an int inside ``[MIN_QUANTITY, MAX_QUANTITY]``.

    Zero is treated like missing input and becomes ``MIN_QUANTITY``.
    """
    number = _to_int(value)
    if number == 0:
        return MIN_QUANTITY
    return max(MIN_QUANTITY, min(MAX_QUANTITY, number))


__all__ = ["MAX_QUANTITY", "MIN_QUANTITY", "clamp_quantity"]
