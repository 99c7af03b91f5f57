from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..domain.entities import Product
from ..domain.fetch_state import Endpoint
from ..domain.ports import Dispatcher
from ..domain.quantity import MAX_QUANTITY, MIN_QUANTITY, clamp_quantity
from .formatting import format_price
from .remote_slot import FetchFn
from .screen_vm import ScreenVM

LOGGER = logging.getLogger(__name__)

NO_SELECTION_TITLE = "No Product Selected"
NO_SELECTION_HINT = "Please select a product to view details."


class ProductDetailVM(ScreenVM):
    """Single product page with a clamped purchase quantity."""

    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(fetch, dispatcher, on_change=on_change)
        self.product_slot = self._slot("product")
        self.product_id: Optional[int] = None
        self.quantity: int = MIN_QUANTITY

    def open(self, product_id: Optional[int]) -> None:
        """Show ``product_id``; ``None`` returns to the no-selection state."""
        if product_id is None:
            self.close()
            return
        if product_id != self.product_id:
            # Detail belongs to one id only.
            self.product_slot.clear()
            self.quantity = MIN_QUANTITY
        self.product_id = product_id
        self.product_slot.load(self._request(Endpoint.PRODUCT, product_id))

    def close(self) -> None:
        self.product_id = None
        self.quantity = MIN_QUANTITY
        self.product_slot.clear()

    # ------------------------------------------------------------------
    # Quantity
    # ------------------------------------------------------------------
    def set_quantity(self, raw: Any) -> int:
        self.quantity = clamp_quantity(raw)
        self._changed()
        return self.quantity

    def increment(self) -> int:
        self.quantity = min(MAX_QUANTITY, self.quantity + 1)
        self._changed()
        return self.quantity

    def decrement(self) -> int:
        self.quantity = max(MIN_QUANTITY, self.quantity - 1)
        self._changed()
        return self.quantity

    # ------------------------------------------------------------------
    @property
    def has_selection(self) -> bool:
        return self.product_id is not None

    @property
    def product(self) -> Optional[Product]:
        items = self.product_slot.items
        return items[0] if items else None

    @property
    def total_price(self) -> float:
        product = self.product
        if product is None:
            return 0.0
        return product.price * self.quantity

    def add_to_cart_label(self) -> str:
        return f"Add to Cart - {format_price(self.total_price)}"

    def add_to_cart(self) -> Optional[str]:
        """Return the confirmation text, or ``None`` when nothing is loaded."""
        product = self.product
        if product is None:
            return None
        LOGGER.info("Added %d x product %s to cart", self.quantity, product.id)
        return f"Added {self.quantity} {product.title} to cart!"


__all__ = ["NO_SELECTION_HINT", "NO_SELECTION_TITLE", "ProductDetailVM"]
