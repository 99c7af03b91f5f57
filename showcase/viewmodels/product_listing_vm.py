"""Product listing screen: category buttons over a fetched product grid.

Call context:
    ``ShowcaseController`` builds one instance; the renderer reads
    ``visible_products``/``categories`` and calls ``select_category``,
    ``open_product`` and ``retry``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..domain.entities import Product
from ..domain.fetch_state import Endpoint
from ..domain.ports import Dispatcher
from ..domain.projection import ALL, Projection, filter_by_category
from .formatting import category_label
from .remote_slot import FetchFn
from .screen_vm import ScreenVM

LOGGER = logging.getLogger(__name__)


class ProductListingVM(ScreenVM):
    """Products and categories are two independent slots.

    Choosing a category re-fetches from the category-scoped endpoint (or the
    full catalog for ``"all"``); the visible grid is additionally projected
    through the category filter so it never shows items from another
    category while a fetch is in flight.
    """

    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
        on_open_product: Optional[Callable[[int], None]] = None,
    ) -> None:
        super().__init__(fetch, dispatcher, on_change=on_change)
        self.products = self._slot("products")
        self.category_slot = self._slot("categories")
        self.selected_category: str = ALL
        self.on_open_product = on_open_product
        self._visible = Projection(filter_by_category)

    def start(self) -> None:
        self.products.load(self._products_request(self.selected_category))
        self.category_slot.load(self._request(Endpoint.CATEGORIES))

    def select_category(self, category: str) -> None:
        category = category or ALL
        LOGGER.debug("Category selected: %s", category)
        self.selected_category = category
        self.products.load(self._products_request(category))

    def open_product(self, product_id: int) -> bool:
        """Forward a product click to the detail screen if it is in the grid."""
        if not any(product.id == product_id for product in self.products.items):
            return False
        if self.on_open_product:
            self.on_open_product(product_id)
        return True

    # ------------------------------------------------------------------
    @property
    def visible_products(self) -> Tuple[Product, ...]:
        return self._visible(self.products.items, self.selected_category)

    @property
    def categories(self) -> Tuple[str, ...]:
        return self.category_slot.items

    def category_buttons(self) -> List[Tuple[str, str, bool]]:
        """``(category, label, active)`` for "all" followed by fetched categories."""
        options = [ALL, *self.categories]
        return [
            (category, category_label(category), category == self.selected_category)
            for category in options
        ]

    def _products_request(self, category: str):
        if category == ALL:
            return self._request(Endpoint.PRODUCTS)
        return self._request(Endpoint.PRODUCTS_BY_CATEGORY, category)


__all__ = ["ProductListingVM"]
