"""Adapter, use-case and view-model wiring for the five screens.

This module owns construction of the REST adapters, the ``FetchResource``
use case and every screen view model from one
:class:`showcase.app.settings.ShowcaseSettings` value. A renderer creates one
controller, subscribes to ``on_change`` and calls ``start``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..adapters.feed_rest import FeedRestAdapter
from ..adapters.store_rest import StoreRestAdapter
from ..domain.ports import CatalogPort, Dispatcher, FeedPort
from ..usecases.fetch_resource import FetchResource
from ..utils import logging as logging_utils
from ..viewmodels.blog_vm import BlogVM
from ..viewmodels.product_detail_vm import ProductDetailVM
from ..viewmodels.product_listing_vm import ProductListingVM
from ..viewmodels.todo_vm import TodoVM
from ..viewmodels.user_dashboard_vm import UserDashboardVM
from .dispatcher import ImmediateDispatcher
from .settings import ShowcaseSettings


class ShowcaseController:
    """Composition root for the product, user, blog and todo screens.

    Call chain:
        Renderer -> ``ShowcaseController`` -> screen VMs -> ``RemoteSlot`` ->
        ``Dispatcher`` -> ``FetchResource`` -> REST adapters.
    """

    def __init__(
        self,
        settings: Optional[ShowcaseSettings] = None,
        *,
        dispatcher: Optional[Dispatcher] = None,
        catalog: Optional[CatalogPort] = None,
        feed: Optional[FeedPort] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        """Build adapters and view models.

        Args:
            settings: Endpoint URLs and screen constants; defaults when omitted.
            dispatcher: Completion dispatcher; inline execution when omitted.
            catalog: Product port override (tests, offline demos).
            feed: Feed port override.
            on_change: Called after any screen state transition.
        """
        self.settings = settings or ShowcaseSettings()
        self._log = logging.getLogger(__name__)
        self._apply_logging_preferences()
        self.dispatcher = dispatcher or ImmediateDispatcher()
        self.on_change = on_change

        self.catalog = catalog or StoreRestAdapter(
            self.settings.store_base_url,
            request_timeout_s=self.settings.request_timeout_s,
        )
        self.feed = feed or FeedRestAdapter(
            self.settings.feed_base_url,
            request_timeout_s=self.settings.request_timeout_s,
        )
        self.uc_fetch = FetchResource(self.catalog, self.feed, todo_limit=self.settings.todo_limit)

        self.product_detail = ProductDetailVM(
            self.uc_fetch, self.dispatcher, on_change=self._changed
        )
        self.product_listing = ProductListingVM(
            self.uc_fetch,
            self.dispatcher,
            on_change=self._changed,
            on_open_product=self.product_detail.open,
        )
        self.user_dashboard = UserDashboardVM(
            self.uc_fetch, self.dispatcher, on_change=self._changed
        )
        self.blog = BlogVM(
            self.uc_fetch,
            self.dispatcher,
            on_change=self._changed,
            excerpt_length=self.settings.excerpt_length,
        )
        self.todos = TodoVM(self.uc_fetch, self.dispatcher, on_change=self._changed)

    def start(self) -> None:
        """Issue the initial fetch of every list screen.

        The detail screen stays in its no-selection state until a product is
        opened from the listing.
        """
        self._log.info(
            "Starting screens (store=%s, feed=%s)",
            self.settings.store_base_url,
            self.settings.feed_base_url,
        )
        self.product_listing.start()
        self.user_dashboard.start()
        self.blog.start()
        self.todos.start()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    def _apply_logging_preferences(self) -> None:
        logging_utils.configure_root()
        level = logging_utils.apply_preferences(self.settings.debug_logging)
        self._log.debug("Effective log level: %s", logging_utils.level_name(level))


__all__ = ["ShowcaseController"]
