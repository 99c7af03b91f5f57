"""Per-collection view state: held items, fetch status and last request.

Call context:
    Screen view models own one ``RemoteSlot`` per independently fetched
    collection and call ``load``/``retry``/``clear``/``replace_items`` from
    their interaction handlers. Renderers only read ``items`` and ``status``.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

from ..domain.errors import FetchError
from ..domain.ports import Dispatcher
from ..domain.fetch_state import FetchRequest, FetchResult, FetchStatus

T = TypeVar("T")

FetchFn = Callable[[FetchRequest], FetchResult]

LOGGER = logging.getLogger(__name__)


class RemoteSlot(Generic[T]):
    """One remote collection and its lifecycle (Idle, Loading, Ready, Failed).

    Successful fetches replace ``items`` wholesale; failed fetches leave the
    previous items in place. Every ``load`` and ``clear`` bumps a request
    sequence number, and completions carrying an older number are dropped so
    a slow superseded response can never overwrite newer state.
    """

    def __init__(
        self,
        name: str,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.name = name
        self._fetch = fetch
        self._dispatcher = dispatcher
        self.on_change = on_change
        self._items: Tuple[T, ...] = ()
        self._status = FetchStatus.idle()
        self._last_request: Optional[FetchRequest] = None
        self._sequence = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def items(self) -> Tuple[T, ...]:
        return self._items

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def last_request(self) -> Optional[FetchRequest]:
        return self._last_request

    @property
    def is_loading(self) -> bool:
        return self._status.is_loading

    @property
    def error_message(self) -> Optional[str]:
        return self._status.reason if self._status.is_failed else None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def load(self, request: FetchRequest) -> None:
        """Enter Loading and dispatch ``request``.

        The status flips before the job is submitted, so callers observe
        Loading even when the dispatcher is asynchronous.
        """
        self._sequence += 1
        token = self._sequence
        self._last_request = request
        self._status = FetchStatus.loading()
        LOGGER.debug("%s: loading %s (seq=%d)", self.name, request, token)
        self._notify()
        self._dispatcher.submit(partial(self._run, request), partial(self._complete, token))

    def retry(self) -> bool:
        """Re-issue the most recent request; returns False if none was made."""
        if self._last_request is None:
            return False
        LOGGER.info("%s: retrying %s", self.name, self._last_request)
        self.load(self._last_request)
        return True

    def clear(self) -> None:
        """Drop items and return to Idle; in-flight responses are ignored."""
        self._sequence += 1
        self._items = ()
        self._status = FetchStatus.idle()
        self._last_request = None
        self._notify()

    def replace_items(self, items: Sequence[T]) -> None:
        """Apply a local edit; status and last request are untouched."""
        self._items = tuple(items)
        self._notify()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _run(self, request: FetchRequest) -> FetchResult:
        # Runs on the dispatcher; an escaping exception would strand the slot in Loading.
        try:
            return self._fetch(request)
        except Exception as exc:
            LOGGER.exception("%s: fetch %s raised", self.name, request)
            message = str(exc) or "Unexpected error."
            return FetchResult.failure(
                request, FetchError("FETCH_FAILED", f"Failed to fetch {self.name}. {message}")
            )

    def _complete(self, token: int, result: FetchResult) -> None:
        if token != self._sequence:
            LOGGER.debug(
                "%s: ignoring stale response for %s (seq=%d, current=%d)",
                self.name,
                result.request,
                token,
                self._sequence,
            )
            return
        if result.ok:
            self._items = tuple(result.items)
            self._status = FetchStatus.ready()
        else:
            self._status = FetchStatus.failed(result.error.message)
        self._notify()

    def _notify(self) -> None:
        if self.on_change:
            self.on_change()


__all__ = ["FetchFn", "RemoteSlot"]
