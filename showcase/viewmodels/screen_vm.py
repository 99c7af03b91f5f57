from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from ..domain.fetch_state import FetchRequest
from ..domain.ports import Dispatcher
from .remote_slot import FetchFn, RemoteSlot


class ScreenVM:
    """Shared plumbing for screens built from one or more ``RemoteSlot``s.

    Subclasses create their slots through :meth:`_slot` so every state
    transition is forwarded to ``on_change``.
    """

    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self._fetch = fetch
        self._dispatcher = dispatcher
        self.on_change = on_change
        self._slots: List[RemoteSlot] = []

    def _slot(self, name: str) -> RemoteSlot:
        slot: RemoteSlot = RemoteSlot(name, self._fetch, self._dispatcher, on_change=self._changed)
        self._slots.append(slot)
        return slot

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    # ------------------------------------------------------------------
    def retry(self) -> bool:
        """Re-issue the failed fetch of every slot currently in Failed."""
        retried = False
        for slot in self._failed_slots():
            retried = slot.retry() or retried
        return retried

    @property
    def error_message(self) -> Optional[str]:
        """Reason of the first failed slot, if any."""
        for slot in self._failed_slots():
            return slot.error_message
        return None

    @property
    def is_loading(self) -> bool:
        return any(slot.is_loading for slot in self._slots)

    def _failed_slots(self) -> Iterable[RemoteSlot]:
        return [slot for slot in self._slots if slot.status.is_failed]

    @staticmethod
    def _request(endpoint, *params) -> FetchRequest:
        return FetchRequest(endpoint, tuple(params))


__all__ = ["ScreenVM"]
