"""User dashboard: searchable user cards with a detail pane."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from ..domain.entities import User
from ..domain.fetch_state import Endpoint
from ..domain.ports import Dispatcher
from ..domain.projection import Projection, search_users
from .remote_slot import FetchFn
from .screen_vm import ScreenVM


class UserDashboardVM(ScreenVM):
    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(fetch, dispatcher, on_change=on_change)
        self.users = self._slot("users")
        self.search_term: str = ""
        self.selected_user_id: Optional[int] = None
        self._visible = Projection(search_users)

    def start(self) -> None:
        self.users.load(self._request(Endpoint.USERS))

    def set_search(self, term: str) -> None:
        self.search_term = term or ""
        self._changed()

    def select_user(self, user_id: int) -> bool:
        """Select a held user; unknown ids leave the selection unchanged."""
        if self._find(user_id) is None:
            return False
        self.selected_user_id = user_id
        self._changed()
        return True

    def clear_selection(self) -> None:
        self.selected_user_id = None
        self._changed()

    # ------------------------------------------------------------------
    @property
    def visible_users(self) -> Tuple[User, ...]:
        return self._visible(self.users.items, self.search_term)

    @property
    def selected_user(self) -> Optional[User]:
        if self.selected_user_id is None:
            return None
        return self._find(self.selected_user_id)

    @property
    def empty_message(self) -> str:
        if self.search_term:
            return f'No users found matching "{self.search_term}".'
        return "No users to show."

    def _find(self, user_id: int) -> Optional[User]:
        for user in self.users.items:
            if user.id == user_id:
                return user
        return None


__all__ = ["UserDashboardVM"]
