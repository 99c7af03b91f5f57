"""Todo tracker: filterable task list with local-only edits.

Toggling and adding tasks never reach the server; they replace the held
tuple so the filtered view is recomputed from it.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple

from ..domain.entities import Todo
from ..domain.fetch_state import Endpoint
from ..domain.ports import Dispatcher
from ..domain.projection import (
    ALL,
    COMPLETED,
    COMPLETION_FILTERS,
    PENDING,
    Projection,
    filter_by_completion,
)
from .remote_slot import FetchFn
from .screen_vm import ScreenVM

LOGGER = logging.getLogger(__name__)

_EMPTY_MESSAGES = {
    ALL: "Your task list is empty. Add a new task to get started!",
    COMPLETED: "You haven't completed any tasks yet.",
    PENDING: "You don't have any pending tasks. Great job!",
}


class TodoVM(ScreenVM):
    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
        default_user_id: int = 1,
    ) -> None:
        super().__init__(fetch, dispatcher, on_change=on_change)
        self.todos = self._slot("todos")
        self.filter: str = ALL
        self.default_user_id = default_user_id
        self._last_id = 0
        self._visible = Projection(filter_by_completion)

    def start(self) -> None:
        self.todos.load(self._request(Endpoint.TODOS))

    def set_filter(self, state: str) -> None:
        if state not in COMPLETION_FILTERS:
            raise ValueError(f"Unknown todo filter '{state}'.")
        self.filter = state
        self._changed()

    def toggle(self, todo_id: int) -> bool:
        """Flip ``completed`` on one task; returns False for unknown ids."""
        items = self.todos.items
        if not any(todo.id == todo_id for todo in items):
            return False
        self.todos.replace_items(
            replace(todo, completed=not todo.completed) if todo.id == todo_id else todo
            for todo in items
        )
        return True

    def add_todo(self, title: str) -> Optional[Todo]:
        """Prepend a pending task; blank titles are ignored."""
        text = (title or "").strip()
        if not text:
            return None
        todo = Todo(id=self._next_id(), title=text, completed=False, user_id=self.default_user_id)
        LOGGER.debug("Adding local todo %s", todo.id)
        self.todos.replace_items((todo, *self.todos.items))
        return todo

    # ------------------------------------------------------------------
    @property
    def visible_todos(self) -> Tuple[Todo, ...]:
        return self._visible(self.todos.items, self.filter)

    @property
    def total_count(self) -> int:
        return len(self.todos.items)

    @property
    def completed_count(self) -> int:
        return sum(1 for todo in self.todos.items if todo.completed)

    @property
    def pending_count(self) -> int:
        return self.total_count - self.completed_count

    def summary_label(self) -> str:
        if self.filter == COMPLETED:
            return f"Showing {self.completed_count} completed tasks"
        if self.filter == PENDING:
            return f"Showing {self.pending_count} pending tasks"
        return f"Showing all {self.total_count} tasks"

    def empty_message(self) -> str:
        return _EMPTY_MESSAGES[self.filter]

    def _next_id(self) -> int:
        # Monotonic and above every id currently held, fetched or local.
        highest = max((todo.id for todo in self.todos.items), default=0)
        self._last_id = max(self._last_id, highest) + 1
        return self._last_id


__all__ = ["TodoVM"]
