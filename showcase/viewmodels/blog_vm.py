"""Blog screen: post list with a selected post and its comments.

Comments are a dependent collection: they always belong to
``selected_post_id`` and are cleared whenever the selection changes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from ..domain.entities import Comment, Post
from ..domain.fetch_state import Endpoint
from ..domain.ports import Dispatcher
from .formatting import excerpt
from .remote_slot import FetchFn
from .screen_vm import ScreenVM

LOGGER = logging.getLogger(__name__)


class BlogVM(ScreenVM):
    def __init__(
        self,
        fetch: FetchFn,
        dispatcher: Dispatcher,
        *,
        on_change: Optional[Callable[[], None]] = None,
        excerpt_length: int = 100,
    ) -> None:
        super().__init__(fetch, dispatcher, on_change=on_change)
        self.posts = self._slot("posts")
        self.comments_slot = self._slot("comments")
        self.selected_post_id: Optional[int] = None
        self.excerpt_length = excerpt_length

    def start(self) -> None:
        self.posts.load(self._request(Endpoint.POSTS))

    def select_post(self, post_id: int) -> bool:
        """Select a held post and fetch its comments; unknown ids are ignored."""
        if self._find(post_id) is None:
            LOGGER.debug("select_post: post %s not loaded", post_id)
            return False
        self.selected_post_id = post_id
        self.comments_slot.clear()
        self.comments_slot.load(self._request(Endpoint.POST_COMMENTS, post_id))
        return True

    def clear_selection(self) -> None:
        self.selected_post_id = None
        self.comments_slot.clear()

    # ------------------------------------------------------------------
    @property
    def selected_post(self) -> Optional[Post]:
        if self.selected_post_id is None:
            return None
        return self._find(self.selected_post_id)

    @property
    def comments(self) -> Tuple[Comment, ...]:
        return self.comments_slot.items

    def excerpt(self, post: Post) -> str:
        return excerpt(post.body, self.excerpt_length)

    def posts_summary(self) -> str:
        return f"Showing {len(self.posts.items)} posts"

    def comments_heading(self) -> str:
        return f"Comments ({len(self.comments)})"

    def _find(self, post_id: int) -> Optional[Post]:
        for post in self.posts.items:
            if post.id == post_id:
                return post
        return None


__all__ = ["BlogVM"]
