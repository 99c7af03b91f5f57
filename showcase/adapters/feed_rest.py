"""REST adapter implementing the feed port against JSONPlaceholder."""

from __future__ import annotations

from typing import List, Optional

from showcase.domain.entities import Comment, Post, Todo, User
from showcase.domain.ports import FeedPort, PostId

from showcase.adapters.http_client import HttpConfig, JsonSession, join_url, parse_list

DEFAULT_FEED_URL = "https://jsonplaceholder.typicode.com"


class FeedRestAdapter(FeedPort):
    """HTTP adapter for `/users`, `/posts`, `/posts/{id}/comments` and `/todos`."""

    def __init__(
        self,
        base_url: str = DEFAULT_FEED_URL,
        *,
        request_timeout_s: float = 10,
        session: Optional[JsonSession] = None,
    ) -> None:
        if not base_url:
            raise ValueError("FeedRestAdapter requires a base URL")
        self.base_url = base_url
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = session or JsonSession(self.cfg)

    def list_users(self) -> List[User]:
        data = self.session.get_json(self._make_url("/users"), "users")
        return parse_list(data, User.from_payload, ctx="users")

    def list_posts(self) -> List[Post]:
        data = self.session.get_json(self._make_url("/posts"), "posts")
        return parse_list(data, Post.from_payload, ctx="posts")

    def list_comments(self, post_id: PostId) -> List[Comment]:
        ctx = f"post_comments[{post_id}]"
        data = self.session.get_json(self._make_url(f"/posts/{int(post_id)}/comments"), ctx)
        return parse_list(data, Comment.from_payload, ctx=ctx)

    def list_todos(self) -> List[Todo]:
        """Return the full todo list; truncation is left to the caller."""
        data = self.session.get_json(self._make_url("/todos"), "todos")
        return parse_list(data, Todo.from_payload, ctx="todos")

    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        return join_url(self.base_url, path)


__all__ = ["DEFAULT_FEED_URL", "FeedRestAdapter"]
