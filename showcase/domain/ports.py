from __future__ import annotations
from typing import Any, Callable, List, Protocol

from .entities import Comment, Post, Product, Todo, User

ProductId = int
PostId = int


# ---- Ports (Hexagonal boundaries) ----
class CatalogPort(Protocol):
    """Read-only product catalog (Fake Store API)."""

    def list_products(self) -> List[Product]: ...
    def list_products_in_category(self, category: str) -> List[Product]: ...
    def get_product(self, product_id: ProductId) -> Product: ...
    def list_categories(self) -> List[str]: ...


class FeedPort(Protocol):
    """Users, posts, comments and todos (JSONPlaceholder)."""

    def list_users(self) -> List[User]: ...
    def list_posts(self) -> List[Post]: ...
    def list_comments(self, post_id: PostId) -> List[Comment]: ...
    def list_todos(self) -> List[Todo]: ...


class Dispatcher(Protocol):
    """Runs a blocking job and calls ``on_done(result)`` on the UI event queue."""

    def submit(self, job: Callable[[], Any], on_done: Callable[[Any], None]) -> None: ...
