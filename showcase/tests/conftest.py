from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import pytest

from showcase.adapters.api_errors import ApiNotFoundError
from showcase.domain.entities import Comment, Company, Post, Product, Todo, User
from showcase.usecases.fetch_resource import FetchResource


class ManualDispatcher:
    """Holds submitted jobs until the test runs them, in any order."""

    def __init__(self) -> None:
        self.pending: List[Tuple[Callable[[], Any], Callable[[Any], None]]] = []

    def submit(self, job: Callable[[], Any], on_done: Callable[[Any], None]) -> None:
        self.pending.append((job, on_done))

    def run(self, index: int = 0) -> Any:
        job, on_done = self.pending.pop(index)
        result = job()
        on_done(result)
        return result

    def run_all(self) -> None:
        while self.pending:
            self.run(0)


def make_product(product_id: int, category: str = "electronics", price: float = 10.0) -> Product:
    return Product(id=product_id, title=f"Product {product_id}", price=price, category=category)


def make_user(user_id: int, name: str, email: str, company: str) -> User:
    return User(
        id=user_id,
        name=name,
        username=name.split()[0].lower(),
        email=email,
        company=Company(name=company),
    )


class FakeCatalog:
    def __init__(self) -> None:
        self.products: List[Product] = [
            make_product(1, "electronics"),
            make_product(2, "jewelery"),
            make_product(3, "electronics"),
        ]
        self.categories: List[str] = ["electronics", "jewelery"]
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, Any]] = []

    def _check(self, name: str, arg: Any = None) -> None:
        self.calls.append((name, arg))
        if name in self.errors:
            raise self.errors[name]

    def list_products(self) -> List[Product]:
        self._check("list_products")
        return list(self.products)

    def list_products_in_category(self, category: str) -> List[Product]:
        self._check("list_products_in_category", category)
        return [p for p in self.products if p.category == category]

    def get_product(self, product_id: int) -> Product:
        self._check("get_product", product_id)
        for product in self.products:
            if product.id == product_id:
                return product
        raise ApiNotFoundError("product: Product not found", context="product")

    def list_categories(self) -> List[str]:
        self._check("list_categories")
        return list(self.categories)


class FakeFeed:
    def __init__(self) -> None:
        self.users: List[User] = [
            make_user(1, "Leanne Graham", "Sincere@april.biz", "Romaguera-Crona"),
            make_user(2, "Ervin Howell", "Shanna@melissa.tv", "Deckow-Crist"),
            make_user(3, "Clementine Bauch", "Nathan@yesenia.net", "Romaguera-Jacobson"),
        ]
        self.posts: List[Post] = [
            Post(id=i, user_id=1, title=f"Post {i}", body="x" * (50 * i)) for i in range(1, 6)
        ]
        self.todos: List[Todo] = [
            Todo(id=i, title=f"Task {i}", completed=(i % 3 == 0)) for i in range(1, 31)
        ]
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, Any]] = []

    def _check(self, name: str, arg: Any = None) -> None:
        self.calls.append((name, arg))
        if name in self.errors:
            raise self.errors[name]

    def list_users(self) -> List[User]:
        self._check("list_users")
        return list(self.users)

    def list_posts(self) -> List[Post]:
        self._check("list_posts")
        return list(self.posts)

    def list_comments(self, post_id: int) -> List[Comment]:
        self._check("list_comments", post_id)
        return [
            Comment(id=post_id * 10 + n, post_id=post_id, name=f"c{n}", email="a@b.c", body="hi")
            for n in range(1, 3)
        ]

    def list_todos(self) -> List[Todo]:
        self._check("list_todos")
        return list(self.todos)


@pytest.fixture
def dispatcher() -> ManualDispatcher:
    return ManualDispatcher()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def feed() -> FakeFeed:
    return FakeFeed()


@pytest.fixture
def fetch(catalog: FakeCatalog, feed: FakeFeed) -> FetchResource:
    return FetchResource(catalog, feed)
