from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pytest

from showcase.adapters.api_errors import ApiNotFoundError, ApiParseError
from showcase.adapters.store_rest import StoreRestAdapter


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200, text: Any = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = str(payload) if text is None else text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[_ResponseStub]) -> None:
        self._responses = list(responses)
        self.calls: List[str] = []

    def get(self, url: str, *, headers: Dict[str, str], timeout: float) -> _ResponseStub:
        self.calls.append(url)
        return self._responses.pop(0)


def _adapter(*responses: _ResponseStub) -> StoreRestAdapter:
    adapter = StoreRestAdapter("https://store.test/")
    adapter.session.session = _SessionStub(responses)  # type: ignore[assignment]
    return adapter


def _product(product_id: int, category: str = "electronics") -> Dict[str, Any]:
    return {
        "id": product_id,
        "title": f"Item {product_id}",
        "price": 9.99,
        "description": "d",
        "category": category,
        "image": "i",
        "rating": {"rate": 4.1, "count": 10},
    }


def test_list_products_hits_products_endpoint() -> None:
    adapter = _adapter(_ResponseStub([_product(1), _product(2)]))

    products = adapter.list_products()

    assert [p.id for p in products] == [1, 2]
    assert adapter.session.session.calls == ["https://store.test/products"]


def test_list_products_in_category_quotes_the_name() -> None:
    adapter = _adapter(_ResponseStub([_product(3, "men's clothing")]))

    products = adapter.list_products_in_category("men's clothing")

    assert products[0].category == "men's clothing"
    assert adapter.session.session.calls == ["https://store.test/products/category/men%27s%20clothing"]


def test_get_product_empty_body_is_not_found() -> None:
    adapter = _adapter(_ResponseStub(ValueError("no json"), text=""))

    with pytest.raises(ApiNotFoundError):
        adapter.get_product(999)
    assert adapter.session.session.calls == ["https://store.test/products/999"]


def test_get_product_null_body_is_not_found() -> None:
    adapter = _adapter(_ResponseStub(None, text="null"))

    with pytest.raises(ApiNotFoundError):
        adapter.get_product(5)


def test_get_product_returns_typed_product() -> None:
    adapter = _adapter(_ResponseStub(_product(4)))

    assert adapter.get_product(4).rating.count == 10


def test_list_categories_keeps_strings_only() -> None:
    adapter = _adapter(_ResponseStub(["electronics", 3, "jewelery", " "]))

    assert adapter.list_categories() == ["electronics", "jewelery"]
    assert adapter.session.session.calls == ["https://store.test/products/categories"]


def test_malformed_product_is_a_parse_error() -> None:
    adapter = _adapter(_ResponseStub([{"id": 1}]))

    with pytest.raises(ApiParseError):
        adapter.list_products()


def test_adapter_requires_base_url() -> None:
    with pytest.raises(ValueError):
        StoreRestAdapter("")
