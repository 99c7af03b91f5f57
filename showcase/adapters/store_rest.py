"""REST adapter implementing the product catalog port against Fake Store API."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from showcase.domain.entities import Product
from showcase.domain.ports import CatalogPort, ProductId

from showcase.adapters.api_errors import ApiNotFoundError, ApiParseError
from showcase.adapters.http_client import (
    HttpConfig,
    JsonSession,
    decode_json,
    ensure_ok,
    join_url,
    parse_item,
    parse_list,
)

DEFAULT_STORE_URL = "https://fakestoreapi.com"


class StoreRestAdapter(CatalogPort):
    """HTTP adapter for `/products*` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_STORE_URL,
        *,
        request_timeout_s: float = 10,
        session: Optional[JsonSession] = None,
    ) -> None:
        if not base_url:
            raise ValueError("StoreRestAdapter requires a base URL")
        self.base_url = base_url
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = session or JsonSession(self.cfg)

    def list_products(self) -> List[Product]:
        """Fetch the whole catalog from `/products`."""
        data = self.session.get_json(self._make_url("/products"), "products")
        return parse_list(data, Product.from_payload, ctx="products")

    def list_products_in_category(self, category: str) -> List[Product]:
        """Fetch one category from `/products/category/{name}`."""
        name = str(category or "").strip()
        if not name:
            raise ValueError("category is required")
        ctx = f"products_by_category[{name}]"
        url = self._make_url(f"/products/category/{quote(name, safe='')}")
        data = self.session.get_json(url, ctx)
        return parse_list(data, Product.from_payload, ctx=ctx)

    def get_product(self, product_id: ProductId) -> Product:
        """Fetch one product from `/products/{id}`.

        The API answers unknown ids with ``200`` and an empty body, so an empty
        or ``null`` body is reported as not found.
        """
        ctx = f"product[{product_id}]"
        resp = self.session.get(self._make_url(f"/products/{int(product_id)}"))
        ensure_ok(resp, ctx)
        if not (getattr(resp, "text", "") or "").strip():
            raise ApiNotFoundError(f"{ctx}: Product not found", status=resp.status_code, context=ctx)
        data = decode_json(resp, ctx)
        if data is None:
            raise ApiNotFoundError(f"{ctx}: Product not found", status=resp.status_code, context=ctx)
        return parse_item(data, Product.from_payload, ctx=ctx)

    def list_categories(self) -> List[str]:
        """Fetch category names from `/products/categories`."""
        data = self.session.get_json(self._make_url("/products/categories"), "categories")
        if not isinstance(data, list):
            raise ApiParseError("categories: expected list response", payload=data, context="categories")
        return [str(entry) for entry in data if isinstance(entry, str) and entry.strip()]

    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        return join_url(self.base_url, path)


__all__ = ["DEFAULT_STORE_URL", "StoreRestAdapter"]
