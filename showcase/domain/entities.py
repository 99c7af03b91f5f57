"""Domain value objects for the catalog, directory, blog and todo screens.

Adapters build these from raw JSON payloads via ``from_payload``; view models
and projections only ever see the typed objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if not isinstance(payload, Mapping):
        raise ValueError(f"Expected object payload, got {type(payload).__name__}.")
    if key not in payload or payload[key] is None:
        raise ValueError(f"Payload is missing required field '{key}'.")
    return payload[key]


def _as_int(payload: Mapping[str, Any], key: str) -> int:
    value = _require(payload, key)
    if isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{key}' must be an integer.") from exc


def _as_float(payload: Mapping[str, Any], key: str, default: Optional[float] = None) -> float:
    if default is not None and payload.get(key) is None:
        return default
    value = _require(payload, key)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{key}' must be a number.") from exc


def _as_bool(payload: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be a boolean.")
    return value


def _as_text(payload: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    if default is not None and payload.get(key) is None:
        return default
    return str(_require(payload, key))


@dataclass(frozen=True)
class Rating:
    """Average customer rating and number of votes for a product."""

    rate: float = 0.0
    count: int = 0

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "Rating":
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            rate=_as_float(payload, "rate", 0.0),
            count=int(payload.get("count") or 0),
        )


@dataclass(frozen=True)
class Product:
    """Catalog entry from the store API."""

    id: int
    title: str
    price: float
    category: str
    description: str = ""
    image: str = ""
    rating: Rating = Rating()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Product":
        return cls(
            id=_as_int(payload, "id"),
            title=_as_text(payload, "title"),
            price=_as_float(payload, "price"),
            category=_as_text(payload, "category"),
            description=_as_text(payload, "description", ""),
            image=_as_text(payload, "image", ""),
            rating=Rating.from_payload(payload.get("rating")),
        )


@dataclass(frozen=True)
class Company:
    name: str
    catch_phrase: str = ""
    bs: str = ""


@dataclass(frozen=True)
class Address:
    street: str = ""
    suite: str = ""
    city: str = ""
    zipcode: str = ""


@dataclass(frozen=True)
class User:
    """Directory entry shown on the user dashboard."""

    id: int
    name: str
    username: str
    email: str
    company: Company
    phone: str = ""
    website: str = ""
    address: Address = Address()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "User":
        company_raw = _require(payload, "company")
        address_raw = payload.get("address")
        address = Address()
        if isinstance(address_raw, Mapping):
            address = Address(
                street=str(address_raw.get("street") or ""),
                suite=str(address_raw.get("suite") or ""),
                city=str(address_raw.get("city") or ""),
                zipcode=str(address_raw.get("zipcode") or ""),
            )
        return cls(
            id=_as_int(payload, "id"),
            name=_as_text(payload, "name"),
            username=_as_text(payload, "username", ""),
            email=_as_text(payload, "email"),
            company=Company(
                name=_as_text(company_raw, "name"),
                catch_phrase=str(company_raw.get("catchPhrase") or ""),
                bs=str(company_raw.get("bs") or ""),
            ),
            phone=_as_text(payload, "phone", ""),
            website=_as_text(payload, "website", ""),
            address=address,
        )


@dataclass(frozen=True)
class Post:
    id: int
    user_id: int
    title: str
    body: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Post":
        return cls(
            id=_as_int(payload, "id"),
            user_id=_as_int(payload, "userId"),
            title=_as_text(payload, "title"),
            body=_as_text(payload, "body", ""),
        )


@dataclass(frozen=True)
class Comment:
    id: int
    post_id: int
    name: str
    email: str
    body: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Comment":
        return cls(
            id=_as_int(payload, "id"),
            post_id=_as_int(payload, "postId"),
            name=_as_text(payload, "name"),
            email=_as_text(payload, "email", ""),
            body=_as_text(payload, "body", ""),
        )


@dataclass(frozen=True)
class Todo:
    """Task entry; ``completed`` is the only field edited locally."""

    id: int
    title: str
    completed: bool = False
    user_id: int = 1

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Todo":
        return cls(
            id=_as_int(payload, "id"),
            title=_as_text(payload, "title"),
            completed=_as_bool(payload, "completed"),
            user_id=int(payload.get("userId") or 1),
        )


__all__ = [
    "Address",
    "Comment",
    "Company",
    "Post",
    "Product",
    "Rating",
    "Todo",
    "User",
]
