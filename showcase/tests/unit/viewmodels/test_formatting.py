import pytest

from showcase.domain.fetch_state import FetchStatus
from showcase.viewmodels.formatting import (
    category_label,
    excerpt,
    format_price,
    initial,
    rating_stars,
    status_label,
)


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        ("all", "All Products"),
        ("electronics", "Electronics"),
        ("men's clothing", "Men's clothing"),
        ("", ""),
    ],
)
def test_category_label(category: str, expected: str) -> None:
    assert category_label(category) == expected


@pytest.mark.parametrize(
    ("rate", "expected"),
    [
        (3.9, "★★★★☆"),
        (4.5, "★★★★★"),
        (2.4, "★★☆☆☆"),
        (0.0, "☆☆☆☆☆"),
    ],
)
def test_rating_stars_rounds_half_up(rate: float, expected: str) -> None:
    assert rating_stars(rate) == expected


def test_excerpt_truncates_only_long_text() -> None:
    assert excerpt("a" * 100) == "a" * 100
    assert excerpt("a" * 101) == "a" * 100 + "..."
    assert excerpt("abcdef", limit=3) == "abc..."


def test_status_labels_and_small_helpers() -> None:
    assert status_label(FetchStatus.loading()) == "Loading..."
    assert status_label(FetchStatus.failed("x")) == "Oops! Something went wrong"
    assert status_label(FetchStatus.ready()) == ""
    assert format_price(109.95) == "$109.95"
    assert format_price(7) == "$7.00"
    assert initial("id labore ex et quam laborum") == "i"
    assert initial("") == ""
