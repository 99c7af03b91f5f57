import pytest

from showcase.domain.entities import Comment, Post, Product, Rating, Todo, User


def test_product_from_payload_reads_store_shape() -> None:
    payload = {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Your perfect pack",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }

    product = Product.from_payload(payload)

    assert product.id == 1
    assert product.price == pytest.approx(109.95)
    assert product.category == "men's clothing"
    assert product.rating == Rating(rate=3.9, count=120)


def test_product_without_rating_uses_empty_rating() -> None:
    product = Product.from_payload({"id": "7", "title": "t", "price": "2.5", "category": "c"})

    assert product.id == 7
    assert product.price == pytest.approx(2.5)
    assert product.rating == Rating()


def test_product_missing_price_is_rejected() -> None:
    with pytest.raises(ValueError, match="price"):
        Product.from_payload({"id": 1, "title": "t", "category": "c"})


def test_user_from_payload_maps_company_and_address() -> None:
    payload = {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {"street": "Kulas Light", "suite": "Apt. 556", "city": "Gwenborough", "zipcode": "92998-3874"},
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {"name": "Romaguera-Crona", "catchPhrase": "Multi-layered", "bs": "harness"},
    }

    user = User.from_payload(payload)

    assert user.company.name == "Romaguera-Crona"
    assert user.company.catch_phrase == "Multi-layered"
    assert user.address.city == "Gwenborough"
    assert user.website == "hildegard.org"


def test_user_requires_company_object() -> None:
    with pytest.raises(ValueError):
        User.from_payload({"id": 1, "name": "n", "email": "e", "company": "acme"})


def test_post_comment_and_todo_use_camel_case_keys() -> None:
    post = Post.from_payload({"userId": 1, "id": 5, "title": "t", "body": "b"})
    comment = Comment.from_payload({"postId": 5, "id": 21, "name": "n", "email": "e", "body": "b"})
    todo = Todo.from_payload({"userId": 2, "id": 3, "title": "fugiat", "completed": True})

    assert post.user_id == 1
    assert comment.post_id == 5
    assert todo == Todo(id=3, title="fugiat", completed=True, user_id=2)


@pytest.mark.parametrize("raw", ["false", "true", 0, 1])
def test_todo_completed_must_be_a_boolean(raw) -> None:
    with pytest.raises(ValueError):
        Todo.from_payload({"userId": 1, "id": 1, "title": "t", "completed": raw})


def test_todo_completed_defaults_to_pending() -> None:
    assert Todo.from_payload({"id": 1, "title": "t"}).completed is False


def test_boolean_id_is_rejected() -> None:
    with pytest.raises(ValueError):
        Post.from_payload({"userId": 1, "id": True, "title": "t", "body": "b"})
