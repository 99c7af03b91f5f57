from showcase.adapters.api_errors import ApiHttpError
from showcase.domain.entities import Product
from showcase.domain.fetch_state import Endpoint, FetchRequest
from showcase.viewmodels.product_listing_vm import ProductListingVM


def test_start_loads_products_and_categories_independently(fetch, dispatcher) -> None:
    vm = ProductListingVM(fetch, dispatcher)

    vm.start()

    assert vm.products.status.is_loading
    assert vm.category_slot.status.is_loading
    dispatcher.run(1)
    assert vm.category_slot.status.is_ready
    assert vm.products.status.is_loading
    dispatcher.run()
    assert vm.products.status.is_ready
    assert vm.visible_products == vm.products.items
    assert vm.categories == ("electronics", "jewelery")


def test_all_filter_shows_full_collection(fetch, dispatcher, catalog) -> None:
    catalog.products = [Product(id=1, title="Backpack", price=109.95, category="men's clothing")]
    vm = ProductListingVM(fetch, dispatcher)
    vm.start()
    dispatcher.run_all()

    assert vm.products.status.is_ready
    assert vm.visible_products == tuple(catalog.products)


def test_select_category_replaces_collection_with_category_fetch(fetch, dispatcher, catalog) -> None:
    catalog.products = [
        Product(id=i, title=f"p{i}", price=1.0, category="electronics") for i in range(1, 4)
    ] + [Product(id=9, title="ring", price=5.0, category="jewelery")]
    vm = ProductListingVM(fetch, dispatcher)
    vm.start()
    dispatcher.run_all()

    vm.select_category("electronics")

    assert vm.products.last_request == FetchRequest(Endpoint.PRODUCTS_BY_CATEGORY, ("electronics",))
    # Held data is already narrowed while the fetch is in flight.
    assert [p.id for p in vm.visible_products] == [1, 2, 3]
    dispatcher.run_all()
    assert len(vm.products.items) == 3
    assert [p.id for p in vm.visible_products] == [1, 2, 3]


def test_select_all_fetches_full_catalog(fetch, dispatcher, catalog) -> None:
    vm = ProductListingVM(fetch, dispatcher)
    vm.select_category("jewelery")
    vm.select_category("all")
    dispatcher.run_all()

    assert vm.products.last_request == FetchRequest(Endpoint.PRODUCTS)
    assert len(vm.visible_products) == 3


def test_failure_keeps_products_and_retry_repeats_category_request(fetch, dispatcher, catalog) -> None:
    vm = ProductListingVM(fetch, dispatcher)
    vm.start()
    dispatcher.run_all()
    before = vm.products.items

    catalog.errors["list_products_in_category"] = ApiHttpError("HTTP 404", status=404)
    vm.select_category("electronics")
    dispatcher.run_all()

    assert vm.products.status.is_failed
    assert vm.error_message.startswith("Failed to fetch products.")
    assert vm.products.items is before

    del catalog.errors["list_products_in_category"]
    assert vm.retry() is True
    dispatcher.run_all()
    assert catalog.calls[-1] == ("list_products_in_category", "electronics")
    assert vm.products.status.is_ready
    assert vm.error_message is None


def test_category_buttons_and_open_product(fetch, dispatcher) -> None:
    opened = []
    vm = ProductListingVM(fetch, dispatcher, on_open_product=opened.append)
    vm.start()
    dispatcher.run_all()

    assert vm.category_buttons() == [
        ("all", "All Products", True),
        ("electronics", "Electronics", False),
        ("jewelery", "Jewelery", False),
    ]
    assert vm.open_product(3) is True
    assert vm.open_product(404) is False
    assert opened == [3]


def test_visible_products_not_recomputed_on_unrelated_reads(fetch, dispatcher) -> None:
    vm = ProductListingVM(fetch, dispatcher)
    vm.start()
    dispatcher.run_all()

    vm.visible_products
    vm.visible_products
    vm.category_buttons()

    assert vm._visible.recomputations == 1
