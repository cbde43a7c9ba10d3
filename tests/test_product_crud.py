from __future__ import annotations

import models
from crud import product as crud_product


def test_search_predicate_matches_everything_when_query_empty():
    assert crud_product.search_predicate("") is None


def test_products_page_is_ordered_and_limited(db, add_products):
    add_products(*[f"Item {i:02d}" for i in range(25)])

    products, total = crud_product.get_products_page(db, query="", page=1, limit=10)
    assert total == 25
    assert [p.name for p in products] == [f"Item {i:02d}" for i in range(10)]

    products, _ = crud_product.get_products_page(db, query="", page=3, limit=10)
    assert [p.name for p in products] == [f"Item {i:02d}" for i in range(20, 25)]


def test_search_is_case_insensitive_substring(db, add_products):
    add_products("Blue Widget", "red widget", "Gadget")

    products, total = crud_product.get_products_page(db, query="WIDG", page=1, limit=10)
    assert total == 2
    assert {p.name for p in products} == {"Blue Widget", "red widget"}


def test_count_uses_the_same_filter_as_rows(db, add_products):
    add_products(*[f"Lamp {i}" for i in range(12)], "Chair")

    products, total = crud_product.get_products_page(db, query="lamp", page=2, limit=10)
    assert total == 12
    assert len(products) == 2


def test_page_past_the_end_returns_no_rows(db, add_products):
    add_products("Only")

    products, total = crud_product.get_products_page(db, query="", page=4, limit=10)
    assert products == []
    assert total == 1


def test_create_product_defaults_image_url(db):
    product = crud_product.create_product(db, name="Widget")
    assert product.id is not None
    assert product.image_url == crud_product.PLACEHOLDER_IMAGE_URL


def test_create_product_keeps_given_image_url(db):
    product = crud_product.create_product(db, name="Widget", image_url="https://img/w.png")
    assert product.image_url == "https://img/w.png"


def test_delete_product_removes_row(db, add_products):
    (product,) = add_products("Doomed")

    assert crud_product.delete_product(db, str(product.id)) == 1
    assert db.query(models.Product).count() == 0


def test_delete_unknown_or_malformed_id_is_a_no_op(db, add_products):
    add_products("Keeper")

    assert crud_product.delete_product(db, "999") == 0
    assert crud_product.delete_product(db, "does-not-exist") == 0
    assert db.query(models.Product).count() == 1


def test_huge_page_number_is_capped_instead_of_overflowing(db, add_products):
    add_products("Only")

    products, total = crud_product.get_products_page(db, query="", page=10**18, limit=10)
    assert products == []
    assert total == 1
