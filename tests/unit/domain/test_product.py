# tests/unit/domain/test_product.py
from __future__ import annotations

from decimal import Decimal

import pytest

from rediscache_api.domain.entities.product import Product
from rediscache_api.domain.exceptions.base import DomainError
from rediscache_api.domain.exceptions.products import ProductNotFound


def test_payload_carries_price_as_number() -> None:
    p = Product(id=1, name="Laptop", price=Decimal("999.99"), category="Electronics")
    payload = p.to_payload()

    assert payload == {"id": 1, "name": "Laptop", "price": 999.99, "category": "Electronics"}
    assert Product.from_payload(payload) == p


@pytest.mark.parametrize(
    ("name", "price"),
    [("", Decimal("1")), ("Mouse", Decimal("-0.01"))],
)
def test_invariants_are_enforced(name: str, price: Decimal) -> None:
    with pytest.raises(ValueError):
        Product(id=1, name=name, price=price, category="x")


def test_product_is_immutable() -> None:
    p = Product(id=1, name="Laptop", price=Decimal("1"), category="x")
    with pytest.raises(AttributeError):
        p.name = "Other"  # type: ignore[misc]


def test_from_payload_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        Product.from_payload(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_from_payload_rejects_missing_field() -> None:
    with pytest.raises(KeyError):
        Product.from_payload({"id": 1, "name": "Laptop", "category": "x"})


@pytest.mark.parametrize("price", ["abc", "NaN", "Infinity"])
def test_from_payload_rejects_bad_price(price: str) -> None:
    with pytest.raises(ValueError):
        Product.from_payload({"id": 1, "name": "Laptop", "price": price, "category": "x"})


def test_product_not_found_is_a_domain_error() -> None:
    exc = ProductNotFound(7)
    assert isinstance(exc, DomainError)
    assert exc.code == "PRODUCT_NOT_FOUND"
    assert exc.details == {"id": 7}
    assert str(exc) == "Product 7 not found"
