"""Shared BDD fixtures and step definitions for order placement."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

from store.order.order import Order
from store.order.placement import PlaceOrder
from store.product.creation import CreateProduct
from store.product.product import Product

SHIPPING = {
    "first_name": "Jane",
    "last_name": "Doe",
    "address": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "US",
    "phone": "+15550123",
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalogue():
    """Product ids by name."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the placed order id or the captured validation error."""
    return {"order_id": None, "exc": None}


@pytest.fixture()
def place_order(outcome):
    """Process a guest PlaceOrder and record what happened in `outcome`."""

    def _place(lines, total):
        try:
            outcome["order_id"] = current_domain.process(
                PlaceOrder(
                    items=json.dumps(lines),
                    total_amount=total,
                    shipping_address=json.dumps(SHIPPING),
                    payment_method="credit_card",
                ),
                asynchronous=False,
            )
        except ValidationError as exc:
            outcome["exc"] = exc
        return outcome

    return _place


def _product(catalogue, name):
    return current_domain.repository_for(Product).get(catalogue[name])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def _(catalogue, name, price, stock):
    catalogue[name] = current_domain.process(
        CreateProduct(
            name=name,
            description=f"{name} in soft cotton",
            price=price,
            category="unisex",
            stock_quantity=stock,
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is placed")
def _(outcome):
    assert outcome["exc"] is None
    assert outcome["order_id"] is not None


@then(parsers.cfparse("the order total is {amount:f}"))
def _(outcome, amount):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.total_amount == pytest.approx(amount)


@then(parsers.cfparse('the order is rejected with "{message}"'))
def _(outcome, message):
    assert outcome["order_id"] is None
    assert outcome["exc"] is not None
    assert message in [m for messages in outcome["exc"].messages.values() for m in messages]


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def _(catalogue, name, stock):
    assert _product(catalogue, name).stock_quantity == stock


@then(parsers.cfparse('"{name}" is out of stock'))
def _(catalogue, name):
    assert _product(catalogue, name).in_stock is False
