"""Application tests for order placement and administration."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from store.order.order import Order
from store.order.placement import PlaceOrder
from store.order.status import UpdateOrderStatus
from store.product.product import Product

SHIPPING = json.dumps(
    {
        "first_name": "Jane",
        "last_name": "Doe",
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62701",
        "country": "US",
        "phone": "+15550123",
    }
)


def _line(product_id, quantity, size="M", color="Black"):
    return {"product_id": product_id, "quantity": quantity, "size": size, "color": color}


def _place(items, total_amount, user_id=None, **extra):
    return current_domain.process(
        PlaceOrder(
            user_id=user_id,
            items=json.dumps(items),
            total_amount=total_amount,
            shipping_address=SHIPPING,
            payment_method="credit_card",
            **extra,
        ),
        asynchronous=False,
    )


def _stock(product_id):
    return current_domain.repository_for(Product).get(product_id).stock_quantity


class TestSuccessfulPlacement:
    def test_decrements_stock_and_records_catalogue_prices(self, create_product, create_user):
        user_id = create_user()
        tee = create_product(name="Classic Tee", price=10.0, stock_quantity=5)
        hoodie = create_product(name="Hoodie", price=25.5, stock_quantity=3)

        order_id = _place(
            [
                {"product_id": tee, "quantity": 2, "size": "M", "color": "Black", "price": 1.0},
                _line(hoodie, 1),
            ],
            total_amount=45.5,
            user_id=user_id,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.user_id == user_id
        assert order.total_amount == 45.5
        assert order.subtotal == 45.5
        tee_line = next(i for i in order.items if i.product_id == tee)
        assert tee_line.price == 10.0
        assert tee_line.name == "Classic Tee"
        assert tee_line.subtotal == 20.0
        assert _stock(tee) == 3
        assert _stock(hoodie) == 2

    def test_reaching_zero_marks_out_of_stock(self, create_product):
        tee = create_product(price=10.0, stock_quantity=2)

        _place([_line(tee, 2)], total_amount=20.0)

        product = current_domain.repository_for(Product).get(tee)
        assert product.stock_quantity == 0
        assert product.in_stock is False

    def test_total_within_tolerance_is_accepted(self, create_product):
        tee = create_product(price=10.0)

        assert _place([_line(tee, 1)], total_amount=10.005)

    def test_total_exactly_one_cent_off_is_accepted(self, create_product):
        tee = create_product(price=20.0)

        assert _place([_line(tee, 1)], total_amount=20.01)

    def test_total_two_cents_off_is_rejected(self, create_product):
        tee = create_product(price=20.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            _place([_line(tee, 1)], total_amount=20.02)

        assert exc.value.messages == {"total_amount": ["Total amount does not match calculated total"]}
        assert _stock(tee) == 5

    def test_guest_checkout(self, create_product):
        tee = create_product(price=10.0)

        order_id = _place([{**_line(None, 1), "product": tee}], total_amount=10.0)

        assert current_domain.repository_for(Order).get(order_id).user_id is None


class TestRejectedPlacement:
    def test_unknown_user(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            _place([_line(tee, 1)], total_amount=10.0, user_id="missing-user")

        assert exc.value.messages == {"user_id": ["User not found"]}
        assert _stock(tee) == 5

    def test_unknown_product(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            _place(
                [_line(tee, 1), _line("missing", 1)],
                total_amount=20.0,
            )

        assert exc.value.messages == {"items": ["Product missing not found"]}
        assert _stock(tee) == 5

    def test_unknown_payment_method(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                PlaceOrder(
                    items=json.dumps([_line(tee, 1)]),
                    total_amount=10.0,
                    shipping_address=SHIPPING,
                    payment_method="cash",
                ),
                asynchronous=False,
            )

        assert exc.value.messages == {"payment_method": ["Invalid payment method"]}
        assert _stock(tee) == 5

    def test_line_without_size_or_color(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            _place([{"product_id": tee, "quantity": 1, "size": "M"}], total_amount=10.0)

        assert exc.value.messages == {"items": ["Size and color are required for every item"]}
        assert _stock(tee) == 5

    def test_incomplete_shipping_address(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)
        shipping = {k: v for k, v in json.loads(SHIPPING).items() if k != "state"}

        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                PlaceOrder(
                    items=json.dumps([_line(tee, 1)]),
                    total_amount=10.0,
                    shipping_address=json.dumps(shipping),
                    payment_method="paypal",
                ),
                asynchronous=False,
            )

        assert "state" in exc.value.messages
        assert _stock(tee) == 5

    def test_insufficient_stock_leaves_stock_unchanged(self, create_product):
        tee = create_product(name="Classic Tee", price=10.0, stock_quantity=5)
        rare = create_product(name="Rare Tee", price=10.0, stock_quantity=1)

        with pytest.raises(ValidationError) as exc:
            _place(
                [_line(tee, 2), _line(rare, 2)],
                total_amount=40.0,
            )

        assert exc.value.messages == {"items": ["Product Rare Tee is out of stock or insufficient quantity"]}
        assert _stock(tee) == 5
        assert _stock(rare) == 1

    def test_out_of_stock_flag_blocks_order(self, create_product):
        tee = create_product(price=10.0, stock_quantity=0)

        with pytest.raises(ValidationError):
            _place([_line(tee, 1)], total_amount=10.0)

    def test_repeated_lines_are_checked_together(self, create_product):
        tee = create_product(price=10.0, stock_quantity=3)

        with pytest.raises(ValidationError):
            _place(
                [_line(tee, 2, size="S"), _line(tee, 2)],
                total_amount=40.0,
            )

        assert _stock(tee) == 3

    def test_total_mismatch_leaves_stock_unchanged(self, create_product):
        tee = create_product(price=10.0, stock_quantity=5)
        hoodie = create_product(name="Hoodie", price=20.0, stock_quantity=5)

        with pytest.raises(ValidationError) as exc:
            _place(
                [_line(tee, 1), _line(hoodie, 1)],
                total_amount=25.0,
            )

        assert exc.value.messages == {"total_amount": ["Total amount does not match calculated total"]}
        assert _stock(tee) == 5
        assert _stock(hoodie) == 5
        assert current_domain.repository_for(Order)._dao.query.all().items == []

    def test_zero_quantity(self, create_product):
        tee = create_product(price=10.0)

        with pytest.raises(ValidationError):
            _place([_line(tee, 0)], total_amount=0.0)


class TestOrderAdministration:
    def test_update_status_without_transition_checks(self, create_product):
        tee = create_product(price=10.0)
        order_id = _place([_line(tee, 1)], total_amount=10.0)

        current_domain.process(
            UpdateOrderStatus(order_id=order_id, order_status="delivered", tracking_number="TRK-1"),
            asynchronous=False,
        )
        current_domain.process(
            UpdateOrderStatus(order_id=order_id, order_status="processing", payment_status="refunded"),
            asynchronous=False,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.order_status == "processing"
        assert order.payment_status == "refunded"
        assert order.tracking_number == "TRK-1"

    def test_orders_for_user_newest_first(self, create_product, create_user):
        user_id = create_user()
        tee = create_product(price=10.0)
        first = _place([_line(tee, 1)], total_amount=10.0, user_id=user_id)
        second = _place([_line(tee, 2)], total_amount=20.0, user_id=user_id)
        _place([_line(tee, 1)], total_amount=10.0)

        repo = current_domain.repository_for(Order)
        assert [o.id for o in repo.for_user(user_id)] == [second, first]
        assert len(repo.all_recent()) == 3
        assert repo.has_purchased(user_id, tee) is True
        assert repo.has_purchased(user_id, "other") is False
