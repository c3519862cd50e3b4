"""Order placement — command and handler.

Placement is all-or-nothing. Every line is checked against the catalogue and
the client's total is verified before any stock moves; the stock decrements
and the new order are then saved in the handler's single unit of work.
"""

import json
from collections import OrderedDict

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.order.order import TOTAL_TOLERANCE, Order, PaymentMethod, as_address
from store.product.product import Product
from store.user.user import User
from store.utils.logging import get_logger

logger = get_logger(__name__)


@store.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier()
    items: Text(required=True)  # JSON: list of {product_id, quantity, size, color}
    total_amount: Float(required=True, min_value=0.0)
    shipping_address: Text(required=True)  # JSON: address dict
    billing_address: Text()  # JSON: address dict
    payment_method: String(required=True, max_length=20)
    customer_notes: Text()


def _load(raw):
    return json.loads(raw) if isinstance(raw, str) else raw


def _requested_lines(raw_items):
    lines = []
    for item in _load(raw_items) or []:
        quantity = int(item.get("quantity") or 0)
        if quantity < 1:
            raise ValidationError({"items": ["Quantity must be at least 1"]})
        if not item.get("size") or not item.get("color"):
            raise ValidationError({"items": ["Size and color are required for every item"]})
        lines.append(
            {
                "product_id": str(item.get("product_id") or item.get("product") or ""),
                "quantity": quantity,
                "size": item.get("size"),
                "color": item.get("color"),
            }
        )
    if not lines:
        raise ValidationError({"items": ["Order must contain at least one item"]})
    return lines


@store.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        if command.user_id:
            try:
                current_domain.repository_for(User).get(command.user_id)
            except ObjectNotFoundError:
                raise ValidationError({"user_id": ["User not found"]}) from None

        if command.payment_method not in {m.value for m in PaymentMethod}:
            raise ValidationError({"payment_method": ["Invalid payment method"]})

        shipping_address = as_address(_load(command.shipping_address))
        billing = _load(command.billing_address)
        billing_address = as_address(billing) if billing else None

        lines = _requested_lines(command.items)
        product_repo = current_domain.repository_for(Product)

        # Load each product once; repeated lines share the same instance
        products = OrderedDict()
        for line in lines:
            product_id = line["product_id"]
            if product_id in products:
                continue
            product = product_repo.find_by_id(product_id) if product_id else None
            if product is None:
                raise ValidationError({"items": [f"Product {product_id} not found"]})
            products[product_id] = product

        requested = OrderedDict()
        for line in lines:
            requested[line["product_id"]] = requested.get(line["product_id"], 0) + line["quantity"]

        for product_id, quantity in requested.items():
            product = products[product_id]
            if not product.can_fulfil(quantity):
                raise ValidationError({"items": [f"Product {product.name} is out of stock or insufficient quantity"]})

        calculated_total = 0.0
        for line in lines:
            product = products[line["product_id"]]
            line["name"] = product.name
            line["price"] = product.price
            calculated_total += product.price * line["quantity"]

        if round(abs(calculated_total - command.total_amount), 2) > TOTAL_TOLERANCE:
            raise ValidationError({"total_amount": ["Total amount does not match calculated total"]})

        # Nothing above has written anything; from here the changes commit together
        for product_id, quantity in requested.items():
            product = products[product_id]
            product.decrement_stock(quantity)
            product_repo.add(product)
            if not product.in_stock:
                logger.warning("Product out of stock", product_id=product_id, name=product.name)
            elif product.is_low_stock():
                logger.info("Product stock low", product_id=product_id, stock_quantity=product.stock_quantity)

        order = Order.place(
            user_id=command.user_id,
            lines=lines,
            total_amount=command.total_amount,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=command.payment_method,
            customer_notes=command.customer_notes,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            user_id=command.user_id,
            total_amount=order.total_amount,
        )
        return str(order.id)
