"""Order aggregate with its line items and captured addresses.

Orders are written once at checkout with prices taken from the catalogue.
Afterwards an administrator may set `order_status`, `payment_status`,
`tracking_number` and `admin_notes` freely; there is no state machine.
"""

import secrets
import string
from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from store.domain import store
from store.order.events import OrderPlaced, OrderStatusUpdated

TOTAL_TOLERANCE = 0.01

_ORDER_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


class OrderStatus(Enum):
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    STRIPE = "stripe"


def generate_order_number(now=None):
    """`ORD-YYYYMMDD-XXXXXX` with a random upper-case alphanumeric suffix."""
    now = now or datetime.now()
    suffix = "".join(secrets.choice(_ORDER_SUFFIX_ALPHABET) for _ in range(6))
    return f"ORD-{now:%Y%m%d}-{suffix}"


@store.value_object(part_of="Order")
class ShippingAddress:
    """A delivery or billing address captured at checkout time.

    Immutable once recorded: later edits to the user's address book do not
    affect orders already placed.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    address: String(required=True, max_length=255)
    apartment: String(max_length=100)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    postal_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    phone: String(required=True, max_length=20)


def as_address(value):
    """A ShippingAddress from a checkout dict, or the address itself."""
    if isinstance(value, ShippingAddress):
        return value
    return ShippingAddress(**value)


@store.entity(part_of="Order")
class OrderItem:
    """A line item priced from the catalogue when the order was placed."""

    product_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    quantity: Integer(required=True, min_value=1)
    size: String(required=True, max_length=5)
    color: String(required=True, max_length=50)
    price: Float(required=True, min_value=0.0)
    subtotal: Float(required=True, min_value=0.0)


@store.aggregate
class Order:
    order_number: String(required=True, max_length=30, unique=True)
    user_id: Identifier()
    items: HasMany(OrderItem)
    subtotal: Float(default=0.0)
    total_amount: Float(required=True, min_value=0.0)
    shipping_address: ValueObject(ShippingAddress, required=True)
    billing_address: ValueObject(ShippingAddress)
    payment_method: String(required=True, choices=PaymentMethod)
    payment_status: String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    order_status: String(choices=OrderStatus, default=OrderStatus.PROCESSING.value)
    tracking_number: String(max_length=100)
    customer_notes: Text()
    admin_notes: Text()
    order_date: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def place(
        cls,
        user_id,
        lines,
        total_amount,
        shipping_address,
        payment_method,
        billing_address=None,
        customer_notes=None,
    ):
        """Build an order from priced lines.

        `lines` are dicts carrying `product_id`, `name`, `quantity`, `size`,
        `color` and the catalogue `price`.
        """
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now()
        items = [
            OrderItem(
                product_id=line["product_id"],
                name=line["name"],
                quantity=line["quantity"],
                size=line["size"],
                color=line["color"],
                price=line["price"],
                subtotal=round(line["price"] * line["quantity"], 2),
            )
            for line in lines
        ]
        subtotal = round(sum(item.subtotal for item in items), 2)

        order = cls(
            order_number=generate_order_number(now),
            user_id=user_id,
            items=items,
            subtotal=subtotal,
            total_amount=total_amount,
            shipping_address=as_address(shipping_address),
            billing_address=as_address(billing_address) if billing_address else None,
            payment_method=payment_method,
            customer_notes=customer_notes,
            order_date=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number,
                user_id=user_id,
                item_count=sum(item.quantity for item in items),
                total_amount=total_amount,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    def belongs_to(self, user_id):
        return self.user_id is not None and str(self.user_id) == str(user_id)

    def update_status(self, order_status=None, payment_status=None, tracking_number=None, admin_notes=None):
        if order_status is not None:
            self.order_status = order_status
        if payment_status is not None:
            self.payment_status = payment_status
        if tracking_number is not None:
            self.tracking_number = tracking_number
        if admin_notes is not None:
            self.admin_notes = admin_notes

        self.updated_at = datetime.now()
        self.raise_(
            OrderStatusUpdated(
                order_id=self.id,
                order_status=self.order_status,
                payment_status=self.payment_status,
                tracking_number=self.tracking_number,
                updated_at=self.updated_at,
            )
        )
