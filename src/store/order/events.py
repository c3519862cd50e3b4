"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from store.domain import store


@store.event(part_of="Order")
class OrderPlaced:
    """An order was accepted and stock was taken for it."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    user_id: Identifier()
    item_count: Integer(required=True)
    total_amount: Float(required=True)
    payment_method: String(required=True)
    placed_at: DateTime(required=True)


@store.event(part_of="Order")
class OrderStatusUpdated:
    __version__ = 1

    order_id: Identifier(required=True)
    order_status: String(required=True)
    payment_status: String(required=True)
    tracking_number: String()
    updated_at: DateTime(required=True)
