"""Domain events for the Coupon aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from store.domain import store


@store.event(part_of="Coupon")
class CouponCreated:
    __version__ = 1

    coupon_id: Identifier(required=True)
    code: String(required=True)
    discount_type: String(required=True)
    value: Float(required=True)


@store.event(part_of="Coupon")
class CouponUpdated:
    __version__ = 1

    coupon_id: Identifier(required=True)
    code: String(required=True)


@store.event(part_of="Coupon")
class CouponDeactivated:
    __version__ = 1

    coupon_id: Identifier(required=True)
    code: String(required=True)
    deactivated_at: DateTime(required=True)
