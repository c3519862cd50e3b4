"""Coupon aggregate.

Coupons are stored and looked up by code; computing and applying a discount to
an order is not part of this service.
"""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from store.coupon.events import CouponCreated, CouponDeactivated, CouponUpdated
from store.domain import store
from store.shared.text import dump_list, load_list


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"
    FREE_SHIPPING = "free_shipping"


_LIST_FIELDS = ("products", "categories", "excluded_products")


def _local(value):
    """Naive local time, so stored and current timestamps compare cleanly."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


@store.aggregate
class Coupon:
    code: String(required=True, max_length=50, unique=True)
    description: String(max_length=255)
    discount_type: String(required=True, choices=DiscountType)
    value: Float(default=0.0, min_value=0.0)
    min_purchase: Float(default=0.0, min_value=0.0)
    max_discount: Float(min_value=0.0)
    usage_limit: Integer(min_value=0)
    usage_count: Integer(default=0, min_value=0)
    per_user_limit: Integer(default=1, min_value=0)
    products: Text()  # JSON: product ids the coupon applies to, empty for all
    categories: Text()  # JSON: category ids, empty for all
    excluded_products: Text()  # JSON: product ids
    start_date: DateTime()
    end_date: DateTime()
    active: Boolean(default=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def percentage_cannot_exceed_hundred(self):
        if self.discount_type == DiscountType.PERCENTAGE.value and (self.value or 0) > 100:
            raise ValidationError({"value": ["Percentage discount cannot exceed 100"]})

    @invariant.post
    def end_date_not_before_start_date(self):
        if self.start_date and self.end_date and _local(self.end_date) < _local(self.start_date):
            raise ValidationError({"end_date": ["End date cannot be before start date"]})

    @staticmethod
    def normalize_code(code):
        return (code or "").strip().upper()

    @classmethod
    def create(cls, code, discount_type, value=0.0, **details):
        code = cls.normalize_code(code)
        if not code:
            raise ValidationError({"code": ["Code is required"]})

        for field in _LIST_FIELDS:
            if field in details:
                details[field] = dump_list(details[field])

        now = datetime.now()
        coupon = cls(
            code=code,
            discount_type=discount_type,
            value=value,
            created_at=now,
            updated_at=now,
            **details,
        )
        coupon.raise_(
            CouponCreated(coupon_id=coupon.id, code=code, discount_type=discount_type, value=coupon.value)
        )
        return coupon

    def list_of(self, field):
        return load_list(getattr(self, field))

    def update(self, **changes):
        if "code" in changes:
            code = self.normalize_code(changes.pop("code"))
            if not code:
                raise ValidationError({"code": ["Code is required"]})
            self.code = code

        for field, value in changes.items():
            setattr(self, field, dump_list(value) if field in _LIST_FIELDS else value)

        self.updated_at = datetime.now()
        self.raise_(CouponUpdated(coupon_id=self.id, code=self.code))

    def deactivate(self):
        if not self.active:
            raise ValidationError({"active": ["Coupon is already inactive"]})

        now = datetime.now()
        self.active = False
        self.updated_at = now
        self.raise_(CouponDeactivated(coupon_id=self.id, code=self.code, deactivated_at=now))

    def is_redeemable(self, at=None):
        """Active, inside its date window, and under its usage limit."""
        at = _local(at) or datetime.now()
        if not self.active:
            return False
        if self.start_date and at < _local(self.start_date):
            return False
        if self.end_date and at > _local(self.end_date):
            return False
        if self.usage_limit is not None and (self.usage_count or 0) >= self.usage_limit:
            return False
        return True
