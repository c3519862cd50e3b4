from datetime import datetime, timedelta

import pytest
from protean.exceptions import ValidationError

from store.coupon.coupon import Coupon


def _coupon(**overrides):
    fields = {"code": " summer25 ", "discount_type": "percentage", "value": 25}
    fields.update(overrides)
    return Coupon.create(**fields)


class TestCoupon:
    def test_code_is_upper_cased(self):
        assert _coupon().code == "SUMMER25"

    def test_percentage_capped_at_hundred(self):
        with pytest.raises(ValidationError):
            _coupon(value=120)

    def test_fixed_amount_may_exceed_hundred(self):
        assert _coupon(discount_type="fixed_amount", value=150).value == 150

    def test_end_date_before_start_date(self):
        now = datetime.now()
        with pytest.raises(ValidationError):
            _coupon(start_date=now, end_date=now - timedelta(days=1))

    def test_list_fields_round_trip(self):
        coupon = _coupon(products=["p1", "p2"])
        assert coupon.list_of("products") == ["p1", "p2"]
        assert coupon.list_of("categories") == []


class TestRedeemable:
    def test_active_without_window(self):
        assert _coupon().is_redeemable() is True

    def test_inactive(self):
        coupon = _coupon()
        coupon.deactivate()
        assert coupon.is_redeemable() is False

    def test_outside_window(self):
        now = datetime.now()
        assert _coupon(start_date=now + timedelta(days=1)).is_redeemable() is False
        assert _coupon(end_date=now - timedelta(days=1)).is_redeemable() is False

    def test_usage_limit_reached(self):
        assert _coupon(usage_limit=5, usage_count=5).is_redeemable() is False
        assert _coupon(usage_limit=5, usage_count=4).is_redeemable() is True
