"""Repository for the Coupon aggregate."""

from store.coupon.coupon import Coupon
from store.domain import store


@store.repository(part_of=Coupon)
class CouponRepository:
    def find_by_code(self, code) -> Coupon | None:
        return self._dao.query.filter(code=Coupon.normalize_code(code)).all().first

    def newest_first(self) -> list[Coupon]:
        return self._dao.query.order_by("-created_at").all().items
