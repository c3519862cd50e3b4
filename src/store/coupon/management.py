"""Coupon management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from store.coupon.coupon import Coupon
from store.domain import store
from store.shared.text import load_list

_DETAIL_FIELDS = (
    "description",
    "min_purchase",
    "max_discount",
    "usage_limit",
    "per_user_limit",
    "start_date",
    "end_date",
)
_LIST_FIELDS = ("products", "categories", "excluded_products")


def _provided(command, fields):
    return {f: getattr(command, f) for f in fields if getattr(command, f) is not None}


@store.command(part_of="Coupon")
class CreateCoupon:
    code: String(required=True, max_length=50)
    description: String(max_length=255)
    discount_type: String(required=True, max_length=20)
    value: Float(default=0.0)
    min_purchase: Float()
    max_discount: Float()
    usage_limit: Integer()
    per_user_limit: Integer()
    products: Text()  # JSON list
    categories: Text()  # JSON list
    excluded_products: Text()  # JSON list
    start_date: DateTime()
    end_date: DateTime()


@store.command(part_of="Coupon")
class UpdateCoupon:
    coupon_id: Identifier(required=True)
    code: String(max_length=50)
    description: String(max_length=255)
    discount_type: String(max_length=20)
    value: Float()
    min_purchase: Float()
    max_discount: Float()
    usage_limit: Integer()
    per_user_limit: Integer()
    products: Text()
    categories: Text()
    excluded_products: Text()
    start_date: DateTime()
    end_date: DateTime()
    active: Boolean()


@store.command(part_of="Coupon")
class DeactivateCoupon:
    coupon_id: Identifier(required=True)


@store.command_handler(part_of=Coupon)
class ManageCouponHandler:
    @handle(CreateCoupon)
    def create_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        if repo.find_by_code(command.code) is not None:
            raise ValidationError({"code": ["Coupon code already exists"]})

        details = _provided(command, _DETAIL_FIELDS)
        details.update({f: load_list(raw) for f, raw in _provided(command, _LIST_FIELDS).items()})

        coupon = Coupon.create(
            code=command.code,
            discount_type=command.discount_type,
            value=command.value or 0.0,
            **details,
        )
        repo.add(coupon)
        return str(coupon.id)

    @handle(UpdateCoupon)
    def update_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(command.coupon_id)

        changes = _provided(command, ("code", "discount_type", "value", "active", *_DETAIL_FIELDS))
        changes.update({f: load_list(raw) for f, raw in _provided(command, _LIST_FIELDS).items()})

        if "code" in changes:
            other = repo.find_by_code(changes["code"])
            if other is not None and str(other.id) != str(coupon.id):
                raise ValidationError({"code": ["Coupon code already exists"]})

        coupon.update(**changes)
        repo.add(coupon)

    @handle(DeactivateCoupon)
    def deactivate_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(command.coupon_id)
        coupon.deactivate()
        repo.add(coupon)
