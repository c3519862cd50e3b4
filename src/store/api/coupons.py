"""FastAPI endpoints for coupon administration and public code lookup."""

import json

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from store.api.deps import admin_user, get_or_404
from store.api.schemas import CouponRequest, UpdateCouponRequest
from store.api.serializers import coupon_payload
from store.coupon.coupon import Coupon
from store.coupon.management import CreateCoupon, DeactivateCoupon, UpdateCoupon

router = APIRouter(prefix="/api/coupons", tags=["coupons"])

_LIST_FIELDS = ("products", "categories", "excluded_products")


def _command_fields(body) -> dict:
    data = body.model_dump()
    for field in _LIST_FIELDS:
        if data.get(field) is not None:
            data[field] = json.dumps(data[field])
    return data


@router.post("", status_code=201, dependencies=[Depends(admin_user)])
async def create_coupon(body: CouponRequest) -> dict:
    coupon_id = current_domain.process(CreateCoupon(**_command_fields(body)), asynchronous=False)
    return coupon_payload(get_or_404(Coupon, coupon_id, "Coupon"))


@router.get("", dependencies=[Depends(admin_user)])
async def list_coupons() -> list[dict]:
    return [coupon_payload(c) for c in current_domain.repository_for(Coupon).newest_first()]


@router.get("/code/{code}")
async def get_coupon_by_code(code: str) -> dict:
    coupon = current_domain.repository_for(Coupon).find_by_code(code)
    if coupon is None or not coupon.is_redeemable():
        raise HTTPException(status_code=404, detail="Coupon not found")
    return coupon_payload(coupon)


@router.put("/{coupon_id}", dependencies=[Depends(admin_user)])
async def update_coupon(coupon_id: str, body: UpdateCouponRequest) -> dict:
    get_or_404(Coupon, coupon_id, "Coupon")
    current_domain.process(UpdateCoupon(coupon_id=coupon_id, **_command_fields(body)), asynchronous=False)
    return coupon_payload(get_or_404(Coupon, coupon_id, "Coupon"))


@router.put("/{coupon_id}/deactivate", dependencies=[Depends(admin_user)])
async def deactivate_coupon(coupon_id: str) -> dict:
    get_or_404(Coupon, coupon_id, "Coupon")
    current_domain.process(DeactivateCoupon(coupon_id=coupon_id), asynchronous=False)
    return coupon_payload(get_or_404(Coupon, coupon_id, "Coupon"))
