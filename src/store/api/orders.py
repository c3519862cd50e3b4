"""FastAPI endpoints for placing and administering orders."""

import json

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from store.api.deps import admin_user, current_user, get_or_404
from store.api.schemas import PlaceOrderRequest, UpdateOrderRequest
from store.api.serializers import order_payload
from store.order.order import Order
from store.order.placement import PlaceOrder
from store.order.status import UpdateOrderStatus
from store.product.product import Product
from store.user.user import User

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _lookup(aggregate_cls, ids):
    repo = current_domain.repository_for(aggregate_cls)
    found = {}
    for identifier in {str(i) for i in ids if i}:
        aggregate = repo.find_by_id(identifier)
        if aggregate is not None:
            found[identifier] = aggregate
    return found


def _with_summaries(orders):
    """Order payloads with the referenced users and products attached."""
    users = _lookup(User, (o.user_id for o in orders))
    products = _lookup(Product, (item.product_id for o in orders for item in o.items))
    return [order_payload(o, users=users, products=products) for o in orders]


@router.post("", status_code=201)
async def place_order(body: PlaceOrderRequest) -> dict:
    command = PlaceOrder(
        user_id=body.user_id,
        items=json.dumps([item.model_dump(exclude={"price"}) for item in body.items]),
        total_amount=body.total_amount,
        shipping_address=json.dumps(body.shipping_address.model_dump()),
        billing_address=json.dumps(body.billing_address.model_dump()) if body.billing_address else None,
        payment_method=body.payment_method,
        customer_notes=body.customer_notes,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return order_payload(current_domain.repository_for(Order).get(order_id))


@router.get("", dependencies=[Depends(admin_user)])
async def list_orders() -> list[dict]:
    return _with_summaries(current_domain.repository_for(Order).all_recent())


@router.get("/myorders")
async def my_orders(user: User = Depends(current_user)) -> list[dict]:
    return _with_summaries(current_domain.repository_for(Order).for_user(user.id))


@router.get("/{order_id}")
async def get_order(order_id: str, user: User = Depends(current_user)) -> dict:
    order = get_or_404(Order, order_id, "Order")
    # Guest orders carry no owner and stay visible to any signed-in user
    if not user.is_admin and order.user_id and not order.belongs_to(user.id):
        raise HTTPException(status_code=403, detail="Not authorized to view this order")
    return _with_summaries([order])[0]


@router.put("/{order_id}", dependencies=[Depends(admin_user)])
async def update_order(order_id: str, body: UpdateOrderRequest) -> dict:
    get_or_404(Order, order_id, "Order")
    current_domain.process(
        UpdateOrderStatus(
            order_id=order_id,
            order_status=body.order_status,
            payment_status=body.payment_status,
            tracking_number=body.tracking_number,
            admin_notes=body.admin_notes,
        ),
        asynchronous=False,
    )
    return order_payload(current_domain.repository_for(Order).get(order_id))
