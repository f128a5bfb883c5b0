"""Checkout and order history for the signed-in customer."""

import json

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from zencafe.api.auth import get_current_user
from zencafe.api.schemas import OrderItemResponse, OrderResponse, PlaceOrderRequest
from zencafe.identity.user.user import User
from zencafe.ordering.order.order import Order
from zencafe.ordering.order.placement import PlaceOrder

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, user: User = Depends(get_current_user)) -> OrderResponse:
    command = PlaceOrder(
        user_id=user.id,
        items=json.dumps([item.model_dump() for item in body.items]),
        total_amount=body.total_amount,
        customer_name=body.customer_name,
        customer_email=body.customer_email,
        customer_phone=body.customer_phone,
        delivery_address=body.delivery_address,
        notes=body.notes,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.model_validate(current_domain.repository_for(Order).get(order_id))


@router.get("", response_model=list[OrderResponse])
async def my_orders(user: User = Depends(get_current_user)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).list_for_user(user.id)
    return [OrderResponse.model_validate(order) for order in orders]


@router.get("/items", response_model=dict[str, list[OrderItemResponse]])
async def my_order_items(user: User = Depends(get_current_user)) -> dict[str, list[OrderItemResponse]]:
    repo = current_domain.repository_for(Order)
    order_ids = [str(order.id) for order in repo.list_for_user(user.id)]
    grouped = repo.items_for_many(order_ids)
    return {
        order_id: [OrderItemResponse.model_validate(item) for item in items] for order_id, items in grouped.items()
    }


@router.get("/{order_id}/items", response_model=list[OrderItemResponse])
async def order_items(order_id: str, user: User = Depends(get_current_user)) -> list[OrderItemResponse]:
    repo = current_domain.repository_for(Order)
    order = repo.get(order_id)
    if str(order.user_id) != str(user.id):
        raise ObjectNotFoundError(f"Order with id `{order_id}` does not exist")
    return [OrderItemResponse.model_validate(item) for item in order.items]
