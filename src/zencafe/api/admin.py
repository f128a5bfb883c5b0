"""Back-office endpoints. Every route requires an admin user."""

from fastapi import APIRouter, Depends, Response
from protean.utils.globals import current_domain

from zencafe.api.auth import require_admin
from zencafe.api.schemas import (
    CategoryResponse,
    ContactMessageResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    DashboardStatsResponse,
    MessageStatusRequest,
    NotificationResponse,
    OrderItemResponse,
    OrderResponse,
    OrderStatusRequest,
    ProductResponse,
    UnreadCountResponse,
    UpdateProductRequest,
    UserResponse,
)
from zencafe.catalogue.category.category import Category
from zencafe.catalogue.category.management import CreateCategory
from zencafe.catalogue.product.browsing import list_products
from zencafe.catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from zencafe.catalogue.product.product import Product
from zencafe.identity.user.user import User
from zencafe.messaging.contact.message import ContactMessage
from zencafe.messaging.contact.submission import UpdateMessageStatus
from zencafe.notifications.notification.notification import Notification
from zencafe.notifications.notification.reading import MarkNotificationRead
from zencafe.ordering.order.order import Order
from zencafe.ordering.order.status import UpdateOrderStatus
from zencafe.reporting.dashboard import dashboard_stats

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# --- Orders ---


@router.get("/orders", response_model=list[OrderResponse])
async def all_orders() -> list[OrderResponse]:
    return [OrderResponse.model_validate(order) for order in current_domain.repository_for(Order).list_all()]


@router.get("/orders/items", response_model=dict[str, list[OrderItemResponse]])
async def all_order_items() -> dict[str, list[OrderItemResponse]]:
    repo = current_domain.repository_for(Order)
    grouped = repo.items_for_many([str(order.id) for order in repo.list_all()])
    return {
        order_id: [OrderItemResponse.model_validate(item) for item in items] for order_id, items in grouped.items()
    }


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: OrderStatusRequest) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderResponse.model_validate(current_domain.repository_for(Order).get(order_id))


# --- Products and categories ---


@router.get("/products", response_model=list[ProductResponse])
async def all_products() -> list[ProductResponse]:
    return [ProductResponse.model_validate(product) for product in list_products()]


@router.post("/products", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    product_id = current_domain.process(CreateProduct(**body.model_dump()), asynchronous=False)
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@router.patch("/products/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_unset=True))
    current_domain.process(command, asynchronous=False)
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@router.delete("/products/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


@router.post("/categories", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    category_id = current_domain.process(CreateCategory(**body.model_dump()), asynchronous=False)
    return CategoryResponse.model_validate(current_domain.repository_for(Category).get(category_id))


# --- Messages and users ---


@router.get("/messages", response_model=list[ContactMessageResponse])
async def all_messages() -> list[ContactMessageResponse]:
    messages = current_domain.repository_for(ContactMessage).list_messages()
    return [ContactMessageResponse.model_validate(message) for message in messages]


@router.patch("/messages/{message_id}/status", response_model=ContactMessageResponse)
async def update_message_status(message_id: str, body: MessageStatusRequest) -> ContactMessageResponse:
    current_domain.process(UpdateMessageStatus(message_id=message_id, status=body.status), asynchronous=False)
    return ContactMessageResponse.model_validate(current_domain.repository_for(ContactMessage).get(message_id))


@router.get("/users", response_model=list[UserResponse])
async def all_users() -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in current_domain.repository_for(User).list_all()]


# --- Broadcast notifications ---


@router.get("/notifications", response_model=list[NotificationResponse])
async def admin_notifications() -> list[NotificationResponse]:
    notifications = current_domain.repository_for(Notification).list_for(None)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.get("/notifications/unread-count", response_model=UnreadCountResponse)
async def admin_unread_count() -> UnreadCountResponse:
    return UnreadCountResponse(count=current_domain.repository_for(Notification).unread_count(None))


@router.patch("/notifications/{notification_id}/read", response_model=NotificationResponse)
async def mark_admin_notification_read(notification_id: str) -> NotificationResponse:
    command = MarkNotificationRead(notification_id=notification_id, as_admin=True)
    current_domain.process(command, asynchronous=False)
    return NotificationResponse.model_validate(current_domain.repository_for(Notification).get(notification_id))


# --- Dashboard ---


@router.get("/stats", response_model=DashboardStatsResponse)
async def stats() -> DashboardStatsResponse:
    return DashboardStatsResponse(**dashboard_stats())
