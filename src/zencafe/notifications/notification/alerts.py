"""Records notifications for things administrators and customers care about.

These run inside the caller's unit of work, so a notification is stored
together with the order or message that caused it.
"""

from decimal import Decimal

from protean.utils.globals import current_domain

from zencafe.config import get_settings
from zencafe.notifications.notification.notification import Notification, NotificationType


def _short_id(identifier) -> str:
    return str(identifier)[:8]


def record_order_placed(order) -> Notification:
    currency = get_settings().currency
    total = f"{Decimal(order.total_amount):.2f}"

    notification = Notification.create(
        notification_type=NotificationType.ORDER_PLACED.value,
        title="New Order Placed",
        message=f"New order #{_short_id(order.id)} placed by {order.customer_name} for {currency} {total}",
        entity_id=order.id,
        context={
            "order_id": str(order.id),
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "total_amount": total,
            "currency": currency,
        },
    )
    current_domain.repository_for(Notification).add(notification)
    return notification


def record_contact_message(message) -> Notification:
    notification = Notification.create(
        notification_type=NotificationType.CONTACT_MESSAGE.value,
        title="New Contact Message",
        message=f"New message from {message.name} ({message.email})",
        entity_id=message.id,
        context={
            "message_id": str(message.id),
            "name": message.name,
            "email": message.email,
            "phone": message.phone,
            "message": message.message,
        },
    )
    current_domain.repository_for(Notification).add(notification)
    return notification


def record_order_status_changed(order, previous_status: str) -> Notification:
    notification = Notification.create(
        notification_type=NotificationType.ORDER_STATUS_CHANGED.value,
        title="Order Status Updated",
        message=f"Your order #{_short_id(order.id)} is now {order.status}",
        user_id=order.user_id,
        entity_id=order.id,
        context={
            "order_id": str(order.id),
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "previous_status": previous_status,
            "new_status": order.status,
        },
    )
    current_domain.repository_for(Notification).add(notification)
    return notification
