"""Template registry: maps NotificationType to template classes."""

from zencafe.notifications.notification.notification import NotificationType
from zencafe.notifications.templates.contact_message import ContactMessageTemplate
from zencafe.notifications.templates.order_placed import OrderPlacedTemplate
from zencafe.notifications.templates.order_status_changed import OrderStatusChangedTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.ORDER_PLACED.value: OrderPlacedTemplate,
    NotificationType.CONTACT_MESSAGE.value: ContactMessageTemplate,
    NotificationType.ORDER_STATUS_CHANGED.value: OrderStatusChangedTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
