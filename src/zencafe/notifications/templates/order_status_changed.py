"""Order status template: tells the customer where their order stands."""

from zencafe.notifications.notification.notification import NotificationType


class OrderStatusChangedTemplate:
    notification_type = NotificationType.ORDER_STATUS_CHANGED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        name = context.get("customer_name", "there")
        status = context.get("new_status", "updated")
        return {
            "subject": f"Your Zen Cafe order #{order_id[:8]} is {status}",
            "body": (
                f"Hi {name},\n\n"
                f"Your order #{order_id[:8]} is now {status}.\n\n"
                "Thank you for choosing Zen Cafe!"
            ),
            "html_body": None,
        }
