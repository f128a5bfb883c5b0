"""Order placed template: emailed to the admin address for every new order."""

from html import escape

from zencafe.notifications.notification.notification import NotificationType


class OrderPlacedTemplate:
    notification_type = NotificationType.ORDER_PLACED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        customer_name = context.get("customer_name", "A customer")
        total = context.get("total_amount", "0.00")
        currency = context.get("currency", "LKR")
        return {
            "subject": f"New Order #{order_id[:8]}",
            "body": (
                "New Order Received\n\n"
                f"Order ID: {order_id}\n"
                f"Customer: {customer_name}\n"
                f"Total: {currency} {total}\n\n"
                "View order details in the admin panel."
            ),
            "html_body": (
                "<h1>New Order Received</h1>"
                f"<p>Order ID: {escape(order_id)}</p>"
                f"<p>Customer: {escape(customer_name)}</p>"
                f"<p>Total: {escape(currency)} {escape(total)}</p>"
                "<p>View order details in the admin panel.</p>"
            ),
        }
