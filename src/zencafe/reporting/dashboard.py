"""Back-office dashboard figures."""

from decimal import Decimal

from protean.utils.globals import current_domain

from zencafe.catalogue.product.product import Product
from zencafe.messaging.contact.message import ContactMessage, MessageStatus
from zencafe.ordering.order.order import Order
from zencafe.shared.money import format_amount


def dashboard_stats() -> dict:
    orders = current_domain.repository_for(Order).list_all()
    products = current_domain.repository_for(Product).list_in_category()
    messages = current_domain.repository_for(ContactMessage)

    return {
        "total_revenue": format_amount(sum((Decimal(o.total_amount) for o in orders), Decimal("0"))),
        "total_orders": len(orders),
        "total_products": len(products),
        "new_messages": messages.count_with_status(MessageStatus.NEW.value),
        "total_customers": len({o.customer_email.lower() for o in orders}),
    }
