"""Order placement: checkout command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from zencafe.domain import zencafe
from zencafe.notifications.notification.alerts import record_order_placed
from zencafe.ordering.order.order import Order
from zencafe.ordering.order.pricing import price_lines
from zencafe.shared.email import is_valid_email
from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


@zencafe.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    items: Text(required=True)  # JSON: [{productId, quantity, price}]
    total_amount: String(required=True, max_length=20)
    customer_name: String(required=True, max_length=200)
    customer_email: String(required=True, max_length=254)
    customer_phone: String(max_length=50)
    delivery_address: Text(required=True)
    notes: Text()


@zencafe.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        submitted = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not isinstance(submitted, list):
            raise ValidationError({"items": ["Items must be a list"]})

        if not is_valid_email(command.customer_email):
            raise ValidationError({"customer_email": [f"Invalid email address: {command.customer_email!r}"]})

        order = Order.place(
            user_id=command.user_id,
            lines=price_lines(submitted),
            total_amount=command.total_amount,
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            customer_phone=command.customer_phone,
            delivery_address=command.delivery_address,
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)
        record_order_placed(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(order.user_id),
            total_amount=order.total_amount,
            item_count=len(order.items),
        )
        return str(order.id)
