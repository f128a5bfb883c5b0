"""Order status updates: admin command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from zencafe.domain import zencafe
from zencafe.notifications.notification.alerts import record_order_status_changed
from zencafe.ordering.order.order import Order, OrderStatus
from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


@zencafe.command(part_of="Order")
class UpdateOrderStatus:
    order_id: Identifier(required=True)
    status: String(required=True, choices=OrderStatus)


@zencafe.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        previous = order.change_status(command.status)
        repo.add(order)
        record_order_status_changed(order, previous)

        logger.info(
            "Order status changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
        )
        return str(order.id)
