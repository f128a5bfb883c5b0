"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from zencafe.domain import zencafe


@zencafe.event(part_of="Order")
class OrderPlaced:
    """A customer checked out and a pending order was recorded."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    customer_name: String(required=True)
    customer_email: String(required=True)
    total_amount: String(required=True)
    item_count: Integer(required=True)
    placed_at: DateTime(required=True)


@zencafe.event(part_of="Order")
class OrderStatusChanged:
    """An administrator moved an order to a new status."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
