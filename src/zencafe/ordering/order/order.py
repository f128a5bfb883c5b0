"""Order aggregate: a customer's checkout, with items frozen at order time.

Any status may follow any other, including a reopened cancel or completion.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from zencafe.domain import zencafe
from zencafe.ordering.order.events import OrderPlaced, OrderStatusChanged
from zencafe.shared.money import AMOUNT_PATTERN, format_amount, parse_amount


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@zencafe.entity(part_of="Order")
class OrderItem:
    """One order line: product snapshot, quantity and the unit price charged."""

    product_id: Identifier(required=True)
    product_name: String(required=True, max_length=200)
    quantity: Integer(required=True, min_value=1)
    price: String(required=True, max_length=20)
    created_at: DateTime()

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.price) * self.quantity


@zencafe.aggregate
class Order:
    """An order placed through checkout. Orders are never deleted."""

    user_id: Identifier(required=True)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_amount: String(required=True, max_length=20)
    customer_name: String(required=True, max_length=200)
    customer_email: String(required=True, max_length=254)
    customer_phone: String(max_length=50)
    delivery_address: Text(required=True)
    notes: Text()
    items: HasMany(OrderItem)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def total_must_be_a_decimal_amount(self):
        if self.total_amount is not None and not AMOUNT_PATTERN.match(str(self.total_amount)):
            raise ValidationError({"total_amount": [f"Invalid amount: {self.total_amount!r}"]})

    @classmethod
    def place(
        cls,
        user_id,
        lines,
        total_amount,
        customer_name,
        customer_email,
        delivery_address,
        customer_phone=None,
        notes=None,
    ):
        """Create a pending order.

        `lines` are dicts with product_id, product_name, quantity and price,
        already priced from the catalog. The submitted `total_amount` must
        equal the sum of the lines.
        """
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        submitted_total = parse_amount(total_amount, "total_amount")
        computed_total = sum((Decimal(line["price"]) * line["quantity"] for line in lines), Decimal("0"))
        if submitted_total != computed_total:
            raise ValidationError(
                {
                    "total_amount": [
                        f"Total {format_amount(submitted_total)} does not match "
                        f"item prices {format_amount(computed_total)}"
                    ]
                }
            )

        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            total_amount=format_amount(computed_total),
            customer_name=customer_name,
            customer_email=customer_email,
            customer_phone=customer_phone,
            delivery_address=delivery_address,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=line["product_id"],
                    product_name=line["product_name"],
                    quantity=line["quantity"],
                    price=line["price"],
                    created_at=now,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                customer_name=customer_name,
                customer_email=customer_email,
                total_amount=order.total_amount,
                item_count=sum(line["quantity"] for line in lines),
                placed_at=now,
            )
        )
        return order

    def change_status(self, new_status: str):
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        current = OrderStatus(self.status)
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
        return current.value
