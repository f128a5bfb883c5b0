"""Order reads for customers and administrators."""

from protean.utils.globals import current_domain

from zencafe.domain import zencafe
from zencafe.ordering.order.order import Order, OrderItem


@zencafe.repository(part_of=Order)
class OrderRepository:
    def list_for_user(self, user_id) -> list[Order]:
        """The user's own orders, newest first."""
        orders = self._dao.query.filter(user_id=str(user_id)).all().items
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def list_all(self) -> list[Order]:
        orders = self._dao.query.all().items
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def items_for(self, order_id) -> list[OrderItem]:
        return list(self.get(order_id).items)

    def items_for_many(self, order_ids) -> dict[str, list[OrderItem]]:
        """Items of several orders keyed by order id, fetched in one query."""
        grouped = {str(order_id): [] for order_id in order_ids}
        if not grouped:
            return grouped

        item_dao = current_domain.repository_for(OrderItem)._dao
        for item in item_dao.query.filter(order_id__in=list(grouped)).all().items:
            grouped[str(item.order_id)].append(item)
        return grouped
