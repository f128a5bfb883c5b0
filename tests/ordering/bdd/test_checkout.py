"""BDD tests for checkout and order fulfilment by the shop."""

from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from zencafe.catalogue.product.management import UpdateProduct
from zencafe.notifications.notification.notification import Notification
from zencafe.ordering.order.order import Order
from zencafe.ordering.order.status import UpdateOrderStatus

scenarios("features/checkout.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('"{name}" is out of stock'))
def _(catalog, name):
    current_domain.process(UpdateProduct(product_id=catalog[name].id, in_stock=False), asynchronous=False)


@given(parsers.cfparse('the customer has checked out {quantity:d} of "{name}" with total "{total}"'))
def _(checkout, error, quantity, name, total):
    checkout([(name, quantity)], total)
    assert error["exc"] is None


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer checks out {quantity:d} of "{name}" with total "{total}"'))
def _(checkout, quantity, name, total):
    checkout([(name, quantity)], total)


@when(
    parsers.cfparse(
        'the customer checks out a mixed cart: {first_qty:d} "{first}" plus {second_qty:d} "{second}" for "{total}"'
    )
)
def _(checkout, first_qty, first, second_qty, second, total):
    checkout([(first, first_qty), (second, second_qty)], total)


@when("the customer checks out an empty cart")
def _(checkout):
    checkout([], "0.00")


@when(parsers.cfparse('the shop marks the order "{status}"'))
def _(placed, status):
    current_domain.process(UpdateOrderStatus(order_id=placed["order_id"], status=status), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is placed with total "{total}"'))
def _(placed, total):
    assert placed["order_id"] is not None
    assert current_domain.repository_for(Order).get(placed["order_id"]).total_amount == total


@then(parsers.cfparse('the order has {count:d} line for "{name}" with quantity {quantity:d} at "{price}"'))
def _(placed, count, name, quantity, price):
    items = current_domain.repository_for(Order).items_for(placed["order_id"])
    assert len(items) == count
    assert (items[0].product_name, items[0].quantity, items[0].price) == (name, quantity, price)


@then(parsers.cfparse('the customer is notified that the order is "{status}"'))
def _(placed, status):
    [notification] = current_domain.repository_for(Notification).list_for("bdd-customer")
    assert notification.entity_id == placed["order_id"]
    assert notification.message.endswith(f"is now {status}")
