"""Shared BDD fixtures and step definitions for checkout."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

from zencafe.notifications.notification.notification import Notification
from zencafe.ordering.order.order import Order
from zencafe.ordering.order.placement import PlaceOrder

CUSTOMER_ID = "bdd-customer"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def catalog():
    """Products created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def placed():
    """Order id of the most recent successful checkout."""
    return {"order_id": None}


@pytest.fixture()
def checkout(catalog, placed, error):
    def _checkout(lines, total):
        items = [
            {"productId": catalog[name].id, "quantity": quantity, "price": catalog[name].price}
            for name, quantity in lines
        ]
        try:
            placed["order_id"] = current_domain.process(
                PlaceOrder(
                    user_id=CUSTOMER_ID,
                    items=json.dumps(items),
                    total_amount=total,
                    customer_name="Nimali Perera",
                    customer_email="nimali@example.com",
                    customer_phone="+94 77 123 4567",
                    delivery_address="12 Temple Road, Kandy",
                ),
                asynchronous=False,
            )
        except ValidationError as exc:
            error["exc"] = exc

    return _checkout


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at "{price}"'))
def product_in_catalog(name, price, catalog, make_category, make_product):
    if "category" not in catalog:
        catalog["category"] = make_category(name="Tea & Treats")
    catalog[name] = make_product(catalog["category"], name=name, price=price)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(placed, status):
    assert current_domain.repository_for(Order).get(placed["order_id"]).status == status


@then(parsers.cfparse('the checkout is rejected on "{field}"'))
def checkout_rejected(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages


@then("no order is stored")
def no_order_stored():
    assert current_domain.repository_for(Order).list_for_user(CUSTOMER_ID) == []


@then("the admins are notified of the new order")
def admins_notified(placed):
    notifications = current_domain.repository_for(Notification).list_for()
    assert [n.entity_id for n in notifications if n.notification_type == "order_placed"] == [placed["order_id"]]
