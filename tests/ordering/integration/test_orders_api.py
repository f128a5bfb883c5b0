"""Integration tests for checkout and order history endpoints via TestClient."""

import pytest
from protean import current_domain

from zencafe.ordering.order.order import Order


@pytest.fixture()
def tea(make_category, make_product):
    return make_product(make_category(), name="Ceylon Black Tea", price="12.99")


@pytest.fixture()
def customer(make_user):
    return make_user(external_id="cust-1", email="nimali@example.com")


def _checkout(api_client, headers, delivery, items, total):
    return api_client.post("/api/orders", json={**delivery, "items": items, "totalAmount": total}, headers=headers)


class TestPlaceOrder:
    def test_two_of_one_product(self, api_client, auth_headers, customer, tea, delivery):
        response = _checkout(
            api_client,
            auth_headers(customer),
            delivery,
            [{"productId": tea.id, "quantity": 2, "price": "12.99"}],
            "25.98",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["totalAmount"] == "25.98"
        assert body["status"] == "pending"
        assert body["userId"] == customer.id
        assert body["customerName"] == "Nimali Perera"

        items = api_client.get(f"/api/orders/{body['id']}/items", headers=auth_headers(customer)).json()
        assert len(items) == 1
        assert items[0]["quantity"] == 2
        assert items[0]["price"] == "12.99"
        assert items[0]["productName"] == "Ceylon Black Tea"

    def test_empty_items_rejected(self, api_client, auth_headers, customer, delivery):
        response = _checkout(api_client, auth_headers(customer), delivery, [], "0.00")

        assert response.status_code == 400
        assert "items" in response.json()["error"]
        assert current_domain.repository_for(Order).list_all() == []

    def test_total_mismatch_rejected(self, api_client, auth_headers, customer, tea, delivery):
        response = _checkout(
            api_client,
            auth_headers(customer),
            delivery,
            [{"productId": tea.id, "quantity": 2, "price": "12.99"}],
            "20.00",
        )

        assert response.status_code == 400
        assert "total_amount" in response.json()["error"]

    def test_missing_delivery_address_rejected(self, api_client, auth_headers, customer, tea, delivery):
        payload = {k: v for k, v in delivery.items() if k != "deliveryAddress"}
        response = _checkout(
            api_client,
            auth_headers(customer),
            payload,
            [{"productId": tea.id, "quantity": 1, "price": "12.99"}],
            "12.99",
        )

        assert response.status_code == 400

    def test_phone_is_optional(self, api_client, auth_headers, customer, tea, delivery):
        payload = {k: v for k, v in delivery.items() if k != "customerPhone"}
        response = _checkout(
            api_client,
            auth_headers(customer),
            payload,
            [{"productId": tea.id, "quantity": 1, "price": "12.99"}],
            "12.99",
        )

        assert response.status_code == 201
        assert response.json()["customerPhone"] is None

    def test_requires_authentication(self, api_client, tea, delivery):
        response = _checkout(api_client, {}, delivery, [{"productId": tea.id, "quantity": 1, "price": "12.99"}], "12.99")

        assert response.status_code == 401

    def test_rejects_bad_token(self, api_client, tea, delivery):
        response = _checkout(
            api_client,
            {"Authorization": "Bearer not-a-token"},
            delivery,
            [{"productId": tea.id, "quantity": 1, "price": "12.99"}],
            "12.99",
        )

        assert response.status_code == 401


class TestOrderHistory:
    def test_lists_only_own_orders(self, api_client, auth_headers, make_user, customer, tea, delivery):
        other = make_user(external_id="cust-2", email="other@example.com")
        item = [{"productId": tea.id, "quantity": 1, "price": "12.99"}]
        mine = _checkout(api_client, auth_headers(customer), delivery, item, "12.99").json()
        _checkout(api_client, auth_headers(other), delivery, item, "12.99")

        response = api_client.get("/api/orders", headers=auth_headers(customer))

        assert response.status_code == 200
        assert [order["id"] for order in response.json()] == [mine["id"]]

    def test_items_of_someone_elses_order_are_not_found(
        self, api_client, auth_headers, make_user, customer, tea, delivery
    ):
        other = make_user(external_id="cust-2", email="other@example.com")
        item = [{"productId": tea.id, "quantity": 1, "price": "12.99"}]
        order = _checkout(api_client, auth_headers(customer), delivery, item, "12.99").json()

        response = api_client.get(f"/api/orders/{order['id']}/items", headers=auth_headers(other))

        assert response.status_code == 404

    def test_items_of_unknown_order(self, api_client, auth_headers, customer):
        response = api_client.get("/api/orders/does-not-exist/items", headers=auth_headers(customer))

        assert response.status_code == 404

    def test_items_grouped_by_order(self, api_client, auth_headers, customer, tea, delivery):
        first = _checkout(
            api_client, auth_headers(customer), delivery, [{"productId": tea.id, "quantity": 1, "price": "12.99"}], "12.99"
        ).json()
        second = _checkout(
            api_client, auth_headers(customer), delivery, [{"productId": tea.id, "quantity": 3, "price": "12.99"}], "38.97"
        ).json()

        grouped = api_client.get("/api/orders/items", headers=auth_headers(customer)).json()

        assert set(grouped) == {first["id"], second["id"]}
        assert grouped[second["id"]][0]["quantity"] == 3
        assert grouped[second["id"]][0]["orderId"] == second["id"]
