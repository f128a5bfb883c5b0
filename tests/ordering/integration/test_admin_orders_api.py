"""Integration tests for the admin order endpoints."""

import pytest


@pytest.fixture()
def admin(make_user):
    return make_user(external_id="admin-1", email="owner@zencafe.lk", is_admin=True)


@pytest.fixture()
def customer(make_user):
    return make_user(external_id="cust-1", email="nimali@example.com")


@pytest.fixture()
def order(api_client, auth_headers, customer, make_category, make_product, delivery):
    tea = make_product(make_category(), price="12.99")
    response = api_client.post(
        "/api/orders",
        json={**delivery, "items": [{"productId": tea.id, "quantity": 2, "price": "12.99"}], "totalAmount": "25.98"},
        headers=auth_headers(customer),
    )
    assert response.status_code == 201
    return response.json()


class TestAdminAccess:
    def test_customer_is_forbidden(self, api_client, auth_headers, customer):
        assert api_client.get("/api/admin/orders", headers=auth_headers(customer)).status_code == 403

    def test_anonymous_is_unauthorized(self, api_client):
        assert api_client.get("/api/admin/orders").status_code == 401


class TestAdminOrders:
    def test_lists_every_order(self, api_client, auth_headers, admin, order):
        response = api_client.get("/api/admin/orders", headers=auth_headers(admin))

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [order["id"]]

    def test_items_for_all_orders(self, api_client, auth_headers, admin, order):
        grouped = api_client.get("/api/admin/orders/items", headers=auth_headers(admin)).json()

        assert list(grouped) == [order["id"]]
        assert grouped[order["id"]][0]["quantity"] == 2

    def test_completed_status_visible_to_owner(self, api_client, auth_headers, admin, customer, order):
        response = api_client.patch(
            f"/api/admin/orders/{order['id']}/status",
            json={"status": "completed"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 200
        assert response.json()["status"] == "completed"

        [mine] = api_client.get("/api/orders", headers=auth_headers(customer)).json()
        assert mine["status"] == "completed"

    def test_mistaken_cancel_can_be_undone(self, api_client, auth_headers, admin, order):
        url = f"/api/admin/orders/{order['id']}/status"
        api_client.patch(url, json={"status": "cancelled"}, headers=auth_headers(admin))

        response = api_client.patch(url, json={"status": "pending"}, headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["status"] == "pending"

    def test_unknown_status_is_rejected(self, api_client, auth_headers, admin, order):
        url = f"/api/admin/orders/{order['id']}/status"

        response = api_client.patch(url, json={"status": "shipped"}, headers=auth_headers(admin))

        assert response.status_code == 400
        assert "status" in response.json()["error"]

    def test_unknown_order(self, api_client, auth_headers, admin):
        response = api_client.patch(
            "/api/admin/orders/missing/status", json={"status": "completed"}, headers=auth_headers(admin)
        )

        assert response.status_code == 404
