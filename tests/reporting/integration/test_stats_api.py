"""Integration test for the admin dashboard endpoint."""


def test_stats_uses_camel_case(api_client, make_user, auth_headers):
    admin = make_user(external_id="admin-1", email="owner@zencafe.lk", is_admin=True)

    response = api_client.get("/api/admin/stats", headers=auth_headers(admin))

    assert response.status_code == 200
    assert response.json() == {
        "totalRevenue": "0.00",
        "totalOrders": 0,
        "totalProducts": 0,
        "newMessages": 0,
        "totalCustomers": 0,
    }


def test_stats_require_admin(api_client, make_user, auth_headers):
    customer = make_user(external_id="cust-1", email="c@example.com")
    assert api_client.get("/api/admin/stats", headers=auth_headers(customer)).status_code == 403
