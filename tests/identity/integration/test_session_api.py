"""Integration tests for session endpoints via TestClient."""


class TestMe:
    def test_anonymous(self, api_client):
        response = api_client.get("/api/me")

        assert response.status_code == 200
        assert response.json() == {"isAuthenticated": False, "isAdmin": False, "user": None}

    def test_signed_in(self, api_client, auth_headers, make_user):
        user = make_user(external_id="sub-1", email="amaya@example.com")

        body = api_client.get("/api/me", headers=auth_headers(user)).json()

        assert body["isAuthenticated"] is True
        assert body["isAdmin"] is False
        assert body["user"]["email"] == "amaya@example.com"
        assert body["user"]["externalId"] == "sub-1"

    def test_bad_token(self, api_client):
        response = api_client.get("/api/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


class TestDevLogins:
    def test_customer_login(self, api_client):
        tokens = api_client.get("/api/login").json()

        me = api_client.get("/api/me", headers={"Authorization": f"Bearer {tokens['accessToken']}"}).json()
        assert me["isAuthenticated"] is True
        assert me["isAdmin"] is False
        assert me["user"]["email"] == "customer@zencafe.lk"

    def test_admin_login(self, api_client):
        tokens = api_client.get("/api/login-admin").json()

        headers = {"Authorization": f"Bearer {tokens['accessToken']}"}
        assert api_client.get("/api/me", headers=headers).json()["isAdmin"] is True
        assert api_client.get("/api/admin/stats", headers=headers).status_code == 200

    def test_repeat_login_is_the_same_user(self, api_client):
        first = api_client.get("/api/login").json()
        second = api_client.get("/api/login").json()

        me_first = api_client.get("/api/me", headers={"Authorization": f"Bearer {first['accessToken']}"}).json()
        me_second = api_client.get("/api/me", headers={"Authorization": f"Bearer {second['accessToken']}"}).json()
        assert me_first["user"]["id"] == me_second["user"]["id"]


class TestRefresh:
    def test_refresh_returns_usable_access_token(self, api_client):
        tokens = api_client.get("/api/login").json()

        response = api_client.post("/api/auth/refresh", json={"refreshToken": tokens["refreshToken"]})

        assert response.status_code == 200
        headers = {"Authorization": f"Bearer {response.json()['accessToken']}"}
        assert api_client.get("/api/me", headers=headers).json()["isAuthenticated"] is True

    def test_access_token_is_refused(self, api_client):
        tokens = api_client.get("/api/login").json()

        response = api_client.post("/api/auth/refresh", json={"refreshToken": tokens["accessToken"]})

        assert response.status_code == 401
