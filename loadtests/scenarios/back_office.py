"""Back-office load test scenarios.

The shop owner signs in, checks the dashboard, triages notifications and
messages, moves orders along and maintains the catalog.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import category_data, price, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AdminState

NEXT_STATUS = {"pending": "processing", "processing": "completed"}


class OrderTriageJourney(SequentialTaskSet):
    """Sign in -> Dashboard -> Read notifications -> Advance open orders."""

    def on_start(self):
        self.state = AdminState()

    @task
    def sign_in(self):
        with self.client.get("/api/login-admin", catch_response=True, name="GET /api/login-admin") as resp:
            if resp.status_code == 200:
                self.state.access_token = resp.json()["accessToken"]
            else:
                resp.failure(f"Admin sign in failed: {resp.status_code}")
                self.interrupt()

    @task
    def dashboard(self):
        self.client.get("/api/admin/stats", headers=self.state.headers, name="GET /api/admin/stats")

    @task
    def read_notifications(self):
        resp = self.client.get(
            "/api/admin/notifications", headers=self.state.headers, name="GET /api/admin/notifications"
        )
        if resp.status_code != 200:
            return
        for notification in [n for n in resp.json() if not n["isRead"]][:5]:
            self.client.patch(
                f"/api/admin/notifications/{notification['id']}/read",
                headers=self.state.headers,
                name="PATCH /api/admin/notifications/{id}/read",
            )

    @task
    def load_orders(self):
        resp = self.client.get("/api/admin/orders", headers=self.state.headers, name="GET /api/admin/orders")
        if resp.status_code == 200:
            open_orders = [o for o in resp.json() if o["status"] in NEXT_STATUS][:5]
            self.state.open_orders = {o["id"]: o["status"] for o in open_orders}

    @task
    def advance_orders(self):
        for order_id, current in self.state.open_orders.items():
            status = NEXT_STATUS[current]
            with self.client.patch(
                f"/api/admin/orders/{order_id}/status",
                json={"status": status},
                headers=self.state.headers,
                catch_response=True,
                name="PATCH /api/admin/orders/{id}/status",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Status update failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def triage_messages(self):
        resp = self.client.get("/api/admin/messages", headers=self.state.headers, name="GET /api/admin/messages")
        if resp.status_code != 200:
            return
        for message in [m for m in resp.json() if m["status"] == "new"][:3]:
            self.client.patch(
                f"/api/admin/messages/{message['id']}/status",
                json={"status": random.choice(["read", "replied"])},
                headers=self.state.headers,
                name="PATCH /api/admin/messages/{id}/status",
            )

    @task
    def done(self):
        self.interrupt()


class CatalogMaintenanceJourney(SequentialTaskSet):
    """Sign in -> Create category -> Create product -> Reprice -> Restock toggle."""

    def on_start(self):
        self.state = AdminState()

    @task
    def sign_in(self):
        resp = self.client.get("/api/login-admin", name="GET /api/login-admin")
        if resp.status_code != 200:
            self.interrupt()
        self.state.access_token = resp.json()["accessToken"]

    @task
    def create_category(self):
        with self.client.post(
            "/api/admin/categories",
            json=category_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/admin/categories",
        ) as resp:
            if resp.status_code == 201:
                self.state.category_id = resp.json()["id"]
            else:
                resp.failure(f"Create category failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def create_product(self):
        with self.client.post(
            "/api/admin/products",
            json=product_data(self.state.category_id),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/admin/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def reprice(self):
        self.client.patch(
            f"/api/admin/products/{self.state.product_id}",
            json={"price": price()},
            headers=self.state.headers,
            name="PATCH /api/admin/products/{id}",
        )

    @task
    def toggle_stock(self):
        self.client.patch(
            f"/api/admin/products/{self.state.product_id}",
            json={"inStock": random.random() < 0.8},
            headers=self.state.headers,
            name="PATCH /api/admin/products/{id}",
        )

    @task
    def done(self):
        self.interrupt()


class BackOfficeUser(HttpUser):
    """A shop owner working the admin dashboard."""

    wait_time = between(2.0, 6.0)
    tasks = {OrderTriageJourney: 4, CatalogMaintenanceJourney: 1}
