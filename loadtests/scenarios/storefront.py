"""Storefront load test scenarios.

Anonymous browsing, the signed-in checkout journey and the contact form.
Checkout steps run in order; each depends on the previous one succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, TaskSet, between, task

from loadtests.data_generators import (
    cart_lines,
    contact_message_data,
    delivery_data,
    order_total,
    search_term,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class BrowsingJourney(TaskSet):
    """Anonymous catalog browsing: listings, filters, search and detail pages."""

    def on_start(self):
        self.slugs: list[str] = []
        self.category_slugs: list[str] = []

    @task(5)
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                self.slugs = [p["slug"] for p in resp.json()]
            else:
                resp.failure(f"List products failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(2)
    def list_categories(self):
        with self.client.get("/api/categories", catch_response=True, name="GET /api/categories") as resp:
            if resp.status_code == 200:
                self.category_slugs = [c["slug"] for c in resp.json()]
            else:
                resp.failure(f"List categories failed: {resp.status_code}")

    @task(3)
    def browse_category(self):
        if not self.category_slugs:
            return
        self.client.get(
            "/api/products",
            params={"category": random.choice(self.category_slugs)},
            name="GET /api/products?category",
        )

    @task(2)
    def featured(self):
        self.client.get("/api/products", params={"featured": "true"}, name="GET /api/products?featured")

    @task(2)
    def search(self):
        self.client.get("/api/products", params={"search": search_term()}, name="GET /api/products?search")

    @task(4)
    def product_detail(self):
        if not self.slugs:
            return
        with self.client.get(
            f"/api/products/{random.choice(self.slugs)}",
            catch_response=True,
            name="GET /api/products/{slug}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Product detail failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(1)
    def stop(self):
        self.interrupt()


class CheckoutJourney(SequentialTaskSet):
    """Sign in -> Load catalog -> Fill cart -> Checkout -> Review orders.

    Generates per order: one Order with its items, one admin notification
    and one admin email.
    """

    def on_start(self):
        self.state = ShopperState()

    @task
    def sign_in(self):
        with self.client.get("/api/login", catch_response=True, name="GET /api/login") as resp:
            if resp.status_code == 200:
                self.state.access_token = resp.json()["accessToken"]
            else:
                resp.failure(f"Sign in failed: {resp.status_code}")
                self.interrupt()

    @task
    def load_catalog(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            products = resp.json() if resp.status_code == 200 else []
            if not products:
                resp.failure("No products to buy")
                self.interrupt()
                return
            self.state.products = products

    @task
    def fill_cart(self):
        self.state.cart = cart_lines(self.state.products)
        if not self.state.cart:
            self.interrupt()

    @task
    def checkout(self):
        payload = {**delivery_data(), "items": self.state.cart, "totalAmount": order_total(self.state.cart)}
        with self.client.post(
            "/api/orders",
            json=payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
                self.state.cart = []
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def order_history(self):
        self.client.get("/api/orders", headers=self.state.headers, name="GET /api/orders")

    @task
    def order_items(self):
        with self.client.get(
            f"/api/orders/{self.state.order_id}/items",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/orders/{id}/items",
        ) as resp:
            if resp.status_code != 200 or not resp.json():
                resp.failure(f"Order items missing: {resp.status_code}")

    @task
    def notifications(self):
        self.client.get("/api/notifications/unread-count", headers=self.state.headers, name="GET /api/notifications")

    @task
    def done(self):
        self.interrupt()


class ContactJourney(SequentialTaskSet):
    """A visitor sends a message through the contact form."""

    @task
    def submit(self):
        with self.client.post(
            "/api/contact",
            json=contact_message_data(),
            catch_response=True,
            name="POST /api/contact",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Contact form failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Storefront traffic only: mostly browsing, some checkouts."""

    wait_time = between(0.5, 2.0)
    tasks = {BrowsingJourney: 6, CheckoutJourney: 3, ContactJourney: 1}
