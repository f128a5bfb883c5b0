"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; nothing is shared across
users. State holds ids and tokens returned by earlier steps so later steps
can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """A simulated customer from browsing to checkout."""

    access_token: str | None = None
    products: list[dict] = field(default_factory=list)
    cart: list[dict] = field(default_factory=list)
    order_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.access_token}"} if self.access_token else {}


@dataclass
class AdminState:
    """A simulated shop owner working through the back office."""

    access_token: str | None = None
    category_id: str | None = None
    product_id: str | None = None
    open_orders: dict[str, str] = field(default_factory=dict)  # order id -> status

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.access_token}"} if self.access_token else {}
