"""HTTP client for the Zen Cafe API, used by the storefront."""

import requests
import structlog

from storefront.cart import Cart

logger = structlog.get_logger(__name__)


class StorefrontError(Exception):
    def __init__(self, status_code: int, detail):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class CheckoutError(StorefrontError):
    """Checkout was refused; the cart is left untouched."""


class StorefrontClient:
    """Thin wrapper over the public and customer endpoints.

    `session` may be any object with a requests-style API; it defaults to a
    new `requests.Session`.
    """

    def __init__(self, base_url: str = "http://localhost:8000", session=None, token: str | None = None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.token = token
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        return self.session.request(method, url, headers=self._headers(), timeout=self.timeout, **kwargs)

    @staticmethod
    def _detail(response):
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("error") or body.get("detail")
        return body

    def _json(self, response, error_cls=StorefrontError):
        if response.status_code >= 400:
            raise error_cls(response.status_code, self._detail(response))
        return response.json()

    # --- Catalog ---

    def products(self, category: str | None = None, search: str | None = None, featured: bool | None = None):
        params = {"category": category, "search": search}
        if featured is not None:
            params["featured"] = str(featured).lower()
        params = {key: value for key, value in params.items() if value is not None}
        return self._json(self._request("GET", "/api/products", params=params))

    def product(self, slug: str):
        return self._json(self._request("GET", f"/api/products/{slug}"))

    def categories(self):
        return self._json(self._request("GET", "/api/categories"))

    # --- Orders ---

    def place_order(self, payload: dict):
        return self._json(self._request("POST", "/api/orders", json=payload), CheckoutError)

    def orders(self):
        return self._json(self._request("GET", "/api/orders"))

    def order_items(self, order_id: str):
        return self._json(self._request("GET", f"/api/orders/{order_id}/items"))

    def checkout(self, cart: Cart, delivery: dict) -> dict:
        """Submit the cart as an order and clear it once the server accepts it.

        `delivery` carries customerName, customerEmail, deliveryAddress and
        optionally customerPhone and notes.
        """
        payload = {
            **delivery,
            "items": cart.to_order_items(),
            "totalAmount": f"{cart.total():.2f}",
        }
        response = self._request("POST", "/api/orders", json=payload)
        if response.status_code != 201:
            detail = self._detail(response)
            logger.warning("Checkout rejected", status_code=response.status_code, detail=detail)
            raise CheckoutError(response.status_code, detail)

        order = response.json()
        cart.clear()
        logger.info("Checkout complete", order_id=order.get("id"))
        return order
