"""Client-held shopping cart.

The cart lives with the customer, not the server. It is persisted as a JSON
array of `{product, quantity}` under a fixed key in a small key/value store
(a JSON file on disk), so it survives restarts. Prices in the cart are
snapshots for display; the server re-prices everything at checkout.
"""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

CART_STORAGE_KEY = "zen_cafe_cart"


class LocalStore:
    """A JSON file holding string keys and string values."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Local store unreadable, starting empty", path=str(self.path), error=str(exc))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class Cart:
    """Lines of `{"product": <product dict>, "quantity": int}`.

    Products are the dicts returned by the catalog API and must carry `id`
    and `price`.
    """

    def __init__(self, store: LocalStore):
        self.store = store
        self.items: list[dict] = self._load()

    def _load(self) -> list[dict]:
        raw = self.store.get(CART_STORAGE_KEY)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Stored cart is corrupt, starting with an empty cart")
            return []

        if not isinstance(items, list) or not all(_is_line(item) for item in items):
            logger.warning("Stored cart has an unexpected shape, starting with an empty cart")
            return []
        return items

    def _save(self) -> None:
        self.store.set(CART_STORAGE_KEY, json.dumps(self.items))

    def _find(self, product_id: str) -> dict | None:
        return next((item for item in self.items if item["product"]["id"] == product_id), None)

    def add(self, product: dict, quantity: int = 1) -> list[dict]:
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")

        line = self._find(product["id"])
        if line is not None:
            line["quantity"] += quantity
        else:
            self.items.append({"product": product, "quantity": quantity})

        self._save()
        return self.items

    def set_quantity(self, product_id: str, quantity: int) -> list[dict]:
        """Overwrite a line's quantity; zero or less removes the line."""
        line = self._find(product_id)
        if line is not None:
            if quantity <= 0:
                self.items.remove(line)
            else:
                line["quantity"] = quantity

        self._save()
        return self.items

    def remove(self, product_id: str) -> list[dict]:
        self.items = [item for item in self.items if item["product"]["id"] != product_id]
        self._save()
        return self.items

    def clear(self) -> None:
        self.items = []
        self.store.remove(CART_STORAGE_KEY)

    def total(self) -> Decimal:
        return sum((Decimal(str(item["product"]["price"])) * item["quantity"] for item in self.items), Decimal("0"))

    def item_count(self) -> int:
        return sum(item["quantity"] for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def to_order_items(self) -> list[dict]:
        """Checkout payload lines."""
        return [
            {
                "productId": item["product"]["id"],
                "quantity": item["quantity"],
                "price": str(item["product"]["price"]),
            }
            for item in self.items
        ]


def _is_line(item) -> bool:
    if not isinstance(item, dict) or not isinstance(item.get("product"), dict):
        return False
    quantity = item.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        return False
    if "id" not in item["product"]:
        return False
    try:
        Decimal(str(item["product"].get("price")))
    except InvalidOperation:
        return False
    return True
