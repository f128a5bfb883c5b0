"""Re-prices submitted cart lines against the catalog."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from zencafe.catalogue.product.product import Product
from zencafe.shared.money import format_amount, parse_amount


def _product_id(line: dict):
    return line.get("product_id") or line.get("productId")


def _quantity(line: dict) -> int:
    quantity = line.get("quantity")
    # bool is an int subclass; `true` is not a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError({"items": [f"Quantity must be a positive integer, got {quantity!r}"]})
    return quantity


def price_lines(submitted: list[dict]) -> list[dict]:
    """Return order lines priced and named from the catalog.

    Every product must exist and be in stock; otherwise the whole order is
    rejected with a `ValidationError`. Submitted prices are only checked for
    format, the catalog price is what gets charged.
    """
    if not submitted:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    for line in submitted:
        if not isinstance(line, dict) or not _product_id(line):
            raise ValidationError({"items": ["Each item needs a productId"]})
        _quantity(line)
        parse_amount(line.get("price"), "items")

    products = current_domain.repository_for(Product).find_by_ids({str(_product_id(line)) for line in submitted})

    lines = []
    for line in submitted:
        product_id = str(_product_id(line))
        product = products.get(product_id)
        if product is None:
            raise ValidationError({"items": [f"Unknown product: {product_id}"]})
        if not product.in_stock:
            raise ValidationError({"items": [f"{product.name} is out of stock"]})

        lines.append(
            {
                "product_id": product_id,
                "product_name": product.name,
                "quantity": _quantity(line),
                "price": format_amount(parse_amount(product.price)),
            }
        )
    return lines
