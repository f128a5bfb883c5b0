"""Fixed-point money amounts carried as decimal strings."""

import re
from decimal import Decimal

from protean.exceptions import ValidationError

AMOUNT_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")
CENTS = Decimal("0.01")


def parse_amount(value, field: str = "price") -> Decimal:
    """Parse a non-negative amount with at most two decimals.

    Raises `ValidationError` keyed by `field` when the value does not match.
    """
    text = str(value).strip() if value is not None else ""
    if not AMOUNT_PATTERN.match(text):
        raise ValidationError({field: [f"Invalid amount: {value!r}"]})
    return Decimal(text)


def format_amount(amount: Decimal) -> str:
    return str(amount.quantize(CENTS))
