"""Faker-based data generators for Locust load test scenarios.

Payloads pass the API's validation rules (email structure, money strings
with at most two decimals) and use the camelCase keys the API expects.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CITIES = ["Colombo", "Kandy", "Galle", "Negombo", "Nuwara Eliya", "Jaffna", "Matara"]


# ---------- Customers ----------


def valid_email() -> str:
    """Emails with exactly one @, a dotted domain and no consecutive dots."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_phone() -> str:
    """Sri Lankan mobile numbers like '+94 77 123 4567'."""
    return f"+94 7{random.randint(0, 8)} {random.randint(100, 999)} {random.randint(1000, 9999)}"


def delivery_data() -> dict:
    """Delivery half of a checkout payload."""
    return {
        "customerName": fake.name()[:200],
        "customerEmail": valid_email(),
        "customerPhone": valid_phone(),
        "deliveryAddress": f"{fake.building_number()} {fake.street_name()}, {random.choice(CITIES)}",
        "notes": fake.sentence() if random.random() < 0.3 else None,
    }


def contact_message_data() -> dict:
    return {
        "name": fake.name()[:200],
        "email": valid_email(),
        "phone": valid_phone() if random.random() < 0.5 else None,
        "message": fake.paragraph(nb_sentences=3),
    }


# ---------- Catalog ----------


def price() -> str:
    return f"{random.uniform(2.5, 45.0):.2f}"


def category_data() -> dict:
    word = fake.word().capitalize()
    return {
        "name": f"{word} {uuid.uuid4().hex[:6]}",
        "description": fake.sentence(),
        "displayOrder": random.randint(0, 20),
    }


def product_data(category_id: str) -> dict:
    word = fake.word().capitalize()
    return {
        "categoryId": category_id,
        "name": f"{word} Blend {uuid.uuid4().hex[:6]}",
        "description": fake.paragraph(nb_sentences=2),
        "price": price(),
        "imageUrl": f"https://cdn.zencafe.lk/products/{uuid.uuid4().hex}.jpg",
        "origin": random.choice(["Nuwara Eliya", "Uva", "Dimbula", "Kandy", "Ruhuna"]),
        "brewingSuggestions": f"Steep for {random.randint(2, 5)} minutes at {random.randint(80, 100)}C",
        "featured": random.random() < 0.2,
    }


def search_term() -> str:
    return random.choice(["tea", "black", "green", "coffee", "matcha", "chai", fake.word()])


# ---------- Checkout ----------


def cart_lines(products: list[dict], max_lines: int = 3) -> list[dict]:
    """Pick distinct in-stock products and quantities for a cart."""
    in_stock = [p for p in products if p.get("inStock", True)]
    chosen = random.sample(in_stock, k=min(len(in_stock), random.randint(1, max_lines)))
    return [{"productId": p["id"], "quantity": random.randint(1, 4), "price": p["price"]} for p in chosen]


def order_total(lines: list[dict]) -> str:
    """Total in cents-exact arithmetic, formatted with two decimals."""
    cents = sum(round(float(line["price"]) * 100) * line["quantity"] for line in lines)
    return f"{cents // 100}.{cents % 100:02d}"
