"""Tests for the notification email templates."""

import pytest

from zencafe.notifications.templates import TEMPLATE_REGISTRY, get_template
from zencafe.notifications.templates.contact_message import ContactMessageTemplate
from zencafe.notifications.templates.order_placed import OrderPlacedTemplate
from zencafe.notifications.templates.order_status_changed import OrderStatusChangedTemplate

ORDER_ID = "5b1c7e2a-9f3d-4c61-8a0e-2d4f6b8c1a3e"


class TestRegistry:
    def test_every_notification_type_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == {"order_placed", "contact_message", "order_status_changed"}

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="birthday"):
            get_template("birthday")


class TestOrderPlacedTemplate:
    def test_render(self):
        content = OrderPlacedTemplate.render(
            {
                "order_id": ORDER_ID,
                "customer_name": "Nimali Perera",
                "customer_email": "nimali@example.com",
                "total_amount": "25.98",
                "currency": "LKR",
            }
        )

        assert content["subject"] == "New Order #5b1c7e2a"
        assert "Nimali Perera" in content["body"]
        assert "LKR 25.98" in content["body"]
        assert content["html_body"] is not None

    def test_customer_name_is_escaped_in_html(self):
        content = OrderPlacedTemplate.render(
            {"order_id": ORDER_ID, "customer_name": "<b>Nimali</b>", "total_amount": "25.98", "currency": "LKR"}
        )

        assert "Customer: &lt;b&gt;Nimali&lt;/b&gt;" in content["html_body"]
        assert "<b>" not in content["html_body"]
        assert "Customer: <b>Nimali</b>" in content["body"]


class TestContactMessageTemplate:
    def test_render(self):
        content = ContactMessageTemplate.render(
            {"name": "Ravi", "email": "ravi@example.com", "phone": None, "message": "Hello"}
        )

        assert content["subject"] == "New Contact Message from Ravi"
        assert "Phone: -" in content["body"]
        assert content["body"].endswith("Hello")

    def test_form_input_is_escaped_in_html(self):
        content = ContactMessageTemplate.render(
            {"name": "<script>x</script>", "email": "ravi@example.com", "phone": None, "message": "<img src=x>"}
        )

        assert "&lt;script&gt;x&lt;/script&gt;" in content["html_body"]
        assert "&lt;img src=x&gt;" in content["html_body"]
        assert "<script>" not in content["html_body"]
        assert "<img" not in content["html_body"]


class TestOrderStatusChangedTemplate:
    def test_render(self):
        content = OrderStatusChangedTemplate.render(
            {"order_id": ORDER_ID, "customer_name": "Nimali", "new_status": "completed"}
        )

        assert content["subject"] == "Your Zen Cafe order #5b1c7e2a is completed"
        assert content["body"].startswith("Hi Nimali,")
