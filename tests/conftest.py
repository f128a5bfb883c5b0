import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("ZENCAFE_SECRET_KEY", "test-secret")
    os.environ.setdefault("ZENCAFE_ADMIN_NOTIFICATION_EMAIL", "owner@zencafe.lk")
    os.environ.setdefault("ZENCAFE_EMAIL_BACKEND", "memory")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def zencafe_bed():
    from protean.integrations.pytest import DomainFixture

    from zencafe import elements  # noqa: F401
    from zencafe.domain import zencafe

    bed = DomainFixture(zencafe)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(zencafe_bed):
    with zencafe_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def email_outbox():
    """The in-memory email adapter, emptied around every test."""
    from zencafe.notifications.channel import get_email_channel, reset_channels

    reset_channels()
    outbox = get_email_channel()
    yield outbox
    reset_channels()


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_category():
    from protean.utils.globals import current_domain

    from zencafe.catalogue.category.category import Category

    def _make(name="Tea", display_order=0, **overrides):
        category = Category.create(name=name, display_order=display_order, **overrides)
        current_domain.repository_for(Category).add(category)
        return category

    return _make


@pytest.fixture()
def make_product():
    from protean.utils.globals import current_domain

    from zencafe.catalogue.product.product import Product

    def _make(category, name="Ceylon Black Tea", price="12.99", **overrides):
        fields = {
            "description": f"{name} from the hills",
            "image_url": "https://cdn.zencafe.lk/products/placeholder.jpg",
        }
        fields.update(overrides)
        product = Product.create(category_id=category.id, name=name, price=price, **fields)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def make_user():
    from protean.utils.globals import current_domain

    from zencafe.identity.user.user import User

    def _make(external_id="user-1", email="user1@example.com", is_admin=False):
        user = User.register(external_id=external_id, email=email, first_name="Test", is_admin=is_admin)
        current_domain.repository_for(User).add(user)
        return user

    return _make


@pytest.fixture()
def auth_headers():
    from zencafe.identity.session.tokens import issue_tokens

    def _headers(user):
        return {"Authorization": f"Bearer {issue_tokens(str(user.id))['access_token']}"}

    return _headers


@pytest.fixture()
def delivery():
    return {
        "customerName": "Nimali Perera",
        "customerEmail": "nimali@example.com",
        "customerPhone": "+94 77 123 4567",
        "deliveryAddress": "12 Temple Road, Kandy",
    }


@pytest.fixture()
def api_client():
    """TestClient over every router with the production error mapping."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from zencafe.api import include_routers, register_error_handlers

    app = FastAPI()
    include_routers(app)
    register_error_handlers(app)
    return TestClient(app)
