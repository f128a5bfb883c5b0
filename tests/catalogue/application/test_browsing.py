"""Storefront listing and lookup."""

import pytest
from protean.exceptions import ObjectNotFoundError

from zencafe.catalogue.product.browsing import get_by_slug, list_products


@pytest.fixture()
def menu(make_category, make_product):
    tea = make_category(name="Tea", display_order=1)
    coffee = make_category(name="Coffee", display_order=2)
    return {
        "ceylon": make_product(tea, name="Ceylon Black Tea", description="Brisk highland leaves"),
        "matcha": make_product(tea, name="Matcha", description="Stone-ground green tea", featured=True),
        "espresso": make_product(coffee, name="Espresso", description="Double shot, dark roast"),
        "latte": make_product(coffee, name="Cafe Latte", description="Espresso with steamed milk"),
    }


class TestListProducts:
    def test_featured_first_then_newest(self, menu):
        names = [p.name for p in list_products()]
        assert names == ["Matcha", "Cafe Latte", "Espresso", "Ceylon Black Tea"]

    def test_filter_by_category_slug(self, menu):
        names = {p.name for p in list_products(category_slug="coffee")}
        assert names == {"Espresso", "Cafe Latte"}

    def test_unknown_category_slug_yields_empty_list(self, menu):
        assert list_products(category_slug="smoothies") == []

    def test_search_matches_name_case_insensitively(self, menu):
        assert [p.name for p in list_products(search="MATCHA")] == ["Matcha"]

    def test_search_matches_description(self, menu):
        names = {p.name for p in list_products(search="espresso")}
        assert names == {"Espresso", "Cafe Latte"}

    def test_featured_filter(self, menu):
        assert [p.name for p in list_products(featured=True)] == ["Matcha"]
        assert "Matcha" not in {p.name for p in list_products(featured=False)}

    def test_filters_combine(self, menu):
        assert [p.name for p in list_products(category_slug="tea", search="brisk")] == ["Ceylon Black Tea"]


class TestGetBySlug:
    def test_found(self, menu):
        assert get_by_slug("cafe-latte").name == "Cafe Latte"

    def test_missing_slug_raises_not_found(self, menu):
        with pytest.raises(ObjectNotFoundError):
            get_by_slug("flat-white")
