"""Unit tests for category extraction."""

from dealfinder.models import Catalog
from dealfinder.services.category import CategoryGroup, extract_categories
from tests.factories import make_deal


def test_groups_and_sorts(seeded_catalog: Catalog) -> None:
    assert extract_categories(seeded_catalog) == [
        CategoryGroup(name="Electronics", subcategories=["Audio", "TV"]),
        CategoryGroup(name="Food", subcategories=["Cafes", "Restaurants"]),
        CategoryGroup(name="Wellness", subcategories=["Spa"]),
    ]


def test_duplicate_subcategories_are_collapsed() -> None:
    deals = [
        make_deal(id="1", category="Food", subcategory="Pizza"),
        make_deal(id="2", category="Food", subcategory="Pizza"),
        make_deal(id="3", category="Food", subcategory="Bakery"),
    ]
    assert extract_categories(deals) == [
        CategoryGroup(name="Food", subcategories=["Bakery", "Pizza"]),
    ]


def test_sorting_ignores_case() -> None:
    deals = [
        make_deal(id="1", category="travel", subcategory="hotels"),
        make_deal(id="2", category="Activities", subcategory="Tours"),
        make_deal(id="3", category="Activities", subcategory="escape rooms"),
    ]
    groups = extract_categories(deals)
    assert [g.name for g in groups] == ["Activities", "travel"]
    assert groups[0].subcategories == ["escape rooms", "Tours"]


def test_empty_subcategory_contributes_category_only() -> None:
    groups = extract_categories([make_deal(category="Gifts", subcategory="")])
    assert groups == [CategoryGroup(name="Gifts", subcategories=[])]


def test_empty_catalog() -> None:
    assert extract_categories([]) == []
