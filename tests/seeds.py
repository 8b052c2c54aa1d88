"""Reusable seed catalogs for tests."""

import pytest

from dealfinder.models import Catalog
from tests.factories import NYC, make_deal, make_location


@pytest.fixture
def seeded_catalog() -> Catalog:
    """Seven deals across three categories, two in New York, the rest in San Francisco."""
    nyc = make_location(lat=NYC[0], lng=NYC[1], city="New York", state="NY", zip_code="10007")
    return (
        make_deal(
            id="1",
            title="Wireless Earbuds",
            discount_price=25.0,
            discount_percentage=50.0,
            category="Electronics",
            subcategory="Audio",
            tags=("bluetooth", "audio"),
            merchant_name="Sound Shack",
            average_rating=4.0,
            quantity_sold=300,
        ),
        make_deal(
            id="2",
            title="Pizza Night for Two",
            description="Two large pizzas and a pitcher",
            discount_price=75.0,
            discount_percentage=30.0,
            category="Food",
            subcategory="Restaurants",
            tags=("pizza", "dinner"),
            merchant_name="Slice House",
            average_rating=4.8,
            quantity_sold=1200,
        ),
        make_deal(
            id="3",
            title="4K Television",
            discount_price=150.0,
            discount_percentage=20.0,
            category="Electronics",
            subcategory="TV",
            tags=("tv", "4k"),
            merchant_name="Big Screen Co",
            average_rating=3.5,
            quantity_sold=40,
        ),
        make_deal(
            id="4",
            title="Bagel Breakfast",
            description="Dozen bagels with cream cheese",
            discount_price=12.0,
            discount_percentage=40.0,
            category="Food",
            subcategory="Cafes",
            tags=("breakfast",),
            merchant_name="Hudson Bagels",
            location=nyc,
            average_rating=4.5,
            quantity_sold=800,
        ),
        make_deal(
            id="5",
            title="Spa Day Package",
            description="Massage, facial and sauna access",
            discount_price=120.0,
            discount_percentage=45.0,
            category="Wellness",
            subcategory="Spa",
            tags=("massage", "relaxation"),
            merchant_name="Calm Waters",
            featured_deal=True,
            average_rating=4.9,
            quantity_sold=90,
        ),
        make_deal(
            id="6",
            title="Noise-Cancelling Headphones",
            discount_price=75.0,
            discount_percentage=40.0,
            category="Electronics",
            subcategory="Audio",
            tags=("bluetooth", "headphones"),
            merchant_name="Sound Shack",
            location=nyc,
            average_rating=4.6,
            quantity_sold=500,
        ),
        make_deal(
            id="7",
            title="Sushi Omakase",
            description="Twelve-course chef's tasting menu",
            discount_price=95.0,
            discount_percentage=30.0,
            category="Food",
            subcategory="Restaurants",
            tags=("sushi", "dinner"),
            merchant_name="Kaiten",
            average_rating=4.8,
            quantity_sold=150,
        ),
    )
