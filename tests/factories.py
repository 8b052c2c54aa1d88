"""Factory functions for creating catalog records in tests."""

from datetime import UTC, datetime

from dealfinder.models import Deal, Location

# Union Square, San Francisco
SF = (37.7749, -122.4194)
NYC = (40.7128, -74.0060)


def make_location(
    *,
    lat: float = SF[0],
    lng: float = SF[1],
    city: str = "San Francisco",
    state: str = "CA",
    zip_code: str = "94103",
) -> Location:
    return Location(
        lat=lat,
        lng=lng,
        address="123 Test St",
        city=city,
        state=state,
        zip_code=zip_code,
    )


def make_deal(
    *,
    id: str = "test-deal-1",
    title: str = "Test Deal",
    description: str = "This is a test deal description",
    original_price: float = 100.0,
    discount_price: float = 50.0,
    discount_percentage: float = 50.0,
    category: str = "Electronics",
    subcategory: str = "Phones",
    tags: tuple[str, ...] = ("smartphone", "discount", "sale"),
    location: Location | None = None,
    merchant_name: str = "Test Electronics",
    merchant_rating: float = 4.5,
    quantity_sold: int = 100,
    featured_deal: bool = False,
    review_count: int = 50,
    average_rating: float = 4.2,
    available_quantity: int = 200,
) -> Deal:
    return Deal(
        id=id,
        title=title,
        description=description,
        original_price=original_price,
        discount_price=discount_price,
        discount_percentage=discount_percentage,
        category=category,
        subcategory=subcategory,
        tags=tags,
        location=location or make_location(),
        merchant_name=merchant_name,
        merchant_rating=merchant_rating,
        quantity_sold=quantity_sold,
        expiry_date=datetime(2026, 12, 31, tzinfo=UTC),
        featured_deal=featured_deal,
        image_url="https://example.com/image.jpg",
        review_count=review_count,
        average_rating=average_rating,
        available_quantity=available_quantity,
    )
