"""Catalog records.

Deal and Location are immutable pydantic models: the catalog file is
validated into them once at load time and the same instances are served to
every request. Field names are snake_case in Python and camelCase on the
wire and in the catalog file.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Location(BaseModel):
    model_config = _RECORD_CONFIG

    lat: float
    lng: float
    address: str | None = None
    city: str
    state: str
    zip_code: str


class Deal(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    title: str
    description: str
    original_price: float
    discount_price: float
    discount_percentage: float
    category: str
    subcategory: str
    tags: tuple[str, ...] = ()
    location: Location
    merchant_name: str
    merchant_rating: float
    quantity_sold: int = Field(ge=0)
    expiry_date: datetime
    featured_deal: bool = False
    image_url: str = ""
    redemption_locations: tuple[Location, ...] = ()
    fine_print: str | None = None
    review_count: int = 0
    # Assumed to be on a 0-5 scale; the scorer does not clamp it.
    average_rating: float
    available_quantity: int = 0


@dataclass(frozen=True, slots=True)
class UserLocation:
    """Where the user is searching from.

    latitude and longitude are either both set or both None.
    radius is in miles.
    """

    latitude: float | None = None
    longitude: float | None = None
    radius: float = 10.0

    def __post_init__(self) -> None:
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


Catalog = tuple[Deal, ...]
