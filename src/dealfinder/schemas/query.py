"""Query parameters accepted by GET /deals.

Parameters arrive as raw strings so that a bad value produces a readable
message in the normal response body instead of FastAPI's 422. DealQuery
validates them and converts to the service-layer FilterCriteria.
"""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from dealfinder.config import settings
from dealfinder.exceptions import InvalidParameterError
from dealfinder.models import UserLocation
from dealfinder.services.deal import FilterCriteria, SortKey

# Inclusive (min, max) per numeric parameter; None means unbounded
_BOUNDS: dict[str, tuple[float | None, float | None]] = {
    "min_price": (None, None),
    "max_price": (None, None),
    "latitude": (-90.0, 90.0),
    "longitude": (-180.0, 180.0),
    "radius": (0.0, settings.max_radius_miles),
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _split_labels(value: Any) -> frozenset[str]:
    if _is_blank(value):
        return frozenset()
    items = value.split(",") if isinstance(value, str) else value
    return frozenset(label.strip() for label in items if label and label.strip())


class DealQuery(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    # Declaration order is validation order; the first failure is reported.
    sort_by: SortKey = SortKey.RECOMMENDED
    search: str = ""
    min_price: float | None = None
    max_price: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    radius: float = settings.default_radius_miles
    categories: frozenset[str] = frozenset()
    subcategories: frozenset[str] = frozenset()

    @field_validator("sort_by", mode="before")
    @classmethod
    def _check_sort_by(cls, value: Any) -> Any:
        if _is_blank(value):
            return SortKey.RECOMMENDED
        if value not in tuple(SortKey):
            raise PydanticCustomError(
                "invalid_sort",
                "Invalid sort option '{value}'. Valid options are: {options}",
                {"value": str(value), "options": ", ".join(SortKey)},
            )
        return value

    @field_validator("search", mode="before")
    @classmethod
    def _strip_search(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("min_price", "max_price", "latitude", "longitude", "radius", mode="before")
    @classmethod
    def _parse_number(cls, value: Any, info: ValidationInfo) -> float | None:
        param = to_camel(info.field_name)  # type: ignore[arg-type]
        if _is_blank(value):
            return settings.default_radius_miles if info.field_name == "radius" else None

        try:
            number = float(value)
        except (TypeError, ValueError):
            number = math.nan
        if not math.isfinite(number):
            raise PydanticCustomError(
                "not_a_number", "Invalid {param} parameter: must be a number", {"param": param}
            )

        low, high = _BOUNDS[info.field_name]  # type: ignore[index]
        if low is not None and number < low:
            raise PydanticCustomError(
                "below_minimum",
                "Invalid {param} parameter: must be at least {bound}",
                {"param": param, "bound": f"{low:g}"},
            )
        if high is not None and number > high:
            raise PydanticCustomError(
                "above_maximum",
                "Invalid {param} parameter: must be at most {bound}",
                {"param": param, "bound": f"{high:g}"},
            )
        return number

    @field_validator("categories", "subcategories", mode="before")
    @classmethod
    def _parse_labels(cls, value: Any) -> frozenset[str]:
        return _split_labels(value)

    @model_validator(mode="after")
    def _check_combinations(self) -> "DealQuery":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise PydanticCustomError("price_range", "minPrice cannot be greater than maxPrice")
        if (self.latitude is None) != (self.longitude is None):
            raise PydanticCustomError(
                "partial_location", "Both latitude and longitude must be provided together"
            )
        return self

    @classmethod
    def parse(cls, params: Mapping[str, Any]) -> "DealQuery":
        """Validate raw query parameters, raising InvalidParameterError on the first problem."""
        try:
            return cls.model_validate(dict(params))
        except ValidationError as exc:
            error = exc.errors()[0]
            param = str(error["loc"][0]) if error["loc"] else None
            raise InvalidParameterError(param, error["msg"]) from exc

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            search=self.search,
            categories=self.categories,
            subcategories=self.subcategories,
            min_price=self.min_price,
            max_price=self.max_price,
            location=UserLocation(
                latitude=self.latitude, longitude=self.longitude, radius=self.radius
            ),
            sort_by=self.sort_by,
            min_search_length=settings.min_search_length,
        )
