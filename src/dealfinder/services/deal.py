"""Deal business logic.

Filters the catalog snapshot with the request's criteria, then orders the
survivors. Everything here is a pure function of (catalog, criteria): the
catalog tuple is never modified and each call returns new lists.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from dealfinder.exceptions import RankingError
from dealfinder.geo import haversine_miles
from dealfinder.logging import get_logger
from dealfinder.models import Catalog, Deal, UserLocation
from dealfinder.services.ranking import recommendation_score

logger = get_logger(__name__)

NO_MATCHES_MESSAGE = "No deals found matching your criteria. Try adjusting your filters."


class SortKey(StrEnum):
    RECOMMENDED = "recommended"
    PRICE_LOW_HIGH = "price-low-high"
    PRICE_HIGH_LOW = "price-high-low"
    DISCOUNT_HIGH_LOW = "discount-high-low"
    RATING_HIGH_LOW = "rating-high-low"


@dataclass(frozen=True)
class FilterCriteria:
    """Per-request filters. Empty sets and None bounds disable a filter."""

    search: str = ""
    categories: frozenset[str] = frozenset()
    subcategories: frozenset[str] = frozenset()
    min_price: float | None = None
    max_price: float | None = None
    location: UserLocation = field(default_factory=UserLocation)
    sort_by: SortKey = SortKey.RECOMMENDED
    min_search_length: int = 3


@dataclass
class DealList:
    """Ordered result of a deal query, with an optional notice for the caller."""

    deals: list[Deal]
    message: str | None = None


DealPredicate = Callable[[Deal], bool]


def _matches_search(query: str) -> DealPredicate:
    needle = query.lower()

    def predicate(deal: Deal) -> bool:
        return (
            needle in deal.title.lower()
            or needle in deal.description.lower()
            or any(needle in tag.lower() for tag in deal.tags)
            or needle in deal.merchant_name.lower()
        )

    return predicate


def _within_radius(user_location: UserLocation) -> DealPredicate:
    lat, lng, radius = user_location.latitude, user_location.longitude, user_location.radius

    def predicate(deal: Deal) -> bool:
        distance = haversine_miles(lat, lng, deal.location.lat, deal.location.lng)  # type: ignore[arg-type]
        return distance <= radius

    return predicate


def build_predicates(criteria: FilterCriteria) -> list[DealPredicate]:
    """Return one predicate per active filter, cheapest first."""
    predicates: list[DealPredicate] = []

    if criteria.categories:
        predicates.append(lambda deal: deal.category in criteria.categories)
    if criteria.subcategories:
        predicates.append(lambda deal: deal.subcategory in criteria.subcategories)
    if criteria.min_price is not None:
        min_price = criteria.min_price
        predicates.append(lambda deal: deal.discount_price >= min_price)
    if criteria.max_price is not None:
        max_price = criteria.max_price
        predicates.append(lambda deal: deal.discount_price <= max_price)

    query = criteria.search.strip()
    if len(query) >= criteria.min_search_length:
        predicates.append(_matches_search(query))

    if criteria.location.has_coordinates:
        predicates.append(_within_radius(criteria.location))

    return predicates


def filter_deals(catalog: Iterable[Deal], criteria: FilterCriteria) -> list[Deal]:
    """Keep the deals that pass every active filter, in catalog order."""
    predicates = build_predicates(criteria)
    return [deal for deal in catalog if all(p(deal) for p in predicates)]


def sort_deals(
    deals: Sequence[Deal],
    sort_by: SortKey,
    user_location: UserLocation | None = None,
) -> list[Deal]:
    """Return deals ordered by sort_by.

    Sorting is stable in both directions, so ties keep their input order.
    """
    match sort_by:
        case SortKey.PRICE_LOW_HIGH:
            return sorted(deals, key=lambda d: d.discount_price)
        case SortKey.PRICE_HIGH_LOW:
            return sorted(deals, key=lambda d: d.discount_price, reverse=True)
        case SortKey.DISCOUNT_HIGH_LOW:
            return sorted(deals, key=lambda d: d.discount_percentage, reverse=True)
        case SortKey.RATING_HIGH_LOW:
            return sorted(deals, key=lambda d: d.average_rating, reverse=True)
        case SortKey.RECOMMENDED:
            location = user_location or UserLocation()
            return sorted(deals, key=lambda d: recommendation_score(d, location), reverse=True)
    raise ValueError(f"Unsupported sort key: {sort_by!r}")


def list_deals(catalog: Catalog, criteria: FilterCriteria) -> DealList:
    """Filter and sort the catalog for one request.

    An empty result is not an error: it comes back with a notice in
    ``message``. Unexpected failures are logged and re-raised as RankingError.
    """
    try:
        matched = filter_deals(catalog, criteria)
        ordered = sort_deals(matched, criteria.sort_by, criteria.location)
    except Exception as exc:
        logger.exception("deal_ranking_failed", sort_by=criteria.sort_by.value)
        raise RankingError() from exc

    logger.info(
        "deals_listed",
        catalog_size=len(catalog),
        matched=len(ordered),
        sort_by=criteria.sort_by.value,
    )
    if not ordered:
        return DealList(deals=[], message=NO_MATCHES_MESSAGE)
    return DealList(deals=ordered)
