"""Recommendation scoring.

A fixed five-factor linear score. Higher means more recommended. The weights
sum to 1.0, but the discount factor is applied to the raw 0-100 percentage
while the other factors are normalized to 0-1 first, so in practice discount
dominates the ordering. Existing clients depend on that ordering.
"""

from dealfinder.geo import haversine_miles
from dealfinder.models import Deal, UserLocation

DISCOUNT_WEIGHT = 0.30
DISTANCE_WEIGHT = 0.20
RATING_WEIGHT = 0.15
FEATURED_WEIGHT = 0.15
POPULARITY_WEIGHT = 0.20

MAX_RATING = 5.0
# Units sold at which popularity saturates
POPULARITY_CAP = 1000


def distance_factor(deal: Deal, user_location: UserLocation) -> float:
    """Return 1.0 at the user's position falling linearly to 0.0 at the radius.

    Requests without coordinates get the full factor so that deals are not
    penalized when the user hasn't shared a location.
    """
    if not user_location.has_coordinates:
        return 1.0

    distance = haversine_miles(
        user_location.latitude,  # type: ignore[arg-type]
        user_location.longitude,  # type: ignore[arg-type]
        deal.location.lat,
        deal.location.lng,
    )
    if user_location.radius <= 0:
        return 1.0 if distance == 0 else 0.0
    return max(0.0, 1 - distance / user_location.radius)


def popularity_factor(deal: Deal) -> float:
    return min(1.0, deal.quantity_sold / POPULARITY_CAP)


def recommendation_score(deal: Deal, user_location: UserLocation) -> float:
    """Score a deal for the "recommended" ordering. The total is not clamped."""
    score = deal.discount_percentage * DISCOUNT_WEIGHT
    score += distance_factor(deal, user_location) * DISTANCE_WEIGHT
    score += (deal.average_rating / MAX_RATING) * RATING_WEIGHT
    if deal.featured_deal:
        score += FEATURED_WEIGHT
    score += popularity_factor(deal) * POPULARITY_WEIGHT
    return score
