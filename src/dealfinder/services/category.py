"""Category listing.

Groups the catalog's free-text category/subcategory labels for the filter
panel. Subcategories are deduplicated by value within their category.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from dealfinder.logging import get_logger
from dealfinder.models import Deal

logger = get_logger(__name__)


@dataclass
class CategoryGroup:
    name: str
    subcategories: list[str]


def _alphabetical(label: str) -> tuple[str, str]:
    # Case-insensitive first, exact label breaks ties deterministically
    return label.casefold(), label


def extract_categories(deals: Iterable[Deal]) -> list[CategoryGroup]:
    """Return every category in the catalog with its distinct subcategories, both sorted."""
    grouped: dict[str, set[str]] = {}
    for deal in deals:
        subcategories = grouped.setdefault(deal.category, set())
        if deal.subcategory:
            subcategories.add(deal.subcategory)

    groups = [
        CategoryGroup(name=name, subcategories=sorted(subs, key=_alphabetical))
        for name, subs in grouped.items()
    ]
    groups.sort(key=lambda group: _alphabetical(group.name))

    logger.info("categories_extracted", count=len(groups))
    return groups
