"""Deal and category response schemas.

Deal records are serialized directly (they are already pydantic models with
camelCase aliases). ``message`` carries either a validation error or the
"no matches" notice and is omitted when there is nothing to say.
"""

from pydantic import BaseModel

from dealfinder.models import Deal
from dealfinder.services.category import CategoryGroup


class DealListResponse(BaseModel):
    """Ordered deals for GET /deals."""

    deals: list[Deal]
    message: str | None = None


class NameRef(BaseModel):
    name: str


class CategoryResponse(BaseModel):
    """One category with its subcategories, as the filter panel expects it."""

    category: NameRef
    subcategories: list[NameRef]

    @classmethod
    def from_group(cls, group: CategoryGroup) -> "CategoryResponse":
        return cls(
            category=NameRef(name=group.name),
            subcategories=[NameRef(name=sub) for sub in group.subcategories],
        )


class CategoriesResponse(BaseModel):
    categories: list[CategoryResponse]
