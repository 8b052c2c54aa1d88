"""Deal and category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from dealfinder.dependencies import CatalogSnapshot
from dealfinder.schemas.deal import CategoriesResponse, CategoryResponse, DealListResponse
from dealfinder.schemas.query import DealQuery
from dealfinder.services.category import extract_categories
from dealfinder.services.deal import list_deals

router = APIRouter()

# Raw strings on purpose: DealQuery reports bad values in the response body.
RawParam = Annotated[str | None, Query()]


@router.get(
    "/deals",
    response_model=DealListResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def get_deals(
    catalog: CatalogSnapshot,
    search: RawParam = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    categories: RawParam = None,
    subcategories: RawParam = None,
    latitude: RawParam = None,
    longitude: RawParam = None,
    radius: RawParam = None,
) -> DealListResponse:
    """List deals matching the filters, ordered by sortBy (default: recommended)."""
    query = DealQuery.parse(
        {
            "sortBy": sort_by,
            "search": search,
            "minPrice": min_price,
            "maxPrice": max_price,
            "categories": categories,
            "subcategories": subcategories,
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
        }
    )
    result = list_deals(catalog, query.to_criteria())
    return DealListResponse(deals=result.deals, message=result.message)


@router.get("/categories", response_model=CategoriesResponse, status_code=200)
async def get_categories(catalog: CatalogSnapshot) -> CategoriesResponse:
    """List every category in the catalog with its subcategories, alphabetically."""
    groups = extract_categories(catalog)
    return CategoriesResponse(categories=[CategoryResponse.from_group(g) for g in groups])
