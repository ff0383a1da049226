import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from apps.api.deps import get_location_service
from apps.api.schemas.location import CategoryListResponse, CategoryResponse
from apps.locations.schemas.suggestion import LocationSearchResponse
from apps.locations.services.location_search import UKLocationSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations")

# error code -> HTTP status; anything unlisted is an upstream failure
ERROR_STATUS = {
    "not_found": 404,
    "config_error": 503,
}
UPSTREAM_FAILURE_STATUS = 502


def envelope_response(result: LocationSearchResponse) -> JSONResponse:
    """Serialize the envelope, mapping failures onto an HTTP status"""
    status_code = 200
    if not result.success:
        status_code = ERROR_STATUS.get(result.error.code, UPSTREAM_FAILURE_STATUS)
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.get("/categories", response_model=CategoryListResponse, response_model_by_alias=True)
async def list_categories(service: UKLocationSearchService = Depends(get_location_service)):
    """Static category catalog; never calls the provider"""
    categories = [CategoryResponse.from_category(c) for c in service.get_categories()]
    return CategoryListResponse(categories=categories, total_count=len(categories))


@router.get("/categories/{category_id}")
def search_category(
    category_id: str,
    service: UKLocationSearchService = Depends(get_location_service),
):
    return envelope_response(service.search_by_category(category_id))


@router.get("/famous")
def search_famous(
    q: Optional[str] = Query("", max_length=100, description="Landmark name"),
    service: UKLocationSearchService = Depends(get_location_service),
):
    return envelope_response(service.search_famous_places(q or ""))


@router.get("/search")
def search_locations(
    q: Optional[str] = Query("", max_length=100, description="Free-text query"),
    service: UKLocationSearchService = Depends(get_location_service),
):
    return envelope_response(service.enhanced_search(q or ""))


@router.get("/{location_id}/terminals")
def search_terminals(
    location_id: str,
    category: str = Query("airport", pattern="^(airport|train_station)$"),
    service: UKLocationSearchService = Depends(get_location_service),
):
    return envelope_response(service.search_terminals(location_id, category))
