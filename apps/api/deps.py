"""Request-scoped access to the process-wide location search service"""

from fastapi import Request

from apps.locations.services.location_search import (
    UKLocationSearchService,
    create_location_search_service,
)


def get_location_service(request: Request) -> UKLocationSearchService:
    service = getattr(request.app.state, "location_service", None)
    if service is None:
        service = create_location_search_service()
        request.app.state.location_service = service
    return service
