"""Health check endpoints exposed by the public API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from apps.api.deps import get_location_service
from apps.locations.services.location_search import UKLocationSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", summary="Constant-time readiness probe")
def health_fast() -> dict[str, str]:
    """Simple readiness probe that never touches the geocoding provider."""
    return {"status": "ok", "timestamp": _utc_timestamp()}


@router.get("/locations", summary="Location search configuration and cache status")
def health_locations(
    service: UKLocationSearchService = Depends(get_location_service),
) -> dict[str, object]:
    configured = service.provider.is_configured
    if not configured:
        logger.warning("Location search has no Mapbox token configured")
    return {
        "status": "healthy" if configured else "unhealthy",
        "components": {
            "provider": {"status": "configured" if configured else "missing_token"},
            "cache": service.get_cache_stats(),
        },
        "timestamp": _utc_timestamp(),
    }
