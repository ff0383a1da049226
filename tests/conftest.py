import threading
from typing import Dict, List, Optional, Sequence

import pytest

from apps.locations.errors import ProviderError
from apps.locations.schemas.suggestion import MapboxFeature
from apps.locations.services.expiring_cache import ExpiringCache
from apps.locations.services.location_search import UKLocationSearchService
from apps.locations.services.mapbox_geocoding import UK_BBOX


def make_feature(
    id: Optional[str],
    text: str,
    place_name: Optional[str] = None,
    center=(-0.1, 51.5),
    place_type: Sequence[str] = ("poi",),
    context: Sequence[dict] = (),
) -> dict:
    """Raw Mapbox feature payload, as it comes off the wire"""
    feature = {
        "text": text,
        "place_name": place_name if place_name is not None else f"{text}, London, England, United Kingdom",
        "place_type": list(place_type),
        "context": list(context),
    }
    if id is not None:
        feature["id"] = id
    if center is not None:
        feature["center"] = list(center)
    return feature


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider:
    """Scripted geocoder that records every call.

    Responses and errors are looked up by (query, types) first, then by query
    alone; anything unscripted returns no features.
    """

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.responses: Dict[object, List[dict]] = {}
        self.errors: Dict[object, Exception] = {}
        self.calls: List[dict] = []
        self._lock = threading.Lock()

    @property
    def is_configured(self) -> bool:
        return self.configured

    def respond(self, query: str, features: List[dict], types: Optional[Sequence[str]] = "*") -> None:
        key = query if types == "*" else (query, tuple(types) if types else None)
        self.responses[key] = features

    def fail(self, query: str, error: Optional[Exception] = None, types: Optional[Sequence[str]] = "*") -> None:
        key = query if types == "*" else (query, tuple(types) if types else None)
        self.errors[key] = error or ProviderError("HTTP 500")

    def search(
        self,
        query: str,
        *,
        types=None,
        limit=None,
        autocomplete=True,
        bbox=UK_BBOX,
        proximity=None,
    ) -> List[MapboxFeature]:
        types_key = tuple(types) if types else None
        with self._lock:
            self.calls.append({
                "query": query,
                "types": types_key,
                "limit": limit,
                "autocomplete": autocomplete,
                "bbox": bbox,
                "proximity": proximity,
            })
        for key in ((query, types_key), query):
            if key in self.errors:
                raise self.errors[key]
            if key in self.responses:
                return [MapboxFeature.model_validate(f) for f in self.responses[key]]
        return []

    def queries(self) -> List[str]:
        return [c["query"] for c in self.calls]


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(ttl_seconds=600, clock=clock)


@pytest.fixture
def service(provider, cache):
    # Sequential fan-out keeps recorded call order deterministic
    return UKLocationSearchService(provider=provider, cache=cache, max_workers=1)
