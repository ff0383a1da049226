"""Conversion of provider features and static terminals into LocationSuggestion"""

import time
from typing import Iterable, List, Optional

from apps.locations.schemas.reference import KnownLocation, Terminal
from apps.locations.schemas.suggestion import (
    Coordinates,
    LocationMetadata,
    LocationSuggestion,
    MapboxContext,
    MapboxFeature,
)

REGION = "UK"
UNKNOWN_LOCATION = "Unknown Location"


def _first_context(context: Iterable[MapboxContext], *prefixes: str) -> Optional[str]:
    for item in context or []:
        if item.id and item.id.startswith(prefixes):
            return item.text
    return None


def extract_postcode(context: Iterable[MapboxContext]) -> Optional[str]:
    return _first_context(context, "postcode")


def extract_city(context: Iterable[MapboxContext]) -> Optional[str]:
    return _first_context(context, "place", "locality")


def feature_to_suggestion(feature: MapboxFeature, category: str) -> LocationSuggestion:
    """Normalize one provider feature. Pure: no I/O, no caching."""
    lat = feature.latitude
    lng = feature.longitude
    return LocationSuggestion(
        id=feature.id or f"mapbox-{int(time.time() * 1000)}",
        address=feature.place_name or UNKNOWN_LOCATION,
        main_text=feature.text or UNKNOWN_LOCATION,
        secondary_text=feature.place_name or "",
        name=feature.text or UNKNOWN_LOCATION,
        latitude=lat,
        longitude=lng,
        coordinates=Coordinates(lat=lat, lng=lng),
        metadata=LocationMetadata(
            primary_type=feature.primary_type or "poi",
            postcode=extract_postcode(feature.context),
            city=extract_city(feature.context),
            region=REGION,
            category=category,
            place_id=feature.id,
        ),
    )


def terminal_to_suggestion(terminal: Terminal, parent: KnownLocation) -> LocationSuggestion:
    """Static terminal entry, inheriting postcode/city from its parent location"""
    return LocationSuggestion(
        id=terminal.id,
        address=terminal.full_name,
        main_text=terminal.name,
        secondary_text=terminal.description or "",
        name=terminal.name,
        latitude=terminal.latitude,
        longitude=terminal.longitude,
        coordinates=Coordinates(lat=terminal.latitude, lng=terminal.longitude),
        metadata=LocationMetadata(
            primary_type=terminal.type,
            postcode=parent.postcode,
            city=parent.city,
            region=REGION,
            category=terminal.type,
            place_id=terminal.id,
            parent_place_id=parent.id,
        ),
    )


def dedupe_features(features: Iterable[MapboxFeature]) -> List[MapboxFeature]:
    """Keep the first feature for each id, preserving order.

    Features without an id share the same (missing) key, so only the first of
    them survives.
    """
    seen = set()
    unique = []
    for feature in features:
        if feature.id in seen:
            continue
        seen.add(feature.id)
        unique.append(feature)
    return unique
