#!/usr/bin/env python3
"""UK location search: category, famous-place, terminal and general search over Mapbox"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from apps.core.config import settings
from apps.locations.errors import (
    ConfigError,
    LocationSearchError,
    NotFound,
    ProviderError,
    SearchFailed,
)
from apps.locations.schemas.reference import UKLocationCategory
from apps.locations.schemas.suggestion import (
    LocationSearchResponse,
    LocationSuggestion,
    MapboxFeature,
)
from apps.locations.services.expiring_cache import ExpiringCache
from apps.locations.services.mapbox_geocoding import (
    UK_BBOX,
    GeocodingProvider,
    Point,
    create_mapbox_geocoder,
)
from apps.locations.services.normalizer import (
    dedupe_features,
    feature_to_suggestion,
    terminal_to_suggestion,
)
from apps.locations.services.uk_airports_stations import ReferenceDataset, StaticReferenceDataset
from apps.locations.services.uk_categories import UK_LOCATION_CATEGORIES

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Tried in order per seed; the first strategy returning features wins
CATEGORY_STRATEGIES: Tuple[Tuple[str, Optional[Tuple[str, ...]]], ...] = (
    ("POI search", ("poi",)),
    ("Place search", ("place",)),
    ("Comprehensive search", None),
)
CATEGORY_SEED_LIMIT = 5
CATEGORY_RESULT_LIMIT = 20

FAMOUS_SUFFIXES = ("landmark", "attraction", "tourist", "famous", "popular")
LANDMARK_KEYWORDS = (
    "palace", "castle", "museum", "gallery", "park", "square",
    "bridge", "tower", "cathedral", "abbey", "stadium", "arena",
)
FAMOUS_QUERY_LIMIT = 10
FAMOUS_RESULT_LIMIT = 15

TERMINAL_CATEGORIES = ("airport", "train_station")
TERMINAL_KEYWORDS = {
    "airport": ("terminal", "departure", "arrival"),
    "train_station": ("platform", "railway"),
}
TERMINAL_QUERY_LIMIT = 10
TERMINAL_RESULT_LIMIT = 10

# (name, types, limit)
ENHANCED_STRATEGIES: Tuple[Tuple[str, Optional[Tuple[str, ...]], int], ...] = (
    ("comprehensive", None, 20),
    ("poi_only", ("poi",), 15),
    ("address_only", ("address",), 10),
    ("place_only", ("place",), 10),
)
TYPE_PRIORITY = {"poi": 1, "place": 2, "address": 3, "postcode": 4, "neighborhood": 5}
UNKNOWN_TYPE_PRIORITY = 6
ENHANCED_RESULT_LIMIT = 20

MIN_QUERY_LENGTH = 2


def is_short_query(query: str) -> bool:
    stripped = (query or "").strip()
    return not stripped or len(stripped) < MIN_QUERY_LENGTH


def famous_query_variants(query: str) -> List[str]:
    return [query] + [f"{query} {suffix}" for suffix in FAMOUS_SUFFIXES]


def looks_like_landmark(feature: MapboxFeature, query: str) -> bool:
    """Feature names the query and carries a landmark keyword"""
    text = (feature.text or "").lower()
    place_name = (feature.place_name or "").lower()
    query_lower = query.lower()

    contains_query = query_lower in text or query_lower in place_name
    is_landmark = any(k in text or k in place_name for k in LANDMARK_KEYWORDS)
    return contains_query and is_landmark


def terminal_query_variants(location_id: str, category: str) -> List[str]:
    if category == "airport":
        return [
            f"{location_id} terminal",
            f"{location_id} departure",
            f"{location_id} arrival",
            "airport terminal",
            "departure terminal",
            "arrival terminal",
        ]
    return [
        f"{location_id} platform",
        f"{location_id} railway platform",
        "station platform",
        "train platform",
        "railway platform",
    ]


def looks_like_terminal(feature: MapboxFeature, location_id: str, category: str) -> bool:
    """Feature carries a terminal/platform keyword and mentions the parent location"""
    text = (feature.text or "").lower()
    place_name = (feature.place_name or "").lower()
    location_name = location_id.lower()

    has_keyword = any(k in text or k in place_name for k in TERMINAL_KEYWORDS[category])
    mentions_location = location_name in place_name or location_name in text
    return has_keyword and mentions_location


def type_priority(feature: MapboxFeature) -> int:
    return TYPE_PRIORITY.get(feature.primary_type or "", UNKNOWN_TYPE_PRIORITY)


class UKLocationSearchService:
    """Location search over a geocoding provider with an owned expiring cache.

    Build one per process (see create_location_search_service) and pass it to
    consumers; tests build fresh instances with fake collaborators.
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        cache: Optional[ExpiringCache] = None,
        dataset: Optional[ReferenceDataset] = None,
        categories: Sequence[UKLocationCategory] = UK_LOCATION_CATEGORIES,
        bbox: Optional[Tuple[float, float, float, float]] = UK_BBOX,
        max_workers: int = 6,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else ExpiringCache()
        self.dataset = dataset if dataset is not None else StaticReferenceDataset()
        self._categories = list(categories)
        self._categories_by_id = {c.id: c for c in self._categories}
        self.bbox = bbox
        self.max_workers = max_workers

    # --- public API ---

    def get_categories(self) -> List[UKLocationCategory]:
        return list(self._categories)

    def search_by_category(self, category_id: str) -> LocationSearchResponse:
        return self._respond(f"category {category_id}", self._search_by_category, category_id)

    def search_famous_places(self, query: str) -> LocationSearchResponse:
        return self._respond(f"famous places '{query}'", self._search_famous_places, query)

    def search_terminals(self, location_id: str, category: str) -> LocationSearchResponse:
        return self._respond(
            f"terminals {location_id}/{category}",
            self._search_terminals,
            location_id,
            category,
            failure_message="Failed to search terminals",
        )

    def enhanced_search(self, query: str) -> LocationSearchResponse:
        return self._respond(f"enhanced search '{query}'", self._enhanced_search, query)

    def clear_cache(self) -> None:
        self.cache.clear()

    def get_cache_stats(self) -> dict:
        return self.cache.get_cache_stats()

    # --- operations ---

    def _search_by_category(self, category_id: str) -> List[LocationSuggestion]:
        cache_key = f"category:{category_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        category = self._categories_by_id.get(category_id)
        if category is None:
            raise NotFound(f"Category {category_id} does not exist", message="Category not found")
        self._require_provider()

        per_seed = self._fan_out(self._search_seed, category.search_queries)
        features = dedupe_features(f for batch in per_seed for f in batch)

        results = [
            feature_to_suggestion(f, category_id)
            for f in features[:CATEGORY_RESULT_LIMIT]
        ]
        self.cache.set(cache_key, results)
        logger.info(f"Found {len(results)} {category.name}")
        return results

    def _search_seed(self, seed: str) -> List[MapboxFeature]:
        for strategy_name, types in CATEGORY_STRATEGIES:
            features = self._query(
                seed, label=strategy_name, types=types, limit=CATEGORY_SEED_LIMIT, bbox=self.bbox
            )
            if features:
                return features
        return []

    def _search_famous_places(self, query: str) -> List[LocationSuggestion]:
        if is_short_query(query):
            return []

        cache_key = f"famous_places:{query.lower()}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached
        self._require_provider()

        per_variant = self._fan_out(
            lambda q: self._query(
                q, label="famous", types=("poi",), limit=FAMOUS_QUERY_LIMIT, bbox=self.bbox
            ),
            famous_query_variants(query),
        )
        features = dedupe_features(f for batch in per_variant for f in batch)
        famous = [f for f in features if looks_like_landmark(f, query)]

        results = [
            feature_to_suggestion(f, "famous_place")
            for f in famous[:FAMOUS_RESULT_LIMIT]
        ]
        self.cache.set(cache_key, results)
        logger.info(f"Found {len(results)} famous places for '{query}'")
        return results

    def _search_terminals(self, location_id: str, category: str) -> List[LocationSuggestion]:
        if category not in TERMINAL_CATEGORIES:
            raise NotFound(
                f"Terminal category must be one of {', '.join(TERMINAL_CATEGORIES)}, got {category!r}",
                message="Category not found",
            )

        cache_key = f"terminals:{location_id}:{category}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        location = self.dataset.find_location_by_id(location_id)
        terminals = self.dataset.get_terminals_by_location_id(location_id) if location else []
        if location is None or not terminals:
            # Fallback results are not cached
            return self._search_terminals_via_provider(location_id, category)

        results = [terminal_to_suggestion(t, location) for t in terminals]
        self.cache.set(cache_key, results)
        logger.info(f"Found {len(results)} terminals for {location.name}")
        return results

    def _search_terminals_via_provider(self, location_id: str, category: str) -> List[LocationSuggestion]:
        self._require_provider()
        anchor = self._resolve_location(location_id)

        per_query = self._fan_out(
            lambda q: self._query(
                q,
                label="terminal",
                types=("poi",),
                limit=TERMINAL_QUERY_LIMIT,
                bbox=None,
                proximity=anchor,
            ),
            terminal_query_variants(location_id, category),
        )
        candidates = dedupe_features(f for batch in per_query for f in batch)
        for candidate in candidates:
            logger.debug(f"Terminal candidate: '{candidate.text}' - '{candidate.place_name}'")
        relevant = [f for f in candidates if looks_like_terminal(f, location_id, category)]

        sub_category = "terminal" if category == "airport" else "platform"
        return [
            feature_to_suggestion(f, sub_category)
            for f in relevant[:TERMINAL_RESULT_LIMIT]
        ]

    def _resolve_location(self, location_id: str) -> Point:
        """Coordinates of the provider's best POI match for location_id"""
        try:
            matches = self.provider.search(location_id, types=("poi",), autocomplete=None, bbox=None)
        except ProviderError as e:
            raise NotFound(f"Could not find the specified location: {e.details or e}")
        except Exception as e:
            logger.exception(f"Resolving '{location_id}' failed")
            raise NotFound(f"Could not find the specified location: {e}")
        if not matches:
            raise NotFound("No location data available")

        best = matches[0]
        if not best.center or len(best.center) < 2:
            raise NotFound(f"Provider returned no coordinates for {location_id}")
        return best.longitude, best.latitude

    def _enhanced_search(self, query: str) -> List[LocationSuggestion]:
        if is_short_query(query):
            return []

        cache_key = f"enhanced_search:{query.lower()}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached
        self._require_provider()

        per_strategy = self._fan_out(
            lambda strategy: self._query(
                query, label=strategy[0], types=strategy[1], limit=strategy[2], bbox=self.bbox
            ),
            ENHANCED_STRATEGIES,
        )
        features = dedupe_features(f for batch in per_strategy for f in batch)
        ranked = sorted(features, key=type_priority)

        results = [
            feature_to_suggestion(f, "general")
            for f in ranked[:ENHANCED_RESULT_LIMIT]
        ]
        self.cache.set(cache_key, results)
        logger.info(f"Enhanced search found {len(results)} results for '{query}'")
        return results

    # --- helpers ---

    def _respond(
        self,
        label: str,
        operation: Callable[..., List[LocationSuggestion]],
        *args,
        failure_message: str = "Search failed",
    ) -> LocationSearchResponse:
        """Run an operation and fold every outcome into the response envelope"""
        try:
            return LocationSearchResponse.ok(operation(*args))
        except LocationSearchError as e:
            logger.warning(f"Search for {label} failed: {e}")
            return LocationSearchResponse.fail(e)
        except Exception as e:
            logger.exception(f"Unexpected error during search for {label}")
            return LocationSearchResponse.fail(SearchFailed(str(e) or type(e).__name__, message=failure_message))

    def _require_provider(self) -> None:
        if not self.provider.is_configured:
            raise ConfigError("Mapbox access token is not configured")

    def _query(self, query: str, label: str, **params) -> List[MapboxFeature]:
        """One provider call; failures are logged and yield no features"""
        try:
            features = self.provider.search(query, **params)
        except ProviderError as e:
            logger.warning(f"{label} query '{query}' failed: {e}")
            return []
        except Exception:
            logger.exception(f"{label} query '{query}' raised unexpectedly")
            return []
        logger.debug(f"{label} query '{query}' returned {len(features)} features")
        return features

    def _fan_out(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        """Apply fn to each item, possibly in parallel; results keep input order"""
        items = list(items)
        if self.max_workers <= 1 or len(items) <= 1:
            return [fn(item) for item in items]
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(items))) as executor:
            return list(executor.map(fn, items))


def create_location_search_service(
    provider: Optional[GeocodingProvider] = None,
) -> UKLocationSearchService:
    """Factory function to create UKLocationSearchService from settings"""
    return UKLocationSearchService(
        provider=provider or create_mapbox_geocoder(),
        cache=ExpiringCache(ttl_seconds=settings.location_cache_ttl_s),
        max_workers=settings.search_max_workers,
    )
