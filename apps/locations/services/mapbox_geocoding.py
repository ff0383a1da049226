#!/usr/bin/env python3
"""Mapbox Geocoding API client (forward search only)"""

import time
import logging
import urllib.parse
from collections import Counter
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

import requests
from pydantic import ValidationError

from apps.core.config import settings
from apps.locations.errors import ProviderError, ProviderTimeout
from apps.locations.schemas.suggestion import MapboxFeature

logger = logging.getLogger(__name__)

# (lng, lat)
Point = Tuple[float, float]


def parse_bbox(raw: str) -> Tuple[float, float, float, float]:
    """'minLng,minLat,maxLng,maxLat' -> tuple of floats"""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 4:
        raise ValueError(f"Bounding box needs 4 numbers, got {raw!r}")
    min_lng, min_lat, max_lng, max_lat = (float(p) for p in parts)
    return min_lng, min_lat, max_lng, max_lat


UK_BBOX = parse_bbox(settings.search_bbox)


class GeocodingProvider(Protocol):
    """Free-text place search scoped to one country"""

    @property
    def is_configured(self) -> bool: ...

    def search(
        self,
        query: str,
        *,
        types: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        autocomplete: Optional[bool] = True,
        bbox: Optional[Tuple[float, float, float, float]] = UK_BBOX,
        proximity: Optional[Point] = None,
    ) -> List[MapboxFeature]: ...


class MapboxGeocoder:
    """Mapbox places endpoint client with per-call timeout and status counters"""

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        country: Optional[str] = None,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.token = access_token if access_token is not None else settings.mapbox_access_token
        self.base_url = (base_url or settings.mapbox_base_url).rstrip("/")
        self.country = country or settings.search_country
        self.language = language or settings.search_language
        self.timeout = timeout if timeout is not None else settings.provider_timeout_s
        self.retries = max(1, retries if retries is not None else settings.provider_retries)
        # Module-level requests.get unless a session is injected; searches fan
        # out across threads and a Session is not documented as thread-safe
        self.session = session
        self.stats = Counter()

    @property
    def is_configured(self) -> bool:
        return bool(self.token)

    def _build_params(
        self,
        types: Optional[Sequence[str]],
        limit: Optional[int],
        autocomplete: Optional[bool],
        bbox: Optional[Tuple[float, float, float, float]],
        proximity: Optional[Point],
    ) -> Dict[str, str]:
        params = {
            "access_token": self.token,
            "country": self.country,
            "language": self.language,
        }
        if autocomplete is not None:
            params["autocomplete"] = "true" if autocomplete else "false"
        if limit is not None:
            params["limit"] = str(limit)
        if types:
            params["types"] = ",".join(types)
        if bbox is not None:
            params["bbox"] = ",".join(f"{v:g}" for v in bbox)
        if proximity is not None:
            params["proximity"] = f"{proximity[0]},{proximity[1]}"
        return params

    def _get(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        """GET with retry on connection errors; timeouts are not retried"""
        attempt = 0
        while True:
            attempt += 1
            try:
                http = self.session or requests
                response = http.get(url, params=params, timeout=self.timeout)
            except requests.exceptions.Timeout as e:
                self.stats["timeout"] += 1
                raise ProviderTimeout(f"No response within {self.timeout}s: {e}")
            except requests.exceptions.RequestException as e:
                if attempt < self.retries:
                    time.sleep(min(0.5 * attempt, 2))
                    continue
                self.stats["request_error"] += 1
                raise ProviderError(f"Request failed: {e}")

            self.stats[response.status_code] += 1
            if not response.ok:
                message = ""
                try:
                    body = response.json()
                except ValueError:
                    body = None
                if isinstance(body, dict):
                    message = str(body.get("message", ""))
                raise ProviderError(f"HTTP {response.status_code} {message}".strip())

            try:
                data = response.json()
            except ValueError as e:
                raise ProviderError(f"Invalid JSON from Mapbox: {e}")
            if not isinstance(data, dict):
                raise ProviderError("Unexpected Mapbox payload")
            return data

    def search(
        self,
        query: str,
        *,
        types: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        autocomplete: Optional[bool] = True,
        bbox: Optional[Tuple[float, float, float, float]] = UK_BBOX,
        proximity: Optional[Point] = None,
    ) -> List[MapboxFeature]:
        """Forward-geocode query and return the parsed features"""
        url = f"{self.base_url}/{urllib.parse.quote(query, safe='')}.json"
        params = self._build_params(types, limit, autocomplete, bbox, proximity)
        data = self._get(url, params)

        raw_features = data.get("features")
        if not isinstance(raw_features, list):
            return []

        features = []
        for raw in raw_features:
            try:
                features.append(MapboxFeature.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed feature for '{query}': {e}")
        logger.debug(f"Mapbox returned {len(features)} features for '{query}' (types={types})")
        return features


def create_mapbox_geocoder() -> MapboxGeocoder:
    """Factory function to create a MapboxGeocoder from settings"""
    return MapboxGeocoder()
