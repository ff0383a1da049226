"""Error taxonomy for the location search layer"""

from typing import Optional


class LocationSearchError(Exception):
    """Base class for every failure the search service can report"""

    code = "search_error"
    default_message = "Search failed"

    def __init__(self, details: str = "", message: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(f"{self.message}: {details}" if details else self.message)


class ConfigError(LocationSearchError):
    """Provider credential is not configured"""

    code = "config_error"
    default_message = "Missing Mapbox token"


class NotFound(LocationSearchError):
    """Unknown category id, or a location the provider cannot resolve"""

    code = "not_found"
    default_message = "Location not found"


class SearchFailed(LocationSearchError):
    """Unexpected failure while orchestrating a search"""

    code = "search_failed"
    default_message = "Search failed"


class ProviderError(LocationSearchError):
    """A single geocoding request failed"""

    code = "provider_error"
    default_message = "Geocoding request failed"


class ProviderTimeout(ProviderError):
    """A single geocoding request exceeded its timeout"""

    code = "provider_timeout"
    default_message = "Geocoding request timed out"
