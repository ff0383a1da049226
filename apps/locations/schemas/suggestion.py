"""Pydantic schemas for provider features, suggestions and the response envelope"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from apps.locations.errors import LocationSearchError


class MapboxContext(BaseModel):
    """One ancestor entry from a feature's context list"""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    text: Optional[str] = None


class MapboxFeature(BaseModel):
    """Subset of a Mapbox geocoding feature that the search layer consumes.

    Every field is optional; missing values are defaulted during normalization
    instead of failing validation.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    place_name: Optional[str] = None
    text: Optional[str] = None
    center: Optional[List[float]] = None  # [lng, lat]
    place_type: List[str] = Field(default_factory=list)
    context: List[MapboxContext] = Field(default_factory=list)

    @field_validator("place_type", "context", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    @property
    def longitude(self) -> float:
        if self.center and len(self.center) >= 2 and self.center[0]:
            return self.center[0]
        return 0.0

    @property
    def latitude(self) -> float:
        if self.center and len(self.center) >= 2 and self.center[1]:
            return self.center[1]
        return 0.0

    @property
    def primary_type(self) -> Optional[str]:
        return self.place_type[0] if self.place_type else None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Coordinates(_CamelModel):
    lat: float
    lng: float


class LocationMetadata(_CamelModel):
    primary_type: str
    region: str
    category: str
    place_id: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    parent_place_id: Optional[str] = None


class LocationSuggestion(_CamelModel):
    """Canonical place result handed to callers.

    latitude/longitude are always set; (0, 0) means the provider gave no
    coordinates and must be read as "unknown".
    """
    id: str
    address: str
    main_text: str
    secondary_text: str
    name: str
    latitude: float
    longitude: float
    coordinates: Coordinates
    metadata: LocationMetadata


class SearchError(_CamelModel):
    message: str
    details: str = ""
    code: str = "search_failed"


class LocationSearchResponse(_CamelModel):
    """Tagged result: success with data, or failure with error. Never both."""
    success: bool
    data: Optional[List[LocationSuggestion]] = None
    error: Optional[SearchError] = None

    @model_validator(mode="after")
    def _one_shape(self) -> "LocationSearchResponse":
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("successful response must carry data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("failed response must carry an error and no data")
        return self

    @classmethod
    def ok(cls, data: List[LocationSuggestion]) -> "LocationSearchResponse":
        return cls(success=True, data=list(data))

    @classmethod
    def fail(cls, exc: LocationSearchError) -> "LocationSearchResponse":
        return cls(
            success=False,
            error=SearchError(message=exc.message, details=exc.details, code=exc.code),
        )
