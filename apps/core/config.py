from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the UK location search service."""

    # Mapbox - the web front end exposes the token as NEXT_PUBLIC_MAPBOX_ACCESS_TOKEN
    mapbox_access_token: str = Field(
        default="",
        validation_alias=AliasChoices(
            "mapbox_access_token",
            "MAPBOX_ACCESS_TOKEN",
            "NEXT_PUBLIC_MAPBOX_ACCESS_TOKEN",
        ),
    )
    mapbox_base_url: str = "https://api.mapbox.com/geocoding/v5/mapbox.places"

    # Search scope
    search_country: str = "gb"
    search_language: str = "en"
    search_bbox: str = "-8.2,49.9,1.8,60.9"  # minLng,minLat,maxLng,maxLat

    # Provider calls
    provider_timeout_s: float = 8.0
    provider_retries: int = 1
    search_max_workers: int = 6

    # Cache
    location_cache_ttl_s: int = 600

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
