from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="RIDEPLAN_LOG_")


class MapSettings(BaseSettings):
    """Map viewport defaults for the planning screen."""

    edge_padding: int = Field(
        default=100,
        ge=0,
        le=500,
        description="Padding in pixels applied to each side when fitting a route",
    )
    # Istanbul city centre
    initial_latitude: float = Field(default=41.0082, ge=-90.0, le=90.0)
    initial_longitude: float = Field(default=28.9784, ge=-180.0, le=180.0)
    latitude_delta: float = Field(default=0.0922, gt=0.0)
    longitude_delta: float = Field(default=0.0421, gt=0.0)

    model_config = SettingsConfigDict(env_prefix="RIDEPLAN_MAP_")


class FareSettings(BaseSettings):
    currency_symbol: str = "₺"

    model_config = SettingsConfigDict(env_prefix="RIDEPLAN_FARE_")

    @field_validator("currency_symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Currency symbol must not be blank")
        return v.strip()


class RouteSettings(BaseSettings):
    polyline_precision: int = Field(
        default=5,
        ge=1,
        le=7,
        description="Decimal precision of encoded route polylines (5 for Google Directions)",
    )

    model_config = SettingsConfigDict(env_prefix="RIDEPLAN_ROUTE_")


class PlacesSettings(BaseSettings):
    min_query_length: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Shortest query that triggers place autocomplete",
    )

    model_config = SettingsConfigDict(env_prefix="RIDEPLAN_PLACES_")


class Settings(BaseSettings):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    map: MapSettings = Field(default_factory=MapSettings)
    fare: FareSettings = Field(default_factory=FareSettings)
    route: RouteSettings = Field(default_factory=RouteSettings)
    places: PlacesSettings = Field(default_factory=PlacesSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
