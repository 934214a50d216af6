from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List

from features.common.models.query_types import UnitSystem

class Settings(BaseSettings):
    """Application settings."""

    # NOAA CO-OPS settings
    noaa_stations_url: str = (
        "https://api.tidesandcurrents.noaa.gov/mdapi/prod/webapi/stations.json?type=tidepredictions"
    )
    noaa_tide_base_url: str = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    coops_params: Dict[str, str] = {
        "product": "predictions",
        "datum": "MLLW",
        "time_zone": "lst_ldt",
        "interval": "hilo",
        "format": "json",
        "application": "tide_query_api"
    }

    # Query defaults, resolved once per call when the caller omits them
    default_units: UnitSystem = UnitSystem.METRIC
    default_max_distance_km: float = 32.2  # ~20 miles
    prediction_window_days: int = 10

    # Upstream request deadline in seconds
    request_timeout: float = 30

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="tides_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
