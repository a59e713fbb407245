"""
Central configuration loaded from environment variables with sensible defaults.
All secrets come from env vars; no hardcoded credentials.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class GeocodingConfig:
    provider: str = os.getenv("GEOCODER_PROVIDER", "nominatim")  # nominatim | google
    nominatim_url: str = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
    nominatim_user_agent: str = os.getenv("NOMINATIM_USER_AGENT", "wandermint-geo/1.0")
    google_places_url: str = os.getenv(
        "GOOGLE_PLACES_URL", "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    )
    google_places_key: str = os.getenv("GOOGLE_PLACES_KEY", "")
    # Rate limiting
    rate_limit_rps: float = float(os.getenv("GEOCODER_RATE_LIMIT", "1.0"))  # Nominatim wants <=1/s
    max_retries: int = int(os.getenv("GEOCODER_MAX_RETRIES", "2"))
    backoff_base: float = float(os.getenv("GEOCODER_BACKOFF_BASE", "0.25"))
    # Raw results requested per lookup, before noise filtering
    result_limit: int = int(os.getenv("GEOCODER_RESULT_LIMIT", "15"))


@dataclass(frozen=True)
class ResolverConfig:
    max_results: int = int(os.getenv("RESOLVER_MAX_RESULTS", "6"))
    min_query_length: int = int(os.getenv("RESOLVER_MIN_QUERY_LENGTH", "1"))
    # Seconds an external lookup may take before it counts as a failure
    timeout: float = float(os.getenv("RESOLVER_TIMEOUT", "1.0"))
    fallback_enabled: bool = os.getenv("RESOLVER_FALLBACK_ENABLED", "true").lower() == "true"


@dataclass(frozen=True)
class Settings:
    geocoding: GeocodingConfig = field(default_factory=GeocodingConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    env: str = os.getenv("APP_ENV", "development")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
