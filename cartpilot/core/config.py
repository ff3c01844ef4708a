from __future__ import annotations

import functools

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

BASKET_BACKENDS = {"memory", "redis"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "CartPilot API"
    environment: str = "development"

    postcode_api_base: str = "https://api.postcodes.io"
    http_timeout_seconds: float = 10.0

    # All distances in the service are miles.
    default_radius_miles: float = 10.0
    max_radius_miles: float = 50.0

    search_min_query_length: int = 2
    search_result_limit: int = 8

    basket_backend: str = "memory"
    basket_storage_key: str = "quickshop-basket"
    redis_url: str = "redis://redis:6379/0"

    # CORS configuration
    cors_origins: str = "*"
    rate_limit: str = "60/minute"

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @field_validator("default_radius_miles", "max_radius_miles", "http_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("search_min_query_length", "search_result_limit")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("basket_backend")
    @classmethod
    def validate_basket_backend(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in BASKET_BACKENDS:
            raise ValueError(f"basket_backend must be one of: {', '.join(sorted(BASKET_BACKENDS))}")
        return value

    @model_validator(mode="after")
    def validate_radius_bounds(self) -> "Settings":
        if self.default_radius_miles > self.max_radius_miles:
            raise ValueError("default_radius_miles cannot exceed max_radius_miles")
        return self


@functools.lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
