"""Configuration management for the variable store."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseModel):
    """Storage engine configuration."""

    initial_capacity: int = Field(
        default=4, ge=1, description="Number of cells allocated by a fresh store"
    )
    growth_factor: int = Field(
        default=2, ge=2, description="Capacity multiplier applied when the store is full"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_enabled: bool = Field(
        default=False, description="Record Prometheus metrics for store operations"
    )
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(
        default="variable_store", description="Service name for tracing"
    )


class Config(BaseSettings):
    """Main configuration for the variable store."""

    model_config = SettingsConfigDict(
        env_prefix="VARIABLE_STORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    store: StoreConfig = Field(default_factory=StoreConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
