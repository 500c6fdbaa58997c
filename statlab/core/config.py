# statlab - Core Configuration
# Typed settings for the statistics engine with environment overrides

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment enumeration."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StatsConfig(BaseSettings):
    """Thresholds and constants used by the descriptive and inferential engines."""

    model_config = SettingsConfigDict(env_prefix="STATS_")

    # Variable type classification
    classifier_sample_size: int = Field(default=10, ge=1, le=10000, description="Leading values sampled per column")
    categorical_threshold: float = Field(default=0.8, gt=0.0, le=1.0, description="Numeric fraction below which a column is categorical")

    # Descriptive output
    mode_display_limit: int = Field(default=5, ge=1, le=100, description="Tied modes shown before the ellipsis")

    # Normal approximation critical values
    z_95: float = Field(default=1.96, gt=0.0)
    z_99: float = Field(default=2.576, gt=0.0)
    t_significance_threshold: float = Field(default=1.96, gt=0.0)

    # Correlation strength labels
    strong_correlation: float = Field(default=0.7, gt=0.0, lt=1.0)
    moderate_correlation: float = Field(default=0.3, gt=0.0, lt=1.0)

    # Formatting
    display_decimals: int = Field(default=4, ge=0, le=12)
    equation_decimals: int = Field(default=2, ge=0, le=12)

    @model_validator(mode="after")
    def check_correlation_bands(self) -> "StatsConfig":
        if self.moderate_correlation >= self.strong_correlation:
            raise ValueError("moderate_correlation must be below strong_correlation")
        return self


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = Field(default="statlab", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(default=Environment.DEVELOPMENT)

    # Logging
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="text")  # json or text

    stats: StatsConfig = Field(default_factory=StatsConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once from the environment (and `.env`); call
    `get_settings.cache_clear()` to pick up changed variables.
    """
    return Settings()
