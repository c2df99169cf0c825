"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the bundled config directory.

    The name hint rules ship inside the package: src/colmodel/config/.
    """
    return Path(__file__).resolve().parent.parent / "config"


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: COLMODEL_
    """

    model_config = SettingsConfigDict(
        env_prefix="COLMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (name hints)",
    )

    # Numeric repair
    null_tokens: list[str] = Field(
        default=["-", "na", "NA"],
        description="Tokens rewritten to null in otherwise numeric SCALAR columns",
    )

    # Date format detection
    year_min: int = Field(default=1850, description="Smallest integer treated as a bare year")
    year_max: int = Field(default=2100, description="Largest integer treated as a bare year")
    date_layouts: list[str] = Field(
        default=[
            "%m/%d/%Y %H:%M:%S",
            "%m/%d/%Y %H:%M",
            "%m/%d/%Y",
            "%Y/%m/%d %H:%M:%S",
            "%Y/%m/%d %H:%M",
            "%Y/%m/%d",
            "%b %d %Y",
            "%b %d, %Y",
            "%B %d %Y",
            "%B %d, %Y",
            "%d %b %Y",
            "%d %B %Y",
        ],
        description="strptime layouts tried, in order, for non-ISO dates",
    )

    # Finish instants
    dense_gap_seconds: float = Field(
        default=20.0,
        description="Gaps shorter than this use a fraction of the gap instead of minus one second",
    )
    dense_gap_fraction: float = Field(default=0.95, gt=0, lt=1)
    single_instant_span_seconds: float = Field(
        default=3600 * 24 - 1,
        description="Validity span when a column holds a single distinct instant",
    )

    # Playback clock
    playback_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Target wall-clock duration of a full playback",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
