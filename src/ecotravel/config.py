"""
EcoTravel - Configuration and settings.

Settings are read from ECOTRAVEL_* environment variables or a local .env file.
The engine itself takes all state as arguments; these values only seed the
CLI and logging.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecotravel.models import UserCategory


class EngineSettings(BaseSettings):
    """Settings shared by the CLI and any embedding presentation layer."""

    model_config = SettingsConfigDict(
        env_prefix="ECOTRAVEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Display
    currency_symbol: str = "₹"
    default_category: UserCategory = UserCategory.ADULT

    # Demo account snapshot; calories default to the tracker totals in catalog.ACTIVITY
    starting_points: int = Field(default=180, ge=0)
    calories_burned: int | None = Field(default=None, ge=0)

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached EngineSettings instance."""
    return EngineSettings()


class _SettingsProxy:
    """Lazy proxy so importing this module never reads the environment."""

    _instance: EngineSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
