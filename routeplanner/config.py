"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RP_SEARCH_MAX_LEGS=4
- RP_SEARCH_MIN_CONNECTION_MINUTES=45
- RP_DATA_DATA_DIR=/path/to/data
- RP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseSettings):
    """Path search and aggregation rules.

    Environment variables prefixed with RP_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_SEARCH_")

    # None leaves path length unbounded; dense networks should set it.
    max_legs: Optional[int] = Field(default=None, ge=1)
    min_connection_minutes: int = Field(default=30, ge=0)
    stopover_discount_rate: float = Field(default=0.25, ge=0.0)


class DataConfig(BaseSettings):
    """Schedule data configuration.

    Environment variables prefixed with RP_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    flights_file: str = "Flights.xml"
    clients_file: str = "Clients.xml"

    @property
    def flights_path(self) -> Path:
        """Full path to the flights XML file."""
        return self.data_dir / self.flights_file

    @property
    def clients_path(self) -> Path:
        """Full path to the clients XML file."""
        return self.data_dir / self.clients_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.max_legs)
        print(config.data.flights_path)

    Environment variables prefixed with RP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
