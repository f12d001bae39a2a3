"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
feed file locations, the country-name override table and logging.

Configuration can be overridden via environment variables:
- RT_GRAPH_DATA_DIR=/path/to/data
- RT_GRAPH_BORDERS_FILE=borders.txt
- RT_NAMING_OVERRIDES='{"U.S.A.": "USA"}'
- RT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAME_OVERRIDES: Dict[str, str] = {
    "Greenland).": "Greenland",
    "U.S.A.": "USA",
    "US": "United States of America",
    "German Federal Republic": "Germany",
    "Bahamas": "Bahamas, The",
    "Macedonia (Former Yugoslav Republic of)": "Macedonia",
    "Bosnia-Herzegovina": "Bosnia and Herzegovina",
    "Congo, Democratic Republic of (Zaire)": "Democratic Republic of the Congo",
    "Zambia.": "Zambia",
}


class GraphConfig(BaseSettings):
    """Feed file configuration.

    Environment variables prefixed with RT_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RT_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    borders_file: str = "borders.txt"
    distances_file: str = "capdist.csv"
    codes_file: str = "state_name.tsv"
    encoding: str = "utf-8"

    @property
    def borders_path(self) -> Path:
        """Full path to the tab-separated borders file."""
        return self.data_dir / self.borders_file

    @property
    def distances_path(self) -> Path:
        """Full path to the capital distances CSV file."""
        return self.data_dir / self.distances_file

    @property
    def codes_path(self) -> Path:
        """Full path to the tab-separated country codes file."""
        return self.data_dir / self.codes_file


class NamingConfig(BaseSettings):
    """Raw country name -> canonical name overrides.

    Environment variables prefixed with RT_NAMING_.
    """

    model_config = SettingsConfigDict(env_prefix="RT_NAMING_")

    overrides: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_NAME_OVERRIDES)
    )

    @field_validator("overrides")
    @classmethod
    def _no_blank_targets(cls, value: Dict[str, str]) -> Dict[str, str]:
        for raw, canonical in value.items():
            if not canonical.strip():
                raise ValueError(f"Override for {raw!r} maps to an empty name")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RT_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.borders_path)
        print(config.naming.overrides)

    Environment variables prefixed with RT_.
    """

    model_config = SettingsConfigDict(env_prefix="RT_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
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
