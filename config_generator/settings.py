"""
Settings Module

Runtime configuration read from CONFIG_GENERATOR_* environment variables.
Command-line flags override these values.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    BASE_HELM_FOLDER,
    DEFAULT_APP_VERSION,
    DEFAULT_CHART_NAME,
    DEFAULT_CHART_VERSION,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from .errors import ConfigurationError
from .metadata_generator import ChartMetadata

ENV_PREFIX = 'CONFIG_GENERATOR_'


class Settings(BaseSettings):
    """Service and chart settings"""
    output_dir: Path = Path(BASE_HELM_FOLDER)
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    chart_name: str = Field(default=DEFAULT_CHART_NAME, min_length=1)
    chart_version: str = Field(default=DEFAULT_CHART_VERSION, min_length=1)
    app_version: str = Field(default=DEFAULT_APP_VERSION, min_length=1)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        frozen=True,
    )

    def override(self, **changes) -> 'Settings':
        """Return a validated copy with every non-None change applied

        Raises:
            ConfigurationError: If a changed value is invalid
        """
        updates = {k: v for k, v in changes.items() if v is not None}
        if not updates:
            return self
        # rebuilt rather than model_copy(update=...) so the new values are validated
        return load_settings(**{**self.model_dump(), **updates})

    @property
    def chart_metadata(self) -> ChartMetadata:
        return ChartMetadata(
            name=self.chart_name,
            version=self.chart_version,
            app_version=self.app_version,
        )


def load_settings(**values) -> Settings:
    """Build settings from the environment and explicit values

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()
