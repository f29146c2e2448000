"""Unified settings — init kwargs and env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``GRAPHWALK_*`` prefix, ``__`` for nested sections
                    (e.g. ``GRAPHWALK_LOG__VERBOSE=1``)
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from graphwalk.config.models import LogConfig, TelemetryConfig


class GraphwalkSettings(BaseSettings):
    """Settings controlling graphwalk's logging and telemetry."""

    model_config = {
        "frozen": True,
        "env_prefix": "GRAPHWALK_",
        "env_nested_delimiter": "__",
    }

    log: LogConfig = Field(default_factory=LogConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """No dotenv or secrets files; kwargs over env over defaults."""
        return (init_settings, env_settings)
