"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LogConfig(BaseModel):
    """Logging options (``GRAPHWALK_LOG__*``)."""

    model_config = {"frozen": True}

    verbose: bool = False
    format: Literal["console", "json"] = "console"


class TelemetryConfig(BaseModel):
    """Telemetry options (``GRAPHWALK_TELEMETRY__*``)."""

    model_config = {"frozen": True}

    enabled: bool = False
