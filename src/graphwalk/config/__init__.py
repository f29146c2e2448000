"""Configuration: settings models, logging setup and the bootstrap hook."""

from __future__ import annotations

from graphwalk.config.logging import configure_logging
from graphwalk.config.settings import GraphwalkSettings


def bootstrap(settings: GraphwalkSettings | None = None) -> GraphwalkSettings:
    """Apply *settings* (or settings read from the environment).

    Configures the ``graphwalk`` log handler and switches telemetry on or off for the
    current context. Returns the settings actually applied.
    """
    from graphwalk.services.telemetry import disable_telemetry, enable_telemetry

    if settings is None:
        settings = GraphwalkSettings()

    configure_logging(verbose=settings.log.verbose, log_json=settings.log.format == "json")
    if settings.telemetry.enabled:
        enable_telemetry()
    else:
        disable_telemetry()
    return settings


__all__ = ["GraphwalkSettings", "bootstrap", "configure_logging"]
