"""Runtime configuration for loaders, the CLI and the HTTP API."""

from name_resolution_engine.settings.config import (
    ResolutionConfig,
    get_resolution_config,
)

__all__ = ["ResolutionConfig", "get_resolution_config"]
