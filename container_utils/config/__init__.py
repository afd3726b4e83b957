"""Configuration defaults, loading and validation."""

from .defaults import (
    DefaultConfig,
    LoggingParams,
    LookupParams,
    ShapeParams,
    get_default_config,
)
from .loader import ConfigLoader
from .runtime import configure
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "LookupParams",
    "ShapeParams",
    "ValidationError",
    "configure",
    "get_default_config",
]
