"""Default configuration parameters for the container utilities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShapeParams:
    """Container shape resolution parameters."""
    strict: bool = False                 # Reject containers with no recognised shape


@dataclass(frozen=True)
class LookupParams:
    """Lookup behaviour parameters."""
    log_misses: bool = False             # Emit a DEBUG record for every lookup miss


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    shapes: ShapeParams
    lookup: LookupParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        shapes=ShapeParams(),
        lookup=LookupParams(),
        logging=LoggingParams(),
    )
