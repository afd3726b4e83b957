"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates merged configuration dictionaries."""

    @staticmethod
    def validate_shape_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shape resolution parameters."""
        errors = []

        if "strict" in params and not isinstance(params["strict"], bool):
            errors.append(ValidationError(
                field="shapes.strict",
                message="Must be a boolean",
                value=params["strict"]
            ))

        return errors

    @staticmethod
    def validate_lookup_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate lookup parameters."""
        errors = []

        if "log_misses" in params and not isinstance(params["log_misses"], bool):
            errors.append(ValidationError(
                field="lookup.log_misses",
                message="Must be a boolean",
                value=params["log_misses"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="logging.format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []
        errors.extend(cls.validate_shape_params(config.get("shapes", {})))
        errors.extend(cls.validate_lookup_params(config.get("lookup", {})))
        errors.extend(cls.validate_logging_params(config.get("logging", {})))
        return errors
