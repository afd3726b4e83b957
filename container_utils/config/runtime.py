"""Apply a merged configuration to the library's module-level state."""

from pathlib import Path
from typing import Any, Optional

from ..errors import ContainerUtilsError
from ..logging import configure_logging
from ..shapes import default_registry
from .loader import ConfigLoader
from .validation import ConfigValidator


def configure(
    overrides: Optional[dict[str, Any]] = None,
    config_dir: Optional[Path] = None,
    setup_logging: bool = True,
) -> dict[str, Any]:
    """
    Load, validate and apply configuration.

    Args:
        overrides: Per-call overrides, highest priority
        config_dir: Directory searched for ``container_utils.yaml``
        setup_logging: Also configure structlog from the ``logging`` section

    Returns:
        The merged configuration dictionary that was applied

    Raises:
        ContainerUtilsError: the merged configuration is invalid
    """
    config = ConfigLoader.create(config_dir).merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ContainerUtilsError(
            f"Invalid configuration: {'; '.join(f'{e.field}: {e.message}' for e in errors)}",
            context={"errors": errors},
        )

    default_registry.configure(
        strict=config["shapes"]["strict"],
        log_misses=config["lookup"]["log_misses"],
    )

    if setup_logging:
        configure_logging(
            level=config["logging"]["level"],
            format_json=config["logging"]["format_json"],
        )

    return config
