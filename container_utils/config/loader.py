"""Configuration loader: defaults, then the YAML file, then call overrides."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config

CONFIG_FILENAME = "container_utils.yaml"


def _overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for section, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **value}
        else:
            merged[section] = value
    return merged


@dataclass(frozen=True)
class ConfigLoader:
    """Reads ``container_utils.yaml`` from ``config_dir`` over the defaults."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        return cls(
            config_dir=Path.cwd() if config_dir is None else Path(config_dir),
            defaults=get_default_config(),
        )

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Return defaults overlaid by the YAML file, then by ``overrides``."""
        config = asdict(self.defaults)

        config_file = self.config_dir / CONFIG_FILENAME
        if config_file.exists():
            with open(config_file) as f:
                config = _overlay(config, yaml.safe_load(f) or {})

        return _overlay(config, overrides or {})
