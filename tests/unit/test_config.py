"""Unit tests for configuration management."""

import pytest
from pathlib import Path
from unittest.mock import patch

from container_utils import ContainerUtilsError
from container_utils.config import (
    ConfigLoader,
    ConfigValidator,
    configure,
    get_default_config,
)
from container_utils.config.loader import CONFIG_FILENAME
from container_utils.shapes import default_registry


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.shapes.strict is False
        assert config.lookup.log_misses is False
        assert config.logging.level == "WARNING"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path: Path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.config_dir == tmp_path

    def test_defaults_to_working_directory(self) -> None:
        """Without a directory the loader looks in the working directory."""
        assert ConfigLoader.create().config_dir == Path.cwd()

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with defaults only."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config == {
            "shapes": {"strict": False},
            "lookup": {"log_misses": False},
            "logging": {"level": "WARNING", "format_json": False},
        }

    def test_yaml_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Values from the YAML file should replace defaults."""
        (tmp_path / CONFIG_FILENAME).write_text("shapes:\n  strict: true\n")

        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["shapes"]["strict"] is True
        assert config["lookup"]["log_misses"] is False

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        """An empty file contributes nothing."""
        (tmp_path / CONFIG_FILENAME).write_text("")

        assert ConfigLoader.create(tmp_path).merge_config()["shapes"]["strict"] is False

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        """Per-call overrides have the highest priority."""
        (tmp_path / CONFIG_FILENAME).write_text("logging:\n  level: DEBUG\n")

        config = ConfigLoader.create(tmp_path).merge_config({"logging": {"level": "ERROR"}})

        assert config["logging"]["level"] == "ERROR"
        assert config["logging"]["format_json"] is False

    def test_override_keeps_file_values_of_other_keys(self, tmp_path: Path) -> None:
        """An override replaces only the keys it names, section by section."""
        (tmp_path / CONFIG_FILENAME).write_text(
            "shapes:\n  strict: true\nlogging:\n  level: DEBUG\n  format_json: true\n"
        )

        config = ConfigLoader.create(tmp_path).merge_config({"logging": {"level": "ERROR"}})

        assert config["logging"] == {"level": "ERROR", "format_json": True}
        assert config["shapes"]["strict"] is True
        assert config["lookup"]["log_misses"] is False


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self, tmp_path: Path) -> None:
        """Default configuration is valid."""
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_invalid_strict(self) -> None:
        """Non-boolean strict flag is rejected."""
        errors = ConfigValidator.validate_shape_params({"strict": "yes"})

        assert len(errors) == 1
        assert errors[0].field == "shapes.strict"

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": 1})

        assert [e.field for e in errors] == ["logging.level", "logging.format_json"]

    def test_lowercase_level_is_accepted(self) -> None:
        """Level names are case-insensitive."""
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []


class TestConfigure:
    """Test applying configuration to the library."""

    def test_applies_to_registry(self, tmp_path: Path) -> None:
        """Merged settings should reach the default registry."""
        configure(
            {"shapes": {"strict": True}, "lookup": {"log_misses": True}},
            config_dir=tmp_path,
            setup_logging=False,
        )

        assert default_registry.strict is True
        assert default_registry.log_misses is True

    def test_configures_logging(self, tmp_path: Path) -> None:
        """The logging section should be passed to configure_logging."""
        with patch("container_utils.config.runtime.configure_logging") as mock_configure:
            configure({"logging": {"level": "DEBUG"}}, config_dir=tmp_path)

        mock_configure.assert_called_once_with(level="DEBUG", format_json=False)

    def test_invalid_config_raises(self, tmp_path: Path) -> None:
        """Invalid values should be reported together."""
        with pytest.raises(ContainerUtilsError) as exc_info:
            configure({"shapes": {"strict": 1}}, config_dir=tmp_path, setup_logging=False)

        assert "shapes.strict" in str(exc_info.value)
        assert len(exc_info.value.context["errors"]) == 1
        assert default_registry.strict is False
