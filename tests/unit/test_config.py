"""Unit tests for configuration management."""

import json
import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from openrpc_model import DecodeMode, ExtensionOrder
from openrpc_model.config import (
    CONFIG_FILE_NAME,
    CodecConfig,
    DecodeConfig,
    EncodeConfig,
    LogLevel,
    configure_logging,
    find_config_file,
    load_config,
)


class TestCodecConfig:
    """Test CodecConfig model."""

    def test_defaults(self):
        """Test the zero-config defaults."""
        config = CodecConfig()
        assert config.decode.mode == DecodeMode.STRICT
        assert config.encode.extension_order == ExtensionOrder.ORIGINAL
        assert config.encode.indent == 2
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict(self):
        """Test config creation from dictionary."""
        config_data = {
            "decode": {"mode": "lenient"},
            "encode": {"extensionOrder": "alphabetical", "indent": 0},
            "logging": {"level": "debug"},
        }

        config = CodecConfig(**config_data)
        assert config.decode.mode == DecodeMode.LENIENT
        assert config.encode.extension_order == ExtensionOrder.ALPHABETICAL
        assert config.encode.indent == 0
        assert config.logging.level == LogLevel.DEBUG

    def test_python_names_accepted(self):
        """Test that the encode section accepts snake_case names."""
        config = EncodeConfig(extension_order="alphabetical")
        assert config.extension_order == ExtensionOrder.ALPHABETICAL

    def test_config_validation_error(self):
        """Test config validation error handling."""
        with pytest.raises(ValueError):
            CodecConfig(decode={"mode": "forgiving"})

    def test_negative_indent(self):
        """Test that a negative indent is rejected."""
        with pytest.raises(ValueError):
            EncodeConfig(indent=-1)

    def test_config_extra_fields_forbidden(self):
        """Test that extra fields are rejected."""
        with pytest.raises(ValueError):
            CodecConfig(decode=DecodeConfig(), invalid_field="should-fail")


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        """Test loading config from existing file."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"decode": {"mode": "lenient"}}, f)

            config = load_config(config_file)
            assert config.decode.mode == DecodeMode.LENIENT
            assert config.encode.indent == 2

    def test_load_config_file_not_found(self):
        """Test loading config when file doesn't exist."""
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config == CodecConfig()

    def test_load_config_invalid_json(self):
        """Test loading config with invalid JSON."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                f.write("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        """Test loading config with invalid structure."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"invalid": "structure"}, f)

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        """Test finding config file in a parent directory."""
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            config_file = temp_path / CONFIG_FILE_NAME
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file

    def test_find_config_file_not_found(self):
        """Test config file discovery when not found."""
        with TemporaryDirectory() as temp_dir:
            with patch("openrpc_model.config.CONFIG_FILE_NAME", ".openrpc-model-absent.json"):
                assert find_config_file(Path(temp_dir)) is None

    def test_zero_config_operation(self):
        """Test zero-config operation with defaults."""
        with patch("openrpc_model.config.find_config_file", return_value=None):
            assert load_config() == CodecConfig()


class TestConfigureLogging:
    """Test applying the logging section."""

    def test_sets_package_logger_level(self):
        """Test that the package logger follows the configured level."""
        logger = logging.getLogger("openrpc_model")
        previous = logger.level
        try:
            configure_logging(CodecConfig(logging={"level": "debug"}))
            assert logger.level == logging.DEBUG
            configure_logging(CodecConfig())
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)
