"""Configuration management for openrpc_model using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from openrpc_model.base import DecodeMode, ExtensionOrder

CONFIG_FILE_NAME = ".openrpc-model.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class DecodeConfig(BaseModel):
    """Decoding configuration section."""
    mode: DecodeMode = DecodeMode.STRICT


class EncodeConfig(BaseModel):
    """Encoding configuration section."""
    extension_order: ExtensionOrder = Field(alias="extensionOrder", default=ExtensionOrder.ORIGINAL)
    indent: int = 2

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v):
        if v < 0:
            raise ValueError("indent must be >= 0")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class CodecConfig(BaseModel):
    """Complete openrpc_model configuration."""
    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    encode: EncodeConfig = Field(default_factory=EncodeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> CodecConfig:
    """Read the codec configuration, falling back to defaults.

    Args:
        config_path: Configuration file to read. When None, the nearest
                    .openrpc-model.json in the current directory or a parent
                    is used.

    Returns:
        CodecConfig: Validated configuration; defaults when no file exists

    Raises:
        ValueError: If the file is not valid JSON or not a valid configuration
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        return CodecConfig()

    try:
        return CodecConfig(**json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config from {path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search ``start_dir`` (default: the current directory) and its parents.

    Returns:
        The first .openrpc-model.json found walking upwards, or None
    """
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
    return None


def configure_logging(config: CodecConfig) -> None:
    """Apply the configured level to the package logger; no handlers are added."""
    logging.getLogger("openrpc_model").setLevel(_LOG_LEVELS[LogLevel(config.logging.level)])
