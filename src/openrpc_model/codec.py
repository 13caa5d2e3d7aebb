"""Decoding of OpenRPC documents into the model and encoding back to the wire."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from openrpc_model.base import DecodeMode, WireModel
from openrpc_model.config import CodecConfig
from openrpc_model.errors import EncodeError, MalformedJSON, MalformedYAML, from_validation_error
from openrpc_model.models import Document

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=WireModel)

YAML_SUFFIXES = {".yaml", ".yml"}


def _resolve_mode(mode: DecodeMode | str | None, config: CodecConfig | None) -> DecodeMode:
    if mode is not None:
        return DecodeMode(mode)
    return DecodeMode((config or CodecConfig()).decode.mode)


def _validate(model: type[ModelT], data: Any, mode: DecodeMode) -> ModelT:
    logger.debug(f"Decoding {model.__name__} in {mode.value} mode")
    try:
        result = model.model_validate(data, strict=True, context={"mode": mode})
    except ValidationError as e:
        raise from_validation_error(e) from e
    logger.debug(f"Decoded {model.__name__}")
    return result


def decode(
    source: str | bytes | Any,
    model: type[ModelT] = Document,
    *,
    mode: DecodeMode | str | None = None,
    config: CodecConfig | None = None,
) -> ModelT:
    """Decode a JSON document (or an already parsed JSON value) into a model.

    Args:
        source: JSON text, or the parsed value (usually a dict)
        model: Model class to decode into, the root Document by default
        mode: Overrides the decode mode from ``config``
        config: Codec configuration; defaults apply when omitted

    Returns:
        The decoded model

    Raises:
        MalformedJSON: If ``source`` is text that is not valid JSON
        InvalidShape, UnknownField, MissingRequired: If the value does not
            fit the model
    """
    if isinstance(source, (str, bytes, bytearray)):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise MalformedJSON("", f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
        except UnicodeDecodeError as e:
            raise MalformedJSON("", f"Invalid JSON encoding: {e}") from e
    else:
        data = source

    return _validate(model, data, _resolve_mode(mode, config))


def decode_yaml(
    source: str | bytes,
    model: type[ModelT] = Document,
    *,
    mode: DecodeMode | str | None = None,
    config: CodecConfig | None = None,
) -> ModelT:
    """Decode a YAML document into a model.

    Raises:
        MalformedYAML: If ``source`` is not valid YAML
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise MalformedYAML("", f"Invalid YAML: {e}") from e

    return _validate(model, data, _resolve_mode(mode, config))


def load(
    path: str | Path,
    model: type[ModelT] = Document,
    *,
    mode: DecodeMode | str | None = None,
    config: CodecConfig | None = None,
) -> ModelT:
    """Load a document from a file; ``.yaml``/``.yml`` files are read as YAML.

    Args:
        path: Path to the document file
        model: Model class to decode into
        mode: Overrides the decode mode from ``config``
        config: Codec configuration

    Returns:
        The decoded model

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    with open(path, encoding="utf-8") as f:
        text = f.read()

    logger.debug(f"Loading {path}")
    if path.suffix.lower() in YAML_SUFFIXES:
        return decode_yaml(text, model, mode=mode, config=config)
    return decode(text, model, mode=mode, config=config)


def encode(model: WireModel, *, config: CodecConfig | None = None) -> dict[str, Any]:
    """Encode a model into its wire-shaped JSON value.

    Fields absent from the decoded source (or never set) are omitted; set
    fields are emitted even when zero, false or empty.

    Raises:
        EncodeError: If the model holds a value outside its declared shape
    """
    config = config or CodecConfig()
    try:
        return model.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            context={"extension_order": config.encode.extension_order},
            warnings="error",
        )
    except PydanticSerializationError as e:
        raise EncodeError(f"Cannot encode {type(model).__name__}: {e}") from e


def dumps(model: WireModel, *, fmt: str = "json", config: CodecConfig | None = None) -> str:
    """Encode a model to JSON or YAML text.

    Args:
        model: Model to encode
        fmt: ``json`` or ``yaml``
        config: Codec configuration

    Returns:
        Encoded document text
    """
    config = config or CodecConfig()
    data = encode(model, config=config)

    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=config.encode.indent, ensure_ascii=False)
    raise ValueError(f"Unsupported format: {fmt}")


def dump(model: WireModel, path: str | Path, *, config: CodecConfig | None = None) -> Path:
    """Write a model to a file, choosing YAML or JSON from the file suffix."""
    path = Path(path)
    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"

    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(model, fmt=fmt, config=config))

    logger.debug(f"Wrote {path}")
    return path
