"""openrpc_model - Data model and codec for OpenRPC documents.

Decodes OpenRPC documents (JSON or YAML) into frozen Pydantic models,
including the embedded JSON-Schema Draft 4 nodes, and encodes them back
without injecting defaults that were absent from the source.
"""

__version__ = "0.1.0"
__description__ = "Data model and codec for OpenRPC documents"

from openrpc_model.base import DecodeMode, ExtensionOrder
from openrpc_model.codec import decode, decode_yaml, dump, dumps, encode, load
from openrpc_model.config import CodecConfig, load_config
from openrpc_model.errors import (
    DecodeError,
    EncodeError,
    InvalidShape,
    MalformedJSON,
    MalformedYAML,
    MissingRequired,
    OpenRpcModelError,
    UnknownField,
)
from openrpc_model.models import Document

__all__ = [
    "__version__",
    "__description__",
    "CodecConfig",
    "DecodeError",
    "DecodeMode",
    "Document",
    "EncodeError",
    "ExtensionOrder",
    "InvalidShape",
    "MalformedJSON",
    "MalformedYAML",
    "MissingRequired",
    "OpenRpcModelError",
    "UnknownField",
    "decode",
    "decode_yaml",
    "dump",
    "dumps",
    "encode",
    "load",
    "load_config",
]
