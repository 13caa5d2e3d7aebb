"""OpenRPC document object model."""

from openrpc_model.models.document import Components, Contact, Document, Info, License
from openrpc_model.models.error import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    Error,
    ErrorCode,
)
from openrpc_model.models.example import Example, ExamplePairing
from openrpc_model.models.link import Link
from openrpc_model.models.method import (
    ContentDescriptor,
    JSONSchema,
    Method,
    OneOf,
    ParamStructure,
)
from openrpc_model.models.reference import Reference, is_reference
from openrpc_model.models.server import RuntimeExpressions, Server, ServerVariables
from openrpc_model.models.tag import ExternalDocumentation, Tag

__all__ = [
    "Components",
    "Contact",
    "ContentDescriptor",
    "Document",
    "Error",
    "ErrorCode",
    "Example",
    "ExamplePairing",
    "ExternalDocumentation",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "Info",
    "JSONSchema",
    "License",
    "Link",
    "METHOD_NOT_FOUND",
    "Method",
    "OneOf",
    "PARSE_ERROR",
    "ParamStructure",
    "Reference",
    "RuntimeExpressions",
    "Server",
    "ServerVariables",
    "Tag",
    "is_reference",
]
