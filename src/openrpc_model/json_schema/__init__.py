"""JSON-Schema Draft 4 model embedded in OpenRPC content descriptors."""

from .schema import (
    JSON,
    Definitions,
    Dependencies,
    ExternalDocumentation,
    PropsOrArray,
    PropsOrBool,
    PropsOrStringArray,
    Schema,
)

__all__ = [
    "JSON",
    "Definitions",
    "Dependencies",
    "ExternalDocumentation",
    "PropsOrArray",
    "PropsOrBool",
    "PropsOrStringArray",
    "Schema",
]
