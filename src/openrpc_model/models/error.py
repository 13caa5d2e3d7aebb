"""Application-level error objects and JSON-RPC 2.0 error codes."""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from openrpc_model.base import ExtensibleModel

# Codes from and including -32768 to -32000 are reserved for pre-defined errors.
RESERVED_RANGE = (-32768, -32000)

# Reserved for implementation-defined server errors.
SERVER_ERROR_RANGE = (-32099, -32000)


class ErrorCode(int):
    """Number that indicates the error type that occurred.

    Any integer is a valid code; the pre-defined JSON-RPC codes are exposed
    as module constants.
    """

    def __repr__(self) -> str:
        return f"ErrorCode({int(self)})"

    @property
    def is_predefined(self) -> bool:
        """True for the five codes named by JSON-RPC 2.0."""
        return self in PREDEFINED_CODES

    @property
    def is_reserved(self) -> bool:
        """True when the code falls in the reserved pre-defined range."""
        low, high = RESERVED_RANGE
        return low <= self <= high

    @property
    def is_server_error(self) -> bool:
        """True when the code falls in the implementation-defined server range."""
        low, high = SERVER_ERROR_RANGE
        return low <= self <= high

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )


# Invalid JSON was received by the server.
PARSE_ERROR = ErrorCode(-32700)

# The JSON sent is not a valid Request object.
INVALID_REQUEST = ErrorCode(-32600)

# The method does not exist / is not available.
METHOD_NOT_FOUND = ErrorCode(-32601)

# Invalid method parameter(s).
INVALID_PARAMS = ErrorCode(-32602)

# Internal JSON-RPC error.
INTERNAL_ERROR = ErrorCode(-32603)

PREDEFINED_CODES = frozenset({
    PARSE_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
})


class Error(ExtensibleModel):
    """An application-level error a method MAY return."""
    code: ErrorCode
    message: str
    # Primitive or structured value defined by the server; may be JSON null.
    data: Any = None
