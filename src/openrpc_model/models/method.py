"""Method, Content Descriptor and the OpenRPC JSON-Schema wrapper."""

from collections.abc import Mapping
from enum import IntEnum
from typing import Annotated, Any

from pydantic import (
    BeforeValidator,
    Field,
    GetJsonSchemaHandler,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    WithJsonSchema,
    model_serializer,
)
from pydantic_core import PydanticCustomError, core_schema

from openrpc_model.base import ExtensibleModel, WireModel, is_extension_key, path_marker, tagged_union
from openrpc_model.json_schema import Schema
from openrpc_model.models.error import Error
from openrpc_model.models.example import ExamplePairing
from openrpc_model.models.link import Link
from openrpc_model.models.reference import Reference, is_reference, or_reference
from openrpc_model.models.server import Server
from openrpc_model.models.tag import ExternalDocumentation, Tag


class ParamStructure(IntEnum):
    """Expected format of the JSON-RPC ``params`` member.

    Encoded on the wire as ``"by-position"``, ``"by-name"`` or ``"either"``.
    """
    BY_POSITION = 0
    BY_NAME = 1
    EITHER = 2

    def __str__(self) -> str:
        return _PARAM_STRUCTURE_TEXT[self]

    @classmethod
    def from_text(cls, text: str) -> "ParamStructure":
        """Parse the wire rendering of a param structure."""
        for member, rendered in _PARAM_STRUCTURE_TEXT.items():
            if rendered == text:
                return member
        raise ValueError(f"unknown param structure: {text!r}")


_PARAM_STRUCTURE_TEXT = {
    ParamStructure.BY_POSITION: "by-position",
    ParamStructure.BY_NAME: "by-name",
    ParamStructure.EITHER: "either",
}


def _invalid_param_structure(value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        "invalid_shape",
        "expected one of 'by-position', 'by-name' or 'either', got {value!r}",
        {"value": value},
    )


def _parse_param_structure(value: Any) -> Any:
    if isinstance(value, bool):
        raise _invalid_param_structure(value)
    if isinstance(value, str):
        try:
            return ParamStructure.from_text(value)
        except ValueError:
            raise _invalid_param_structure(value) from None
    if isinstance(value, int):
        try:
            return ParamStructure(value)
        except ValueError:
            raise _invalid_param_structure(value) from None
    return value


ParamStructureField = Annotated[
    ParamStructure,
    BeforeValidator(_parse_param_structure),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "enum": list(_PARAM_STRUCTURE_TEXT.values())}),
]


# Location segment of the inner schema; it has no key of its own on the wire.
INNER_SCHEMA = path_marker("schema")


class JSONSchema(ExtensibleModel):
    """OpenRPC Schema Object: a JSON-Schema node plus OpenRPC extensions.

    On the wire the inner schema's keywords and the ``x-*`` extension fields
    share a single object.
    """
    json_schema: Schema = Field(alias=INNER_SCHEMA, default_factory=Schema)

    @classmethod
    def _partition_fields(cls, data: dict[str, Any], context: dict[str, Any] | None) -> dict[str, Any]:
        if context is None and "json_schema" in data:
            return super()._partition_fields(data, context)

        inner = {key: value for key, value in data.items() if not is_extension_key(key)}
        fields: dict[str, Any] = {INNER_SCHEMA: inner}
        if context is None and "extensions" in inner:
            fields["extensions"] = inner.pop("extensions")

        extensions = {key: value for key, value in data.items() if is_extension_key(key)}
        if extensions:
            fields["extensions"] = {**fields.get("extensions", {}), **extensions}
        return fields

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        return self._merge_extensions(data.get(INNER_SCHEMA, data.get("json_schema", {})), info)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict[str, Any]:
        properties = handler.resolve_ref_schema(handler(schema))["properties"]
        return dict(properties.get(INNER_SCHEMA, properties.get("json_schema", {})))


class ContentDescriptor(ExtensibleModel):
    """Reusable description of a method parameter or result."""
    examples: list[ExamplePairing] = Field(default_factory=list)
    name: str
    summary: str | None = None
    description: str | None = None
    schema_: JSONSchema = Field(alias="schema")
    required: bool = False
    deprecated: bool = False


class OneOf(WireModel):
    """Conditional content descriptor, used only in place of a content descriptor."""
    one_of: ContentDescriptor = Field(alias="oneOf")


def _descriptor_variant(value: Any) -> str | None:
    if is_reference(value):
        return "Reference"
    if isinstance(value, OneOf) or (isinstance(value, Mapping) and "oneOf" in value):
        return "OneOf"
    if isinstance(value, (Mapping, ContentDescriptor)):
        return "ContentDescriptor"
    return None


ContentDescriptorOrReference = tagged_union(
    {"ContentDescriptor": ContentDescriptor, "OneOf": OneOf, "Reference": Reference},
    _descriptor_variant,
    "expected a content descriptor, a oneOf object or a reference",
)

TagOrReference = or_reference(Tag)
ErrorOrReference = or_reference(Error)
LinkOrReference = or_reference(Link)
ExamplePairingOrReference = or_reference(ExamplePairing)


class Method(ExtensibleModel):
    """The interface for a single JSON-RPC method.

    ``name`` is used as the ``method`` member of the JSON-RPC request body
    and MUST be unique within a document; required params MUST precede
    optional ones. Neither rule is checked here, and a missing ``params`` or
    ``result`` is left for validation tooling to report.
    """
    name: str
    tags: list[TagOrReference] = Field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = Field(alias="externaldocs", default=None)
    params: list[ContentDescriptorOrReference] = Field(default_factory=list)
    result: ContentDescriptorOrReference | None = None
    deprecated: bool = False
    servers: list[Server] = Field(default_factory=list)
    errors: list[ErrorOrReference] = Field(default_factory=list)
    links: list[LinkOrReference] = Field(default_factory=list)
    param_structure: ParamStructureField = Field(alias="paramStructure", default=ParamStructure.BY_POSITION)
    examples: list[ExamplePairingOrReference] = Field(default_factory=list)
