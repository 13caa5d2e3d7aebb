"""JSON-Schema Draft 4 node model (http://json-schema.org/).

Optional numeric bounds are ``None`` when the keyword is absent, so a
legal bound of ``0`` is never confused with "no constraint". Keywords that
accept two shapes are modelled as closed unions whose variant is picked from
the shape of the source value.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from openrpc_model.base import ExtensibleModel, tagged_union

# Any valid JSON value: bool, int, float, str, list, dict or None.
JSON = Any


class ExternalDocumentation(ExtensibleModel):
    """Reference to an external resource for extended documentation."""
    description: str | None = None
    url: str


class Schema(ExtensibleModel):
    """A single JSON-Schema Draft 4 node."""

    # Identity and metadata
    id: str | None = None
    schema_url: str | None = Field(alias="$schema", default=None)
    ref: str | None = Field(alias="$ref", default=None)
    title: str | None = None
    description: str | None = None

    # Type constraints
    type: str | list[str] | None = None
    nullable: bool = False
    format: str | None = None
    pattern: str | None = None

    # Numeric bounds
    maximum: float | None = None
    exclusive_maximum: bool = Field(alias="exclusiveMaximum", default=False)
    minimum: float | None = None
    exclusive_minimum: bool = Field(alias="exclusiveMinimum", default=False)
    multiple_of: float | None = Field(alias="multipleOf", default=None)

    # Size bounds
    max_length: int | None = Field(alias="maxLength", default=None)
    min_length: int | None = Field(alias="minLength", default=None)
    max_items: int | None = Field(alias="maxItems", default=None)
    min_items: int | None = Field(alias="minItems", default=None)
    unique_items: bool = Field(alias="uniqueItems", default=False)
    max_properties: int | None = Field(alias="maxProperties", default=None)
    min_properties: int | None = Field(alias="minProperties", default=None)

    enum: list[JSON] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list)

    # Composition
    all_of: list[Schema] = Field(alias="allOf", default_factory=list)
    one_of: list[Schema] = Field(alias="oneOf", default_factory=list)
    any_of: list[Schema] = Field(alias="anyOf", default_factory=list)
    not_: Schema | None = Field(alias="not", default=None)

    # Structural children
    items: PropsOrArray | None = None
    additional_items: PropsOrBool = Field(alias="additionalItems", default=True)
    properties: dict[str, Schema] = Field(default_factory=dict)
    pattern_properties: dict[str, Schema] = Field(alias="patternProperties", default_factory=dict)
    additional_properties: PropsOrBool = Field(alias="additionalProperties", default=True)
    dependencies: Dependencies = Field(default_factory=dict)
    definitions: Definitions = Field(default_factory=dict)

    # Opaque values; use is_present() to tell an absent value from JSON null
    default: JSON = None
    example: JSON = None

    external_docs: ExternalDocumentation | None = Field(alias="externalDocs", default=None)


def _schema_or_array(value: Any) -> str | None:
    if isinstance(value, list):
        return "SchemaArray"
    if isinstance(value, (dict, Schema)):
        return "Schema"
    return None


def _schema_or_bool(value: Any) -> str | None:
    if isinstance(value, bool):
        return "Allows"
    if isinstance(value, (dict, Schema)):
        return "Schema"
    return None


def _schema_or_names(value: Any) -> str | None:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return "PropertyNames"
    if isinstance(value, (dict, Schema)):
        return "Schema"
    return None


# A single schema applied to every item, or one schema per position.
PropsOrArray = tagged_union(
    {"Schema": Schema, "SchemaArray": list[Schema]},
    _schema_or_array,
    "expected a schema object or an array of schema objects",
)

# ``True``/``False`` allows or forbids extra members; a schema constrains them.
# Absent keywords default to ``True``.
PropsOrBool = tagged_union(
    {"Allows": bool, "Schema": Schema},
    _schema_or_bool,
    "expected a boolean or a schema object",
)

# A schema dependency, or a list of property names that must also be present.
PropsOrStringArray = tagged_union(
    {"Schema": Schema, "PropertyNames": list[str]},
    _schema_or_names,
    "expected a schema object or an array of property names",
)

Dependencies = dict[str, PropsOrStringArray]

# Models explicitly defined in this schema.
Definitions = dict[str, Schema]

Schema.model_rebuild()
