"""Pydantic base classes shared by the JSON-Schema and OpenRPC models.

Every model is a frozen value object. Decoding goes through
``model_validate`` with a validation context carrying the decode mode;
encoding goes through ``model_dump(by_alias=True, exclude_unset=True)`` so
fields absent from the source document never reappear in the output.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    Tag,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.json_schema import SkipJsonSchema
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = "x-"

# Error locations may contain segments that are not wire names (union
# variant tags, the inner schema of a wrapper). They are written as
# "<name>" so that rendered paths can leave them out.
PATH_MARKER_OPEN = "<"
PATH_MARKER_CLOSE = ">"


class DecodeMode(str, Enum):
    """How unknown non-extension fields are treated while decoding."""
    STRICT = "strict"
    LENIENT = "lenient"


class ExtensionOrder(str, Enum):
    """Order in which captured extension fields are re-emitted."""
    ORIGINAL = "original"
    ALPHABETICAL = "alphabetical"


def is_extension_key(key: Any) -> bool:
    """Check whether a field name is a vendor extension (``x-`` prefixed)."""
    return isinstance(key, str) and key.startswith(EXTENSION_PREFIX)


def path_marker(name: str) -> str:
    """Location segment for a name that is not part of the wire path."""
    return f"{PATH_MARKER_OPEN}{name}{PATH_MARKER_CLOSE}"


def is_path_marker(part: Any) -> bool:
    """Check whether an error location segment was made by ``path_marker``."""
    return isinstance(part, str) and part.startswith(PATH_MARKER_OPEN) and part.endswith(PATH_MARKER_CLOSE)


def tagged_union(
    choices: dict[str, Any],
    pick: Callable[[Any], str | None],
    message: str,
) -> Any:
    """Build a discriminated union whose variant is chosen from the value shape.

    Args:
        choices: Mapping of variant tag to the type decoded for that tag
        pick: Returns the tag for a raw value or model instance, or None
              when the value matches no variant
        message: Error message used when ``pick`` returns None

    Returns:
        An ``Annotated`` union usable as a field type
    """
    def discriminate(value: Any) -> str | None:
        tag = pick(value)
        return None if tag is None else path_marker(tag)

    variants = tuple(Annotated[kind, Tag(path_marker(tag))] for tag, kind in choices.items())
    return Annotated[
        Union[variants],
        Discriminator(
            discriminate,
            custom_error_type="invalid_shape",
            custom_error_message=message,
        ),
    ]


class WireModel(BaseModel):
    """Frozen model decoded from a wire document.

    When validated with a context (the codec always passes one), only wire
    field names are recognised and unknown fields are rejected or dropped
    according to ``context["mode"]``. Without a context (programmatic
    construction) Python field names are accepted too and unknown keyword
    arguments are rejected.

    The codec validates in strict mode, so wire values are never coerced
    (no "10" for a number, no 1 for a boolean); integers are still accepted
    where a number is declared.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def wire_fields(cls) -> set[str]:
        """Wire names of every field that appears in encoded output."""
        return {
            field.alias or name
            for name, field in cls.model_fields.items()
            if not field.exclude
        }

    @classmethod
    def _accepted_fields(cls, context: dict[str, Any] | None) -> set[str]:
        if context is not None:
            return cls.wire_fields()
        return cls.wire_fields() | set(cls.model_fields)

    @classmethod
    def _partition_fields(cls, data: dict[str, Any], context: dict[str, Any] | None) -> dict[str, Any]:
        """Split a raw mapping into recognised fields, dropping or rejecting the rest."""
        accepted = cls._accepted_fields(context)
        mode = DecodeMode((context or {}).get("mode", DecodeMode.STRICT))
        fields: dict[str, Any] = {}

        for key, value in data.items():
            if key in accepted:
                fields[key] = value
            elif mode == DecodeMode.LENIENT:
                logger.debug(f"Dropping unknown field '{key}' on {cls.__name__}")
            else:
                raise PydanticCustomError(
                    "unknown_field",
                    "unknown field '{field}' on {model}",
                    {"field": key, "model": cls.__name__},
                )

        return fields

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        return cls._partition_fields(data, info.context)

    def is_present(self, field: str) -> bool:
        """Check whether a field was present in the source (or set explicitly).

        Needed for opaque JSON fields such as ``default`` where ``None``
        is both the "absent" value and a legal JSON ``null``.
        """
        return field in self.model_fields_set


class ExtensibleModel(WireModel):
    """Wire model that captures ``x-*`` fields into ``extensions``.

    Extension fields never populate a named field and are excluded from the
    named-field encoding; the serializer merges them back in at the same
    level, after the named fields.
    """

    model_config = ConfigDict(json_schema_extra={"patternProperties": {"^x-": {}}})

    extensions: SkipJsonSchema[dict[str, Any]] = Field(default_factory=dict, exclude=True)

    @classmethod
    def _accepted_fields(cls, context: dict[str, Any] | None) -> set[str]:
        accepted = super()._accepted_fields(context)
        if context is None:
            accepted.add("extensions")
        return accepted

    @classmethod
    def _partition_fields(cls, data: dict[str, Any], context: dict[str, Any] | None) -> dict[str, Any]:
        captured = {key: value for key, value in data.items() if is_extension_key(key)}
        rest = {key: value for key, value in data.items() if not is_extension_key(key)}

        fields = super()._partition_fields(rest, context)
        if captured:
            fields["extensions"] = {**fields.get("extensions", {}), **captured}
        return fields

    @field_validator("extensions")
    @classmethod
    def _check_extension_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        for key in value:
            if not is_extension_key(key):
                raise ValueError(f"extension field '{key}' must start with '{EXTENSION_PREFIX}'")
        return value

    def _merge_extensions(self, data: dict[str, Any], info: SerializationInfo) -> dict[str, Any]:
        if not self.extensions:
            return data
        order = ExtensionOrder((info.context or {}).get("extension_order", ExtensionOrder.ORIGINAL))
        items = self.extensions.items()
        if order == ExtensionOrder.ALPHABETICAL:
            items = sorted(items)
        merged = dict(data)
        merged.update(items)
        return merged

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        return self._merge_extensions(handler(self), info)
