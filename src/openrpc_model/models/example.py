"""Example and Example Pairing objects."""

from typing import Any

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from openrpc_model.base import ExtensibleModel
from openrpc_model.models.reference import or_reference


class Example(ExtensibleModel):
    """An example intended to match a Content Descriptor Schema.

    ``value`` and ``externalValue`` are mutually exclusive. ``value`` may
    legitimately be JSON null, so use ``is_present("value")`` to tell it
    apart from an absent value.
    """
    name: str | None = None
    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = Field(alias="externalValue", default=None)

    @model_validator(mode="after")
    def _check_single_value(self) -> "Example":
        if self.is_present("value") and self.external_value is not None:
            raise PydanticCustomError(
                "invalid_shape",
                "'value' and 'externalValue' are mutually exclusive",
            )
        return self


ExampleOrReference = or_reference(Example)


class ExamplePairing(ExtensibleModel):
    """A set of example params and the result expected for them."""
    name: str | None = None
    description: str | None = None
    summary: str | None = None
    params: list[ExampleOrReference] = Field(default_factory=list)
    result: ExampleOrReference | None = None
