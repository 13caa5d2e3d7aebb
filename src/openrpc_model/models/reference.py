"""Reference Object and helpers for positions that accept one."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from openrpc_model.base import WireModel, tagged_union


class Reference(WireModel):
    """Pointer to a reusable object defined elsewhere, usually under ``components``.

    The model never resolves references; callers detect them with
    ``is_reference`` and resolve them on their own terms.
    """
    ref: str = Field(alias="$ref")


def is_reference(value: Any) -> bool:
    """Check whether a raw mapping or model node is a Reference Object."""
    if isinstance(value, Reference):
        return True
    return isinstance(value, Mapping) and "$ref" in value


def or_reference(model: type[WireModel]) -> Any:
    """Field type holding either ``model`` or a ``Reference`` in its place."""
    name = model.__name__

    def pick(value: Any) -> str | None:
        if is_reference(value):
            return "Reference"
        if isinstance(value, (Mapping, model)):
            return name
        return None

    return tagged_union(
        {name: model, "Reference": Reference},
        pick,
        f"expected a {name} object or a reference",
    )
