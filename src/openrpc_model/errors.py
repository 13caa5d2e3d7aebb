"""Decode and encode errors raised at the codec boundary."""

from typing import Any

from pydantic import ValidationError

from openrpc_model.base import is_path_marker


class OpenRpcModelError(Exception):
    """Base class for every error raised by openrpc_model."""


class DecodeError(OpenRpcModelError):
    """A document could not be decoded into the model.

    Attributes:
        path: Location of the problem in wire field names, e.g. ``methods[0].name``
        message: Human readable description
        issues: Every problem found; the error itself describes the first one
    """

    def __init__(self, path: str, message: str, issues: list["DecodeError"] | None = None):
        self.path = path
        self.message = message
        self.issues = issues if issues is not None else [self]
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path}: {self.message}"


class MalformedJSON(DecodeError):
    """The input is not syntactically valid JSON."""


class MalformedYAML(MalformedJSON):
    """The input is not syntactically valid YAML."""


class InvalidShape(DecodeError):
    """A value does not match any of the shapes allowed at its position."""


class UnknownField(DecodeError):
    """A field is neither recognised nor an ``x-`` extension (strict mode only)."""


class MissingRequired(DecodeError):
    """A REQUIRED field is absent."""


class EncodeError(OpenRpcModelError):
    """A model holds a value outside its declared shape.

    Only reachable when validation was bypassed (``model_construct``); this
    is a programming error, not a problem with user input.
    """


def format_path(loc: tuple[Any, ...]) -> str:
    """Render a pydantic error location as ``a.b[0].c``, skipping path markers."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif is_path_marker(part):
            continue
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def _classify(error: dict[str, Any]) -> DecodeError:
    kind = error["type"]
    loc = tuple(error["loc"])
    message = error["msg"]

    if kind == "unknown_field":
        return UnknownField(format_path(loc + (error["ctx"]["field"],)), message)
    if kind == "missing":
        return MissingRequired(format_path(loc), "required field is missing")
    return InvalidShape(format_path(loc), message)


def from_validation_error(exc: ValidationError) -> DecodeError:
    """Translate a pydantic ValidationError into the decode error taxonomy.

    Args:
        exc: Error raised while validating a document

    Returns:
        The first mapped error, carrying all mapped errors in ``issues``
    """
    issues = [_classify(error) for error in exc.errors()]
    first = issues[0]
    return type(first)(first.path, first.message, issues)
