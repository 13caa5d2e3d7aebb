"""Link object: a design-time relationship between a result and another method."""

from pydantic import Field

from openrpc_model.base import ExtensibleModel
from openrpc_model.models.server import RuntimeExpressions, Server


class Link(ExtensibleModel):
    """A possible design-time link for a result.

    ``params`` maps a parameter name of the target ``method`` to a constant
    or runtime expression evaluated and passed to that method.
    """
    name: str
    description: str | None = None
    summary: str | None = None
    method: str | None = None
    params: dict[str, RuntimeExpressions] = Field(default_factory=dict)
    server: Server | None = None
