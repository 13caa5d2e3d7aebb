"""Tag and External Documentation objects."""

from pydantic import Field

from openrpc_model.base import ExtensibleModel


class ExternalDocumentation(ExtensibleModel):
    """Reference to an external resource for extended documentation."""
    description: str | None = None
    url: str


class Tag(ExtensibleModel):
    """Metadata for a single tag used by Method objects."""
    name: str
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = Field(alias="externaldocs", default=None)
