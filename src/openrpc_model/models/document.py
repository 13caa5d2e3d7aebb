"""Root OpenRPC document and its metadata objects."""

from pydantic import Field

from openrpc_model.base import ExtensibleModel
from openrpc_model.models.error import Error
from openrpc_model.models.example import Example, ExamplePairing
from openrpc_model.models.link import Link
from openrpc_model.models.method import ContentDescriptor, JSONSchema, Method
from openrpc_model.models.server import Server
from openrpc_model.models.tag import ExternalDocumentation, Tag

# Server assumed when a document declares none.
DEFAULT_SERVER_URL = "localhost"


class Contact(ExtensibleModel):
    """Contact information for the exposed API."""
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(ExtensibleModel):
    """License information for the exposed API."""
    name: str
    url: str | None = None


class Info(ExtensibleModel):
    """Metadata about the API."""
    title: str
    description: str | None = None
    terms_of_service: str | None = Field(alias="termsOfService", default=None)
    contact: Contact | None = None
    license: License | None = None
    version: str


class Components(ExtensibleModel):
    """Reusable objects for different aspects of the document.

    Nothing defined here affects the API unless referenced from outside
    ``components``; references are never resolved by this model.
    """
    content_descriptors: dict[str, ContentDescriptor] = Field(alias="contentDescriptors", default_factory=dict)
    schemas: dict[str, JSONSchema] = Field(default_factory=dict)
    examples: dict[str, Example] = Field(default_factory=dict)
    links: dict[str, Link] = Field(default_factory=dict)
    errors: dict[str, Error] = Field(default_factory=dict)
    example_pairing_objects: dict[str, ExamplePairing] = Field(alias="examplePairingObjects", default_factory=dict)
    tags: dict[str, Tag] = Field(default_factory=dict)


class Document(ExtensibleModel):
    """Root object of an OpenRPC document."""
    openrpc: str
    info: Info
    servers: list[Server] = Field(default_factory=list)
    methods: list[Method]
    components: Components | None = None
    external_docs: ExternalDocumentation | None = Field(alias="externaldocs", default=None)

    def get_method(self, name: str) -> Method | None:
        """Find a method by its name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def effective_servers(self) -> list[Server]:
        """Declared servers, or a single ``localhost`` server when none are declared."""
        if self.servers:
            return list(self.servers)
        return [Server(name=DEFAULT_SERVER_URL, url=DEFAULT_SERVER_URL)]

    def servers_for(self, method: Method) -> list[Server]:
        """Servers that serve a method; a method-level list overrides the root one."""
        if method.servers:
            return list(method.servers)
        return self.effective_servers()
