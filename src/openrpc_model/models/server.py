"""Server and Server Variable objects."""

import re
from collections.abc import Mapping

from pydantic import Field

from openrpc_model.base import ExtensibleModel

# Strings that evaluate to a value once the desired values are known. They
# are opaque at this layer and used by Link params and Server Variables.
RuntimeExpressions = str

_VARIABLE_PATTERN = re.compile(r"\{([^{}]+)\}")


class ServerVariables(ExtensibleModel):
    """A Server Variable for server URL template substitution."""
    enum: list[str] = Field(default_factory=list)
    default: str
    description: str | None = None


class Server(ExtensibleModel):
    """Connectivity information for a target server."""
    name: str
    url: RuntimeExpressions
    summary: str | None = None
    description: str | None = None
    variables: dict[str, ServerVariables] = Field(default_factory=dict)

    def resolve_url(self, values: Mapping[str, str] | None = None) -> str:
        """Substitute ``{variable}`` tokens in the URL.

        Args:
            values: Values to use instead of the variables' defaults

        Returns:
            URL with every known variable substituted; unknown tokens are kept
        """
        values = values or {}

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name in values:
                return values[name]
            variable = self.variables.get(name)
            if variable is None:
                return match.group(0)
            return variable.default

        return _VARIABLE_PATTERN.sub(substitute, self.url)
