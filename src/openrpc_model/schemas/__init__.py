"""JSON Schema export of the OpenRPC document model.

Generates JSON schemas describing the wire shape of the model classes so
documents can be checked by any JSON Schema tooling.
"""

from .generator import SchemaGenerator

__all__ = [
    "SchemaGenerator",
]
