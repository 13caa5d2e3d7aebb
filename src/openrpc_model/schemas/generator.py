"""JSON Schema export of the wire shape of the OpenRPC model."""

import json
import logging
from pathlib import Path
from typing import Any, NamedTuple

import jsonschema

from ..base import WireModel
from ..json_schema import Schema
from ..models import Document, Method

logger = logging.getLogger(__name__)

META_SCHEMA = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_BASE_URI = "https://openrpc-model.dev/schemas"


class ExportedModel(NamedTuple):
    """A model class published as a standalone JSON Schema."""
    model: type[WireModel]
    title: str
    description: str


EXPORTED_MODELS: dict[str, ExportedModel] = {
    "document": ExportedModel(Document, "openrpc-document", "OpenRPC document"),
    "method": ExportedModel(Method, "openrpc-method", "OpenRPC Method object"),
    "json_schema": ExportedModel(Schema, "json-schema-draft4-node", "JSON-Schema Draft 4 node embedded in content descriptors"),
}


def schema_id(name: str) -> str:
    """``$id`` URI under which the schema for ``name`` is published."""
    return f"{SCHEMA_BASE_URI}/{name.replace('_', '-')}.schema.json"


class SchemaGenerator:
    """Builds, checks and writes JSON schemas for the exported model types."""

    def __init__(self):
        self.schemas: dict[str, dict[str, Any]] = {}

    def generate_all_schemas(self) -> dict[str, dict[str, Any]]:
        """Generate a schema for every entry of ``EXPORTED_MODELS``.

        Returns:
            Dictionary mapping export names to JSON schemas
        """
        self.schemas = {name: self._export(name, entry) for name, entry in EXPORTED_MODELS.items()}
        logger.info(f"Generated {len(self.schemas)} JSON schemas")
        return self.schemas

    def get_schema(self, name: str) -> dict[str, Any] | None:
        """Generated schema for an export name, or None if it was not generated."""
        return self.schemas.get(name)

    def save_schemas(self, output_dir: Path) -> dict[str, Path]:
        """Write each generated schema to ``<name>.schema.json`` in ``output_dir``."""
        output_dir.mkdir(parents=True, exist_ok=True)
        written = {}

        for name, schema in self.schemas.items():
            path = output_dir / f"{name}.schema.json"
            path.write_text(json.dumps(schema, indent=2, ensure_ascii=False), encoding="utf-8")
            written[name] = path
            logger.debug(f"Wrote {path}")

        return written

    def validate_schema_compliance(self) -> list[str]:
        """Check the generated schemas against the 2020-12 meta-schema.

        Returns:
            One message per invalid schema; empty when all are valid
        """
        problems = []
        for name, schema in self.schemas.items():
            try:
                jsonschema.Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                problems.append(f"Schema {name} is invalid: {e.message}")
                logger.error(problems[-1])
        return problems

    def _export(self, name: str, entry: ExportedModel) -> dict[str, Any]:
        header = {
            "$schema": META_SCHEMA,
            "$id": schema_id(name),
            "title": entry.title,
            "description": f"JSON Schema for the {entry.description} wire shape",
        }
        try:
            body = entry.model.model_json_schema(by_alias=True, mode="validation")
        except Exception as e:
            # Keep exporting the rest; the permissive schema marks what failed.
            logger.error(f"Failed to generate schema for {entry.model.__name__}: {e}")
            return {**header, "type": "object", "additionalProperties": True}

        body.pop("title", None)
        body.pop("description", None)
        return {**header, **body}
