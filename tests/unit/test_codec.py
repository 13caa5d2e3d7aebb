"""Unit tests for the decode/encode boundary."""

import json

import pytest

from openrpc_model import (
    CodecConfig,
    DecodeMode,
    Document,
    InvalidShape,
    MalformedJSON,
    MalformedYAML,
    UnknownField,
    decode,
    decode_yaml,
    dump,
    dumps,
    encode,
    load,
)
from openrpc_model.config import DecodeConfig, EncodeConfig
from openrpc_model.json_schema import Schema
from openrpc_model.models import ContentDescriptor, Error, ErrorCode, Method, ParamStructure, Reference, Tag


class TestPetstoreDocument:
    """Test decoding of the sample petstore document."""

    def test_round_trip(self, petstore_data):
        """Test that encoding the decoded document reproduces it."""
        assert encode(decode(petstore_data)) == petstore_data

    def test_round_trip_from_text(self, petstore_path, petstore_data):
        """Test decoding straight from JSON text."""
        document = decode(petstore_path.read_text(encoding="utf-8"))
        assert encode(document) == petstore_data

    def test_decode_encode_is_identity(self, petstore_data):
        """Test that decoding the encoded document gives an equal model."""
        document = decode(petstore_data)
        assert decode(encode(document)) == document

    def test_structure(self, petstore_data):
        """Test a sample of decoded fields."""
        document = decode(petstore_data)

        assert document.openrpc == "1.2.6"
        assert document.info.license.name == "MIT"
        assert document.info.extensions == {"x-audience": "public"}
        assert document.extensions == {"x-rate-limit": 100}
        assert document.external_docs.url == "https://example.com/docs"
        assert document.servers[0].resolve_url() == "https://eu.petstore.example.com/rpc"

        list_pets = document.get_method("list_pets")
        assert list_pets.extensions == {"x-internal-id": "42"}
        assert isinstance(list_pets.tags[0], Tag)
        assert isinstance(list_pets.tags[1], Reference)
        assert list_pets.errors[0].code == ErrorCode(-32602)
        assert list_pets.errors[0].data == {"field": "limit"}
        assert list_pets.links[0].params == {"petId": "$result[0].id"}
        assert list_pets.examples[0].result.value[0]["tag"] is None

        get_pet = document.get_method("get_pet")
        assert get_pet.param_structure == ParamStructure.BY_NAME
        assert get_pet.deprecated is False
        assert document.servers_for(get_pet)[0].name == "staging"

        pet = document.components.schemas["Pet"].json_schema
        assert pet.additional_properties is False
        assert pet.dependencies["tag"] == ["name"]
        assert isinstance(pet.properties["labels"].items, list)
        assert pet.properties["tag"].is_present("default")
        assert document.components.extensions == {"x-generated-by": "hand"}
        assert isinstance(document.components.content_descriptors["PetId"], ContentDescriptor)


class TestDecodeModes:
    """Test strict and lenient decoding."""

    def test_strict_rejects_unknown_field(self, minimal_document):
        """Test that strict mode fails on an unknown field."""
        minimal_document["bogusField"] = 1
        with pytest.raises(UnknownField) as exc_info:
            decode(minimal_document, mode="strict")
        assert exc_info.value.path == "bogusField"

    def test_strict_is_default(self, minimal_document):
        """Test that decoding is strict without a config."""
        minimal_document["bogusField"] = 1
        with pytest.raises(UnknownField):
            decode(minimal_document)

    def test_lenient_drops_unknown_field(self, minimal_document):
        """Test that lenient mode drops the unknown field."""
        document = decode({**minimal_document, "bogusField": 1}, mode=DecodeMode.LENIENT)
        assert encode(document) == minimal_document

    def test_mode_from_config(self, minimal_document):
        """Test that the config selects the mode."""
        config = CodecConfig(decode=DecodeConfig(mode=DecodeMode.LENIENT))
        document = decode({**minimal_document, "bogusField": 1}, config=config)
        assert isinstance(document, Document)

    def test_explicit_mode_overrides_config(self, minimal_document):
        """Test that an explicit mode wins over the config."""
        config = CodecConfig(decode=DecodeConfig(mode=DecodeMode.LENIENT))
        with pytest.raises(UnknownField):
            decode({**minimal_document, "bogusField": 1}, mode="strict", config=config)

    def test_nested_unknown_field_path(self, minimal_document):
        """Test that nested unknown fields report their path."""
        minimal_document["methods"] = [{"name": "m", "params": [{"name": "a", "schema": {}, "optional": True}]}]
        with pytest.raises(UnknownField) as exc_info:
            decode(minimal_document)
        assert exc_info.value.path == "methods[0].params[0].optional"

    def test_python_field_names_are_not_wire_names(self, minimal_document):
        """Test that snake_case attribute names are unknown on the wire."""
        minimal_document["external_docs"] = {"url": "https://example.com"}
        with pytest.raises(UnknownField):
            decode(minimal_document)

    def test_extensions_key_is_not_a_wire_field(self, minimal_document):
        """Test that the extension bag cannot be fed from the wire directly."""
        minimal_document["extensions"] = {"x-a": 1}
        with pytest.raises(UnknownField):
            decode(minimal_document)


class TestMalformedInput:
    """Test syntactically invalid input."""

    def test_invalid_json(self):
        """Test that invalid JSON is reported without a partial result."""
        with pytest.raises(MalformedJSON, match="Invalid JSON"):
            decode('{"openrpc": "1.2.6", ')

    def test_invalid_json_bytes(self):
        """Test invalid JSON given as bytes."""
        with pytest.raises(MalformedJSON):
            decode(b"{not json")

    def test_invalid_yaml(self):
        """Test that invalid YAML is reported as malformed."""
        with pytest.raises(MalformedYAML):
            decode_yaml("openrpc: [1.2.6\ninfo: {")

    def test_yaml_error_is_malformed_json(self):
        """Test that YAML errors can be caught as MalformedJSON."""
        assert issubclass(MalformedYAML, MalformedJSON)

    def test_non_object_document(self):
        """Test that a JSON array is not a document."""
        with pytest.raises(InvalidShape):
            decode("[]")


class TestFiles:
    """Test loading and writing documents."""

    def test_load_json(self, petstore_path, petstore_data):
        """Test loading a JSON document from disk."""
        assert encode(load(petstore_path)) == petstore_data

    def test_load_yaml(self, fixtures_dir):
        """Test loading a YAML document from disk."""
        document = load(fixtures_dir / "petstore.openrpc.yaml")
        method = document.get_method("list_pets")
        assert method.param_structure == ParamStructure.EITHER
        assert method.extensions == {"x-internal-id": "42"}
        assert method.result.schema_.json_schema.items.ref == "#/components/schemas/Pet"

    def test_load_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "missing.json")

    def test_dump_and_load_json(self, tmp_path, petstore_data):
        """Test writing JSON and reading it back."""
        document = decode(petstore_data)
        path = dump(document, tmp_path / "out.json")
        assert json.loads(path.read_text(encoding="utf-8")) == petstore_data
        assert load(path) == document

    def test_dump_and_load_yaml(self, tmp_path, petstore_data):
        """Test writing YAML and reading it back."""
        document = decode(petstore_data)
        path = dump(document, tmp_path / "out.yaml")
        assert load(path) == document


class TestValueTypes:
    """Test that wire values are checked without coercion."""

    @pytest.mark.parametrize("model,data,path", [
        (Schema, {"uniqueItems": "yes"}, "uniqueItems"),
        (Schema, {"maximum": "10"}, "maximum"),
        (Schema, {"minLength": True}, "minLength"),
        (Schema, {"required": "name"}, "required"),
        (Error, {"code": True, "message": "m"}, "code"),
        (Error, {"code": 1.5, "message": "m"}, "code"),
        (ContentDescriptor, {"name": "a", "schema": {}, "required": "on"}, "required"),
        (Method, {"name": 3}, "name"),
        (Method, {"name": "m", "paramStructure": True}, "paramStructure"),
        (Method, {"name": "m", "paramStructure": 7}, "paramStructure"),
    ])
    def test_wrong_type_is_invalid_shape(self, model, data, path):
        """Test that a value of the wrong JSON type is rejected, not converted."""
        with pytest.raises(InvalidShape) as exc_info:
            decode(data, model)
        assert exc_info.value.path == path

    def test_wrong_type_in_lenient_mode(self):
        """Test that lenient mode only relaxes unknown fields."""
        with pytest.raises(InvalidShape):
            decode({"uniqueItems": "yes"}, Schema, mode="lenient")

    def test_integer_bounds_are_numbers(self):
        """Test that integer values are accepted for number keywords."""
        schema = decode({"maximum": 10, "multipleOf": 2}, Schema)
        assert schema.maximum == 10
        assert encode(schema) == {"maximum": 10, "multipleOf": 2}


class TestEncoding:
    """Test encoding options."""

    def test_alphabetical_extension_order(self):
        """Test alphabetical extension ordering."""
        method = decode({"name": "m", "x-b": 1, "x-a": 2}, Method)
        config = CodecConfig(encode=EncodeConfig(extension_order="alphabetical"))
        assert list(encode(method, config=config)) == ["name", "x-a", "x-b"]

    def test_original_extension_order(self):
        """Test that the source order is the default."""
        method = decode({"name": "m", "x-b": 1, "x-a": 2}, Method)
        assert list(encode(method)) == ["name", "x-b", "x-a"]

    def test_dumps_json_indent(self, minimal_document):
        """Test JSON text output with configured indentation."""
        config = CodecConfig(encode=EncodeConfig(indent=4))
        text = dumps(decode(minimal_document), config=config)
        assert text.startswith('{\n    "openrpc"')
        assert json.loads(text) == minimal_document

    def test_dumps_yaml(self, minimal_document):
        """Test YAML text output keeps field order."""
        text = dumps(decode(minimal_document), fmt="yaml")
        assert text.splitlines()[0].startswith("openrpc:")
        assert text.splitlines()[1] == "info:"

    def test_dumps_unknown_format(self, minimal_document):
        """Test an unsupported output format."""
        with pytest.raises(ValueError, match="Unsupported format"):
            dumps(decode(minimal_document), fmt="toml")
