"""Shared fixtures for openrpc_model tests."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the sample OpenRPC documents."""
    return FIXTURES_DIR


@pytest.fixture
def petstore_path():
    """Path to the sample petstore document (JSON)."""
    return FIXTURES_DIR / "petstore.openrpc.json"


@pytest.fixture
def petstore_data(petstore_path):
    """Parsed petstore document as plain JSON data."""
    with open(petstore_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def minimal_document():
    """Smallest document accepted in strict mode."""
    return {
        "openrpc": "1.2.6",
        "info": {"title": "Minimal", "version": "0.0.1"},
        "methods": [],
    }


@pytest.fixture
def method_data():
    """A method with one param and a result."""
    return {
        "name": "add",
        "params": [
            {"name": "a", "required": True, "schema": {"type": "integer"}},
            {"name": "b", "schema": {"type": "integer"}},
        ],
        "result": {"name": "sum", "schema": {"type": "integer"}},
    }
