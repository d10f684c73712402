"""
Shared pytest fixtures for swaglint tests.

Provides sample documents on disk and a fresh rule context.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from swaglint.naming import ModelNameMatcher
from swaglint.rules import CheckContext


@pytest.fixture
def sample_swagger() -> Dict[str, Any]:
    """
    A decoded Swagger 2.0 document with one violation per resource.

    /items is clean, /items/{id} uses an array response and /users has
    an upper-case query argument.
    """
    return {
        "swagger": "2.0",
        "info": {"title": "Items API", "version": "1.0"},
        "paths": {
            "/items": {
                "get": {
                    "tags": ["items"],
                    "operationId": "getItems",
                    "parameters": [{"in": "query", "name": "limit", "type": "integer"}],
                    "responses": {
                        "200": {"description": "OK", "schema": {"$ref": "#/definitions/GetItemsResponse"}},
                        "default": {"description": "Error", "schema": {"$ref": "#/definitions/Error"}},
                    },
                },
                "post": {
                    "tags": ["items"],
                    "operationId": "postItems",
                    "parameters": [
                        {"in": "body", "name": "body", "schema": {"$ref": "#/definitions/PostItemsRequest"}}
                    ],
                    "responses": {"201": {"schema": {"$ref": "#/definitions/PostItemsResponse"}}},
                },
            },
            "/items/{id}": {
                "parameters": [{"in": "path", "name": "id", "required": True, "type": "string"}],
                "get": {
                    "tags": ["items"],
                    "operationId": "getItem",
                    "responses": {
                        "200": {"schema": {"type": "array", "items": {"$ref": "#/definitions/Item"}}}
                    },
                },
            },
            "/users": {
                "get": {
                    "tags": ["users"],
                    "operationId": "getUsers",
                    "parameters": [{"in": "query", "name": "createdAt"}],
                    "responses": {"200": {"schema": {"$ref": "#/definitions/GetUsersResponse"}}},
                },
            },
        },
        "definitions": {},
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write data as JSON into tmp_path and return the file path."""

    def _write(data: Any, filename: str = "swagger.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write data as YAML into tmp_path and return the file path."""

    def _write(data: Any, filename: str = "swagger.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def get_context() -> CheckContext:
    """Check context for a GET operation on /items."""
    return CheckContext(resource="/items", verb="get", matcher=ModelNameMatcher())


@pytest.fixture
def post_context() -> CheckContext:
    """Check context for a POST operation on /items."""
    return CheckContext(resource="/items", verb="post", matcher=ModelNameMatcher())
