"""
Pydantic models for a decoded Swagger 2.0 document.

Only the parts of the document inspected by the lint rules are modelled:
paths, their operations, parameters and response schemas. Everything else
(info, definitions, security, vendor extensions) is accepted and ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import Field, field_validator

from .base import BaseContractModel

# Type aliases for the mapping keys of a document
Resource = str  # Path template, e.g. "/items/{id}"
Verb = str  # HTTP method token, e.g. "get"
Code = str  # Response status, e.g. "200"

HTTP_METHODS = frozenset({"get", "put", "post", "delete", "options", "head", "patch"})


class ItemsSchema(BaseContractModel):
    """Element schema of an array response."""

    ref: str = Field(default="", alias="$ref")


class Schema(BaseContractModel):
    """
    Schema object attached to a body parameter or a response.

    Attributes:
        type: JSON schema type, e.g. "array" or "object"
        ref: Model reference, e.g. "#/definitions/GetItemsResponse"
        items: Element schema when type is "array"
    """

    type: str = ""
    ref: str = Field(default="", alias="$ref")
    items: Optional[ItemsSchema] = None


class Parameter(BaseContractModel):
    """
    Operation parameter.

    Attributes:
        location: Where the parameter lives ("body", "query", "path", "header", ...)
        name: Parameter name
        schema_: Schema for body parameters
    """

    location: str = Field(default="", alias="in")
    name: str = ""
    schema_: Schema = Field(default_factory=Schema, alias="schema")

    @property
    def schema_ref(self) -> str:
        """Model reference of the parameter schema, empty if none."""
        return self.schema_.ref


class Response(BaseContractModel):
    """Response declared for a single status code."""

    schema_: Schema = Field(default_factory=Schema, alias="schema")

    @property
    def schema_type(self) -> str:
        return self.schema_.type

    @property
    def schema_ref(self) -> str:
        return self.schema_.ref

    @property
    def items_ref(self) -> str:
        return self.schema_.items.ref if self.schema_.items else ""


class Operation(BaseContractModel):
    """
    A single (resource, verb) operation.

    Attributes:
        operation_id: The operationId, empty when not declared
        tags: Tags in declaration order
        parameters: Parameters in declaration order
        responses: Responses keyed by status code
    """

    operation_id: str = Field(default="", alias="operationId")
    tags: List[str] = Field(default_factory=list)
    parameters: List[Parameter] = Field(default_factory=list)
    responses: Dict[Code, Response] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def normalize_codes(cls, v: Any) -> Any:
        """
        YAML decodes unquoted status codes as integers.

        Vendor extensions (`x-*`) in the responses object are not responses.
        """
        if isinstance(v, dict):
            return {
                str(code): {} if response is None else response
                for code, response in v.items()
                if not str(code).startswith("x-")
            }
        return v


class SwaggerDocument(BaseContractModel):
    """
    Root of a decoded API-contract document.

    Each (resource, verb) pair maps to exactly one Operation.
    """

    swagger: Optional[str] = None
    paths: Dict[Resource, Dict[Verb, Operation]] = Field(default_factory=dict)

    @field_validator("swagger", mode="before")
    @classmethod
    def stringify_version(cls, v: Any) -> Any:
        """YAML decodes an unquoted `swagger: 2.0` as a float."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("paths", mode="before")
    @classmethod
    def keep_operations_only(cls, v: Any) -> Any:
        """
        Drop path-item keys that are not HTTP methods.

        A path item may also carry shared `parameters`, a `$ref` or `x-*`
        extensions, none of which are operations.
        """
        if not isinstance(v, dict):
            return v

        paths: Dict[Any, Any] = {}
        for resource, path_item in v.items():
            if path_item is None:
                paths[resource] = {}
                continue
            if not isinstance(path_item, dict):
                paths[resource] = path_item  # Let pydantic report the shape error
                continue
            paths[resource] = {
                verb: {} if operation is None else operation
                for verb, operation in path_item.items()
                if isinstance(verb, str) and verb.lower() in HTTP_METHODS
            }
        return paths

    def operations(self) -> Iterator[Tuple[Resource, Verb, Operation]]:
        """Yield every operation, resources and verbs in lexicographic order."""
        for resource in sorted(self.paths):
            verbs = self.paths[resource]
            for verb in sorted(verbs):
                yield resource, verb, verbs[verb]

    @property
    def operation_count(self) -> int:
        return sum(len(verbs) for verbs in self.paths.values())


__all__ = [
    "Code",
    "HTTP_METHODS",
    "ItemsSchema",
    "Operation",
    "Parameter",
    "Resource",
    "Response",
    "Schema",
    "SwaggerDocument",
    "Verb",
]
