"""
Factory functions for creating test models.

These factories create document models with sensible defaults for testing.
All factories accept overrides for any field.
"""

from typing import Dict, List, Optional

from swaglint.models import (
    ItemsSchema,
    Operation,
    Parameter,
    Response,
    Schema,
    SwaggerDocument,
)


def make_parameter(
    location: str = "query",
    name: str = "limit",
    ref: str = "",
) -> Parameter:
    """
    Create a Parameter for testing.

    Args:
        location: Parameter location (body, query, path, header)
        name: Parameter name
        ref: Schema reference for body parameters

    Returns:
        Parameter instance
    """
    return Parameter(location=location, name=name, schema_=Schema(ref=ref))


def make_body_parameter(ref: str, name: str = "body") -> Parameter:
    """Create a body Parameter referencing a model."""
    return make_parameter(location="body", name=name, ref=ref)


def make_response(
    schema_type: str = "",
    ref: str = "",
    items_ref: Optional[str] = None,
) -> Response:
    """
    Create a Response for testing.

    Args:
        schema_type: Schema type, e.g. "array"
        ref: Schema reference
        items_ref: Items reference for array responses

    Returns:
        Response instance
    """
    items = ItemsSchema(ref=items_ref) if items_ref is not None else None
    return Response(schema_=Schema(type=schema_type, ref=ref, items=items))


def make_operation(
    operation_id: str = "getItems",
    tags: Optional[List[str]] = None,
    parameters: Optional[List[Parameter]] = None,
    responses: Optional[Dict[str, Response]] = None,
) -> Operation:
    """
    Create an Operation for testing.

    Defaults to a clean operation: a verb-prefixed id and one tag.

    Returns:
        Operation instance
    """
    return Operation(
        operation_id=operation_id,
        tags=["tag"] if tags is None else tags,
        parameters=parameters or [],
        responses=responses or {},
    )


def make_document(paths: Dict[str, Dict[str, Operation]]) -> SwaggerDocument:
    """Create a SwaggerDocument from resource -> verb -> operation."""
    return SwaggerDocument(swagger="2.0", paths=paths)
