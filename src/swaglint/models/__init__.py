"""
Document model for decoded Swagger 2.0 API contracts.
"""

from .base import BaseContractModel
from .document import (
    HTTP_METHODS,
    Code,
    ItemsSchema,
    Operation,
    Parameter,
    Resource,
    Response,
    Schema,
    SwaggerDocument,
    Verb,
)

__all__ = [
    "BaseContractModel",
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
