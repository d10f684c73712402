"""
swaglint - Naming and structure conventions for Swagger 2.0 API contracts.

Checks every operation of a decoded API document against a fixed set of
house-style rules and reports the violations grouped by resource.

Rules:
- Every operation has an operationId starting with its verb
- Every operation defines at least one tag
- Body request models are named <OperationId>Request
- Query arguments are lowercase
- 2xx responses use a named <OperationId>Response model, never a bare array

Quick Start:
    from swaglint import load_document, validate_document

    document = load_document("swagger.json")
    report = validate_document(document)

    for resource, messages in report.as_dict().items():
        print(resource)
        for message in messages:
            print(f"\t{message}")
"""

__version__ = "0.1.0"

from swaglint.config import LintConfig, load_config
from swaglint.errors import ConfigurationError, DocumentLoadError, SwagLintError
from swaglint.loader import load_document, parse_document
from swaglint.models import (
    Operation,
    Parameter,
    Response,
    Schema,
    SwaggerDocument,
)
from swaglint.naming import ModelNameMatcher, matches_model_name, title_case
from swaglint.rules import (
    CheckContext,
    RuleDefinition,
    RulesRegistry,
    Violation,
    check_operation_identity,
    check_parameters,
    check_responses,
    create_default_registry,
    get_default_registry,
)
from swaglint.validator import ContractValidator, ViolationReport, validate_document

__all__ = [
    # Loading
    "load_document",
    "parse_document",
    "load_config",
    "LintConfig",
    # Document model
    "SwaggerDocument",
    "Operation",
    "Parameter",
    "Response",
    "Schema",
    # Naming
    "ModelNameMatcher",
    "matches_model_name",
    "title_case",
    # Rules
    "CheckContext",
    "RuleDefinition",
    "RulesRegistry",
    "Violation",
    "check_operation_identity",
    "check_parameters",
    "check_responses",
    "create_default_registry",
    "get_default_registry",
    # Validation
    "ContractValidator",
    "ViolationReport",
    "validate_document",
    # Errors
    "SwagLintError",
    "DocumentLoadError",
    "ConfigurationError",
]
