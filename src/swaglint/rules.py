"""
Rules registry and built-in API-contract checks.

This module provides:
- Violation: A single rule failure message
- CheckContext: Per-operation inputs passed to every checker
- RuleDefinition: Dataclass describing a checker and the rules it reports
- RulesRegistry: Ordered registry of checkers
- Built-in checkers for operation identity, parameters and responses
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from swaglint.models import Operation
from swaglint.naming import REQUEST_SUFFIX, RESPONSE_SUFFIX, ModelNameMatcher

logger = logging.getLogger(__name__)

# Rule names, usable in LintConfig.disabled_rules
MISSING_OPERATION_ID = "missing_operation_id"
OPERATION_ID_PREFIX = "operation_id_prefix"
MISSING_TAGS = "missing_tags"
BODY_REQUEST_MODEL = "body_request_model"
QUERY_PARAMETER_CASE = "query_parameter_case"
ARRAY_RESPONSE = "array_response"
RESPONSE_MODEL = "response_model"

ALL_RULE_NAMES = frozenset(
    {
        MISSING_OPERATION_ID,
        OPERATION_ID_PREFIX,
        MISSING_TAGS,
        BODY_REQUEST_MODEL,
        QUERY_PARAMETER_CASE,
        ARRAY_RESPONSE,
        RESPONSE_MODEL,
    }
)


@dataclass(frozen=True)
class Violation:
    """A single rule failure found in one operation."""

    message: str
    rule_name: str = ""
    operation_id: str = ""
    verb: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass
class CheckContext:
    """
    Inputs a checker needs besides the operation itself.

    Attributes:
        resource: Path template the operation belongs to
        verb: HTTP method of the operation
        matcher: Model-name matcher shared across one validation run
    """

    resource: str = ""
    verb: str = ""
    matcher: ModelNameMatcher = field(default_factory=ModelNameMatcher)


Checker = Callable[[Operation, CheckContext], List[Violation]]


def _violation(rule_name: str, operation: Operation, context: CheckContext, text: str) -> Violation:
    """Build a violation, prefixed with the operation id when there is one."""
    operation_id = operation.operation_id
    message = f"'{operation_id}': {text}" if operation_id else text
    return Violation(message=message, rule_name=rule_name, operation_id=operation_id, verb=context.verb)


# =============================================================================
# BUILT-IN CHECKERS
# =============================================================================


def check_operation_identity(operation: Operation, context: CheckContext) -> List[Violation]:
    """
    Check the operation id and tags of one operation.

    The operation id must exist and start with the verb, ignoring case.
    An id shorter than the verb can never start with it and is reported
    like any other mismatch. Every operation must carry at least one tag.
    """
    results: List[Violation] = []
    operation_id = operation.operation_id

    if not operation_id:
        results.append(_violation(MISSING_OPERATION_ID, operation, context, "Missing operation id."))
    elif not operation_id.lower().startswith(context.verb):
        results.append(
            _violation(
                OPERATION_ID_PREFIX,
                operation,
                context,
                f"Resource must begin with '{context.verb}'.",
            )
        )

    if not operation.tags:
        # Reported without the operation id prefix
        results.append(
            Violation(
                message="Resource must define at least one tag.",
                rule_name=MISSING_TAGS,
                operation_id=operation_id,
                verb=context.verb,
            )
        )

    return results


def check_parameters(operation: Operation, context: CheckContext) -> List[Violation]:
    """
    Check body model names and query parameter casing.

    Parameters are visited in declaration order; each one is checked
    independently of the others.
    """
    results: List[Violation] = []

    for parameter in operation.parameters:
        if parameter.location == "body" and parameter.schema_ref:
            if not context.matcher.matches(parameter.schema_ref, operation.operation_id, REQUEST_SUFFIX):
                results.append(
                    _violation(
                        BODY_REQUEST_MODEL,
                        operation,
                        context,
                        f"Body request model must be prefixed with method+Request: '{parameter.schema_ref}'.",
                    )
                )

        if parameter.location == "query" and parameter.name.lower() != parameter.name:
            results.append(
                _violation(
                    QUERY_PARAMETER_CASE,
                    operation,
                    context,
                    f"Query arguments must be lowercase: '{parameter.name}'",
                )
            )

    return results


def check_responses(operation: Operation, context: CheckContext) -> List[Violation]:
    """
    Check the schema of every 2xx response.

    Array responses are always reported, whatever their items reference;
    the model-name check only runs for non-array responses. Other status
    families are not inspected.
    """
    results: List[Violation] = []

    for code in sorted(operation.responses):
        if not code.startswith("2"):
            continue

        response = operation.responses[code]
        if response.schema_type == "array":
            results.append(
                _violation(
                    ARRAY_RESPONSE,
                    operation,
                    context,
                    "Instead of using Array as a response, prefer defining a new model.",
                )
            )
        elif response.schema_ref:
            if not context.matcher.matches(response.schema_ref, operation.operation_id, RESPONSE_SUFFIX):
                results.append(
                    _violation(
                        RESPONSE_MODEL,
                        operation,
                        context,
                        f"Code {code}, response model must be prefixed with method+Response: "
                        f"'{response.schema_ref}'.",
                    )
                )

    return results


# =============================================================================
# REGISTRY
# =============================================================================


@dataclass
class RuleDefinition:
    """
    Definition of a checker.

    Attributes:
        name: Unique checker identifier
        description: Human-readable description
        checker: Function taking (operation, context) and returning violations
        rule_names: Names of the rules the checker can report
    """

    name: str
    description: str
    checker: Checker
    rule_names: Tuple[str, ...] = ()


class RulesRegistry:
    """
    Ordered registry of checkers.

    Checkers run in registration order, so the order in which violations of
    one operation are reported follows the order checkers were registered.

    Usage:
        registry = RulesRegistry()
        registry.register(RuleDefinition(
            name="my_checker",
            description="Custom checker",
            checker=my_checker,
        ))

        for rule in registry.definitions():
            violations = rule.checker(operation, context)
    """

    def __init__(self) -> None:
        self._rules: Dict[str, RuleDefinition] = {}

    def register(self, rule: RuleDefinition) -> None:
        """
        Register a checker definition.

        Args:
            rule: RuleDefinition to register

        Raises:
            ValueError: If the checker name is already registered
        """
        if rule.name in self._rules:
            raise ValueError(f"Rule '{rule.name}' is already registered")
        self._rules[rule.name] = rule
        logger.debug(f"Registered rule: {rule.name}")

    def get(self, name: str) -> RuleDefinition:
        """
        Get a checker definition by name.

        Raises:
            KeyError: If the checker is not registered
        """
        if name not in self._rules:
            available = ", ".join(sorted(self._rules.keys()))
            raise KeyError(f"Rule '{name}' not found. Available rules: {available}")
        return self._rules[name]

    def definitions(self) -> List[RuleDefinition]:
        """All checker definitions in registration order."""
        return list(self._rules.values())

    def list_rules(self) -> List[str]:
        """Sorted list of registered checker names."""
        return sorted(self._rules.keys())


def create_default_registry() -> RulesRegistry:
    """
    Create a registry with the built-in checkers.

    Order: operation identity, parameters, responses.
    """
    registry = RulesRegistry()

    registry.register(
        RuleDefinition(
            name="operation_identity",
            description="Operations must have an id starting with the verb and at least one tag",
            checker=check_operation_identity,
            rule_names=(MISSING_OPERATION_ID, OPERATION_ID_PREFIX, MISSING_TAGS),
        )
    )

    registry.register(
        RuleDefinition(
            name="parameters",
            description="Body models are named method+Request and query arguments are lowercase",
            checker=check_parameters,
            rule_names=(BODY_REQUEST_MODEL, QUERY_PARAMETER_CASE),
        )
    )

    registry.register(
        RuleDefinition(
            name="responses",
            description="2xx responses use a method+Response model instead of an array",
            checker=check_responses,
            rule_names=(ARRAY_RESPONSE, RESPONSE_MODEL),
        )
    )

    return registry


# Global default registry instance
_default_registry: Optional[RulesRegistry] = None


def get_default_registry() -> RulesRegistry:
    """
    Get the default rules registry (singleton).

    Returns:
        The default RulesRegistry with built-in checkers
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


__all__ = [
    "ALL_RULE_NAMES",
    "ARRAY_RESPONSE",
    "BODY_REQUEST_MODEL",
    "MISSING_OPERATION_ID",
    "MISSING_TAGS",
    "OPERATION_ID_PREFIX",
    "QUERY_PARAMETER_CASE",
    "RESPONSE_MODEL",
    "CheckContext",
    "Checker",
    "RuleDefinition",
    "RulesRegistry",
    "Violation",
    "check_operation_identity",
    "check_parameters",
    "check_responses",
    "create_default_registry",
    "get_default_registry",
]
