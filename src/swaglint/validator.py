"""
Document-wide validation and violation reporting.

Walks every operation of a document, runs the registered checkers and
groups the resulting violations by resource.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from swaglint.config import LintConfig
from swaglint.models import Operation, SwaggerDocument
from swaglint.naming import ModelNameMatcher
from swaglint.rules import CheckContext, RulesRegistry, Violation, get_default_registry

logger = logging.getLogger(__name__)


@dataclass
class ViolationReport:
    """
    Violations grouped by resource.

    A resource is only present when at least one violation was found for
    one of its operations.
    """

    violations: Dict[str, List[Violation]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(len(v) for v in self.violations.values())

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    @property
    def resources(self) -> List[str]:
        return list(self.violations.keys())

    def messages(self, resource: str) -> List[str]:
        """Messages reported for a resource, empty if it is clean."""
        return [v.message for v in self.violations.get(resource, [])]

    def as_dict(self) -> Dict[str, List[str]]:
        """Plain resource -> messages mapping."""
        return {resource: self.messages(resource) for resource in self.violations}


class ContractValidator:
    """
    Validates API-contract documents against the registered rules.

    Usage:
        validator = ContractValidator(LintConfig(disabled_rules={"missing_tags"}))
        report = validator.validate(load_document("swagger.json"))

        for resource, messages in report.as_dict().items():
            print(resource, messages)
    """

    def __init__(
        self,
        config: Optional[LintConfig] = None,
        registry: Optional[RulesRegistry] = None,
    ) -> None:
        """
        Initialize the validator.

        Args:
            config: Lint options (defaults if not provided)
            registry: Optional rules registry (uses default if not provided)
        """
        self._config = config or LintConfig()
        self._registry = registry or get_default_registry()
        self._matcher = ModelNameMatcher(case_sensitive=self._config.case_sensitive_models)

    @property
    def config(self) -> LintConfig:
        return self._config

    def validate_operation(self, resource: str, verb: str, operation: Operation) -> List[Violation]:
        """
        Run every checker against one operation.

        Args:
            resource: Path template of the operation
            verb: HTTP method of the operation
            operation: The operation to check

        Returns:
            Violations in checker registration order
        """
        context = CheckContext(resource=resource, verb=verb, matcher=self._matcher)
        results: List[Violation] = []

        for rule in self._registry.definitions():
            for violation in rule.checker(operation, context):
                if violation.rule_name in self._config.disabled_rules:
                    logger.debug(f"Skipping disabled rule {violation.rule_name} for {verb} {resource}")
                    continue
                results.append(violation)

        return results

    def validate(self, document: SwaggerDocument) -> ViolationReport:
        """
        Validate every operation of a document.

        Resources and verbs are visited in lexicographic order. Each
        resource's list is assigned once, after all its verbs were checked.

        Args:
            document: Decoded document

        Returns:
            ViolationReport grouping violations by resource
        """
        report = ViolationReport()

        for resource in sorted(document.paths):
            verbs = document.paths[resource]
            violations: List[Violation] = []

            for verb in sorted(verbs):
                violations.extend(self.validate_operation(resource, verb, verbs[verb]))

            if self._config.deduplicate:
                violations = _deduplicate(violations)

            if violations:
                report.violations[resource] = violations
                logger.debug(f"{resource}: {len(violations)} violation(s)")

        logger.info(
            f"Validated {document.operation_count} operation(s) in {len(document.paths)} resource(s): "
            f"{report.total} violation(s)"
        )
        return report


def _deduplicate(violations: List[Violation]) -> List[Violation]:
    seen = set()
    unique = []
    for violation in violations:
        if violation.message in seen:
            continue
        seen.add(violation.message)
        unique.append(violation)
    return unique


def validate_document(
    document: SwaggerDocument,
    config: Optional[LintConfig] = None,
) -> ViolationReport:
    """Validate a document with a one-off ContractValidator."""
    return ContractValidator(config).validate(document)


__all__ = [
    "ContractValidator",
    "ViolationReport",
    "validate_document",
]
