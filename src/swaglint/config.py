"""
Lint configuration schema and loader.

Example YAML configuration:
    # Skip the casing rule for legacy query arguments
    disabled_rules:
      - query_parameter_case

    # Require exact model name casing
    case_sensitive_models: true

    # Report a repeated message only once per resource
    deduplicate: false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Set

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from swaglint.errors import ConfigurationError
from swaglint.rules import ALL_RULE_NAMES

logger = logging.getLogger(__name__)


class LintConfig(BaseModel):
    """
    Options controlling a validation run.

    Attributes:
        disabled_rules: Rule names whose violations are not reported
        case_sensitive_models: Compare request/response model names exactly
        deduplicate: Collapse identical messages within one resource
    """

    disabled_rules: Set[str] = Field(
        default_factory=set,
        description="Rule names whose violations are not reported",
    )
    case_sensitive_models: bool = Field(
        default=False,
        description="Compare request/response model names exactly instead of ignoring case",
    )
    deduplicate: bool = Field(
        default=False,
        description="Report each identical message once per resource",
    )

    @field_validator("disabled_rules")
    @classmethod
    def validate_disabled_rules(cls, v: Set[str]) -> Set[str]:
        """Validate that disabled_rules only names known rules."""
        unknown = v - ALL_RULE_NAMES
        if unknown:
            raise ValueError(
                f"Unknown rule(s): {sorted(unknown)}. "
                f"Valid rules: {sorted(ALL_RULE_NAMES)}"
            )
        return v


def load_config(path: str | Path) -> LintConfig:
    """
    Load a lint configuration from a YAML file.

    An empty file yields the default configuration.

    Args:
        path: Path to YAML file

    Returns:
        LintConfig instance

    Raises:
        ConfigurationError: If the file is missing, not valid YAML or
            does not match the configuration schema
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")

    try:
        config = LintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    logger.info(f"Loaded configuration from {path}")
    return config


__all__ = [
    "LintConfig",
    "load_config",
]
