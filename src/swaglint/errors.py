"""
Exceptions raised before rule evaluation starts.

Rule violations are never raised; they are collected into a
ViolationReport. These errors cover the fatal tier only: a document or
configuration file that cannot be read or decoded.
"""


class SwagLintError(Exception):
    """Base exception for swaglint."""


class DocumentLoadError(SwagLintError):
    """Raised when an API document cannot be read, decoded or validated."""


class ConfigurationError(SwagLintError):
    """Raised when a lint configuration file is missing or invalid."""


__all__ = [
    "SwagLintError",
    "DocumentLoadError",
    "ConfigurationError",
]
