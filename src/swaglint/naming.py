"""
Model-name matching for request and response schema references.

Request and response models are expected to be named after the operation
that uses them: an operation `getItems` should reference
`#/definitions/GetItemsResponse`, and `postItems` should send
`#/definitions/PostItemsRequest`.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

DEFINITIONS_PREFIX = "#/definitions/"
REQUEST_SUFFIX = "Request"
RESPONSE_SUFFIX = "Response"


def _is_word_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    return ch.isspace()


def title_case(value: str) -> str:
    """
    Upper-case the first letter of every word in value.

    Letters already in upper case are left alone, so `getItems` becomes
    `GetItems` and `get-items` becomes `Get-Items`.
    """
    chars = []
    at_word_start = True
    for ch in value:
        chars.append(ch.upper() if at_word_start else ch)
        at_word_start = _is_word_separator(ch)
    return "".join(chars)


class ModelNameMatcher:
    """
    Matches schema references against the operation naming convention.

    The pattern `^#/definitions/<TitleCasedOperationId><Suffix>` is anchored
    at the start only, so `#/definitions/GetItemsResponseV2` still matches.

    Example:
        matcher = ModelNameMatcher()
        matcher.matches("#/definitions/GetItemsResponse", "getItems", RESPONSE_SUFFIX)
        # Returns: True
    """

    def __init__(self, case_sensitive: bool = False) -> None:
        """
        Initialize the matcher.

        Args:
            case_sensitive: Compare the model name exactly instead of ignoring case
        """
        self.case_sensitive = case_sensitive
        self._patterns: Dict[Tuple[str, str], re.Pattern[str]] = {}

    def pattern_for(self, operation_id: str, suffix: str) -> re.Pattern[str]:
        """
        Get the compiled pattern for an operation id and suffix.

        Patterns are memoised, since every parameter and response of an
        operation is checked against the same prefix.
        """
        key = (operation_id, suffix)
        pattern = self._patterns.get(key)
        if pattern is None:
            flags = 0 if self.case_sensitive else re.IGNORECASE
            expected = re.escape(f"{DEFINITIONS_PREFIX}{title_case(operation_id)}{suffix}")
            pattern = re.compile(f"^{expected}", flags)
            self._patterns[key] = pattern
        return pattern

    def expected_prefix(self, operation_id: str, suffix: str) -> str:
        """Model reference prefix the convention expects."""
        return f"{DEFINITIONS_PREFIX}{title_case(operation_id)}{suffix}"

    def matches(self, ref: str, operation_id: str, suffix: str) -> bool:
        """
        Check whether ref follows the naming convention.

        Args:
            ref: Schema reference, e.g. "#/definitions/PostItemsRequest"
            operation_id: Operation id the model should be named after
            suffix: REQUEST_SUFFIX or RESPONSE_SUFFIX

        Returns:
            True if ref starts with the expected model name
        """
        return self.pattern_for(operation_id, suffix).match(ref) is not None


def matches_model_name(ref: str, operation_id: str, suffix: str, case_sensitive: bool = False) -> bool:
    """Shortcut for a one-off ModelNameMatcher check."""
    return ModelNameMatcher(case_sensitive=case_sensitive).matches(ref, operation_id, suffix)


__all__ = [
    "DEFINITIONS_PREFIX",
    "REQUEST_SUFFIX",
    "RESPONSE_SUFFIX",
    "ModelNameMatcher",
    "matches_model_name",
    "title_case",
]
