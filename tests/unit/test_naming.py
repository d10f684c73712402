"""
Unit tests for model-name matching.

Tests title-casing of operation ids and the anchored reference pattern.
"""

import pytest

from swaglint.naming import (
    REQUEST_SUFFIX,
    RESPONSE_SUFFIX,
    ModelNameMatcher,
    matches_model_name,
    title_case,
)


class TestTitleCase:
    """Tests for title_case()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("getItems", "GetItems"),
            ("GetItems", "GetItems"),
            ("get-items", "Get-Items"),
            ("get items", "Get Items"),
            ("get_items", "Get_items"),
            ("get2items", "Get2items"),
            ("", ""),
        ],
    )
    def test_title_case(self, value: str, expected: str) -> None:
        """First letter of every word is upper-cased, the rest is kept."""
        assert title_case(value) == expected


class TestModelNameMatcher:
    """Tests for ModelNameMatcher.matches()."""

    def test_matches_convention(self) -> None:
        """A ref named after the operation matches."""
        matcher = ModelNameMatcher()
        assert matcher.matches("#/definitions/PostItemsRequest", "postItems", REQUEST_SUFFIX)

    def test_missing_suffix_does_not_match(self) -> None:
        """A ref without the suffix does not match."""
        matcher = ModelNameMatcher()
        assert not matcher.matches("#/definitions/postItems", "postItems", REQUEST_SUFFIX)

    def test_wrong_suffix_does_not_match(self) -> None:
        """A Response model is not accepted where a Request is expected."""
        matcher = ModelNameMatcher()
        assert not matcher.matches("#/definitions/PostItemsResponse", "postItems", REQUEST_SUFFIX)

    def test_anchored_at_start(self) -> None:
        """The expected name elsewhere in the ref does not count."""
        matcher = ModelNameMatcher()
        assert not matcher.matches("#/definitions/Old#/definitions/GetItemsResponse", "getItems", RESPONSE_SUFFIX)

    def test_trailing_text_allowed(self) -> None:
        """Only the prefix is checked, so versioned names still match."""
        matcher = ModelNameMatcher()
        assert matcher.matches("#/definitions/GetItemsResponseV2", "getItems", RESPONSE_SUFFIX)

    def test_case_insensitive_by_default(self) -> None:
        """Model name casing is ignored by default."""
        matcher = ModelNameMatcher()
        assert matcher.matches("#/definitions/getitemsresponse", "getItems", RESPONSE_SUFFIX)

    def test_case_sensitive(self) -> None:
        """case_sensitive=True requires the title-cased name."""
        matcher = ModelNameMatcher(case_sensitive=True)
        assert matcher.matches("#/definitions/GetItemsResponse", "getItems", RESPONSE_SUFFIX)
        assert not matcher.matches("#/definitions/getItemsResponse", "getItems", RESPONSE_SUFFIX)

    def test_regex_characters_in_operation_id(self) -> None:
        """Operation ids are matched literally."""
        matcher = ModelNameMatcher()
        assert matcher.matches("#/definitions/Get.ItemsRequest", "get.items", REQUEST_SUFFIX)
        assert not matcher.matches("#/definitions/GetXItemsRequest", "get.items", REQUEST_SUFFIX)
        assert not matcher.matches("#/definitions/Get(items", "get(items", REQUEST_SUFFIX)

    def test_patterns_are_memoised(self) -> None:
        """The same pattern object is returned for repeated lookups."""
        matcher = ModelNameMatcher()
        first = matcher.pattern_for("getItems", RESPONSE_SUFFIX)
        assert matcher.pattern_for("getItems", RESPONSE_SUFFIX) is first
        assert matcher.pattern_for("getItems", REQUEST_SUFFIX) is not first

    def test_expected_prefix(self) -> None:
        """expected_prefix() shows the name the convention wants."""
        matcher = ModelNameMatcher()
        assert matcher.expected_prefix("getItems", RESPONSE_SUFFIX) == "#/definitions/GetItemsResponse"

    def test_module_shortcut(self) -> None:
        """matches_model_name() wraps a one-off matcher."""
        assert matches_model_name("#/definitions/GetItemsResponse", "getItems", RESPONSE_SUFFIX)
        assert not matches_model_name(
            "#/definitions/getItemsResponse", "getItems", RESPONSE_SUFFIX, case_sensitive=True
        )
