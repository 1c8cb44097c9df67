"""
Tests for the payload tree helpers.
"""

import pytest

from mcp_jira_legacy.models.extract import (
    as_text,
    ensure_list,
    first_non_empty,
    name_list,
    resolve_user,
    safe_get,
    string_list,
    text_of,
    unwrap_value,
)


class TestSafeGet:
    """Tests for safe_get."""

    def test_walks_nested_mappings(self):
        node = {"a": {"b": {"c": "found"}}}
        assert safe_get(node, "a.b.c", "X") == "found"

    def test_missing_leaf_returns_default(self):
        node = {"a": {"b": {"other": 1}}}
        assert safe_get(node, "a.b.c", "X") == "X"

    def test_scalar_intermediate_returns_default(self):
        node = {"a": "scalar"}
        assert safe_get(node, "a.b.c", "X") == "X"

    @pytest.mark.parametrize("node", [None, "text", 42, ["a", "b"]])
    def test_non_mapping_root_returns_default(self, node):
        assert safe_get(node, "a", "X") == "X"

    def test_null_intermediate_returns_default(self):
        assert safe_get({"a": None}, "a.b", "X") == "X"

    @pytest.mark.parametrize("empty", ["", 0, False, None, {}, []])
    def test_falsy_leaf_returns_default(self, empty):
        # Known limitation: present-but-empty is indistinguishable from absent
        assert safe_get({"a": empty}, "a", "X") == "X"

    def test_default_is_empty_string(self):
        assert safe_get({}, "missing") == ""

    def test_returns_non_scalar_values(self):
        node = {"a": {"b": [1, 2]}}
        assert safe_get(node, "a.b") == [1, 2]


class TestUnwrapValue:
    """Tests for unwrap_value."""

    def test_wrapped_value(self):
        assert unwrap_value({"value": "Open"}) == "Open"

    def test_wrapped_value_with_other_keys(self):
        assert unwrap_value({"name": "summary", "value": "Text"}) == "Text"

    def test_raw_scalar(self):
        assert unwrap_value("Open") == "Open"

    def test_mapping_without_value_key(self):
        field = {"name": "Open"}
        assert unwrap_value(field) is field

    def test_wrapped_null(self):
        assert unwrap_value({"value": None}) is None

    @pytest.mark.parametrize("field", [None, "", 0, {}, []])
    def test_falsy_field(self, field):
        assert unwrap_value(field) is None


class TestEnsureList:
    """Tests for ensure_list."""

    def test_none(self):
        assert ensure_list(None) == []

    def test_list_is_returned_as_is(self):
        items = [{"key": "A-1"}, {"key": "A-2"}]
        assert ensure_list(items) is items

    def test_single_mapping_is_wrapped(self):
        item = {"key": "A-1"}
        assert ensure_list(item) == [item]

    def test_single_scalar_is_wrapped(self):
        assert ensure_list("A-1") == ["A-1"]


class TestTextOf:
    """Tests for text_of."""

    def test_bare_scalar(self):
        assert text_of("Open") == "Open"

    def test_text_node_with_attributes(self):
        assert text_of({"#text": "Done", "@_id": "6"}) == "Done"

    def test_attributes_only_returns_default(self):
        assert text_of({"@_username": "-1"}, "Unassigned") == "Unassigned"

    def test_none_returns_default(self):
        assert text_of(None, "Unknown") == "Unknown"

    def test_empty_text_returns_default(self):
        assert text_of("", "Unknown") == "Unknown"

    def test_list_returns_default(self):
        assert text_of(["a", "b"], "Unknown") == "Unknown"

    def test_number_is_stringified(self):
        assert text_of(5) == "5"


class TestCoercion:
    """Tests for as_text, string_list and name_list."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("Open", "Open"), (12, "12"), (None, "D"), ({"a": 1}, "D"), ([], "D"), (True, "D"), ("", "D")],
    )
    def test_as_text(self, value, expected):
        assert as_text(value, "D") == expected

    def test_string_list(self):
        assert string_list(["ui", 3, None, {"x": 1}]) == ["ui", "3"]

    @pytest.mark.parametrize("value", [None, "ui", {"value": ["ui"]}])
    def test_string_list_non_list(self, value):
        assert string_list(value) == []

    def test_name_list(self):
        assert name_list([{"name": "Frontend"}, {"id": "1"}, "raw"]) == ["Frontend", "", ""]

    def test_name_list_non_list(self):
        assert name_list({"name": "Frontend"}) == []


class TestPrecedence:
    """Tests for first_non_empty and resolve_user."""

    def test_first_non_empty(self):
        assert first_non_empty("", None, "second", "third") == "second"

    def test_first_non_empty_default(self):
        assert first_non_empty("", None, default="D") == "D"

    def test_resolve_user_prefers_wrapped_display_name(self):
        node = {
            "assignee": {
                "displayName": "Direct",
                "value": {"displayName": "Wrapped", "name": "wrapped"},
            }
        }
        assert resolve_user(node, "assignee", "Unassigned") == "Wrapped"

    def test_resolve_user_direct_display_name(self):
        node = {"lead": {"displayName": "John Doe", "name": "jdoe"}}
        assert resolve_user(node, "lead", "Unknown") == "John Doe"

    def test_resolve_user_falls_back_to_login_name(self):
        assert resolve_user({"lead": {"name": "jdoe"}}, "lead", "Unknown") == "jdoe"

    def test_resolve_user_wrapped_login_name(self):
        node = {"lead": {"value": {"name": "jdoe"}}}
        assert resolve_user(node, "lead", "Unknown") == "jdoe"

    def test_resolve_user_missing(self):
        assert resolve_user({}, "assignee", "Unassigned") == "Unassigned"
