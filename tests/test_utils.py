"""
Tests for utility functions.
"""

import pytest

from forte_sdk.utils import (
    extract_items,
    load_json_argument,
    parse_filters,
    parse_typed_value,
    print_error,
    print_json,
    print_table,
)


class TestParseTypedValue:
    """Tests for parse_typed_value function."""

    def test_quoted_string(self):
        assert parse_typed_value('"123"') == "123"
        assert parse_typed_value("'abc'") == "abc"

    def test_numbers(self):
        assert parse_typed_value("42") == 42
        assert parse_typed_value("-3.5") == -3.5

    def test_literals(self):
        assert parse_typed_value("TRUE") is True
        assert parse_typed_value("false") is False
        assert parse_typed_value("null") is None

    def test_plain_text(self):
        assert parse_typed_value("  store 42 ") == "store 42"


class TestParseFilters:
    """Tests for parse_filters function."""

    def test_pairs(self):
        assert parse_filters(["status=active", "limit=5"]) == {"status": "active", "limit": 5}

    def test_value_may_contain_equals(self):
        assert parse_filters(["q=a=b"]) == {"q": "a=b"}

    def test_empty(self):
        assert parse_filters([]) == {}

    @pytest.mark.parametrize("item", ["invalid", "=value"])
    def test_invalid(self, item):
        with pytest.raises(ValueError):
            parse_filters([item])


class TestLoadJsonArgument:
    """Tests for load_json_argument function."""

    def test_object(self):
        assert load_json_argument('{"a": 1}') == {"a": 1}

    def test_none(self):
        assert load_json_argument(None) is None

    def test_invalid_json(self):
        with pytest.raises(ValueError) as exc_info:
            load_json_argument("{nope")
        assert "Invalid JSON" in str(exc_info.value)

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            load_json_argument("[1, 2]")


class TestExtractItems:
    """Tests for extract_items function."""

    def test_data_list(self):
        assert extract_items({"data": [{"id": 1}]}) == [{"id": 1}]

    def test_paged_items(self):
        assert extract_items({"data": {"items": [{"id": 2}]}}) == [{"id": 2}]

    def test_bare_list(self):
        assert extract_items([{"id": 3}, "junk"]) == [{"id": 3}]

    def test_single_record(self):
        assert extract_items({"data": {"id": 4}}) == [{"id": 4}]


class TestPrintFunctions:
    """Tests for print_* utility functions."""

    def test_print_error_with_details(self, capsys):
        print_error("Error occurred", details="Additional info here")
        captured = capsys.readouterr()
        assert "Error occurred" in captured.err
        assert "Additional info here" in captured.err

    def test_print_json(self, capsys):
        print_json({"name": "Test"}, indent=4)
        assert '    "name": "Test"' in capsys.readouterr().out

    def test_print_table(self, capsys):
        print_table(["Id", "Name"], [["a1", "Acme"], ["b2", "Beta Corp"]])
        out = capsys.readouterr().out
        assert "Id" in out and "Name" in out
        assert "Beta Corp" in out

    def test_print_empty_table(self, capsys):
        print_table(["X", "Y"], [])
        out = capsys.readouterr().out
        assert "X" in out and "Y" in out
