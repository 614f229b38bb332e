"""
Unit tests for api/utils/parsing.py

Tests for the client string parsers:
- parse_dimensions ("WxH")
- parse_entity_id
- parse_id_list ("[a,b]" / "a,b")
"""

from uuid import uuid4

import pytest

from api.database.models.user_role import UserRole
from api.services.exceptions import NotFoundError, ValidationError
from api.utils.parsing import (
    format_dimensions,
    parse_dimensions,
    parse_entity_id,
    parse_id_list,
)


class TestParseDimensions:
    @pytest.mark.parametrize(
        "value,expected",
        [("100x200", (100, 200)), ("1x1", (1, 1)), ("9999x9999", (9999, 9999)), ("007x3", (7, 3))],
    )
    def test_valid(self, value, expected):
        assert parse_dimensions(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "0x5", "5x0", "12345x2", "2x12345", "10X10", "10x", "x10", "10x10x10", " 10x10", "-1x5", "axb"],
    )
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            parse_dimensions(value)

    def test_format_is_inverse(self):
        assert format_dimensions(*parse_dimensions("30x40")) == "30x40"


class TestParseEntityId:
    def test_valid_uuid(self):
        value = uuid4()
        assert parse_entity_id(str(value), "Space") == value

    def test_malformed_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            parse_entity_id("123", "Space")
        assert exc_info.value.message == "Space not found"
        assert exc_info.value.status_code == 400


class TestParseIdList:
    def test_bracketed(self):
        a, b = uuid4(), uuid4()
        assert parse_id_list(f"[{a},{b}]") == [a, b]

    def test_plain_with_spaces(self):
        a, b = uuid4(), uuid4()
        assert parse_id_list(f"{a}, {b}") == [a, b]

    def test_skips_malformed_and_duplicates(self):
        a = uuid4()
        assert parse_id_list(f"[{a},nope,,{a}]") == [a]

    @pytest.mark.parametrize("value", [None, "", "[]"])
    def test_empty(self, value):
        assert parse_id_list(value) == []


class TestUserRoleParse:
    @pytest.mark.parametrize("value,expected", [("User", UserRole.USER), ("Admin", UserRole.ADMIN)])
    def test_exact_values(self, value, expected):
        assert UserRole.parse(value) is expected

    @pytest.mark.parametrize("value", ["admin", "ADMIN", "user", "Moderator", ""])
    def test_other_spellings_rejected(self, value):
        with pytest.raises(ValueError):
            UserRole.parse(value)
