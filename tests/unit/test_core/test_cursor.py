"""Unit tests for cursors and cursor encoding."""
from __future__ import annotations

import base64
from datetime import UTC, datetime
from uuid import UUID

import pytest
from pydantic import BaseModel, ValidationError

from graph_pagination.core.exceptions import BadRequestException, CursorDecodeError
from graph_pagination.core.pagination.cursor import Cursor, CursorCodec, decode_optional


@pytest.mark.unit
class TestCursorConstruction:
    """Tests for building cursors from keys and indexes."""

    def test_from_key_keeps_raw_key(self):
        cursor = Cursor.from_key("user:42")

        assert cursor.key == "user:42"

    def test_from_index_uses_decimal_string(self):
        cursor = Cursor.from_index(17)

        assert cursor.key == "17"
        assert cursor.as_index() == 17

    def test_as_index_returns_none_for_non_integer_keys(self):
        assert Cursor.from_key("abc").as_index() is None
        assert Cursor.from_key("1.5").as_index() is None
        assert Cursor.from_key("").as_index() is None
        assert Cursor.from_key("1_000").as_index() is None

    def test_as_index_parses_integer_keys(self):
        assert Cursor.from_key("0").as_index() == 0
        assert Cursor.from_key("007").as_index() == 7
        assert Cursor.from_key("9" * 18).as_index() == int("9" * 18)

    def test_as_index_rejects_negative_keys(self):
        assert Cursor.from_key("-3").as_index() is None
        assert Cursor.from_key("-0").as_index() is None

    def test_as_index_rejects_oversized_keys(self):
        assert Cursor.from_key("9" * 19).as_index() is None
        assert Cursor.from_key("9" * 5000).as_index() is None

    def test_equality_is_over_raw_key(self):
        assert Cursor.from_key("5") == Cursor.from_index(5)
        assert Cursor.from_key("a") != Cursor.from_key("b")

    def test_cursors_are_hashable(self):
        cursors = {Cursor.from_key("a"), Cursor.from_key("a"), Cursor.from_index(1)}

        assert len(cursors) == 2

    def test_cursor_is_frozen(self):
        cursor = Cursor.from_key("a")

        with pytest.raises(ValidationError):
            cursor.key = "b"

    def test_from_fields_builds_composite_key(self):
        class Row:
            id = UUID("550e8400-e29b-41d4-a716-446655440000")
            created_at = datetime(2025, 1, 1, tzinfo=UTC)

        cursor = Cursor.from_fields(Row(), ["created_at", "id"])

        assert cursor.key == (
            '{"created_at":"2025-01-01T00:00:00+00:00",'
            '"id":"550e8400-e29b-41d4-a716-446655440000"}'
        )
        assert Cursor.from_fields(Row(), ["created_at", "id"]) == cursor


@pytest.mark.unit
class TestCursorEncoding:
    """Tests for the opaque wire form."""

    def test_encode_is_urlsafe_base64_of_key(self):
        cursor = Cursor.from_key("user:42")

        assert cursor.encode() == "dXNlcjo0Mg=="
        assert base64.urlsafe_b64decode(cursor.encode()).decode() == "user:42"

    def test_str_is_encoded_form(self):
        cursor = Cursor.from_key("a")

        assert str(cursor) == cursor.encode() == "YQ=="

    @pytest.mark.parametrize("key", ["a", "", "0", "user:42", "ünïcödé ✓", "x" * 500])
    def test_decode_reverses_encode(self, key):
        cursor = Cursor.from_key(key)

        assert Cursor.decode(cursor.encode()) == cursor

    @pytest.mark.parametrize("value", ["not-valid-base64!!!", "YQ", "é", "YQ==YQ=="])
    def test_decode_rejects_invalid_base64(self, value):
        with pytest.raises(CursorDecodeError) as exc_info:
            Cursor.decode(value)

        assert exc_info.value.cursor == value
        assert exc_info.value.extra == {"cursor": value}

    def test_decode_rejects_invalid_utf8(self):
        value = base64.urlsafe_b64encode(b"\xff\xfe").decode()

        with pytest.raises(CursorDecodeError):
            Cursor.decode(value)

    def test_decode_error_is_a_client_error(self):
        with pytest.raises(BadRequestException) as exc_info:
            Cursor.decode("%%%")

        assert exc_info.value.status_code == 400
        assert exc_info.value.type == "invalid-cursor"

    def test_decode_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            CursorCodec.decode("%%%")

    def test_decode_optional(self):
        assert decode_optional(None) is None
        assert decode_optional("YQ==") == Cursor.from_key("a")


@pytest.mark.unit
class TestCursorAsField:
    """Tests for cursors embedded in pydantic models."""

    class Holder(BaseModel):
        cursor: Cursor | None = None

    def test_field_serializes_to_encoded_string(self):
        holder = self.Holder(cursor=Cursor.from_key("a"))

        assert holder.model_dump() == {"cursor": "YQ=="}
        assert holder.model_dump_json() == '{"cursor":"YQ=="}'

    def test_field_validates_from_encoded_string(self):
        holder = self.Holder.model_validate({"cursor": "YQ=="})

        assert holder.cursor == Cursor.from_key("a")

    def test_field_rejects_invalid_wire_cursor(self):
        with pytest.raises(ValidationError):
            self.Holder.model_validate({"cursor": "not-valid-base64!!!"})

    def test_json_round_trip(self):
        holder = self.Holder(cursor=Cursor.from_index(3))

        assert self.Holder.model_validate_json(holder.model_dump_json()) == holder
