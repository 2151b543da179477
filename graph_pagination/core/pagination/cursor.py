"""Opaque pagination cursors.

A cursor wraps a raw string key that marks a position in an ordered
sequence. The key is either a caller-supplied identifier (an ``id``, a
slug, a composite of sort values) or the decimal form of a sequence
position.

On the wire the raw key is URL-safe base64 encoded so clients treat it as
opaque and pass it back unchanged:

    raw key:   "user:42"
    encoded:   "dXNlcjo0Mg=="

Equality and hashing only ever look at the raw key; the encoded form is for
transport.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import re
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from graph_pagination.core.exceptions import CursorDecodeError

logger = logging.getLogger(__name__)
# Non-negative integers of at most 18 digits.
# Non-negative positions only, bounded so parsing stays cheap.
_INDEX_PATTERN = re.compile(r"[0-9]{1,18}")


class CursorCodec:
    """Encode and decode raw cursor keys.

    Usage:
        encoded = CursorCodec.encode("user:42")
        CursorCodec.decode(encoded)  # "user:42"
    """

    @staticmethod
    def encode(raw: str) -> str:
        """Encode a raw key to its URL-safe base64 wire form."""
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(value: str) -> str:
        """Decode a wire cursor back to its raw key.

        Raises:
            CursorDecodeError: If the value is not valid base64 or the
                decoded bytes are not valid UTF-8.
        """
        try:
            data = base64.b64decode(value.encode("ascii"), altchars=b"-_", validate=True)
            return data.decode("utf-8")
        except (binascii.Error, ValueError) as e:
            logger.info("Rejected undecodable cursor", extra={"cursor": value})
            raise CursorDecodeError(value, reason=str(e)) from e

    @staticmethod
    def _serialize_values(values: dict[str, Any]) -> dict[str, Any]:
        """Serialize values to JSON-compatible format.

        Handles special types like datetime and UUID.
        """
        result = {}
        for key, value in values.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            else:
                result[key] = value
        return result


class Cursor(BaseModel):
    """Opaque position marker for an item in an ordered sequence.

    Build one from a domain key or a sequence position:

        Cursor.from_key("a")
        Cursor.from_index(3)     # raw key "3"

    When used as a pydantic field, a cursor serializes to its encoded wire
    string and validates from either a ``Cursor`` or an encoded string.
    """

    key: str = Field(description="Raw, unencoded cursor key")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _decode_wire_value(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"key": CursorCodec.decode(data)}
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> str:
        return self.encode()

    @classmethod
    def from_key(cls, key: str) -> Cursor:
        """Create an identifier cursor from a domain key."""
        return cls(key=key)

    @classmethod
    def from_index(cls, index: int) -> Cursor:
        """Create an index cursor for a sequence position."""
        return cls(key=str(index))

    @classmethod
    def from_fields(cls, row: Any, fields: list[str]) -> Cursor:
        """Create an identifier cursor from several attributes of a row.

        Useful when the sort order is a compound of columns, e.g.
        ``["created_at", "id"]``. The key is a compact JSON object, so two
        rows with equal field values get equal cursors.

        Example:
            cursor = Cursor.from_fields(user, ["created_at", "id"])
        """
        values = {field: getattr(row, field, None) for field in fields}
        serialized = CursorCodec._serialize_values(values)
        return cls(key=json.dumps(serialized, separators=(",", ":")))

    @classmethod
    def decode(cls, value: str) -> Cursor:
        """Decode a wire cursor.

        Raises:
            CursorDecodeError: If the value is not validly encoded.
        """
        return cls(key=CursorCodec.decode(value))

    def encode(self) -> str:
        """Return the opaque wire form of this cursor."""
        return CursorCodec.encode(self.key)

    def as_index(self) -> int | None:
        """Parse the raw key as a sequence position.

        Returns ``None`` for keys that are not a non-negative integer of at
        most 18 digits, so such cursors behave like unmatched ones.
        """
        if _INDEX_PATTERN.fullmatch(self.key) is None:
            return None
        return int(self.key)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Cursor({self.key!r})"


def decode_optional(value: str | None) -> Cursor | None:
    """Decode a wire cursor that may be absent."""
    if value is None:
        return None
    return Cursor.decode(value)


__all__ = ["Cursor", "CursorCodec", "decode_optional"]
