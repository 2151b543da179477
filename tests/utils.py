"""Shared test helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from graph_pagination.core.pagination.cursor import Cursor


@dataclass(frozen=True)
class Node:
    """Test node whose identifier cursor is its id."""

    id: str

    @property
    def cursor(self) -> Cursor:
        return Cursor.from_key(self.id)


def make_nodes(ids: str) -> list[Node]:
    """Build nodes from a string of single-letter ids, e.g. ``make_nodes("abcd")``."""
    return [Node(id=char) for char in ids]


def ids(nodes: Iterable[Node]) -> str:
    """Concatenate node ids, e.g. ``"bc"``."""
    return "".join(node.id for node in nodes)


def keys(cursors: Iterable[Cursor | None]) -> list[str | None]:
    """Raw keys of a sequence of cursors."""
    return [cursor.key if cursor is not None else None for cursor in cursors]
