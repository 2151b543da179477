"""Unit tests for the pagination response schemas."""
from __future__ import annotations

import pytest

from graph_pagination.core.pagination.cursor import Cursor
from graph_pagination.core.pagination.request import ForwardPagination
from graph_pagination.core.pagination.schemas import Connection, CursorPage, Edge, PageInfo


@pytest.mark.unit
class TestPageInfo:
    """Tests for PageInfo."""

    def test_zero(self):
        page_info = PageInfo.zero()

        assert page_info.has_previous_page is False
        assert page_info.has_next_page is False
        assert page_info.start_cursor is None
        assert page_info.end_cursor is None

    def test_populate_by_alias(self):
        page_info = PageInfo.model_validate(
            {"hasPreviousPage": True, "hasNextPage": False, "startCursor": "YQ=="}
        )

        assert page_info.has_previous_page is True
        assert page_info.start_cursor == Cursor.from_key("a")

    def test_dump_by_alias_encodes_cursors(self):
        page_info = PageInfo(
            has_previous_page=False,
            has_next_page=True,
            start_cursor=Cursor.from_key("a"),
            end_cursor=Cursor.from_key("c"),
        )

        assert page_info.model_dump(by_alias=True) == {
            "hasPreviousPage": False,
            "hasNextPage": True,
            "startCursor": "YQ==",
            "endCursor": "Yw==",
        }


@pytest.mark.unit
class TestConnection:
    """Tests for Connection."""

    @pytest.fixture
    def connection(self) -> Connection[str]:
        return Connection.from_nodes(
            ["a", "b", "c", "d"],
            ForwardPagination(first=2, after=Cursor.from_key("a")),
            key=lambda node: node,
        )

    def test_nodes(self, connection):
        assert connection.nodes == ["b", "c"]

    def test_relay_wire_shape(self, connection):
        assert connection.model_dump(by_alias=True) == {
            "edges": [
                {"cursor": "Yg==", "node": "b"},
                {"cursor": "Yw==", "node": "c"},
            ],
            "pageInfo": {
                "hasPreviousPage": True,
                "hasNextPage": True,
                "startCursor": "Yg==",
                "endCursor": "Yw==",
            },
        }

    def test_to_cursor_page(self, connection):
        page = connection.to_cursor_page()

        assert isinstance(page, CursorPage)
        assert page.items == ["b", "c"]
        assert page.prev_cursor == Cursor.from_key("b")
        assert page.next_cursor == Cursor.from_key("c")
        assert page.has_more is True

    def test_to_cursor_page_at_the_end(self):
        connection = Connection.from_nodes(["a", "b"], None, key=lambda node: node)

        page = connection.to_cursor_page()

        assert page.items == ["a", "b"]
        assert page.next_cursor is None
        assert page.prev_cursor is None
        assert page.has_more is False

    def test_empty_connection(self):
        connection = Connection(page_info=PageInfo.zero())

        assert connection.edges == []
        assert connection.nodes == []


@pytest.mark.unit
class TestEdge:
    """Tests for Edge."""

    def test_create(self):
        edge = Edge.create(Cursor.from_index(3), {"id": 3})

        assert edge.cursor.as_index() == 3
        assert edge.node == {"id": 3}

    def test_cursor_from_wire_string(self):
        edge = Edge.model_validate({"cursor": "Mw==", "node": 3})

        assert edge.cursor == Cursor.from_index(3)
