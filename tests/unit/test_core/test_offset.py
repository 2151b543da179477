"""Unit tests for the offset adapter."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from graph_pagination.core.pagination.builder import build_connection
from graph_pagination.core.pagination.cursor import Cursor
from graph_pagination.core.pagination.offset import OffsetPagination, to_offset_pagination
from graph_pagination.core.pagination.request import (
    BackwardPagination,
    ForwardPagination,
    PaginationArgs,
)
from graph_pagination.core.pagination.window import CursorType
from tests.utils import ids, keys, make_nodes

index = Cursor.from_index

# Underlying dataset: positions 0..9 hold a..j
DATASET = make_nodes("abcdefghij")


def fetch_page(request):
    """Fetch rows like a skip/limit backend would, then window them."""
    rows = to_offset_pagination(request).apply(DATASET)
    return build_connection(rows, request, CursorType.INDEX)


@pytest.mark.unit
class TestToOffsetPagination:
    """The request to offset/count table."""

    @pytest.mark.parametrize(
        ("request_", "offset", "count"),
        [
            (None, None, None),
            (ForwardPagination(), None, None),
            (ForwardPagination(first=3), None, 4),
            (ForwardPagination(after=index(5)), 5, None),
            (ForwardPagination(first=3, after=index(5)), 5, 5),
            (ForwardPagination(first=0, after=index(5)), 5, 2),
            (BackwardPagination(), None, None),
            (BackwardPagination(last=3), None, 4),
            (BackwardPagination(before=index(5)), 0, 6),
            (BackwardPagination(last=2, before=index(6)), 3, 4),
            (BackwardPagination(last=10, before=index(6)), 0, 12),
        ],
    )
    def test_table(self, request_, offset, count):
        result = to_offset_pagination(request_)

        assert (result.offset, result.count) == (offset, count)

    def test_non_index_cursors_are_ignored(self):
        result = to_offset_pagination(ForwardPagination(first=2, after=Cursor.from_key("x")))

        assert (result.offset, result.count) == (None, 3)

    @pytest.mark.parametrize("raw", ["-5", "9" * 19, "9" * 5000])
    def test_negative_and_oversized_cursors_are_ignored(self, raw):
        forward = to_offset_pagination(ForwardPagination(first=2, after=Cursor.from_key(raw)))
        backward = to_offset_pagination(BackwardPagination(last=2, before=Cursor.from_key(raw)))

        assert (forward.offset, forward.count) == (None, 3)
        assert (backward.offset, backward.count) == (None, 3)

    def test_oversized_wire_cursor_from_client(self):
        after = Cursor.from_key("9" * 5000).encode()
        request = PaginationArgs.parse(first=2, after=after).to_request()

        result = to_offset_pagination(request)

        assert (result.offset, result.count) == (None, 3)

    def test_unsupported_request(self):
        with pytest.raises(TypeError):
            to_offset_pagination("first=3")


@pytest.mark.unit
class TestOffsetPaginationModel:
    """Tests for OffsetPagination."""

    def test_apply_slices(self):
        assert OffsetPagination(offset=2, count=3).apply(list("abcdefg")) == ["c", "d", "e"]

    def test_apply_without_limits(self):
        assert OffsetPagination().apply([1, 2, 3]) == [1, 2, 3]

    def test_apply_past_the_end(self):
        assert OffsetPagination(offset=5, count=3).apply([1, 2, 3]) == []

    def test_bounds(self):
        pagination = OffsetPagination(offset=4, count=2)

        assert (pagination.start, pagination.stop) == (4, 6)
        assert OffsetPagination(count=2).stop == 2
        assert OffsetPagination(offset=1).stop is None

    def test_negative_values_rejected(self):
        with pytest.raises(ValidationError):
            OffsetPagination(offset=-1)


@pytest.mark.unit
class TestPositionalBackend:
    """Fetching with the adapter and windowing with index cursors agree."""

    def test_first_page(self):
        connection = fetch_page(ForwardPagination(first=3))

        assert ids(connection.nodes) == "abc"
        assert keys(edge.cursor for edge in connection.edges) == ["0", "1", "2"]
        assert connection.page_info.has_next_page is True
        assert connection.page_info.has_previous_page is False

    def test_next_page(self):
        connection = fetch_page(ForwardPagination(first=3, after=index(2)))

        assert ids(connection.nodes) == "def"
        assert keys(edge.cursor for edge in connection.edges) == ["3", "4", "5"]
        assert connection.page_info.has_previous_page is True
        assert connection.page_info.has_next_page is True

    def test_last_forward_page(self):
        connection = fetch_page(ForwardPagination(first=3, after=index(8)))

        assert ids(connection.nodes) == "j"
        assert connection.page_info.has_next_page is False

    def test_previous_page(self):
        connection = fetch_page(BackwardPagination(last=2, before=index(6)))

        assert ids(connection.nodes) == "ef"
        assert keys(edge.cursor for edge in connection.edges) == ["4", "5"]
        assert connection.page_info.has_previous_page is True
        assert connection.page_info.has_next_page is True

    def test_previous_page_at_start(self):
        connection = fetch_page(BackwardPagination(last=3, before=index(2)))

        assert ids(connection.nodes) == "ab"
        assert keys(edge.cursor for edge in connection.edges) == ["0", "1"]
        assert connection.page_info.has_previous_page is False

    def test_negative_after_restarts_from_the_first_row(self):
        connection = fetch_page(ForwardPagination(first=2, after=Cursor.from_key("-5")))

        assert ids(connection.nodes) == "ab"
        assert keys(edge.cursor for edge in connection.edges) == ["0", "1"]
        assert connection.page_info.has_previous_page is False

    def test_before_only(self):
        connection = fetch_page(BackwardPagination(before=index(3)))

        assert ids(connection.nodes) == "abc"
        assert connection.page_info.has_next_page is True

    def test_forward_walk_visits_every_row_once(self):
        collected = []
        after = None

        for _ in range(len(DATASET)):
            connection = fetch_page(ForwardPagination(first=4, after=after))
            collected.extend(connection.nodes)
            if not connection.page_info.has_next_page:
                break
            after = connection.page_info.end_cursor

        assert collected == DATASET
