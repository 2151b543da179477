"""Edge and connection building.

Turns an already fetched node sequence plus a pagination request into edges
and page info. Windowing is delegated to ``compute_window``; this module
only decides on the unpaginated fast path and maps selected nodes to edges.

Example:
    result = build_edges(
        rows,
        ForwardPagination(first=10, after=after),
        CursorType.IDENTIFIER,
        key=lambda row: str(row.id),
    )
    result.edges      # [Edge(cursor=..., node=row), ...]
    result.page_info  # PageInfo(has_previous_page=True, ...)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from graph_pagination.core.pagination.cursor import Cursor
from graph_pagination.core.pagination.request import (
    BackwardPagination,
    ForwardPagination,
)
from graph_pagination.core.pagination.schemas import Connection, Edge, PageInfo
from graph_pagination.core.pagination.window import (
    CursorType,
    KeyFunc,
    assign_cursors,
    compute_window,
)
from graph_pagination.core.settings.loader import get_pagination_settings

T = TypeVar("T")
E = TypeVar("E")

EdgeFactory = Callable[[Cursor, Any], E]
IndexedEdgeFactory = Callable[[Cursor, Any, int], E]


@dataclass(frozen=True, slots=True)
class EdgesConstruction(Generic[E]):
    """Edges of the current page and the page info describing them."""

    edges: list[E]
    page_info: PageInfo


def build_edges(
    nodes: Sequence[T],
    pagination: ForwardPagination | BackwardPagination | None,
    cursor_type: CursorType | str = CursorType.IDENTIFIER,
    edge_factory: EdgeFactory[E] = Edge.create,
    *,
    key: KeyFunc | None = None,
) -> EdgesConstruction[E]:
    """Build the edges and page info for ``nodes``.

    Without pagination every node becomes an edge and both page flags are
    false. With pagination only the computed window becomes edges.

    Args:
        nodes: Ordered nodes fetched by the caller.
        pagination: Resolved pagination request, or ``None``.
        cursor_type: Cursor strategy.
        edge_factory: ``(cursor, node) -> edge``; defaults to ``Edge.create``.
        key: Identifier key function for ``CursorType.IDENTIFIER``.
    """
    return make_edges(
        nodes,
        pagination,
        cursor_type,
        lambda cursor, node, _index: edge_factory(cursor, node),
        key=key,
    )


def make_edges(
    nodes: Sequence[T],
    pagination: ForwardPagination | BackwardPagination | None,
    cursor_type: CursorType | str,
    make_edge: IndexedEdgeFactory[E],
    *,
    key: KeyFunc | None = None,
) -> EdgesConstruction[E]:
    """Like ``build_edges`` but the factory also receives the page index.

    ``make_edge(cursor, node, index)`` is called once per selected node,
    with ``index`` counting from zero within the returned page.
    """
    cursor_type = CursorType(cursor_type)

    if pagination is None:
        cursors = assign_cursors(nodes, cursor_type, key=key)
        edges = [
            make_edge(cursor, node, index)
            for index, (cursor, node) in enumerate(zip(cursors, nodes, strict=True))
        ]
        if not cursors:
            return EdgesConstruction(edges=edges, page_info=PageInfo.zero())
        return EdgesConstruction(
            edges=edges,
            page_info=PageInfo(
                has_previous_page=False,
                has_next_page=False,
                start_cursor=cursors[0],
                end_cursor=cursors[-1],
            ),
        )

    window = compute_window(nodes, pagination, cursor_type, key=key)
    edges = [
        make_edge(cursor, node, index)
        for index, (cursor, node) in enumerate(zip(window.cursors, window.nodes, strict=True))
    ]
    return EdgesConstruction(edges=edges, page_info=window.page_info())


def build_connection(
    nodes: Sequence[T],
    pagination: ForwardPagination | BackwardPagination | None,
    cursor_type: CursorType | str | None = None,
    *,
    key: KeyFunc | None = None,
) -> Connection[T]:
    """Build a ``Connection`` of plain ``Edge`` values.

    ``cursor_type`` defaults to ``PaginationSettings.default_cursor_type``.
    """
    if cursor_type is None:
        cursor_type = get_pagination_settings().default_cursor_type
    result = build_edges(nodes, pagination, cursor_type, Edge.create, key=key)
    return Connection(edges=result.edges, page_info=result.page_info)


def paginate_forward(
    nodes: Sequence[T],
    first: int | None = None,
    after: Cursor | None = None,
    cursor_type: CursorType | str = CursorType.IDENTIFIER,
    *,
    key: KeyFunc | None = None,
) -> Connection[T]:
    """Build a connection for ``first``/``after`` arguments."""
    return build_connection(
        nodes,
        ForwardPagination(first=first, after=after),
        cursor_type,
        key=key,
    )


def paginate_backward(
    nodes: Sequence[T],
    last: int | None = None,
    before: Cursor | None = None,
    cursor_type: CursorType | str = CursorType.IDENTIFIER,
    *,
    key: KeyFunc | None = None,
) -> Connection[T]:
    """Build a connection for ``last``/``before`` arguments."""
    return build_connection(
        nodes,
        BackwardPagination(last=last, before=before),
        cursor_type,
        key=key,
    )


__all__ = [
    "EdgeFactory",
    "EdgesConstruction",
    "IndexedEdgeFactory",
    "build_connection",
    "build_edges",
    "make_edges",
    "paginate_backward",
    "paginate_forward",
]
