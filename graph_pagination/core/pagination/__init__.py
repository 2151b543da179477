"""Cursor pagination over already fetched node sequences.

This package computes Relay-style connections from an ordered sequence of
nodes that the caller has already loaded:

- Resolve raw ``first``/``after``/``last``/``before`` arguments into exactly
  one pagination direction
- Work out which contiguous slice of the nodes is the current page
- Give every returned node a stable, opaque cursor
- Report whether previous/next pages exist

GraphQL Connection Style:
    args = PaginationArgs.parse(first=first, after=after)
    request = args.to_request()

    offset = to_offset_pagination(request)          # positional backends
    rows = await repo.list(offset=offset.offset, limit=offset.count)

    return build_connection(rows, request, CursorType.INDEX)

Simple REST Style:
    return build_connection(rows, request, CursorType.IDENTIFIER, key=key).to_cursor_page()

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from graph_pagination.core.pagination.builder import (
    EdgesConstruction,
    build_connection,
    build_edges,
    make_edges,
    paginate_backward,
    paginate_forward,
)
from graph_pagination.core.pagination.cursor import Cursor, CursorCodec, decode_optional
from graph_pagination.core.pagination.offset import OffsetPagination, to_offset_pagination
from graph_pagination.core.pagination.request import (
    ZERO,
    BackwardPagination,
    ForwardPagination,
    PaginationArgs,
    PaginationRequest,
    resolve_pagination,
)
from graph_pagination.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
)
from graph_pagination.core.pagination.window import (
    Cursorable,
    CursorType,
    Window,
    assign_cursors,
    compute_window,
)

__all__ = [
    "ZERO",
    "BackwardPagination",
    # GraphQL-style schemas
    "Connection",
    # Cursor utilities
    "Cursor",
    "CursorCodec",
    # REST-style schemas
    "CursorPage",
    "CursorType",
    "Cursorable",
    "Edge",
    "EdgesConstruction",
    "ForwardPagination",
    # Offset adapter
    "OffsetPagination",
    "PageInfo",
    # Requests
    "PaginationArgs",
    "PaginationRequest",
    # Windowing
    "Window",
    "assign_cursors",
    "build_connection",
    "build_edges",
    "compute_window",
    "decode_optional",
    "make_edges",
    "paginate_backward",
    "paginate_forward",
    "resolve_pagination",
    "to_offset_pagination",
]
