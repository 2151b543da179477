"""Relay-style cursor pagination over already fetched node sequences."""

from graph_pagination.core.pagination import (
    BackwardPagination,
    Connection,
    Cursor,
    CursorType,
    Edge,
    ForwardPagination,
    OffsetPagination,
    PageInfo,
    PaginationArgs,
    build_connection,
    build_edges,
    compute_window,
    resolve_pagination,
    to_offset_pagination,
)

__version__ = "0.1.0"

__all__ = [
    "BackwardPagination",
    "Connection",
    "Cursor",
    "CursorType",
    "Edge",
    "ForwardPagination",
    "OffsetPagination",
    "PageInfo",
    "PaginationArgs",
    "__version__",
    "build_connection",
    "build_edges",
    "compute_window",
    "resolve_pagination",
    "to_offset_pagination",
]
