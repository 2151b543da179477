"""Pagination response schemas.

This module provides two pagination styles:

1. GraphQL Connection Pattern (Relay specification):
   - Edges with cursors and nodes
   - PageInfo with navigation metadata

2. Simple REST Style:
   - Just items, cursors, and a has_more flag

Both styles share the same ``Cursor`` type. Models dump to the Relay wire
shape with ``model_dump(by_alias=True)``:

    {
        "edges": [{"cursor": "YQ==", "node": {...}}],
        "pageInfo": {
            "hasPreviousPage": false,
            "hasNextPage": true,
            "startCursor": "YQ==",
            "endCursor": "Yw=="
        }
    }
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from graph_pagination.core.pagination.cursor import Cursor

if TYPE_CHECKING:
    from graph_pagination.core.pagination.request import (
        BackwardPagination,
        ForwardPagination,
    )
    from graph_pagination.core.pagination.window import CursorType

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    ``start_cursor``/``end_cursor`` are ``None`` exactly when the page has
    no edges.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    has_previous_page: bool = Field(
        alias="hasPreviousPage",
        description="Whether previous items exist",
    )
    has_next_page: bool = Field(
        alias="hasNextPage",
        description="Whether more items exist",
    )
    start_cursor: Cursor | None = Field(
        default=None,
        alias="startCursor",
        description="Cursor of the first item",
    )
    end_cursor: Cursor | None = Field(
        default=None,
        alias="endCursor",
        description="Cursor of the last item",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def zero(cls) -> PageInfo:
        """Page info for an empty or unpaginated result: no pages, no cursors."""
        return cls(has_previous_page=False, has_next_page=False)


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        cursor: Cursor for this specific item
        node: The actual data item
    """

    cursor: Cursor = Field(description="Cursor for this item")
    node: T = Field(description="The data item")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls, cursor: Cursor, node: T) -> Edge[T]:
        """Positional constructor, usable as an edge factory."""
        return cls(cursor=cursor, node=node)


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for cursor pagination.

    Usage:
        connection = Connection.from_nodes(
            rows,
            ForwardPagination(first=10, after=cursor),
            CursorType.IDENTIFIER,
            key=lambda row: str(row.id),
        )

    Client navigation:
        # First page
        GET /users?first=10

        # Next page (using endCursor from previous response)
        GET /users?first=10&after=dXNlcjoxMA==

        # Previous page (using startCursor)
        GET /users?last=10&before=dXNlcjoxMQ==

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(
        alias="pageInfo",
        description="Pagination metadata",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_nodes(
        cls,
        nodes: Sequence[T],
        pagination: ForwardPagination | BackwardPagination | None,
        cursor_type: CursorType | str | None = None,
        *,
        key: Callable[[Any], Cursor | str] | None = None,
    ) -> Connection[T]:
        """Build a connection of plain edges from already fetched nodes.

        ``cursor_type`` defaults to the configured ``default_cursor_type``.
        """
        from graph_pagination.core.pagination.builder import build_connection

        return build_connection(nodes, pagination, cursor_type, key=key)

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    def to_cursor_page(self) -> CursorPage[T]:
        """Convert to simple REST-style pagination."""
        return CursorPage(
            items=self.nodes,
            next_cursor=self.page_info.end_cursor if self.page_info.has_next_page else None,
            prev_cursor=self.page_info.start_cursor if self.page_info.has_previous_page else None,
            has_more=self.page_info.has_next_page,
        )


class CursorPage(BaseModel, Generic[T]):
    """Simple REST-style cursor pagination response.

    Attributes:
        items: List of data items
        next_cursor: Cursor for the next page (None if no more)
        prev_cursor: Cursor for the previous page (None if at start)
        has_more: Whether more items exist after this page
    """

    items: list[T] = Field(
        default_factory=list,
        description="List of items",
    )
    next_cursor: Cursor | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    prev_cursor: Cursor | None = Field(
        default=None,
        description="Cursor to fetch previous page",
    )
    has_more: bool = Field(
        default=False,
        description="Whether more items exist",
    )

    model_config = ConfigDict(frozen=True)


__all__ = [
    "Connection",
    "CursorPage",
    "Edge",
    "PageInfo",
]
