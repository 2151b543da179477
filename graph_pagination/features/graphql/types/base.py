"""Base GraphQL types shared by all connections."""

from __future__ import annotations

import strawberry

from graph_pagination.core.pagination.schemas import PageInfo


@strawberry.type(description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination.

    Mirrors graph_pagination.core.pagination.schemas.PageInfo with cursors
    in their encoded wire form.
    """

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        """Convert core page info, encoding its cursors."""
        return cls(
            has_previous_page=page_info.has_previous_page,
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor.encode() if page_info.start_cursor else None,
            end_cursor=page_info.end_cursor.encode() if page_info.end_cursor else None,
        )


__all__ = ["PageInfoType"]
