"""Relay pagination types for strawberry GraphQL schemas.

Provides the pagination input and factories for per-node Edge and
Connection types, plus the conversion from a core ``Connection`` to them.

Example:
    @strawberry.type
    class ReminderType:
        id: strawberry.ID
        title: str

    ReminderConnection = create_connection_type(ReminderType, "Reminder")

    @strawberry.type
    class Query:
        @strawberry.field
        def reminders(self, page: PaginationInput | None = None) -> ReminderConnection:
            request = page.to_request() if page else None
            rows = load_reminders(to_offset_pagination(request))
            connection = build_connection(rows, request, CursorType.INDEX)
            return to_graphql_connection(connection, ReminderConnection)
"""

from collections.abc import Callable
from typing import Any

import strawberry

from graph_pagination.core.pagination.request import (
    BackwardPagination,
    ForwardPagination,
    PaginationArgs,
)
from graph_pagination.core.pagination.schemas import Connection
from graph_pagination.core.settings.pagination import PaginationSettings
from graph_pagination.features.graphql.types.base import PageInfoType

__all__ = [
    "PaginationInput",
    "create_connection_type",
    "create_edge_type",
    "to_graphql_connection",
]

# ============================================================================
# Pagination Input
# ============================================================================


@strawberry.input(description="Input for cursor-based pagination")
class PaginationInput:
    """Relay pagination arguments as sent by clients.

    ``after``/``before`` are opaque cursors taken from a previous page's
    ``startCursor``/``endCursor``.
    """

    first: int | None = strawberry.field(
        default=None,
        description="Number of items to return from the start",
    )
    after: str | None = strawberry.field(
        default=None,
        description="Cursor to start pagination from (exclusive)",
    )
    last: int | None = strawberry.field(
        default=None,
        description="Number of items to return from the end",
    )
    before: str | None = strawberry.field(
        default=None,
        description="Cursor to end pagination at (exclusive)",
    )

    def to_args(self, settings: PaginationSettings | None = None) -> PaginationArgs:
        """Validate the input against the pagination settings."""
        return PaginationArgs.parse(
            first=self.first,
            after=self.after,
            last=self.last,
            before=self.before,
            settings=settings,
        )

    def to_request(
        self,
        settings: PaginationSettings | None = None,
        *,
        apply_default: bool = False,
    ) -> ForwardPagination | BackwardPagination | None:
        """Validate, decode cursors and resolve the pagination direction."""
        return self.to_args(settings).to_request(
            apply_default=apply_default,
            settings=settings,
        )


# ============================================================================
# Connection Factories
# ============================================================================


def create_edge_type(node_type: type, type_name_prefix: str) -> type:
    """Create a Relay Edge type for a strawberry node type.

    Args:
        node_type: Strawberry type of the edge's node
        type_name_prefix: Prefix for the type name (e.g., "Reminder" -> "ReminderEdge")

    Returns:
        A strawberry Edge type with ``cursor`` and ``node`` fields
    """
    namespace = {
        "__annotations__": {"cursor": str, "node": node_type},
        "cursor": strawberry.field(
            description="Opaque cursor for this edge used in pagination"
        ),
        "node": strawberry.field(description="The node containing the actual data"),
    }
    edge_cls = type(f"{type_name_prefix}Edge", (), namespace)
    return strawberry.type(
        edge_cls,
        name=f"{type_name_prefix}Edge",
        description=f"Edge containing a {type_name_prefix} node and cursor",
    )


def create_connection_type(
    node_type: type,
    type_name_prefix: str,
) -> type:
    """Create a Relay Connection type for a strawberry node type.

    Args:
        node_type: Strawberry type of the connection's nodes
        type_name_prefix: Prefix for the type name (e.g., "Reminder" -> "ReminderConnection")

    Returns:
        A strawberry Connection type with ``edges`` and ``pageInfo`` fields;
        its edge type is kept as ``__edge_type__``
    """
    edge_type = create_edge_type(node_type, type_name_prefix)
    namespace = {
        "__annotations__": {"edges": list[edge_type], "page_info": PageInfoType},
        "edges": strawberry.field(
            description="List of edges containing nodes and their cursors"
        ),
        "page_info": strawberry.field(
            description="Pagination information including hasNextPage, hasPreviousPage, etc."
        ),
    }
    connection_cls = type(f"{type_name_prefix}Connection", (), namespace)
    connection_type = strawberry.type(
        connection_cls,
        name=f"{type_name_prefix}Connection",
        description=f"Relay connection for {type_name_prefix} with cursor-based pagination",
    )
    connection_type.__edge_type__ = edge_type
    return connection_type


def to_graphql_connection(
    connection: Connection[Any],
    connection_type: type,
    convert_node: Callable[[Any], Any] | None = None,
) -> Any:
    """Convert a core ``Connection`` into an instance of ``connection_type``.

    Args:
        connection: Connection built by the pagination core
        connection_type: Type returned by ``create_connection_type``
        convert_node: Optional mapping from core nodes to the GraphQL node type

    Raises:
        TypeError: If ``connection_type`` was not built by ``create_connection_type``
    """
    edge_type = getattr(connection_type, "__edge_type__", None)
    if edge_type is None:
        raise TypeError(
            f"{connection_type!r} is not a connection type; "
            "build it with create_connection_type()"
        )
    convert = convert_node or (lambda node: node)
    edges = [
        edge_type(cursor=edge.cursor.encode(), node=convert(edge.node))
        for edge in connection.edges
    ]
    return connection_type(
        edges=edges,
        page_info=PageInfoType.from_page_info(connection.page_info),
    )
