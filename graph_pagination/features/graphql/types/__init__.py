"""Strawberry types for Relay pagination."""

from graph_pagination.features.graphql.types.base import PageInfoType
from graph_pagination.features.graphql.types.pagination import (
    PaginationInput,
    create_connection_type,
    create_edge_type,
    to_graphql_connection,
)

__all__ = [
    "PageInfoType",
    "PaginationInput",
    "create_connection_type",
    "create_edge_type",
    "to_graphql_connection",
]
