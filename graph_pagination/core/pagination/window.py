"""Pagination window calculation.

Given an ordered sequence of nodes and a resolved pagination request, the
window is the contiguous slice of that sequence that forms the current
page, together with a cursor for every selected node and whether unselected
nodes remain on either side.

Two cursor strategies are supported:

- ``CursorType.IDENTIFIER``: each node carries its own domain key, taken
  from ``key(node)`` or from the node's ``cursor`` attribute.
- ``CursorType.INDEX``: cursors are sequence positions. The supplied nodes
  are assumed to be a slice of a larger dataset fetched with
  ``to_offset_pagination`` so numbering does not always start at zero:

  * forward with ``after=k``: node 0 is the ``after`` row itself and is
    numbered ``k``; the page starts right after it, at ``k + 1``.
  * backward with ``before=k`` and ``last=m``: numbering starts at
    ``max(0, k - 1 - m)``.
  * otherwise numbering starts at zero.

Flags are derived only from the supplied nodes: ``has_previous`` is true iff
the window does not start at 0, ``has_next`` iff it stops before the end.
Callers that want accurate flags must fetch at least one extra node on each
side they care about.

A cursor that matches no node (stale, or from another dataset) is not an
error. A forward window then starts at the beginning of the nodes and a
backward window ends at the end of them.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from graph_pagination.core.exceptions import PaginationContractError
from graph_pagination.core.pagination.cursor import Cursor
from graph_pagination.core.pagination.request import (
    ZERO,
    BackwardPagination,
    ForwardPagination,
)
from graph_pagination.core.pagination.schemas import PageInfo
from graph_pagination.infra.logging.lazy import get_lazy_logger

logger = get_lazy_logger(__name__)

T = TypeVar("T")

KeyFunc = Callable[[Any], Cursor | str]


class CursorType(StrEnum):
    """How edge cursors are derived for a sequence of nodes."""

    IDENTIFIER = "identifier"
    INDEX = "index"


@runtime_checkable
class Cursorable(Protocol):
    """A node that knows its own identifier cursor."""

    @property
    def cursor(self) -> Cursor | str: ...


@dataclass(frozen=True, slots=True)
class Window(Generic[T]):
    """The computed page over a node sequence.

    Attributes:
        start: First selected position in the supplied nodes.
        stop: One past the last selected position.
        nodes: Selected nodes, in order.
        cursors: Cursor of each selected node.
        has_previous: Whether supplied nodes exist before ``start``.
        has_next: Whether supplied nodes exist at or after ``stop``.
    """

    start: int
    stop: int
    nodes: tuple[T, ...]
    cursors: tuple[Cursor, ...]
    has_previous: bool
    has_next: bool

    @property
    def range(self) -> range:
        return range(self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def start_cursor(self) -> Cursor | None:
        return self.cursors[0] if self.cursors else None

    @property
    def end_cursor(self) -> Cursor | None:
        return self.cursors[-1] if self.cursors else None

    def page_info(self) -> PageInfo:
        """Build page info from the window flags and boundary cursors."""
        return PageInfo(
            has_previous_page=self.has_previous,
            has_next_page=self.has_next,
            start_cursor=self.start_cursor,
            end_cursor=self.end_cursor,
        )


def identifier_cursor(node: Any, key: KeyFunc | None = None) -> Cursor:
    """Return the identifier cursor of a node.

    Raises:
        PaginationContractError: If no key function is given and the node has
            no ``cursor`` attribute, or the key is neither a ``Cursor`` nor a
            ``str``.
    """
    if key is not None:
        value = key(node)
    elif isinstance(node, Cursorable):
        value = node.cursor
    else:
        raise PaginationContractError(
            f"{type(node).__name__} has no 'cursor' attribute; pass a key function",
            extra={"node_type": type(node).__name__},
        )

    if isinstance(value, Cursor):
        return value
    if isinstance(value, str):
        return Cursor.from_key(value)
    raise PaginationContractError(
        f"Cursor key must be a Cursor or str, got {type(value).__name__}",
        extra={"key_type": type(value).__name__},
    )


def index_base(request: ForwardPagination | BackwardPagination | None) -> int:
    """Position of the first supplied node in the underlying dataset."""
    match request:
        case ForwardPagination(after=Cursor() as after):
            return after.as_index() or 0
        case BackwardPagination(last=int() as last, before=Cursor() as before):
            before_index = before.as_index()
            if before_index is None:
                return 0
            return max(0, before_index - 1 - last)
        case _:
            return 0


def assign_cursors(
    nodes: Sequence[Any],
    cursor_type: CursorType | str,
    request: ForwardPagination | BackwardPagination | None = None,
    *,
    key: KeyFunc | None = None,
) -> list[Cursor]:
    """Assign a cursor to every supplied node, in order."""
    if CursorType(cursor_type) is CursorType.INDEX:
        base = index_base(request)
        return [Cursor.from_index(base + i) for i in range(len(nodes))]
    return [identifier_cursor(node, key) for node in nodes]


def compute_window(
    nodes: Sequence[T],
    request: ForwardPagination | BackwardPagination | None = None,
    cursor_type: CursorType | str = CursorType.IDENTIFIER,
    *,
    key: KeyFunc | None = None,
) -> Window[T]:
    """Compute the current page over ``nodes``.

    An absent request behaves like forward pagination without bounds: every
    node is selected and both flags are false.

    Args:
        nodes: Ordered nodes, typically a superset of the page fetched with
            one or two extra rows.
        request: Resolved pagination request, or ``None``.
        cursor_type: Cursor strategy.
        key: Identifier key function for ``CursorType.IDENTIFIER``.

    Returns:
        The selected window.

    Raises:
        PaginationContractError: If ``first``/``last`` is negative or a node
            has no usable identifier.
    """
    request = request if request is not None else ZERO
    cursor_type = CursorType(cursor_type)
    cursors = assign_cursors(nodes, cursor_type, request, key=key)
    return _window_from_cursors(nodes, cursors, request, cursor_type)


def _window_from_cursors(
    nodes: Sequence[T],
    cursors: Sequence[Cursor],
    request: ForwardPagination | BackwardPagination,
    cursor_type: CursorType,
) -> Window[T]:
    if len(nodes) != len(cursors):
        raise PaginationContractError(
            "Node count must equal cursor count",
            extra={"nodes": len(nodes), "cursors": len(cursors)},
        )

    if isinstance(request, ForwardPagination):
        start, stop = _forward_bounds(cursors, request)
    else:
        start, stop = _backward_bounds(cursors, request)

    total = len(nodes)
    window = Window(
        start=start,
        stop=stop,
        nodes=tuple(nodes[start:stop]),
        cursors=tuple(cursors[start:stop]),
        has_previous=start > 0,
        has_next=stop < total,
    )
    logger.debug(
        lambda: (
            f"pagination.window: {request.direction}/{cursor_type} over {total} nodes "
            f"-> [{start}, {stop}) previous={window.has_previous} next={window.has_next}"
        )
    )
    return window


def _forward_bounds(
    cursors: Sequence[Cursor],
    request: ForwardPagination,
) -> tuple[int, int]:
    total = len(cursors)
    _check_count("first", request.first)

    start = 0
    if request.after is not None:
        position = _first_index(cursors, request.after)
        if position is None:
            logger.debug("Cursor %r not found, starting from the first node", request.after)
        else:
            start = position + 1

    if request.first is None:
        return start, total
    return start, min(start + request.first, total)


def _backward_bounds(
    cursors: Sequence[Cursor],
    request: BackwardPagination,
) -> tuple[int, int]:
    total = len(cursors)
    _check_count("last", request.last)

    stop = total
    if request.before is not None:
        position = _last_index(cursors, request.before)
        if position is None:
            logger.debug("Cursor %r not found, ending at the last node", request.before)
        else:
            stop = position

    if request.last is None:
        return 0, stop
    return max(0, stop - request.last), stop


def _check_count(field: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise PaginationContractError(
            f"{field} must be non-negative, got {value}",
            extra={"field": field, "value": value},
        )


def _first_index(cursors: Sequence[Cursor], target: Cursor) -> int | None:
    for position, cursor in enumerate(cursors):
        if cursor == target:
            return position
    return None


def _last_index(cursors: Sequence[Cursor], target: Cursor) -> int | None:
    for position in range(len(cursors) - 1, -1, -1):
        if cursors[position] == target:
            return position
    return None


__all__ = [
    "Cursorable",
    "CursorType",
    "KeyFunc",
    "Window",
    "assign_cursors",
    "compute_window",
    "identifier_cursor",
    "index_base",
]
