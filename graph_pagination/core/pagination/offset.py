"""Offset pagination for positional data sources.

Converts a cursor pagination request into an ``offset``/``count`` pair for
backends that can only skip and limit. The counts include extra rows so the
window calculation can see past the page boundaries without a second query:

=====================================  ====================  ==========
request                                offset                count
=====================================  ====================  ==========
none                                   None                  None
first=n                                None                  n + 1
after=k                                k                     None
first=n, after=k                       k                     n + 2
last=m                                 None                  m + 1
before=k                               0                     k + 1
last=m, before=k                       max(0, k - 1 - m)     m + 2
=====================================  ====================  ==========

With ``after=k`` the fetch starts at the ``after`` row itself, which is how
``compute_window`` numbers index cursors. Only index cursors carry a
position; an ``after``/``before`` for which ``Cursor.as_index`` returns
``None`` is ignored here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from graph_pagination.core.pagination.request import (
    BackwardPagination,
    ForwardPagination,
)

T = TypeVar("T")


class OffsetPagination(BaseModel):
    """Positional fetch request.

    Attributes:
        offset: Number of rows to skip, ``None`` meaning from the start.
        count: Maximum number of rows, ``None`` meaning no limit.
    """

    offset: int | None = Field(default=None, ge=0, description="Rows to skip")
    count: int | None = Field(default=None, ge=0, description="Maximum rows to return")

    model_config = ConfigDict(frozen=True)

    @property
    def start(self) -> int:
        return self.offset or 0

    @property
    def stop(self) -> int | None:
        if self.count is None:
            return None
        return self.start + self.count

    def apply(self, rows: Sequence[T]) -> list[T]:
        """Slice an in-memory sequence the way a positional backend would."""
        return list(rows[self.start : self.stop])


def to_offset_pagination(
    request: ForwardPagination | BackwardPagination | None,
) -> OffsetPagination:
    """Size a positional fetch for ``request``."""
    match request:
        case None:
            return OffsetPagination()
        case ForwardPagination():
            return _forward_offset(request)
        case BackwardPagination():
            return _backward_offset(request)
    raise TypeError(f"Unsupported pagination request: {type(request).__name__}")


def _forward_offset(request: ForwardPagination) -> OffsetPagination:
    after = request.after.as_index() if request.after is not None else None
    first = request.first

    if after is None:
        return OffsetPagination(count=None if first is None else first + 1)
    return OffsetPagination(
        offset=max(0, after),
        count=None if first is None else first + 2,
    )


def _backward_offset(request: BackwardPagination) -> OffsetPagination:
    before = request.before.as_index() if request.before is not None else None
    last = request.last

    match (before, last):
        case (int(), int()):
            return OffsetPagination(offset=max(0, before - 1 - last), count=last + 2)
        case (int(), None):
            return OffsetPagination(offset=0, count=max(0, before + 1))
        case (None, int()):
            return OffsetPagination(count=last + 1)
        case _:
            return OffsetPagination()


__all__ = ["OffsetPagination", "to_offset_pagination"]
