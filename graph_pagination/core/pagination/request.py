"""Pagination requests.

A pagination request is exactly one of two shapes:

- ``ForwardPagination(first, after)``: up to ``first`` items after ``after``
- ``BackwardPagination(last, before)``: up to ``last`` items before ``before``

Raw GraphQL arguments may carry all four fields at once. They are resolved
once at the boundary with ``resolve_pagination`` (forward arguments win,
nothing at all means "no pagination") so that the windowing code only ever
sees a concrete variant.

Boundary validation of untrusted arguments lives in ``PaginationArgs``:

    args = PaginationArgs.parse(first=10, after="YQ==")
    request = args.to_request()   # ForwardPagination(first=10, after=Cursor("a"))
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from graph_pagination.core.exceptions import ValidationException
from graph_pagination.core.pagination.cursor import Cursor, decode_optional
from graph_pagination.core.settings.loader import get_pagination_settings
from graph_pagination.core.settings.pagination import PaginationSettings

logger = logging.getLogger(__name__)


class ForwardPagination(BaseModel):
    """Forward pagination: ``first`` items after the ``after`` cursor."""

    direction: Literal["forward"] = "forward"
    first: int | None = Field(default=None, description="Page size")
    after: Cursor | None = Field(default=None, description="Exclusive lower bound")

    model_config = ConfigDict(frozen=True)


class BackwardPagination(BaseModel):
    """Backward pagination: ``last`` items before the ``before`` cursor."""

    direction: Literal["backward"] = "backward"
    last: int | None = Field(default=None, description="Page size")
    before: Cursor | None = Field(default=None, description="Exclusive upper bound")

    model_config = ConfigDict(frozen=True)


PaginationRequest = Annotated[
    ForwardPagination | BackwardPagination,
    Field(discriminator="direction"),
]

# No constraints at all; equivalent to an absent request.
ZERO = ForwardPagination()


def resolve_pagination(
    first: int | None = None,
    after: Cursor | None = None,
    last: int | None = None,
    before: Cursor | None = None,
) -> ForwardPagination | BackwardPagination | None:
    """Resolve combined raw arguments to a single pagination direction.

    Forward arguments take priority: if ``first`` or ``after`` is given the
    result is forward and any backward arguments are ignored. Otherwise, if
    ``last`` or ``before`` is given the result is backward. With no
    arguments at all there is no pagination and ``None`` is returned.
    """
    if first is not None or after is not None:
        if last is not None or before is not None:
            logger.debug(
                "Ignoring backward pagination arguments in favour of forward ones",
                extra={"last": last, "has_before": before is not None},
            )
        return ForwardPagination(first=first, after=after)
    if last is not None or before is not None:
        return BackwardPagination(last=last, before=before)
    return None


class PaginationArgs(BaseModel):
    """Raw, client-supplied pagination arguments.

    ``after``/``before`` hold encoded wire cursors. Use ``parse`` to build a
    validated instance and ``to_request`` to decode the cursors and resolve
    the direction.
    """

    first: int | None = None
    after: str | None = None
    last: int | None = None
    before: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(
        cls,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        *,
        settings: PaginationSettings | None = None,
    ) -> PaginationArgs:
        """Validate raw arguments against the pagination settings.

        Raises:
            ValidationException: If a page size is negative, or exceeds
                ``max_page_size`` while ``clamp_to_max`` is off.
        """
        settings = settings or get_pagination_settings()
        return cls(
            first=_check_page_size("first", first, settings),
            after=after,
            last=_check_page_size("last", last, settings),
            before=before,
        )

    @property
    def is_ambiguous(self) -> bool:
        """Whether both forward and backward arguments are present."""
        has_forward = self.first is not None or self.after is not None
        has_backward = self.last is not None or self.before is not None
        return has_forward and has_backward

    def to_request(
        self,
        *,
        apply_default: bool = False,
        settings: PaginationSettings | None = None,
    ) -> ForwardPagination | BackwardPagination | None:
        """Decode cursors and resolve the pagination direction.

        Args:
            apply_default: Turn a request without any bound into
                ``ForwardPagination(first=default_page_size)`` when a default
                page size is configured.
            settings: Settings override, defaults to the cached settings.

        Raises:
            CursorDecodeError: If ``after`` or ``before`` is not a valid cursor.
            ValidationException: If the arguments mix directions and
                ``reject_ambiguous`` is enabled.
        """
        settings = settings or get_pagination_settings()
        if self.is_ambiguous and settings.reject_ambiguous:
            raise ValidationException(
                detail="Cannot combine first/after with last/before",
                type="ambiguous-pagination",
                extra={"fields": ["first", "after", "last", "before"]},
            )

        request = resolve_pagination(
            first=self.first,
            after=decode_optional(self.after),
            last=self.last,
            before=decode_optional(self.before),
        )

        if apply_default and settings.default_page_size is not None:
            if request is None:
                return ForwardPagination(first=settings.default_page_size)
            if isinstance(request, ForwardPagination) and request.first is None:
                return request.model_copy(update={"first": settings.default_page_size})
        return request


def _check_page_size(
    field: str,
    value: int | None,
    settings: PaginationSettings,
) -> int | None:
    if value is None:
        return None
    if value < 0:
        raise ValidationException(
            detail=f"{field} must be a non-negative integer",
            extra={"field": field, "value": value},
        )
    if value > settings.max_page_size:
        if not settings.clamp_to_max:
            raise ValidationException(
                detail=f"{field} must not exceed {settings.max_page_size}",
                extra={"field": field, "value": value, "max": settings.max_page_size},
            )
        logger.warning(
            "Clamping %s=%d to max page size %d",
            field,
            value,
            settings.max_page_size,
        )
        return settings.max_page_size
    return value


__all__ = [
    "ZERO",
    "BackwardPagination",
    "ForwardPagination",
    "PaginationArgs",
    "PaginationRequest",
    "resolve_pagination",
]
