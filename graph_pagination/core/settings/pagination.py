"""Pagination settings.

Centralized defaults and limits applied when raw query arguments are turned
into pagination requests.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_MAX_PAGE_SIZE=100, PAGINATION_CLAMP_TO_MAX=true
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_page_size: Page size used when a request names no bound and
            the caller opts into defaults. ``None`` keeps "no pagination".
        max_page_size: Largest accepted ``first``/``last`` value.
        clamp_to_max: Clamp oversized page sizes instead of rejecting them.
        reject_ambiguous: Reject requests that mix forward and backward
            arguments instead of preferring the forward ones.
        default_cursor_type: Cursor strategy used by ``Connection.from_nodes``
            when none is given.

    Example:
        settings = PaginationSettings(max_page_size=50)
        args = PaginationArgs.parse(first=20, settings=settings)
    """

    default_page_size: int | None = Field(
        default=None,
        ge=1,
        le=10000,
        description="Default page size when the request names none",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )
    clamp_to_max: bool = Field(
        default=False,
        description="Clamp oversized page sizes instead of rejecting them",
    )
    reject_ambiguous: bool = Field(
        default=False,
        description="Reject requests carrying both forward and backward arguments",
    )
    default_cursor_type: Literal["identifier", "index"] = Field(
        default="identifier",
        description="Cursor strategy used when none is given",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )


__all__ = ["PaginationSettings"]
