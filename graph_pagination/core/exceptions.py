"""Custom exception classes for the pagination library."""

from __future__ import annotations

from typing import Any

from graph_pagination.core.schemas.problem_details import ProblemDetails


class AppException(Exception):
    """Base library exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details so that query-serving code can turn
    any raised error straight into an error response.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=400,
            detail="Cursor could not be decoded",
            type="invalid-cursor",
            extra={"cursor": "%%%"},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")

    def to_problem_detail(self) -> ProblemDetails:
        """Convert the exception into an RFC 7807 problem details payload."""
        return ProblemDetails(
            type=self.type,
            title=self.title,
            status=self.status_code,
            detail=self.detail,
            instance=self.instance,
        )


class BadRequestException(AppException):
    """Exception raised for malformed requests.

    Example:
        raise BadRequestException(
            detail="Invalid request format",
            type="bad-request",
            extra={"reason": "missing required field"}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """Exception raised when pagination arguments fail validation.

    Example:
        raise ValidationException(
            detail="first must be a non-negative integer",
            extra={"field": "first", "value": -1}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


class CursorDecodeError(BadRequestException, ValueError):
    """Raised when a wire cursor is not valid base64 or not valid UTF-8 text.

    Subclasses ``ValueError`` as well so that pydantic validators turn it
    into a regular validation error when a cursor is parsed as a field.

    Example:
        raise CursorDecodeError("not-base64!!")
    """

    def __init__(
        self,
        cursor: str,
        reason: str | None = None,
        instance: str | None = None,
    ) -> None:
        detail = f"Invalid cursor: {cursor!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(
            detail=detail,
            type="invalid-cursor",
            instance=instance,
            extra={"cursor": cursor},
        )
        self.cursor = cursor


class PaginationContractError(AppException):
    """Raised when pagination internals are called with impossible inputs.

    Negative page sizes or node/cursor sequences of different lengths are
    programmer errors, never client errors.
    """

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            status_code=500,
            detail=detail,
            type="pagination-contract",
            title="Internal Server Error",
            extra=extra,
        )


__all__ = [
    "AppException",
    "BadRequestException",
    "CursorDecodeError",
    "PaginationContractError",
    "ValidationException",
]
