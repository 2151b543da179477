"""Shared response schemas."""

from graph_pagination.core.schemas.problem_details import ProblemDetails

__all__ = ["ProblemDetails"]
