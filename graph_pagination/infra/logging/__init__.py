"""Logging infrastructure.

Basic usage:
    import logging

    logger = logging.getLogger(__name__)

    # Lazy evaluation for per-request debug summaries
    from graph_pagination.infra.logging import get_lazy_logger

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"window: {expensive_summary()}")

    # Console output for applications and tests
    from graph_pagination.infra.logging import configure_logging

    configure_logging()
"""

from graph_pagination.infra.logging.config import configure_logging
from graph_pagination.infra.logging.formatters import JSONFormatter
from graph_pagination.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "JSONFormatter",
    "LazyLoggerAdapter",
    "configure_logging",
    "get_lazy_logger",
]
