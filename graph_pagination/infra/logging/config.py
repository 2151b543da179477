"""Logging configuration setup.

The library only emits records through module loggers under the
``graph_pagination`` namespace and never configures logging on import.
Applications and tests that want those records on the console call
``configure_logging`` once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graph_pagination.infra.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from graph_pagination.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)

# Logger and handler installed by the last configure_logging() call.
_installed: tuple[logging.Logger, logging.Handler] | None = None


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Configure the package logger from ``LoggingSettings``.

    Calling it again replaces the previously installed handler, so settings
    can be re-applied without duplicating output.

    Args:
        settings: Logging settings, defaults to the cached settings.

    Returns:
        The configured package logger.

    Example:
        from graph_pagination.core.settings import LoggingSettings
        from graph_pagination.infra.logging import configure_logging

        configure_logging(LoggingSettings(level="DEBUG", json_logs=True))
    """
    global _installed

    if settings is None:
        from graph_pagination.core.settings.loader import get_logging_settings

        settings = get_logging_settings()

    package_logger = logging.getLogger(settings.logger_name)
    package_logger.setLevel(settings.level_int)

    if _installed is not None:
        previous_logger, previous_handler = _installed
        previous_logger.removeHandler(previous_handler)
        _installed = None

    if settings.console_enabled:
        handler = logging.StreamHandler()
        handler.setLevel(settings.level_int)
        if settings.json_logs:
            handler.setFormatter(
                JSONFormatter(static={"service": settings.logger_name})
            )
        else:
            handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        package_logger.addHandler(handler)
        _installed = (package_logger, handler)

    logger.debug(
        "Logging configured",
        extra={"level": settings.level, "json_logs": settings.json_logs},
    )
    return package_logger


__all__ = ["configure_logging"]
