"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally pre-bound.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module). Passed
        to the configured logger factory; the stdlib factory installed by
        :class:`LoggingFactory` uses it as the ``logging`` logger name.
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
