"""Observability – LoggingFactory."""
from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import structlog

from kube_secrets.observability.logging.filters import SensitiveFieldsFilter

if TYPE_CHECKING:
    from kube_secrets.config.settings import SecretsSettings


class LoggingFactory:
    """Route structlog through the standard ``logging`` module.

    Output is one JSON object per line by default, or structlog's console
    renderer when ``json=False``. Sensitive fields are redacted before any
    other processor sees the event.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        *,
        json: bool = True,
        sensitive_fields: frozenset[str] | None = None,
        stream: IO[str] | None = None,
    ) -> logging.Handler:
        """Configure structlog and the root logger; return the installed handler."""
        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level.upper() if isinstance(level, str) else level)
        return handler

    @classmethod
    def from_settings(cls, settings: "SecretsSettings", stream: IO[str] | None = None) -> logging.Handler:
        """Configure logging from ``KUBE_SECRETS_LOG_*`` settings."""
        return cls.configure(settings.log_level, json=settings.log_json, stream=stream)


__all__ = ["LoggingFactory"]
