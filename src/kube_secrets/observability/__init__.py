"""Observability – structured logging for volume walks."""

from kube_secrets.observability.logging import LoggingFactory, SensitiveFieldsFilter, get_logger

__all__ = ["LoggingFactory", "SensitiveFieldsFilter", "get_logger"]
