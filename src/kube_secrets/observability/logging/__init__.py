"""Observability – structured logging helpers."""
from kube_secrets.observability.logging.factory import LoggingFactory
from kube_secrets.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from kube_secrets.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "LoggingFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
