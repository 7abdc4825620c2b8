"""Kernel – framework-agnostic error hierarchy and value types."""

from kube_secrets.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    SecretNotFoundError,
    SecretsWalkError,
)
from kube_secrets.kernel.types import HIDDEN_PREFIX, Key, SecretName, Value, is_hidden

__all__ = [
    "HIDDEN_PREFIX",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "Key",
    "NotFoundError",
    "SecretName",
    "SecretNotFoundError",
    "SecretsWalkError",
    "Value",
    "is_hidden",
]
