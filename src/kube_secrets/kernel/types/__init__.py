"""Kernel value types – public re-export surface."""

from kube_secrets.kernel.types.secrets import (
    HIDDEN_PREFIX,
    Key,
    SecretName,
    Value,
    is_hidden,
)

__all__ = ["HIDDEN_PREFIX", "Key", "SecretName", "Value", "is_hidden"]
