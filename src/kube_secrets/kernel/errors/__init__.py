"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   └── NotFoundError
    │       └── SecretNotFoundError
    ├── ApplicationError       (application.py)
    └── InfrastructureError    (infrastructure.py)
        └── SecretsWalkError
"""

from kube_secrets.kernel.errors.application import ApplicationError
from kube_secrets.kernel.errors.base import BaseError
from kube_secrets.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    SecretNotFoundError,
)
from kube_secrets.kernel.errors.infrastructure import (
    InfrastructureError,
    SecretsWalkError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "SecretNotFoundError",
    "SecretsWalkError",
]
