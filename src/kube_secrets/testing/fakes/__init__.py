"""Testing fakes – in-memory doubles for volumes and secret stores."""
from kube_secrets.testing.fakes.filesystem import (
    BrokenDirectory,
    InMemoryTraversable,
    kubernetes_layout,
)
from kube_secrets.testing.fakes.secrets import FakeSecretStore

__all__ = [
    "BrokenDirectory",
    "FakeSecretStore",
    "InMemoryTraversable",
    "kubernetes_layout",
]
