"""Testing support – in-memory volumes, fake stores, Hypothesis strategies."""

from kube_secrets.testing.fakes import (
    BrokenDirectory,
    FakeSecretStore,
    InMemoryTraversable,
    kubernetes_layout,
)
from kube_secrets.testing.generators import secret_name_strategy, secret_tree_strategy

__all__ = [
    "BrokenDirectory",
    "FakeSecretStore",
    "InMemoryTraversable",
    "kubernetes_layout",
    "secret_name_strategy",
    "secret_tree_strategy",
]
