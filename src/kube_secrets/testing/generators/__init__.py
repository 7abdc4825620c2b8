"""Testing generators – property-based strategies."""
from kube_secrets.testing.generators.strategies import (
    secret_name_strategy,
    secret_tree_strategy,
)

__all__ = ["secret_name_strategy", "secret_tree_strategy"]
