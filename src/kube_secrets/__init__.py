"""
kube_secrets – load mounted Kubernetes secret volumes into memory.

Usage::

    from kube_secrets import walk

    secrets = walk("/etc/secrets")
    secrets.value("service", "port")     # b"8080"
"""

from kube_secrets.kernel.errors import SecretNotFoundError, SecretsWalkError
from kube_secrets.kernel.types import Key, SecretName, Value
from kube_secrets.volume import LocalSource, Secrets, VirtualSource, load, walk, walk_fs

__version__ = "0.1.0"
__all__ = [
    "Key",
    "LocalSource",
    "SecretName",
    "SecretNotFoundError",
    "Secrets",
    "SecretsWalkError",
    "Value",
    "VirtualSource",
    "__version__",
    "load",
    "walk",
    "walk_fs",
]
