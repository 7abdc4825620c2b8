"""Volume – load mounted Kubernetes secret volumes into memory.

    from kube_secrets.volume import walk

    secrets = walk("/etc/secrets")
    secrets.value("service", "port")
"""
from __future__ import annotations

import os
from importlib.resources.abc import Traversable

from kube_secrets.volume.entries import TraversalSource, WalkEntry
from kube_secrets.volume.resolver import Resolver, resolve_secret_name
from kube_secrets.volume.sources import LocalSource, VirtualSource
from kube_secrets.volume.store import Secrets


def load(source: TraversalSource) -> Secrets:
    """Walk *source* into a new :class:`Secrets`."""
    return Secrets().load(source)


def walk(directory: str | os.PathLike[str]) -> Secrets:
    """Walk a local directory into a new :class:`Secrets`.

    See :meth:`Secrets.walk` for the DEBUG events this emits.
    """
    return Secrets().walk(directory)


def walk_fs(root: Traversable) -> Secrets:
    """Walk a virtual filesystem into a new :class:`Secrets`."""
    return Secrets().walk_fs(root)


__all__ = [
    "LocalSource",
    "Resolver",
    "Secrets",
    "TraversalSource",
    "VirtualSource",
    "WalkEntry",
    "load",
    "resolve_secret_name",
    "walk",
    "walk_fs",
]
