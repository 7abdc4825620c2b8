"""Volume – Resolver: turns walk entries into secrets and keys.

Secret volumes update atomically: the real files live in a hidden,
timestamped directory, ``..data`` is a symlink to it, and every visible key
is a symlink through ``..data``::

    service/
    ├── ..2024_05_01_10_00_00.123456789/
    │   ├── hostname
    │   └── port
    ├── ..data -> ..2024_05_01_10_00_00.123456789
    ├── hostname -> ..data/hostname
    └── port -> ..data/port

Hidden entries are never registered, but the walk still enters hidden
directories. A file whose parent is hidden belongs to its grandparent, so
``service/..2024_.../port`` resolves to secret ``service`` key ``port``.
Exactly one hidden ancestor is looked past.
"""
from __future__ import annotations

from pathlib import PurePath
from typing import Any

from kube_secrets.kernel.errors import SecretsWalkError
from kube_secrets.kernel.types import Key, SecretName, is_hidden
from kube_secrets.observability.logging import get_logger
from kube_secrets.volume.entries import TraversalSource, WalkEntry
from kube_secrets.volume.store import Secrets

logger = get_logger(__name__)


def resolve_secret_name(path: PurePath) -> SecretName:
    """Return the secret a file at *path* belongs to.

    *path* must include the traversal anchor so that files directly under
    the root resolve to the root's own name.
    """
    parent = path.parent
    name = parent.name
    if is_hidden(name):
        name = parent.parent.name
    return SecretName(name)


class Resolver:
    """Streaming reducer from walk entries into a :class:`Secrets` store.

    Each entry is fully handled, including its read, before the next one is
    pulled from the source.
    """

    def __init__(self, secrets: Secrets) -> None:
        self._secrets = secrets

    @property
    def secrets(self) -> Secrets:
        return self._secrets

    def run(self, source: TraversalSource) -> Secrets:
        log = logger.bind(root=source.location)
        try:
            for entry in source.entries():
                self.apply(entry, source, log)
        except SecretsWalkError as exc:
            log.warning("secrets.walk.failed", path=exc.path, error=exc.message)
            raise
        log.debug(
            "secrets.walk.completed",
            secrets=len(self._secrets),
            keys=self._secrets.count_keys(),
        )
        return self._secrets

    def apply(self, entry: WalkEntry, source: TraversalSource, log: Any = logger) -> None:
        """Register one entry; hidden entries are ignored."""
        if is_hidden(entry.name):
            return

        log.debug(
            "secrets.walk.entry",
            path=str(entry.path),
            name=entry.name,
            directory=entry.is_dir,
        )
        if entry.is_dir:
            self._secrets.register(SecretName(entry.name))
            return

        secret = resolve_secret_name(source.anchor / entry.path)
        try:
            value = source.read(entry)
        except OSError as exc:
            raise SecretsWalkError(str(entry.path), cause=exc) from exc
        self._secrets.put(secret, Key(entry.name), value)


__all__ = ["Resolver", "resolve_secret_name"]
