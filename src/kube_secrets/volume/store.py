"""Volume – Secrets, the secret -> key -> value store."""
from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from importlib.resources.abc import Traversable
from types import MappingProxyType
from typing import TYPE_CHECKING

from kube_secrets.kernel.types import Key, SecretName, Value

if TYPE_CHECKING:
    from kube_secrets.volume.entries import TraversalSource


class Secrets(Mapping[SecretName, Mapping[Key, Value]]):
    """Two-level mapping of secret name -> key -> value.

    Reads go through the :class:`~collections.abc.Mapping` interface; inner
    mappings are read-only views. Walks only ever add secrets or overwrite
    keys, so walking into a pre-populated store merges. Start from an empty
    store for a clean snapshot.

    Enumeration order is unspecified.

    Usage::

        secrets = Secrets().walk("/etc/secrets")
        port = secrets.value("service", "port")      # b"8080" or None
        service = secrets.get("service")             # mapping or None
    """

    def __init__(self, initial: Mapping[str, Mapping[str, Value]] | None = None) -> None:
        self._data: dict[SecretName, dict[Key, Value]] = {}
        for name, keys in (initial or {}).items():
            self.register(SecretName(name))
            for key, value in keys.items():
                self.put(SecretName(name), Key(key), value)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> Mapping[Key, Value]:
        return MappingProxyType(self._data[SecretName(name)])

    def __iter__(self) -> Iterator[SecretName]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._data)!r})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def value(self, name: str, key: str) -> Value | None:
        """Return the value of *key* in secret *name*, or ``None``."""
        keys = self._data.get(SecretName(name))
        if keys is None:
            return None
        return keys.get(Key(key))

    def text(self, name: str, key: str, encoding: str = "utf-8") -> str | None:
        """Decode a single value; ``None`` when absent."""
        value = self.value(name, key)
        return None if value is None else value.decode(encoding)

    def has(self, name: str, key: str) -> bool:
        keys = self._data.get(SecretName(name))
        return keys is not None and Key(key) in keys

    def names(self) -> list[SecretName]:
        return list(self._data)

    def keys_of(self, name: str) -> list[Key]:
        """Keys of secret *name*; raises :class:`KeyError` when it is absent."""
        return list(self._data[SecretName(name)])

    def count_keys(self) -> int:
        return sum(len(keys) for keys in self._data.values())

    def to_dict(self) -> dict[SecretName, dict[Key, Value]]:
        """Return a detached, mutable copy."""
        return {name: dict(keys) for name, keys in self._data.items()}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def register(self, name: SecretName) -> None:
        """Declare *name*; keeps existing keys when it is already present."""
        self._data.setdefault(name, {})

    def put(self, name: SecretName, key: Key, value: Value) -> None:
        """Store *value*, creating the secret on demand. Last write wins."""
        self._data.setdefault(name, {})[key] = bytes(value)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, source: "TraversalSource") -> "Secrets":
        """Walk *source* into this store and return ``self``.

        Raises :class:`~kube_secrets.kernel.errors.SecretsWalkError` on the
        first listing or read failure; keys loaded before it remain.
        """
        from kube_secrets.volume.resolver import Resolver

        Resolver(self).run(source)
        return self

    def walk(self, directory: str | os.PathLike[str]) -> "Secrets":
        """Walk a local directory into this store.

        Each visited entry is logged at DEBUG as ``secrets.walk.entry``.
        structlog's unconfigured defaults print every level, so call
        :meth:`~kube_secrets.observability.logging.LoggingFactory.configure`
        first to filter them.
        """
        from kube_secrets.volume.sources import LocalSource

        return self.load(LocalSource(directory))

    def walk_fs(self, root: Traversable) -> "Secrets":
        """Walk a virtual filesystem (package data, zip archive, in-memory tree)."""
        from kube_secrets.volume.sources import VirtualSource

        return self.load(VirtualSource(root))


__all__ = ["Secrets"]
