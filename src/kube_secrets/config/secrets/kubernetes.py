"""Config secrets – KubernetesSecretStore."""
from __future__ import annotations

import pathlib
from collections.abc import Mapping

from kube_secrets.config.secrets.port import SecretRef, SecretStore
from kube_secrets.config.settings import SecretsSettings
from kube_secrets.kernel.errors import SecretNotFoundError
from kube_secrets.kernel.types import Key, Value
from kube_secrets.observability.logging import get_logger
from kube_secrets.volume import LocalSource, Secrets, load, walk

logger = get_logger(__name__)


class KubernetesSecretStore(SecretStore):
    """Reads secrets from volumes mounted under *mount_root*.

    Each lookup walks only the requested secret's directory afresh, so
    rotated values are picked up on the next call and an unreadable sibling
    secret does not affect it. Values are decoded with *encoding* and, when
    *strip* is set, surrounding whitespace (typically a trailing newline) is
    removed.
    """

    def __init__(
        self,
        mount_root: str = "/etc/secrets",
        *,
        strip: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self._root = mount_root
        self._strip = strip
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: SecretsSettings) -> "KubernetesSecretStore":
        return cls(settings.mount_root, strip=settings.strip_values)

    @property
    def mount_root(self) -> str:
        return self._root

    def snapshot(self) -> Secrets:
        """Walk the whole mount and return the raw values."""
        return walk(self._root)

    async def get(self, ref: SecretRef) -> str:
        keys = self._read_secret(ref.path)
        value = None if keys is None else keys.get(Key(ref.key))
        if value is None:
            logger.info("secrets.lookup.missing", secret_name=ref.path, key=ref.key)
            raise SecretNotFoundError(ref.path, ref.key)
        return self._decode(value)

    async def get_all(self, path: str) -> dict[str, str]:
        keys = self._read_secret(path)
        if keys is None:
            logger.info("secrets.lookup.missing", secret_name=path)
            raise SecretNotFoundError(path)
        return {key: self._decode(value) for key, value in keys.items()}

    def _read_secret(self, path: str) -> Mapping[Key, Value] | None:
        # A missing mount root still surfaces as SecretsWalkError from the walk.
        root = pathlib.Path(self._root)
        directory = root / path
        if root.is_dir() and not directory.is_dir():
            return None
        source = LocalSource(directory)
        return load(source).get(source.anchor.name, {})

    def _decode(self, value: bytes) -> str:
        text = value.decode(self._encoding)
        return text.strip() if self._strip else text


__all__ = ["KubernetesSecretStore"]
