"""Config settings – SecretsSettings."""
from __future__ import annotations

import dataclasses

from kube_secrets.config.settings.base import Settings
from kube_secrets.config.validation import InvalidSettingValueError

_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class SecretsSettings(Settings):
    """Where the secret volume is mounted and how walks are logged.

    Read from ``KUBE_SECRETS_MOUNT_ROOT``, ``KUBE_SECRETS_LOG_LEVEL``,
    ``KUBE_SECRETS_LOG_JSON`` and ``KUBE_SECRETS_STRIP_VALUES``.
    """

    _prefix: dataclasses.ClassVar[str] = "KUBE_SECRETS"

    mount_root: str = "/etc/secrets"
    log_level: str = "INFO"
    log_json: bool = True
    strip_values: bool = True

    def _validate(self) -> None:
        if not self.mount_root:
            raise InvalidSettingValueError("mount_root", self.mount_root, "must not be empty")
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVELS)}"
            )
        self.log_level = level


__all__ = ["SecretsSettings"]
