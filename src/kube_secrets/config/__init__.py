"""Config – environment settings and the secret store port."""

from kube_secrets.config.settings import EnvSettingsLoader, SecretsSettings, Settings, SettingsLoader
from kube_secrets.config.secrets import KubernetesSecretStore, SecretRef, SecretStore
from kube_secrets.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "KubernetesSecretStore",
    "MissingRequiredSettingError",
    "SecretRef",
    "SecretStore",
    "SecretsSettings",
    "Settings",
    "SettingsLoader",
]
