"""Config settings – environment-based configuration."""
from kube_secrets.config.settings.base import Settings
from kube_secrets.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from kube_secrets.config.settings.volume import SecretsSettings

__all__ = ["EnvSettingsLoader", "SecretsSettings", "Settings", "SettingsLoader"]
