"""Config secrets – secret reference and store ports."""
from kube_secrets.config.secrets.port import SecretRef, SecretStore
from kube_secrets.config.secrets.kubernetes import KubernetesSecretStore

__all__ = ["KubernetesSecretStore", "SecretRef", "SecretStore"]
