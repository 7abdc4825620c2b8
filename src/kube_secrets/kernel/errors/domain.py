"""Domain errors – lookups against a loaded secret volume."""

from __future__ import annotations

from typing import Any

from kube_secrets.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request cannot be satisfied by the loaded secrets."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class SecretNotFoundError(NotFoundError):
    """A secret, or one key of it, is absent from the mounted volume."""

    default_code = "secret_not_found"

    def __init__(self, secret: str, key: str | None = None, **kwargs: Any) -> None:
        if key is None:
            super().__init__("Secret", secret, detail={"secret": secret}, **kwargs)
        else:
            super().__init__(
                "Secret key",
                f"{secret}/{key}",
                detail={"secret": secret, "key": key},
                **kwargs,
            )
        self.secret = secret
        self.key = key


__all__ = ["DomainError", "NotFoundError", "SecretNotFoundError"]
