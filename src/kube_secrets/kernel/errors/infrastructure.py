"""Infrastructure errors – filesystem failures while reading a volume."""

from __future__ import annotations

from typing import Any

from kube_secrets.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class SecretsWalkError(InfrastructureError):
    """A volume traversal stopped on its first failure.

    Raised both when a directory cannot be listed and when a file cannot be
    read. ``path`` is the failing location relative to the traversal root
    (or the directory handed to the walk). Whatever was loaded before the
    failure stays in the target store and is incomplete.
    """

    default_code = "secrets_walk_error"

    def __init__(
        self,
        path: str,
        message: str | None = None,
        *,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"Failed to walk '{path}'"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message, detail={"path": path}, cause=cause, **kwargs)
        self.path = path


__all__ = ["InfrastructureError", "SecretsWalkError"]
