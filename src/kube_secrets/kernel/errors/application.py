"""Application-layer errors."""

from __future__ import annotations

from kube_secrets.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern raised outside the volume walk itself."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
