"""Secret volume identifiers and the hidden-name convention."""

from __future__ import annotations

from typing import NewType

SecretName = NewType("SecretName", str)
"""Logical secret; the base name of a mounted secret directory."""

Key = NewType("Key", str)
"""One item of a secret; the base name of a file."""

Value = bytes
"""Opaque file contents. Never decoded or validated by the walk."""

HIDDEN_PREFIX = "."
"""Marks names the volume plugin reserves (``..data``, ``..2024_01_01_...``)."""


def is_hidden(name: str) -> bool:
    """Return ``True`` when *name* starts with :data:`HIDDEN_PREFIX`."""
    return name.startswith(HIDDEN_PREFIX)


__all__ = ["HIDDEN_PREFIX", "Key", "SecretName", "Value", "is_hidden"]
