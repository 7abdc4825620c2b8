"""Volume – WalkEntry and the TraversalSource port."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Iterator
from pathlib import PurePath, PurePosixPath

from kube_secrets.kernel.types import Value


@dataclasses.dataclass(frozen=True, slots=True)
class WalkEntry:
    """One entry reported by a depth-first volume walk.

    ``path`` is relative to the traversal root, which is never reported
    itself. ``is_dir`` is the entry's apparent kind: a symlink to a
    directory counts as a directory only if the source follows it.
    """

    path: PurePosixPath
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


class TraversalSource(abc.ABC):
    """Port: a filesystem the resolver can walk and read from."""

    @property
    @abc.abstractmethod
    def anchor(self) -> PurePath:
        """Path that relative entry paths are joined onto for name resolution.

        Its base name becomes the secret name of files found directly under
        the root.
        """

    @property
    @abc.abstractmethod
    def location(self) -> str:
        """Human-readable root, used in log events."""

    @abc.abstractmethod
    def entries(self) -> Iterator[WalkEntry]:
        """Yield entries depth-first, siblings in lexical order.

        Hidden directories are descended into like any other.
        """

    @abc.abstractmethod
    def read(self, entry: WalkEntry) -> Value:
        """Return the full contents of a file entry."""


__all__ = ["TraversalSource", "WalkEntry"]
