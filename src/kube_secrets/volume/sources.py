"""Volume – traversal sources for local and virtual filesystems."""
from __future__ import annotations

import os
import pathlib
from collections.abc import Iterator
from importlib.resources.abc import Traversable
from pathlib import PurePath, PurePosixPath

from kube_secrets.kernel.errors import SecretsWalkError
from kube_secrets.kernel.types import Value
from kube_secrets.volume.entries import TraversalSource, WalkEntry


class LocalSource(TraversalSource):
    """Walk a directory on the local filesystem.

    Symlinks are not followed while descending; a symlink is reported as a
    non-directory and read through the link. The visible keys of a mounted
    secret are such symlinks, while ``..data`` (a symlink to a directory)
    is skipped as a hidden entry without being entered.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = pathlib.Path(root)

    @property
    def root(self) -> pathlib.Path:
        return self._root

    @property
    def anchor(self) -> PurePath:
        return self._root.resolve()

    @property
    def location(self) -> str:
        return str(self._root)

    def entries(self) -> Iterator[WalkEntry]:
        yield from self._walk(self._root, PurePosixPath())

    def read(self, entry: WalkEntry) -> Value:
        return self._root.joinpath(*entry.path.parts).read_bytes()

    def _walk(self, directory: pathlib.Path, relative: PurePosixPath) -> Iterator[WalkEntry]:
        for name, is_dir in self._list(directory):
            entry = WalkEntry(relative / name, is_dir)
            yield entry
            if is_dir:
                yield from self._walk(directory / name, entry.path)

    def _list(self, directory: pathlib.Path) -> list[tuple[str, bool]]:
        try:
            with os.scandir(directory) as it:
                children = [(d.name, d.is_dir(follow_symlinks=False)) for d in it]
        except OSError as exc:
            raise SecretsWalkError(str(directory), cause=exc) from exc
        return sorted(children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


class VirtualSource(TraversalSource):
    """Walk an :class:`importlib.resources.abc.Traversable` tree.

    Accepts anything traversable: ``importlib.resources.files(...)`` package
    data, :class:`zipfile.Path`, or an in-memory tree. Entry paths are
    relative to *root*, which plays the role of ``"."``.
    """

    def __init__(self, root: Traversable) -> None:
        self._root = root

    @property
    def root(self) -> Traversable:
        return self._root

    @property
    def anchor(self) -> PurePath:
        return PurePosixPath(self._root.name)

    @property
    def location(self) -> str:
        return str(self._root)

    def entries(self) -> Iterator[WalkEntry]:
        yield from self._walk(self._root, PurePosixPath())

    def read(self, entry: WalkEntry) -> Value:
        return self._root.joinpath(*entry.path.parts).read_bytes()

    def _walk(self, node: Traversable, relative: PurePosixPath) -> Iterator[WalkEntry]:
        for child in self._list(node, relative):
            entry = WalkEntry(relative / child.name, child.is_dir())
            yield entry
            if entry.is_dir:
                yield from self._walk(child, entry.path)

    def _list(self, node: Traversable, relative: PurePosixPath) -> list[Traversable]:
        try:
            return sorted(node.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            raise SecretsWalkError(str(relative), cause=exc) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


__all__ = ["LocalSource", "VirtualSource"]
