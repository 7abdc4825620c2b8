"""Shared fixtures for the kube-secrets test suite."""

from __future__ import annotations

import logging
import os
import pathlib
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture()
def kubelet_volume(tmp_path: pathlib.Path) -> pathlib.Path:
    """A secret mounted the way the kubelet writes it.

    ``mount/service`` holds the real files under a timestamped hidden
    directory, ``..data`` links to it and each key links through ``..data``.
    """
    service = tmp_path / "mount" / "service"
    timestamped = service / "..2024_05_01_10_00_00.123456789"
    timestamped.mkdir(parents=True)
    (timestamped / "hostname").write_bytes(b"db.local")
    (timestamped / "port").write_bytes(b"8080")
    os.symlink(timestamped.name, service / "..data")
    for key in ("hostname", "port"):
        os.symlink(f"..data/{key}", service / key)
    return tmp_path / "mount"
