"""Unit tests for secret name resolution and the streaming resolver."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import PurePath, PurePosixPath

import pytest
from structlog.testing import capture_logs

from kube_secrets.kernel.errors import SecretsWalkError
from kube_secrets.volume import Resolver, Secrets, TraversalSource, WalkEntry, resolve_secret_name


class ListSource(TraversalSource):
    """Replays a fixed entry list; file contents come from *files*."""

    def __init__(self, entries: list[tuple[str, bool]], files: dict[str, object], anchor: str = "root") -> None:
        self._entries = [WalkEntry(PurePosixPath(p), d) for p, d in entries]
        self._files = files
        self._anchor = anchor
        self.reads: list[str] = []

    @property
    def anchor(self) -> PurePath:
        return PurePosixPath(self._anchor)

    @property
    def location(self) -> str:
        return "list://test"

    def entries(self) -> Iterator[WalkEntry]:
        yield from self._entries

    def read(self, entry: WalkEntry) -> bytes:
        self.reads.append(str(entry.path))
        data = self._files[str(entry.path)]
        if isinstance(data, BaseException):
            raise data
        return data  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# resolve_secret_name
# ---------------------------------------------------------------------------


class TestResolveSecretName:
    def test_parent_directory_is_the_secret(self) -> None:
        assert resolve_secret_name(PurePosixPath("root/service/port")) == "service"

    def test_hidden_parent_resolves_to_grandparent(self) -> None:
        assert resolve_secret_name(PurePosixPath("root/service/..data/hostname")) == "service"

    def test_timestamped_directory_resolves_to_grandparent(self) -> None:
        path = PurePosixPath("/etc/secrets/tls/..2024_05_01_10_00_00.1/tls.crt")
        assert resolve_secret_name(path) == "tls"

    def test_file_under_root_takes_root_name(self) -> None:
        assert resolve_secret_name(PurePosixPath("/etc/secrets/service/port")) == "service"

    def test_looks_past_exactly_one_hidden_ancestor(self) -> None:
        assert resolve_secret_name(PurePosixPath("root/a/..outer/..inner/key")) == "..outer"

    def test_single_dot_prefix_also_counts_as_hidden(self) -> None:
        assert resolve_secret_name(PurePosixPath("root/app/.cache/key")) == "app"


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TestResolver:
    def test_registers_directories_and_files(self) -> None:
        source = ListSource(
            [("service", True), ("service/..data", True), ("service/..data/hostname", False), ("service/port", False)],
            {"service/..data/hostname": b"db.local", "service/port": b"8080"},
        )
        secrets = Resolver(Secrets()).run(source)
        assert secrets.to_dict() == {"service": {"port": b"8080", "hostname": b"db.local"}}

    def test_hidden_entries_are_never_registered(self) -> None:
        source = ListSource(
            [("..data", True), ("service", True), ("service/.hidden", False)],
            {"service/.hidden": b"x"},
        )
        secrets = Resolver(Secrets()).run(source)
        assert secrets.to_dict() == {"service": {}}
        assert source.reads == []

    def test_empty_directory_is_a_secret_without_keys(self) -> None:
        secrets = Resolver(Secrets()).run(ListSource([("empty-secret", True)], {}))
        assert secrets.to_dict() == {"empty-secret": {}}

    def test_hidden_parent_creates_secret_on_demand(self) -> None:
        source = ListSource([("..2024_01_01", True), ("..2024_01_01/token", False)], {"..2024_01_01/token": b"t"}, anchor="/var/run/service")
        secrets = Resolver(Secrets()).run(source)
        assert secrets.to_dict() == {"service": {"token": b"t"}}

    def test_last_write_wins_in_entry_order(self) -> None:
        source = ListSource(
            [("db", True), ("db/..old", True), ("db/..old/password", False), ("db/password", False)],
            {"db/..old/password": b"old", "db/password": b"new"},
        )
        secrets = Resolver(Secrets()).run(source)
        assert secrets.value("db", "password") == b"new"

    def test_read_failure_aborts_and_keeps_partial_results(self) -> None:
        source = ListSource(
            [("a", True), ("a/key", False), ("b", True), ("b/key", False), ("c", True), ("c/key", False)],
            {"a/key": b"1", "b/key": PermissionError("denied"), "c/key": b"3"},
        )
        secrets = Secrets()
        with pytest.raises(SecretsWalkError) as excinfo:
            Resolver(secrets).run(source)

        assert excinfo.value.path == "b/key"
        assert isinstance(excinfo.value.__cause__, PermissionError)
        assert secrets.to_dict() == {"a": {"key": b"1"}, "b": {}}
        assert source.reads == ["a/key", "b/key"]

    def test_non_os_errors_propagate_unchanged(self) -> None:
        source = ListSource([("a", True), ("a/key", False)], {"a/key": RuntimeError("boom")})
        with pytest.raises(RuntimeError, match="boom"):
            Resolver(Secrets()).run(source)


class TestResolverLogging:
    def test_emits_entry_events_without_values(self) -> None:
        source = ListSource(
            [("service", True), ("service/..data", True), ("service/..data/port", False)],
            {"service/..data/port": b"8080"},
        )
        with capture_logs() as logs:
            Resolver(Secrets()).run(source)

        entries = [e for e in logs if e["event"] == "secrets.walk.entry"]
        assert [e["path"] for e in entries] == ["service", "service/..data/port"]
        assert entries[0]["directory"] is True
        assert entries[1]["name"] == "port"
        assert all(e["root"] == "list://test" for e in entries)
        assert all(b"8080" not in e.values() and "8080" not in e.values() for e in logs)

    def test_emits_completion_event(self) -> None:
        source = ListSource([("a", True), ("a/k", False)], {"a/k": b"v"})
        with capture_logs() as logs:
            Resolver(Secrets()).run(source)

        completed = [e for e in logs if e["event"] == "secrets.walk.completed"]
        assert completed == [
            {"event": "secrets.walk.completed", "log_level": "debug", "root": "list://test", "secrets": 1, "keys": 1}
        ]

    def test_warns_before_propagating_failure(self) -> None:
        source = ListSource([("a", True), ("a/k", False)], {"a/k": OSError("io")})
        with capture_logs() as logs, pytest.raises(SecretsWalkError):
            Resolver(Secrets()).run(source)

        failed = [e for e in logs if e["event"] == "secrets.walk.failed"]
        assert len(failed) == 1
        assert failed[0]["log_level"] == "warning"
        assert failed[0]["path"] == "a/k"
