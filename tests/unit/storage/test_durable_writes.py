"""Tests for which writes are flushed to disk with fsync."""

from pathlib import Path
from typing import List

import pytest

from svcs.core import Repository
from svcs.storage import FileSystemStorage


@pytest.fixture
def disk_repo(tmp_path: Path) -> Repository:
    workspace_root = tmp_path / "workspace"
    workspace_root.mkdir()
    repository = Repository(
        FileSystemStorage(workspace_root / "vcs"),
        FileSystemStorage(workspace_root),
    )
    repository.config.set("alice")
    return repository


@pytest.fixture
def fsync_calls(monkeypatch) -> List[int]:
    """Record file descriptors passed to fsync instead of syncing."""
    calls: List[int] = []
    monkeypatch.setattr("svcs.storage.backend.os.fsync", calls.append)
    return calls


def test_commit_syncs_each_snapshot_copy(disk_repo: Repository, fsync_calls: List[int]) -> None:
    for name in ("a.txt", "b.txt", "src/c.txt"):
        disk_repo.workspace.write_bytes(name, name.encode())
        disk_repo.stage(name)
    fsync_calls.clear()

    commit = disk_repo.commit("first")

    # One per snapshot copy; index.txt and log.txt are not synced
    assert len(fsync_calls) == 3
    assert disk_repo.commit_log.get_last() == commit.identifier


def test_checkout_syncs_each_restored_file(disk_repo: Repository, fsync_calls: List[int]) -> None:
    for name in ("a.txt", "b.txt"):
        disk_repo.workspace.write_bytes(name, b"v1")
        disk_repo.stage(name)
    first = disk_repo.commit("first")
    disk_repo.workspace.write_bytes("a.txt", b"v2")
    disk_repo.commit("second")
    fsync_calls.clear()

    result = disk_repo.checkout(first.identifier)

    assert result.restored_files == ["a.txt", "b.txt"]
    assert len(fsync_calls) == 2


def test_config_and_index_writes_not_synced(disk_repo: Repository, fsync_calls: List[int]) -> None:
    disk_repo.config.set("bob")
    disk_repo.workspace.write_bytes("a.txt", b"hello")
    disk_repo.stage("a.txt")

    assert fsync_calls == []
    assert disk_repo.storage.read_text("index.txt") == "a.txt\n"


def test_write_text_never_syncs(tmp_path: Path, fsync_calls: List[int]) -> None:
    storage = FileSystemStorage(tmp_path)

    storage.write_text("index.txt", "a.txt\n")
    storage.write_text("log.txt", "commit x\nAuthor: a\nm\n\n")
    storage.write_bytes("blob", b"data", sync=True)

    assert len(fsync_calls) == 1
    assert (tmp_path / "index.txt").read_text() == "a.txt\n"
