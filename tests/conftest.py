"""Pytest configuration and shared fixtures."""

import itertools
from pathlib import Path
from typing import Callable, Tuple

import pytest

from svcs.core import Repository
from svcs.storage import FileSystemStorage, MemoryStorage, Storage


@pytest.fixture
def clock() -> Callable[[], int]:
    """Deterministic nanosecond clock, strictly increasing."""
    counter = itertools.count(1_700_000_000_000_000_000, 1_000)
    return lambda: next(counter)


@pytest.fixture(params=["memory", "filesystem"])
def backends(request, tmp_path: Path) -> Tuple[Storage, Storage]:
    """Repository storage and working tree, in memory or on disk."""
    if request.param == "memory":
        return MemoryStorage(), MemoryStorage()

    workspace_root = tmp_path / "workspace"
    workspace_root.mkdir()
    return FileSystemStorage(workspace_root / "vcs"), FileSystemStorage(workspace_root)


@pytest.fixture
def storage(backends) -> Storage:
    return backends[0]


@pytest.fixture
def workspace(backends) -> Storage:
    return backends[1]


@pytest.fixture
def repo(storage: Storage, workspace: Storage, clock) -> Repository:
    """Repository with a configured author."""
    repository = Repository(storage, workspace, clock=clock)
    repository.config.set("alice")
    return repository
