"""Storage handles for SVCS.

Every core component reads and writes through a ``Storage`` handle instead of
touching the filesystem directly. A handle is rooted somewhere (the ``vcs/``
directory, the working tree) and addresses files by POSIX-style paths
relative to that root.

``FileSystemStorage`` is the real implementation. ``MemoryStorage`` keeps
everything in a dictionary so the engine can be exercised without a disk.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Dict, List, Set

from svcs.errors import StorageError


def join(*parts: str) -> str:
    """Join relative storage paths with forward slashes."""
    parts = [p for p in parts if p]
    if not parts:
        return ""
    return PurePosixPath(*parts).as_posix()


class Storage(ABC):
    """Abstract storage rooted at a directory.

    Paths are relative, use ``/`` as separator and never start with ``/``.
    The empty string addresses the root itself.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at ``path``."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if ``path`` is a regular file."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` is a directory."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read a file.

        Raises:
            StorageError: If the file is missing or unreadable
        """

    @abstractmethod
    def write_bytes(self, path: str, data: bytes, sync: bool = False) -> None:
        """Write a file, creating parent directories as needed.

        Args:
            path: Destination path
            data: Content to write
            sync: Flush and fsync before returning

        Raises:
            StorageError: If the file cannot be written
        """

    @abstractmethod
    def make_dir(self, path: str) -> None:
        """Create a directory (and parents). Existing directories are reused."""

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """Return the sorted names of the direct children of a directory.

        A missing directory yields an empty list.
        """

    def read_text(self, path: str) -> str:
        return self.read_bytes(path).decode("utf-8")

    def write_text(self, path: str, text: str) -> None:
        self.write_bytes(path, text.encode("utf-8"))

    def walk_files(self, path: str) -> List[str]:
        """Return every file beneath ``path``, relative to ``path``, sorted."""
        files = []
        for name in self.list_dir(path):
            child = join(path, name)
            if self.is_dir(child):
                files.extend(join(name, sub) for sub in self.walk_files(child))
            elif self.is_file(child):
                files.append(name)
        return sorted(files)


class FileSystemStorage(Storage):
    """Storage backed by a real directory.

    Attributes:
        root: Directory all paths are resolved against
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"FileSystemStorage({str(self.root)!r})"

    def _resolve(self, path: str) -> Path:
        return self.root / path if path else self.root

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def is_file(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def read_bytes(self, path: str) -> bytes:
        target = self._resolve(path)
        try:
            with open(target, "rb") as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Failed to read {target}: {e}") from e

    def write_bytes(self, path: str, data: bytes, sync: bool = False) -> None:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(data)
                if sync:
                    f.flush()
                    os.fsync(f.fileno())  # Ensure written to disk
        except OSError as e:
            raise StorageError(f"Failed to write {target}: {e}") from e

    def make_dir(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create directory {target}: {e}") from e

    def list_dir(self, path: str) -> List[str]:
        target = self._resolve(path)
        if not target.is_dir():
            return []
        try:
            return sorted(entry.name for entry in target.iterdir())
        except OSError as e:
            raise StorageError(f"Failed to list {target}: {e}") from e


class MemoryStorage(Storage):
    """In-memory storage, mainly for tests.

    Files live in a dict keyed by relative path. Directories are tracked
    explicitly so empty ones (a fresh snapshot directory) can exist.
    """

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}
        self.dirs: Set[str] = {""}

    def __repr__(self) -> str:
        return f"MemoryStorage({len(self.files)} files)"

    @staticmethod
    def _norm(path: str) -> str:
        return join(path) if path else ""

    def _add_parents(self, path: str) -> None:
        for parent in PurePosixPath(path).parents:
            self.dirs.add("" if str(parent) == "." else parent.as_posix())

    def exists(self, path: str) -> bool:
        return self.is_file(path) or self.is_dir(path)

    def is_file(self, path: str) -> bool:
        return self._norm(path) in self.files

    def is_dir(self, path: str) -> bool:
        return self._norm(path) in self.dirs

    def read_bytes(self, path: str) -> bytes:
        key = self._norm(path)
        if key not in self.files:
            raise StorageError(f"Failed to read {key}: no such file")
        return self.files[key]

    def write_bytes(self, path: str, data: bytes, sync: bool = False) -> None:
        key = self._norm(path)
        if key in self.dirs:
            raise StorageError(f"Failed to write {key}: is a directory")
        self._add_parents(key)
        self.files[key] = bytes(data)

    def make_dir(self, path: str) -> None:
        key = self._norm(path)
        if key in self.files:
            raise StorageError(f"Failed to create directory {key}: file exists")
        self._add_parents(key)
        self.dirs.add(key)

    def list_dir(self, path: str) -> List[str]:
        key = self._norm(path)
        if key not in self.dirs:
            return []
        prefix = f"{key}/" if key else ""
        names = set()
        for entry in list(self.files) + list(self.dirs):
            if entry and entry != key and entry.startswith(prefix):
                names.add(entry[len(prefix):].split("/", 1)[0])
        return sorted(names)
