"""Staging area management for SVCS.

The staging index lists the files included in every commit. It is an ordered
set of paths stored one per line in ``index.txt``. Paths only ever get
added; the index survives commits.
"""

import logging
from pathlib import PurePosixPath
from typing import List

from svcs.constants import INDEX_FILE
from svcs.errors import (
    AlreadyTrackedError,
    EmptyIndexError,
    NotFoundError,
    OutsideWorkspaceError,
)
from svcs.storage.backend import Storage

logger = logging.getLogger(__name__)


class StagingIndex:
    """Ordered set of tracked file paths.

    Attributes:
        storage: Storage handle for the repository root (holds ``index.txt``)
        workspace: Storage handle for the working tree
        index_path: Path of the index file inside ``storage``
    """

    def __init__(self, storage: Storage, workspace: Storage):
        self.storage = storage
        self.workspace = workspace
        self.index_path = INDEX_FILE

    def stage(self, path: str) -> str:
        """Add a file to the staging index.

        Args:
            path: Path relative to the working tree

        Returns:
            Confirmation message

        Raises:
            OutsideWorkspaceError: If the path is absolute or escapes the tree
            NotFoundError: If no such file exists in the working tree
            AlreadyTrackedError: If the path is already staged
        """
        rel_path = self.normalize(path)

        if not self.workspace.is_file(rel_path):
            raise NotFoundError(path)

        staged = self.paths()
        if rel_path in staged:
            raise AlreadyTrackedError(rel_path)

        staged.append(rel_path)
        self._save(staged)
        logger.debug("Staged %s (%d tracked)", rel_path, len(staged))

        return f"The file '{rel_path}' is tracked."

    def list(self) -> List[str]:
        """Return the staged paths in the order they were added.

        Raises:
            EmptyIndexError: If nothing is staged
        """
        staged = self.paths()
        if not staged:
            raise EmptyIndexError("Add a file to the index.")
        return staged

    def paths(self) -> List[str]:
        """Return the staged paths, possibly empty."""
        return [line for line in self.text().split("\n") if line]

    def text(self) -> str:
        """Return the raw content of the index file."""
        if not self.storage.is_file(self.index_path):
            return ""
        return self.storage.read_text(self.index_path)

    def is_empty(self) -> bool:
        return not self.paths()

    def _save(self, paths: List[str]) -> None:
        self.storage.write_text(self.index_path, "".join(f"{p}\n" for p in paths))

    @staticmethod
    def normalize(path: str) -> str:
        """Normalize a user supplied path to POSIX form relative to the tree."""
        pure = PurePosixPath(str(path).replace("\\", "/"))
        if pure.is_absolute() or ".." in pure.parts:
            raise OutsideWorkspaceError(str(path))
        normalized = pure.as_posix()
        return "" if normalized == "." else normalized
