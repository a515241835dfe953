"""Restoring the working tree from a snapshot.

By default files are restored flat: each file stored directly under the
snapshot root is copied to the root of the working tree under the same name.
Files in nested snapshot directories are only restored with
``preserve_paths=True``, which writes every file back to its relative path.
Nothing in the working tree is ever deleted.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from svcs.errors import CommitNotFoundError
from svcs.storage.backend import Storage, join
from svcs.storage.commit_log import Commit, CommitLog
from svcs.storage.commit_store import CommitStore

logger = logging.getLogger(__name__)


@dataclass
class CheckoutResult:
    """Outcome of a checkout.

    Attributes:
        commit: The commit that was checked out
        restored_files: Working tree paths that were written
        skipped_files: Snapshot files left alone (nested files in flat mode)
    """

    commit: Commit
    restored_files: List[str] = field(default_factory=list)
    skipped_files: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Switched to commit {self.commit.identifier}."


class Checkout:
    """Copies a commit's snapshot back into the working tree."""

    def __init__(
        self,
        storage: Storage,
        workspace: Storage,
        commit_store: CommitStore,
        commit_log: CommitLog,
    ):
        self.storage = storage
        self.workspace = workspace
        self.commit_store = commit_store
        self.commit_log = commit_log

    def checkout(self, identifier: str, preserve_paths: bool = False) -> CheckoutResult:
        """Restore the files of a commit.

        Args:
            identifier: Full commit identifier
            preserve_paths: Restore nested files at their relative paths

        Returns:
            CheckoutResult describing what was written

        Raises:
            CommitNotFoundError: If the snapshot directory or log entry is missing
            StorageError: If a file cannot be copied
        """
        identifier = (identifier or "").strip()
        commit = self.resolve(identifier)
        snapshot = self.commit_store.snapshot_dir(identifier)

        result = CheckoutResult(commit=commit)
        for rel_path in self.commit_store.snapshot_files(identifier):
            if not preserve_paths and "/" in rel_path:
                result.skipped_files.append(rel_path)
                continue

            content = self.storage.read_bytes(join(snapshot, rel_path))
            self.workspace.write_bytes(rel_path, content, sync=True)
            result.restored_files.append(rel_path)
            logger.debug("Restored %s from %s", rel_path, commit.short_id)

        if result.skipped_files:
            logger.warning(
                "Not restored (nested in snapshot, use --preserve-paths): %s",
                ", ".join(result.skipped_files),
            )

        return result

    def resolve(self, identifier: str) -> Commit:
        """Return the commit with this identifier.

        Both the snapshot directory and the log entry must exist.
        """
        if not self.commit_store.snapshot_exists(identifier):
            raise CommitNotFoundError(identifier)

        commit = self.commit_log.find(identifier)
        if commit is None:
            raise CommitNotFoundError(identifier)
        return commit
