"""Snapshot creation for SVCS.

Every commit is a directory ``commits/<identifier>/`` holding a full copy of
each staged file at its relative path. Snapshots are self-contained: no
deltas, no shared blobs.
"""

import logging
import time
from typing import TYPE_CHECKING, Callable, List

from svcs.constants import COMMITS_DIR
from svcs.errors import (
    EmptyIndexError,
    EmptyMessageError,
    InvalidUsernameError,
    MissingAuthorError,
    NotFoundError,
    NothingToCommitError,
)
from svcs.storage.backend import Storage, join
from svcs.storage.commit_log import Commit, CommitLog, normalize_message
from svcs.storage.hasher import commit_identifier, is_valid_identifier

if TYPE_CHECKING:
    from svcs.core.changes import ChangeDetector
    from svcs.core.staging import StagingIndex

logger = logging.getLogger(__name__)


class CommitStore:
    """Creates and locates commit snapshots.

    Attributes:
        storage: Storage handle for the repository root
        workspace: Storage handle for the working tree
        staging: Staging index supplying the files to snapshot
        detector: Change detector used to reject no-op commits
        commit_log: History the new commit is recorded in
        clock: Returns the current time in nanoseconds
    """

    def __init__(
        self,
        storage: Storage,
        workspace: Storage,
        staging: "StagingIndex",
        detector: "ChangeDetector",
        commit_log: CommitLog,
        clock: Callable[[], int] = time.time_ns,
    ):
        self.storage = storage
        self.workspace = workspace
        self.staging = staging
        self.detector = detector
        self.commit_log = commit_log
        self.clock = clock
        self.commits_dir = COMMITS_DIR

    def create_commit(self, author: str, message: str) -> Commit:
        """Snapshot the staged files and record the commit.

        Args:
            author: Configured username
            message: Commit message, trimmed and stripped of blank lines

        Returns:
            The new commit

        Raises:
            EmptyMessageError: If the message is blank
            EmptyIndexError: If nothing is staged
            MissingAuthorError: If no username is configured
            InvalidUsernameError: If the username spans several lines
            NotFoundError: If a staged file is gone from the working tree
            NothingToCommitError: If no staged file changed since the last commit
            StorageError: If reading or writing storage fails
        """
        message = normalize_message(message or "")
        if not message:
            raise EmptyMessageError()

        paths = self.staging.paths()
        if not paths:
            raise EmptyIndexError()

        author = (author or "").strip()
        if not author:
            raise MissingAuthorError()
        if len(author.splitlines()) > 1:
            raise InvalidUsernameError()

        for path in paths:
            if not self.workspace.is_file(path):
                raise NotFoundError(path)

        last_id = self.commit_log.get_last()
        if not self.detector.has_changes(paths, last_id):
            logger.debug("No staged file changed since %s", last_id[:7])
            raise NothingToCommitError()

        identifier = commit_identifier(self.staging.text(), self.clock())
        snapshot = self.snapshot_dir(identifier)
        if self.storage.is_dir(snapshot):
            logger.warning("Snapshot directory %s already exists, reusing it", snapshot)
        self.storage.make_dir(snapshot)

        for path in paths:
            self._copy_into_snapshot(path, snapshot)

        commit = Commit(identifier=identifier, author=author, message=message)
        self.commit_log.append(commit)
        logger.debug("Created commit %s with %d file(s)", commit.short_id, len(paths))

        return commit

    def snapshot_dir(self, identifier: str) -> str:
        """Return the storage path of a commit's snapshot directory."""
        return join(self.commits_dir, identifier)

    def snapshot_exists(self, identifier: str) -> bool:
        if not is_valid_identifier(identifier):
            return False
        return self.storage.is_dir(self.snapshot_dir(identifier))

    def snapshot_files(self, identifier: str) -> List[str]:
        """Return every file in a snapshot, relative to the snapshot root."""
        return self.storage.walk_files(self.snapshot_dir(identifier))

    def has_commits(self) -> bool:
        """Check whether any snapshot directory exists."""
        return any(
            self.storage.is_dir(join(self.commits_dir, name))
            for name in self.storage.list_dir(self.commits_dir)
        )

    def _copy_into_snapshot(self, path: str, snapshot: str) -> None:
        content = self.workspace.read_bytes(path)
        self.storage.write_bytes(join(snapshot, path), content, sync=True)
        logger.debug("  %s -> %s (%d bytes)", path, snapshot, len(content))
