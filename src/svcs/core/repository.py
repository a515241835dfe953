"""Repository facade wiring the SVCS components to one storage root."""

import logging
import time
from pathlib import Path
from typing import Callable, List

from svcs.constants import COMMITS_DIR
from svcs.core.changes import ChangeDetector
from svcs.core.checkout import Checkout, CheckoutResult
from svcs.core.config import UserConfig
from svcs.core.staging import StagingIndex
from svcs.storage import CommitLog, CommitStore, FileSystemStorage, Storage
from svcs.storage.commit_log import Commit

logger = logging.getLogger(__name__)


class Repository:
    """All operations of one repository.

    Attributes:
        storage: Storage handle for the repository root (``vcs/``)
        workspace: Storage handle for the working tree
        config: Username configuration
        staging: Staging index
        commit_log: Commit history
        commit_store: Snapshot store
    """

    def __init__(
        self,
        storage: Storage,
        workspace: Storage,
        clock: Callable[[], int] = time.time_ns,
    ):
        self.storage = storage
        self.workspace = workspace
        self.config = UserConfig(storage)
        self.staging = StagingIndex(storage, workspace)
        self.detector = ChangeDetector(storage, workspace)
        self.commit_log = CommitLog(storage)
        self.commit_store = CommitStore(
            storage,
            workspace,
            staging=self.staging,
            detector=self.detector,
            commit_log=self.commit_log,
            clock=clock,
        )
        self._checkout = Checkout(storage, workspace, self.commit_store, self.commit_log)

    @classmethod
    def open(cls, storage_dir: Path, workspace_dir: Path) -> "Repository":
        """Open the repository at ``storage_dir``, creating it if needed."""
        storage = FileSystemStorage(storage_dir)
        storage.make_dir(COMMITS_DIR)
        logger.debug("Opened repository at %s (working tree %s)", storage_dir, workspace_dir)
        return cls(storage, FileSystemStorage(workspace_dir))

    def stage(self, path: str) -> str:
        return self.staging.stage(path)

    def tracked(self) -> List[str]:
        return self.staging.list()

    def commit(self, message: str) -> Commit:
        """Commit the staged files as the configured user."""
        return self.commit_store.create_commit(self.config.get() or "", message)

    def log(self) -> str:
        return self.commit_log.render(self.commit_store.has_commits())

    def checkout(self, identifier: str, preserve_paths: bool = False) -> CheckoutResult:
        return self._checkout.checkout(identifier, preserve_paths=preserve_paths)
