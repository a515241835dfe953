"""Change detection against the most recent snapshot."""

import logging
from typing import Iterable, List, Optional

from svcs.constants import COMMITS_DIR
from svcs.storage.backend import Storage, join
from svcs.storage.hasher import hash_file

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Decides whether committing the staged files would be a no-op.

    A staged path counts as changed when the last snapshot has no file at the
    same relative location, or when the two files hash differently.
    """

    def __init__(self, storage: Storage, workspace: Storage):
        self.storage = storage
        self.workspace = workspace

    def has_changes(self, paths: Iterable[str], last_id: Optional[str]) -> bool:
        """Return True if any staged path differs from the last commit.

        With no previous commit everything is new, so the answer is True.
        Stops at the first changed path.
        """
        if not last_id:
            return True
        return any(self._is_changed(path, last_id) for path in paths)

    def changed_paths(self, paths: Iterable[str], last_id: Optional[str]) -> List[str]:
        """Return every staged path that differs from the last commit."""
        if not last_id:
            return list(paths)
        return [path for path in paths if self._is_changed(path, last_id)]

    def _is_changed(self, path: str, last_id: str) -> bool:
        stored = join(COMMITS_DIR, last_id, path)
        if not self.storage.is_file(stored):
            logger.debug("%s is new since %s", path, last_id[:7])
            return True

        changed = hash_file(self.storage, stored) != hash_file(self.workspace, path)
        if changed:
            logger.debug("%s modified since %s", path, last_id[:7])
        return changed
