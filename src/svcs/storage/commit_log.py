"""Commit history for SVCS.

The history is an append-only list of commit records kept newest first. In
memory it is a list of ``Commit`` objects; on disk it is ``log.txt``, a
sequence of blocks separated by blank lines::

    commit <identifier>
    Author: <author>
    <message>

The most recent commit is always the first block, which is what
``CommitLog.get_last`` relies on.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from svcs.constants import AUTHOR_PREFIX, COMMIT_PREFIX, ENTRY_SEPARATOR, LOG_FILE
from svcs.errors import NoCommitsError
from svcs.storage.backend import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Commit:
    """An immutable commit record.

    Attributes:
        identifier: 64 character hex identifier, also the snapshot directory name
        author: Username configured when the commit was made
        message: Trimmed, non-empty commit message
    """

    identifier: str
    author: str
    message: str

    @property
    def short_id(self) -> str:
        return self.identifier[:7]


def normalize_message(message: str) -> str:
    """Trim a message and drop its blank lines.

    A blank line separates log entries, so a stored message never contains one.
    """
    return "\n".join(line for line in message.splitlines() if line.strip()).strip()


def format_entry(commit: Commit) -> str:
    """Serialize one commit as a log block, trailing blank line included."""
    message = normalize_message(commit.message)
    return (
        f"{COMMIT_PREFIX}{commit.identifier}\n"
        f"{AUTHOR_PREFIX}{commit.author}\n"
        f"{message}{ENTRY_SEPARATOR}"
    )


def parse(text: str) -> List[Commit]:
    """Parse log text into commits, preserving order.

    Blocks whose first line lacks the ``commit`` prefix are malformed and
    skipped.
    """
    commits = []
    for block in text.split(ENTRY_SEPARATOR):
        block = block.strip("\n")
        if not block:
            continue

        lines = block.split("\n")
        if not lines[0].startswith(COMMIT_PREFIX):
            logger.warning("Skipping malformed log entry: %r", lines[0])
            continue

        identifier = lines[0][len(COMMIT_PREFIX):].strip()
        rest = lines[1:]
        author = ""
        if rest and rest[0].startswith(AUTHOR_PREFIX):
            author = rest[0][len(AUTHOR_PREFIX):]
            rest = rest[1:]

        commits.append(
            Commit(identifier=identifier, author=author, message="\n".join(rest).strip())
        )
    return commits


class CommitLog:
    """Newest-first commit history persisted in ``log.txt``.

    Attributes:
        storage: Storage handle for the repository root
        log_path: Path of the log file inside ``storage``
    """

    def __init__(self, storage: Storage):
        self.storage = storage
        self.log_path = LOG_FILE

    def entries(self) -> List[Commit]:
        """Return all commits, most recent first."""
        if not self.storage.is_file(self.log_path):
            return []
        return parse(self.storage.read_text(self.log_path))

    def append(self, commit: Commit) -> None:
        """Record a new commit at the front of the log.

        The whole file is rewritten: new entry first, then the previous
        entries in their existing order.
        """
        commits = [commit] + self.entries()
        self.storage.write_text(self.log_path, self.serialize(commits))
        logger.debug("Logged commit %s by %s", commit.short_id, commit.author)

    def get_last(self) -> Optional[str]:
        """Return the identifier of the most recent commit, or None."""
        commits = self.entries()
        if not commits:
            return None
        return commits[0].identifier

    def find(self, identifier: str) -> Optional[Commit]:
        """Look up a commit by its full identifier."""
        for commit in self.entries():
            if commit.identifier == identifier:
                return commit
        return None

    def render(self, has_commits: bool) -> str:
        """Produce the log for display.

        Args:
            has_commits: Whether the snapshot store holds any commit directory

        Raises:
            NoCommitsError: If there is nothing to show
        """
        commits = self.entries()
        if not has_commits or not commits:
            raise NoCommitsError()
        return self.serialize(commits)

    @staticmethod
    def serialize(commits: List[Commit]) -> str:
        return "".join(format_entry(commit) for commit in commits)
