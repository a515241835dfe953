"""Storage layer for SVCS.

This module provides the storage handles, content hashing, the commit log
and the snapshot store.
"""

from svcs.storage.backend import FileSystemStorage, MemoryStorage, Storage
from svcs.storage.commit_log import Commit, CommitLog
from svcs.storage.commit_store import CommitStore
from svcs.storage.hasher import commit_identifier, hash_bytes, hash_file

__all__ = [
    "Storage",
    "FileSystemStorage",
    "MemoryStorage",
    "Commit",
    "CommitLog",
    "CommitStore",
    "hash_bytes",
    "hash_file",
    "commit_identifier",
]
