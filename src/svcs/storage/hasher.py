"""Content hashing for SVCS.

SHA-256 digests serve two purposes: naming commits and telling whether a
staged file differs from its copy in the last snapshot.
"""

import hashlib

from svcs.constants import HASH_ALGORITHM, HASH_LENGTH
from svcs.storage.backend import Storage


def hash_bytes(content: bytes) -> str:
    """Compute the SHA-256 hash of content.

    Args:
        content: Binary data to hash

    Returns:
        Hex string of hash (64 characters for SHA-256)

    Example:
        >>> hash_bytes(b"hello")[:8]
        '2cf24dba'
    """
    hasher = hashlib.new(HASH_ALGORITHM)
    hasher.update(content)
    return hasher.hexdigest()


def hash_file(storage: Storage, path: str) -> str:
    """Hash the bytes of a file held in ``storage``."""
    return hash_bytes(storage.read_bytes(path))


def commit_identifier(index_text: str, timestamp_ns: int) -> str:
    """Derive a commit identifier.

    The identifier is the hash of the staging index text followed by the
    decimal nanosecond timestamp. The timestamp makes identifiers unique even
    when the same content is committed twice, so identifiers are not
    reproducible across runs.
    """
    return hash_bytes(index_text.encode("utf-8") + str(timestamp_ns).encode("ascii"))


def is_valid_identifier(identifier: str) -> bool:
    """Check that a string looks like a commit identifier (64 hex chars)."""
    if not isinstance(identifier, str) or len(identifier) != HASH_LENGTH:
        return False
    return all(c in "0123456789abcdef" for c in identifier.lower())
