"""Constants used throughout SVCS."""

# Version
VERSION = "0.1.0"

# Storage root (relative to the working tree)
DEFAULT_STORAGE_DIR = "vcs"

# Layout inside the storage root
CONFIG_FILE = "config.txt"
INDEX_FILE = "index.txt"
LOG_FILE = "log.txt"
COMMITS_DIR = "commits"

# Log entry format
COMMIT_PREFIX = "commit "
AUTHOR_PREFIX = "Author: "
ENTRY_SEPARATOR = "\n\n"

# Hash algorithm
HASH_ALGORITHM = "sha256"
HASH_LENGTH = 64  # SHA-256 produces 64 hex characters

# Environment variables
ENV_STORAGE_DIR = "SVCS_DIR"
ENV_DEBUG = "SVCS_DEBUG"

# Exit codes
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2
EXIT_INTERRUPTED = 130
