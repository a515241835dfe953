"""Exception hierarchy for SVCS.

Two families exist. ``UserError`` covers everything the user can fix by
running a different command (nothing staged, unknown commit, ...); its
``str()`` is the message shown to the user. ``StorageError`` wraps failures
of the underlying storage (permissions, disk errors) and ends the command.
"""


class SVCSError(Exception):
    """Base class for all SVCS errors."""


class UserError(SVCSError):
    """A recoverable condition reported to the user as a plain message."""


class StorageError(SVCSError):
    """Reading or writing repository storage failed."""


class NotFoundError(UserError):
    """A path does not exist in the working tree."""

    def __init__(self, path: str):
        super().__init__(f"Can't find '{path}'.")
        self.path = path


class AlreadyTrackedError(UserError):
    """A path is already in the staging index."""

    def __init__(self, path: str):
        super().__init__(f"The file '{path}' is already tracked.")
        self.path = path


class OutsideWorkspaceError(UserError):
    """A path points outside the working tree."""

    def __init__(self, path: str):
        super().__init__(f"'{path}' is outside the working tree.")
        self.path = path


class EmptyIndexError(UserError):
    """The staging index holds no paths."""

    def __init__(self, message: str = "Nothing to commit."):
        super().__init__(message)


class EmptyMessageError(UserError):
    """A commit was requested without a message."""

    def __init__(self):
        super().__init__("Message was not passed.")


class MissingAuthorError(UserError):
    """No username has been configured."""

    def __init__(self):
        super().__init__("Please, tell me who you are.")


class InvalidUsernameError(UserError):
    """A username spans more than one line."""

    def __init__(self):
        super().__init__("The username must be a single line.")


class NothingToCommitError(UserError):
    """Every staged file is identical to the last commit."""

    def __init__(self):
        super().__init__("Nothing to commit.")


class NoCommitsError(UserError):
    """The repository has no commits yet."""

    def __init__(self):
        super().__init__("No commits yet.")


class CommitNotFoundError(UserError):
    """No commit exists with the given identifier."""

    def __init__(self, identifier: str):
        super().__init__("Commit does not exist.")
        self.identifier = identifier
