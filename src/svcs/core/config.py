"""Username configuration stored in ``config.txt``."""

from typing import Optional

from svcs.constants import CONFIG_FILE
from svcs.errors import InvalidUsernameError, MissingAuthorError
from svcs.storage.backend import Storage


class UserConfig:
    """Reads and writes the configured username."""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.config_path = CONFIG_FILE

    def get(self) -> Optional[str]:
        """Return the username, or None if none is configured."""
        if not self.storage.is_file(self.config_path):
            return None
        name = self.storage.read_text(self.config_path).strip()
        return name or None

    def set(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise MissingAuthorError()
        if len(name.splitlines()) > 1:
            raise InvalidUsernameError()
        self.storage.write_text(self.config_path, name)
        return self.describe()

    def describe(self) -> str:
        """Return the "The username is ..." line.

        Raises:
            MissingAuthorError: If no username is configured
        """
        name = self.get()
        if name is None:
            raise MissingAuthorError()
        return f"The username is {name}."
