"""User accounts and the plain-text account store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopdesk.catalog import Catalog
    from shopdesk.console import Console

DEFAULT_PATH = "users.txt"
DEFAULT_ROLE = "user"


class UserExistsError(Exception):
    """Raised when registering an account that already exists."""


class User(ABC):
    """A signed-in user with a role-specific menu."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    @property
    def username(self) -> str:
        return self._username

    def login(self, name: str, password: str) -> bool:
        """Whether the given credentials match this user."""
        return self._username == name and self._password == password

    @abstractmethod
    def show_menu(self, catalog: Catalog, console: Console) -> None:
        """Run this user's interactive menu."""


class UserStore:
    """Accounts kept one per line as ``username password role``."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def authenticate(self, username: str, password: str) -> str | None:
        """The role of the first matching account, or None.

        Raises OSError (FileNotFoundError) if the store cannot be read.
        """
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                fields = line.split()
                if len(fields) < 3:
                    continue
                file_username, file_password, role = fields[:3]
                if file_username == username and file_password == password:
                    return role
        return None

    def register(self, username: str, password: str, role: str = DEFAULT_ROLE) -> None:
        """Append a new account; UserExistsError if these credentials already match one."""
        try:
            existing = self.authenticate(username, password)
        except FileNotFoundError:
            existing = None
        if existing is not None:
            raise UserExistsError(f"user {username!r} already exists")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{username} {password} {role}\n")