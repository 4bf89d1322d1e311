"""
Credential store for Login Platform (in-memory implementation).

Responsibilities:
    - Hold the fixed set of (username, password, role) records
    - Answer lookups by username

Design:
    - The table is built once at construction and never written again, so
      concurrent readers need no locking.
    - Records are frozen pydantic models and the mapping is exposed through
      a read-only proxy.
    - For a real deployment, replace with a DB-backed implementation of
      BaseCredentialStore (hashed passwords, persistent storage).
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from ..auth.schemas import UserRecord
from .base import BaseCredentialStore

# Demo users seeded at startup.
DEFAULT_USERS = (
    UserRecord(username="admin", password="admin123", role="admin"),
    UserRecord(username="user", password="user123", role="user"),
)


class CredentialStore(BaseCredentialStore):
    def __init__(self, users: Iterable[UserRecord]):
        """
        Build the read-only table.

        Internal schema:
            self._users = {username: UserRecord}

        Raises:
            ValueError: If two records share a username.
        """
        table = {}
        for user in users:
            if user.username in table:
                raise ValueError(f"Duplicate username: {user.username!r}")
            table[user.username] = user
        self._users: Mapping[str, UserRecord] = MappingProxyType(table)

    @classmethod
    def default(cls) -> "CredentialStore":
        """Store seeded with the demo users (admin, user)."""
        return cls(DEFAULT_USERS)

    def lookup(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username)

    def usernames(self) -> List[str]:
        return list(self._users)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)
