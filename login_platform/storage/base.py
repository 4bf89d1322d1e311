"""
Base credential store interface for Login Platform.

Purpose:
    Define a small, stable lookup contract that multiple user backends
    (in-memory table, SQL, directory service) can implement without
    requiring changes to the auth service.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..auth.schemas import UserRecord


class BaseCredentialStore(ABC):
    """Abstract base class for credential stores."""

    @abstractmethod  # pragma: no cover
    def lookup(self, username: str) -> Optional[UserRecord]:
        """
        Retrieve a user record by username.

        Matching is exact and case-sensitive; implementations must not
        trim or normalize the key.

        Returns:
            Optional[UserRecord]: The record, or None when the user is unknown.
        """
        raise NotImplementedError
