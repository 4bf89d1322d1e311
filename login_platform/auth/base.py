"""
Abstract Base Class for auth services.

Responsibilities:
    - Define the capability set the HTTP layer depends on
    - Support easy substitution (e.g., hashed passwords, signed tokens)
      without touching routes
"""

from abc import ABC, abstractmethod

from .schemas import LoginResponse

__all__ = ["BaseAuthService"]


class BaseAuthService(ABC):
    """Abstract base for pluggable auth services."""

    @abstractmethod
    def authenticate(self, username: str, password: str) -> LoginResponse:  # pragma: no cover
        """
        Check a username/password pair.

        Returns:
            LoginResponse: success=True with a token, or success=False with
            a generic message. Wrong credentials are not an exception.

        Raises:
            ValidationError: If username or password is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def generate_token(self, username: str) -> str:  # pragma: no cover
        """
        Issue a token for a user.

        Raises:
            ValidationError: If username is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def validate_token(self, token: str) -> bool:  # pragma: no cover
        """
        Check whether a token looks valid.

        Raises:
            ValidationError: If token is empty.
        """
        raise NotImplementedError
