"""
Core authentication logic.

This module handles validation of credentials and issuance of
placeholder session tokens. It uses an injected credential store, so
the in-memory demo table can be swapped for a database or external
provider without touching the HTTP layer.

Tokens have the form "dummy-token-<username>-<unix-seconds>". They are
not signed, carry no expiry and are not tracked server-side; two tokens
issued to the same user within one second are identical.
"""

import logging
import time
from typing import Callable

from ..storage.base import BaseCredentialStore
from .base import BaseAuthService
from .errors import ValidationError
from .schemas import LoginResponse

log = logging.getLogger("login.auth")

TOKEN_PREFIX = "dummy-token-"

LOGIN_SUCCESS_MESSAGE = "Login successful"
LOGIN_FAILURE_MESSAGE = "Invalid username or password"


class AuthService(BaseAuthService):
    """
    In-memory implementation of the auth contract.

    Holds no mutable state: each call reads the store and the clock only,
    so one instance can serve concurrent requests.
    """

    def __init__(self, store: BaseCredentialStore, clock: Callable[[], float] = time.time):
        """
        Args:
            store (BaseCredentialStore): Read-only user table.
            clock (Callable[[], float]): Wall-clock source in seconds; injectable for tests.
        """
        self.store = store
        self._clock = clock

    def authenticate(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate a user by validating their username and password.

        Rules:
            - Empty username or password is a malformed call -> ValidationError.
            - Unknown username and wrong password produce the same failure
              response, so callers cannot probe which usernames exist.
            - On a match, a fresh token is issued.

        Returns:
            LoginResponse: The login outcome.

        Raises:
            ValidationError: If username or password is empty.
        """
        if not username or not password:
            raise ValidationError("username and password are required")

        user = self.store.lookup(username)
        if user is None or user.password != password:
            return LoginResponse(success=False, message=LOGIN_FAILURE_MESSAGE)

        token = self.generate_token(username)
        return LoginResponse(success=True, message=LOGIN_SUCCESS_MESSAGE, token=token)

    def generate_token(self, username: str) -> str:
        if not username:
            raise ValidationError("username is required")

        timestamp = int(self._clock())
        log.debug("Issued token for %s at %d", username, timestamp)
        return f"{TOKEN_PREFIX}{username}-{timestamp}"

    def validate_token(self, token: str) -> bool:
        """
        Prefix-only check: any string starting with "dummy-token-" passes.

        The username and timestamp parts are not inspected, and there is
        no record of issued tokens to check against.
        """
        if not token:
            raise ValidationError("token is required")
        return token.startswith(TOKEN_PREFIX)
