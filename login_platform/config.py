"""
Runtime configuration for Login Platform
========================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else—import from this module instead.

An empty variable counts as unset. Integer variables that fail to parse
fall back to their default.

Server
------
- SERVER_HOST : bind host (default "localhost")
- SERVER_PORT : bind port (default 8080)
- STATIC_DIR  : directory served by the static catch-all (default "static")
- LOG_LEVEL   : root log level used when no handlers are configured (default "INFO";
                unknown level names fall back to it)

Auth
----
- JWT_SECRET  : reserved for a signed-token implementation (default "default-secret-key")
- TOKEN_TTL   : reserved token lifetime in minutes (default 60)

Database
--------
- DB_HOST, DB_PORT, DB_USERNAME, DB_PASSWORD, DB_NAME
  Reserved for a persistent user store; the demo keeps users in memory.
"""

import logging
import os


def _get_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except Exception:
        return default


def _get_log_level(name: str, default: str) -> str:
    level = _get_env(name, default).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


class Settings:
    def __init__(self):
        # -------- Server --------
        self.SERVER_HOST: str = _get_env("SERVER_HOST", "localhost")
        self.SERVER_PORT: int = _get_int("SERVER_PORT", 8080)
        self.STATIC_DIR: str = _get_env("STATIC_DIR", "static")
        self.LOG_LEVEL: str = _get_log_level("LOG_LEVEL", "INFO")

        # -------- Auth --------
        self.JWT_SECRET: str = _get_env("JWT_SECRET", "default-secret-key")
        self.TOKEN_TTL: int = _get_int("TOKEN_TTL", 60)

        # -------- Database --------
        self.DB_HOST: str = _get_env("DB_HOST", "localhost")
        self.DB_PORT: int = _get_int("DB_PORT", 5432)
        self.DB_USERNAME: str = _get_env("DB_USERNAME", "")
        self.DB_PASSWORD: str = _get_env("DB_PASSWORD", "")
        self.DB_NAME: str = _get_env("DB_NAME", "")

    @property
    def server_address(self) -> str:
        """Return "host:port" for logging and binding."""
        return f"{self.SERVER_HOST}:{self.SERVER_PORT}"


def load_settings() -> Settings:
    """Read the environment **now** and return a fresh Settings object."""
    return Settings()


settings = load_settings()
