"""
Global pytest fixtures for the Login Platform test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide the demo CredentialStore for direct testing
    - Provide an AuthService wired to that store with a frozen clock, so
      issued tokens are predictable

Why an app factory?
    Using `create_app()` ensures each test gets its own store, service and
    settings, eliminating cross-test coupling.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from main import create_app
from login_platform.auth.service import AuthService
from login_platform.config import Settings, load_settings
from login_platform.storage.credential_store import CredentialStore

REPO_ROOT = Path(__file__).resolve().parents[1]

# 2023-11-14T22:13:20Z plus a fraction, to check truncation to whole seconds.
FIXED_NOW = 1_700_000_000.75


@pytest.fixture
def settings() -> Settings:
    """Settings read from the environment, pointed at the repo's static dir."""
    cfg = load_settings()
    cfg.STATIC_DIR = str(REPO_ROOT / "static")
    return cfg


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Uses the app factory to ensure clean, isolated state per test invocation.
    """
    app = create_app(settings=settings)
    return TestClient(app)


@pytest.fixture
def store() -> CredentialStore:
    """The demo store seeded with admin/admin123 and user/user123."""
    return CredentialStore.default()


@pytest.fixture
def auth_service(store: CredentialStore) -> AuthService:
    """
    Provide an AuthService wired to the store fixture with a frozen clock.

    Tokens issued by this service always end in "-1700000000".
    """
    return AuthService(store=store, clock=lambda: FIXED_NOW)
