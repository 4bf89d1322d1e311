"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() so handlers work against the
BaseAuthService contract rather than a concrete class.
"""

from fastapi import Request

from .base import BaseAuthService


def get_auth_service(request: Request) -> BaseAuthService:
    """
    Dependency that returns the auth service wired into this app instance.

    Args:
        request (Request): Automatically provided by FastAPI.

    Returns:
        BaseAuthService: The service stored on `app.state` by create_app().
    """
    return request.app.state.auth_service
