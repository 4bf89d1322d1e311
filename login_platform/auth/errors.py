"""
Error types raised by the auth service.
"""


class ValidationError(ValueError):
    """A required input (username, password or token) was empty."""
