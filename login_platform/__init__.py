"""
login_platform package initializer.
"""

from . import auth
from . import storage

__all__ = ["auth", "storage"]
