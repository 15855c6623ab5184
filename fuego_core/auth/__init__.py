"""
Manager access gate for the Fuego Prime dashboard.

⚠️ PROTOTYPE ONLY - the reservations table is publicly writable.
"""

from .authentication import (
    verify_manager_password,
    login_manager,
    logout_manager,
    is_manager_session,
    hash_password,
)

__all__ = [
    "verify_manager_password",
    "login_manager",
    "logout_manager",
    "is_manager_session",
    "hash_password",
]
