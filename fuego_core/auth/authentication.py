"""
Manager access gate for the Fuego Prime dashboard.

⚠️ PROTOTYPE ONLY
The gate keeps a flag in session state after a bcrypt password check. The
reservations table itself is publicly writable, so this is a UI gate, not a
security boundary.
"""

from typing import Any, MutableMapping, Optional

import bcrypt

from fuego_core.logging import get_logger

logger = get_logger(__name__)

MANAGER_KEY = "manager_authenticated"
LOGIN_ERROR_MESSAGE = "Senha incorreta."
WELCOME_MESSAGE = "Bem-vindo ao sistema de gestão."


def _session(store: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    if store is not None:
        return store
    import streamlit as st
    return st.session_state


def verify_manager_password(password: str, password_hash: str) -> bool:
    """
    Check a password against the configured bcrypt hash.

    Returns:
        bool: False for an empty password, an empty hash or a malformed hash
    """
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError as e:
        logger.error(f"Manager password hash is invalid: {e}")
        return False


def login_manager(
    password: str,
    password_hash: str,
    store: Optional[MutableMapping[str, Any]] = None,
) -> bool:
    """Mark the session as a manager session when the password matches."""
    session = _session(store)
    ok = verify_manager_password(password, password_hash)
    session[MANAGER_KEY] = ok
    if ok:
        logger.info("Manager session opened")
    return ok


def logout_manager(store: Optional[MutableMapping[str, Any]] = None) -> None:
    _session(store)[MANAGER_KEY] = False


def is_manager_session(store: Optional[MutableMapping[str, Any]] = None) -> bool:
    """
    Check if the current session may change reservation status.

    Returns:
        bool: True if a manager logged in during this session
    """
    return bool(_session(store).get(MANAGER_KEY, False))


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt, for the ``[manager] password_hash`` secret.

    Example:
        >>> hash_password("mypassword123")
        '$2b$12$...'
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


if __name__ == "__main__":
    import getpass

    print("Manager password hash generator")
    print(hash_password(getpass.getpass("Password: ")))
