# =============================================================================
# tests/unit/test_authentication.py
# Unit Tests for the manager access gate
# =============================================================================

import bcrypt
import pytest

from fuego_core.auth import (
    hash_password,
    is_manager_session,
    login_manager,
    logout_manager,
    verify_manager_password,
)


@pytest.fixture(scope="module")
def password_hash():
    # Low cost keeps the test fast
    return bcrypt.hashpw(b"brasa123", bcrypt.gensalt(rounds=4)).decode()


class TestVerifyPassword:
    def test_correct_password(self, password_hash):
        assert verify_manager_password("brasa123", password_hash)

    def test_wrong_password(self, password_hash):
        assert not verify_manager_password("errada", password_hash)

    def test_empty_inputs(self, password_hash):
        assert not verify_manager_password("", password_hash)
        assert not verify_manager_password("brasa123", "")

    def test_malformed_hash(self):
        assert not verify_manager_password("brasa123", "not-a-bcrypt-hash")

    def test_hash_password_round_trip(self):
        assert verify_manager_password("segredo", hash_password("segredo"))


class TestManagerSession:
    def test_login_and_logout(self, password_hash, session_store):
        assert not is_manager_session(session_store)

        assert login_manager("brasa123", password_hash, store=session_store)
        assert is_manager_session(session_store)

        logout_manager(session_store)
        assert not is_manager_session(session_store)

    def test_failed_login_closes_session(self, password_hash, session_store):
        login_manager("brasa123", password_hash, store=session_store)

        assert not login_manager("errada", password_hash, store=session_store)
        assert not is_manager_session(session_store)
