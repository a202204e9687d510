"""Tests for session management."""

import time
from unittest.mock import patch

import pytest

from api.session import (
    SessionSigner,
    InMemorySessionStore,
    get_session_signer,
    get_session_store,
    extract_session_id,
)


class TestSessionSigner:
    """Tests for SessionSigner class."""

    def test_sign_creates_token(self):
        """Test that sign creates a non-empty token."""
        signer = SessionSigner(secret_key="test-secret")
        session_id = "test-session-123"

        token = signer.sign(session_id)

        assert token
        assert token != session_id

    def test_unsign_returns_original_id(self):
        """Test that unsign returns the original session ID."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-456")

        assert signer.unsign(token, max_age=3600) == "test-session-456"

    def test_unsign_invalid_token_returns_none(self):
        """Test that unsign returns None for invalid tokens."""
        signer = SessionSigner(secret_key="test-secret")

        assert signer.unsign("invalid-token-data", max_age=3600) is None

    def test_unsign_wrong_secret_returns_none(self):
        """Test that unsign returns None when using wrong secret key."""
        token = SessionSigner(secret_key="secret-one").sign("test-session")

        assert SessionSigner(secret_key="secret-two").unsign(token, max_age=3600) is None

    def test_unsign_expired_token_returns_none(self):
        """Test that unsign returns None for expired tokens."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session")

        original_time = time.time

        def two_hours_later():
            return original_time() + 7200

        with patch("time.time", two_hours_later):
            result = signer.unsign(token, max_age=3600)

        assert result is None

    def test_unsign_without_max_age_ignores_token_age(self):
        """Test that idle expiry is left to the store when no max_age is given."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session")

        original_time = time.time

        with patch("time.time", lambda: original_time() + 7200):
            result = signer.unsign(token)

        assert result == "test-session"


class TestInMemorySessionStore:
    """Tests for InMemorySessionStore class."""

    @pytest.fixture
    def store(self):
        """Create a fresh session store."""
        return InMemorySessionStore(ttl=3600)

    def test_set_and_get_session(self, store):
        """Test setting and getting session data."""
        data = {"user": "test-user", "score": 100}
        store.set("test-session", data)

        assert store.get("test-session") == data

    def test_get_nonexistent_returns_none(self, store):
        """Test that getting a non-existent session returns None."""
        assert store.get("nonexistent-session") is None

    def test_delete_session(self, store):
        """Test deleting a session."""
        store.set("test-session", {"data": "value"})
        store.delete("test-session")

        assert store.get("test-session") is None

    def test_delete_nonexistent_session_no_error(self, store):
        """Test that deleting a non-existent session doesn't raise an error."""
        store.delete("nonexistent-session")

    def test_exists_check(self, store):
        """Test existence check."""
        assert store.exists("test-session") is False
        store.set("test-session", {"data": "value"})
        assert store.exists("test-session") is True

    def test_create_returns_signed_token(self, store):
        """Test that create stores the data under a verifiable token."""
        token = store.create({"test": "data"})

        # Signed tokens are longer than a bare UUID
        assert len(token) > 36
        assert extract_session_id(token) is not None
        assert store.get(token) == {"test": "data"}

    def test_session_expiration(self):
        """Test that expired sessions are not returned."""
        store = InMemorySessionStore(ttl=1)
        store.set("test-session", {"data": "value"})
        assert store.exists("test-session") is True

        time.sleep(1.5)

        assert store.get("test-session") is None

    def test_cleanup_expired(self):
        """Test cleanup of expired sessions."""
        store = InMemorySessionStore(ttl=1)
        store.set("session-1", {"data": 1})
        store.set("session-2", {"data": 2})

        time.sleep(1.5)
        store.set("session-3", {"data": 3})

        assert store.cleanup_expired() == 2
        assert store.exists("session-1") is False
        assert store.exists("session-3") is True

    def test_create_sweeps_expired_sessions(self):
        """Test that abandoned sessions are dropped when a new one is created."""
        store = InMemorySessionStore(ttl=1)
        for n in range(20):
            store.set(f"session-{n}", {"data": n})
        assert len(store) == 20

        time.sleep(1.5)
        token = store.create({"data": "fresh"})

        assert len(store) == 1
        assert store.get(token) == {"data": "fresh"}

    def test_overwrite_session(self, store):
        """Test that session data can be overwritten."""
        store.set("test-session", {"version": 1})
        store.set("test-session", {"version": 2})

        assert store.get("test-session") == {"version": 2}


class TestModuleFunctions:
    """Tests for module-level session functions."""

    def test_extract_session_id(self):
        """Test extracting session ID from signed token."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-123")

        with patch("api.session.get_session_signer", return_value=signer):
            assert extract_session_id(token) == "test-session-123"

    def test_extract_session_id_invalid_returns_none(self):
        """Test that extract_session_id returns None for invalid tokens."""
        assert extract_session_id("invalid-token") is None

    def test_get_session_signer_returns_singleton(self):
        """Test that get_session_signer returns the same instance."""
        assert get_session_signer() is get_session_signer()

    def test_get_session_store_returns_singleton(self):
        """Test that get_session_store returns the same instance."""
        assert get_session_store() is get_session_store()
