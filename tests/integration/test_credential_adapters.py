"""
Integration tests for credential adapters.
"""

import pytest
import os

from revolut_customer.adapters import EnvCredentialAdapter, MemoryCredentialAdapter
from revolut_customer.domain.session import Session


@pytest.fixture
def env_adapter(monkeypatch):
    """Env adapter with a prefix no other test uses."""
    for name in list(os.environ):
        if name.startswith("RCTEST_"):
            monkeypatch.delenv(name)
    return EnvCredentialAdapter(prefix="RCTEST_")


class TestEnvCredentialAdapter:
    """Test environment variable credential storage."""

    def test_store_and_retrieve(self, env_adapter, monkeypatch):
        """Test storing and retrieving credentials."""
        monkeypatch.setenv("RCTEST_ACCESS_TOKEN", "placeholder")

        env_adapter.store("access_token", "tok-123")

        assert os.environ["RCTEST_ACCESS_TOKEN"] == "tok-123"
        assert env_adapter.retrieve("access_token") == "tok-123"
        assert env_adapter.retrieve("missing") is None

    def test_list_keys(self, env_adapter, monkeypatch):
        """Test listing credential keys."""
        monkeypatch.setenv("RCTEST_KEY1", "value1")
        monkeypatch.setenv("RCTEST_KEY2", "value2")
        monkeypatch.setenv("RCTEST_OTHER", "value3")

        keys = env_adapter.list_keys()
        assert sorted(keys) == ["key1", "key2", "other"]
        assert sorted(env_adapter.list_keys(prefix="key")) == ["key1", "key2"]

    def test_delete(self, env_adapter, monkeypatch):
        """Test deleting credentials."""
        monkeypatch.setenv("RCTEST_TEMP_KEY", "temp_value")
        assert env_adapter.retrieve("temp_key") == "temp_value"

        assert env_adapter.delete("temp_key") is True
        assert env_adapter.retrieve("temp_key") is None
        assert env_adapter.delete("temp_key") is False

    def test_session_round_trip(self, env_adapter, monkeypatch):
        """Test saving, loading and clearing a session."""
        monkeypatch.setenv("RCTEST_USER_ID", "placeholder")
        monkeypatch.setenv("RCTEST_ACCESS_TOKEN", "placeholder")

        env_adapter.save_session(Session(user_id="usr", access_token="tok"))

        loaded = env_adapter.load_session()
        assert loaded.user_id == "usr"
        assert loaded.access_token == "tok"

        assert env_adapter.clear_session() is True
        assert env_adapter.load_session() is None
        assert env_adapter.clear_session() is False


class TestMemoryCredentialAdapter:
    """Test in-memory credential storage."""

    def test_partial_session_is_ignored(self):
        """Test that a session needs both user ID and token."""
        adapter = MemoryCredentialAdapter({"user_id": "usr"})
        assert adapter.load_session() is None

        adapter.store("access_token", "tok")
        assert adapter.load_session().access_token == "tok"

    def test_list_keys_prefix(self):
        """Test prefix filtering."""
        adapter = MemoryCredentialAdapter({"user_id": "u", "access_token": "t"})
        assert adapter.list_keys(prefix="user") == ["user_id"]
