"""Tests for durable local storage."""

import sqlite3
from pathlib import Path
from unittest.mock import patch

import pytest

from wiselife_app.errors import StorageError
from wiselife_app.persistence.local_storage import LocalStorage


class TestLocalStorage:
    """Test LocalStorage class."""

    def test_missing_key_returns_none(self, storage):
        """Test reading a key that was never written."""
        assert storage.get_item("authorizationToken") is None

    def test_set_and_get(self, storage):
        """Test a simple write and read."""
        storage.set_item("refreshToken", "r-1")
        assert storage.get_item("refreshToken") == "r-1"

    def test_set_overwrites(self, storage):
        """Test that writing an existing key replaces its value."""
        storage.set_item("authorizationToken", "old")
        storage.set_item("authorizationToken", "new")
        assert storage.get_item("authorizationToken") == "new"
        assert storage.keys() == ["authorizationToken"]

    def test_set_items_writes_all_keys(self, storage):
        """Test the multi-key write."""
        storage.set_items({"authorizationToken": "a", "test": "a"})
        assert storage.get_item("authorizationToken") == "a"
        assert storage.get_item("test") == "a"

    def test_non_string_value_rejected(self, storage):
        """Test that values must be strings, as in a browser's localStorage."""
        with pytest.raises(StorageError):
            storage.set_items({"challengeId": 7})
        assert storage.get_item("challengeId") is None

    def test_remove_item(self, storage):
        """Test removing a key."""
        storage.set_item("challengeId", "7")
        storage.remove_item("challengeId")
        assert storage.get_item("challengeId") is None

    def test_values_survive_reopen(self, tmp_path: Path):
        """Test persistence across instances backed by the same file."""
        db_path = tmp_path / "nested" / "storage.db"
        LocalStorage(db_path).set_item("refreshToken", "r-1")

        reopened = LocalStorage(db_path)
        assert reopened.get_item("refreshToken") == "r-1"

    def test_sqlite_error_becomes_storage_error(self, tmp_path: Path):
        """Test that SQLite failures surface as StorageError."""
        store = LocalStorage(tmp_path / "storage.db")

        with patch("wiselife_app.persistence.local_storage.sqlite3.connect",
                   side_effect=sqlite3.OperationalError("database is locked")):
            with pytest.raises(StorageError) as exc_info:
                store.get_item("authorizationToken")

        assert exc_info.value.operation == "get"
        assert exc_info.value.key == "authorizationToken"
