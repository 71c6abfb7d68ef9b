"""Tests for the credential store."""

import json
from pathlib import Path

import pytest

from ai_cli_tool.config.credentials import CredentialStore
from ai_cli_tool.core.client.errors import ConfigurationError, CredentialFileError


class TestCredentialStore:
    """Test cases for CredentialStore."""
    
    @pytest.fixture
    def store(self, tmp_path: Path) -> CredentialStore:
        return CredentialStore(tmp_path / ".ai-cli-tool-config.json")
    
    def test_load_missing_file(self, store: CredentialStore) -> None:
        """Test that a missing file means no key."""
        assert not store.exists
        assert store.load() is None
    
    def test_save_then_load(self, store: CredentialStore) -> None:
        """Test a saved key is returned unchanged."""
        store.save("abc123")
        assert store.exists
        assert store.load() == "abc123"
    
    def test_save_writes_readable_json(self, store: CredentialStore) -> None:
        """Test the file format is indented JSON with the apiKey field."""
        store.save("abc123")
        content = store.path.read_text(encoding="utf-8")
        assert json.loads(content) == {"apiKey": "abc123"}
        assert '\n  "apiKey": "abc123"\n' in content
    
    def test_save_is_idempotent(self, store: CredentialStore) -> None:
        """Test saving the same key twice leaves the same document."""
        store.save("abc123")
        store.save("abc123")
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"apiKey": "abc123"}
    
    def test_save_overwrites_previous_key(self, store: CredentialStore) -> None:
        """Test a new key replaces the old one."""
        store.save("old-key")
        store.save("new-key")
        assert store.load() == "new-key"
    
    def test_save_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test saving into a directory that does not exist yet."""
        store = CredentialStore(tmp_path / "nested" / "dir" / "config.json")
        path = store.save("abc123")
        assert path == store.path
        assert store.load() == "abc123"
    
    def test_load_malformed_file(self, store: CredentialStore) -> None:
        """Test invalid JSON raises a configuration error."""
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CredentialFileError) as exc_info:
            store.load()
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.path == store.path
    
    def test_load_invalid_utf8(self, store: CredentialStore) -> None:
        """Test bytes that are not UTF-8 raise a configuration error."""
        store.path.write_bytes(b'{"apiKey": "\xff\xfe"}')
        with pytest.raises(CredentialFileError) as exc_info:
            store.load()
        assert exc_info.value.path == store.path
    
    def test_load_non_object(self, store: CredentialStore) -> None:
        """Test a JSON document that is not an object is rejected."""
        store.path.write_text('["abc123"]', encoding="utf-8")
        with pytest.raises(CredentialFileError):
            store.load()
    
    def test_load_non_string_key(self, store: CredentialStore) -> None:
        """Test a non-string apiKey is rejected."""
        store.path.write_text('{"apiKey": 42}', encoding="utf-8")
        with pytest.raises(CredentialFileError):
            store.load()
    
    def test_load_without_key_field(self, store: CredentialStore) -> None:
        """Test a document without apiKey means no key."""
        store.path.write_text('{"other": "value"}', encoding="utf-8")
        assert store.load() is None
    
    def test_load_empty_key(self, store: CredentialStore) -> None:
        """Test an empty key is treated as absent."""
        store.save("")
        assert store.load() is None
