"""Tests for the error hierarchy."""

from pathlib import Path

from ai_cli_tool.core.client.errors import (
    AiCliError,
    ApiError,
    ConfigurationError,
    CredentialFileError,
    InvalidApiKeyError,
    MissingApiKeyError,
    TransportError,
    UpstreamError,
    format_error,
)


class TestErrors:
    """Test error types and formatting."""
    
    def test_hierarchy(self) -> None:
        """Test each error sits in the right family."""
        assert issubclass(MissingApiKeyError, ConfigurationError)
        assert issubclass(CredentialFileError, ConfigurationError)
        assert issubclass(UpstreamError, ApiError)
        assert issubclass(TransportError, ApiError)
        assert issubclass(ConfigurationError, AiCliError)
        assert issubclass(ApiError, AiCliError)
    
    def test_missing_api_key_message(self) -> None:
        """Test the default message names the set-key command."""
        error = MissingApiKeyError()
        assert str(error).startswith("API key not set.")
        assert "ai-cli-tool set-key <your-api-key>" in str(error)
    
    def test_invalid_api_key_message(self) -> None:
        """Test the invalid key error is a configuration error naming set-key."""
        error = InvalidApiKeyError()
        assert isinstance(error, ConfigurationError)
        assert "set-key" in format_error(error)
    
    def test_upstream_error_details(self) -> None:
        """Test status is kept on the error and in its dict form."""
        error = UpstreamError("rate limited", status=429)
        data = error.to_dict()
        assert data["message"] == "rate limited"
        assert data["details"] == {"status": 429}
        assert data["type"] == "UpstreamError"
    
    def test_credential_file_error_path(self) -> None:
        """Test the file path is recorded."""
        error = CredentialFileError("bad file", path=Path("/tmp/x.json"))
        assert error.details["path"] == "/tmp/x.json"
    
    def test_format_error(self) -> None:
        """Test user-facing prefixes."""
        assert format_error(UpstreamError("rate limited", status=429)) == "Error from OpenAI API: rate limited"
        assert format_error(TransportError("connection refused")) == "Error: connection refused"
        assert format_error(MissingApiKeyError()).startswith("Error: API key not set.")
