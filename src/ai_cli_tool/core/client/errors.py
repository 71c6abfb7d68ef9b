"""
Structured error system for the AI CLI Tool completion client.

Errors fall in two families: configuration problems detected before any
request is sent, and API failures raised by the remote service or the
transport underneath it.
"""

from pathlib import Path
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

SET_KEY_HINT = "Run `ai-cli-tool set-key <your-api-key>` first."


class AiCliError(Exception):
    """Base exception for all AI CLI Tool errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__
        }

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AiCliError):
    """Error related to local configuration or the stored credential."""


class MissingApiKeyError(ConfigurationError):
    """Error when no API key has been saved yet."""

    def __init__(self, message: str = f"API key not set. {SET_KEY_HINT}", **kwargs):
        super().__init__(message, **kwargs)


class InvalidApiKeyError(ConfigurationError):
    """Error when the saved API key cannot be sent in an HTTP header."""

    def __init__(
        self,
        message: str = "The saved API key contains characters that cannot be sent to the API. Run `ai-cli-tool set-key <your-api-key>` again.",
        **kwargs
    ):
        super().__init__(message, **kwargs)


class CredentialFileError(ConfigurationError):
    """Error when the credential file exists but cannot be understood."""

    def __init__(self, message: str, path: Optional[Path] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.details["path"] = str(path)


class ApiError(AiCliError):
    """Base class for failures talking to the completion API."""


class UpstreamError(ApiError):
    """The API answered, but with an error status or an unusable body."""

    def __init__(self, message: str, status: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status = status
        if status is not None:
            self.details["status"] = status


class TransportError(ApiError):
    """No response was received (connection failure, timeout, ...)."""


def format_error(error: AiCliError) -> str:
    """
    Create the user-facing line for an error.

    Args:
        error: The error to render

    Returns:
        Human-readable message with a prefix naming the error source
    """
    if isinstance(error, UpstreamError):
        return f"Error from OpenAI API: {error.message}"
    return f"Error: {error.message}"
