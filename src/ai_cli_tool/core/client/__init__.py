"""
Completion API client package for AI CLI Tool.

This package provides the chat-completions client and the error types it
raises.
"""

from .errors import (
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
from .completion import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    CompletionClient,
    complete_task,
    create_completion_client,
)

__all__ = [
    # Errors
    "AiCliError",
    "ApiError",
    "ConfigurationError",
    "CredentialFileError",
    "InvalidApiKeyError",
    "MissingApiKeyError",
    "TransportError",
    "UpstreamError",
    "format_error",
    # Client
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "CompletionClient",
    "complete_task",
    "create_completion_client",
]
