"""
Chat-completion client for AI CLI Tool.

This module sends a single task prompt to an OpenAI-compatible
chat-completions endpoint and returns the trimmed answer. It performs
exactly one request per call: no retries, no streaming.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ... import USER_AGENT
from ...config.settings import AiCliSettings, DEFAULT_API_BASE_URL
from ...prompts.registry import DEFAULT_TARGET_LANGUAGE, TaskKind, get_task_prompt
from .errors import InvalidApiKeyError, MissingApiKeyError, TransportError, UpstreamError

if TYPE_CHECKING:
    from ...config.credentials import CredentialStore

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/chat/completions"


class ChatMessage(BaseModel):
    """OpenAI-compatible message format."""
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    """OpenAI-compatible request format."""
    model: str
    messages: List[ChatMessage]
    temperature: float


class ChatChoiceMessage(BaseModel):
    """Message part of a completion choice."""
    role: Optional[str] = None
    content: Optional[str] = None


class ChatChoice(BaseModel):
    """OpenAI-compatible choice format."""
    index: int = 0
    message: ChatChoiceMessage
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    """OpenAI-compatible response format, reduced to the fields we read."""
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[ChatChoice]


class CompletionClient:
    """Sends task prompts to the chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Bearer token for the API
            base_url: Base URL of the OpenAI-compatible API
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        if not api_key:
            raise MissingApiKeyError()
        # HTTP header values are encoded as ASCII
        if not api_key.isascii():
            raise InvalidApiKeyError()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
            "User-Agent": USER_AGENT,
        }
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self) -> "CompletionClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def build_request(
        self,
        task: TaskKind,
        text: str,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
    ) -> ChatCompletionRequest:
        """Build the request body for a task."""
        prompt = get_task_prompt(task)
        return ChatCompletionRequest(
            model=prompt.model,
            messages=[
                ChatMessage(role="system", content=prompt.system_prompt),
                ChatMessage(role="user", content=prompt.render_user_prompt(text, target_language)),
            ],
            temperature=prompt.temperature,
        )

    def complete(
        self,
        task: TaskKind,
        text: str,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
    ) -> str:
        """Run a task and return the model's answer.

        Args:
            task: Task to run
            text: Input text
            target_language: Target language code for translation

        Returns:
            The first choice's content with surrounding whitespace removed

        Raises:
            UpstreamError: If the API answered with an error or an unusable body
            TransportError: If no usable response was received
        """
        request = self.build_request(task, text, target_language)
        logger.debug(f"Sending {task.value} request to {self.base_url}{COMPLETIONS_PATH} with model {request.model}")

        try:
            response = self._client.post(COMPLETIONS_PATH, json=request.model_dump())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = self._map_http_error(e.response)
            logger.debug(f"Completion request failed: {error}")
            raise error from e
        except httpx.RequestError as e:
            message = str(e) or e.__class__.__name__
            logger.debug(f"Completion request could not be sent: {message}")
            raise TransportError(message, original_error=e) from e

        return self._extract_content(response)

    def _extract_content(self, response: httpx.Response) -> str:
        """Pull the answer text out of a successful response."""
        try:
            parsed = ChatCompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(
                f"Unexpected response from completion API: {e}",
                status=response.status_code,
                original_error=e,
            ) from e

        if not parsed.choices or parsed.choices[0].message.content is None:
            raise UpstreamError(
                "Completion API returned no message content",
                status=response.status_code,
            )
        return parsed.choices[0].message.content.strip()

    def _map_http_error(self, response: httpx.Response) -> UpstreamError:
        """Map an error response to an UpstreamError carrying the API's message."""
        message = _error_message_from_body(response)
        return UpstreamError(message, status=response.status_code)


def _error_message_from_body(response: httpx.Response) -> str:
    """Read ``error.message`` from an error body, falling back to the raw text."""
    try:
        body: Any = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    text = response.text.strip()
    if text:
        return f"HTTP {response.status_code}: {text}"
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


def create_completion_client(
    store: "CredentialStore",
    settings: AiCliSettings,
    transport: Optional[httpx.BaseTransport] = None,
) -> CompletionClient:
    """
    Create a completion client using the saved API key.

    Args:
        store: Credential store holding the API key
        settings: Application settings
        transport: Optional httpx transport, mainly for tests

    Returns:
        Configured CompletionClient

    Raises:
        MissingApiKeyError: If no API key has been saved
    """
    api_key = store.load()
    if not api_key:
        raise MissingApiKeyError()

    return CompletionClient(
        api_key=api_key,
        base_url=settings.api_base_url,
        timeout=settings.timeout,
        transport=transport,
    )


def complete_task(
    store: "CredentialStore",
    settings: AiCliSettings,
    task: TaskKind,
    text: str,
    target_language: str = DEFAULT_TARGET_LANGUAGE,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Create a client, run one task and close the client."""
    with create_completion_client(store, settings, transport=transport) as client:
        return client.complete(task, text, target_language)
