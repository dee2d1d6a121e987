"""Async client for the Anthropic Messages API."""

from __future__ import annotations

import logging
from typing import Self

import httpx

from prom_analyzer.errors import ConfigError, DecodeError, InputError
from prom_analyzer.models import AnalysisRequest, AnalysisResult, ClaudeModel, MessageContent
from prom_analyzer.utils.decorators import handle_backend_errors

logger = logging.getLogger(__name__)

BACKEND = "Anthropic"
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 1024


class AnthropicClient:
    """Async client for the Anthropic Messages API.

    Args:
        base_url: API base URL including the version prefix
            (e.g., https://api.anthropic.com/v1).
        api_key: Anthropic API key, sent as x-api-key.
        timeout: Request timeout in seconds.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0) -> None:
        """Initialize the Anthropic client."""
        if not api_key:
            raise ConfigError("ANTHROPIC_API_KEY not set")
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context and open the httpx client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
                "x-api-key": self._api_key,
            },
            timeout=self._timeout,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context and close httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @handle_backend_errors(BACKEND, "sending message")
    async def send_message(
        self,
        model: ClaudeModel | str,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> AnalysisResult:
        """Send a single user message and return the completion.

        Args:
            model: One of the ClaudeModel identifiers.
            prompt: User message content.
            max_tokens: Output token limit.

        Returns:
            The decoded response, with at least one content block.

        Raises:
            RuntimeError: If client is not connected.
            InputError: If the model is unknown or the prompt is empty.
            TransportError: If Anthropic cannot be reached.
            BackendError: On a non-2xx reply.
            DecodeError: If the body is not a valid message or has no content.
        """
        if self._client is None:
            raise RuntimeError("Client not connected. Use async with context.")
        try:
            model = ClaudeModel(model)
        except ValueError as e:
            raise InputError(f"Unknown model: {model}") from e
        if not prompt:
            raise InputError("prompt must not be empty")

        request = AnalysisRequest(
            model=model,
            max_tokens=max_tokens,
            messages=[MessageContent(role="user", content=prompt)],
        )
        logger.debug("Sending %d-char prompt to %s (%s)", len(prompt), BACKEND, model.value)
        resp = await self._client.post("/messages", json=request.model_dump(mode="json"))

        resp.raise_for_status()

        try:
            result = AnalysisResult.model_validate(resp.json())
        except ValueError as e:
            raise DecodeError(
                f"Unexpected {BACKEND} response: {e}",
                BACKEND,
                body=resp.text,
            ) from e

        if not result.content:
            raise DecodeError(
                f"{BACKEND} response contained no content",
                BACKEND,
                body=resp.text,
            )

        logger.info(
            "%s usage: input=%d output=%d",
            BACKEND,
            result.usage.input_tokens,
            result.usage.output_tokens,
        )
        return result


__all__ = ["ANTHROPIC_VERSION", "DEFAULT_MAX_TOKENS", "AnthropicClient"]
