"""
OpenAI-compatible chat backend.

Works with any API that speaks the OpenAI Chat Completions protocol; point
``endpoint`` at e.g. a Groq, OpenRouter or LM Studio base URL to use one.
Unlike the Ollama backend, the output token limit is forwarded here.
"""

from __future__ import annotations

from typing import Any

import httpx
from openai import AsyncOpenAI

from componentgen.llm_adapter.base import ChatBackend
from componentgen.llm_adapter.models import ChatRequest


class OpenAIBackend(ChatBackend):
    """
    Chat Completions adapter over ``openai.AsyncOpenAI``.

    A client is opened and closed per ``complete`` call with SDK retries
    disabled. Temperature and ``max_tokens`` are sent only when set. The
    first choice's message content is returned as is, except that a null
    content (e.g. a refusal or tool-call-only reply) comes back as ``""``.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> AsyncOpenAI:
        # One outbound call per dispatch: the SDK's own retry loop is off.
        kwargs: dict[str, Any] = {"api_key": self._api_key, "max_retries": 0}
        if self._base_url:
            kwargs["base_url"] = self._base_url
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["http_client"] = httpx.AsyncClient(transport=self._transport)
        return AsyncOpenAI(**kwargs)

    async def complete(self, request: ChatRequest) -> str:
        params: dict[str, Any] = {
            "model": request.model,
            "messages": request.message_dicts(),
        }
        # Unset values are omitted rather than sent as null.
        if request.temperature is not None:
            params["temperature"] = request.temperature
        if request.max_output_tokens is not None:
            params["max_tokens"] = request.max_output_tokens

        async with self._client() as client:
            response = await client.chat.completions.create(**params)

        return response.choices[0].message.content or ""
