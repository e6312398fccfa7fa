"""
Ollama chat backend.

Talks to ``POST {endpoint}/api/chat`` with streaming disabled. Only the
temperature is passed through ``options``; Ollama's token limit
(``num_predict``) is deliberately not derived from ``max_output_tokens``.
"""

from __future__ import annotations

from typing import Any

import httpx

from componentgen.llm_adapter.base import ChatBackend
from componentgen.llm_adapter.models import ChatRequest


class OllamaBackend(ChatBackend):
    """
    Ollama ``/api/chat`` adapter over ``httpx.AsyncClient``.

    Requires the server base URL. Non-2xx statuses raise
    ``httpx.HTTPStatusError``; a body without ``message.content`` raises
    ``KeyError``. Both are left for the dispatcher to wrap.
    """

    name = "ollama"

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def complete(self, request: ChatRequest) -> str:
        options: dict[str, Any] = {}
        if request.temperature is not None:
            options["temperature"] = request.temperature

        payload = {
            "model": request.model,
            "messages": request.message_dicts(),
            "stream": False,
            "options": options,
        }

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            resp = await client.post("/api/chat", json=payload)
            resp.raise_for_status()
            data = resp.json()

        return data["message"]["content"]
