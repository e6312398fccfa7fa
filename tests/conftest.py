from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import httpx
import pytest


class FakeAsyncOpenAI:
    """Stand-in for openai.AsyncOpenAI that records every call."""

    def __init__(self, recorder: OpenAIRecorder, **kwargs: Any) -> None:
        self._recorder = recorder
        self.kwargs = kwargs
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def __aenter__(self) -> FakeAsyncOpenAI:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self._recorder.closed += 1

    async def _create(self, **params: Any) -> SimpleNamespace:
        self._recorder.calls.append(params)
        if self._recorder.error is not None:
            raise self._recorder.error
        message = SimpleNamespace(role="assistant", content=self._recorder.reply)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


class OpenAIRecorder:
    def __init__(self) -> None:
        self.reply: str | None = "X"
        self.error: BaseException | None = None
        self.clients: list[FakeAsyncOpenAI] = []
        self.calls: list[dict[str, Any]] = []
        self.closed = 0

    def __call__(self, **kwargs: Any) -> FakeAsyncOpenAI:
        client = FakeAsyncOpenAI(self, **kwargs)
        self.clients.append(client)
        return client


@pytest.fixture
def fake_openai(monkeypatch: pytest.MonkeyPatch) -> OpenAIRecorder:
    recorder = OpenAIRecorder()
    monkeypatch.setattr(
        "componentgen.llm_adapter.openai_provider.AsyncOpenAI", recorder
    )
    return recorder


class OllamaServer:
    """httpx.MockTransport handler mimicking Ollama's /api/chat."""

    def __init__(self) -> None:
        self.reply = "Y"
        self.error: Exception | None = None
        self.status_code = 200
        self.requests: list[httpx.Request] = []

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        body = {
            "model": "llama3.1",
            "created_at": "2024-08-01T12:00:00Z",
            "message": {"role": "assistant", "content": self.reply},
            "done": True,
        }
        return httpx.Response(self.status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def ollama_server() -> OllamaServer:
    return OllamaServer()


@pytest.fixture
def clean_llm_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "LLM_PROVIDER",
        "LLM_MODEL",
        "LLM_API_KEY",
        "OPENAI_API_KEY",
        "LLM_BASE_URL",
        "OLLAMA_HOST",
        "LLM_TEMPERATURE",
        "LLM_MAX_TOKENS",
        "LLM_REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
