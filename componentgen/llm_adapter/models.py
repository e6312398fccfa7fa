"""Data models for the LLM adapter layer."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Provider(str, Enum):
    OPENAI = "openai"
    OLLAMA = "ollama"


class GenerationProfile(BaseModel):
    """
    Resolved, immutable configuration shared by every dispatch of one generator.

    Only ``provider`` and ``model`` are checked here. Whether the provider's
    credential or endpoint is present is decided at dispatch time, and
    temperature / token limits are left for the backend to judge.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: Provider
    model: str
    credential: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("credential", "api_key", "apiToken"),
    )
    endpoint: str | None = Field(
        default=None,
        validation_alias=AliasChoices("endpoint", "base_url", "baseUrl"),
    )
    temperature: float | None = None
    max_output_tokens: int | None = Field(
        default=None,
        validation_alias=AliasChoices("max_output_tokens", "max_tokens", "maxTokens"),
    )
    timeout: float | None = None

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("model")
    @classmethod
    def _require_model(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("model must be a non-empty string")
        return value


class ChatMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class ChatRequest(BaseModel):
    """Provider-neutral payload handed to a backend."""

    model: str
    messages: list[ChatMessage]
    temperature: float | None = None
    max_output_tokens: int | None = None

    def message_dicts(self) -> list[dict[str, str]]:
        return [message.model_dump() for message in self.messages]
