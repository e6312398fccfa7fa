from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import ValidationError

from componentgen.llm_adapter.errors import InvalidConfigurationError
from componentgen.llm_adapter.models import GenerationProfile

_ALIASES = {
    "api_key": "credential",
    "apiToken": "credential",
    "base_url": "endpoint",
    "baseUrl": "endpoint",
    "max_tokens": "max_output_tokens",
    "maxTokens": "max_output_tokens",
}


def resolve_profile(
    options: Mapping[str, Any] | GenerationProfile | None = None,
    **overrides: Any,
) -> GenerationProfile:
    """
    Validate user options into an immutable GenerationProfile.

    Accepts a mapping and/or keyword arguments (keywords win). Besides the
    canonical names, ``api_key``/``apiToken``, ``base_url``/``baseUrl`` and
    ``max_tokens``/``maxTokens`` are understood.

    Only ``provider`` and ``model`` are enforced; a missing credential or
    endpoint surfaces on the first dispatch instead. Performs no I/O.
    """
    if isinstance(options, GenerationProfile):
        if not overrides:
            return options
        options = options.model_dump()

    data = _canonical(options or {})
    data.update(_canonical(overrides))

    try:
        return GenerationProfile.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfigurationError(_describe(exc)) from exc


def _canonical(options: Mapping[str, Any]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    spelled: dict[str, str] = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name in data:
            raise InvalidConfigurationError(
                f"Options {spelled[name]!r} and {key!r} both set {name!r}; pass only one"
            )
        data[name] = value
        spelled[name] = key
    return data


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "options"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid generation options: " + "; ".join(problems)


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def _optional_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class GeneratorSettings:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    temperature: float | None
    max_tokens: int | None
    request_timeout: float | None
    log_level: str

    @classmethod
    def from_env(cls) -> GeneratorSettings:
        return cls(
            provider=os.environ.get("LLM_PROVIDER", "openai"),
            model=os.environ.get("LLM_MODEL", ""),
            api_key=(
                os.environ.get("LLM_API_KEY", "")
                or os.environ.get("OPENAI_API_KEY", "")
                or None
            ),
            base_url=(
                os.environ.get("LLM_BASE_URL", "")
                or os.environ.get("OLLAMA_HOST", "")
                or None
            ),
            temperature=_optional_float("LLM_TEMPERATURE"),
            max_tokens=_optional_int("LLM_MAX_TOKENS"),
            request_timeout=_optional_float("LLM_REQUEST_TIMEOUT"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )

    def to_options(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "model": self.model,
            "api_key": self.api_key,
            "base_url": self.base_url,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "timeout": self.request_timeout,
        }
