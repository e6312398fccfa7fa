"""
Backend factory -- turns a resolved profile into a ready chat backend.

Supported providers:

  openai   OpenAI Chat Completions, or any compatible server via endpoint
           -- needs a credential
  ollama   Ollama /api/chat -- needs an endpoint, no credential

Required fields are checked here, at dispatch time, so that resolving a
profile stays free of side effects. Nothing is constructed (and no socket
opened) when a check fails.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx

from componentgen.llm_adapter.base import ChatBackend
from componentgen.llm_adapter.errors import (
    MissingCredentialError,
    MissingEndpointError,
    UnsupportedProviderError,
)
from componentgen.llm_adapter.models import GenerationProfile, Provider
from componentgen.llm_adapter.ollama_provider import OllamaBackend
from componentgen.llm_adapter.openai_provider import OpenAIBackend

logger = logging.getLogger(__name__)

BackendBuilder = Callable[[GenerationProfile, httpx.AsyncBaseTransport | None], ChatBackend]


def _build_openai(
    profile: GenerationProfile,
    transport: httpx.AsyncBaseTransport | None,
) -> ChatBackend:
    if not profile.credential:
        raise MissingCredentialError(Provider.OPENAI.value)
    return OpenAIBackend(
        api_key=profile.credential,
        base_url=profile.endpoint,
        timeout=profile.timeout,
        transport=transport,
    )


def _build_ollama(
    profile: GenerationProfile,
    transport: httpx.AsyncBaseTransport | None,
) -> ChatBackend:
    if not profile.endpoint:
        raise MissingEndpointError(Provider.OLLAMA.value)
    return OllamaBackend(
        base_url=profile.endpoint,
        timeout=profile.timeout,
        transport=transport,
    )


_BACKENDS: dict[Provider, BackendBuilder] = {
    Provider.OPENAI: _build_openai,
    Provider.OLLAMA: _build_ollama,
}


def build_backend(
    profile: GenerationProfile,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ChatBackend:
    """
    Return a fresh backend for ``profile.provider``.

    Args:
        profile:   Resolved generation profile.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        MissingCredentialError / MissingEndpointError when the provider's
        required field is absent, UnsupportedProviderError for any provider
        value without a registered builder.
    """
    builder = _BACKENDS.get(profile.provider)
    if builder is None:
        raise UnsupportedProviderError(profile.provider)

    backend = builder(profile, transport)
    logger.debug(
        "Chat backend ready: %s",
        backend.name,
        extra={
            "_extra": {
                "provider": backend.name,
                "model": profile.model,
                "endpoint": profile.endpoint or "provider-default",
            }
        },
    )
    return backend
