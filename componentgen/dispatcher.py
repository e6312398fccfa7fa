"""
Prompt dispatch -- the callable handed back to users.

    gen = create_generator(provider="openai", model="gpt-4o", api_key="sk-...")
    button = await gen("Create a react component of a button")
    card = await gen(["Create a ", " card showing ", ""], "dark", "a user avatar")

Every call flattens the template, prepends the system preamble, builds a
fresh backend for the profile and makes exactly one outbound request. The
reply text comes back untouched. Backend failures are re-raised as
BackendRequestError; nothing is retried and nothing falls back to the
other provider.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Mapping, Sequence

import httpx

from componentgen.config import GeneratorSettings, resolve_profile
from componentgen.llm_adapter.base import ChatBackend
from componentgen.llm_adapter.errors import BackendRequestError
from componentgen.llm_adapter.factory import build_backend
from componentgen.llm_adapter.models import ChatRequest, GenerationProfile
from componentgen.logging.logger import setup_logging
from componentgen.observability.metrics import generation_latency, generation_requests
from componentgen.prompting import build_messages, flatten_prompt

logger = logging.getLogger(__name__)


class ComponentGenerator:
    """
    Async callable bound to one immutable GenerationProfile.

    Each call is independent: one flattened prompt, one backend built for
    the profile, one outbound request, the reply text returned as is. Safe
    to await concurrently from many tasks.
    """

    def __init__(
        self,
        profile: GenerationProfile,
        backend_factory: Callable[[GenerationProfile], ChatBackend] = build_backend,
    ) -> None:
        self._profile = profile
        self._backend_factory = backend_factory

    @property
    def profile(self) -> GenerationProfile:
        return self._profile

    def build_request(self, user_prompt: str) -> ChatRequest:
        """Return the exact payload a dispatch of ``user_prompt`` would send."""
        return ChatRequest(
            model=self._profile.model,
            messages=build_messages(user_prompt),
            temperature=self._profile.temperature,
            max_output_tokens=self._profile.max_output_tokens,
        )

    async def __call__(self, fragments: str | Sequence[str], *values: Any) -> str:
        user_prompt = flatten_prompt(fragments, *values)
        request = self.build_request(user_prompt)

        backend = self._backend_factory(self._profile)
        logger.debug(
            "Dispatching prompt to %s",
            backend.name,
            extra={
                "_extra": {
                    "provider": backend.name,
                    "model": request.model,
                    "chars": len(user_prompt),
                }
            },
        )

        try:
            with generation_latency.labels(provider=backend.name).time():
                text = await backend.complete(request)
        except Exception as exc:
            generation_requests.labels(provider=backend.name, outcome="error").inc()
            raise BackendRequestError(backend.name, exc) from exc

        generation_requests.labels(provider=backend.name, outcome="success").inc()
        return text


def create_generator(
    options: Mapping[str, Any] | GenerationProfile | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    **overrides: Any,
) -> ComponentGenerator:
    """
    Resolve ``options`` once and return a reusable generator.

    Raises InvalidConfigurationError for an unknown provider or empty model.
    A missing credential/endpoint is only reported when the generator is
    first called.
    """
    profile = resolve_profile(options, **overrides)
    factory = build_backend
    if transport is not None:
        factory = functools.partial(build_backend, transport=transport)
    return ComponentGenerator(profile, backend_factory=factory)


def create_generator_from_env(configure_logging: bool = False) -> ComponentGenerator:
    """
    Build a generator from LLM_* environment variables.

    With ``configure_logging`` the componentgen logger is also set up at
    LOG_LEVEL with JSON output.
    """
    settings = GeneratorSettings.from_env()
    if configure_logging:
        setup_logging(level=settings.log_level)
    return create_generator(settings.to_options())
