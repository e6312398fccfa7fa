"""Exception hierarchy for configuration and dispatch failures."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for every error raised by componentgen."""


class InvalidConfigurationError(GenerationError, ValueError):
    """Unsupported provider, missing model or a malformed option."""


class MissingCredentialError(GenerationError):
    """The selected provider needs an API key and none was configured."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            f"A credential is required for provider '{provider}'. "
            "Pass api_key=... or set LLM_API_KEY (or OPENAI_API_KEY)."
        )
        self.provider = provider


class MissingEndpointError(GenerationError):
    """The selected provider needs a network location and none was configured."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            f"An endpoint is required for provider '{provider}'. "
            "Pass base_url=... or set LLM_BASE_URL (or OLLAMA_HOST)."
        )
        self.provider = provider


class UnsupportedProviderError(GenerationError):
    def __init__(self, provider: object) -> None:
        super().__init__(f"Unsupported provider: {provider!r}")
        self.provider = provider


class BackendRequestError(GenerationError):
    """
    Wraps whatever the underlying provider client raised.

    The original exception is kept both as ``original`` and as ``__cause__``
    so callers can still branch on e.g. ``openai.RateLimitError``.
    """

    def __init__(self, provider: str, original: BaseException) -> None:
        super().__init__(
            f"{provider} request failed: {type(original).__name__}: {original}"
        )
        self.provider = provider
        self.original = original
