from componentgen.llm_adapter.base import ChatBackend
from componentgen.llm_adapter.errors import (
    BackendRequestError,
    GenerationError,
    InvalidConfigurationError,
    MissingCredentialError,
    MissingEndpointError,
    UnsupportedProviderError,
)
from componentgen.llm_adapter.factory import build_backend
from componentgen.llm_adapter.models import (
    ChatMessage,
    ChatRequest,
    GenerationProfile,
    Provider,
)
from componentgen.llm_adapter.ollama_provider import OllamaBackend
from componentgen.llm_adapter.openai_provider import OpenAIBackend

__all__ = [
    "BackendRequestError",
    "ChatBackend",
    "ChatMessage",
    "ChatRequest",
    "GenerationError",
    "GenerationProfile",
    "InvalidConfigurationError",
    "MissingCredentialError",
    "MissingEndpointError",
    "OllamaBackend",
    "OpenAIBackend",
    "Provider",
    "UnsupportedProviderError",
    "build_backend",
]
