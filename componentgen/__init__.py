"""Turn natural-language prompts into React component source via OpenAI or Ollama."""

from componentgen.config import GeneratorSettings, resolve_profile
from componentgen.dispatcher import (
    ComponentGenerator,
    create_generator,
    create_generator_from_env,
)
from componentgen.llm_adapter import (
    BackendRequestError,
    GenerationError,
    GenerationProfile,
    InvalidConfigurationError,
    MissingCredentialError,
    MissingEndpointError,
    Provider,
    UnsupportedProviderError,
)
from componentgen.prompting import SYSTEM_PREAMBLE, flatten_prompt

__version__ = "0.1.0"

__all__ = [
    "BackendRequestError",
    "ComponentGenerator",
    "GenerationError",
    "GenerationProfile",
    "GeneratorSettings",
    "InvalidConfigurationError",
    "MissingCredentialError",
    "MissingEndpointError",
    "Provider",
    "SYSTEM_PREAMBLE",
    "UnsupportedProviderError",
    "create_generator",
    "create_generator_from_env",
    "flatten_prompt",
    "resolve_profile",
]
