"""LLM integration layer for the field suggestion service.

Supported providers:
- OpenAI (GPT-4.1, GPT-4o)
- Ollama (local models)

Example:
    >>> from formforge.llm import create_llm_backend
    >>> backend = create_llm_backend("gpt-4.1-mini")
    >>> backend.generate_json("Suggest a field type for 'Email'")
"""

from .backend import (
    DEFAULT_MODEL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_MODEL,
    AuthenticationError,
    ContextLengthError,
    GenerationConfig,
    GenerationResult,
    InvalidResponseError,
    LLMBackend,
    LLMCapability,
    LLMError,
    LLMModel,
    LLMProviderType,
    LLMSpec,
    RateLimitError,
    create_llm_backend,
    get_llm_spec,
)

__all__ = [
    "create_llm_backend",
    # Backend types
    "LLMBackend",
    "GenerationConfig",
    "GenerationResult",
    # Model specification
    "LLMCapability",
    "LLMProviderType",
    "LLMSpec",
    "LLMModel",
    "get_llm_spec",
    # Defaults
    "DEFAULT_MODEL",
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_OLLAMA_MODEL",
    # Exceptions
    "LLMError",
    "RateLimitError",
    "ContextLengthError",
    "InvalidResponseError",
    "AuthenticationError",
]
