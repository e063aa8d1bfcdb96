"""Abstract base class for LLM backends.

Defines the interface that all LLM provider implementations must follow,
plus the JSON handling they share.
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any

# Models without native JSON mode often wrap their answer in a code fence.
_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


@dataclass
class GenerationConfig:
    """Configuration for LLM text generation.

    Defaults suit short structured answers such as field suggestions.

    Attributes:
        temperature: Sampling temperature (0.0-2.0). Lower = more deterministic.
        max_tokens: Maximum tokens to generate in response.
        json_mode: Whether to enforce JSON output format.
        stop_sequences: Optional sequences that stop generation.
        top_p: Nucleus sampling parameter (0.0-1.0).
        seed: Optional seed for reproducible generation.
    """

    temperature: float = 0.2
    max_tokens: int = 512
    json_mode: bool = True
    stop_sequences: list[str] = field(default_factory=list)
    top_p: float = 1.0
    seed: int | None = None

    def as_json(self) -> "GenerationConfig":
        """Copy of this config with JSON mode enabled."""
        return replace(self, json_mode=True, stop_sequences=list(self.stop_sequences))


@dataclass
class GenerationResult:
    """Result from LLM text generation.

    Attributes:
        content: Generated text content.
        finish_reason: Why generation stopped ('stop', 'length', ...).
        usage: Token usage dict (prompt_tokens, completion_tokens, total_tokens).
        model: Model identifier that was used.
        raw_response: Provider-specific raw response for debugging.
    """

    content: str
    finish_reason: str
    usage: dict[str, int]
    model: str
    raw_response: Any = None


def build_messages(prompt: str, system_prompt: str | None = None) -> list[dict[str, str]]:
    """Chat messages for a prompt and optional system instruction."""
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})
    return messages


def parse_json_response(content: str) -> dict[str, Any]:
    """Parse a model response that should hold one JSON object.

    Args:
        content: Raw response text, optionally wrapped in a code fence.

    Returns:
        The parsed object.

    Raises:
        InvalidResponseError: If the text is not a JSON object.
    """
    text = content.strip()
    match = _FENCE.match(text)
    if match:
        text = match.group(1)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidResponseError(
            f"Failed to parse JSON response: {e}\nContent: {content[:500]}"
        ) from e

    if not isinstance(data, dict):
        raise InvalidResponseError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


class LLMBackend(ABC):
    """Abstract interface for LLM text generation backends.

    Implementations may use an external API (OpenAI) or a local model server
    (Ollama).

    Example:
        >>> backend = OpenAIBackend(model="gpt-4.1-mini")
        >>> result = backend.generate("Suggest a field type for 'Email'")
        >>> print(result.content)
    """

    @abstractmethod
    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        """Generate text from a prompt.

        Args:
            prompt: User prompt text.
            system_prompt: Optional system instruction for context.
            config: Generation configuration options.

        Returns:
            GenerationResult with generated content and metadata.

        Raises:
            LLMError: If generation fails.
            RateLimitError: If API rate limit is exceeded.
            ContextLengthError: If prompt exceeds context window.
        """

    def generate_json(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> dict[str, Any]:
        """Generate and parse a JSON object response.

        Args:
            prompt: User prompt requesting JSON output.
            system_prompt: Optional system instruction.
            config: Generation configuration (json_mode forced True).

        Returns:
            Parsed JSON dictionary.

        Raises:
            LLMError: If generation fails.
            InvalidResponseError: If response is not a JSON object.
        """
        json_config = (config or GenerationConfig()).as_json()
        result = self.generate(prompt, system_prompt=system_prompt, config=json_config)
        return parse_json_response(result.content)

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Get the model identifier (e.g., 'gpt-4.1-mini', 'qwen3')."""

    @property
    @abstractmethod
    def provider(self) -> str:
        """Get the provider identifier (e.g., 'openai', 'ollama')."""

    @property
    def name(self) -> str:
        """Get backend identifier for logging, as 'provider:model'."""
        return f"{self.provider}:{self.model_name}"

    @property
    @abstractmethod
    def supports_json_mode(self) -> bool:
        """Check if backend natively supports JSON mode."""

    @property
    @abstractmethod
    def context_window(self) -> int:
        """Get maximum context window size in tokens."""


class LLMError(Exception):
    """Base exception for LLM backend errors."""


class RateLimitError(LLMError):
    """Raised when API rate limit is exceeded.

    Attributes:
        retry_after: Suggested wait time in seconds before retry.
    """

    def __init__(self, message: str, retry_after: float | None = None):
        super().__init__(message)
        self.retry_after = retry_after


class ContextLengthError(LLMError):
    """Raised when prompt exceeds the model's context window."""


class InvalidResponseError(LLMError):
    """Raised when response cannot be parsed as expected format."""


class AuthenticationError(LLMError):
    """Raised when API authentication fails (invalid or missing key)."""


__all__ = [
    "LLMBackend",
    "GenerationConfig",
    "GenerationResult",
    "LLMError",
    "RateLimitError",
    "ContextLengthError",
    "InvalidResponseError",
    "AuthenticationError",
    "build_messages",
    "parse_json_response",
]
