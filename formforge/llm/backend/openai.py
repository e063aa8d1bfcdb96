"""OpenAI backend implementation.

Uses the Chat Completions API of the official openai SDK.
"""

import logging
from typing import Any

import openai

from formforge.config import EnvVar, get_environment

from .base import (
    AuthenticationError,
    ContextLengthError,
    GenerationConfig,
    GenerationResult,
    LLMBackend,
    LLMError,
    RateLimitError,
    build_messages,
)
from .model_spec import DEFAULT_OPENAI_MODEL, LLMCapability, get_llm_spec

logger = logging.getLogger(__name__)


def translate_error(error: openai.OpenAIError) -> LLMError:
    """Map an openai SDK exception to the backend error taxonomy.

    Args:
        error: Exception raised by the SDK.

    Returns:
        The matching LLMError subclass instance.
    """
    if isinstance(error, openai.RateLimitError):
        retry_after = error.response.headers.get("retry-after")
        try:
            seconds = float(retry_after) if retry_after is not None else None
        except ValueError:
            seconds = None
        return RateLimitError(str(error), retry_after=seconds)
    if isinstance(error, openai.AuthenticationError):
        return AuthenticationError(str(error))
    if isinstance(error, openai.BadRequestError) and (
        error.code == "context_length_exceeded" or "context length" in str(error).lower()
    ):
        return ContextLengthError(str(error))
    return LLMError(str(error))


class OpenAIBackend(LLMBackend):
    """OpenAI GPT backend.

    Environment:
        OPENAI_API_KEY: API key (required if not passed to constructor).

    Example:
        >>> backend = OpenAIBackend()
        >>> data = backend.generate_json("Suggest a field type for 'Birthday'")
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_OPENAI_MODEL.spec.name,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 2,
    ):
        """Initialize OpenAI backend.

        Args:
            api_key: OpenAI API key. Falls back to OPENAI_API_KEY env var.
            model: Model name (gpt-4.1-mini, gpt-4.1, ...).
            base_url: Optional custom API endpoint.
            timeout: Request timeout in seconds.
            max_retries: SDK retry attempts for transient errors.

        Raises:
            AuthenticationError: If no API key available.
        """
        self._api_key = api_key or get_environment(EnvVar.OPENAI_API_KEY)
        if not self._api_key:
            raise AuthenticationError(
                "OpenAI API key required. Set OPENAI_API_KEY environment "
                "variable or pass api_key parameter."
            )

        self._spec = get_llm_spec(model)
        self._base_url = base_url
        self._timeout = timeout
        self._max_retries = max_retries
        self._client: openai.OpenAI | None = None

    def _get_client(self) -> openai.OpenAI:
        """Lazily create the OpenAI client."""
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=self._max_retries,
            )
        return self._client

    @property
    def model_name(self) -> str:
        return self._spec.name

    @property
    def provider(self) -> str:
        return "openai"

    @property
    def supports_json_mode(self) -> bool:
        return self._spec.supports(LLMCapability.JSON_MODE)

    @property
    def context_window(self) -> int:
        return self._spec.context_window

    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        """Generate text using the Chat Completions API.

        Raises:
            LLMError: If generation fails.
            RateLimitError: If rate limit exceeded.
            ContextLengthError: If prompt too long.
            AuthenticationError: If the key is rejected.
        """
        config = config or GenerationConfig()
        client = self._get_client()

        kwargs: dict[str, Any] = {
            "model": self._spec.name,
            "messages": build_messages(prompt, system_prompt),
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
            "top_p": config.top_p,
        }
        if config.json_mode and self.supports_json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if config.stop_sequences:
            kwargs["stop"] = config.stop_sequences
        if config.seed is not None and self._spec.supports(LLMCapability.SEED):
            kwargs["seed"] = config.seed

        logger.debug(f"Requesting completion from {self.name}")
        try:
            response = client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            raise translate_error(e) from e

        choice = response.choices[0]
        usage = response.usage
        return GenerationResult(
            content=choice.message.content or "",
            finish_reason=choice.finish_reason or "unknown",
            usage={
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
                "total_tokens": usage.total_tokens if usage else 0,
            },
            model=response.model,
            raw_response=response,
        )


__all__ = ["OpenAIBackend", "translate_error"]
