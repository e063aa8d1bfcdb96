"""Ollama local backend implementation.

Runs suggestions against a local Ollama server; no API key required.

Setup:
    1. Install Ollama: https://ollama.com
    2. Pull a model: `ollama pull qwen3`
    3. The server listens on OLLAMA_HOST (default http://localhost:11434)
"""

import logging
from typing import Any

import httpx
import ollama

from formforge.config import EnvVar, get_environment

from .base import (
    GenerationConfig,
    GenerationResult,
    LLMBackend,
    LLMError,
    build_messages,
)
from .model_spec import DEFAULT_OLLAMA_MODEL, LLMCapability, get_llm_spec

logger = logging.getLogger(__name__)


class OllamaBackend(LLMBackend):
    """Ollama local inference backend.

    Example:
        >>> backend = OllamaBackend(model="llama3.2")
        >>> data = backend.generate_json("Suggest a field type for 'Phone'")
    """

    def __init__(
        self,
        model: str = DEFAULT_OLLAMA_MODEL.spec.name,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """Initialize Ollama backend.

        Args:
            model: Model name (qwen3, llama3.2, gemma3).
            base_url: Ollama server URL. Defaults to OLLAMA_HOST.
            timeout: Request timeout in seconds (local inference can be slow).
        """
        self._spec = get_llm_spec(model)
        self._base_url = base_url or get_environment(EnvVar.OLLAMA_HOST)
        self._timeout = timeout
        self._client: ollama.Client | None = None

    def _get_client(self) -> ollama.Client:
        """Lazily create the Ollama client."""
        if self._client is None:
            self._client = ollama.Client(host=self._base_url, timeout=self._timeout)
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def model_name(self) -> str:
        return self._spec.name

    @property
    def provider(self) -> str:
        return "ollama"

    @property
    def supports_json_mode(self) -> bool:
        """Ollama constrains output via its format parameter."""
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
        """Generate text using the Ollama chat endpoint.

        Raises:
            LLMError: If the model is missing or the server is unreachable.
        """
        config = config or GenerationConfig()
        client = self._get_client()

        options: dict[str, Any] = {
            "temperature": config.temperature,
            "num_predict": config.max_tokens,
            "top_p": config.top_p,
        }
        if config.seed is not None:
            options["seed"] = config.seed
        if config.stop_sequences:
            options["stop"] = config.stop_sequences

        kwargs: dict[str, Any] = {
            "model": self._spec.name,
            "messages": build_messages(prompt, system_prompt),
            "options": options,
        }
        if config.json_mode and self.supports_json_mode:
            kwargs["format"] = "json"

        logger.debug(f"Requesting chat from {self.name} at {self._base_url}")
        try:
            response = client.chat(**kwargs)
        except ollama.ResponseError as e:
            if e.status_code == 404:
                raise LLMError(
                    f"Model '{self._spec.name}' not found. "
                    f"Pull it first with: ollama pull {self._spec.name}"
                ) from e
            raise LLMError(str(e)) from e
        except (httpx.HTTPError, ConnectionError) as e:
            raise LLMError(
                f"Cannot connect to Ollama server at {self._base_url}. "
                "Ensure Ollama is running: https://ollama.com"
            ) from e

        prompt_tokens = response.prompt_eval_count or 0
        completion_tokens = response.eval_count or 0
        return GenerationResult(
            content=response.message.content or "",
            finish_reason=response.done_reason or "stop",
            usage={
                "prompt_tokens": prompt_tokens,
                "completion_tokens": completion_tokens,
                "total_tokens": prompt_tokens + completion_tokens,
            },
            model=self._spec.name,
            raw_response=response,
        )


__all__ = ["OllamaBackend"]
