"""Backend factory for creating LLM backends from model specifications."""

from formforge.config import get_default_llm_model

from .base import LLMBackend
from .model_spec import LLMModel, LLMProviderType, LLMSpec, get_llm_spec


def create_llm_backend(
    model: str | LLMModel | LLMSpec | None = None,
    *,
    api_key: str | None = None,
    base_url: str | None = None,
    **kwargs,
) -> LLMBackend:
    """Create an LLM backend from a model specification.

    Routes to the backend class of the model's provider.

    Args:
        model: Model name, LLMModel or LLMSpec. Defaults to LLM_MODEL.
        api_key: API key for remote providers. Falls back to the environment.
        base_url: Optional custom endpoint.
        **kwargs: Passed to the backend constructor (e.g., timeout).

    Returns:
        Configured LLMBackend instance.

    Raises:
        ValueError: If model is unknown.
        AuthenticationError: If API key required but not provided.

    Example:
        >>> backend = create_llm_backend()
        >>> backend = create_llm_backend("qwen3")
        >>> backend = create_llm_backend(LLMModel.GPT_4_1, api_key="sk-...")
    """
    spec = get_llm_spec(model if model is not None else get_default_llm_model())

    if spec.provider == LLMProviderType.OPENAI:
        from .openai import OpenAIBackend

        return OpenAIBackend(
            api_key=api_key,
            model=spec.name,
            base_url=base_url,
            **kwargs,
        )

    if spec.provider == LLMProviderType.OLLAMA:
        from .ollama import OllamaBackend

        return OllamaBackend(model=spec.name, base_url=base_url, **kwargs)

    raise ValueError(f"Unsupported provider type: {spec.provider}")


__all__ = ["create_llm_backend"]
