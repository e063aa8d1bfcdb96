"""Model specification system for LLM backends.

Registry of the models the suggestion service is tested with, their
providers, context windows and capabilities.
"""

from dataclasses import dataclass, field
from enum import Enum


class LLMCapability(Enum):
    """Capabilities that an LLM model may support."""

    JSON_MODE = "json_mode"  # Native JSON output enforcement
    STREAMING = "streaming"
    SYSTEM_PROMPT = "system_prompt"  # Dedicated system role
    SEED = "seed"  # Reproducible generation with seed


class LLMProviderType(Enum):
    """Available LLM backend providers."""

    OPENAI = "openai"
    OLLAMA = "ollama"


@dataclass(frozen=True)
class LLMSpec:
    """Specification for an LLM model.

    Attributes:
        name: Model identifier (e.g., 'gpt-4.1-mini', 'qwen3').
        provider: Backend provider type.
        context_window: Maximum context size in tokens.
        max_output_tokens: Maximum generation tokens.
        capabilities: Set of supported capabilities.
        description: Human-readable description.
        requires_api_key: Whether this model needs an API key.
        api_key_env_var: Environment variable name for API key.
    """

    name: str
    provider: LLMProviderType
    context_window: int
    max_output_tokens: int
    capabilities: frozenset[LLMCapability] = field(default_factory=frozenset)
    description: str = ""
    requires_api_key: bool = True
    api_key_env_var: str = ""

    def supports(self, capability: LLMCapability) -> bool:
        """Check if model supports a capability."""
        return capability in self.capabilities

    @property
    def is_local(self) -> bool:
        """Check if model runs locally."""
        return self.provider == LLMProviderType.OLLAMA

    @property
    def is_remote(self) -> bool:
        """Check if model uses remote API."""
        return not self.is_local


_CHAT_CAPABILITIES = frozenset(
    {
        LLMCapability.JSON_MODE,
        LLMCapability.STREAMING,
        LLMCapability.SYSTEM_PROMPT,
        LLMCapability.SEED,
    }
)


class LLMModel(Enum):
    """Registry of available LLM models."""

    # === OpenAI Models ===
    GPT_4_1_MINI = LLMSpec(
        name="gpt-4.1-mini",
        provider=LLMProviderType.OPENAI,
        context_window=128000,
        max_output_tokens=16384,
        capabilities=_CHAT_CAPABILITIES,
        description="OpenAI fast and efficient small model",
        api_key_env_var="OPENAI_API_KEY",
    )

    GPT_4_1 = LLMSpec(
        name="gpt-4.1",
        provider=LLMProviderType.OPENAI,
        context_window=128000,
        max_output_tokens=16384,
        capabilities=_CHAT_CAPABILITIES,
        description="OpenAI general purpose model",
        api_key_env_var="OPENAI_API_KEY",
    )

    GPT_4O_MINI = LLMSpec(
        name="gpt-4o-mini",
        provider=LLMProviderType.OPENAI,
        context_window=128000,
        max_output_tokens=16384,
        capabilities=_CHAT_CAPABILITIES,
        description="OpenAI low cost model",
        api_key_env_var="OPENAI_API_KEY",
    )

    # === Ollama Local Models ===
    OLLAMA_QWEN3 = LLMSpec(
        name="qwen3",
        provider=LLMProviderType.OLLAMA,
        context_window=32768,
        max_output_tokens=8192,
        capabilities=_CHAT_CAPABILITIES,
        description="Qwen3 via Ollama (local)",
        requires_api_key=False,
    )

    OLLAMA_LLAMA3_2 = LLMSpec(
        name="llama3.2",
        provider=LLMProviderType.OLLAMA,
        context_window=128000,
        max_output_tokens=4096,
        capabilities=_CHAT_CAPABILITIES,
        description="Meta Llama 3.2 via Ollama (local)",
        requires_api_key=False,
    )

    OLLAMA_GEMMA3 = LLMSpec(
        name="gemma3",
        provider=LLMProviderType.OLLAMA,
        context_window=32768,
        max_output_tokens=8192,
        capabilities=_CHAT_CAPABILITIES,
        description="Google Gemma 3 via Ollama (local)",
        requires_api_key=False,
    )

    @property
    def spec(self) -> LLMSpec:
        """Get the LLMSpec for this model."""
        return self.value

    @classmethod
    def by_name(cls, name: str) -> "LLMModel | None":
        """Look up model by name string, or None if not registered."""
        for model in cls:
            if model.spec.name == name:
                return model
        return None

    @classmethod
    def list_by_provider(cls, provider: LLMProviderType) -> list["LLMModel"]:
        """Get all models for a specific provider."""
        return [m for m in cls if m.spec.provider == provider]

    @classmethod
    def list_local(cls) -> list["LLMModel"]:
        """Get all local (Ollama) models."""
        return cls.list_by_provider(LLMProviderType.OLLAMA)

    @classmethod
    def list_remote(cls) -> list["LLMModel"]:
        """Get all remote API models."""
        return [m for m in cls if m.spec.is_remote]


# Default models for each provider
DEFAULT_OPENAI_MODEL = LLMModel.GPT_4_1_MINI
DEFAULT_OLLAMA_MODEL = LLMModel.OLLAMA_QWEN3

# Overall default
DEFAULT_MODEL = DEFAULT_OPENAI_MODEL


def get_llm_spec(model: str | LLMModel | LLMSpec) -> LLMSpec:
    """Resolve a model reference to its LLMSpec.

    Args:
        model: A model name string, LLMModel enum, or LLMSpec.

    Returns:
        The resolved LLMSpec.

    Raises:
        ValueError: If model name is not found.
    """
    if isinstance(model, LLMSpec):
        return model
    if isinstance(model, LLMModel):
        return model.spec

    found = LLMModel.by_name(model)
    if found:
        return found.spec

    raise ValueError(f"Unknown model: {model}")


__all__ = [
    "LLMCapability",
    "LLMProviderType",
    "LLMSpec",
    "LLMModel",
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_OLLAMA_MODEL",
    "DEFAULT_MODEL",
    "get_llm_spec",
]
