"""Centralized environment configuration management for formforge.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Enum of variables with metadata (default, description, category)
- Consistent resolution: override > environment > default

Example:
    >>> from formforge.config import EnvVar, get_environment
    >>>
    >>> title = get_environment(EnvVar.FORMFORGE_FORM_TITLE)  # "Generated Form"
    >>> title = get_environment(EnvVar.FORMFORGE_FORM_TITLE, override="Signup")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

import httpx

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "FORMFORGE_TARGET").
        default: Default value if not set in environment.
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: str | None
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by formforge.

    Each member contains an EnvConfig with name, default, and description.
    Use with `get_environment()` to resolve values.

    Categories:
        - llm: API keys and model selection
        - service: Local service URLs
        - generation: Code generation defaults
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # LLM (field type suggestions)
    # -------------------------------------------------------------------------
    OPENAI_API_KEY = EnvConfig(
        name="OPENAI_API_KEY",
        default=None,
        description="OpenAI API key for field type suggestions",
        category="llm",
    )
    LLM_MODEL = EnvConfig(
        name="LLM_MODEL",
        default="gpt-4.1-mini",
        description="Model used by the field type suggestion service",
        category="llm",
    )

    # -------------------------------------------------------------------------
    # Service Configuration
    # -------------------------------------------------------------------------
    OLLAMA_HOST = EnvConfig(
        name="OLLAMA_HOST",
        default="http://localhost:11434",
        description="Ollama server URL for local LLM",
        category="service",
    )

    # -------------------------------------------------------------------------
    # Code Generation
    # -------------------------------------------------------------------------
    FORMFORGE_TARGET = EnvConfig(
        name="FORMFORGE_TARGET",
        default="lwc",
        description="Default code generation target",
        category="generation",
    )
    FORMFORGE_COMPONENT_CLASS = EnvConfig(
        name="FORMFORGE_COMPONENT_CLASS",
        default="MyFormComponent",
        description="Class name of the generated script component",
        category="generation",
    )
    FORMFORGE_FORM_TITLE = EnvConfig(
        name="FORMFORGE_FORM_TITLE",
        default="Generated Form",
        description="Card title of the generated markup",
        category="generation",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    FORMFORGE_LOG_LEVEL = EnvConfig(
        name="FORMFORGE_LOG_LEVEL",
        default="INFO",
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Main Interface
# =============================================================================


def get_environment(env_var: EnvVar, override: str | None = None) -> str | None:
    """Get environment variable value.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        The resolved string, or None for unset variables without a default.
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    return os.environ.get(config.name, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_default_llm_model(override: str | None = None) -> str:
    """Get the model name used for field type suggestions."""
    return get_environment(EnvVar.LLM_MODEL, override=override)


def get_log_level(override: str | None = None) -> str:
    """Get the configured CLI log level name."""
    return get_environment(EnvVar.FORMFORGE_LOG_LEVEL, override=override)


def get_generation_defaults() -> dict[str, str]:
    """Get the code generation defaults.

    Returns:
        Dict with "target", "class_name" and "form_title" keys.
    """
    return {
        "target": get_environment(EnvVar.FORMFORGE_TARGET),
        "class_name": get_environment(EnvVar.FORMFORGE_COMPONENT_CLASS),
        "form_title": get_environment(EnvVar.FORMFORGE_FORM_TITLE),
    }


def get_available_llm_providers() -> list[str]:
    """Get list of available LLM providers.

    Checks cloud providers by API key and Ollama by pinging its tags endpoint.

    Returns:
        List of provider names (e.g., ["openai", "ollama"]).
    """
    providers = []

    if get_environment(EnvVar.OPENAI_API_KEY):
        providers.append("openai")

    ollama_url = get_environment(EnvVar.OLLAMA_HOST)
    if ollama_url:
        try:
            response = httpx.get(f"{ollama_url}/api/tags", timeout=2.0)
            if response.status_code == 200:
                providers.append("ollama")
        except httpx.HTTPError:
            pass  # Ollama not running

    return providers


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (llm, service, generation, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_available_llm_providers",
    "get_default_llm_model",
    "get_generation_defaults",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
