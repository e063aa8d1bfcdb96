"""Centralized configuration management for formforge.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from formforge.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable, falling back to its default
    >>> class_name = get_environment(EnvVar.FORMFORGE_COMPONENT_CLASS)
    >>> api_key = get_environment(EnvVar.OPENAI_API_KEY)  # Returns str | None
    >>>
    >>> # Override at runtime
    >>> target = get_environment(EnvVar.FORMFORGE_TARGET, override="lwc")

Environment Variable Categories:
    llm: API keys and model selection for the suggestion service
    service: Local service URLs (Ollama)
    generation: Code generation defaults (target, class name, card title)
    logging: Log verbosity
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    get_available_llm_providers,
    get_default_llm_model,
    # Main interface
    get_environment,
    get_environment_info,
    get_generation_defaults,
    get_log_level,
    # Introspection
    list_environment_variables,
)

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
