"""Tests for configuration management."""

import httpx
import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_available_llm_providers,
    get_default_llm_model,
    get_environment,
    get_environment_info,
    get_generation_defaults,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("FORMFORGE_COMPONENT_CLASS", raising=False)
        result = get_environment(EnvVar.FORMFORGE_COMPONENT_CLASS)
        assert result == "MyFormComponent"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("FORMFORGE_FORM_TITLE", "From Env")
        result = get_environment(EnvVar.FORMFORGE_FORM_TITLE, override="Signup")
        assert result == "Signup"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("FORMFORGE_TARGET", "other")
        assert get_environment(EnvVar.FORMFORGE_TARGET) == "other"

    @pytest.mark.unit
    def test_none_default_for_api_keys(self, monkeypatch):
        """API keys default to None when not set."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert get_environment(EnvVar.OPENAI_API_KEY) is None

    @pytest.mark.unit
    def test_empty_env_value_is_kept(self, monkeypatch):
        """An empty variable is a value, not a request for the default."""
        monkeypatch.setenv("OPENAI_API_KEY", "")
        assert get_environment(EnvVar.OPENAI_API_KEY) == ""


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.FORMFORGE_TARGET)
        assert isinstance(info, EnvConfig)
        assert info.name == "FORMFORGE_TARGET"
        assert info.default == "lwc"
        assert info.category == "generation"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.OPENAI_API_KEY)
        assert "OpenAI" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        generation_vars = list_environment_variables("generation")
        assert EnvVar.FORMFORGE_TARGET in generation_vars
        assert EnvVar.FORMFORGE_COMPONENT_CLASS in generation_vars
        assert EnvVar.OPENAI_API_KEY not in generation_vars


class TestConvenienceFunctions:
    """Tests for the convenience accessors."""

    @pytest.mark.unit
    def test_generation_defaults(self, monkeypatch):
        monkeypatch.delenv("FORMFORGE_TARGET", raising=False)
        monkeypatch.setenv("FORMFORGE_COMPONENT_CLASS", "SignupForm")
        monkeypatch.delenv("FORMFORGE_FORM_TITLE", raising=False)
        assert get_generation_defaults() == {
            "target": "lwc",
            "class_name": "SignupForm",
            "form_title": "Generated Form",
        }

    @pytest.mark.unit
    def test_default_llm_model(self, monkeypatch):
        monkeypatch.delenv("LLM_MODEL", raising=False)
        assert get_default_llm_model() == "gpt-4.1-mini"
        assert get_default_llm_model("llama3.2") == "llama3.2"

    @pytest.mark.unit
    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("FORMFORGE_LOG_LEVEL", "DEBUG")
        assert get_log_level() == "DEBUG"


class TestAvailableProviders:
    """Tests for provider detection."""

    @pytest.mark.unit
    def test_openai_detected_by_key(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        def _refuse(*args, **kwargs):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(httpx, "get", _refuse)
        assert get_available_llm_providers() == ["openai"]

    @pytest.mark.unit
    def test_ollama_detected_when_running(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        class _Response:
            status_code = 200

        monkeypatch.setattr(httpx, "get", lambda *args, **kwargs: _Response())
        assert get_available_llm_providers() == ["ollama"]
