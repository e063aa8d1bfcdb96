"""Tests for LLM backend implementations."""

from types import SimpleNamespace

import httpx
import ollama
import openai
import pytest

from .base import (
    AuthenticationError,
    ContextLengthError,
    GenerationConfig,
    GenerationResult,
    InvalidResponseError,
    LLMError,
    RateLimitError,
    build_messages,
    parse_json_response,
)
from .factory import create_llm_backend
from .model_spec import (
    DEFAULT_MODEL,
    LLMCapability,
    LLMModel,
    LLMProviderType,
    LLMSpec,
    get_llm_spec,
)
from .ollama import OllamaBackend
from .openai import OpenAIBackend, translate_error

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _status_error(cls, status: int, message: str, headers=None, body=None):
    response = httpx.Response(status, headers=headers or {}, request=_REQUEST)
    return cls(message, response=response, body=body)


class RecordingCompletions:
    """Stands in for client.chat.completions."""

    def __init__(self, content: str = "{}", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[
                SimpleNamespace(
                    message=SimpleNamespace(content=self.content),
                    finish_reason="stop",
                )
            ],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=8, total_tokens=20),
            model="gpt-4.1-mini",
        )


def _openai_backend(completions: RecordingCompletions) -> OpenAIBackend:
    backend = OpenAIBackend(api_key="test-key-12345")
    backend._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return backend


class TestLLMSpec:
    """Tests for LLMSpec dataclass."""

    @pytest.mark.unit
    def test_spec_capabilities(self):
        spec = LLMSpec(
            name="test",
            provider=LLMProviderType.OPENAI,
            context_window=128000,
            max_output_tokens=4096,
            capabilities=frozenset({LLMCapability.JSON_MODE}),
        )
        assert spec.supports(LLMCapability.JSON_MODE)
        assert not spec.supports(LLMCapability.SEED)

    @pytest.mark.unit
    def test_spec_is_local(self):
        assert LLMModel.OLLAMA_QWEN3.spec.is_local
        assert not LLMModel.OLLAMA_QWEN3.spec.requires_api_key
        assert LLMModel.GPT_4_1_MINI.spec.is_remote


class TestLLMModel:
    """Tests for LLMModel enum registry."""

    @pytest.mark.unit
    def test_default_model(self):
        assert DEFAULT_MODEL is LLMModel.GPT_4_1_MINI
        assert DEFAULT_MODEL.spec.api_key_env_var == "OPENAI_API_KEY"

    @pytest.mark.unit
    def test_by_name_lookup(self):
        assert LLMModel.by_name("llama3.2") is LLMModel.OLLAMA_LLAMA3_2
        assert LLMModel.by_name("nonexistent") is None

    @pytest.mark.unit
    def test_list_local_remote(self):
        local_models = LLMModel.list_local()
        remote_models = LLMModel.list_remote()
        assert all(m.spec.provider == LLMProviderType.OLLAMA for m in local_models)
        assert len(local_models) + len(remote_models) == len(LLMModel)


class TestGetLLMSpec:
    """Tests for get_llm_spec helper."""

    @pytest.mark.unit
    def test_resolves_all_reference_kinds(self):
        original = LLMModel.GPT_4_1.spec
        assert get_llm_spec("gpt-4.1") is original
        assert get_llm_spec(LLMModel.GPT_4_1) is original
        assert get_llm_spec(original) is original

    @pytest.mark.unit
    def test_unknown_model_raises(self):
        with pytest.raises(ValueError, match="Unknown model"):
            get_llm_spec("nonexistent-model")


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    @pytest.mark.unit
    def test_defaults(self):
        config = GenerationConfig()
        assert config.temperature == 0.2
        assert config.max_tokens == 512
        assert config.json_mode is True
        assert config.stop_sequences == []
        assert config.seed is None

    @pytest.mark.unit
    def test_as_json_copies(self):
        config = GenerationConfig(json_mode=False, seed=7, stop_sequences=["END"])
        json_config = config.as_json()
        assert json_config.json_mode is True
        assert json_config.seed == 7
        assert config.json_mode is False
        assert json_config.stop_sequences is not config.stop_sequences


class TestHelpers:
    """Tests for shared message and JSON helpers."""

    @pytest.mark.unit
    def test_build_messages(self):
        assert build_messages("hi") == [{"role": "user", "content": "hi"}]
        assert build_messages("hi", "be brief")[0] == {
            "role": "system",
            "content": "be brief",
        }

    @pytest.mark.unit
    def test_parse_plain_json(self):
        assert parse_json_response(' {"fieldType": "email"} ') == {"fieldType": "email"}

    @pytest.mark.unit
    def test_parse_fenced_json(self):
        content = '```json\n{"fieldType": "date", "validationRules": []}\n```'
        assert parse_json_response(content)["fieldType"] == "date"

    @pytest.mark.unit
    def test_parse_invalid_json(self):
        with pytest.raises(InvalidResponseError, match="Failed to parse"):
            parse_json_response("Sure! The field type is email.")

    @pytest.mark.unit
    def test_parse_non_object(self):
        with pytest.raises(InvalidResponseError, match="Expected a JSON object"):
            parse_json_response('["email"]')


class TestGenerationResult:
    """Tests for GenerationResult."""

    @pytest.mark.unit
    def test_result_creation(self):
        result = GenerationResult(
            content='{"fieldType": "text"}',
            finish_reason="stop",
            usage={"total_tokens": 30},
            model="gpt-4.1-mini",
        )
        assert result.usage["total_tokens"] == 30
        assert result.raw_response is None


class TestOpenAIBackend:
    """Tests for OpenAI backend."""

    @pytest.mark.unit
    def test_requires_api_key(self, no_api_keys):
        with pytest.raises(AuthenticationError, match="API key required"):
            OpenAIBackend()

    @pytest.mark.unit
    def test_creates_with_api_key(self, mock_api_key):
        backend = OpenAIBackend(api_key=mock_api_key)
        assert backend.provider == "openai"
        assert backend.model_name == "gpt-4.1-mini"
        assert backend.name == "openai:gpt-4.1-mini"
        assert backend.supports_json_mode is True

    @pytest.mark.unit
    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        assert OpenAIBackend().provider == "openai"

    @pytest.mark.unit
    def test_generate_request(self):
        completions = RecordingCompletions(content='{"fieldType": "email"}')
        backend = _openai_backend(completions)
        result = backend.generate(
            "Label: Email", system_prompt="sys", config=GenerationConfig(seed=3)
        )
        assert result.content == '{"fieldType": "email"}'
        assert result.usage == {
            "prompt_tokens": 12,
            "completion_tokens": 8,
            "total_tokens": 20,
        }
        (call,) = completions.calls
        assert call["model"] == "gpt-4.1-mini"
        assert call["messages"][0] == {"role": "system", "content": "sys"}
        assert call["response_format"] == {"type": "json_object"}
        assert call["seed"] == 3
        assert "stop" not in call

    @pytest.mark.unit
    def test_generate_json(self):
        backend = _openai_backend(RecordingCompletions(content='{"fieldType": "tel"}'))
        assert backend.generate_json("Label: Phone") == {"fieldType": "tel"}

    @pytest.mark.unit
    def test_sdk_errors_translated(self):
        error = _status_error(openai.AuthenticationError, 401, "Incorrect API key")
        backend = _openai_backend(RecordingCompletions(error=error))
        with pytest.raises(AuthenticationError) as exc_info:
            backend.generate("Label: Email")
        assert exc_info.value.__cause__ is error


class TestTranslateError:
    """Tests for openai exception mapping."""

    @pytest.mark.unit
    def test_rate_limit_with_retry_after(self):
        error = _status_error(
            openai.RateLimitError, 429, "Rate limit reached", headers={"retry-after": "2"}
        )
        translated = translate_error(error)
        assert isinstance(translated, RateLimitError)
        assert translated.retry_after == 2.0

    @pytest.mark.unit
    def test_context_length(self):
        error = _status_error(
            openai.BadRequestError,
            400,
            "This model's maximum context length is 128000 tokens",
            body={"code": "context_length_exceeded"},
        )
        assert isinstance(translate_error(error), ContextLengthError)

    @pytest.mark.unit
    def test_other_errors(self):
        error = openai.APIConnectionError(request=_REQUEST)
        translated = translate_error(error)
        assert type(translated) is LLMError


class TestOllamaBackend:
    """Tests for Ollama backend."""

    @pytest.mark.unit
    def test_no_api_key_required(self, no_api_keys, monkeypatch):
        monkeypatch.delenv("OLLAMA_HOST", raising=False)
        backend = OllamaBackend()
        assert backend.provider == "ollama"
        assert backend.model_name == "qwen3"
        assert backend.base_url == "http://localhost:11434"

    @pytest.mark.unit
    def test_host_from_environment(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", "http://gpu-box:11434")
        assert OllamaBackend(model="llama3.2").base_url == "http://gpu-box:11434"

    @pytest.mark.unit
    def test_generate_request(self):
        calls = []

        def chat(**kwargs):
            calls.append(kwargs)
            return SimpleNamespace(
                message=SimpleNamespace(content='{"fieldType": "date"}'),
                done_reason="stop",
                prompt_eval_count=10,
                eval_count=5,
            )

        backend = OllamaBackend(model="gemma3", base_url="http://localhost:11434")
        backend._client = SimpleNamespace(chat=chat)
        assert backend.generate_json("Label: Birthday") == {"fieldType": "date"}
        (call,) = calls
        assert call["format"] == "json"
        assert call["model"] == "gemma3"
        assert call["options"]["num_predict"] == 512

    @pytest.mark.unit
    def test_missing_model(self):
        def chat(**kwargs):
            raise ollama.ResponseError("model 'qwen3' not found", status_code=404)

        backend = OllamaBackend(base_url="http://localhost:11434")
        backend._client = SimpleNamespace(chat=chat)
        with pytest.raises(LLMError, match="ollama pull qwen3"):
            backend.generate("Label: Email")

    @pytest.mark.unit
    def test_server_down(self):
        def chat(**kwargs):
            raise ConnectionError("Failed to connect to Ollama")

        backend = OllamaBackend(base_url="http://localhost:11434")
        backend._client = SimpleNamespace(chat=chat)
        with pytest.raises(LLMError, match="Cannot connect"):
            backend.generate("Label: Email")


class TestCreateLLMBackend:
    """Tests for create_llm_backend factory."""

    @pytest.mark.unit
    def test_creates_openai_backend(self, mock_api_key):
        backend = create_llm_backend(LLMModel.GPT_4_1, api_key=mock_api_key)
        assert backend.provider == "openai"
        assert backend.model_name == "gpt-4.1"

    @pytest.mark.unit
    def test_creates_ollama_backend(self):
        backend = create_llm_backend("llama3.2")
        assert backend.provider == "ollama"

    @pytest.mark.unit
    def test_default_from_environment(self, monkeypatch):
        monkeypatch.setenv("LLM_MODEL", "qwen3")
        assert create_llm_backend().model_name == "qwen3"

    @pytest.mark.unit
    def test_unknown_model(self):
        with pytest.raises(ValueError):
            create_llm_backend("not-a-model")
