"""LLM module test fixtures."""

import json
from typing import Any

import pytest

from formforge.llm.backend.base import GenerationConfig, GenerationResult, LLMBackend

# =============================================================================
# Mock LLM Backend
# =============================================================================


class MockLLMBackend(LLMBackend):
    """Mock LLM backend for testing without API keys.

    Answers field suggestion prompts from label keywords. A fixed `content`
    replaces the keyword answer; an `error` is raised instead of answering.
    """

    SUGGESTIONS: list[tuple[tuple[str, ...], dict[str, Any]]] = [
        (
            ("email",),
            {"fieldType": "email", "validationRules": ["required", "valid email format"]},
        ),
        (
            ("phone", "mobile"),
            {"fieldType": "tel", "validationRules": ["digits only"]},
        ),
        (
            ("birth", "date"),
            {"fieldType": "date", "validationRules": ["must be in the past"]},
        ),
        (
            ("agree", "terms"),
            {"fieldType": "checkbox", "validationRules": ["must be checked"]},
        ),
        (
            ("country",),
            {"fieldType": "select", "validationRules": []},
        ),
        (
            ("website",),
            {"fieldType": "url", "validationRules": ["valid URL"]},
        ),
    ]
    DEFAULT_SUGGESTION: dict[str, Any] = {"fieldType": "text", "validationRules": []}

    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.prompts: list[str] = []

    @property
    def model_name(self) -> str:
        return "mock-model-v1"

    @property
    def provider(self) -> str:
        return "mock"

    @property
    def supports_json_mode(self) -> bool:
        return True

    @property
    def context_window(self) -> int:
        return 4096

    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        """Answer from keywords in the prompt."""
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error

        content = self.content
        if content is None:
            query = prompt.lower()
            suggestion = self.DEFAULT_SUGGESTION
            for keywords, answer in self.SUGGESTIONS:
                if any(keyword in query for keyword in keywords):
                    suggestion = answer
                    break
            content = json.dumps(suggestion)

        return GenerationResult(
            content=content,
            finish_reason="stop",
            model=self.model_name,
            usage={"total_tokens": 50},
        )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_llm_backend() -> MockLLMBackend:
    """Create a mock LLM backend for testing."""
    return MockLLMBackend()


@pytest.fixture
def mock_api_key() -> str:
    """Provide a mock API key for testing."""
    return "test-api-key-12345"


@pytest.fixture
def no_api_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove API keys from the environment for the test."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
