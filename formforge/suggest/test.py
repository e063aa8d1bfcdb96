"""Tests for the field type suggestion service."""

import asyncio

import pytest

from formforge.catalog import FieldType
from formforge.llm import InvalidResponseError, LLMError
from formforge.llm.conftest import MockLLMBackend
from formforge.session import FormSession

from .lib import (
    FieldSuggestion,
    FieldTypeSuggester,
    SuggesterConfig,
    SuggestionError,
    apply_suggestion,
    request_suggestion,
)


@pytest.fixture
def backend() -> MockLLMBackend:
    return MockLLMBackend()


@pytest.fixture
def suggester(backend) -> FieldTypeSuggester:
    return FieldTypeSuggester(backend=backend)


@pytest.fixture
def session() -> FormSession:
    return FormSession()


class GatedSuggester(FieldTypeSuggester):
    """Holds each answer until the gate opens."""

    def __init__(self, backend, gate: asyncio.Event):
        super().__init__(backend=backend)
        self.gate = gate

    async def suggest_async(self, label):
        await self.gate.wait()
        return await super().suggest_async(label)


class TestFieldSuggestion:
    """Tests for the suggestion model."""

    @pytest.mark.unit
    def test_parse_wire_format(self):
        suggestion = FieldSuggestion.model_validate(
            {"fieldType": "radio-group", "validationRules": ["required"]}
        )
        assert suggestion.field_type == "radio-group"
        assert suggestion.resolved_type is FieldType.RADIO_GROUP
        assert suggestion.changes() == {
            "validations": ["required"],
            "type": FieldType.RADIO_GROUP,
        }

    @pytest.mark.unit
    def test_unknown_type_only_changes_validations(self):
        suggestion = FieldSuggestion(field_type="signature", validation_rules=["drawn"])
        assert suggestion.resolved_type is None
        assert suggestion.changes() == {"validations": ["drawn"]}

    @pytest.mark.unit
    def test_rules_default_to_empty(self):
        assert FieldSuggestion.model_validate({"fieldType": "text"}).validation_rules == []


class TestFieldTypeSuggester:
    """Tests for FieldTypeSuggester.suggest."""

    @pytest.mark.unit
    def test_suggest(self, suggester, backend):
        suggestion = suggester.suggest("Email Address")
        assert suggestion.resolved_type is FieldType.EMAIL
        assert suggestion.validation_rules == ["required", "valid email format"]
        assert backend.prompts == ["Field Label: Email Address"]

    @pytest.mark.unit
    def test_alias_answers_resolve(self, suggester):
        assert suggester.suggest("Country").resolved_type is FieldType.DROPDOWN

    @pytest.mark.unit
    def test_system_prompt_lists_catalog(self, suggester):
        prompt = suggester.system_prompt
        for field_type in FieldType:
            assert f"- {field_type.value}:" in prompt

    @pytest.mark.unit
    def test_backend_failure(self):
        error = LLMError("service unavailable")
        suggester = FieldTypeSuggester(backend=MockLLMBackend(error=error))
        with pytest.raises(SuggestionError) as exc_info:
            suggester.suggest("Email")
        assert exc_info.value.label == "Email"
        assert exc_info.value.__cause__ is error

    @pytest.mark.unit
    def test_not_json(self):
        suggester = FieldTypeSuggester(backend=MockLLMBackend(content="email, probably"))
        with pytest.raises(SuggestionError) as exc_info:
            suggester.suggest("Email")
        assert isinstance(exc_info.value.__cause__, InvalidResponseError)

    @pytest.mark.unit
    def test_missing_field_type(self):
        backend = MockLLMBackend(content='{"validationRules": ["required"]}')
        with pytest.raises(SuggestionError, match="Malformed"):
            FieldTypeSuggester(backend=backend).suggest("Email")

    @pytest.mark.unit
    def test_missing_credentials(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        suggester = FieldTypeSuggester(config=SuggesterConfig(model="gpt-4.1-mini"))
        with pytest.raises(SuggestionError, match="API key"):
            suggester.suggest("Email")

    @pytest.mark.unit
    def test_unknown_model(self):
        suggester = FieldTypeSuggester(config=SuggesterConfig(model="no-such-model"))
        with pytest.raises(SuggestionError, match="Unknown model") as exc_info:
            suggester.suggest("Email")
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.unit
    def test_unknown_model_from_environment(self, monkeypatch):
        monkeypatch.setenv("LLM_MODEL", "no-such-model")
        with pytest.raises(SuggestionError, match="no-such-model"):
            FieldTypeSuggester().suggest("Email")

    @pytest.mark.unit
    def test_backend_created_from_config(self):
        suggester = FieldTypeSuggester(config=SuggesterConfig(model="llama3.2"))
        assert suggester.backend.name == "ollama:llama3.2"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_suggest_async(self, suggester):
        suggestion = await suggester.suggest_async("Mobile number")
        assert suggestion.resolved_type is FieldType.TEL


class TestApplySuggestion:
    """Tests for apply_suggestion."""

    @pytest.mark.unit
    def test_applies_type_and_rules(self, session):
        field = session.create(FieldType.TEXT, "Website")
        suggestion = FieldSuggestion(field_type="url", validation_rules=["valid URL"])
        assert apply_suggestion(session, field.id, suggestion) is True
        updated = session.get(field.id)
        assert updated.type is FieldType.URL
        assert updated.validations == ["valid URL"]
        assert updated.label == "Website"

    @pytest.mark.unit
    def test_unknown_type_keeps_current_type(self, session):
        field = session.create(FieldType.TEXT, "Signature")
        suggestion = FieldSuggestion(field_type="signature", validation_rules=["drawn"])
        apply_suggestion(session, field.id, suggestion)
        assert session.get(field.id).type is FieldType.TEXT
        assert session.get(field.id).validations == ["drawn"]

    @pytest.mark.unit
    def test_missing_field(self, session):
        suggestion = FieldSuggestion(field_type="email")
        assert apply_suggestion(session, "gone", suggestion) is False
        assert len(session) == 0


class TestRequestSuggestion:
    """Tests for the asynchronous request flow."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success_updates_field(self, session, suggester):
        field = session.create(FieldType.TEXT, "Date of Birth")
        suggestion = await request_suggestion(session, field.id, suggester)
        assert suggestion.resolved_type is FieldType.DATE
        assert session.get(field.id).type is FieldType.DATE
        assert session.get(field.id).validations == ["must be in the past"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_leaves_session_unchanged(self, session):
        session.create(FieldType.TEXT, "Name")
        field = session.create(FieldType.TEXT, "Email")
        before = session.components
        suggester = FieldTypeSuggester(backend=MockLLMBackend(error=LLMError("down")))

        with pytest.raises(SuggestionError):
            await request_suggestion(session, field.id, suggester)

        assert session.components == before
        assert session.selected_id == field.id

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_model_leaves_session_unchanged(self, session):
        field = session.create(FieldType.TEXT, "Email")
        before = session.components
        suggester = FieldTypeSuggester(config=SuggesterConfig(model="no-such-model"))

        with pytest.raises(SuggestionError):
            await request_suggestion(session, field.id, suggester)

        assert session.components == before

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_late_response_after_delete(self, session, backend):
        keep = session.create(FieldType.TEXT, "Name")
        field = session.create(FieldType.TEXT, "Email")
        gate = asyncio.Event()
        suggester = GatedSuggester(backend, gate)

        task = asyncio.create_task(request_suggestion(session, field.id, suggester))
        await asyncio.sleep(0)
        session.delete(field.id)
        gate.set()
        suggestion = await task

        assert suggestion.resolved_type is FieldType.EMAIL
        assert session.ids == [keep.id]
        assert session.get(keep.id) == keep

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_field(self, session, suggester, backend):
        assert await request_suggestion(session, "missing", suggester) is None
        assert backend.prompts == []
