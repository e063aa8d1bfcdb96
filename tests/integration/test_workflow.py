"""Integration tests for the design-to-source workflow.

Tests the full editing lifecycle:
1. Build a form in a session (create, update, reorder, delete)
2. Apply an advisory type suggestion
3. Validate the design and round-trip it through JSON
4. Generate and write the component files
"""

import json

import pytest

from formforge.catalog import FieldType
from formforge.llm.conftest import MockLLMBackend
from formforge.output import generate_form, load_design, write_form_output
from formforge.schema import dump_design
from formforge.session import FormSession
from formforge.suggest import FieldTypeSuggester, request_suggestion
from formforge.validation import validate_form


@pytest.fixture
def session() -> FormSession:
    """A contact form with a leftover field to delete."""
    session = FormSession()
    session.create(FieldType.TEXT, "Full Name")
    session.create(FieldType.TEXT, "Email Address")
    session.create(FieldType.TEXT, "Scratch")
    session.create(FieldType.DROPDOWN, "Favorite Color")
    return session


def _id_of(session: FormSession, label: str) -> str:
    return next(c.id for c in session.components if c.label == label)


class TestEditingWorkflow:
    """Session edits flow through to the generated documents."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_edit_suggest_generate(self, session, tmp_path):
        color = _id_of(session, "Favorite Color")
        email = _id_of(session, "Email Address")

        session.update(color, {"options": ["Red", "Green", "Blue"], "width": 6})
        session.delete(_id_of(session, "Scratch"))
        session.reorder(color, _id_of(session, "Full Name"))

        suggester = FieldTypeSuggester(backend=MockLLMBackend())
        suggestion = await request_suggestion(session, email, suggester)
        assert suggestion is not None
        assert session.get(email).type is FieldType.EMAIL

        assert validate_form(session) == []

        output = generate_form(session, class_name="ContactForm")
        assert output.warnings == []
        assert output.markup.index('name="favoriteColor"') < output.markup.index(
            'name="fullName"'
        )
        assert 'type="email"' in output.markup
        assert 'size="6"' in output.markup
        assert '"label": "Green"' in output.script
        assert "export default class ContactForm" in output.script

        markup_path, script_path = write_form_output(output, tmp_path, "contactForm")
        assert markup_path.read_text(encoding="utf-8") == output.markup
        assert script_path.read_text(encoding="utf-8") == output.script

    @pytest.mark.integration
    def test_design_round_trip(self, session, tmp_path):
        design = tmp_path / "design.json"
        design.write_text(json.dumps(dump_design(list(session.components))))

        loaded = load_design(design)
        assert loaded == list(session.components)
        assert generate_form(loaded).markup == generate_form(session).markup


class TestSampleDesign:
    """The shared sample design generates every field."""

    @pytest.mark.integration
    def test_all_fields_rendered(self, sample_components):
        output = generate_form(sample_components)
        assert output.warnings == []
        for tag in (
            "lightning-input",
            "lightning-combobox",
            "lightning-formatted-rich-text",
            "lightning-datatable",
        ):
            assert f"<{tag}" in output.markup
        assert "introValue = `<p>Welcome</p>`;" in output.script
        assert "ordersData = [" in output.script
