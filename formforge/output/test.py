"""Tests for output module."""

import json
import random
import re

import pytest

from formforge.catalog import FieldType
from formforge.schema import FormComponent
from formforge.session import FormSession

from .lib import (
    FormOutput,
    OutputGenerator,
    emit_markup,
    emit_script,
    format_form_outline,
    generate_form,
    load_design,
    write_form_output,
)

LWC_OPTIONS = {"class_name": "MyFormComponent", "form_title": "Generated Form"}

# Bindings every LWC form has that are not per-field declarations.
BUILTIN_BINDINGS = {"value", "handleSubmit"}


def _referenced(markup: str) -> set[str]:
    return set(re.findall(r"=\{(\w+)\}", markup)) - BUILTIN_BINDINGS


def _declared(script: str) -> set[str]:
    return set(re.findall(r"^    (\w+) = ", script, flags=re.MULTILINE))


@pytest.fixture
def favorite_color():
    """The single-dropdown form."""
    return [
        FormComponent(
            id="f1",
            type="dropdown",
            label="Favorite Color",
            fieldName="favoriteColor",
            options=["Red", "Blue"],
        )
    ]


@pytest.fixture
def mixed_form():
    """Form with one field of every catalog type."""
    session = FormSession()
    for field_type in FieldType:
        session.create(field_type)
    return list(session.components)


class TestFavoriteColor:
    """End-to-end expectations for a single dropdown."""

    @pytest.mark.unit
    def test_script_declares_two_pairs(self, favorite_color):
        script = emit_script(favorite_color, "lwc", **LWC_OPTIONS)
        match = re.search(r"favoriteColorOptions = (\[.*?\]);", script, flags=re.DOTALL)
        assert match is not None
        assert json.loads(match.group(1)) == [
            {"label": "Red", "value": "Red"},
            {"label": "Blue", "value": "Blue"},
        ]

    @pytest.mark.unit
    def test_markup_has_one_choice_element(self, favorite_color):
        markup = emit_markup(favorite_color, "lwc", **LWC_OPTIONS)
        assert markup.count("<lightning-combobox") == 1
        assert markup.count("options={favoriteColorOptions}") == 1
        assert markup.count("<lightning-layout-item") == 1
        assert markup.count("<lightning-input") == 0
        assert markup.count('label="Submit"') == 1


class TestConsistency:
    """Markup and script agree on symbols."""

    @pytest.mark.unit
    def test_deterministic(self, mixed_form):
        first = generate_form(mixed_form, "lwc", **LWC_OPTIONS)
        second = generate_form(mixed_form, "lwc", **LWC_OPTIONS)
        assert first.markup == second.markup
        assert first.script == second.script
        assert first.outline == second.outline

    @pytest.mark.unit
    def test_no_orphans_for_every_type(self, mixed_form):
        output = generate_form(mixed_form, "lwc", **LWC_OPTIONS)
        assert _referenced(output.markup) == _declared(output.script)
        assert _declared(output.script)

    @pytest.mark.unit
    def test_no_orphans_random_choice_fields(self):
        """Dropdowns and radio groups with zero or more options."""
        rng = random.Random(7)
        for _ in range(25):
            components = []
            for i in range(rng.randint(0, 6)):
                field_type = rng.choice(
                    [FieldType.DROPDOWN, FieldType.RADIO_GROUP, FieldType.TEXT]
                )
                options = [f"Opt {n}" for n in range(rng.randint(0, 4))]
                components.append(
                    FormComponent(
                        id=f"c{i}",
                        type=field_type,
                        field_name=f"field{i}",
                        options=options if field_type is not FieldType.TEXT else None,
                    )
                )
            output = generate_form(components, "lwc", **LWC_OPTIONS)
            assert _referenced(output.markup) == _declared(output.script)

    @pytest.mark.unit
    def test_unknown_type_leaves_others_unchanged(self, favorite_color):
        unknown = FormComponent(id="u", type="hologram", field_name="holo")
        baseline = generate_form(favorite_color, "lwc", **LWC_OPTIONS)
        mixed = generate_form([unknown, *favorite_color, unknown], "lwc", **LWC_OPTIONS)
        assert mixed.markup == baseline.markup
        assert mixed.script == baseline.script
        assert "holo" not in mixed.markup
        assert [w.value for w in mixed.warnings] == ["hologram", "hologram"]


class TestFormatFormOutline:
    """Tests for format_form_outline function."""

    @pytest.mark.unit
    def test_outline(self):
        components = [
            FormComponent(
                id="a", type="text", label="Full Name", field_name="fullName",
                width=6, required=True,
            ),
            FormComponent(
                id="b", type="dropdown", label="Favorite Color",
                field_name="favoriteColor", options=["Red", "Blue"],
            ),
            FormComponent(id="c", type="hologram"),
        ]
        assert format_form_outline(components, title="Signup") == "\n".join(
            [
                "Signup",
                "├── Full Name [text, fullName, 50%, required]",
                "├── Favorite Color [dropdown, favoriteColor, 2 options]",
                "└── c [hologram, unsupported]",
            ]
        )

    @pytest.mark.unit
    def test_empty(self):
        assert format_form_outline([]) == ""


class TestOutputGenerator:
    """Tests for OutputGenerator class."""

    @pytest.mark.unit
    def test_generate_from_session(self):
        session = FormSession()
        session.create(FieldType.EMAIL, "Work Email")
        output = OutputGenerator("lwc", class_name="Signup").generate(session)
        assert isinstance(output, FormOutput)
        assert output.target == "lwc"
        assert 'name="workEmail"' in output.markup
        assert "class Signup extends" in output.script
        assert "Work Email [email, workEmail]" in output.outline

    @pytest.mark.unit
    def test_default_target_from_environment(self, monkeypatch):
        monkeypatch.delenv("FORMFORGE_TARGET", raising=False)
        assert OutputGenerator().default_target == "lwc"

    @pytest.mark.unit
    def test_unknown_target(self, favorite_color):
        with pytest.raises(KeyError):
            OutputGenerator("vue").generate(favorite_color)


class TestFiles:
    """Tests for loading designs and writing output."""

    @pytest.mark.unit
    def test_write_form_output(self, tmp_path, favorite_color):
        output = generate_form(favorite_color, "lwc", **LWC_OPTIONS)
        markup_path, script_path = write_form_output(output, tmp_path / "out", "colorForm")
        assert markup_path.name == "colorForm.html"
        assert script_path.name == "colorForm.js"
        assert markup_path.read_text(encoding="utf-8") == output.markup
        assert script_path.read_text(encoding="utf-8") == output.script

    @pytest.mark.unit
    def test_load_design(self, tmp_path):
        path = tmp_path / "design.json"
        path.write_text(
            json.dumps(
                {
                    "components": [
                        {"id": "a", "type": "text", "fieldName": "name", "label": "Name"},
                        {"id": "b", "type": "radio-group", "options": ["S", "M"]},
                    ]
                }
            ),
            encoding="utf-8",
        )
        components = load_design(path)
        assert [c.id for c in components] == ["a", "b"]
        assert components[1].field_type is FieldType.RADIO_GROUP

    @pytest.mark.unit
    def test_load_design_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_design(tmp_path / "nope.json")
