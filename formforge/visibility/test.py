"""Unit tests for property visibility rules."""

import pytest

from formforge.catalog import FieldType
from formforge.schema import FormComponent

from .lib import (
    NO_PROPERTIES,
    PROPERTY_RULES,
    Property,
    editable_properties,
    get_property_rules,
    ignored_properties,
    is_applicable,
)

# Expected rows for the six core properties:
# (placeholder, required, options, length_bounds, pattern, variant)
CORE_TABLE = {
    FieldType.TEXT: (True, True, False, True, True, True),
    FieldType.EMAIL: (True, True, False, False, True, True),
    FieldType.PASSWORD: (True, True, False, True, True, True),
    FieldType.NUMBER: (True, True, False, False, True, True),
    FieldType.TEL: (False, True, False, False, False, True),
    FieldType.URL: (False, True, False, False, False, True),
    FieldType.SEARCH: (False, True, False, False, False, True),
    FieldType.TEXTAREA: (True, True, False, True, False, True),
    FieldType.DROPDOWN: (True, True, True, False, False, True),
    FieldType.CHECKBOX: (False, True, False, False, False, False),
    FieldType.RADIO_GROUP: (False, True, True, False, False, False),
    FieldType.SWITCH: (False, False, False, False, False, False),
    FieldType.DATE: (False, True, False, False, False, False),
    FieldType.FILE: (False, True, False, False, False, True),
    FieldType.IMAGE: (False, True, False, False, False, False),
    FieldType.RICH_TEXT: (False, True, False, False, False, False),
    FieldType.DATA_TABLE: (False, True, False, False, False, False),
    FieldType.SECTION_HEADING: (False, True, False, False, False, True),
}


class TestPropertyTable:
    """Tests for the visibility table."""

    @pytest.mark.unit
    def test_every_type_has_rules(self):
        assert set(PROPERTY_RULES) == set(FieldType)

    @pytest.mark.unit
    @pytest.mark.parametrize("field_type", list(CORE_TABLE))
    def test_core_rows(self, field_type):
        rules = get_property_rules(field_type)
        row = (
            rules.placeholder,
            rules.required,
            rules.options,
            rules.length_bounds,
            rules.pattern,
            rules.variant,
        )
        assert row == CORE_TABLE[field_type]

    @pytest.mark.unit
    def test_switch(self):
        assert not is_applicable(FieldType.SWITCH, Property.REQUIRED)
        assert not is_applicable(FieldType.SWITCH, Property.OPTIONS)

    @pytest.mark.unit
    def test_dropdown(self):
        assert is_applicable(FieldType.DROPDOWN, Property.PLACEHOLDER)
        assert is_applicable(FieldType.DROPDOWN, Property.OPTIONS)

    @pytest.mark.unit
    def test_shared_attributes_on_static_types(self):
        for field_type in (FieldType.IMAGE, FieldType.SECTION_HEADING):
            rules = get_property_rules(field_type)
            assert not rules.help_text
            assert not rules.disabled
            assert not rules.read_only

    @pytest.mark.unit
    def test_read_only_exclusions(self):
        assert not is_applicable(FieldType.SWITCH, "read_only")
        assert not is_applicable(FieldType.FILE, "read_only")
        assert is_applicable(FieldType.FILE, "disabled")
        assert is_applicable(FieldType.TEXT, "read_only")


class TestLookups:
    """Tests for lookup helpers."""

    @pytest.mark.unit
    def test_tags_and_aliases(self):
        assert get_property_rules("radio-group") is PROPERTY_RULES[FieldType.RADIO_GROUP]
        assert get_property_rules("dropdown").options

    @pytest.mark.unit
    def test_unknown_type(self):
        assert get_property_rules("hologram") is NO_PROPERTIES
        assert NO_PROPERTIES.applicable() == frozenset()

    @pytest.mark.unit
    def test_applicable_set(self):
        assert get_property_rules(FieldType.SWITCH).applicable() == {
            Property.HELP_TEXT,
            Property.DISABLED,
        }

    @pytest.mark.unit
    def test_editable_properties_text(self):
        assert editable_properties(FieldType.TEXT) == [
            "label",
            "placeholder",
            "required",
            "min_length",
            "max_length",
            "pattern",
            "variant",
            "help_text",
            "disabled",
            "read_only",
        ]

    @pytest.mark.unit
    def test_editable_properties_type_payload(self):
        assert editable_properties(FieldType.IMAGE) == ["label", "required", "src", "alt"]
        assert editable_properties("hologram") == ["label"]


class TestIgnoredProperties:
    """Tests for set-but-inapplicable detection."""

    @pytest.mark.unit
    def test_defaults_not_reported(self):
        """Values every new field starts with are not deliberate settings."""
        checkbox = FormComponent(
            id="c", type="checkbox", required=False, variant="standard", width=12
        )
        assert ignored_properties(checkbox) == []

    @pytest.mark.unit
    def test_inapplicable_values_reported(self):
        checkbox = FormComponent(
            id="c",
            type="checkbox",
            placeholder="Tick me",
            options=["a"],
            variant="label-inline",
        )
        assert ignored_properties(checkbox) == ["placeholder", "options", "variant"]

    @pytest.mark.unit
    def test_applicable_values_not_reported(self):
        text = FormComponent(id="t", type="text", placeholder="Name", min_length=2)
        assert ignored_properties(text) == []

    @pytest.mark.unit
    def test_switch_required(self):
        switch = FormComponent(id="s", type="switch", required=True)
        assert ignored_properties(switch) == ["required"]

    @pytest.mark.unit
    def test_unknown_type_reports_everything_set(self):
        unknown = FormComponent(id="u", type="hologram", placeholder="x", required=True)
        assert ignored_properties(unknown) == ["placeholder", "required"]
