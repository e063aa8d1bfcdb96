"""Unit tests for the form component models."""

import pytest
from pydantic import ValidationError

from formforge.catalog import FieldType

from .lib import (
    ComponentVariant,
    DataTableColumn,
    FormComponent,
    dump_design,
    export_json_schema,
    parse_design,
    resolve_property_name,
)


class TestFormComponent:
    """Tests for FormComponent validation."""

    @pytest.mark.unit
    def test_camel_case_input(self):
        component = FormComponent(
            id="f1",
            type="text",
            fieldName="firstName",
            label="First Name",
            helpText="As on your passport",
            minLength=2,
            maxLength=40,
            readOnly=True,
        )
        assert component.field_type is FieldType.TEXT
        assert component.field_name == "firstName"
        assert component.help_text == "As on your passport"
        assert component.min_length == 2
        assert component.max_length == 40
        assert component.read_only is True

    @pytest.mark.unit
    def test_snake_case_input(self):
        component = FormComponent(id="f1", type=FieldType.EMAIL, field_name="email")
        assert component.field_name == "email"

    @pytest.mark.unit
    def test_type_aliases_resolve(self):
        component = FormComponent(id="f1", type="radio-group")
        assert component.type is FieldType.RADIO_GROUP

    @pytest.mark.unit
    def test_unknown_type_is_preserved(self):
        component = FormComponent(id="f1", type="hologram")
        assert component.type == "hologram"
        assert component.field_type is None
        assert component.type_tag == "hologram"

    @pytest.mark.unit
    def test_width_string_digits(self):
        component = FormComponent(id="f1", type="text", width="6")
        assert component.width == 6

    @pytest.mark.unit
    @pytest.mark.parametrize("width", [0, 13, -1])
    def test_width_out_of_range_rejected(self, width):
        with pytest.raises(ValidationError):
            FormComponent(id="f1", type="text", width=width)

    @pytest.mark.unit
    def test_variant_values(self):
        component = FormComponent(id="f1", type="text", variant="label-inline")
        assert component.variant is ComponentVariant.LABEL_INLINE

    @pytest.mark.unit
    def test_frozen(self):
        component = FormComponent(id="f1", type="text")
        with pytest.raises(ValidationError):
            component.label = "changed"

    @pytest.mark.unit
    def test_columns(self):
        component = FormComponent(
            id="t",
            type="datatable",
            columns=[{"label": "Name", "fieldName": "name"}],
        )
        assert component.columns == [DataTableColumn(label="Name", field_name="name")]

    @pytest.mark.unit
    def test_to_dict_uses_camel_case_and_omits_unset(self):
        component = FormComponent(
            id="f1", type="dropdown", field_name="color", options=["Red"]
        )
        assert component.to_dict() == {
            "id": "f1",
            "type": "dropdown",
            "fieldName": "color",
            "label": "",
            "options": ["Red"],
        }


class TestDesignParsing:
    """Tests for parse_design and dump_design."""

    @pytest.mark.unit
    def test_list_design(self):
        components = parse_design(
            [
                {"id": "a", "type": "text", "label": "Name"},
                {"id": "b", "type": "checkbox", "label": "Agree"},
            ]
        )
        assert [c.id for c in components] == ["a", "b"]

    @pytest.mark.unit
    def test_wrapped_design(self):
        components = parse_design({"components": [{"id": "a", "type": "date"}]})
        assert components[0].type is FieldType.DATE

    @pytest.mark.unit
    def test_malformed_design(self):
        with pytest.raises(ValidationError):
            parse_design([{"type": "text"}])

    @pytest.mark.unit
    def test_dump_round_trip_keeps_order(self):
        data = [
            {"id": "b", "type": "text", "fieldName": "b", "label": "B"},
            {"id": "a", "type": "text", "fieldName": "a", "label": "A"},
        ]
        assert dump_design(parse_design(data)) == data


class TestHelpers:
    """Tests for schema helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("field_name", "field_name"),
            ("fieldName", "field_name"),
            ("readOnly", "read_only"),
            ("options", "options"),
            ("bogus", None),
        ],
    )
    def test_resolve_property_name(self, key, expected):
        assert resolve_property_name(key) == expected

    @pytest.mark.unit
    def test_export_json_schema(self):
        schema = export_json_schema()
        assert schema["title"] == "FormComponent"
        assert "fieldName" in schema["properties"]
        assert "id" in schema["required"]
