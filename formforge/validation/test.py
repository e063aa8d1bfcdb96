"""Unit tests for form validation."""

import pytest

from formforge.catalog import FieldType
from formforge.schema import DataTableColumn, FormComponent
from formforge.session import FormSession

from .lib import ValidationError, is_valid, validate_form


def _types(errors: list[ValidationError]) -> list[str]:
    return [e.error_type for e in errors]


class TestValidateForm:
    """Tests for validate_form function."""

    @pytest.mark.unit
    def test_fresh_session_of_every_type_is_valid(self):
        """Defaults of new fields never produce findings."""
        session = FormSession()
        for field_type in FieldType:
            session.create(field_type)
        assert validate_form(session) == []

    @pytest.mark.unit
    def test_empty_form(self):
        assert validate_form([]) == []

    @pytest.mark.unit
    def test_duplicate_ids(self):
        components = [
            FormComponent(id="a", type="text", field_name="one"),
            FormComponent(id="a", type="text", field_name="two"),
        ]
        errors = validate_form(components)
        assert _types(errors) == ["duplicate_id"]
        assert "2 times" in errors[0].message

    @pytest.mark.unit
    def test_duplicate_field_name(self):
        components = [
            FormComponent(id="a", type="text", field_name="email"),
            FormComponent(id="b", type="email", field_name="email"),
        ]
        errors = validate_form(components)
        assert _types(errors) == ["duplicate_field_name"]
        assert errors[0].component_id == "b"
        assert "a" in errors[0].message

    @pytest.mark.unit
    def test_duplicate_choice_names_clash_in_script(self):
        components = [
            FormComponent(id="a", type="dropdown", field_name="size", options=[]),
            FormComponent(id="b", type="radiogroup", field_name="size", options=[]),
        ]
        assert _types(validate_form(components)) == [
            "duplicate_field_name",
            "duplicate_symbol",
        ]

    @pytest.mark.unit
    def test_two_rich_text_blocks_share_a_symbol(self):
        """Rich text fields start without a field name."""
        session = FormSession()
        session.create(FieldType.RICH_TEXT)
        second = session.create(FieldType.RICH_TEXT)
        errors = validate_form(session)
        assert _types(errors) == ["duplicate_symbol"]
        assert errors[0].component_id == second.id

    @pytest.mark.unit
    def test_missing_field_name(self):
        errors = validate_form([FormComponent(id="a", type="text")])
        assert _types(errors) == ["missing_field_name"]

    @pytest.mark.unit
    def test_static_content_needs_no_field_name(self):
        components = [
            FormComponent(id="h", type="section-heading", label="Details"),
            FormComponent(id="i", type="image", src="x.png"),
        ]
        assert validate_form(components) == []

    @pytest.mark.unit
    def test_invalid_field_name(self):
        errors = validate_form([FormComponent(id="a", type="text", field_name="1stName")])
        assert _types(errors) == ["invalid_field_name"]

    @pytest.mark.unit
    def test_length_bounds(self):
        component = FormComponent(
            id="a", type="text", field_name="code", min_length=10, max_length=5
        )
        errors = validate_form([component])
        assert _types(errors) == ["length_bounds"]

    @pytest.mark.unit
    def test_equal_length_bounds_ok(self):
        component = FormComponent(
            id="a", type="text", field_name="pin", min_length=4, max_length=4
        )
        assert is_valid([component])

    @pytest.mark.unit
    def test_width_out_of_range(self):
        """Widths can only leave the grid through unvalidated updates."""
        component = FormComponent(id="a", type="text", field_name="a").model_copy(
            update={"width": 15}
        )
        assert _types(validate_form([component])) == ["invalid_range"]

    @pytest.mark.unit
    def test_duplicate_column(self):
        component = FormComponent(
            id="t",
            type="datatable",
            field_name="orders",
            columns=[
                DataTableColumn(label="A", field_name="col"),
                DataTableColumn(label="B", field_name="col"),
            ],
        )
        errors = validate_form([component])
        assert _types(errors) == ["duplicate_column"]

    @pytest.mark.unit
    def test_unsupported_type(self):
        errors = validate_form([FormComponent(id="u", type="hologram", field_name="h")])
        assert _types(errors) == ["unsupported_type"]

    @pytest.mark.unit
    def test_inapplicable_property(self):
        component = FormComponent(
            id="s", type="switch", field_name="notify", placeholder="ignored"
        )
        errors = validate_form([component])
        assert _types(errors) == ["inapplicable_property"]
        assert "placeholder" in errors[0].message


class TestIsValid:
    """Tests for is_valid convenience function."""

    @pytest.mark.unit
    def test_valid_returns_true(self):
        assert is_valid([FormComponent(id="a", type="text", field_name="name")])

    @pytest.mark.unit
    def test_invalid_returns_false(self):
        assert not is_valid([FormComponent(id="a", type="text")])


class TestValidationError:
    """Tests for ValidationError dataclass."""

    @pytest.mark.unit
    def test_error_attributes(self):
        error = ValidationError(
            component_id="a", message="Something", error_type="duplicate_id"
        )
        assert error.component_id == "a"
        assert error.message == "Something"
        assert error.error_type == "duplicate_id"
