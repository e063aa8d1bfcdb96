"""Unit tests for the generation IR and target registry."""

import pytest

from formforge.catalog import FieldType
from formforge.schema import DataTableColumn, FormComponent

from . import lib as targets_lib
from .lib import (
    SAMPLE_ROW_COUNT,
    DeclarationKind,
    FormTarget,
    GenerationPlan,
    clamp_width,
    get_target,
    list_targets,
    plan_declarations,
    register_target,
    symbol_for,
)


class OutlineTarget(FormTarget):
    """Minimal target that only knows text and dropdown fields."""

    @property
    def name(self) -> str:
        return "outline-test"

    @property
    def markup_extension(self) -> str:
        return ".txt"

    @property
    def script_extension(self) -> str:
        return ".txt"

    @property
    def supported_types(self) -> frozenset[FieldType]:
        return frozenset({FieldType.TEXT, FieldType.DROPDOWN})

    def render_element(self, component, field_type, declarations):
        refs = ",".join(decl.symbol for decl in declarations.values())
        return f"{field_type.value}:{component.field_name}[{refs}]"

    def render_markup(self, plan: GenerationPlan) -> str:
        return "\n".join(fragment.markup for fragment in plan.fragments)

    def render_script(self, plan: GenerationPlan) -> str:
        return "\n".join(plan.symbols)


@pytest.fixture
def dropdown() -> FormComponent:
    return FormComponent(
        id="d1",
        type="dropdown",
        field_name="favoriteColor",
        label="Favorite Color",
        options=["Red", "Blue"],
    )


class TestPlanDeclarations:
    """Tests for target-independent declarations."""

    @pytest.mark.unit
    def test_dropdown_options(self, dropdown):
        (decl,) = plan_declarations(dropdown, FieldType.DROPDOWN)
        assert decl.symbol == "favoriteColorOptions"
        assert decl.kind is DeclarationKind.OPTIONS
        assert decl.payload == [
            {"label": "Red", "value": "Red"},
            {"label": "Blue", "value": "Blue"},
        ]

    @pytest.mark.unit
    def test_missing_options_declare_empty_list(self):
        radio = FormComponent(id="r", type="radiogroup", field_name="size")
        (decl,) = plan_declarations(radio, FieldType.RADIO_GROUP)
        assert decl.symbol == "sizeOptions"
        assert decl.payload == []

    @pytest.mark.unit
    def test_rich_text_value(self):
        rich = FormComponent(id="r", type="richtext", field_name="intro", value="<p>Hi</p>")
        (decl,) = plan_declarations(rich, FieldType.RICH_TEXT)
        assert decl.symbol == "introValue"
        assert decl.kind is DeclarationKind.VALUE
        assert decl.payload == "<p>Hi</p>"

    @pytest.mark.unit
    def test_data_table_columns_and_rows(self):
        table = FormComponent(
            id="t",
            type="datatable",
            field_name="dataTable",
            columns=[
                DataTableColumn(label="Column 1", field_name="col1"),
                DataTableColumn(label="Column 2", field_name="col2"),
            ],
        )
        columns, data = plan_declarations(table, FieldType.DATA_TABLE)
        assert columns.symbol == "dataTableColumns"
        assert columns.payload == [
            {"label": "Column 1", "fieldName": "col1"},
            {"label": "Column 2", "fieldName": "col2"},
        ]
        assert data.symbol == "dataTableData"
        assert len(data.payload) == SAMPLE_ROW_COUNT == 3
        assert data.payload[0] == {"id": 0, "col1": "Sample Data 1", "col2": "Sample Data 1"}
        assert data.payload[2] == {"id": 2, "col1": "Sample Data 3", "col2": "Sample Data 3"}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field_type",
        [FieldType.TEXT, FieldType.CHECKBOX, FieldType.IMAGE, FieldType.SECTION_HEADING],
    )
    def test_other_types_declare_nothing(self, field_type):
        component = FormComponent(id="x", type=field_type, field_name="x")
        assert plan_declarations(component, field_type) == ()

    @pytest.mark.unit
    def test_symbol_for(self):
        assert symbol_for("size", DeclarationKind.OPTIONS) == "sizeOptions"
        assert symbol_for("table", DeclarationKind.DATA) == "tableData"


class TestClampWidth:
    """Tests for layout span clamping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "width,expected",
        [(None, 12), (6, 6), (0, 1), (-3, 1), (40, 12), ("4", 4), ("wide", 12)],
    )
    def test_clamp(self, width, expected):
        assert clamp_width(width) == expected


class TestPlan:
    """Tests for the single-pass plan."""

    @pytest.mark.unit
    def test_fragments_follow_field_order(self, dropdown):
        text = FormComponent(id="t1", type="text", field_name="name")
        plan = OutlineTarget().plan([text, dropdown])
        assert [f.component_id for f in plan.fragments] == ["t1", "d1"]
        assert plan.symbols == ["favoriteColorOptions"]

    @pytest.mark.unit
    def test_markup_receives_own_declarations(self, dropdown):
        plan = OutlineTarget().plan([dropdown])
        assert plan.fragments[0].markup == "dropdown:favoriteColor[favoriteColorOptions]"

    @pytest.mark.unit
    def test_unsupported_type_skipped_with_warning(self, dropdown):
        date = FormComponent(id="x", type="date", field_name="when")
        plan = OutlineTarget().plan([date, dropdown])
        assert [f.component_id for f in plan.fragments] == ["d1"]
        assert len(plan.warnings) == 1
        assert plan.warnings[0].component_id == "x"
        assert plan.warnings[0].value == "date"

    @pytest.mark.unit
    def test_unknown_tag_skipped_with_warning(self):
        unknown = FormComponent(id="u", type="hologram", field_name="h")
        plan = OutlineTarget().plan([unknown])
        assert plan.fragments == []
        assert plan.warnings[0].value == "hologram"

    @pytest.mark.unit
    def test_width_clamped_in_fragment(self):
        text = FormComponent(id="t", type="text").model_copy(update={"width": 40})
        plan = OutlineTarget().plan([text])
        assert plan.fragments[0].width == 12

    @pytest.mark.unit
    def test_inapplicable_property_warning(self):
        text = FormComponent(id="t", type="text", options=["a", "b"])
        plan = OutlineTarget().plan([text])
        assert len(plan.fragments) == 1
        assert [(w.component_id, w.value) for w in plan.warnings] == [("t", "options")]

    @pytest.mark.unit
    def test_generate_renders_both_from_one_plan(self, dropdown):
        form = OutlineTarget().generate([dropdown])
        assert form.markup == "dropdown:favoriteColor[favoriteColorOptions]"
        assert form.script == "favoriteColorOptions"
        assert form.target == "outline-test"
        assert not form.has_warnings


class TestRegistry:
    """Tests for the target registry."""

    @pytest.mark.unit
    def test_lwc_registered(self):
        assert "lwc" in list_targets()

    @pytest.mark.unit
    def test_get_target_passes_kwargs(self):
        target = get_target("lwc", class_name="SignupForm")
        assert target.name == "lwc"
        assert target.class_name == "SignupForm"

    @pytest.mark.unit
    def test_unknown_target(self):
        with pytest.raises(KeyError, match="Unknown target"):
            get_target("react")

    @pytest.mark.unit
    def test_register_custom_target(self, monkeypatch):
        monkeypatch.setattr(targets_lib, "_registry", {})
        register_target(OutlineTarget)
        assert isinstance(get_target("outline-test"), OutlineTarget)
