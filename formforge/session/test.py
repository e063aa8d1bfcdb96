"""Unit tests for the form session."""

import itertools
import random

import pytest

from formforge.catalog import FieldType
from formforge.schema import ComponentVariant, DataTableColumn

from .lib import FormSession, build_component


@pytest.fixture
def session() -> FormSession:
    """Session with predictable ids f1, f2, ..."""
    counter = itertools.count(1)
    return FormSession(id_factory=lambda: f"f{next(counter)}")


def _abc(session: FormSession) -> tuple[str, str, str]:
    a = session.create(FieldType.TEXT, "A").id
    b = session.create(FieldType.TEXT, "B").id
    c = session.create(FieldType.TEXT, "C").id
    return a, b, c


class TestCreate:
    """Tests for field creation defaults."""

    @pytest.mark.unit
    def test_text_defaults(self, session):
        component = session.create(FieldType.TEXT)
        assert component.label == "New text"
        assert component.field_name == "newText"
        assert component.required is False
        assert component.variant is ComponentVariant.STANDARD
        assert component.width == 12

    @pytest.mark.unit
    def test_label_drives_field_name(self, session):
        component = session.create(FieldType.EMAIL, "Work Email")
        assert component.field_name == "workEmail"

    @pytest.mark.unit
    def test_dropdown_options(self, session):
        component = session.create(FieldType.DROPDOWN)
        assert component.field_name == "newDropdown"
        assert component.options == ["Option 1", "Option 2"]

    @pytest.mark.unit
    def test_radio_group_options(self, session):
        component = session.create("radiogroup")
        assert component.options == ["Option 1", "Option 2"]

    @pytest.mark.unit
    def test_switch(self, session):
        component = session.create(FieldType.SWITCH)
        assert component.label == "Enable Feature"
        assert component.field_name == "enableFeature"

    @pytest.mark.unit
    def test_switch_with_label(self, session):
        component = session.create(FieldType.SWITCH, "Dark Mode")
        assert component.field_name == "darkMode"

    @pytest.mark.unit
    def test_image(self, session):
        component = session.create(FieldType.IMAGE)
        assert component.label == "Image"
        assert component.field_name == ""
        assert component.src.startswith("https://")
        assert component.alt == "Placeholder image"

    @pytest.mark.unit
    def test_rich_text(self, session):
        component = session.create(FieldType.RICH_TEXT, "Intro")
        assert component.label == "Intro"
        assert component.field_name == ""
        assert component.value.startswith("<h2>")

    @pytest.mark.unit
    def test_data_table(self, session):
        component = session.create(FieldType.DATA_TABLE)
        assert component.label == "Data Table"
        assert component.field_name == "dataTable"
        assert component.columns == [
            DataTableColumn(label="Column 1", field_name="col1"),
            DataTableColumn(label="Column 2", field_name="col2"),
        ]

    @pytest.mark.unit
    def test_appends_and_selects(self, session):
        first = session.create(FieldType.TEXT)
        second = session.create(FieldType.NUMBER)
        assert session.ids == [first.id, second.id]
        assert session.selected_id == second.id

    @pytest.mark.unit
    def test_unknown_type_passes_through(self, session):
        component = session.create("hologram")
        assert component.type == "hologram"
        assert component.label == "New hologram"

    @pytest.mark.unit
    def test_default_ids_are_unique(self):
        session = FormSession()
        ids = {session.create(FieldType.TEXT).id for _ in range(50)}
        assert len(ids) == 50

    @pytest.mark.unit
    def test_ids_never_reused(self):
        ids = iter(["x", "x", "y"])
        session = FormSession(id_factory=lambda: next(ids))
        first = session.create(FieldType.TEXT)
        session.delete(first.id)
        second = session.create(FieldType.TEXT)
        assert second.id == "y"


class TestUpdate:
    """Tests for property updates."""

    @pytest.mark.unit
    def test_merges_changes(self, session):
        component = session.create(FieldType.TEXT)
        session.update(component.id, {"label": "Name", "placeholder": "Jane"})
        updated = session.get(component.id)
        assert updated.label == "Name"
        assert updated.placeholder == "Jane"
        assert updated.field_name == "newText"

    @pytest.mark.unit
    def test_camel_case_keys(self, session):
        component = session.create(FieldType.TEXT)
        session.update(component.id, {"helpText": "Help", "maxLength": 10})
        updated = session.get(component.id)
        assert updated.help_text == "Help"
        assert updated.max_length == 10

    @pytest.mark.unit
    def test_missing_id_is_noop(self, session):
        component = session.create(FieldType.TEXT)
        before = session.components
        session.update("missing", {"label": "x"})
        assert session.components == before
        assert session.get(component.id).label == "New text"

    @pytest.mark.unit
    def test_id_cannot_change(self, session):
        component = session.create(FieldType.TEXT)
        session.update(component.id, {"id": "other", "label": "Kept"})
        assert session.ids == [component.id]
        assert session.get(component.id).label == "Kept"

    @pytest.mark.unit
    def test_unknown_keys_ignored(self, session):
        component = session.create(FieldType.TEXT)
        session.update(component.id, {"colour": "red"})
        assert session.get(component.id) == component

    @pytest.mark.unit
    def test_no_cross_field_validation(self, session):
        component = session.create(FieldType.TEXT)
        session.update(component.id, {"min_length": 10, "max_length": 2})
        updated = session.get(component.id)
        assert (updated.min_length, updated.max_length) == (10, 2)

    @pytest.mark.unit
    def test_inapplicable_properties_are_kept(self, session):
        component = session.create(FieldType.SWITCH)
        session.update(component.id, {"placeholder": "unused"})
        assert session.get(component.id).placeholder == "unused"

    @pytest.mark.unit
    def test_value_coercion(self, session):
        component = session.create(FieldType.DATA_TABLE)
        session.update(
            component.id,
            {
                "variant": "label-hidden",
                "width": "6",
                "columns": [{"label": "Name", "fieldName": "name"}],
            },
        )
        updated = session.get(component.id)
        assert updated.variant is ComponentVariant.LABEL_HIDDEN
        assert updated.width == 6
        assert updated.columns == [DataTableColumn(label="Name", field_name="name")]

    @pytest.mark.unit
    def test_snapshots_are_not_mutated(self, session):
        component = session.create(FieldType.TEXT)
        snapshot = session.components
        session.update(component.id, {"label": "Changed"})
        assert snapshot[0].label == "New text"


class TestDelete:
    """Tests for field removal."""

    @pytest.mark.unit
    def test_removes(self, session):
        a, b, c = _abc(session)
        session.delete(b)
        assert session.ids == [a, c]

    @pytest.mark.unit
    def test_clears_selection(self, session):
        a, b, c = _abc(session)
        session.select(b)
        session.delete(b)
        assert session.selected_id is None

    @pytest.mark.unit
    def test_keeps_other_selection(self, session):
        a, b, c = _abc(session)
        session.select(a)
        session.delete(b)
        assert session.selected_id == a

    @pytest.mark.unit
    def test_missing_id_is_noop(self, session):
        ids = list(_abc(session))
        session.delete("missing")
        assert session.ids == ids


class TestReorder:
    """Tests for splice-style reordering."""

    @pytest.mark.unit
    def test_move_first_to_last(self, session):
        a, b, c = _abc(session)
        session.reorder(a, c)
        assert session.ids == [b, c, a]

    @pytest.mark.unit
    def test_move_last_to_first(self, session):
        a, b, c = _abc(session)
        session.reorder(c, a)
        assert session.ids == [c, a, b]

    @pytest.mark.unit
    def test_not_a_swap(self, session):
        a, b, c = _abc(session)
        session.reorder(a, c)
        session.reorder(c, a)
        assert session.ids == [b, a, c]

    @pytest.mark.unit
    def test_onto_itself(self, session):
        a, b, c = _abc(session)
        session.reorder(b, b)
        assert session.ids == [a, b, c]

    @pytest.mark.unit
    def test_preserves_identity(self, session):
        a, b, c = _abc(session)
        moved = session.get(a)
        session.reorder(a, b)
        assert session.get(a) is moved

    @pytest.mark.unit
    @pytest.mark.parametrize("pair", [("missing", "f1"), ("f1", "missing")])
    def test_missing_ids_are_noop(self, session, pair):
        ids = list(_abc(session))
        session.reorder(*pair)
        assert session.ids == ids


class TestSelection:
    """Tests for selection tracking."""

    @pytest.mark.unit
    def test_select_and_clear(self, session):
        a, b, c = _abc(session)
        session.select(a)
        assert session.selected.id == a
        session.clear_selection()
        assert session.selected is None

    @pytest.mark.unit
    def test_select_missing_is_noop(self, session):
        a, b, c = _abc(session)
        session.select("missing")
        assert session.selected_id == c


class TestReadAccess:
    """Tests for read helpers."""

    @pytest.mark.unit
    def test_container_protocol(self, session):
        a, b, c = _abc(session)
        assert len(session) == 3
        assert a in session
        assert "missing" not in session
        assert [comp.id for comp in session] == [a, b, c]
        assert session.index_of(c) == 2
        assert session.index_of("missing") is None


class TestIdInvariant:
    """Random command sequences keep the id set consistent."""

    @pytest.mark.unit
    @pytest.mark.parametrize("seed", range(5))
    def test_live_ids_match(self, seed):
        rng = random.Random(seed)
        session = FormSession()
        live: set[str] = set()
        types = list(FieldType)

        for _ in range(200):
            action = rng.choice(["create", "delete", "reorder"])
            if action == "create" or not live:
                live.add(session.create(rng.choice(types)).id)
            elif action == "delete":
                victim = rng.choice(sorted(live) + ["missing"])
                session.delete(victim)
                live.discard(victim)
            else:
                ids = sorted(live) + ["missing"]
                session.reorder(rng.choice(ids), rng.choice(ids))

            assert len(session.ids) == len(set(session.ids))
            assert set(session.ids) == live


class TestBuildComponent:
    """Tests for the standalone builder."""

    @pytest.mark.unit
    def test_alias_type(self):
        component = build_component("x", "data-table")
        assert component.type is FieldType.DATA_TABLE
        assert component.label == "Data Table"
