"""Unit tests for the field catalog."""

import pytest

from .lib import (
    CATALOG,
    FieldCategory,
    FieldType,
    get_catalog_entry,
    get_field_types_by_category,
    is_input_type,
    list_catalog,
    resolve_field_type,
)


class TestCatalogRegistry:
    """Tests for CATALOG completeness."""

    @pytest.mark.unit
    def test_all_field_types_registered(self):
        """Every FieldType has a catalog entry."""
        for ft in FieldType:
            assert ft in CATALOG, f"Missing catalog entry for {ft}"
            assert CATALOG[ft].type is ft

    @pytest.mark.unit
    def test_entries_have_display_metadata(self):
        for ft, entry in CATALOG.items():
            assert entry.name, f"{ft} missing name"
            assert entry.icon, f"{ft} missing icon"
            assert entry.description, f"{ft} missing description"

    @pytest.mark.unit
    def test_palette_order(self):
        """The palette lists its ten entries in a fixed order."""
        names = [entry.name for entry in list_catalog(palette_only=True)]
        assert names == [
            "Text Input",
            "Email",
            "Password",
            "Number",
            "Text Area",
            "Dropdown",
            "Checkbox",
            "Date",
            "Radio Group",
            "Switch",
        ]

    @pytest.mark.unit
    def test_full_listing_includes_hidden_types(self):
        types = [entry.type for entry in list_catalog()]
        assert len(types) == len(FieldType)
        assert FieldType.DATA_TABLE in types

    @pytest.mark.unit
    def test_aliases_are_unique(self):
        seen: dict[str, FieldType] = {}
        for entry in CATALOG.values():
            for alias in entry.aliases:
                assert alias not in seen, f"{alias} used by {seen.get(alias)}"
                seen[alias] = entry.type


class TestCatalogEntry:
    """Tests for CatalogEntry."""

    @pytest.mark.unit
    def test_to_dict(self):
        data = get_catalog_entry(FieldType.DROPDOWN).to_dict()
        assert data["type"] == "dropdown"
        assert data["name"] == "Dropdown"
        assert data["icon"] == "chevron-down"
        assert data["category"] == "choice"
        assert "select" in data["aliases"]

    @pytest.mark.unit
    def test_is_input(self):
        assert get_catalog_entry(FieldType.TEXT).is_input
        assert get_catalog_entry(FieldType.SWITCH).is_input
        assert not get_catalog_entry(FieldType.IMAGE).is_input
        assert not get_catalog_entry(FieldType.SECTION_HEADING).is_input


class TestLookups:
    """Tests for lookup helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", FieldType.TEXT),
            ("radiogroup", FieldType.RADIO_GROUP),
            ("radio-group", FieldType.RADIO_GROUP),
            ("Rich-Text", FieldType.RICH_TEXT),
            ("data-table", FieldType.DATA_TABLE),
            (" select ", FieldType.DROPDOWN),
            ("toggle", FieldType.SWITCH),
            (FieldType.DATE, FieldType.DATE),
        ],
    )
    def test_resolve_field_type(self, value, expected):
        assert resolve_field_type(value) is expected

    @pytest.mark.unit
    def test_resolve_unknown(self):
        assert resolve_field_type("hologram") is None
        assert resolve_field_type(None) is None

    @pytest.mark.unit
    def test_by_category(self):
        choices = get_field_types_by_category(FieldCategory.CHOICE)
        assert choices == [FieldType.DROPDOWN, FieldType.RADIO_GROUP]

    @pytest.mark.unit
    def test_is_input_type(self):
        assert is_input_type("email")
        assert not is_input_type("richtext")
        assert not is_input_type("hologram")
