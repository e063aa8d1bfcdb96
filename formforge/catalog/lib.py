"""Field catalog: the closed set of field types and their palette metadata.

This module is the single source of truth for which field types exist. The
visibility rules and the generation targets both key off `FieldType`, so a
new type must be added here first and then handled in both places.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Field type tags as stored in form designs."""

    # Text-like inputs
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    TEL = "tel"
    URL = "url"
    SEARCH = "search"
    TEXTAREA = "textarea"

    # Choices and toggles
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"
    RADIO_GROUP = "radiogroup"
    SWITCH = "switch"

    # Other inputs
    DATE = "date"
    FILE = "file"

    # Static content
    IMAGE = "image"
    RICH_TEXT = "richtext"
    DATA_TABLE = "datatable"
    SECTION_HEADING = "section-heading"


class FieldCategory(str, Enum):
    """High-level field groupings."""

    INPUT = "input"
    CHOICE = "choice"
    TOGGLE = "toggle"
    CONTENT = "content"


@dataclass(frozen=True)
class CatalogEntry:
    """Palette metadata for a field type.

    Attributes:
        type: The field type tag.
        name: Display name shown in the palette.
        icon: Icon identifier (lucide icon name).
        category: Field grouping.
        description: One-line description of the field.
        aliases: Alternative spellings accepted by `resolve_field_type`.
        in_palette: Whether the palette offers the type for drag-and-drop.
    """

    type: FieldType
    name: str
    icon: str
    category: FieldCategory
    description: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    in_palette: bool = True

    @property
    def is_input(self) -> bool:
        """True for types that render an input element carrying a value."""
        return self.category != FieldCategory.CONTENT

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a plain dictionary."""
        return {
            "type": self.type.value,
            "name": self.name,
            "icon": self.icon,
            "category": self.category.value,
            "description": self.description,
            "aliases": list(self.aliases),
            "in_palette": self.in_palette,
        }


# Ordered as the palette shows them.
CATALOG: dict[FieldType, CatalogEntry] = {
    FieldType.TEXT: CatalogEntry(
        type=FieldType.TEXT,
        name="Text Input",
        icon="case-sensitive",
        category=FieldCategory.INPUT,
        description="Single-line free text",
        aliases=("string", "input", "text_input"),
    ),
    FieldType.EMAIL: CatalogEntry(
        type=FieldType.EMAIL,
        name="Email",
        icon="mail",
        category=FieldCategory.INPUT,
        description="Email address input",
        aliases=("e-mail", "email_address"),
    ),
    FieldType.PASSWORD: CatalogEntry(
        type=FieldType.PASSWORD,
        name="Password",
        icon="key-round",
        category=FieldCategory.INPUT,
        description="Masked secret input",
        aliases=("secret",),
    ),
    FieldType.NUMBER: CatalogEntry(
        type=FieldType.NUMBER,
        name="Number",
        icon="hash",
        category=FieldCategory.INPUT,
        description="Numeric input",
        aliases=("integer", "int", "decimal", "numeric"),
    ),
    FieldType.TEXTAREA: CatalogEntry(
        type=FieldType.TEXTAREA,
        name="Text Area",
        icon="message-square",
        category=FieldCategory.INPUT,
        description="Multi-line free text",
        aliases=("text_area", "text-area", "multiline"),
    ),
    FieldType.DROPDOWN: CatalogEntry(
        type=FieldType.DROPDOWN,
        name="Dropdown",
        icon="chevron-down",
        category=FieldCategory.CHOICE,
        description="Single choice from a collapsed list",
        aliases=("select", "combobox", "picklist"),
    ),
    FieldType.CHECKBOX: CatalogEntry(
        type=FieldType.CHECKBOX,
        name="Checkbox",
        icon="check-square",
        category=FieldCategory.TOGGLE,
        description="Boolean tick box",
        aliases=("check_box", "boolean", "bool"),
    ),
    FieldType.DATE: CatalogEntry(
        type=FieldType.DATE,
        name="Date",
        icon="calendar-days",
        category=FieldCategory.INPUT,
        description="Calendar date picker",
        aliases=("date_picker", "datepicker"),
    ),
    FieldType.RADIO_GROUP: CatalogEntry(
        type=FieldType.RADIO_GROUP,
        name="Radio Group",
        icon="circle-dot",
        category=FieldCategory.CHOICE,
        description="Single choice from visible radio buttons",
        aliases=("radio-group", "radio_group", "radio"),
    ),
    FieldType.SWITCH: CatalogEntry(
        type=FieldType.SWITCH,
        name="Switch",
        icon="toggle-right",
        category=FieldCategory.TOGGLE,
        description="On/off toggle with its own label",
        aliases=("toggle",),
    ),
    FieldType.TEL: CatalogEntry(
        type=FieldType.TEL,
        name="Phone",
        icon="phone",
        category=FieldCategory.INPUT,
        description="Telephone number input",
        aliases=("phone", "telephone"),
        in_palette=False,
    ),
    FieldType.URL: CatalogEntry(
        type=FieldType.URL,
        name="URL",
        icon="link",
        category=FieldCategory.INPUT,
        description="Web address input",
        aliases=("link", "website"),
        in_palette=False,
    ),
    FieldType.SEARCH: CatalogEntry(
        type=FieldType.SEARCH,
        name="Search",
        icon="search",
        category=FieldCategory.INPUT,
        description="Search box",
        in_palette=False,
    ),
    FieldType.FILE: CatalogEntry(
        type=FieldType.FILE,
        name="File Upload",
        icon="upload",
        category=FieldCategory.INPUT,
        description="File picker",
        aliases=("upload", "file_upload", "attachment"),
        in_palette=False,
    ),
    FieldType.IMAGE: CatalogEntry(
        type=FieldType.IMAGE,
        name="Image",
        icon="image",
        category=FieldCategory.CONTENT,
        description="Static image",
        aliases=("img", "picture"),
        in_palette=False,
    ),
    FieldType.RICH_TEXT: CatalogEntry(
        type=FieldType.RICH_TEXT,
        name="Rich Text",
        icon="file-text",
        category=FieldCategory.CONTENT,
        description="Formatted static text block",
        aliases=("rich-text", "rich_text", "html"),
        in_palette=False,
    ),
    FieldType.DATA_TABLE: CatalogEntry(
        type=FieldType.DATA_TABLE,
        name="Data Table",
        icon="table",
        category=FieldCategory.CONTENT,
        description="Read-only table with sample rows",
        aliases=("data-table", "data_table", "table", "grid"),
        in_palette=False,
    ),
    FieldType.SECTION_HEADING: CatalogEntry(
        type=FieldType.SECTION_HEADING,
        name="Section Heading",
        icon="heading",
        category=FieldCategory.CONTENT,
        description="Heading separating groups of fields",
        aliases=("section_heading", "heading", "header", "title"),
        in_palette=False,
    ),
}


def get_catalog_entry(field_type: FieldType) -> CatalogEntry:
    """Get palette metadata for a field type.

    Raises:
        KeyError: If the type has no catalog entry.
    """
    return CATALOG[field_type]


def list_catalog(*, palette_only: bool = False) -> list[CatalogEntry]:
    """List catalog entries in palette order.

    Args:
        palette_only: Only return entries the palette offers.
    """
    return [
        entry for entry in CATALOG.values() if entry.in_palette or not palette_only
    ]


def get_field_types_by_category(category: FieldCategory) -> list[FieldType]:
    """Get all field types in a category."""
    return [entry.type for entry in CATALOG.values() if entry.category == category]


def resolve_field_type(value: "FieldType | str | None") -> FieldType | None:
    """Resolve a type tag or alias to its canonical FieldType.

    Args:
        value: A FieldType, a tag such as "radiogroup", or an alias such as
            "radio-group" (case-insensitive).

    Returns:
        The canonical FieldType, or None if not recognized.
    """
    if value is None:
        return None
    if isinstance(value, FieldType):
        return value

    normalized = str(value).lower().strip()

    for ft in FieldType:
        if ft.value == normalized:
            return ft

    for entry in CATALOG.values():
        if normalized in entry.aliases:
            return entry.type

    return None


def is_input_type(field_type: "FieldType | str") -> bool:
    """True if the type renders an input element (not static content)."""
    resolved = resolve_field_type(field_type)
    return resolved is not None and CATALOG[resolved].is_input


__all__ = [
    "CATALOG",
    "CatalogEntry",
    "FieldCategory",
    "FieldType",
    "get_catalog_entry",
    "get_field_types_by_category",
    "is_input_type",
    "list_catalog",
    "resolve_field_type",
]
