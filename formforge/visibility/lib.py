"""Property visibility rules.

Maps each field type to the optional properties that mean something for it.
The property editor uses this table to decide which controls to show, and the
generation targets use the same table to decide which attributes to emit, so
the two can never disagree.
"""

from dataclasses import dataclass, fields
from enum import Enum

from formforge.catalog import FieldType, resolve_field_type
from formforge.schema import ComponentVariant, FormComponent


class Property(str, Enum):
    """Optional FormComponent properties governed by the table."""

    PLACEHOLDER = "placeholder"
    REQUIRED = "required"
    OPTIONS = "options"
    LENGTH_BOUNDS = "length_bounds"
    PATTERN = "pattern"
    VARIANT = "variant"
    HELP_TEXT = "help_text"
    DISABLED = "disabled"
    READ_ONLY = "read_only"


# FormComponent attributes controlled by each property, in editor order.
PROPERTY_ATTRIBUTES: dict[Property, tuple[str, ...]] = {
    Property.PLACEHOLDER: ("placeholder",),
    Property.REQUIRED: ("required",),
    Property.OPTIONS: ("options",),
    Property.LENGTH_BOUNDS: ("min_length", "max_length"),
    Property.PATTERN: ("pattern",),
    Property.VARIANT: ("variant",),
    Property.HELP_TEXT: ("help_text",),
    Property.DISABLED: ("disabled",),
    Property.READ_ONLY: ("read_only",),
}

# Attributes that carry the payload of a specific type rather than a shared
# property; always editable for that type.
TYPE_ATTRIBUTES: dict[FieldType, tuple[str, ...]] = {
    FieldType.IMAGE: ("src", "alt"),
    FieldType.RICH_TEXT: ("value",),
    FieldType.DATA_TABLE: ("columns",),
}


@dataclass(frozen=True)
class PropertyRules:
    """Applicability flags for one field type."""

    placeholder: bool = False
    required: bool = False
    options: bool = False
    length_bounds: bool = False
    pattern: bool = False
    variant: bool = False
    help_text: bool = False
    disabled: bool = False
    read_only: bool = False

    def applies(self, prop: Property) -> bool:
        """Check whether a property is applicable."""
        return getattr(self, prop.value)

    def applicable(self) -> frozenset[Property]:
        """All applicable properties."""
        return frozenset(
            Property(f.name) for f in fields(self) if getattr(self, f.name)
        )


NO_PROPERTIES = PropertyRules()

_ALL = frozenset(FieldType)
_STATIC = frozenset(
    {
        FieldType.IMAGE,
        FieldType.RICH_TEXT,
        FieldType.DATA_TABLE,
        FieldType.SECTION_HEADING,
    }
)

PLACEHOLDER_TYPES = frozenset(
    {
        FieldType.TEXT,
        FieldType.EMAIL,
        FieldType.PASSWORD,
        FieldType.NUMBER,
        FieldType.TEXTAREA,
        FieldType.DROPDOWN,
    }
)
REQUIRED_TYPES = _ALL - {FieldType.SWITCH}
OPTIONS_TYPES = frozenset({FieldType.DROPDOWN, FieldType.RADIO_GROUP})
LENGTH_BOUNDS_TYPES = frozenset(
    {FieldType.TEXT, FieldType.PASSWORD, FieldType.TEXTAREA}
)
PATTERN_TYPES = frozenset(
    {FieldType.TEXT, FieldType.PASSWORD, FieldType.EMAIL, FieldType.NUMBER}
)
VARIANT_TYPES = _ALL - {
    FieldType.CHECKBOX,
    FieldType.SWITCH,
    FieldType.RADIO_GROUP,
    FieldType.DATE,
    FieldType.IMAGE,
    FieldType.RICH_TEXT,
    FieldType.DATA_TABLE,
}
HELP_TEXT_TYPES = _ALL - _STATIC
DISABLED_TYPES = _ALL - _STATIC
READ_ONLY_TYPES = _ALL - _STATIC - {FieldType.SWITCH, FieldType.FILE}


PROPERTY_RULES: dict[FieldType, PropertyRules] = {
    ft: PropertyRules(
        placeholder=ft in PLACEHOLDER_TYPES,
        required=ft in REQUIRED_TYPES,
        options=ft in OPTIONS_TYPES,
        length_bounds=ft in LENGTH_BOUNDS_TYPES,
        pattern=ft in PATTERN_TYPES,
        variant=ft in VARIANT_TYPES,
        help_text=ft in HELP_TEXT_TYPES,
        disabled=ft in DISABLED_TYPES,
        read_only=ft in READ_ONLY_TYPES,
    )
    for ft in FieldType
}


def get_property_rules(field_type: FieldType | str) -> PropertyRules:
    """Get the applicability flags for a field type.

    Args:
        field_type: A FieldType or type tag.

    Returns:
        PropertyRules for the type; all flags are False for unknown tags.
    """
    resolved = resolve_field_type(field_type)
    if resolved is None:
        return NO_PROPERTIES
    return PROPERTY_RULES[resolved]


def is_applicable(field_type: FieldType | str, prop: Property | str) -> bool:
    """Check whether a property applies to a field type."""
    return get_property_rules(field_type).applies(Property(prop))


def editable_properties(field_type: FieldType | str) -> list[str]:
    """FormComponent attribute names an editor should expose, in display order.

    The label is always editable; shared properties follow the table and
    type-specific payload attributes come last.
    """
    rules = get_property_rules(field_type)
    names = ["label"]
    for prop, attributes in PROPERTY_ATTRIBUTES.items():
        if rules.applies(prop):
            names.extend(attributes)
    resolved = resolve_field_type(field_type)
    if resolved is not None:
        names.extend(TYPE_ATTRIBUTES.get(resolved, ()))
    return names


# Values new fields start with; holding one of these is not a deliberate setting.
_DEFAULT_VALUES: dict[str, object] = {
    "required": False,
    "disabled": False,
    "read_only": False,
    "variant": ComponentVariant.STANDARD,
}


def _is_set(attribute: str, value: object) -> bool:
    if value is None or value == "" or value == []:
        return False
    return _DEFAULT_VALUES.get(attribute, object()) != value


def ignored_properties(component: FormComponent) -> list[str]:
    """Attributes set on a component that its type does not use.

    Such values are kept on the component but never reach generated output.
    Defaults that every new field starts with are not reported.

    Returns:
        Attribute names in table order.
    """
    rules = get_property_rules(component.type_tag)
    ignored = []
    for prop, attributes in PROPERTY_ATTRIBUTES.items():
        if rules.applies(prop):
            continue
        for attribute in attributes:
            if _is_set(attribute, getattr(component, attribute)):
                ignored.append(attribute)
    return ignored


__all__ = [
    "NO_PROPERTIES",
    "PROPERTY_ATTRIBUTES",
    "PROPERTY_RULES",
    "Property",
    "PropertyRules",
    "editable_properties",
    "get_property_rules",
    "ignored_properties",
    "is_applicable",
]
