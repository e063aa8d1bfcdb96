"""Property visibility rules per field type."""

from .lib import (
    NO_PROPERTIES,
    PROPERTY_ATTRIBUTES,
    PROPERTY_RULES,
    Property,
    PropertyRules,
    editable_properties,
    get_property_rules,
    ignored_properties,
    is_applicable,
)

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
