"""Field catalog - the available field types and their palette metadata.

Example usage:
    >>> from formforge.catalog import FieldType, resolve_field_type
    >>> resolve_field_type("radio-group")
    <FieldType.RADIO_GROUP: 'radiogroup'>
"""

from .lib import (
    CATALOG,
    CatalogEntry,
    FieldCategory,
    FieldType,
    get_catalog_entry,
    get_field_types_by_category,
    is_input_type,
    list_catalog,
    resolve_field_type,
)

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
