"""Form schema models - the canonical representation of placed fields.

Example usage:
    >>> from formforge.schema import FormComponent, parse_design
    >>> components = parse_design([{"id": "a", "type": "text", "label": "Name"}])
"""

from .lib import (
    MAX_WIDTH,
    MIN_WIDTH,
    ComponentVariant,
    DataTableColumn,
    FormComponent,
    dump_design,
    export_json_schema,
    parse_design,
    resolve_property_name,
)

__all__ = [
    "MAX_WIDTH",
    "MIN_WIDTH",
    "ComponentVariant",
    "DataTableColumn",
    "FormComponent",
    "dump_design",
    "export_json_schema",
    "parse_design",
    "resolve_property_name",
]
