"""formforge: visual form design and source generation."""

from formforge.catalog import FieldType, list_catalog, resolve_field_type
from formforge.output import emit_markup, emit_script, generate_form
from formforge.schema import FormComponent, parse_design
from formforge.session import FormSession
from formforge.targets import FormTarget, get_target, list_targets
from formforge.validation import ValidationError, is_valid, validate_form

__all__ = [
    # Model
    "FieldType",
    "FormComponent",
    "FormSession",
    "list_catalog",
    "parse_design",
    "resolve_field_type",
    # Generation
    "FormTarget",
    "emit_markup",
    "emit_script",
    "generate_form",
    "get_target",
    "list_targets",
    # Validation
    "ValidationError",
    "is_valid",
    "validate_form",
]
