"""Form validation and static analysis."""

from formforge.validation.lib import ValidationError, is_valid, validate_form

__all__ = [
    "ValidationError",
    "is_valid",
    "validate_form",
]
