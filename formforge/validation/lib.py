"""Form validation and static analysis.

This module reports issues in a form design that generation tolerates but a
user probably did not intend: clashing field names, impossible length
bounds, settings that never reach the output. Findings are advisory and
never block generation.
"""

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from formforge.catalog import FieldType, is_input_type
from formforge.schema import MAX_WIDTH, MIN_WIDTH, FormComponent
from formforge.targets import plan_declarations
from formforge.visibility import ignored_properties

# Generated symbols are JavaScript identifiers.
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass
class ValidationError:
    """Represents an issue found in a form design.

    Attributes:
        component_id: ID of the field with the issue.
        message: Human-readable description.
        error_type: Category of the issue.
    """

    component_id: str
    message: str
    error_type: str


def validate_form(components: Iterable[FormComponent]) -> list[ValidationError]:
    """Validate a form design.

    Performs the following checks:
        - Unique ids
        - Unique, non-empty, identifier-safe field names on input fields
        - Unique generated symbols
        - min_length not above max_length
        - Width within the layout grid
        - Unique column names in data tables
        - Known field types
        - No settings the field type ignores

    Args:
        components: Fields in form order.

    Returns:
        list[ValidationError]: Issues found (empty if none).

    Example:
        >>> for issue in validate_form(session):
        ...     print(f"{issue.component_id}: {issue.message}")
    """
    items = list(components)
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_ids(items))
    errors.extend(_check_field_names(items))
    errors.extend(_check_symbols(items))

    for component in items:
        errors.extend(_check_component(component))

    return errors


def is_valid(components: Iterable[FormComponent]) -> bool:
    """Check if a form design has no issues.

    Example:
        >>> if is_valid(session):
        ...     output = generate_form(session)
    """
    return not validate_form(components)


def _check_duplicate_ids(items: list[FormComponent]) -> list[ValidationError]:
    counts = Counter(component.id for component in items)
    return [
        ValidationError(
            component_id=component_id,
            message=f"Duplicate ID '{component_id}' appears {count} times",
            error_type="duplicate_id",
        )
        for component_id, count in counts.items()
        if count > 1
    ]


def _check_field_names(items: list[FormComponent]) -> list[ValidationError]:
    """Field names identify submitted values, so input fields need distinct ones."""
    errors: list[ValidationError] = []
    seen: dict[str, str] = {}

    for component in items:
        if not is_input_type(component.type_tag):
            continue
        name = component.field_name
        if not name:
            errors.append(
                ValidationError(
                    component_id=component.id,
                    message="Input field has no field name",
                    error_type="missing_field_name",
                )
            )
            continue
        if name in seen:
            errors.append(
                ValidationError(
                    component_id=component.id,
                    message=f"Field name '{name}' is also used by {seen[name]}",
                    error_type="duplicate_field_name",
                )
            )
        else:
            seen[name] = component.id
        if not _IDENTIFIER.match(name):
            errors.append(
                ValidationError(
                    component_id=component.id,
                    message=f"Field name '{name}' is not a valid identifier",
                    error_type="invalid_field_name",
                )
            )

    return errors


def _check_symbols(items: list[FormComponent]) -> list[ValidationError]:
    """Two fields declaring the same script symbol would overwrite each other."""
    errors: list[ValidationError] = []
    owners: dict[str, str] = {}

    for component in items:
        field_type = component.field_type
        if field_type is None:
            continue
        for declaration in plan_declarations(component, field_type):
            owner = owners.setdefault(declaration.symbol, component.id)
            if owner != component.id:
                errors.append(
                    ValidationError(
                        component_id=component.id,
                        message=(
                            f"Generated symbol '{declaration.symbol}' "
                            f"is also declared by {owner}"
                        ),
                        error_type="duplicate_symbol",
                    )
                )

    return errors


def _check_component(component: FormComponent) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if component.field_type is None:
        errors.append(
            ValidationError(
                component_id=component.id,
                message=f"Unknown field type '{component.type_tag}'; it will not be generated",
                error_type="unsupported_type",
            )
        )
        return errors

    if (
        component.min_length is not None
        and component.max_length is not None
        and component.min_length > component.max_length
    ):
        errors.append(
            ValidationError(
                component_id=component.id,
                message=(
                    f"min_length {component.min_length} exceeds "
                    f"max_length {component.max_length}"
                ),
                error_type="length_bounds",
            )
        )

    width = component.width
    if width is not None and (
        not isinstance(width, int) or not MIN_WIDTH <= width <= MAX_WIDTH
    ):
        errors.append(
            ValidationError(
                component_id=component.id,
                message=f"Width {width!r} outside {MIN_WIDTH}-{MAX_WIDTH}",
                error_type="invalid_range",
            )
        )

    if component.field_type is FieldType.DATA_TABLE and component.columns:
        counts = Counter(column.field_name for column in component.columns)
        for name, count in counts.items():
            if count > 1:
                errors.append(
                    ValidationError(
                        component_id=component.id,
                        message=f"Column '{name}' appears {count} times",
                        error_type="duplicate_column",
                    )
                )

    for attribute in ignored_properties(component):
        errors.append(
            ValidationError(
                component_id=component.id,
                message=(
                    f"'{attribute}' is set but not used by "
                    f"{component.type_tag} fields"
                ),
                error_type="inapplicable_property",
            )
        )

    return errors


__all__ = [
    "ValidationError",
    "is_valid",
    "validate_form",
]
