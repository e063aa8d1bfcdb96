"""Form component models.

`FormComponent` is the canonical description of one placed field. Python
attributes are snake_case; dict and JSON input/output use the camelCase
names of the designer (``fieldName``, ``helpText``, ``readOnly``, ...), and
both spellings are accepted when validating.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from formforge.catalog import FieldType, resolve_field_type

# Layout grid bounds for `FormComponent.width`.
MIN_WIDTH = 1
MAX_WIDTH = 12


class ComponentVariant(str, Enum):
    """Label placement for a field.

    - STANDARD: Label above the input
    - LABEL_HIDDEN: Label kept for accessibility but not shown
    - LABEL_INLINE: Label beside the input
    """

    STANDARD = "standard"
    LABEL_HIDDEN = "label-hidden"
    LABEL_INLINE = "label-inline"


class DataTableColumn(BaseModel):
    """One column of a data table field."""

    label: str = Field(..., description="Column header text")
    field_name: str = Field(..., description="Key of the column in each data row")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class FormComponent(BaseModel):
    """One configured field in a form design.

    Optional properties only matter for the field types that support them
    (see `formforge.visibility`); values set on other types are kept but
    ignored by code generation.

    Attributes:
        id: Opaque unique identifier, fixed at creation.
        type: Field type. Unknown tags are kept as plain strings so that a
            design containing them still loads; generation skips them.
        field_name: Machine-safe name used for generated symbols.
        label: Display text.
        width: Layout span on a 12-column grid (None means full width).
        validations: Advisory validation rules; never used by generation.

    Example:
        >>> FormComponent(
        ...     id="f1",
        ...     type="dropdown",
        ...     fieldName="favoriteColor",
        ...     label="Favorite Color",
        ...     options=["Red", "Blue"],
        ... )
    """

    # Identity
    id: str = Field(..., description="Unique identifier of the field")
    type: FieldType | str = Field(
        ...,
        union_mode="left_to_right",
        description="Field type tag from the catalog",
    )
    field_name: str = Field(default="", description="Machine-safe field name")
    label: str = Field(default="", description="Human-readable label")

    # Text properties
    placeholder: str | None = None
    help_text: str | None = None
    pattern: str | None = None

    # Flags
    required: bool | None = None
    disabled: bool | None = None
    read_only: bool | None = None

    # Length bounds
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)

    # Choices (dropdown, radiogroup)
    options: list[str] | None = None

    # Presentation
    variant: ComponentVariant | None = None
    width: Annotated[int, Field(ge=MIN_WIDTH, le=MAX_WIDTH)] | None = None

    # Image
    src: str | None = None
    alt: str | None = None

    # Rich text
    value: str | None = None

    # Data table
    columns: list[DataTableColumn] | None = None

    # Advisory
    validations: list[str] | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type_alias(cls, value: Any) -> Any:
        resolved = resolve_field_type(value) if isinstance(value, str) else None
        return resolved if resolved is not None else value

    @property
    def field_type(self) -> FieldType | None:
        """The catalog type, or None if the tag is not a known FieldType."""
        return self.type if isinstance(self.type, FieldType) else None

    @property
    def type_tag(self) -> str:
        """The raw type tag string."""
        return self.type.value if isinstance(self.type, FieldType) else str(self.type)

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict with camelCase keys, omitting unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


_DESIGN_ADAPTER = TypeAdapter(list[FormComponent])


def resolve_property_name(key: str) -> str | None:
    """Map a property key (snake_case or camelCase) to its attribute name.

    Returns:
        The FormComponent attribute name, or None if the key is unknown.
    """
    if key in FormComponent.model_fields:
        return key
    for name, info in FormComponent.model_fields.items():
        if info.alias == key:
            return name
    return None


def parse_design(data: Any) -> list[FormComponent]:
    """Validate a form design into an ordered list of components.

    Args:
        data: A list of component dicts, or a dict with a "components" list.

    Returns:
        Components in design order.

    Raises:
        pydantic.ValidationError: If the design is malformed.
    """
    if isinstance(data, dict) and "components" in data:
        data = data["components"]
    return _DESIGN_ADAPTER.validate_python(data)


def dump_design(components: list[FormComponent]) -> list[dict[str, Any]]:
    """Dump components to JSON-compatible dicts in design order."""
    return [component.to_dict() for component in components]


def export_json_schema() -> dict[str, Any]:
    """Export the FormComponent JSON Schema.

    Returns:
        JSON Schema dict with camelCase property names.
    """
    return FormComponent.model_json_schema(by_alias=True)


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
