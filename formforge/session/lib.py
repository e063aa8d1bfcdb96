"""Form session: the owned, ordered collection of fields in one design.

A `FormSession` is the single writer of its schema. Editors translate user
gestures into the command methods below and read back immutable snapshots
through `components`. Commands that reference an id which no longer exists
are no-ops, since stale references from the UI are expected.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any
from uuid import uuid4

from formforge.catalog import FieldType, resolve_field_type
from formforge.naming import to_camel_case
from formforge.schema import (
    ComponentVariant,
    DataTableColumn,
    FormComponent,
    resolve_property_name,
)

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 12
DEFAULT_OPTIONS = ("Option 1", "Option 2")
SWITCH_LABEL = "Enable Feature"
IMAGE_LABEL = "Image"
IMAGE_SRC = "https://picsum.photos/seed/1/600/400"
IMAGE_ALT = "Placeholder image"
RICH_TEXT_LABEL = "Rich Text"
RICH_TEXT_VALUE = "<h2>Rich Text</h2><p>This is some rich text content.</p>"
DATA_TABLE_LABEL = "Data Table"
DATA_TABLE_FIELD_NAME = "dataTable"
DATA_TABLE_COLUMNS = (("Column 1", "col1"), ("Column 2", "col2"))


def _new_id() -> str:
    return uuid4().hex


def build_component(
    component_id: str,
    field_type: FieldType | str,
    label: str | None = None,
) -> FormComponent:
    """Build a new component with the defaults of its type.

    An explicit label replaces the fixed label some types start with; the
    fixed field names of image, rich text and data table fields apply
    either way.

    Args:
        component_id: Id for the new component.
        field_type: Catalog type (or an unknown tag, passed through).
        label: Optional label; defaults to "New <tag>".
    """
    resolved = resolve_field_type(field_type)
    tag = resolved.value if resolved is not None else str(field_type)

    attrs: dict[str, Any] = {
        "required": False,
        "variant": ComponentVariant.STANDARD,
        "width": DEFAULT_WIDTH,
    }
    fixed_label: str | None = None
    fixed_name: str | None = None

    if resolved in (FieldType.DROPDOWN, FieldType.RADIO_GROUP):
        attrs["options"] = list(DEFAULT_OPTIONS)
    elif resolved is FieldType.SWITCH:
        fixed_label = SWITCH_LABEL
    elif resolved is FieldType.IMAGE:
        fixed_label = IMAGE_LABEL
        fixed_name = ""
        attrs["src"] = IMAGE_SRC
        attrs["alt"] = IMAGE_ALT
    elif resolved is FieldType.RICH_TEXT:
        fixed_label = RICH_TEXT_LABEL
        fixed_name = ""
        attrs["value"] = RICH_TEXT_VALUE
    elif resolved is FieldType.DATA_TABLE:
        fixed_label = DATA_TABLE_LABEL
        fixed_name = DATA_TABLE_FIELD_NAME
        attrs["columns"] = [
            DataTableColumn(label=col_label, field_name=col_name)
            for col_label, col_name in DATA_TABLE_COLUMNS
        ]

    final_label = label if label is not None else (fixed_label or f"New {tag}")
    field_name = fixed_name if fixed_name is not None else to_camel_case(final_label)

    return FormComponent(
        id=component_id,
        type=resolved if resolved is not None else tag,
        field_name=field_name,
        label=final_label,
        **attrs,
    )


class FormSession:
    """Session-scoped owner of one form design.

    Holds the ordered field sequence and the active selection. Sequence order
    is field order. Ids are allocated here and never reused.

    Example:
        >>> session = FormSession()
        >>> color = session.create(FieldType.DROPDOWN, "Favorite Color")
        >>> session.update(color.id, {"options": ["Red", "Blue"]})
        >>> [c.field_name for c in session.components]
        ['favoriteColor']

    Args:
        id_factory: Callable producing fresh ids. Defaults to uuid4 hex.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self._id_factory = id_factory or _new_id
        self._components: list[FormComponent] = []
        self._selected_id: str | None = None
        self._issued_ids: set[str] = set()

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def components(self) -> tuple[FormComponent, ...]:
        """Snapshot of the current field sequence."""
        return tuple(self._components)

    @property
    def ids(self) -> list[str]:
        """Ids in field order."""
        return [c.id for c in self._components]

    @property
    def selected_id(self) -> str | None:
        """Id of the active selection, if any."""
        return self._selected_id

    @property
    def selected(self) -> FormComponent | None:
        """The active selection, if any."""
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def get(self, component_id: str) -> FormComponent | None:
        """Look up a component by id."""
        index = self.index_of(component_id)
        return None if index is None else self._components[index]

    def index_of(self, component_id: str) -> int | None:
        """Position of a component in the sequence, or None if absent."""
        for index, component in enumerate(self._components):
            if component.id == component_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[FormComponent]:
        return iter(self.components)

    def __contains__(self, component_id: object) -> bool:
        return any(c.id == component_id for c in self._components)

    # =========================================================================
    # Commands
    # =========================================================================

    def create(
        self, field_type: FieldType | str, label: str | None = None
    ) -> FormComponent:
        """Append a new field with type defaults and select it.

        Args:
            field_type: Catalog type of the new field.
            label: Optional label; defaults to "New <tag>".

        Returns:
            The created component.
        """
        if resolve_field_type(field_type) is None:
            logger.warning(f"Creating field with unknown type '{field_type}'")

        component = build_component(self._allocate_id(), field_type, label)
        self._components.append(component)
        self._selected_id = component.id
        logger.debug(f"Created {component.type_tag} field {component.id}")
        return component

    def update(self, component_id: str, changes: Mapping[str, Any]) -> None:
        """Merge property changes into a field.

        Keys may be snake_case attribute names or camelCase design keys. The
        id cannot be changed and unknown keys are skipped. No cross-field
        checks are made here.
        """
        index = self.index_of(component_id)
        if index is None:
            logger.debug(f"update ignored, no field {component_id}")
            return

        normalized: dict[str, Any] = {}
        for key, value in changes.items():
            name = resolve_property_name(key)
            if name is None:
                logger.warning(f"Ignoring unknown property '{key}' for {component_id}")
                continue
            if name == "id":
                logger.warning(f"Ignoring id change for {component_id}")
                continue
            normalized[name] = _coerce_change(name, value)

        if not normalized:
            return
        self._components[index] = self._components[index].model_copy(
            update=normalized
        )

    def delete(self, component_id: str) -> None:
        """Remove a field, clearing the selection if it was selected."""
        index = self.index_of(component_id)
        if index is None:
            logger.debug(f"delete ignored, no field {component_id}")
            return
        del self._components[index]
        if self._selected_id == component_id:
            self._selected_id = None

    def reorder(self, moved_id: str, target_id: str) -> None:
        """Move a field into the slot the target occupied.

        The moved field is removed first and then inserted at the target's
        index from before the removal, so ``[A, B, C]`` with
        ``reorder(A, C)`` becomes ``[B, C, A]``.
        """
        moved_index = self.index_of(moved_id)
        target_index = self.index_of(target_id)
        if moved_index is None or target_index is None:
            logger.debug(f"reorder ignored ({moved_id} -> {target_id})")
            return

        moved = self._components.pop(moved_index)
        self._components.insert(target_index, moved)

    def select(self, component_id: str) -> None:
        """Make a field the active selection."""
        if component_id not in self:
            logger.debug(f"select ignored, no field {component_id}")
            return
        self._selected_id = component_id

    def clear_selection(self) -> None:
        """Clear the active selection."""
        self._selected_id = None

    # =========================================================================
    # Internals
    # =========================================================================

    def _allocate_id(self) -> str:
        component_id = self._id_factory()
        while component_id in self._issued_ids:
            component_id = self._id_factory()
        self._issued_ids.add(component_id)
        return component_id


def _coerce_change(name: str, value: Any) -> Any:
    """Coerce editor values to the model's types where the mapping is obvious."""
    if value is None:
        return None
    if name == "type":
        resolved = resolve_field_type(value)
        return resolved if resolved is not None else value
    if name == "variant" and not isinstance(value, ComponentVariant):
        try:
            return ComponentVariant(value)
        except ValueError:
            return value
    if name == "width" and isinstance(value, str) and value.strip().isdigit():
        return int(value)
    if name == "columns":
        return [
            col if isinstance(col, DataTableColumn) else DataTableColumn.model_validate(col)
            for col in value
        ]
    return value


__all__ = ["FormSession", "build_component"]
