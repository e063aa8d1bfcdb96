"""Generation targets and the intermediate representation they share.

Generation runs in a single pass. `FormTarget.plan` walks the schema once and
produces a `GenerationPlan`: one `FieldFragment` per supported field, holding
the field's markup element and the script `Declaration`s that element
references. Markup and script are both rendered from the same plan, so every
symbol the markup references has exactly the declaration that was created
for it.

Targets register themselves by name, mirroring a provider registry.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from formforge.catalog import FieldType
from formforge.schema import MAX_WIDTH, MIN_WIDTH, FormComponent
from formforge.visibility import ignored_properties

logger = logging.getLogger(__name__)

SAMPLE_ROW_COUNT = 3
DEFAULT_WIDTH = MAX_WIDTH


class DeclarationKind(str, Enum):
    """Kinds of script-side data a markup element can reference."""

    OPTIONS = "options"
    VALUE = "value"
    COLUMNS = "columns"
    DATA = "data"


# Symbol name is the field name followed by this suffix.
SYMBOL_SUFFIXES: dict[DeclarationKind, str] = {
    DeclarationKind.OPTIONS: "Options",
    DeclarationKind.VALUE: "Value",
    DeclarationKind.COLUMNS: "Columns",
    DeclarationKind.DATA: "Data",
}


@dataclass(frozen=True)
class Declaration:
    """Script-side data generated for one field.

    Attributes:
        symbol: Property name in the generated script.
        kind: What the data describes.
        payload: JSON-compatible data for OPTIONS, COLUMNS and DATA; the
            literal markup string for VALUE.
    """

    symbol: str
    kind: DeclarationKind
    payload: Any


@dataclass(frozen=True)
class FieldFragment:
    """Everything generated for one field.

    Attributes:
        component_id: Id of the source component.
        field_type: Resolved field type.
        width: Layout span, already clamped to the grid.
        markup: The field's element markup, unindented.
        declarations: Declarations the markup references, in script order.
    """

    component_id: str
    field_type: FieldType
    width: int
    markup: str
    declarations: tuple[Declaration, ...] = ()


@dataclass
class GenerationWarning:
    """A field that generation could not fully represent.

    Attributes:
        component_id: Id of the affected component.
        message: Human-readable explanation.
        value: The offending value, if any.
    """

    component_id: str
    message: str
    value: str | None = None


@dataclass
class GenerationPlan:
    """Intermediate representation of a whole form."""

    fragments: list[FieldFragment] = field(default_factory=list)
    warnings: list[GenerationWarning] = field(default_factory=list)

    @property
    def declarations(self) -> list[Declaration]:
        """All declarations in field order."""
        return [decl for frag in self.fragments for decl in frag.declarations]

    @property
    def symbols(self) -> list[str]:
        """Declared symbol names in field order."""
        return [decl.symbol for decl in self.declarations]


@dataclass
class GeneratedForm:
    """Markup and script generated together from one plan.

    Attributes:
        markup: The markup document.
        script: The companion script document.
        target: Name of the target that produced them.
        warnings: Fields that were skipped or degraded.
    """

    markup: str
    script: str
    target: str
    warnings: list[GenerationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were emitted."""
        return len(self.warnings) > 0


def symbol_for(field_name: str, kind: DeclarationKind) -> str:
    """Symbol name of a declaration for a field."""
    return f"{field_name}{SYMBOL_SUFFIXES[kind]}"


def clamp_width(width: Any) -> int:
    """Layout span of a field; missing or malformed widths mean full width."""
    if width is None:
        return DEFAULT_WIDTH
    try:
        span = int(width)
    except (TypeError, ValueError):
        return DEFAULT_WIDTH
    return max(MIN_WIDTH, min(MAX_WIDTH, span))


def plan_declarations(
    component: FormComponent, field_type: FieldType
) -> tuple[Declaration, ...]:
    """Script declarations a field needs, independent of the target.

    Dropdowns and radio groups get an options list of label/value pairs, rich
    text gets its literal content, data tables get column definitions plus a
    sample dataset. Other types need nothing.
    """
    name = component.field_name

    if field_type in (FieldType.DROPDOWN, FieldType.RADIO_GROUP):
        options = [{"label": opt, "value": opt} for opt in component.options or []]
        return (
            Declaration(
                symbol_for(name, DeclarationKind.OPTIONS),
                DeclarationKind.OPTIONS,
                options,
            ),
        )

    if field_type is FieldType.RICH_TEXT:
        return (
            Declaration(
                symbol_for(name, DeclarationKind.VALUE),
                DeclarationKind.VALUE,
                component.value or "",
            ),
        )

    if field_type is FieldType.DATA_TABLE:
        columns = component.columns or []
        column_defs = [
            {"label": col.label, "fieldName": col.field_name} for col in columns
        ]
        rows: list[dict[str, Any]] = []
        for index in range(SAMPLE_ROW_COUNT):
            row: dict[str, Any] = {"id": index}
            for col in columns:
                row[col.field_name] = f"Sample Data {index + 1}"
            rows.append(row)
        return (
            Declaration(
                symbol_for(name, DeclarationKind.COLUMNS),
                DeclarationKind.COLUMNS,
                column_defs,
            ),
            Declaration(
                symbol_for(name, DeclarationKind.DATA),
                DeclarationKind.DATA,
                rows,
            ),
        )

    return ()


class FormTarget(ABC):
    """Abstract base class for code generation targets.

    Each target turns a `GenerationPlan` into a markup document and a script
    document for one component framework.

    Subclasses must implement:
        - name: Target identifier string
        - markup_extension / script_extension: Output file extensions
        - supported_types: Field types the target can render
        - render_element: Markup for one field
        - render_markup / render_script: Whole documents from a plan

    Example:
        >>> target = get_target("lwc")
        >>> form = target.generate(session.components)
        >>> print(form.markup)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Target identifier string."""
        ...

    @property
    @abstractmethod
    def markup_extension(self) -> str:
        """Markup file extension (e.g., '.html')."""
        ...

    @property
    @abstractmethod
    def script_extension(self) -> str:
        """Script file extension (e.g., '.js')."""
        ...

    @property
    @abstractmethod
    def supported_types(self) -> frozenset[FieldType]:
        """Field types this target renders."""
        ...

    @abstractmethod
    def render_element(
        self,
        component: FormComponent,
        field_type: FieldType,
        declarations: dict[DeclarationKind, Declaration],
    ) -> str:
        """Render the markup element of one field.

        Args:
            component: The field.
            field_type: Its resolved type (always in supported_types).
            declarations: The field's declarations by kind; the element must
                reference script data only through these symbols.

        Returns:
            str: Unindented element markup.
        """
        ...

    @abstractmethod
    def render_markup(self, plan: GenerationPlan) -> str:
        """Render the markup document from a plan."""
        ...

    @abstractmethod
    def render_script(self, plan: GenerationPlan) -> str:
        """Render the script document from a plan."""
        ...

    def plan(self, components: Iterable[FormComponent]) -> GenerationPlan:
        """Build the intermediate representation of a form.

        Fields whose type is unknown or not supported by this target are
        left out and reported as warnings; they never raise. Properties set
        on a field whose type does not use them are also reported.

        Args:
            components: Fields in form order.

        Returns:
            GenerationPlan with one fragment per rendered field.
        """
        plan = GenerationPlan()
        supported = self.supported_types

        for component in components:
            field_type = component.field_type
            if field_type is None or field_type not in supported:
                logger.debug(
                    f"Skipping field {component.id}: "
                    f"type '{component.type_tag}' not supported by {self.name}"
                )
                plan.warnings.append(
                    GenerationWarning(
                        component_id=component.id,
                        message=f"Field type not supported by {self.name}; skipped",
                        value=component.type_tag,
                    )
                )
                continue

            for attribute in ignored_properties(component):
                plan.warnings.append(
                    GenerationWarning(
                        component_id=component.id,
                        message=f"Property not used by {field_type.value} fields; ignored",
                        value=attribute,
                    )
                )

            declarations = plan_declarations(component, field_type)
            markup = self.render_element(
                component,
                field_type,
                {decl.kind: decl for decl in declarations},
            )
            plan.fragments.append(
                FieldFragment(
                    component_id=component.id,
                    field_type=field_type,
                    width=clamp_width(component.width),
                    markup=markup,
                    declarations=declarations,
                )
            )

        return plan

    def generate(self, components: Sequence[FormComponent]) -> GeneratedForm:
        """Generate markup and script together from one plan."""
        plan = self.plan(components)
        return GeneratedForm(
            markup=self.render_markup(plan),
            script=self.render_script(plan),
            target=self.name,
            warnings=list(plan.warnings),
        )


# Target registry - populated by target modules on import
_registry: dict[str, type[FormTarget]] = {}

# Modules under formforge.targets that register targets.
_TARGET_MODULES = ("lwc",)


def register_target(target_cls: type[FormTarget]) -> type[FormTarget]:
    """Register a target class in the registry.

    Uses a temporary instance to retrieve the target name.

    Example:
        >>> @register_target
        ... class MyTarget(FormTarget):
        ...     ...
    """
    _registry[target_cls().name] = target_cls
    return target_cls


def get_target(name: str, **kwargs: Any) -> FormTarget:
    """Get a target instance by name.

    Args:
        name: The target identifier (e.g., "lwc").
        **kwargs: Passed to the target constructor.

    Raises:
        KeyError: If no target with the given name is registered.
    """
    if name not in _registry:
        _import_targets()
        if name not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise KeyError(f"Unknown target '{name}'. Available: {available}")
    return _registry[name](**kwargs)


def list_targets() -> list[str]:
    """List all registered target names."""
    _import_targets()
    return list(_registry.keys())


def _import_targets() -> None:
    """Import target modules to trigger registration."""
    import importlib

    for module_name in _TARGET_MODULES:
        importlib.import_module(f"formforge.targets.{module_name}")


__all__ = [
    "SAMPLE_ROW_COUNT",
    "Declaration",
    "DeclarationKind",
    "FieldFragment",
    "FormTarget",
    "GeneratedForm",
    "GenerationPlan",
    "GenerationWarning",
    "clamp_width",
    "get_target",
    "list_targets",
    "plan_declarations",
    "register_target",
    "symbol_for",
]
