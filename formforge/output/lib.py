"""Public generation entry points and output formatting.

`emit_markup` and `emit_script` are the two documents of a form; they are
always produced together by `generate_form`, which also adds a human-readable
outline of the form for review.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from formforge.config import get_generation_defaults
from formforge.schema import FormComponent, parse_design
from formforge.targets import GenerationWarning, clamp_width, get_target

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "form"


@dataclass
class FormOutput:
    """Complete generated output for a form.

    Attributes:
        markup: Markup document.
        script: Script document.
        outline: Human-readable outline of the fields.
        target: Target used for generation.
        warnings: Fields that were skipped or had ignored properties.
        markup_extension: File extension for the markup document.
        script_extension: File extension for the script document.
    """

    markup: str
    script: str
    outline: str
    target: str
    warnings: list[GenerationWarning] = field(default_factory=list)
    markup_extension: str = ".html"
    script_extension: str = ".js"


def format_form_outline(
    components: Iterable[FormComponent], title: str | None = None
) -> str:
    """Format a form as a human-readable outline.

    Example output:
        Generated Form
        ├── Full Name [text, fullName, 50%, required]
        ├── Favorite Color [dropdown, favoriteColor, 2 options]
        └── Details [section-heading]

    Args:
        components: Fields in form order.
        title: Optional first line.

    Returns:
        Formatted outline string.
    """
    items = list(components)
    lines: list[str] = [title] if title else []

    for i, component in enumerate(items):
        connector = "└── " if i == len(items) - 1 else "├── "
        lines.append(f"{connector}{_describe(component)}")

    return "\n".join(lines)


def _describe(component: FormComponent) -> str:
    name = component.label or component.field_name or component.id

    attrs = [component.type_tag]
    if component.field_type is None:
        attrs.append("unsupported")
    if component.field_name and component.field_name != name:
        attrs.append(component.field_name)
    width = clamp_width(component.width)
    if width != 12:
        attrs.append(f"{round(width / 12 * 100)}%")
    if component.required:
        attrs.append("required")
    if component.options is not None:
        attrs.append(f"{len(component.options)} options")
    if component.columns is not None:
        attrs.append(f"{len(component.columns)} columns")

    return f"{name} [{', '.join(attrs)}]"


def _resolve_target_name(target: str | None) -> str:
    return target or get_generation_defaults()["target"]


def generate_form(
    components: Iterable[FormComponent],
    target: str | None = None,
    **target_options: Any,
) -> FormOutput:
    """Generate both documents of a form from one snapshot.

    Args:
        components: Fields in form order (a list or a FormSession).
        target: Target name; defaults to FORMFORGE_TARGET.
        **target_options: Passed to the target (e.g., class_name, form_title).

    Returns:
        FormOutput with markup, script and outline.

    Raises:
        KeyError: If the target is not registered.
    """
    snapshot = list(components)
    form_target = get_target(_resolve_target_name(target), **target_options)
    generated = form_target.generate(snapshot)

    for warning in generated.warnings:
        logger.debug(f"{warning.component_id}: {warning.message} ({warning.value})")

    return FormOutput(
        markup=generated.markup,
        script=generated.script,
        outline=format_form_outline(snapshot),
        target=generated.target,
        warnings=generated.warnings,
        markup_extension=form_target.markup_extension,
        script_extension=form_target.script_extension,
    )


def emit_markup(
    components: Iterable[FormComponent],
    target: str | None = None,
    **target_options: Any,
) -> str:
    """Generate the markup document of a form."""
    return generate_form(components, target, **target_options).markup


def emit_script(
    components: Iterable[FormComponent],
    target: str | None = None,
    **target_options: Any,
) -> str:
    """Generate the script document of a form."""
    return generate_form(components, target, **target_options).script


class OutputGenerator:
    """Generates complete output for a form.

    Holds the target choice and its options so repeated generations of a
    changing session use the same settings.
    """

    def __init__(self, default_target: str | None = None, **target_options: Any):
        """Initialize generator.

        Args:
            default_target: Default target name (FORMFORGE_TARGET if omitted).
            **target_options: Passed to the target on every generation.
        """
        self._default_target = _resolve_target_name(default_target)
        self._target_options = target_options

    @property
    def default_target(self) -> str:
        return self._default_target

    def generate(
        self,
        components: Iterable[FormComponent],
        target: str | None = None,
    ) -> FormOutput:
        """Generate output for a form.

        Args:
            components: Fields in form order.
            target: Target override.

        Returns:
            FormOutput with markup, script and outline.
        """
        return generate_form(
            components, target or self._default_target, **self._target_options
        )


def load_design(path: str | Path) -> list[FormComponent]:
    """Load a form design from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not JSON.
        pydantic.ValidationError: If the design is malformed.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_design(data)


def write_form_output(
    output: FormOutput,
    directory: str | Path,
    name: str = DEFAULT_OUTPUT_NAME,
) -> tuple[Path, Path]:
    """Write the markup and script documents into a directory.

    Args:
        output: Generated form.
        directory: Destination; created if missing.
        name: Base file name, without extension.

    Returns:
        Paths of the markup and script files.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    markup_path = directory / f"{name}{output.markup_extension}"
    script_path = directory / f"{name}{output.script_extension}"
    markup_path.write_text(output.markup, encoding="utf-8")
    script_path.write_text(output.script, encoding="utf-8")

    logger.info(f"Wrote {markup_path} and {script_path}")
    return markup_path, script_path


__all__ = [
    "DEFAULT_OUTPUT_NAME",
    "FormOutput",
    "OutputGenerator",
    "emit_markup",
    "emit_script",
    "format_form_outline",
    "generate_form",
    "load_design",
    "write_form_output",
]
