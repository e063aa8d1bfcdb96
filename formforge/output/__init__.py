"""Output generation module for forms.

Provides the markup and script documents of a form, a human-readable
outline, and helpers to load designs and write generated files.
"""

from formforge.output.lib import (
    DEFAULT_OUTPUT_NAME,
    FormOutput,
    OutputGenerator,
    emit_markup,
    emit_script,
    format_form_outline,
    generate_form,
    load_design,
    write_form_output,
)

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
