"""Code generation targets and their shared intermediate representation."""

from formforge.targets.lib import (
    SAMPLE_ROW_COUNT,
    Declaration,
    DeclarationKind,
    FieldFragment,
    FormTarget,
    GeneratedForm,
    GenerationPlan,
    GenerationWarning,
    clamp_width,
    get_target,
    list_targets,
    plan_declarations,
    register_target,
    symbol_for,
)

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
