"""Lightning Web Components target."""

from formforge.targets.lwc.lib import (
    DROPDOWN_PLACEHOLDER,
    LwcTarget,
    escape_attribute,
    escape_template_literal,
    format_declaration,
)

__all__ = [
    "DROPDOWN_PLACEHOLDER",
    "LwcTarget",
    "escape_attribute",
    "escape_template_literal",
    "format_declaration",
]
