"""Salesforce Lightning Web Components target.

Renders a form as an LWC template (``.html``) and its companion JavaScript
class (``.js``). Fields are laid out in a ``lightning-layout`` grid inside a
``lightning-card``, followed by a single Submit button.

See: https://developer.salesforce.com/docs/component-library/overview/components
"""

import html
import json
import textwrap

from formforge.catalog import FieldType
from formforge.config import get_generation_defaults
from formforge.schema import FormComponent
from formforge.targets.lib import (
    Declaration,
    DeclarationKind,
    FormTarget,
    GenerationPlan,
    register_target,
)
from formforge.visibility import PropertyRules, get_property_rules

INDENT = "    "
# Layout items sit inside template > card > div > layout.
ITEM_INDENT = INDENT * 4
DROPDOWN_PLACEHOLDER = "Select an Option"

_TEXT_INPUT_TYPES = frozenset(
    {
        FieldType.TEXT,
        FieldType.EMAIL,
        FieldType.PASSWORD,
        FieldType.NUMBER,
        FieldType.TEL,
        FieldType.URL,
        FieldType.SEARCH,
    }
)

# lightning-input type attribute for types that are not text-like.
_INPUT_KINDS = {
    FieldType.CHECKBOX: "checkbox",
    FieldType.SWITCH: "toggle",
    FieldType.DATE: "date",
    FieldType.FILE: "file",
}


def escape_attribute(value: object) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(str(value), quote=True).replace("\n", "&#10;")


def escape_template_literal(value: str) -> str:
    """Escape text for a JavaScript template literal."""
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _attr(name: str, value: object) -> str:
    return f'{name}="{escape_attribute(value)}"'


def _binding(name: str, symbol: str) -> str:
    return f"{name}={{{symbol}}}"


def _element(tag: str, attributes: list[str]) -> str:
    lines = [f"<{tag}"]
    lines.extend(f"{INDENT}{attribute}" for attribute in attributes)
    lines.append(f"></{tag}>")
    return "\n".join(lines)


def _common_attributes(component: FormComponent, rules: PropertyRules) -> list[str]:
    """Label, name and the shared flags, each only when applicable and set."""
    attributes = []
    if component.label:
        attributes.append(_attr("label", component.label))
    if component.field_name:
        attributes.append(_attr("name", component.field_name))
    if rules.required and component.required:
        attributes.append("required")
    if rules.disabled and component.disabled:
        attributes.append("disabled")
    if rules.read_only and component.read_only:
        attributes.append("readonly")
    if rules.variant and component.variant is not None:
        attributes.append(_attr("variant", component.variant.value))
    if rules.help_text and component.help_text:
        attributes.append(_attr("field-level-help", component.help_text))
    return attributes


def _text_attributes(component: FormComponent, rules: PropertyRules) -> list[str]:
    attributes = []
    if rules.placeholder and component.placeholder:
        attributes.append(_attr("placeholder", component.placeholder))
    if rules.length_bounds and component.min_length is not None:
        attributes.append(_attr("min-length", component.min_length))
    if rules.length_bounds and component.max_length is not None:
        attributes.append(_attr("max-length", component.max_length))
    if rules.pattern and component.pattern:
        attributes.append(_attr("pattern", component.pattern))
    return attributes


def format_declaration(declaration: Declaration) -> str:
    """Render one declaration as an indented class property."""
    if declaration.kind is DeclarationKind.VALUE:
        # Only the first line is indented; the literal's content is verbatim.
        literal = escape_template_literal(declaration.payload)
        return f"{INDENT}{declaration.symbol} = `{literal}`;"
    body = json.dumps(declaration.payload, indent=4, ensure_ascii=False)
    return textwrap.indent(f"{declaration.symbol} = {body};", INDENT)


@register_target
class LwcTarget(FormTarget):
    """Generates Lightning Web Components markup and script.

    Example output (markup, one dropdown):
        ```html
        <lightning-layout-item size="12" padding="horizontal-small" ...>
            <lightning-combobox
                label="Favorite Color"
                name="favoriteColor"
                value={value}
                placeholder="Select an Option"
                options={favoriteColorOptions}
            ></lightning-combobox>
        </lightning-layout-item>
        ```

    Args:
        class_name: Script class name. Defaults to FORMFORGE_COMPONENT_CLASS.
        form_title: Card title. Defaults to FORMFORGE_FORM_TITLE.
    """

    def __init__(self, class_name: str | None = None, form_title: str | None = None):
        defaults = get_generation_defaults()
        self.class_name = class_name or defaults["class_name"]
        self.form_title = form_title or defaults["form_title"]

    @property
    def name(self) -> str:
        """Target identifier."""
        return "lwc"

    @property
    def markup_extension(self) -> str:
        """LWC template extension."""
        return ".html"

    @property
    def script_extension(self) -> str:
        """LWC class extension."""
        return ".js"

    @property
    def supported_types(self) -> frozenset[FieldType]:
        """Every catalog type has an LWC rendering."""
        return frozenset(FieldType)

    def render_element(
        self,
        component: FormComponent,
        field_type: FieldType,
        declarations: dict[DeclarationKind, Declaration],
    ) -> str:
        rules = get_property_rules(field_type)

        if field_type in _TEXT_INPUT_TYPES:
            return _element(
                "lightning-input",
                [_attr("type", field_type.value)]
                + _common_attributes(component, rules)
                + _text_attributes(component, rules),
            )

        if field_type is FieldType.TEXTAREA:
            return _element(
                "lightning-textarea",
                _common_attributes(component, rules)
                + _text_attributes(component, rules),
            )

        if field_type in _INPUT_KINDS:
            return _element(
                "lightning-input",
                [_attr("type", _INPUT_KINDS[field_type])]
                + _common_attributes(component, rules),
            )

        if field_type is FieldType.DROPDOWN:
            options = declarations[DeclarationKind.OPTIONS]
            return _element(
                "lightning-combobox",
                _common_attributes(component, rules)
                + [
                    _binding("value", "value"),
                    _attr("placeholder", component.placeholder or DROPDOWN_PLACEHOLDER),
                    _binding("options", options.symbol),
                ],
            )

        if field_type is FieldType.RADIO_GROUP:
            options = declarations[DeclarationKind.OPTIONS]
            return _element(
                "lightning-radio-group",
                _common_attributes(component, rules)
                + [
                    _binding("options", options.symbol),
                    _binding("value", "value"),
                ],
            )

        if field_type is FieldType.IMAGE:
            return (
                f'<img src="{escape_attribute(component.src or "")}" '
                f'alt="{escape_attribute(component.alt or "")}" '
                f'class="slds-image slds-image_responsive">'
            )

        if field_type is FieldType.RICH_TEXT:
            value = declarations[DeclarationKind.VALUE]
            return _element(
                "lightning-formatted-rich-text",
                [_binding("value", value.symbol)],
            )

        if field_type is FieldType.DATA_TABLE:
            return _element(
                "lightning-datatable",
                [
                    _attr("key-field", "id"),
                    _binding("data", declarations[DeclarationKind.DATA].symbol),
                    _binding("columns", declarations[DeclarationKind.COLUMNS].symbol),
                    "hide-checkbox-column",
                ],
            )

        if field_type is FieldType.SECTION_HEADING:
            return (
                '<h2 class="slds-text-heading_medium slds-m-bottom_small">'
                f"{escape_attribute(component.label)}</h2>"
            )

        raise ValueError(f"No LWC rendering for field type '{field_type.value}'")

    def render_markup(self, plan: GenerationPlan) -> str:
        items = []
        for fragment in plan.fragments:
            item = "\n".join(
                [
                    f'<lightning-layout-item size="{fragment.width}" '
                    'padding="horizontal-small" class="slds-m-bottom_small">',
                    textwrap.indent(fragment.markup, INDENT),
                    "</lightning-layout-item>",
                ]
            )
            items.append(textwrap.indent(item, ITEM_INDENT))

        lines = [
            "<template>",
            f'    <lightning-card title="{escape_attribute(self.form_title)}" '
            'icon-name="standard:account">',
            '        <div class="slds-p-around_medium">',
            '            <lightning-layout multiple-rows="true">',
        ]
        if items:
            lines.append("\n\n".join(items))
        lines.extend(
            [
                "            </lightning-layout>",
                '            <div class="slds-m-top_medium">',
                "                <lightning-button",
                '                    variant="brand"',
                '                    label="Submit"',
                "                    onclick={handleSubmit}",
                "                ></lightning-button>",
                "            </div>",
                "        </div>",
                "    </lightning-card>",
                "</template>",
            ]
        )
        return "\n".join(lines) + "\n"

    def render_script(self, plan: GenerationPlan) -> str:
        members = [format_declaration(decl) for decl in plan.declarations]
        members.append(f"{INDENT}@track value;")
        members.append(
            "\n".join(
                [
                    f"{INDENT}// Add your form handling logic here",
                    f"{INDENT}// e.g., handleChange(event) {{ ... }}",
                    f"{INDENT}handleSubmit(event) {{",
                    f"{INDENT * 2}// Implement your submit logic",
                    f"{INDENT * 2}console.log('Form submitted');",
                    f"{INDENT}}}",
                ]
            )
        )
        return (
            "import { LightningElement, track } from 'lwc';\n"
            "\n"
            f"export default class {self.class_name} extends LightningElement {{\n"
            + "\n\n".join(members)
            + "\n}\n"
        )


__all__ = [
    "DROPDOWN_PLACEHOLDER",
    "LwcTarget",
    "escape_attribute",
    "escape_template_literal",
    "format_declaration",
]
