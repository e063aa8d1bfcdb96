"""Unit tests for the LWC target."""

import re

import pytest

from formforge.catalog import FieldType
from formforge.schema import DataTableColumn, FormComponent
from formforge.targets.lib import Declaration, DeclarationKind

from .lib import (
    LwcTarget,
    escape_attribute,
    escape_template_literal,
    format_declaration,
)


@pytest.fixture
def target():
    """Create an LwcTarget with fixed names."""
    return LwcTarget(class_name="MyFormComponent", form_title="Generated Form")


def _element(target: LwcTarget, component: FormComponent) -> str:
    (fragment,) = target.plan([component]).fragments
    return fragment.markup


class TestLwcTarget:
    """Tests for target metadata."""

    @pytest.mark.unit
    def test_name_and_extensions(self, target):
        assert target.name == "lwc"
        assert target.markup_extension == ".html"
        assert target.script_extension == ".js"

    @pytest.mark.unit
    def test_every_field_type_renders(self, target):
        """Each catalog type produces an element."""
        for field_type in FieldType:
            component = FormComponent(id="x", type=field_type, field_name="x", label="X")
            assert _element(target, component)

    @pytest.mark.unit
    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("FORMFORGE_COMPONENT_CLASS", "ContactForm")
        monkeypatch.setenv("FORMFORGE_FORM_TITLE", "Contact Us")
        target = LwcTarget()
        assert target.class_name == "ContactForm"
        assert target.form_title == "Contact Us"


class TestElements:
    """Tests for per-type element markup."""

    @pytest.mark.unit
    def test_text_input(self, target):
        component = FormComponent(
            id="t",
            type="text",
            field_name="fullName",
            label="Full Name",
            placeholder="Jane Doe",
            required=True,
            min_length=2,
            max_length=40,
            pattern="[A-Za-z ]+",
            variant="label-inline",
            help_text="As on your passport",
        )
        assert _element(target, component) == "\n".join(
            [
                "<lightning-input",
                '    type="text"',
                '    label="Full Name"',
                '    name="fullName"',
                "    required",
                '    variant="label-inline"',
                '    field-level-help="As on your passport"',
                '    placeholder="Jane Doe"',
                '    min-length="2"',
                '    max-length="40"',
                '    pattern="[A-Za-z ]+"',
                "></lightning-input>",
            ]
        )

    @pytest.mark.unit
    def test_false_flags_not_emitted(self, target):
        component = FormComponent(
            id="t", type="email", field_name="email", label="Email",
            required=False, disabled=False, read_only=False,
        )
        markup = _element(target, component)
        assert "required" not in markup
        assert "disabled" not in markup
        assert "readonly" not in markup
        assert 'type="email"' in markup

    @pytest.mark.unit
    def test_disabled_and_readonly(self, target):
        component = FormComponent(
            id="t", type="number", field_name="age", label="Age",
            disabled=True, read_only=True,
        )
        markup = _element(target, component)
        assert "    disabled\n" in markup
        assert "    readonly\n" in markup

    @pytest.mark.unit
    def test_inapplicable_properties_not_emitted(self, target):
        """Tel fields have no placeholder or pattern; email has no length bounds."""
        tel = FormComponent(
            id="t", type="tel", field_name="phone", label="Phone",
            placeholder="555", pattern="[0-9]+",
        )
        markup = _element(target, tel)
        assert "placeholder" not in markup
        assert "pattern" not in markup

        email = FormComponent(id="e", type="email", field_name="e", min_length=3)
        assert "min-length" not in _element(target, email)

    @pytest.mark.unit
    def test_textarea_has_no_pattern(self, target):
        component = FormComponent(
            id="t", type="textarea", field_name="bio", label="Bio",
            pattern="x+", max_length=500,
        )
        markup = _element(target, component)
        assert markup.startswith("<lightning-textarea")
        assert 'max-length="500"' in markup
        assert "pattern" not in markup
        assert "type=" not in markup

    @pytest.mark.unit
    def test_checkbox_without_variant(self, target):
        component = FormComponent(
            id="c", type="checkbox", field_name="agree", label="I agree",
            variant="standard", required=True,
        )
        markup = _element(target, component)
        assert 'type="checkbox"' in markup
        assert "variant" not in markup
        assert "required" in markup

    @pytest.mark.unit
    def test_switch_never_required(self, target):
        component = FormComponent(
            id="s", type="switch", field_name="enableFeature",
            label="Enable Feature", required=True,
        )
        markup = _element(target, component)
        assert 'type="toggle"' in markup
        assert "required" not in markup

    @pytest.mark.unit
    def test_dropdown(self, target):
        component = FormComponent(
            id="d", type="dropdown", field_name="favoriteColor",
            label="Favorite Color", options=["Red", "Blue"],
        )
        markup = _element(target, component)
        assert markup.startswith("<lightning-combobox")
        assert "value={value}" in markup
        assert 'placeholder="Select an Option"' in markup
        assert "options={favoriteColorOptions}" in markup

    @pytest.mark.unit
    def test_dropdown_custom_placeholder(self, target):
        component = FormComponent(
            id="d", type="dropdown", field_name="size", placeholder="Pick a size"
        )
        assert 'placeholder="Pick a size"' in _element(target, component)

    @pytest.mark.unit
    def test_radio_group(self, target):
        component = FormComponent(
            id="r", type="radiogroup", field_name="plan", label="Plan", options=["A"]
        )
        markup = _element(target, component)
        assert markup.startswith("<lightning-radio-group")
        assert "options={planOptions}" in markup
        assert "variant" not in markup

    @pytest.mark.unit
    def test_date_and_file(self, target):
        date = FormComponent(id="d", type="date", field_name="when", label="When")
        upload = FormComponent(id="f", type="file", field_name="cv", label="CV")
        assert 'type="date"' in _element(target, date)
        assert 'type="file"' in _element(target, upload)

    @pytest.mark.unit
    def test_image(self, target):
        component = FormComponent(
            id="i", type="image", src="https://example.com/a.png", alt='A "quoted" alt'
        )
        assert _element(target, component) == (
            '<img src="https://example.com/a.png" alt="A &quot;quoted&quot; alt" '
            'class="slds-image slds-image_responsive">'
        )

    @pytest.mark.unit
    def test_rich_text(self, target):
        component = FormComponent(id="r", type="richtext", field_name="intro", value="<p/>")
        assert _element(target, component) == "\n".join(
            [
                "<lightning-formatted-rich-text",
                "    value={introValue}",
                "></lightning-formatted-rich-text>",
            ]
        )

    @pytest.mark.unit
    def test_data_table(self, target):
        component = FormComponent(
            id="t", type="datatable", field_name="orders",
            columns=[DataTableColumn(label="Total", field_name="total")],
        )
        markup = _element(target, component)
        assert 'key-field="id"' in markup
        assert "data={ordersData}" in markup
        assert "columns={ordersColumns}" in markup
        assert "hide-checkbox-column" in markup

    @pytest.mark.unit
    def test_section_heading(self, target):
        component = FormComponent(id="h", type="section-heading", label="Contact & Address")
        assert _element(target, component) == (
            '<h2 class="slds-text-heading_medium slds-m-bottom_small">'
            "Contact &amp; Address</h2>"
        )

    @pytest.mark.unit
    def test_multiline_section_heading_stays_on_one_line(self, target):
        component = FormComponent(id="h", type="section-heading", label="Step 1\nContact")
        form = target.generate([component])
        heading = next(line for line in form.markup.splitlines() if "<h2" in line)
        assert heading.strip().endswith("Step 1&#10;Contact</h2>")

    @pytest.mark.unit
    def test_empty_label_and_name_omitted(self, target):
        component = FormComponent(id="t", type="text", field_name="", label="")
        markup = _element(target, component)
        assert "label=" not in markup
        assert "name=" not in markup
        assert 'type="text"' in markup

    @pytest.mark.unit
    def test_symbol_only_label(self, target):
        component = FormComponent(id="t", type="text", field_name="", label="???")
        markup = _element(target, component)
        assert 'label="???"' in markup
        assert "name=" not in markup

    @pytest.mark.unit
    def test_label_escaped(self, target):
        component = FormComponent(
            id="t", type="text", field_name="q", label='Say "hi" <now>'
        )
        assert 'label="Say &quot;hi&quot; &lt;now&gt;"' in _element(target, component)


class TestMarkupDocument:
    """Tests for the full markup document."""

    @pytest.mark.unit
    def test_empty_form(self, target):
        form = target.generate([])
        assert form.markup.startswith("<template>\n")
        assert form.markup.endswith("</template>\n")
        assert '<lightning-card title="Generated Form"' in form.markup
        assert form.markup.count("<lightning-button") == 1
        assert "lightning-layout-item" not in form.markup

    @pytest.mark.unit
    def test_layout_item_wrapping(self, target):
        half = FormComponent(id="a", type="text", field_name="a", width=6)
        full = FormComponent(id="b", type="text", field_name="b")
        markup = target.generate([half, full]).markup
        sizes = re.findall(r'<lightning-layout-item size="(\d+)"', markup)
        assert sizes == ["6", "12"]
        assert (
            '                <lightning-layout-item size="6" '
            'padding="horizontal-small" class="slds-m-bottom_small">\n'
            "                    <lightning-input\n"
            '                        type="text"\n'
        ) in markup

    @pytest.mark.unit
    def test_custom_title_escaped(self):
        target = LwcTarget(class_name="X", form_title="Q&A")
        assert 'title="Q&amp;A"' in target.generate([]).markup


class TestScriptDocument:
    """Tests for the full script document."""

    @pytest.mark.unit
    def test_empty_form(self, target):
        script = target.generate([]).script
        assert script == (
            "import { LightningElement, track } from 'lwc';\n"
            "\n"
            "export default class MyFormComponent extends LightningElement {\n"
            "    @track value;\n"
            "\n"
            "    // Add your form handling logic here\n"
            "    // e.g., handleChange(event) { ... }\n"
            "    handleSubmit(event) {\n"
            "        // Implement your submit logic\n"
            "        console.log('Form submitted');\n"
            "    }\n"
            "}\n"
        )

    @pytest.mark.unit
    def test_options_declaration(self, target):
        component = FormComponent(
            id="d", type="dropdown", field_name="favoriteColor", options=["Red"]
        )
        script = target.generate([component]).script
        assert (
            "    favoriteColorOptions = [\n"
            "        {\n"
            '            "label": "Red",\n'
            '            "value": "Red"\n'
            "        }\n"
            "    ];\n"
        ) in script

    @pytest.mark.unit
    def test_class_name(self):
        script = LwcTarget(class_name="SignupForm", form_title="t").generate([]).script
        assert "export default class SignupForm extends LightningElement {" in script


class TestEscaping:
    """Tests for escaping helpers."""

    @pytest.mark.unit
    def test_escape_attribute(self):
        assert escape_attribute('a"b<c>&') == "a&quot;b&lt;c&gt;&amp;"
        assert escape_attribute("two\nlines") == "two&#10;lines"
        assert escape_attribute(5) == "5"

    @pytest.mark.unit
    def test_escape_template_literal(self):
        assert escape_template_literal("a`b") == "a\\`b"
        assert escape_template_literal("${x}") == "\\${x}"
        assert escape_template_literal("c:\\path") == "c:\\\\path"

    @pytest.mark.unit
    def test_value_declaration_keeps_content_verbatim(self):
        decl = Declaration("introValue", DeclarationKind.VALUE, "<p>\n  `hi`\n</p>")
        assert format_declaration(decl) == "    introValue = `<p>\n  \\`hi\\`\n</p>`;"
