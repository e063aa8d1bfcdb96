"""CLI entry point for formforge.

This module acts as the central entry point for the project's CLI tools.
It loads form designs, generates source files, and runs development tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from formforge.config import get_log_level
from formforge.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

OUTPUT_FORMATS = ("markup", "script", "outline", "all")


def _load_design_or_report(path: Path):
    """Load a design file, logging the reason on failure.

    Returns:
        The components, or None if the file could not be loaded.
    """
    from formforge.output import load_design

    try:
        return load_design(path)
    except FileNotFoundError:
        logger.error(f"Design file not found: {path}")
    except json.JSONDecodeError as e:
        logger.error(f"Design file is not valid JSON: {e}")
    except PydanticValidationError as e:
        logger.error(f"Invalid design ({e.error_count()} errors):\n{e}")
    return None


# =============================================================================
# Catalog Commands
# =============================================================================


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handle the catalog command."""
    from formforge.catalog import list_catalog

    for entry in list_catalog(palette_only=args.palette):
        print(
            f"{entry.type.value:<16} {entry.name:<14} {entry.icon:<16} "
            f"{entry.description}"
        )
    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """Handle the rules command."""
    from formforge.catalog import resolve_field_type
    from formforge.visibility import editable_properties

    field_type = resolve_field_type(args.type)
    if field_type is None:
        logger.error(f"Unknown field type: {args.type}")
        return 1

    print(f"Editable properties for {field_type.value}:")
    for name in editable_properties(field_type):
        print(f"  {name}")
    return 0


def handle_catalog_command(argv: list[str]) -> int:
    """Handle catalog commands."""
    parser = argparse.ArgumentParser(
        prog="python . catalog",
        description="List the field types of the palette",
    )
    parser.add_argument(
        "--palette",
        action="store_true",
        help="Only list types offered by the palette",
    )
    return cmd_catalog(parser.parse_args(argv))


def handle_rules_command(argv: list[str]) -> int:
    """Handle rules commands."""
    parser = argparse.ArgumentParser(
        prog="python . rules",
        description="Show which properties apply to a field type",
    )
    parser.add_argument("type", type=str, help="Field type tag (e.g. text, dropdown)")
    return cmd_rules(parser.parse_args(argv))


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    from formforge.output import OutputGenerator, write_form_output

    components = _load_design_or_report(args.design)
    if components is None:
        return 1

    target_options = {}
    if args.class_name:
        target_options["class_name"] = args.class_name
    if args.title:
        target_options["form_title"] = args.title

    try:
        generator = OutputGenerator(default_target=args.target, **target_options)
        output = generator.generate(components)
    except KeyError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    for warning in output.warnings:
        value = f" ({warning.value})" if warning.value is not None else ""
        logger.warning(f"{warning.component_id}: {warning.message}{value}")

    if args.output_dir:
        markup_path, script_path = write_form_output(
            output, args.output_dir, name=args.name
        )
        logger.info(
            f"Generated {len(components)} field(s): {markup_path}, {script_path}"
        )
        return 0

    if args.format == "markup":
        result_text = output.markup
    elif args.format == "script":
        result_text = output.script
    elif args.format == "outline":
        result_text = output.outline
    else:
        result_text = (
            f"## Outline\n{output.outline}\n\n"
            f"## Markup ({args.name}{output.markup_extension})\n{output.markup}\n"
            f"## Script ({args.name}{output.script_extension})\n{output.script}"
        )

    print(result_text, end="" if result_text.endswith("\n") else "\n")
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate commands."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate component source from a form design",
    )
    parser.add_argument(
        "design",
        type=Path,
        help="Path to a JSON design (a list of field objects)",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="all",
        choices=OUTPUT_FORMATS,
        help="Document to print (default: all)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Write <name>.html and <name>.js here instead of printing",
    )
    parser.add_argument(
        "--name",
        "-n",
        type=str,
        default="form",
        help="Base file name of the generated files (default: form)",
    )
    parser.add_argument(
        "--target",
        "-t",
        type=str,
        default=None,
        help="Generation target (default: FORMFORGE_TARGET)",
    )
    parser.add_argument(
        "--class-name",
        type=str,
        default=None,
        help="Class name of the script component",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Card title of the markup",
    )
    return cmd_generate(parser.parse_args(argv))


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    from formforge.validation import validate_form

    components = _load_design_or_report(args.design)
    if components is None:
        return 1

    issues = validate_form(components)
    if not issues:
        print(f"No issues found in {len(components)} field(s)")
        return 0

    for issue in issues:
        print(f"{issue.component_id}: [{issue.error_type}] {issue.message}")
    print(f"\n{len(issues)} issue(s) found")
    return 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate commands."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Check a form design for issues",
    )
    parser.add_argument("design", type=Path, help="Path to a JSON design")
    return cmd_validate(parser.parse_args(argv))


# =============================================================================
# Suggest Command
# =============================================================================


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the suggest command."""
    from formforge.config import get_available_llm_providers, get_default_llm_model
    from formforge.llm import LLMError, LLMModel, create_llm_backend
    from formforge.suggest import FieldTypeSuggester, SuggestionError

    model_name = get_default_llm_model(args.model)
    if LLMModel.by_name(model_name) is None:
        logger.error(f"Unknown model: {model_name}")
        logger.info("Available models:")
        for m in LLMModel:
            logger.info(f"  {m.spec.name}")
        return 1

    try:
        backend = create_llm_backend(model_name, api_key=args.api_key)
        suggestion = FieldTypeSuggester(backend=backend).suggest(args.label)
    except (LLMError, SuggestionError) as e:
        logger.error(f"Suggestion failed: {e}")
        providers = get_available_llm_providers()
        logger.info(f"Available LLM providers: {', '.join(providers) or '(none)'}")
        return 1

    print(suggestion.model_dump_json(by_alias=True, indent=2))
    if suggestion.resolved_type is None:
        logger.warning(f"Suggested type '{suggestion.field_type}' is not in the catalog")
    return 0


def handle_suggest_command(argv: list[str]) -> int:
    """Handle suggest commands."""
    parser = argparse.ArgumentParser(
        prog="python . suggest",
        description="Suggest a field type and validations for a label",
    )
    parser.add_argument("label", type=str, help="Field label (e.g. 'Date of Birth')")
    parser.add_argument(
        "--model",
        "-m",
        type=str,
        default=None,
        help="LLM model name (default: LLM_MODEL)",
    )
    parser.add_argument(
        "--api-key",
        "-k",
        type=str,
        default=None,
        help="API key (uses env var if not provided)",
    )
    return cmd_suggest(parser.parse_args(argv))


# =============================================================================
# Development Commands
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . dev test                # Run all tests
        python . dev test --unit         # Run only unit tests
        python . dev test --integration  # Run file system and CLI tests
        python . dev test --llm          # Run tests against a real LLM
        python . dev test -k "lwc"       # Run tests matching pattern

    Test Tiers:
        unit        - Fast tests with no I/O or external dependencies
        integration - Tests touching the file system or the CLI
        llm         - Tests calling a real LLM backend (need OPENAI_API_KEY)
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--llm": ["-m", "llm"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


def handle_dev_command(argv: list[str]) -> int:
    """Handle development workflow commands.

    Usage:
        python . dev test [args]       # Run pytest
    """
    if not argv:
        print("Development workflow commands")
        print("\nUsage: python . dev {command} [args]")
        print("\nCommands:")
        print("  test       Run pytest with tier options")
        print("\nExamples:")
        print("  python . dev test --unit           # Fast unit tests")
        print("  python . dev test --integration    # CLI and file tests")
        return 1

    subcommand = argv[0]
    subargs = argv[1:]

    dev_commands = {
        "test": lambda: cmd_test(subargs),
    }

    if subcommand in dev_commands:
        return dev_commands[subcommand]()

    logger.error(f"Unknown dev command: {subcommand}")
    return handle_dev_command([])


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Field Catalog ===")
    print("  catalog    List field types")
    print("  rules      Show the properties that apply to a field type")
    print("\n=== Form Designs ===")
    print("  generate   Generate component source from a JSON design")
    print("  validate   Check a JSON design for issues")
    print("  suggest    Suggest a field type for a label (LLM)")
    print("\n=== Development ===")
    print("  dev        Development workflows (test)")
    print("\nExamples:")
    print("  python . catalog")
    print("  python . rules dropdown")
    print("  python . generate design.json --format markup")
    print("  python . generate design.json -o force-app/lwc/myForm -n myForm")
    print("  python . validate design.json")
    print("  python . suggest 'Date of Birth'")
    print("  python . dev test --unit")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    if command == "dev":
        return handle_dev_command(rest_args)

    commands = {
        "catalog": lambda: handle_catalog_command(rest_args),
        "rules": lambda: handle_rules_command(rest_args),
        "generate": lambda: handle_generate_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "suggest": lambda: handle_suggest_command(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
