"""Tests for the generate CLI command."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )


@pytest.mark.integration
def test_generate_help_lists_options():
    """generate --help should document the output options."""
    result = _run("generate", "--help")
    assert result.returncode == 0
    for flag in ("--format", "--output-dir", "--name", "--class-name", "--target"):
        assert flag in result.stdout


@pytest.mark.integration
def test_generate_markup(design_file):
    """--format markup prints only the markup document."""
    result = _run("generate", str(design_file), "--format", "markup")
    assert result.returncode == 0
    assert result.stdout.startswith("<template>")
    assert "options={favoriteColorOptions}" in result.stdout
    assert "export default class" not in result.stdout


@pytest.mark.integration
def test_generate_script(design_file):
    """--format script prints the script with the chosen class name."""
    result = _run(
        "generate", str(design_file), "--format", "script", "--class-name", "SignupForm"
    )
    assert result.returncode == 0
    assert "export default class SignupForm extends LightningElement" in result.stdout
    assert "favoriteColorOptions = [" in result.stdout
    assert "ordersColumns = [" in result.stdout
    assert "ordersData = [" in result.stdout


@pytest.mark.integration
def test_generate_outline(design_file):
    """--format outline prints one line per field."""
    result = _run("generate", str(design_file), "--format", "outline")
    assert result.returncode == 0
    assert "Favorite Color [dropdown" in result.stdout
    assert "2 options" in result.stdout


@pytest.mark.integration
def test_generate_all_sections(design_file):
    """The default format prints every document."""
    result = _run("generate", str(design_file))
    assert result.returncode == 0
    assert "## Outline" in result.stdout
    assert "## Markup (form.html)" in result.stdout
    assert "## Script (form.js)" in result.stdout


@pytest.mark.integration
def test_generate_writes_files(design_file, tmp_path):
    """--output-dir writes the markup and script files."""
    out_dir = tmp_path / "signupForm"
    result = _run(
        "generate", str(design_file), "--output-dir", str(out_dir), "--name", "signupForm"
    )
    assert result.returncode == 0
    assert (out_dir / "signupForm.html").read_text().startswith("<template>")
    assert "LightningElement" in (out_dir / "signupForm.js").read_text()
    assert result.stdout == ""


@pytest.mark.integration
def test_generate_skips_unknown_types(tmp_path):
    """Unknown field types are left out with a warning, not an error."""
    design = tmp_path / "design.json"
    design.write_text(
        json.dumps(
            [
                {"id": "a", "type": "hologram", "label": "Ghost", "fieldName": "ghost"},
                {"id": "b", "type": "text", "label": "Name", "fieldName": "name"},
            ]
        )
    )
    result = _run("generate", str(design), "--format", "markup")
    assert result.returncode == 0
    assert 'name="name"' in result.stdout
    assert "ghost" not in result.stdout
    assert "hologram" in result.stderr


@pytest.mark.integration
def test_generate_missing_file(tmp_path):
    """A missing design file exits with an error."""
    result = _run("generate", str(tmp_path / "missing.json"))
    assert result.returncode == 1
    assert "not found" in result.stderr


@pytest.mark.integration
def test_generate_malformed_design(tmp_path):
    """A design that fails model validation exits with an error."""
    design = tmp_path / "design.json"
    design.write_text(json.dumps([{"id": "a", "type": "text", "width": 40}]))
    result = _run("generate", str(design))
    assert result.returncode == 1
    assert "Invalid design" in result.stderr


@pytest.mark.integration
def test_generate_unknown_target(design_file):
    """An unregistered target exits with an error."""
    result = _run("generate", str(design_file), "--target", "react")
    assert result.returncode == 1
    assert "react" in result.stderr
