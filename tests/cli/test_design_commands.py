"""Tests for the catalog, rules, validate and suggest CLI commands."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env=env,
        timeout=60,
    )


class TestHelp:
    """Tests for top-level help."""

    @pytest.mark.integration
    def test_no_command_shows_help(self):
        result = _run()
        assert result.returncode == 1
        assert "Usage: python . {command}" in result.stdout

    @pytest.mark.integration
    def test_unknown_command(self):
        result = _run("frobnicate")
        assert result.returncode == 1
        assert "Unknown command: frobnicate" in result.stderr


class TestCatalogCommand:
    """Tests for catalog and rules."""

    @pytest.mark.integration
    def test_lists_every_type(self):
        result = _run("catalog")
        assert result.returncode == 0
        tags = [line.split()[0] for line in result.stdout.splitlines() if line]
        assert "dropdown" in tags
        assert "radiogroup" in tags
        assert "datatable" in tags

    @pytest.mark.integration
    def test_rules_for_dropdown(self):
        result = _run("rules", "dropdown")
        assert result.returncode == 0
        lines = [line.strip() for line in result.stdout.splitlines()[1:]]
        assert "options" in lines
        assert "pattern" not in lines

    @pytest.mark.integration
    def test_rules_accepts_aliases(self):
        result = _run("rules", "select")
        assert result.returncode == 0
        assert "Editable properties for dropdown" in result.stdout

    @pytest.mark.integration
    def test_rules_unknown_type(self):
        result = _run("rules", "hologram")
        assert result.returncode == 1
        assert "Unknown field type" in result.stderr


class TestValidateCommand:
    """Tests for design validation."""

    @pytest.mark.integration
    def test_clean_design(self, design_file):
        result = _run("validate", str(design_file))
        assert result.returncode == 0
        assert "No issues found in 5 field(s)" in result.stdout

    @pytest.mark.integration
    def test_reports_issues(self, tmp_path):
        design = tmp_path / "design.json"
        design.write_text(
            json.dumps(
                [
                    {"id": "a", "type": "text", "label": "A", "fieldName": "name"},
                    {"id": "b", "type": "email", "label": "B", "fieldName": "name"},
                    {
                        "id": "c",
                        "type": "text",
                        "label": "C",
                        "fieldName": "c",
                        "minLength": 10,
                        "maxLength": 2,
                    },
                ]
            )
        )
        result = _run("validate", str(design))
        assert result.returncode == 1
        assert "b: [duplicate_field_name]" in result.stdout
        assert "c: [length_bounds]" in result.stdout
        assert "2 issue(s) found" in result.stdout

    @pytest.mark.integration
    def test_not_json(self, tmp_path):
        design = tmp_path / "design.json"
        design.write_text("not json")
        result = _run("validate", str(design))
        assert result.returncode == 1
        assert "not valid JSON" in result.stderr


class TestSuggestCommand:
    """Tests for suggest error paths that need no network."""

    @pytest.mark.integration
    def test_unknown_model(self):
        result = _run("suggest", "Email", "--model", "no-such-model")
        assert result.returncode == 1
        assert "Unknown model: no-such-model" in result.stderr

    @pytest.mark.integration
    def test_unknown_model_from_environment(self):
        env = {**os.environ, "LLM_MODEL": "no-such-model"}
        result = _run("suggest", "Email", env=env)
        assert result.returncode == 1
        assert "Unknown model: no-such-model" in result.stderr
        assert "Traceback" not in result.stderr

    @pytest.mark.integration
    def test_missing_api_key(self):
        env = {
            **os.environ,
            "OPENAI_API_KEY": "",
            "LLM_MODEL": "gpt-4.1-mini",
            "OLLAMA_HOST": "http://127.0.0.1:9",
        }
        result = _run("suggest", "Email", env=env)
        assert result.returncode == 1
        assert "API key" in result.stderr
        assert "Available LLM providers: (none)" in result.stderr

    @pytest.mark.llm
    def test_real_suggestion(self):
        result = _run("suggest", "Email Address")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["fieldType"]
        assert isinstance(data["validationRules"], list)
