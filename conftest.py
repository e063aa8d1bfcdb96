"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Auto-skipping of tests that need a real LLM backend
- Common form design fixtures
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from formforge.config import EnvVar, get_environment

if TYPE_CHECKING:
    from formforge.schema import FormComponent

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Modify test collection based on available credentials.

    Auto-skips tests marked with llm when no OpenAI API key is configured.
    """
    has_api_key = bool(get_environment(EnvVar.OPENAI_API_KEY))
    skip_llm = pytest.mark.skip(reason="OPENAI_API_KEY not set")

    for item in items:
        if "llm" in item.keywords and not has_api_key:
            item.add_marker(skip_llm)


# =============================================================================
# Common Test Fixtures
# =============================================================================

SAMPLE_DESIGN = [
    {
        "id": "name",
        "type": "text",
        "label": "Full Name",
        "fieldName": "fullName",
        "required": True,
        "placeholder": "Jane Doe",
        "width": 6,
    },
    {
        "id": "email",
        "type": "email",
        "label": "Email",
        "fieldName": "email",
        "width": 6,
    },
    {
        "id": "color",
        "type": "dropdown",
        "label": "Favorite Color",
        "fieldName": "favoriteColor",
        "options": ["Red", "Blue"],
    },
    {
        "id": "intro",
        "type": "richtext",
        "label": "Intro",
        "fieldName": "intro",
        "value": "<p>Welcome</p>",
    },
    {
        "id": "orders",
        "type": "datatable",
        "label": "Orders",
        "fieldName": "orders",
        "columns": [{"label": "Order", "fieldName": "order"}],
    },
]


@pytest.fixture
def sample_design() -> list[dict]:
    """A small design covering inputs, choices and content fields.

    Returns:
        The design as plain JSON-ready dictionaries.
    """
    return json.loads(json.dumps(SAMPLE_DESIGN))


@pytest.fixture
def sample_components(sample_design: list[dict]) -> list[FormComponent]:
    """The sample design parsed into components."""
    from formforge.schema import parse_design

    return parse_design(sample_design)


@pytest.fixture
def design_file(tmp_path: Path, sample_design: list[dict]) -> Path:
    """The sample design written to a JSON file.

    Returns:
        Path to the design file.
    """
    path = tmp_path / "design.json"
    path.write_text(json.dumps(sample_design, indent=2), encoding="utf-8")
    return path
