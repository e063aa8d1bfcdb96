"""Advisory field type suggestions.

Given a field label, asks an LLM which field type and validation rules fit
it. Suggestions are advisory: they are applied to a session with a plain
`update`, only after the model has answered, and a failed request leaves the
session untouched.
"""

import asyncio
import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from formforge.catalog import FieldType, list_catalog, resolve_field_type
from formforge.llm import GenerationConfig, LLMBackend, LLMError, create_llm_backend
from formforge.session import FormSession

logger = logging.getLogger(__name__)


class SuggestionError(Exception):
    """Raised when no suggestion could be obtained for a label.

    Attributes:
        label: The label that was being classified.
    """

    def __init__(self, message: str, label: str):
        super().__init__(message)
        self.label = label


class FieldSuggestion(BaseModel):
    """A suggested field type and validation rules for a label.

    Example:
        >>> FieldSuggestion.model_validate(
        ...     {"fieldType": "email", "validationRules": ["required"]}
        ... )
    """

    field_type: str = Field(..., description="Suggested field type tag")
    validation_rules: list[str] = Field(
        default_factory=list, description="Suggested validation rules"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @property
    def resolved_type(self) -> FieldType | None:
        """The suggested type as a catalog type, or None if unrecognized."""
        return resolve_field_type(self.field_type)

    def changes(self) -> dict[str, object]:
        """Property changes that apply this suggestion to a field."""
        changes: dict[str, object] = {"validations": list(self.validation_rules)}
        if self.resolved_type is not None:
            changes["type"] = self.resolved_type
        return changes


@dataclass
class SuggesterConfig:
    """Configuration for FieldTypeSuggester.

    Attributes:
        model: LLM model name; defaults to LLM_MODEL.
        temperature: Sampling temperature for the request.
    """

    model: str | None = None
    temperature: float = 0.2


def _type_reference() -> str:
    return "\n".join(
        f"- {entry.type.value}: {entry.description}" for entry in list_catalog()
    )


class FieldTypeSuggester:
    """Suggests field types for labels using an LLM backend.

    Example:
        >>> suggester = FieldTypeSuggester()
        >>> suggestion = suggester.suggest("Date of Birth")
        >>> suggestion.resolved_type
        <FieldType.DATE: 'date'>
    """

    SYSTEM_PROMPT = """You are an expert form configuration assistant. Given the label or
name of a form field, suggest an appropriate field type and a set of
validation rules. Consider common field names and their usual data types.

Answer with a single JSON object:
{"fieldType": "<type>", "validationRules": ["<rule>", ...]}

Use one of these field types:
"""

    def __init__(
        self,
        backend: LLMBackend | None = None,
        config: SuggesterConfig | None = None,
    ):
        """Initialize suggester.

        Args:
            backend: LLM backend; created from config.model on first use.
            config: Suggester configuration.
        """
        self._backend = backend
        self._config = config or SuggesterConfig()

    @property
    def backend(self) -> LLMBackend:
        if self._backend is None:
            self._backend = create_llm_backend(self._config.model)
        return self._backend

    @property
    def system_prompt(self) -> str:
        return self.SYSTEM_PROMPT + _type_reference()

    def build_prompt(self, label: str) -> str:
        return f"Field Label: {label}"

    def suggest(self, label: str) -> FieldSuggestion:
        """Suggest a field type for a label.

        Blocks until the backend answers.

        Raises:
            SuggestionError: If the backend fails or answers malformed data.
        """
        try:
            backend = self.backend
        except (LLMError, ValueError) as e:
            logger.warning(f"No backend for suggestion of '{label}': {e}")
            raise SuggestionError(f"No suggestion for '{label}': {e}", label) from e

        try:
            data = backend.generate_json(
                self.build_prompt(label),
                system_prompt=self.system_prompt,
                config=GenerationConfig(temperature=self._config.temperature),
            )
        except LLMError as e:
            logger.warning(f"Suggestion request for '{label}' failed: {e}")
            raise SuggestionError(f"No suggestion for '{label}': {e}", label) from e

        try:
            suggestion = FieldSuggestion.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"Malformed suggestion for '{label}': {data}")
            raise SuggestionError(
                f"Malformed suggestion for '{label}': {e.error_count()} errors", label
            ) from e

        logger.debug(
            f"Suggested {suggestion.field_type} for '{label}' via {backend.name}"
        )
        return suggestion

    async def suggest_async(self, label: str) -> FieldSuggestion:
        """Suggest a field type without blocking the event loop.

        Runs `suggest` in a worker thread.
        """
        return await asyncio.to_thread(self.suggest, label)


def apply_suggestion(
    session: FormSession, component_id: str, suggestion: FieldSuggestion
) -> bool:
    """Apply a suggestion to a field of a session.

    An unrecognized suggested type only records the validation rules.

    Returns:
        True if the field still existed and was updated.
    """
    if component_id not in session:
        logger.debug(f"Field {component_id} is gone; suggestion dropped")
        return False
    if suggestion.resolved_type is None:
        logger.info(
            f"Suggested type '{suggestion.field_type}' is not a known field type; "
            "keeping the current type"
        )
    session.update(component_id, suggestion.changes())
    return True


async def request_suggestion(
    session: FormSession,
    component_id: str,
    suggester: FieldTypeSuggester,
) -> FieldSuggestion | None:
    """Suggest a type for a field from its label and apply it.

    The session is only touched once the suggestion has arrived. If the
    field was deleted while waiting, the suggestion is returned but not
    applied.

    Returns:
        The suggestion, or None if the field does not exist.

    Raises:
        SuggestionError: If no suggestion could be obtained.
    """
    component = session.get(component_id)
    if component is None:
        logger.debug(f"No field {component_id}; nothing to suggest")
        return None

    suggestion = await suggester.suggest_async(component.label)
    apply_suggestion(session, component_id, suggestion)
    return suggestion


__all__ = [
    "FieldSuggestion",
    "FieldTypeSuggester",
    "SuggesterConfig",
    "SuggestionError",
    "apply_suggestion",
    "request_suggestion",
]
