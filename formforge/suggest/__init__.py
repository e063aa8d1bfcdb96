"""Advisory field type suggestions backed by an LLM."""

from formforge.suggest.lib import (
    FieldSuggestion,
    FieldTypeSuggester,
    SuggesterConfig,
    SuggestionError,
    apply_suggestion,
    request_suggestion,
)

__all__ = [
    "FieldSuggestion",
    "FieldTypeSuggester",
    "SuggesterConfig",
    "SuggestionError",
    "apply_suggestion",
    "request_suggestion",
]
