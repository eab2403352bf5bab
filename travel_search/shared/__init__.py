"""Shared cross-layer types and exceptions."""

from travel_search.shared.exceptions import (
    ConfigError,
    ExternalServiceError,
    LLMUnavailableError,
    SuggestionGenerationError,
)

__all__ = ["ConfigError", "ExternalServiceError", "SuggestionGenerationError", "LLMUnavailableError"]
