"""Shared (non-domain) exceptions."""


class ExternalServiceError(Exception):
    """External service call failed."""


class SuggestionGenerationError(ExternalServiceError):
    """The LLM call failed or returned output that does not match the schema."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[{operation}] {message}")


class LLMUnavailableError(SuggestionGenerationError):
    """No LLM provider is configured."""

    def __init__(self, operation: str):
        super().__init__(
            operation,
            "No LLM provider configured (set OPENAI_API_KEY, DASHSCOPE_API_KEY or LLM_API_KEY in .env)",
        )


class ConfigError(Exception):
    """Configuration value is malformed."""

    def __init__(self, name: str, message: str):
        self.setting = name
        super().__init__(f"Invalid {name}: {message}")
