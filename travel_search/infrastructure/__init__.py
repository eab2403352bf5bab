"""Infrastructure: LLM client factory and structured logging."""
