"""travel-search: destination search, pricing and LLM travel suggestions."""

__version__ = "1.0.0"
