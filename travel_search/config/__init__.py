"""Runtime configuration helpers."""

from travel_search.config.settings import ProviderSnapshot, resolve_class_multipliers, resolve_provider_snapshot

__all__ = [
    "ProviderSnapshot",
    "resolve_class_multipliers",
    "resolve_provider_snapshot",
]
