"""Concrete provider selection and wiring."""

from __future__ import annotations

import logging
import os
from typing import Optional

from travel_search.adapters.location.mock import MockLocationProvider
from travel_search.config.settings import resolve_llm_provider
from travel_search.tools.interfaces import LocationProvider

_logger = logging.getLogger("travel-search.tools")
_LOCATION_PROVIDERS = {"mock": MockLocationProvider.from_file}

_location_provider: Optional[LocationProvider] = None


def _location_provider_name() -> str:
    name = os.getenv("LOCATION_PROVIDER", "mock").strip().lower() or "mock"
    if name not in _LOCATION_PROVIDERS:
        _logger.warning("Unknown LOCATION_PROVIDER=%s, fallback to mock", name)
        return "mock"
    return name


def get_location_provider() -> LocationProvider:
    global _location_provider
    if _location_provider is None:
        _location_provider = _LOCATION_PROVIDERS[_location_provider_name()]()
    return _location_provider


def reset_location_provider() -> None:
    global _location_provider
    _location_provider = None


def describe_active_tools() -> dict[str, str]:
    return {
        "location": get_location_provider().name,
        "llm": resolve_llm_provider(),
    }


__all__ = ["describe_active_tools", "get_location_provider", "reset_location_provider"]
