"""Location adapters."""

from travel_search.adapters.location.mock import MockLocationProvider

__all__ = ["MockLocationProvider"]
