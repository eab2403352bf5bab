"""Fare-class pricing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from travel_search.config.settings import DEFAULT_CLASS_MULTIPLIERS, resolve_class_multipliers
from travel_search.domain.exceptions import InvalidSearchParams

_FALLBACK_MULTIPLIER = 1.0


@dataclass(frozen=True)
class PricingTable:
    multipliers: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_CLASS_MULTIPLIERS))

    @classmethod
    def from_env(cls) -> "PricingTable":
        return cls(multipliers=resolve_class_multipliers())

    def multiplier(self, travel_class: Optional[str]) -> float:
        """Unknown or empty class names price like economy."""
        key = str(travel_class or "").strip().lower()
        return self.multipliers.get(key, _FALLBACK_MULTIPLIER)

    def price(self, base_price: int, travel_class: Optional[str], passengers: int) -> int:
        if passengers < 1:
            raise InvalidSearchParams(f"passengers must be >= 1, got {passengers}")
        raw = base_price * self.multiplier(travel_class) * passengers
        # half-up, never negative
        return max(0, int(math.floor(raw + 0.5)))


__all__ = ["PricingTable"]
