"""In-memory destination store seeded from a local JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from travel_search.domain.exceptions import RouteNotFound
from travel_search.domain.models import (
    Activity,
    CombinedRoute,
    Destination,
    RouteSegment,
    SearchParams,
    TransportMode,
)
from travel_search.domain.pricing import PricingTable
from travel_search.domain.search import search_destinations
from travel_search.shared.exceptions import ConfigError

_logger = logging.getLogger("travel-search.repository")


def load_seed(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError("SEED_DATA_FILE", f"data file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _same_city(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


class InMemoryDestinationRepository:
    """Read-only store. Every read hands out copies of the seeded records."""

    backend = "memory"

    def __init__(self, seed: dict[str, Any], pricing: Optional[PricingTable] = None):
        self._pricing = pricing or PricingTable()
        self._destinations = [Destination.model_validate(d) for d in seed.get("destinations", [])]
        self._transport_modes = [TransportMode.model_validate(t) for t in seed.get("transportModes", [])]
        self._activities = [Activity.model_validate(a) for a in seed.get("activities", [])]
        self._segments = {s.id: s for s in (RouteSegment.model_validate(x) for x in seed.get("routeSegments", []))}
        self._routes = [self._with_totals(CombinedRoute.model_validate(r)) for r in seed.get("combinedRoutes", [])]
        _logger.info(
            "Seeded repository: %d destinations, %d routes, %d segments",
            len(self._destinations),
            len(self._routes),
            len(self._segments),
        )

    @classmethod
    def from_file(cls, path: Path, pricing: Optional[PricingTable] = None) -> "InMemoryDestinationRepository":
        return cls(load_seed(path), pricing=pricing)

    def _with_totals(self, route: CombinedRoute) -> CombinedRoute:
        missing = [sid for sid in route.segments if sid not in self._segments]
        if missing:
            raise ConfigError("SEED_DATA_FILE", f"route {route.id} references unknown segments {missing}")
        legs = [self._segments[sid] for sid in route.segments]
        return route.model_copy(
            update={
                "total_price": sum(leg.price for leg in legs),
                "total_duration": sum(leg.duration for leg in legs),
            }
        )

    @property
    def pricing(self) -> PricingTable:
        return self._pricing

    def search_destinations(self, params: SearchParams) -> list[Destination]:
        return search_destinations(self._destinations, params, self._pricing)

    def get_popular_destinations(self) -> list[Destination]:
        return [d.model_copy(deep=True) for d in self._destinations]

    def get_transport_modes(self) -> list[TransportMode]:
        return [t.model_copy(deep=True) for t in self._transport_modes]

    def get_activities(self) -> list[Activity]:
        return [a.model_copy(deep=True) for a in self._activities]

    def get_combined_routes(self, origin: str, destination: str) -> list[CombinedRoute]:
        return [
            r.model_copy(deep=True)
            for r in self._routes
            if _same_city(r.from_city, origin) and _same_city(r.to_city, destination)
        ]

    def get_route(self, route_id: int) -> CombinedRoute:
        for route in self._routes:
            if route.id == route_id:
                return route.model_copy(deep=True)
        raise RouteNotFound(route_id)

    def get_route_segments(self, route_id: int) -> list[RouteSegment]:
        route = self.get_route(route_id)
        return [self._segments[sid].model_copy(deep=True) for sid in route.segments]


__all__ = ["InMemoryDestinationRepository", "load_seed"]
